import logging
import os
from typing import Dict, Any, Optional, FrozenSet

from pydantic import BaseModel, Field

from .tool_base import Tool

logger = logging.getLogger(__name__)

# Version-control and dependency-cache directories the model may not browse
BLOCKED_PATHS: FrozenSet[str] = frozenset({".git", "node_modules"})


class ListFilesInput(BaseModel):
    path: Optional[str] = Field(
        default=None,
        description="Optional relative path to list files from. Defaults to current directory if not provided.",
    )


class ListFilesTool(Tool):
    """Lists the direct children of a directory (non-recursive)."""

    input_model = ListFilesInput

    def __init__(self, blocked_paths: Optional[FrozenSet[str]] = None):
        self.blocked_paths = BLOCKED_PATHS if blocked_paths is None else frozenset(blocked_paths)

    @property
    def name(self) -> str:
        return "list_files"

    @property
    def description(self) -> str:
        return (
            "List files and directories at a given path. "
            "If no path is provided, lists files in the current directory."
        )

    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        generated_path = input.get("path")
        if generated_path is not None and generated_path.strip() in self.blocked_paths:
            logger.warning("Refusing to list blocked path '%s'", generated_path)
            return {
                "path": generated_path,
                "error": f"You cannot read the path: {generated_path}",
                "success": False,
            }

        path = generated_path if generated_path and generated_path.strip() else "."
        try:
            logger.info("Listing files at '%s'", path)
            output = sorted(os.listdir(path))
            return {"path": path, "output": output, "success": True}
        except OSError as e:
            logger.error("Error listing files at %s: %s", path, e)
            return {"path": path, "error": str(e), "success": False}
