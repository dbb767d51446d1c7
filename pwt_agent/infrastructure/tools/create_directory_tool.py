import logging
import os
from typing import Dict, Any

from pydantic import BaseModel, Field

from .tool_base import Tool

logger = logging.getLogger(__name__)


class CreateDirectoryInput(BaseModel):
    path: str = Field(description="The path of the directory to create")


class CreateDirectoryTool(Tool):
    """Creates a directory and any missing parents; a no-op when it already exists."""

    input_model = CreateDirectoryInput

    @property
    def name(self) -> str:
        return "create_directory"

    @property
    def description(self) -> str:
        return "Create a directory at the specified path."

    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        path = input["path"]
        try:
            logger.info("Creating directory at '%s'", path)
            os.makedirs(path, exist_ok=True)
            return {"path": path, "success": True}
        except OSError as e:
            logger.error("Error creating directory at %s: %s", path, e)
            return {"path": path, "error": str(e), "success": False}
