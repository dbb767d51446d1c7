import logging
import os
from typing import Dict, Any, Optional

from pydantic import BaseModel, Field

from .tool_base import Tool

logger = logging.getLogger(__name__)


class EditFileInput(BaseModel):
    path: str = Field(description="The path to the file")
    old_str: Optional[str] = Field(
        default=None,
        description="Text to search for - must match exactly and must only have one match exactly",
    )
    new_str: str = Field(description="Text to replace old_str with")


class EditFileTool(Tool):
    """
    Find/replace editor that doubles as a file creator.

    - Existing file and old_str given: the FIRST literal occurrence of old_str
      is replaced with new_str (action "edit"). The result also reports how
      many occurrences were present so an ambiguous match is visible.
    - Missing file, or old_str is null: new_str becomes the whole file
      (action "create"). Parent directories are not created.
    """

    input_model = EditFileInput

    @property
    def name(self) -> str:
        return "edit_file"

    @property
    def description(self) -> str:
        return (
            "Make edits to a text file or create a new file. Replaces 'old_str' with 'new_str' "
            "in the given file. 'old_str' and 'new_str' MUST be different from each other. "
            "If the file specified with path doesn't exist, it will be created."
        )

    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        path = input["path"]
        old_str = input.get("old_str")
        new_str = input["new_str"]
        try:
            if os.path.exists(path) and old_str is not None:
                logger.info("Editing file '%s'", path)
                with open(path, "r", encoding="utf-8", newline="") as f:
                    contents = f.read()
                occurrences = contents.count(old_str) if old_str else 0
                if occurrences > 1:
                    logger.warning("'%s' matched %d times in %s; replacing the first", old_str, occurrences, path)
                with open(path, "w", encoding="utf-8", newline="") as f:
                    f.write(contents.replace(old_str, new_str, 1))
                return {"path": path, "success": True, "action": "edit", "occurrences": occurrences}

            logger.info("Creating file '%s'", path)
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(new_str)
            return {"path": path, "success": True, "action": "create"}
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error editing file %s: %s", path, e)
            return {"path": path, "error": str(e), "success": False}
