import logging
from typing import Dict, Any

from pydantic import BaseModel, Field

from .tool_base import Tool

logger = logging.getLogger(__name__)


class ReadFileInput(BaseModel):
    path: str = Field(description="The relative path of a file in the working directory.")


class ReadFileTool(Tool):

    input_model = ReadFileInput

    @property
    def name(self) -> str:
        return "read_file"

    @property
    def description(self) -> str:
        return (
            "Read the contents of a given relative file path. Use this when you want to see "
            "what's inside a file. Do not use this with directory names."
        )

    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        path = input["path"]
        try:
            logger.info("Reading file at '%s'", path)
            with open(path, "r", encoding="utf-8", newline="") as f:
                output = f.read()
            return {"path": path, "output": output, "success": True}
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error reading file at %s: %s", path, e)
            return {"path": path, "error": str(e), "success": False}
