"""
Local tool set: filesystem tools, the Playwright runner, and the registry.
"""

from .tool_base import Tool
from .exceptions import DuplicateToolError
from .tool_manager import ToolManager
from .create_directory_tool import CreateDirectoryTool
from .list_files_tool import ListFilesTool
from .read_file_tool import ReadFileTool
from .edit_file_tool import EditFileTool
from .run_pwt_tool import RunPwtTool

__all__ = [
    "Tool",
    "DuplicateToolError",
    "ToolManager",
    "CreateDirectoryTool",
    "ListFilesTool",
    "ReadFileTool",
    "EditFileTool",
    "RunPwtTool",
]
