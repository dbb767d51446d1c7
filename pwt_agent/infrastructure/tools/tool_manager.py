from typing import Dict, Any, Iterable, List, Optional, Type

from .tool_base import Tool
from .exceptions import DuplicateToolError

from .create_directory_tool import CreateDirectoryTool
from .list_files_tool import ListFilesTool
from .read_file_tool import ReadFileTool
from .edit_file_tool import EditFileTool
from .run_pwt_tool import RunPwtTool


class ToolManager:
    """
    Manages a collection of tools and handles tool registration and execution.

    Local and remote tools share one namespace; registration order is kept so
    the catalog handed to the model is stable.
    """

    def __init__(self, register_defaults: bool = True, runner_command: Optional[str] = None, runner_timeout: Optional[float] = None):
        """
        Initialize tool registry.

        Args:
            register_defaults: Whether to register the local tools
            runner_command: Test runner command line for run_pwt
            runner_timeout: Optional run_pwt timeout in seconds
        """
        self.tools: Dict[str, Tool] = {}
        if register_defaults:
            self.register_default_tools(runner_command=runner_command, runner_timeout=runner_timeout)

    def register_default_tools(self, runner_command: Optional[str] = None, runner_timeout: Optional[float] = None) -> None:
        """Register the five local filesystem and test-runner tools."""
        default_tools = [
            CreateDirectoryTool(),
            ListFilesTool(),
            ReadFileTool(),
            EditFileTool(),
            RunPwtTool(command=runner_command, timeout=runner_timeout),
        ]
        self.register_tools(default_tools)

    def register_tool(self, tool: Tool) -> None:
        """
        Register a tool instance.

        Args:
            tool: Tool instance to register

        Raises:
            DuplicateToolError: If a tool with the same name is already registered
        """
        if tool.name in self.tools:
            raise DuplicateToolError(tool.name)
        self.tools[tool.name] = tool

    def register_tools(self, tools: Iterable[Tool]) -> None:
        for tool in tools:
            self.register_tool(tool)

    def register_tool_class(self, tool_class: Type[Tool], **kwargs) -> None:
        """
        Register a tool class by instantiating and registering it.

        Args:
            tool_class: Tool class to instantiate and register
            **kwargs: Arguments to pass to tool constructor
        """
        self.register_tool(tool_class(**kwargs))

    def get_tool(self, name: str) -> Tool:
        """
        Get a registered tool by name.

        Raises:
            KeyError: If tool is not found
        """
        if name not in self.tools:
            raise KeyError(f"Tool '{name}' not found")
        return self.tools[name]

    def list_tools(self) -> List[Dict[str, Any]]:
        """
        Get information about all registered tools.

        Returns:
            List of dictionaries containing name, description and
            input_schema for each tool, in registration order
        """
        return [
            {
                "name": tool.name,
                "description": tool.description,
                "input_schema": tool.input_schema,
            }
            for tool in self.tools.values()
        ]

    async def execute_tool(self, name: str, input: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Execute a tool by name with given arguments.

        Raises:
            KeyError: If tool is not found
        """
        tool = self.get_tool(name)
        return await tool.invoke(input or {})
