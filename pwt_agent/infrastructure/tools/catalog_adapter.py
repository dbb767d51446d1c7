"""
Tool catalog adapter implementing IToolCatalog interface.
"""

from typing import List, Optional, TYPE_CHECKING
from pwt_agent.abstractions.dto.tools import ToolDescriptor

if TYPE_CHECKING:
    from pwt_agent.interfaces.services.tools import IToolCatalog

from .tool_manager import ToolManager


class ToolManagerCatalogAdapter:
    """
    Adapter for ToolManager to implement IToolCatalog interface.
    """

    def __init__(self, manager: Optional[ToolManager] = None):
        self.manager = manager if manager is not None else ToolManager(register_defaults=True)

    @staticmethod
    def _describe(tool) -> ToolDescriptor:
        return ToolDescriptor(
            name=tool.name,
            description=tool.description,
            raw_schema=tool.input_schema,
            source=getattr(tool, "source", "local"),
        )

    def list_tools(self) -> List[ToolDescriptor]:
        """
        List all registered tools as ToolDescriptor objects.
        """
        return [self._describe(tool) for tool in self.manager.tools.values()]

    def get_tool(self, name: str) -> Optional[ToolDescriptor]:
        """
        Get a tool descriptor by name.
        """
        try:
            return self._describe(self.manager.get_tool(name))
        except KeyError:
            return None
