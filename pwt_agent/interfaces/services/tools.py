"""
Tool catalog and invocation ports.

The catalog describes the merged local and remote tool set; the invocation
adapter is the only place the agent loop touches a tool.
"""
from __future__ import annotations
from typing import Protocol, List, Optional, Dict, Any, TYPE_CHECKING

if TYPE_CHECKING:
    from pwt_agent.abstractions.dto.tools import ToolDescriptor, ToolInvocationResult


class IToolCatalog(Protocol):
    def list_tools(self) -> List["ToolDescriptor"]:
        """Descriptors in registration order, local tools first."""
        ...

    def get_tool(self, name: str) -> Optional["ToolDescriptor"]:
        ...


class IToolInvocationAdapter(Protocol):
    async def execute(
        self,
        name: str,
        params: Dict[str, Any],
        call_id: Optional[str] = None,
    ) -> "ToolInvocationResult":
        """
        Dispatch one call by tool name.

        Never raises: unknown names and tool exceptions come back as
        ``ok=False`` results so the model can react to them.
        """
        ...


__all__ = ["IToolCatalog", "IToolInvocationAdapter"]
