"""
Tool invocation adapter implementing IToolInvocationAdapter interface.

This is the dispatch boundary: whatever happens inside a tool, the caller
gets a ToolInvocationResult back and never an exception.
"""

import logging
from typing import Dict, Any, Optional, TYPE_CHECKING
from pwt_agent.abstractions.dto.tools import ToolInvocationResult

if TYPE_CHECKING:
    from pwt_agent.interfaces.services.tools import IToolInvocationAdapter

from .tool_manager import ToolManager

logger = logging.getLogger(__name__)


class ToolInvocationAdapter:
    """
    Adapter for ToolManager to implement IToolInvocationAdapter interface.
    """

    def __init__(self, manager: Optional[ToolManager] = None):
        self.manager = manager if manager is not None else ToolManager(register_defaults=True)

    async def execute(self, name: str, params: Dict[str, Any], call_id: Optional[str] = None) -> ToolInvocationResult:
        """
        Execute a tool by name with given parameters.
        """
        try:
            tool = self.manager.get_tool(name)
        except KeyError:
            return ToolInvocationResult(
                ok=False,
                value=None,
                error=f"Tool '{name}' not found",
                tool_name=name,
                call_id=call_id,
            )

        try:
            result = await tool.invoke(params)
        except Exception as e:
            logger.exception("Tool '%s' raised during execution", name)
            return ToolInvocationResult(
                ok=False,
                value=None,
                error=f"Tool execution failed: {str(e)}",
                tool_name=name,
                call_id=call_id,
            )

        if not isinstance(result, dict):
            result = {"output": str(result)}

        return ToolInvocationResult(
            ok=True,
            value=result,
            error=None,
            tool_name=name,
            call_id=call_id,
        )
