"""
Adapter that exposes one remote MCP tool through the local Tool interface.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, TYPE_CHECKING

from pwt_agent.infrastructure.tools.tool_base import Tool

if TYPE_CHECKING:
    from mcp import ClientSession
    from mcp.types import CallToolResult
    from mcp.types import Tool as MCPToolDefinition

logger = logging.getLogger(__name__)


class MCPTool(Tool):
    """
    Remote tool proxied over an open MCP session.

    Arguments are forwarded untouched and the server's CallToolResult comes
    back as ``{"content": joined text, "isError": bool}``; validation and
    error semantics belong to the server.
    """

    source = "remote"

    def __init__(self, session: "ClientSession", definition: "MCPToolDefinition"):
        self.session = session
        self.definition = definition

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def description(self) -> str:
        return self.definition.description or f"Tool provided by MCP: {self.definition.name}"

    @property
    def input_schema(self) -> Dict[str, Any]:
        schema = dict(self.definition.inputSchema or {})
        schema.setdefault("type", "object")
        schema.setdefault("properties", {})
        schema.setdefault("required", [])
        return schema

    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        raise TypeError(f"Remote tool '{self.name}' is asynchronous; use invoke()")

    async def invoke(self, input: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        logger.info("Executing MCP tool '%s'", self.name)
        logger.debug("MCP tool '%s' arguments: %s", self.name, input)
        result = await self.session.call_tool(self.name, arguments=input or {})
        return self.flatten_result(result)

    @staticmethod
    def flatten_result(result: "CallToolResult") -> Dict[str, Any]:
        """
        Join the text parts of a CallToolResult.

        Non-text parts (images, embedded resources) are replaced by a short
        placeholder naming their type.
        """
        parts = []
        for item in result.content or []:
            text = getattr(item, "text", None)
            if text is not None:
                parts.append(text)
            else:
                parts.append(f"[{getattr(item, 'type', 'unknown')} content omitted]")
        return {"content": "\n".join(parts), "isError": bool(result.isError)}
