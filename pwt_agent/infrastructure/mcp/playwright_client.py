"""
Playwright MCP Client (SSE transport)

Responsibilities:
- Open one streaming connection to a Playwright MCP server (default
  http://localhost:8931/sse) and initialize an MCP session.
- Fetch the server's tool catalog exactly once per connection.
- Wrap each remote tool as an MCPTool so it can be merged into the same
  namespace as the local tools.

Environment variables (via Config):
- PWT_MCP_URL      (default: http://localhost:8931/sse)
- PWT_MCP_TIMEOUT  (default: 5 - seconds to wait for the connection)

Notes:
- Any failure while connecting, initializing or listing tools raises
  MCPConnectionError. The caller is expected to abort the run; there is no
  fallback to an empty tool set.
"""

from __future__ import annotations

import logging
from contextlib import AsyncExitStack
from typing import List, Optional

from mcp import ClientSession
from mcp.client.sse import sse_client

from pwt_agent.infrastructure.tools.config import Config
from .exceptions import MCPConnectionError
from .mcp_tool import MCPTool

logger = logging.getLogger(__name__)


class PlaywrightMCPClient:
    """
    Async context manager owning the SSE connection and its MCP session.

    Usage:
        async with PlaywrightMCPClient() as client:
            tools = client.tools
    """

    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None) -> None:
        self.url = url or Config.PWT_MCP_URL
        self.timeout = timeout if timeout is not None else Config.PWT_MCP_TIMEOUT
        self.session: Optional[ClientSession] = None
        self._tools: Optional[List[MCPTool]] = None
        self._exit_stack: Optional[AsyncExitStack] = None

    # ---------- Lifecycle ----------

    async def connect(self) -> List[MCPTool]:
        """
        Connect, initialize and fetch the tool catalog.

        Returns:
            The remote tools wrapped as MCPTool instances

        Raises:
            MCPConnectionError: If any step fails
        """
        if self._tools is not None:
            return self._tools

        logger.info("Connecting to MCP server at %s", self.url)
        stack = AsyncExitStack()
        try:
            read, write = await stack.enter_async_context(sse_client(self.url, timeout=self.timeout))
            session = await stack.enter_async_context(ClientSession(read, write))
            await session.initialize()
            listed = await session.list_tools()
        except Exception as e:
            await self._close_quietly(stack)
            raise MCPConnectionError(self.url, str(e) or type(e).__name__) from e

        self._exit_stack = stack
        self.session = session
        self._tools = [MCPTool(session, definition) for definition in listed.tools]
        logger.info("Connected to MCP server, found %d tools", len(self._tools))
        return self._tools

    async def close(self) -> None:
        stack, self._exit_stack = self._exit_stack, None
        self.session = None
        self._tools = None
        if stack is not None:
            await stack.aclose()

    async def __aenter__(self) -> "PlaywrightMCPClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    # ---------- Catalog ----------

    @property
    def tools(self) -> List[MCPTool]:
        if self._tools is None:
            raise RuntimeError("MCP client is not connected; call connect() first")
        return list(self._tools)

    @staticmethod
    async def _close_quietly(stack: AsyncExitStack) -> None:
        try:
            await stack.aclose()
        except Exception as e:
            logger.debug("Error while tearing down failed MCP connection: %s", e)
