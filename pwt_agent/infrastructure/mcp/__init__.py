"""
Remote tool proxy for the Playwright MCP server.
"""

from .exceptions import MCPConnectionError
from .mcp_tool import MCPTool
from .playwright_client import PlaywrightMCPClient

__all__ = ["MCPConnectionError", "MCPTool", "PlaywrightMCPClient"]
