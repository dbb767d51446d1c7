"""
Exception types for the remote tool proxy.
"""


class MCPConnectionError(RuntimeError):
    """The MCP server could not be reached or refused to hand over its tool catalog."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Could not connect to MCP server at {url}: {reason}")
        self.url = url
        self.reason = reason


__all__ = ["MCPConnectionError"]
