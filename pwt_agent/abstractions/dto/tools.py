"""
Shared tool DTOs for catalogs and invocation results.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Any, Optional

@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    description: str
    raw_schema: Dict[str, Any]
    source: str = "local"  # "local" | "remote"

@dataclass
class ToolInvocationResult:
    ok: bool
    value: Optional[Dict[str, Any]]
    error: Optional[str]
    tool_name: str
    call_id: Optional[str] = None

    def to_content(self) -> Dict[str, Any]:
        """Payload fed back to the model for this invocation."""
        if self.ok and self.value is not None:
            return self.value
        return {"error": self.error or "Unknown error", "success": False}

__all__ = ["ToolDescriptor", "ToolInvocationResult"]
