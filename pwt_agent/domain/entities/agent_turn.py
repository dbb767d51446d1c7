"""
POCO DTO for a single agent turn. No framework dependencies.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Dict, Any

@dataclass
class AgentTurn:
    step: int
    tool_call: Optional[Dict[str, Any]] = None   # {"id": str, "tool": str, "input": dict}
    tool_result: Optional[Dict[str, Any]] = None
    response: Optional[str] = None

__all__ = ["AgentTurn"]
