"""
POCO DTOs for the two outcomes of one model step. No framework dependencies.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Union

@dataclass(frozen=True)
class FinalAnswer:
    text: str

@dataclass(frozen=True)
class ToolCall:
    id: str
    name: str
    arguments: Dict[str, Any] = field(default_factory=dict)
    text: str = ""  # assistant content emitted alongside the call, if any

AgentStep = Union[FinalAnswer, ToolCall]

__all__ = ["FinalAnswer", "ToolCall", "AgentStep"]
