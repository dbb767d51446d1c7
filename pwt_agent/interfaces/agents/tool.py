"""
Tool port (contract only) used by the loop driver and infra adapters.
"""
from __future__ import annotations
from typing import Protocol, Dict, Any

class ITool(Protocol):
    name: str
    description: str
    input_schema: Dict[str, Any]

    async def invoke(self, input: Dict[str, Any]) -> Dict[str, Any]:
        ...

__all__ = ["ITool"]
