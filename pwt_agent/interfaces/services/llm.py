"""
Step provider port. The agent loop depends on this; infra implements.
"""
from __future__ import annotations
from typing import Protocol, List, Dict, Any, TYPE_CHECKING

if TYPE_CHECKING:
    from pwt_agent.domain.entities.agent_step import AgentStep
    from pwt_agent.domain.prompts import GenerationRequest

class IStepProvider(Protocol):
    @property
    def model(self) -> str:
        ...
    async def request_next_step(self, request: "GenerationRequest", context: List[Dict[str, Any]]) -> "AgentStep":
        """
        Ask the model for its next action given the running context.

        Returns either a FinalAnswer or exactly one ToolCall.
        """
        ...

__all__ = ["IStepProvider"]
