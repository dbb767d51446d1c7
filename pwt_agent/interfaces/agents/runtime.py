"""
Agents runtime port (contract only). No implementations here.
"""
from __future__ import annotations
from typing import Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from pwt_agent.domain.entities.agent_transcript import AgentTranscript
    from pwt_agent.domain.prompts import GenerationRequest

class IAgentRuntime(Protocol):
    async def run(self, request: "GenerationRequest") -> "AgentTranscript":
        ...

__all__ = ["IAgentRuntime"]
