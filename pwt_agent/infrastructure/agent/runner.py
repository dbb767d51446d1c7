"""
Bounded agent loop: ask the model for a step, dispatch the tool it picked,
feed the result back, repeat until a final answer or the step ceiling.

Only one tool invocation is ever outstanding. There is no retry policy;
failure envelopes are returned to the model, which decides what to do next.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, TYPE_CHECKING

from pwt_agent.domain.entities.agent_step import FinalAnswer, ToolCall
from pwt_agent.domain.entities.agent_transcript import AgentTranscript
from pwt_agent.domain.entities.agent_turn import AgentTurn

if TYPE_CHECKING:
    from pwt_agent.domain.prompts import GenerationRequest
    from pwt_agent.interfaces.services.llm import IStepProvider
    from pwt_agent.interfaces.services.tools import IToolInvocationAdapter

logger = logging.getLogger(__name__)


class AgentRunner:
    """IAgentRuntime over an injected step provider and tool invoker."""

    def __init__(self, step_provider: "IStepProvider", invoker: "IToolInvocationAdapter") -> None:
        self.step_provider = step_provider
        self.invoker = invoker

    async def run(self, request: "GenerationRequest") -> AgentTranscript:
        transcript = AgentTranscript()
        context: List[Dict[str, Any]] = []
        last_text = ""

        for step in range(1, request.max_steps + 1):
            logger.debug("Requesting step %d/%d", step, request.max_steps)
            outcome = await self.step_provider.request_next_step(request, context)

            if isinstance(outcome, FinalAnswer):
                transcript.turns.append(AgentTurn(step=step, response=outcome.text))
                transcript.final_response = outcome.text
                return transcript

            if not isinstance(outcome, ToolCall):
                raise TypeError(f"Step provider returned unsupported step {outcome!r}")

            if outcome.text:
                last_text = outcome.text
            logger.info("Step %d: calling tool '%s'", step, outcome.name)
            result = await self.invoker.execute(outcome.name, outcome.arguments, call_id=outcome.id)
            content = result.to_content()

            context.append({
                "role": "assistant",
                "content": outcome.text,
                "tool_call": {"id": outcome.id, "name": outcome.name, "arguments": outcome.arguments},
            })
            context.append({
                "role": "tool",
                "tool_call_id": outcome.id,
                "name": outcome.name,
                "content": content,
            })

            transcript.turns.append(AgentTurn(
                step=step,
                tool_call={"id": outcome.id, "tool": outcome.name, "input": outcome.arguments},
                tool_result=content,
                response=outcome.text or None,
            ))
            if outcome.name not in transcript.used_tools:
                transcript.used_tools.append(outcome.name)

        logger.warning("Step limit of %d reached without a final answer", request.max_steps)
        transcript.step_limit_reached = True
        transcript.final_response = last_text
        return transcript


__all__ = ["AgentRunner"]
