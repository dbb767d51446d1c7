"""
OpenAI-compatible step provider.

Supports any provider exposing an OpenAI Chat Completions-compatible API
(OpenAI itself, Ollama at http://localhost:11434/v1, self-hosted servers).

Behavior:
- Sends the system instruction, the task as the first user message, and the
  running context translated to chat messages
- Exposes the tool catalog as native function tools
- Maps the first native tool call to a ToolCall, otherwise returns the
  message content as a FinalAnswer
"""

from __future__ import annotations

import json
import logging
import uuid
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from openai import AsyncOpenAI

from pwt_agent.domain.entities.agent_step import AgentStep, FinalAnswer, ToolCall
from pwt_agent.infrastructure.tools.config import Config

if TYPE_CHECKING:
    from pwt_agent.domain.prompts import GenerationRequest

logger = logging.getLogger(__name__)


class OpenAIStepProvider:
    """
    IStepProvider over the Chat Completions API.

    Example usage for Ollama:
        provider = OpenAIStepProvider(
            api_key="ollama",  # placeholder if unused
            base_url="http://localhost:11434/v1",
            model="llama3.1",
        )
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None,
    ) -> None:
        self.api_key = api_key or Config.OPENAI_API_KEY or None
        self.base_url = base_url or Config.OPENAI_BASE_URL or None
        self.model = model or Config.PWT_AGENT_MODEL
        self.client = client if client is not None else AsyncOpenAI(api_key=self.api_key, base_url=self.base_url)

    # ---------- Request building ----------

    @staticmethod
    def _build_openai_tools(request: "GenerationRequest") -> List[Dict[str, Any]]:
        """
        Build OpenAI-compatible tools array from the request's catalog.
        """
        defs: List[Dict[str, Any]] = []
        for tool in request.tool_definitions():
            defs.append({
                "type": "function",
                "function": {
                    "name": tool["name"],
                    "description": tool["description"] or "",
                    "parameters": tool["input_schema"] or {"type": "object", "properties": {}},
                },
            })
        return defs

    @staticmethod
    def _to_messages(request: "GenerationRequest", context: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        Translate provider-neutral context entries into chat messages.

        Context entries:
        - {"role": "assistant", "content": str, "tool_call": {"id", "name", "arguments"}}
        - {"role": "tool", "tool_call_id": str, "name": str, "content": dict}
        - {"role": "assistant", "content": str}
        """
        messages: List[Dict[str, Any]] = [
            {"role": "system", "content": request.instruction},
            {"role": "user", "content": request.task},
        ]
        for entry in context:
            role = entry.get("role")
            if role == "assistant" and entry.get("tool_call"):
                call = entry["tool_call"]
                messages.append({
                    "role": "assistant",
                    "content": entry.get("content") or None,
                    "tool_calls": [{
                        "id": call["id"],
                        "type": "function",
                        "function": {
                            "name": call["name"],
                            "arguments": json.dumps(call.get("arguments") or {}, ensure_ascii=False),
                        },
                    }],
                })
            elif role == "tool":
                content = entry.get("content")
                messages.append({
                    "role": "tool",
                    "tool_call_id": entry["tool_call_id"],
                    "content": content if isinstance(content, str) else json.dumps(content, ensure_ascii=False, default=str),
                })
            else:
                messages.append({"role": role or "user", "content": entry.get("content") or ""})
        return messages

    def _is_ollama_openai_compat(self) -> bool:
        """
        Heuristic: detect Ollama when using its OpenAI-compatible /v1 endpoint.
        Avoids setting OpenAI-only fields that Ollama may not accept.
        """
        base = (self.base_url or "").lower()
        return "ollama" in base or ":11434" in base

    def build_payload(self, request: "GenerationRequest", context: List[Dict[str, Any]]) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "model": request.model or self.model,
            "messages": self._to_messages(request, context),
        }
        if request.temperature is not None:
            payload["temperature"] = request.temperature
        if request.tools:
            payload["tools"] = self._build_openai_tools(request)
            if not self._is_ollama_openai_compat():
                payload["parallel_tool_calls"] = False
        return payload

    # ---------- Response parsing ----------

    @staticmethod
    def _parse_args_safely(raw: Any) -> Dict[str, Any]:
        """
        Convert function call arguments to a dict robustly:
        - dict passthrough
        - JSON string (with or without ``` fences)
        - Anything else, or a non-object JSON value, becomes {}
        """
        if isinstance(raw, dict):
            return raw
        if isinstance(raw, str):
            text = raw.strip()
            if text.startswith("```"):
                end = text.find("```", 3)
                if end != -1:
                    text = text[3:end].strip()
                    if text.lower().startswith("json"):
                        text = text[4:].strip()
            if not text:
                return {}
            try:
                obj = json.loads(text)
            except json.JSONDecodeError:
                logger.warning("Could not parse tool call arguments: %r", raw)
                return {}
            return obj if isinstance(obj, dict) else {}
        return {}

    def _adapt_openai_tool_calls(self, tool_calls: Any, content: str) -> Optional[ToolCall]:
        """
        Adapt the first native message.tool_calls entry into a ToolCall.
        """
        for call in (tool_calls or []):
            fn = getattr(call, "function", None)
            name = str(getattr(fn, "name", "") or "")
            if not name:
                continue
            call_id = getattr(call, "id", None) or f"call_{uuid.uuid4().hex[:12]}"
            return ToolCall(
                id=call_id,
                name=name,
                arguments=self._parse_args_safely(getattr(fn, "arguments", None)),
                text=content,
            )
        return None

    async def request_next_step(self, request: "GenerationRequest", context: List[Dict[str, Any]]) -> AgentStep:
        """
        Ask the model for its next action.

        API errors are not caught here; they abort the run.
        """
        response = await self.client.chat.completions.create(**self.build_payload(request, context))
        message = response.choices[0].message
        content = message.content or ""

        tool_call = self._adapt_openai_tool_calls(getattr(message, "tool_calls", None), content)
        if tool_call is not None:
            return tool_call
        return FinalAnswer(text=content)
