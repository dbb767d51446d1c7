"""
Entry point tying the pieces together: connect to the Playwright MCP server,
merge its tools with the local ones, and let the model work through the task.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, TYPE_CHECKING

from pwt_agent.api.di.composition import build_runner, build_step_provider, build_tool_manager
from pwt_agent.domain.prompts import build_request
from pwt_agent.infrastructure.mcp.playwright_client import PlaywrightMCPClient
from pwt_agent.infrastructure.tools.config import Config, Settings

if TYPE_CHECKING:
    from pwt_agent.domain.entities.agent_transcript import AgentTranscript
    from pwt_agent.interfaces.services.llm import IStepProvider

logger = logging.getLogger(__name__)


async def run_agent(
    prompt: str,
    *,
    settings: Optional[Settings] = None,
    step_provider: Optional["IStepProvider"] = None,
    mcp_client: Optional[PlaywrightMCPClient] = None,
) -> "AgentTranscript":
    """
    Run one task to completion and return the full transcript.

    Raises:
        MCPConnectionError: If the MCP server is unreachable (nothing runs)
        DuplicateToolError: If a remote tool shadows a local tool name
    """
    settings = settings or Config.snapshot()
    client = mcp_client or PlaywrightMCPClient(url=settings.mcp_url, timeout=settings.mcp_timeout)

    async with client:
        manager = build_tool_manager(client.tools, settings=settings)
        request = build_request(
            prompt,
            list(manager.tools.values()),
            model=settings.model,
            max_steps=settings.max_steps,
            temperature=settings.temperature,
        )
        provider = step_provider or build_step_provider(settings)
        logger.info("Running task with %d tools on %s", len(request.tools), request.model)
        return await build_runner(manager, provider).run(request)


async def coding_agent(prompt: str, **kwargs: Any) -> Dict[str, str]:
    """Run one task and return ``{"response": final_text}``."""
    transcript = await run_agent(prompt, **kwargs)
    return {"response": transcript.final_response}


__all__ = ["coding_agent", "run_agent"]
