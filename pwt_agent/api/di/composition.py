"""
Composition module for DI (edge wiring).
"""

from __future__ import annotations

from typing import Iterable, Optional, TYPE_CHECKING

from pwt_agent.infrastructure.tools.config import Config, Settings
from pwt_agent.infrastructure.tools.tool_manager import ToolManager

if TYPE_CHECKING:
    from pwt_agent.interfaces.agents.runtime import IAgentRuntime
    from pwt_agent.infrastructure.tools.tool_base import Tool
    from pwt_agent.interfaces.services.llm import IStepProvider
    from pwt_agent.interfaces.services.tools import IToolCatalog, IToolInvocationAdapter


def build_tool_manager(remote_tools: Iterable["Tool"] = (), settings: Optional[Settings] = None) -> ToolManager:
    """
    Construct the merged catalog: local tools first, then remote tools.

    Raises:
        DuplicateToolError: If a remote tool reuses a local tool's name
    """
    settings = settings or Config.snapshot()
    manager = ToolManager(
        register_defaults=True,
        runner_command=settings.runner_command,
        runner_timeout=settings.runner_timeout,
    )
    manager.register_tools(remote_tools)
    return manager


def build_step_provider(settings: Optional[Settings] = None) -> "IStepProvider":
    """
    Construct and return the default IStepProvider.
    """
    from pwt_agent.infrastructure.llm.openai_compatible import OpenAIStepProvider
    settings = settings or Config.snapshot()
    return OpenAIStepProvider(api_key=settings.api_key, base_url=settings.base_url, model=settings.model)


def build_tool_catalog(manager: ToolManager) -> "IToolCatalog":
    from pwt_agent.infrastructure.tools.catalog_adapter import ToolManagerCatalogAdapter
    return ToolManagerCatalogAdapter(manager)


def build_tool_invoker(manager: ToolManager) -> "IToolInvocationAdapter":
    from pwt_agent.infrastructure.tools.invocation_adapter import ToolInvocationAdapter
    return ToolInvocationAdapter(manager)


def build_runner(manager: ToolManager, step_provider: "IStepProvider") -> "IAgentRuntime":
    from pwt_agent.infrastructure.agent.runner import AgentRunner
    return AgentRunner(step_provider, build_tool_invoker(manager))
