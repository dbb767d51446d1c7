"""
Command handlers for CLI.
"""
from __future__ import annotations

import asyncio
import json
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.box import ROUNDED
from rich.markup import escape
from rich.text import Text

from pwt_agent.api.di.composition import build_tool_catalog, build_tool_invoker, build_tool_manager
from pwt_agent.infrastructure.mcp.playwright_client import PlaywrightMCPClient
from pwt_agent.infrastructure.tools.config import Settings
from pwt_agent.interfaces.services.tools import IToolCatalog


def list_tools(console: Console, catalog: IToolCatalog) -> None:
    """Render a table of registered tools."""
    table = Table(title="Registered Tools", box=ROUNDED)
    table.add_column("Name", no_wrap=True)
    table.add_column("Source", no_wrap=True)
    table.add_column("Description")
    table.add_column("Required Params")

    for descriptor in catalog.list_tools():
        req = ", ".join(descriptor.raw_schema.get("required", []) or [])
        table.add_row(Text(descriptor.name), descriptor.source, Text(descriptor.description or ""), Text(req or "-"))

    console.print(table)


async def _merged_catalog(settings: Settings) -> IToolCatalog:
    async with PlaywrightMCPClient(url=settings.mcp_url, timeout=settings.mcp_timeout) as client:
        return build_tool_catalog(build_tool_manager(client.tools, settings=settings))


def handle_tools(console: Console, settings: Settings) -> None:
    """Handle /tools: connect to the MCP server and list the merged catalog."""
    list_tools(console, asyncio.run(_merged_catalog(settings)))


def handle_call(console: Console, settings: Settings, parts: List[str]) -> None:
    """Handle /call <tool_name> <json_params> against the local tools."""
    if len(parts) < 3:
        console.print("[warning]Usage: /call <tool_name> <json_params>[/warning]")
        return
    tool_name = parts[1].strip()
    try:
        params = json.loads(parts[2].strip())
    except json.JSONDecodeError as e:
        console.print(f"[error]Invalid JSON: {escape(str(e))}[/error]")
        return
    invoker = build_tool_invoker(build_tool_manager(settings=settings))
    result = asyncio.run(invoker.execute(tool_name, params))
    if result.ok:
        body = json.dumps(result.value, ensure_ascii=False, indent=2)
        console.print(Panel(Text(body), title=f"Tool Result: {escape(tool_name)}", box=ROUNDED))
    else:
        console.print(Panel(Text(result.error or ""), title=f"Tool Error: {escape(tool_name)}", box=ROUNDED))


def show_config(console: Console, settings: Settings) -> None:
    """Display current configuration."""
    content = (
        f"Model: {settings.model}\n"
        f"Base URL: {settings.base_url or 'default'}\n"
        f"Max steps: {settings.max_steps}\n"
        f"Temperature: {settings.temperature if settings.temperature is not None else 'default'}\n"
        f"MCP URL: {settings.mcp_url}\n"
        f"Runner: {settings.runner_command} test <specFile>\n"
    )
    console.print(Panel(Text(content), title="Configuration", box=ROUNDED))


def show_help(console: Console) -> None:
    """Print help panel."""
    console.print(
        Panel(
            "Commands\n"
            "/help      Show help\n"
            "/tools     List local and MCP tools\n"
            "/config    Show configuration\n"
            "/call      Execute a local tool directly (e.g., /call read_file {\"path\":\"tests/a.spec.ts\"})\n"
            "/exit      Exit\n\n"
            "Anything else is sent to the agent as a task.",
            title="Help",
            box=ROUNDED,
        )
    )


def show_response(console: Console, response: str, title: Optional[str] = None) -> None:
    # Model output is shown verbatim; selectors like [data-testid=x] are not markup
    console.print(Panel(Text(response or "(no response)"), title=escape(title or "Response"), box=ROUNDED))


def show_error(console: Console, error: BaseException) -> None:
    console.print(Panel(Text(str(error)), title="Error", box=ROUNDED, style="error"))
