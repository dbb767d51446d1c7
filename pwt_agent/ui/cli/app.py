"""
Command-line interface for the Playwright test-authoring agent.

Usage:
  pwt-agent "Navigate to https://example.com and cover the signup flow"
  pwt-agent                # interactive session when attached to a terminal

Commands (interactive):
  /help      Show help
  /tools     List local and MCP tools
  /config    Show configuration
  /call      Execute a local tool directly
  /exit      Exit

Run:
  python -m pwt_agent
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import sys
from typing import List, Optional

from openai import OpenAIError
from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.patch_stdout import patch_stdout
from rich.console import Console

from pwt_agent.agent import coding_agent
from pwt_agent.domain.prompts import DEFAULT_TASK
from pwt_agent.infrastructure.mcp.exceptions import MCPConnectionError
from pwt_agent.infrastructure.tools.config import Config, Settings
from pwt_agent.infrastructure.tools.exceptions import DuplicateToolError

from .console import configure_logging, make_console
from .handlers import handle_call, handle_tools, show_config, show_error, show_help, show_response


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pwt-agent", description="Generate Playwright tests with a tool-using model.")
    parser.add_argument("task", nargs="*", help="Task for the agent; omit for an interactive session")
    parser.add_argument("--model", help="Model identifier (default: %(default)s)", default=Config.PWT_AGENT_MODEL)
    parser.add_argument("--max-steps", type=int, default=Config.PWT_AGENT_MAX_STEPS, help="Step ceiling (default: %(default)s)")
    parser.add_argument("--temperature", type=float, default=Config.PWT_AGENT_TEMPERATURE)
    parser.add_argument("--mcp-url", default=Config.PWT_MCP_URL, help="Playwright MCP SSE endpoint (default: %(default)s)")
    parser.add_argument("--log-level", default=Config.PWT_LOG_LEVEL)
    parser.add_argument("--no-color", action="store_true")
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    return dataclasses.replace(
        Config.snapshot(),
        model=args.model,
        max_steps=args.max_steps,
        temperature=args.temperature,
        mcp_url=args.mcp_url,
        log_level=args.log_level.upper(),
    )


def run_task(console: Console, task: str, settings: Settings) -> int:
    """Run one task; returns a process exit status."""
    try:
        with console.status("[accent]Agent working...[/accent]"):
            result = asyncio.run(coding_agent(task, settings=settings))
    except (MCPConnectionError, DuplicateToolError, OpenAIError, ValueError) as e:
        show_error(console, e)
        return 1
    show_response(console, result["response"])
    return 0


def interactive(console: Console, settings: Settings) -> int:
    session = PromptSession(history=InMemoryHistory())
    completer = WordCompleter(["/help", "/tools", "/config", "/call", "/exit"], ignore_case=True)
    show_help(console)

    while True:
        try:
            with patch_stdout():
                user_input = session.prompt("> ", completer=completer)
        except (KeyboardInterrupt, EOFError):
            console.print("\nExiting...", style="warning")
            return 0

        cmd = user_input.strip()
        if not cmd:
            continue
        if cmd == "/exit":
            console.print("Exiting...", style="warning")
            return 0
        if cmd == "/help":
            show_help(console)
            continue
        if cmd == "/config":
            show_config(console, settings)
            continue
        if cmd == "/tools":
            try:
                handle_tools(console, settings)
            except (MCPConnectionError, DuplicateToolError) as e:
                show_error(console, e)
            continue
        if cmd.startswith("/call"):
            handle_call(console, settings, cmd.split(maxsplit=2))
            continue

        run_task(console, cmd, settings)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    console = make_console(use_color=False if args.no_color else None)
    settings = settings_from_args(args)
    configure_logging(console, settings.log_level)

    task = " ".join(args.task).strip()
    if task:
        return run_task(console, task, settings)
    if sys.stdin.isatty():
        return interactive(console, settings)
    return run_task(console, DEFAULT_TASK, settings)


if __name__ == "__main__":
    sys.exit(main())
