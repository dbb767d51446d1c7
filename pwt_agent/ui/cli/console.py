"""
Console utilities for CLI.
"""

import logging
import os
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_THEME = Theme(
    {
        "primary": "white",
        "accent": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "green",
        "muted": "grey70",
        "box_title": "bold cyan",
    }
)


def _should_enable_color(enable: Optional[bool]) -> bool:
    """
    Respect NO_COLOR unless PWT_AGENT_FORCE_COLOR is set; auto-detect a TTY when enable is None.
    """
    force_color = (os.getenv("PWT_AGENT_FORCE_COLOR") or "").lower() in ("1", "true", "yes", "on")
    if force_color:
        return True
    if os.getenv("NO_COLOR") is not None or enable is False:
        return False
    if enable is None:
        return bool(getattr(sys.stdout, "isatty", lambda: False)())
    return True


def make_console(use_color: Optional[bool] = None) -> Console:
    """Create a Rich console with the CLI theme and color policy."""
    desired = _should_enable_color(use_color)
    return Console(
        theme=_THEME,
        no_color=not desired,
        color_system="auto" if desired else None,
        markup=True,       # render style tags like [warning]...[/warning]
        highlight=False,
    )


def configure_logging(console: Console, level: str = "INFO") -> None:
    """Route stdlib logging through Rich on the given console."""
    logging.basicConfig(
        level=getattr(logging, (level or "INFO").upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, rich_tracebacks=True)],
        force=True,
    )
    # Keep HTTP client chatter out of the tool log
    for noisy in ("httpx", "httpcore", "openai", "mcp"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
