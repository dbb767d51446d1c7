"""Tests for the command-line entry point; the agent itself is replaced."""

import io

import pytest

from pwt_agent.domain.prompts import DEFAULT_TASK
from pwt_agent.infrastructure.mcp.exceptions import MCPConnectionError
from pwt_agent.infrastructure.tools.config import Config
from pwt_agent.ui.cli import app
from pwt_agent.ui.cli.console import make_console
from pwt_agent.ui.cli.handlers import handle_call, show_error


@pytest.fixture
def fake_agent(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setattr(app, "configure_logging", lambda console, level: None)
    calls = []

    async def fake_coding_agent(prompt, settings=None):
        calls.append((prompt, settings))
        return {"response": "Created tests/home.spec.ts"}

    monkeypatch.setattr(app, "coding_agent", fake_coding_agent)
    return calls


def test_task_from_arguments(fake_agent, capsys):
    status = app.main(["Cover", "the", "signup", "flow", "--max-steps", "4", "--model", "gpt-test"])

    assert status == 0
    [(prompt, settings)] = fake_agent
    assert prompt == "Cover the signup flow"
    assert settings.max_steps == 4
    assert settings.model == "gpt-test"
    assert "Created tests/home.spec.ts" in capsys.readouterr().out


def test_default_task_when_not_interactive(fake_agent, monkeypatch):
    monkeypatch.setattr(app.sys, "stdin", io.StringIO(""))

    assert app.main([]) == 0
    assert fake_agent[0][0] == DEFAULT_TASK


def test_mcp_failure_exits_non_zero(monkeypatch, capsys):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setattr(app, "configure_logging", lambda console, level: None)

    async def failing_agent(prompt, settings=None):
        raise MCPConnectionError(settings.mcp_url, "Connection refused")

    monkeypatch.setattr(app, "coding_agent", failing_agent)

    status = app.main(["x", "--mcp-url", "http://127.0.0.1:1/sse"])

    assert status == 1
    out = capsys.readouterr().out
    assert "refused" in out
    assert "127.0.0.1" in out


def test_settings_from_args_overrides_snapshot():
    args = app.build_parser().parse_args(["--temperature", "0.3", "--log-level", "debug"])
    settings = app.settings_from_args(args)
    assert settings.temperature == 0.3
    assert settings.log_level == "DEBUG"


def test_bracketed_selectors_are_printed_verbatim(monkeypatch, capsys):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setattr(app, "configure_logging", lambda console, level: None)
    answer = "Use page.locator('[data-testid=x]'); avoid [/nav] matches"

    async def selector_agent(prompt, settings=None):
        return {"response": answer}

    monkeypatch.setattr(app, "coding_agent", selector_agent)

    assert app.main(["x"]) == 0
    assert answer in capsys.readouterr().out


def test_error_and_tool_panels_do_not_parse_markup(temp_workspace, monkeypatch, capsys):
    monkeypatch.setenv("NO_COLOR", "1")
    console = make_console()
    (temp_workspace / "nav.spec.ts").write_text("locator('[/nav]')", encoding="utf-8")

    show_error(console, ValueError("bad selector [/nav]"))
    handle_call(console, Config.snapshot(), ["/call", "read_file", '{"path": "nav.spec.ts"}'])

    out = capsys.readouterr().out
    assert "bad selector [/nav]" in out
    assert "locator('[/nav]')" in out
