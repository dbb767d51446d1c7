"""
Shared test fixtures and fakes.

Nothing here talks to a real model or MCP server: the OpenAI client and the
MCP session are replaced by small in-process fakes.
"""

import os
import sys
import shlex
import textwrap
from typing import Any, Dict, List

import pytest

# Ensure project root is on sys.path so 'pwt_agent' imports resolve in tests
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from pwt_agent.domain.entities.agent_step import FinalAnswer, ToolCall  # noqa: E402


@pytest.fixture
def temp_workspace(tmp_path, monkeypatch):
    """Run the test inside an empty temporary working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def create_test_file(path, content: str) -> None:
    """Create a test file with given content."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


# -----------------------------------------------------------------------------
# Fake Playwright runner
# -----------------------------------------------------------------------------

_FAKE_RUNNER = textwrap.dedent(
    """
    import sys
    import time

    assert sys.argv[1] == "test", sys.argv
    spec = sys.argv[2]
    if "passing" in spec:
        print("Running 2 tests using 1 worker")
        print("  2 passed (1.2s)")
        sys.exit(0)
    if "failing" in spec:
        print("Running 2 tests using 1 worker")
        print("  1 failed")
        print("  1 passed (1.4s)")
        sys.stderr.write("strict mode violation\\n")
        sys.exit(1)
    if "garbled" in spec:
        sys.stdout.buffer.write(b"Running 1 test using 1 worker\\n  1 failed: expected \\xff got x\\n")
        sys.exit(1)
    if "hanging" in spec:
        time.sleep(30)
        sys.exit(0)
    sys.stderr.write("Error: Cannot find module '@playwright/test'\\n")
    sys.exit(1)
    """
)


@pytest.fixture
def fake_runner_command(tmp_path) -> str:
    """A runner command line that mimics `npx playwright` exit conventions."""
    script = tmp_path / "fake_playwright.py"
    script.write_text(_FAKE_RUNNER, encoding="utf-8")
    return f"{shlex.quote(sys.executable)} {shlex.quote(str(script))}"


# -----------------------------------------------------------------------------
# Scripted step provider
# -----------------------------------------------------------------------------

class ScriptedStepProvider:
    """IStepProvider that replays a fixed list of steps and records each context it saw."""

    model = "scripted"

    def __init__(self, steps: List[Any]):
        self.steps = list(steps)
        self.contexts: List[List[Dict[str, Any]]] = []

    async def request_next_step(self, request, context):
        self.contexts.append([dict(entry) for entry in context])
        if not self.steps:
            return FinalAnswer(text="done")
        return self.steps.pop(0)


@pytest.fixture
def scripted_provider():
    def _make(*steps):
        return ScriptedStepProvider(list(steps))
    return _make


def tool_call(name: str, call_id: str = "call_1", **arguments) -> ToolCall:
    return ToolCall(id=call_id, name=name, arguments=arguments)
