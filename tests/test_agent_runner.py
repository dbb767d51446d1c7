"""Tests for the bounded agent loop with a scripted step provider."""

import asyncio
import dataclasses

import pytest

from pwt_agent.api.di.composition import build_runner
from pwt_agent.domain.entities.agent_step import FinalAnswer, ToolCall
from pwt_agent.domain.prompts import build_request
from pwt_agent.infrastructure.tools.tool_manager import ToolManager
from conftest import tool_call


def _run(provider, max_steps=10, manager=None):
    manager = manager or ToolManager()
    request = build_request("Generate a suite", list(manager.tools.values()), max_steps=max_steps)
    return asyncio.run(build_runner(manager, provider).run(request))


def test_immediate_final_answer(scripted_provider):
    provider = scripted_provider(FinalAnswer(text="Nothing to do"))

    transcript = _run(provider)

    assert transcript.final_response == "Nothing to do"
    assert transcript.steps == 1
    assert transcript.used_tools == []
    assert transcript.step_limit_reached is False


def test_tool_results_are_fed_back(temp_workspace, scripted_provider):
    provider = scripted_provider(
        tool_call("create_directory", "c1", path="tests"),
        tool_call("edit_file", "c2", path="tests/home.spec.ts", old_str=None, new_str="test('x', () => {});"),
        FinalAnswer(text="Wrote tests/home.spec.ts"),
    )

    transcript = _run(provider)

    assert transcript.final_response == "Wrote tests/home.spec.ts"
    assert transcript.used_tools == ["create_directory", "edit_file"]
    assert (temp_workspace / "tests" / "home.spec.ts").read_text() == "test('x', () => {});"

    # The third request saw both calls and both results, in order
    last_context = provider.contexts[-1]
    assert [entry["role"] for entry in last_context] == ["assistant", "tool", "assistant", "tool"]
    assert last_context[1]["tool_call_id"] == "c1"
    assert last_context[1]["content"] == {"path": "tests", "success": True}
    assert last_context[3]["content"]["action"] == "create"


def test_unknown_tool_is_reported_to_model(scripted_provider):
    provider = scripted_provider(tool_call("delete_everything"), FinalAnswer(text="ok"))

    transcript = _run(provider)

    result = provider.contexts[1][1]["content"]
    assert result == {"error": "Tool 'delete_everything' not found", "success": False}
    assert transcript.final_response == "ok"


def test_tool_failure_does_not_stop_the_loop(temp_workspace, scripted_provider):
    provider = scripted_provider(tool_call("read_file", path="missing.spec.ts"), FinalAnswer(text="File missing"))

    transcript = _run(provider)

    assert transcript.turns[0].tool_result["success"] is False
    assert transcript.final_response == "File missing"


def test_step_ceiling_stops_the_loop(temp_workspace, scripted_provider):
    steps = [
        ToolCall(id=f"c{i}", name="list_files", arguments={"path": "."}, text=f"step {i}")
        for i in range(5)
    ]
    provider = scripted_provider(*steps)

    transcript = _run(provider, max_steps=3)

    assert transcript.step_limit_reached is True
    assert transcript.steps == 3
    assert len(provider.contexts) == 3
    assert transcript.final_response == "step 2"


def test_unsupported_step_type_raises(scripted_provider):
    provider = scripted_provider("not a step")
    with pytest.raises(TypeError):
        _run(provider)


def test_turn_records_call_result_and_text(temp_workspace, scripted_provider):
    provider = scripted_provider(
        ToolCall(id="c1", name="create_directory", arguments={"path": "tests"}, text="Making the folder"),
        FinalAnswer(text="ok"),
    )

    transcript = _run(provider)

    assert dataclasses.asdict(transcript.turns[0]) == {
        "step": 1,
        "tool_call": {"id": "c1", "tool": "create_directory", "input": {"path": "tests"}},
        "tool_result": {"path": "tests", "success": True},
        "response": "Making the folder",
    }
    assert dataclasses.asdict(transcript.turns[1]) == {
        "step": 2,
        "tool_call": None,
        "tool_result": None,
        "response": "ok",
    }
