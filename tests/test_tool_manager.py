"""Tests for the tool registry, the Tool base class and the adapters around them."""

import asyncio
import threading
import time
from typing import Any, Dict

import pytest

from pwt_agent.abstractions.dto.tools import ToolDescriptor
from pwt_agent.infrastructure.tools.catalog_adapter import ToolManagerCatalogAdapter
from pwt_agent.infrastructure.tools.exceptions import DuplicateToolError
from pwt_agent.infrastructure.tools.invocation_adapter import ToolInvocationAdapter
from pwt_agent.infrastructure.tools.read_file_tool import ReadFileTool
from pwt_agent.infrastructure.tools.tool_base import Tool
from pwt_agent.infrastructure.tools.tool_manager import ToolManager

LOCAL_TOOL_NAMES = ["create_directory", "list_files", "read_file", "edit_file", "run_pwt"]


class DummyTool(Tool):
    def __init__(self, name: str = "dummy"):
        self._name = name
        self.last_input = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return "Dummy tool"

    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        self.last_input = input
        return {"output": "ok", "success": True}


class ExplodingTool(DummyTool):
    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        raise RuntimeError("boom")


def test_tool_base_interface():
    """Tool base class exposes the shared tool shape."""
    for attr in ("name", "description", "input_schema", "input_model", "run", "invoke",
                 "validate_input", "get_tool_definition"):
        assert hasattr(Tool, attr)


def test_default_tools_registered_in_order():
    manager = ToolManager()
    assert list(manager.tools) == LOCAL_TOOL_NAMES


def test_register_duplicate_name_raises():
    manager = ToolManager()
    with pytest.raises(DuplicateToolError) as excinfo:
        manager.register_tool(DummyTool(name="read_file"))
    assert excinfo.value.name == "read_file"
    assert isinstance(excinfo.value, ValueError)


def test_register_tools_detects_duplicates_within_batch():
    manager = ToolManager(register_defaults=False)
    with pytest.raises(DuplicateToolError):
        manager.register_tools([DummyTool("browser_click"), DummyTool("browser_click")])


def test_get_tool_unknown_raises_key_error():
    with pytest.raises(KeyError):
        ToolManager(register_defaults=False).get_tool("missing")


def test_register_tool_class():
    manager = ToolManager(register_defaults=False)
    manager.register_tool_class(DummyTool, name="extra")
    assert manager.get_tool("extra").name == "extra"


def test_list_tools_exposes_object_schemas():
    for info in ToolManager().list_tools():
        assert info["name"] in LOCAL_TOOL_NAMES
        assert info["description"]
        assert info["input_schema"]["type"] == "object"
        assert "properties" in info["input_schema"]
        assert "required" in info["input_schema"]


def test_get_tool_definition_shape():
    definition = ReadFileTool().get_tool_definition()
    assert definition["name"] == "read_file"
    assert definition["input_schema"]["type"] == "object"
    assert definition["input_schema"]["required"] == ["path"]
    assert definition["input_schema"]["properties"]["path"]["type"] == "string"


def test_tool_without_input_model_has_empty_schema():
    definition = DummyTool().get_tool_definition()
    assert definition["input_schema"] == {"type": "object", "properties": {}, "required": []}


def test_execute_tool_dispatches_by_name():
    manager = ToolManager(register_defaults=False)
    tool = DummyTool()
    manager.register_tool(tool)

    result = asyncio.run(manager.execute_tool("dummy", {"x": 1}))
    assert result["success"] is True
    assert tool.last_input == {"x": 1}


def test_catalog_adapter_lists_descriptors():
    manager = ToolManager()
    manager.register_tool(DummyTool("browser_snapshot"))
    catalog = ToolManagerCatalogAdapter(manager)

    descriptors = catalog.list_tools()
    assert [d.name for d in descriptors] == LOCAL_TOOL_NAMES + ["browser_snapshot"]
    assert all(isinstance(d, ToolDescriptor) for d in descriptors)
    assert catalog.get_tool("run_pwt").raw_schema["required"] == ["specFile"]
    assert catalog.get_tool("nope") is None


def test_invocation_adapter_unknown_tool_is_error_result():
    invoker = ToolInvocationAdapter(ToolManager(register_defaults=False))
    result = asyncio.run(invoker.execute("nope", {}, call_id="c1"))
    assert result.ok is False
    assert "not found" in result.error
    assert result.call_id == "c1"
    assert result.to_content() == {"error": "Tool 'nope' not found", "success": False}


def test_invocation_adapter_never_raises_past_boundary():
    manager = ToolManager(register_defaults=False)
    manager.register_tool(ExplodingTool("explode"))
    result = asyncio.run(ToolInvocationAdapter(manager).execute("explode", {}))
    assert result.ok is False
    assert "boom" in result.error


def test_invocation_adapter_passes_domain_failures_through(temp_workspace):
    invoker = ToolInvocationAdapter(ToolManager())
    result = asyncio.run(invoker.execute("read_file", {"path": "missing.spec.ts"}))
    # The tool ran; the failure is data for the model, not an invocation error
    assert result.ok is True
    assert result.value["success"] is False
    assert result.to_content() is result.value


class SlowTool(DummyTool):
    def __init__(self, name: str = "slow"):
        super().__init__(name)
        self.thread_id = None

    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        self.thread_id = threading.get_ident()
        time.sleep(0.2)
        return {"output": "ok", "success": True}


def test_invoke_keeps_event_loop_responsive():
    tool = SlowTool()
    ticks = []

    async def ticker():
        while True:
            ticks.append(time.monotonic())
            await asyncio.sleep(0.02)

    async def scenario():
        task = asyncio.create_task(ticker())
        result = await tool.invoke({})
        task.cancel()
        return result

    result = asyncio.run(scenario())

    assert result["success"] is True
    assert tool.thread_id != threading.get_ident()
    assert len(ticks) > 3
