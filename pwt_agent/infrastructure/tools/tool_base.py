"""
Base class for agent tools.

Every tool exposed to the model, local or remote, satisfies the same shape:
name, description, an input validator and an invoke(input) -> result call.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, Type

from pydantic import BaseModel, ValidationError


class Tool(ABC):
    """
    Abstract base class for tools.

    Subclasses declare a pydantic ``input_model``; the JSON schema shown to
    the model is derived from it so the two cannot drift apart.
    """

    input_model: Optional[Type[BaseModel]] = None

    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name used in function calling format."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what the tool does."""
        pass

    @property
    def input_schema(self) -> Dict[str, Any]:
        """
        JSONSchema object defining accepted input.
        Must include:
        - type: "object"
        - properties: Parameter definitions
        - required: List of required fields
        """
        if self.input_model is None:
            return {"type": "object", "properties": {}, "required": []}
        schema = self.input_model.model_json_schema()
        schema.pop("title", None)
        schema.setdefault("required", [])
        return schema

    @abstractmethod
    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        """Execute the tool with already-validated input. Must not raise."""
        pass

    def validate_input(self, input: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Validate raw model-supplied arguments against ``input_model``.

        Raises:
            ValidationError: If the input does not satisfy the schema
        """
        if self.input_model is None:
            return dict(input or {})
        return self.input_model.model_validate(input or {}).model_dump()

    async def invoke(self, input: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Validate then run. Schema violations come back as an error envelope.

        ``run`` executes in a worker thread; the event loop owning the MCP
        session keeps running while it blocks.
        """
        try:
            params = self.validate_input(input)
        except ValidationError as e:
            return {"error": f"Invalid input for '{self.name}': {e}", "success": False}
        return await asyncio.to_thread(self.run, params)

    def get_tool_definition(self) -> Dict[str, Any]:
        """Get the tool definition as name, description and input_schema."""
        schema = self.input_schema
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": {
                "type": "object",
                "properties": schema.get("properties", {}) or {},
                "required": schema.get("required", []) or [],
            },
        }
