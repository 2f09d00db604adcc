"""OpenAIConverter: Zuglang tool registry -> OpenAI-compatible tool definitions."""

from __future__ import annotations

from typing import Any

from zuglang_tools.adapters.annotations import AnnotationMapper
from zuglang_tools.adapters.schema import SchemaConverter
from zuglang_tools.tools import ToolDescriptor, select_tools


def strict_parameters(schema: dict[str, Any]) -> dict[str, Any]:
    """Structured Outputs form of a flat object schema.

    Every property becomes required and ``additionalProperties`` is closed.
    Defaults are dropped, and a property that was optional accepts ``null``
    instead. Returns a new dict; *schema* is left untouched.
    """
    required = set(schema.get("required", []))
    properties: dict[str, Any] = {}
    for name, prop in schema.get("properties", {}).items():
        prop = {key: value for key, value in prop.items() if key != "default"}
        if name not in required and isinstance(prop.get("type"), str):
            prop["type"] = [prop["type"], "null"]
        properties[name] = prop
    return {**schema, "properties": properties, "required": list(properties), "additionalProperties": False}


class OpenAIConverter:
    """Turns tool descriptors into entries for ``openai.chat.completions.create(tools=...)``."""

    def __init__(self) -> None:
        self._schemas = SchemaConverter()
        self._annotations = AnnotationMapper()

    def convert_tools(
        self,
        names: list[str] | None = None,
        embed_annotations: bool = False,
        strict: bool = False,
    ) -> list[dict[str, Any]]:
        """Convert the registered tools, optionally only *names*, in registry order."""
        return [
            self.convert_descriptor(descriptor, embed_annotations=embed_annotations, strict=strict)
            for descriptor in select_tools(names)
        ]

    def convert_descriptor(
        self,
        descriptor: ToolDescriptor,
        embed_annotations: bool = False,
        strict: bool = False,
    ) -> dict[str, Any]:
        """``{"type": "function", "function": {name, description, parameters[, strict]}}``."""
        description = descriptor.description
        if embed_annotations:
            description += self._annotations.to_description_suffix(descriptor.hints)

        parameters = self._schemas.convert_input_schema(descriptor)
        function: dict[str, Any] = {"name": descriptor.name, "description": description}
        if strict:
            function["parameters"] = strict_parameters(parameters)
            function["strict"] = True
        else:
            function["parameters"] = parameters
        return {"type": "function", "function": function}
