"""SchemaConverter: pydantic input models → JSON Schema / discovery parameters."""

from __future__ import annotations

import copy
from typing import Any


class SchemaConverter:
    """Converts a tool's pydantic input model to client-facing schemas.

    Key transformations:
    - pydantic's generated ``title`` keys are dropped
    - Schemas with $defs and $ref → inline all refs, strip $defs
    - Ensures the schema has "type": "object" at the root level
    - Returns fresh dicts (never the cached pydantic schema)
    """

    def convert_input_schema(self, descriptor: Any) -> dict[str, Any]:
        """Convert ``descriptor.input_model`` to an MCP inputSchema / OpenAI parameters dict."""
        schema = descriptor.input_model.model_json_schema()
        return self._convert_schema(schema)

    def to_parameters(self, descriptor: Any) -> dict[str, dict[str, Any]]:
        """Flatten the input schema into the discovery ``parameters`` listing.

        Each property becomes ``{"type", "description", "required"}``, plus
        ``enum`` when the property has one.
        """
        schema = self.convert_input_schema(descriptor)
        required = set(schema.get("required", []))
        parameters: dict[str, dict[str, Any]] = {}
        for name, prop in schema.get("properties", {}).items():
            entry: dict[str, Any] = {
                "type": prop.get("type", "string"),
                "description": prop.get("description", ""),
                "required": name in required,
            }
            if "enum" in prop:
                entry["enum"] = list(prop["enum"])
            parameters[name] = entry
        return parameters

    def _convert_schema(self, schema: dict[str, Any]) -> dict[str, Any]:
        schema = copy.deepcopy(schema)

        if not schema:
            return {"type": "object", "properties": {}}

        if "$defs" in schema:
            defs = schema.pop("$defs")
            schema = self._inline_refs(schema, defs)

        schema = self._strip_titles(schema)
        schema.setdefault("type", "object")
        schema.setdefault("properties", {})
        return schema

    def _inline_refs(self, node: Any, defs: dict[str, Any]) -> Any:
        """Replace ``{"$ref": "#/$defs/X"}`` nodes with a copy of ``defs[X]``."""
        if isinstance(node, dict):
            ref = node.get("$ref")
            if isinstance(ref, str) and ref.startswith("#/$defs/"):
                name = ref[len("#/$defs/") :]
                if name not in defs:
                    raise ValueError(f"Unresolvable $ref: {ref}")
                return self._inline_refs(copy.deepcopy(defs[name]), defs)
            return {key: self._inline_refs(value, defs) for key, value in node.items()}
        if isinstance(node, list):
            return [self._inline_refs(item, defs) for item in node]
        return node

    def _strip_titles(self, node: Any) -> Any:
        if isinstance(node, dict):
            result: dict[str, Any] = {}
            for key, value in node.items():
                if key == "title" and isinstance(value, str):
                    continue
                if key == "properties" and isinstance(value, dict):
                    # Property names are user data, only strip inside their schemas.
                    result[key] = {name: self._strip_titles(prop) for name, prop in value.items()}
                    continue
                result[key] = self._strip_titles(value)
            return result
        if isinstance(node, list):
            return [self._strip_titles(item) for item in node]
        return node
