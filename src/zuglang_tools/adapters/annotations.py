"""AnnotationMapper: ToolHints → MCP ToolAnnotations / description suffix."""

from __future__ import annotations

from typing import Any

DEFAULT_HINTS = {
    "readonly": False,
    "destructive": False,
    "idempotent": False,
    "open_world": True,
}


class AnnotationMapper:
    """Maps tool behaviour hints to the formats MCP and OpenAI clients read."""

    def to_mcp_annotations(self, hints: Any | None) -> dict[str, Any]:
        """Convert ToolHints to MCP ToolAnnotations keyword arguments.

        Args:
            hints: ToolHints instance or None

        Returns:
            Dict with readOnlyHint, destructiveHint, idempotentHint,
            openWorldHint and title.
        """
        if hints is None:
            return {
                "readOnlyHint": DEFAULT_HINTS["readonly"],
                "destructiveHint": DEFAULT_HINTS["destructive"],
                "idempotentHint": DEFAULT_HINTS["idempotent"],
                "openWorldHint": DEFAULT_HINTS["open_world"],
                "title": None,
            }

        return {
            "readOnlyHint": hints.readonly,
            "destructiveHint": hints.destructive,
            "idempotentHint": hints.idempotent,
            "openWorldHint": hints.open_world,
            "title": None,
        }

    def to_description_suffix(self, hints: Any | None) -> str:
        """Generate annotation text to append to OpenAI tool descriptions.

        Only non-default values are listed. Returns "" when there is nothing
        to say.
        """
        if hints is None:
            return ""

        parts = []
        for key, default in DEFAULT_HINTS.items():
            value = getattr(hints, key)
            if value != default:
                parts.append(f"{key}={str(value).lower()}")

        if not parts:
            return ""

        return f"\n\n[Annotations: {', '.join(parts)}]"
