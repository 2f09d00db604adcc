"""Zuglang phrase dictionary."""

from __future__ import annotations

import types
from dataclasses import dataclass

TRANSLATIONS = types.MappingProxyType(
    {
        "xelgo kravid timzor pluven?": "Hello guys, what's up?",
        "morgat flixu": "Good morning",
        "zynthar polken": "Thank you",
        "brevix qaltor myx?": "How are you?",
    }
)


@dataclass(frozen=True)
class Translation:
    expression: str
    text: str
    found: bool


def normalize(expression: str) -> str:
    return expression.strip().lower()


def translate(expression: str) -> Translation:
    """Look up a Zuglang expression, ignoring case and surrounding whitespace.

    An unknown expression is not an error: the returned ``Translation`` has
    ``found=False`` and a note in ``text``.
    """
    text = TRANSLATIONS.get(normalize(expression))
    if text is not None:
        return Translation(expression=expression, text=text, found=True)
    return Translation(
        expression=expression,
        text=(
            f'Translation not found for "{expression}". '
            "This Zuglang expression is not in the dictionary yet."
        ),
        found=False,
    )
