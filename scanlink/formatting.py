"""Human readable formatting of value sequences."""

from __future__ import annotations

from collections.abc import Iterable


def _format_value(value: object) -> str:
    if isinstance(value, float):
        text = repr(value)
        if text.endswith(".0"):
            return text[:-2]
        return text
    return str(value)


def format_range(values: Iterable[object]) -> str:
    """Format values as ``{a, b, c}``; an empty sequence gives ``{}``."""
    return "{" + ", ".join(_format_value(value) for value in values) + "}"