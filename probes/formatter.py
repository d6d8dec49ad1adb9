"""Output line rendering."""

from __future__ import annotations

from collections.abc import Iterable

ABSENT = "-"
SEPARATOR = "; "


def format_result(name: str, result: str | None) -> str:
    """Render ``name: value``, or ``name: -`` when nothing was observed."""
    return f"{name}: {result if result else ABSENT}"


def join_fragments(fragments: Iterable[str]) -> str:
    return SEPARATOR.join(fragments)
