# metadata.py — best-effort summary of a decoded puzzle payload
"""
Summaries never fail: a field that is missing or has the wrong shape is
simply left as None (or False for `has_solution`).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from .config import (
    COMPACT_CELLS, COMPACT_EXTRA_VALUE, COMPACT_EXTRAS, COMPACT_PREFIXES, STANDARD_FIELDS,
)


class Origin(Enum):
    STANDARD = "fpuzzles"
    COMPACT = "ctc"


@dataclass(frozen=True)
class GridMetadata:
    title: Optional[str] = None
    author: Optional[str] = None
    rules: Optional[str] = None
    rows_cols: Optional[Tuple[int, int]] = None
    has_solution: bool = False


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


# ---------- Standard (f-puzzles) ----------
def _standard_metadata(value: dict) -> GridMetadata:
    size = value.get(STANDARD_FIELDS["size"])
    rows_cols = None
    if isinstance(size, int) and not isinstance(size, bool) and size >= 0:
        rows_cols = (size, size)
    return GridMetadata(
        title=_text(value.get(STANDARD_FIELDS["title"])),
        author=_text(value.get(STANDARD_FIELDS["author"])),
        rules=_text(value.get(STANDARD_FIELDS["rules"])),
        rows_cols=rows_cols,
        # present at all, even as null
        has_solution=STANDARD_FIELDS["solution"] in value,
    )


# ---------- Compact (CtC) ----------
def find_prefixed(value: dict, prefix: str) -> Optional[str]:
    """Remainder of the first extras entry whose text starts with `prefix`."""
    extras = value.get(COMPACT_EXTRAS)
    if not isinstance(extras, list):
        return None
    for entry in extras:
        if not isinstance(entry, dict):
            continue
        text = entry.get(COMPACT_EXTRA_VALUE)
        if isinstance(text, str) and text.startswith(prefix):
            return text[len(prefix):]
    return None


def _compact_dimensions(value: dict) -> Optional[Tuple[int, int]]:
    rows = value.get(COMPACT_CELLS)
    if not isinstance(rows, list) or not rows or not isinstance(rows[0], list):
        return None
    return len(rows), len(rows[0])


def _compact_metadata(value: dict) -> GridMetadata:
    return GridMetadata(
        title=find_prefixed(value, COMPACT_PREFIXES["title"]),
        author=find_prefixed(value, COMPACT_PREFIXES["author"]),
        rules=find_prefixed(value, COMPACT_PREFIXES["rules"]),
        rows_cols=_compact_dimensions(value),
        has_solution=find_prefixed(value, COMPACT_PREFIXES["solution"]) is not None,
    )


def metadata(value: Any, origin: Origin) -> GridMetadata:
    if not isinstance(value, dict):
        return GridMetadata()
    if origin is Origin.STANDARD:
        return _standard_metadata(value)
    if origin is Origin.COMPACT:
        return _compact_metadata(value)
    raise ValueError(f"Unknown payload origin: {origin!r}")
