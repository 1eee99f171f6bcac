# visibility.py — pick which puzzle revision to show outside the editor

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence, Union

logger = logging.getLogger(__name__)


class VisibilityLevel(IntEnum):
    RESTRICTED = 0
    PUBLIC = 1
    PUBLISHED = 2

    @classmethod
    def from_str(cls, name: str) -> "VisibilityLevel":
        """Parse the persisted lowercase name (restricted/public/published)."""
        try:
            return cls[name.strip().upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"Unrecognised visibility: {name!r}") from None


@dataclass(frozen=True)
class Revision:
    visibility: VisibilityLevel
    sequence_index: int = 0


RevisionLike = Union[Revision, VisibilityLevel]


def _level(rev: RevisionLike) -> VisibilityLevel:
    return rev.visibility if isinstance(rev, Revision) else VisibilityLevel(rev)


def select_best_visible(revisions: Sequence[RevisionLike]) -> int:
    """Index of the last revision sharing the highest visibility.

    A later revision replaces the current best unless the best is
    strictly more visible.
    """
    if not revisions:
        raise ValueError("select_best_visible needs at least one revision")
    best_index, best_level = 0, _level(revisions[0])
    for idx in range(1, len(revisions)):
        level = _level(revisions[idx])
        if best_level > level:
            continue
        best_index, best_level = idx, level
    logger.debug(f"Selected revision {best_index} of {len(revisions)} ({best_level.name})")
    return best_index


def best_visible_revision(revisions: Sequence[RevisionLike]) -> RevisionLike:
    return revisions[select_best_visible(revisions)]
