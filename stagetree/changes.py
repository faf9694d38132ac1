"""Collaborator contracts between the selection tree and a diff backend.

``DiffProvider`` lists changed paths and per-file line statistics.
``StageSink`` receives the collected selection, one path at a time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class ChangeStatus(Enum):
    """File-level change kind reported by the diff backend."""

    ADDED = "A"
    MODIFIED = "M"
    DELETED = "D"
    RENAMED = "R"
    COPIED = "C"
    TYPE_CHANGED = "T"
    UNTRACKED = "?"
    CONFLICTED = "U"

    @property
    def badge(self) -> str:
        return self.value


@dataclass(frozen=True)
class ChangedPath:
    """One changed path in diff iteration order."""

    path: str
    status: ChangeStatus


@dataclass(frozen=True)
class LineStats:
    """Added/removed line counts for one file."""

    added: int = 0
    removed: int = 0


class DiffProvider(Protocol):
    def list_changed_paths(self) -> list[ChangedPath]:
        ...

    def line_stats(self, path: str) -> LineStats:
        ...


class StageSink(Protocol):
    def stage(self, path: str) -> None:
        ...


__all__ = [
    "ChangeStatus",
    "ChangedPath",
    "LineStats",
    "DiffProvider",
    "StageSink",
]
