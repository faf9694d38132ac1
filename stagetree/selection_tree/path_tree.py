"""Flat changed-path list to intermediate folder/file descriptors."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

_SEPARATOR_RE = re.compile(r"[\\/]")


@dataclass(frozen=True)
class FileDescriptor:
    """Leaf descriptor keeping the original, unsplit path."""

    name: str
    full_path: str


@dataclass
class FolderDescriptor:
    """Folder descriptor with files and folders in first-seen order."""

    name: str
    children: list[FolderDescriptor | FileDescriptor] = field(default_factory=list)

    def find_folder(self, name: str) -> FolderDescriptor | None:
        """Return the first direct folder child called ``name``."""
        for child in self.children:
            if isinstance(child, FolderDescriptor) and child.name == name:
                return child
        return None


PathTreeEntry = FolderDescriptor | FileDescriptor


def split_change_path(path: str) -> list[str]:
    """Split on both ``/`` and ``\\``; empty segments are kept."""
    return _SEPARATOR_RE.split(path)


def build_path_tree(paths: Iterable[str]) -> FolderDescriptor:
    """Build an unnamed root folder holding every path as a file leaf.

    Children are never sorted and duplicate paths produce duplicate leaves.
    Malformed input (leading/trailing/doubled separators) yields empty-named
    segments instead of errors.
    """
    root = FolderDescriptor(name="")
    for path in paths:
        segments = split_change_path(path)
        parent = root
        for segment in segments[:-1]:
            folder = parent.find_folder(segment)
            if folder is None:
                folder = FolderDescriptor(name=segment)
                parent.children.append(folder)
            parent = folder
        parent.children.append(FileDescriptor(name=segments[-1], full_path=path))
    return root
