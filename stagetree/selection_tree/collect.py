"""Traversal helpers and the selected-leaf collector."""

from __future__ import annotations

from collections.abc import Iterator

from .path_tree import split_change_path
from .types import SelectionNode


def iter_preorder(root: SelectionNode) -> Iterator[SelectionNode]:
    """Yield ``root`` and its descendants, each node before its children."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def collect_selected_paths(root: SelectionNode) -> list[str]:
    """Return ``full_path`` of every enabled leaf in pre-order.

    Folder state is not consulted; only leaves contribute.
    """
    return [
        node.full_path
        for node in iter_preorder(root)
        if node.is_leaf and node.enabled and node.full_path
    ]


def node_path(node: SelectionNode) -> str:
    """Return the ``/``-joined segment path of ``node`` below the root."""
    segments: list[str] = []
    current: SelectionNode | None = node
    while current is not None and current.parent is not None:
        segments.append(current.name)
        current = current.parent
    return "/".join(reversed(segments))


def find_nodes_by_path(root: SelectionNode, path: str) -> list[SelectionNode]:
    """Return nodes whose segment path equals ``path`` (either separator).

    Trailing separators are ignored so ``src/`` addresses folder ``src``.
    Duplicate leaves for the same path are all returned.
    """
    wanted = "/".join(split_change_path(path.rstrip("/\\")))
    if not wanted:
        return []
    return [node for node in iter_preorder(root) if node.parent is not None and node_path(node) == wanted]


def index_nodes_by_id(root: SelectionNode) -> dict[int, SelectionNode]:
    return {node.id: node for node in iter_preorder(root)}
