"""Tri-state selection: top-down forcing and bottom-up mixed aggregation.

``set_enabled`` is the explicit user action. ``refresh_states`` re-derives
``enabled``/``is_mixed`` for every internal node from its children, deepest
nodes first. Pending edits queue user input until the next update cycle.
"""

from __future__ import annotations

from .collect import iter_preorder
from .types import SelectionNode


def propagate_enabled(node: SelectionNode, value: bool) -> None:
    """Set ``enabled`` on ``node`` and its whole subtree, ignoring prior state.

    Descendants' queued edits are dropped since they are superseded.
    """
    for index, current in enumerate(iter_preorder(node)):
        current.enabled = value
        if index > 0:
            current.pending_edit = None


def aggregate_node(node: SelectionNode) -> None:
    """Recompute ``enabled``/``is_mixed`` of ``node`` from its direct children."""
    children = node.children
    if not children:
        node.is_mixed = False
        return

    if len(children) == 1:
        child = children[0]
        node.enabled = child.enabled
        node.is_mixed = child.enabled and child.is_mixed
        return

    enabled_count = sum(1 for child in children if child.enabled)
    if enabled_count == len(children):
        node.enabled = True
        node.is_mixed = False
    elif enabled_count == 0:
        node.enabled = False
        node.is_mixed = False
    else:
        node.enabled = True
        node.is_mixed = True


def refresh_states(root: SelectionNode) -> None:
    """Aggregate every node under ``root`` bottom-up."""
    for node in reversed(list(iter_preorder(root))):
        aggregate_node(node)


def set_enabled(node: SelectionNode, value: bool) -> bool:
    """Apply a user toggle to ``node`` and return the value actually forced.

    A node whose derived state is mixed is always switched fully on.
    """
    refresh_states(node)
    effective = True if node.is_mixed else bool(value)
    propagate_enabled(node, effective)
    return effective


def request_edit(node: SelectionNode, value: bool) -> None:
    """Queue a user edit for the next update cycle."""
    node.pending_edit = bool(value)


def apply_pending_edits(root: SelectionNode) -> int:
    """Consume queued edits in pre-order and return how many were applied.

    An ancestor's edit clears queued edits below it, so those are skipped.
    """
    applied = 0
    for node in list(iter_preorder(root)):
        value = node.pending_edit
        if value is None:
            continue
        node.pending_edit = None
        set_enabled(node, value)
        applied += 1
    return applied


def run_update_cycle(root: SelectionNode) -> int:
    """Apply pending edits, then re-aggregate the whole tree."""
    applied = apply_pending_edits(root)
    refresh_states(root)
    return applied
