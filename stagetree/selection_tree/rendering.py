"""Row formatting for selection trees (checkbox, name, status, line stats)."""

from __future__ import annotations

from ..changes import ChangeStatus
from ..ui_theme import DEFAULT_THEME, UITheme
from .collect import iter_preorder
from .types import SelectionNode

CHECK_ENABLED = "[x]"
CHECK_DISABLED = "[ ]"
CHECK_MIXED = "[~]"


def check_marker_for(node: SelectionNode) -> str:
    if node.is_mixed:
        return CHECK_MIXED
    return CHECK_ENABLED if node.enabled else CHECK_DISABLED


def _check_color(node: SelectionNode, theme: UITheme) -> str:
    if node.is_mixed:
        return theme.check_mixed
    return theme.check_enabled if node.enabled else theme.check_disabled


def _status_color(status: ChangeStatus, theme: UITheme) -> str:
    if status is ChangeStatus.UNTRACKED or status is ChangeStatus.ADDED:
        return theme.status_untracked
    if status is ChangeStatus.DELETED:
        return theme.status_deleted
    return theme.status_changed


def format_selection_row(node: SelectionNode, colorize: bool = True, theme: UITheme | None = None) -> str:
    """Render one node as ``<indent><marker> <name>`` plus leaf details."""
    active_theme = theme or DEFAULT_THEME
    indent = "  " * max(0, node.depth)
    marker = check_marker_for(node)
    if node.is_leaf:
        name = node.name
        name_color = active_theme.tree_file
    else:
        name = node.name + "/"
        name_color = active_theme.tree_dir

    if not colorize:
        row = f"{indent}{marker} {name}"
        if node.is_leaf:
            status = f" {node.status.badge}" if node.status is not None else ""
            row += f"{status} +{node.added_lines} -{node.removed_lines}"
        return row

    reset = active_theme.reset
    row = f"{indent}{_check_color(node, active_theme)}{marker}{reset} {name_color}{name}{reset}"
    if node.is_leaf:
        if node.status is not None:
            row += f" {_status_color(node.status, active_theme)}{node.status.badge}{reset}"
        row += (
            f" {active_theme.lines_added}+{node.added_lines}{reset}"
            f" {active_theme.lines_removed}-{node.removed_lines}{reset}"
        )
    return row


def render_selection_tree(root: SelectionNode, colorize: bool = True, theme: UITheme | None = None) -> list[str]:
    """Render every node below the synthetic root in pre-order."""
    return [
        format_selection_row(node, colorize=colorize, theme=theme)
        for node in iter_preorder(root)
        if node is not root
    ]
