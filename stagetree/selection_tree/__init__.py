"""Selection-tree engine: build, tri-state propagation, leaf collection.

This package contains non-UI tree primitives:
- intermediate folder/file descriptors built from a flat path list
- pre-order assembly into ``SelectionNode`` trees with line statistics
- top-down forced state and bottom-up mixed-state aggregation
- collection of enabled leaf paths for staging
"""

from __future__ import annotations

from .assemble import assemble_selection_tree, build_selection_tree
from .collect import collect_selected_paths, find_nodes_by_path, index_nodes_by_id, iter_preorder, node_path
from .path_tree import FileDescriptor, FolderDescriptor, PathTreeEntry, build_path_tree, split_change_path
from .rendering import (
    CHECK_DISABLED,
    CHECK_ENABLED,
    CHECK_MIXED,
    check_marker_for,
    format_selection_row,
    render_selection_tree,
)
from .state import (
    aggregate_node,
    apply_pending_edits,
    propagate_enabled,
    refresh_states,
    request_edit,
    run_update_cycle,
    set_enabled,
)
from .types import ROOT_DEPTH, ROOT_ID, ROOT_NAME, SelectionNode

__all__ = [
    "SelectionNode",
    "ROOT_ID",
    "ROOT_DEPTH",
    "ROOT_NAME",
    "FileDescriptor",
    "FolderDescriptor",
    "PathTreeEntry",
    "build_path_tree",
    "split_change_path",
    "assemble_selection_tree",
    "build_selection_tree",
    "propagate_enabled",
    "aggregate_node",
    "refresh_states",
    "set_enabled",
    "request_edit",
    "apply_pending_edits",
    "run_update_cycle",
    "iter_preorder",
    "collect_selected_paths",
    "node_path",
    "find_nodes_by_path",
    "index_nodes_by_id",
    "CHECK_ENABLED",
    "CHECK_DISABLED",
    "CHECK_MIXED",
    "check_marker_for",
    "format_selection_row",
    "render_selection_tree",
]
