"""Selection session: one tree instance plus rebuild and update-cycle wiring.

The session swaps in a new tree only after it is fully built and
aggregated, so a failing diff backend leaves the previous tree in place.
User edits are queued and consumed by the next ``refresh`` cycle.
"""

from __future__ import annotations

import logging

from .changes import DiffProvider, StageSink
from .selection_tree import (
    SelectionNode,
    build_selection_tree,
    collect_selected_paths,
    find_nodes_by_path,
    index_nodes_by_id,
    refresh_states,
    request_edit,
    run_update_cycle,
    set_enabled,
)

logger = logging.getLogger(__name__)


class SelectionSession:
    """Owns the current selection tree for one repository.

    Not thread-safe; callers serialize rebuilds and edits.
    """

    def __init__(self, diff_provider: DiffProvider, stage_sink: StageSink | None = None) -> None:
        self.diff_provider = diff_provider
        self.stage_sink = stage_sink
        self.root: SelectionNode | None = None
        self._nodes_by_id: dict[int, SelectionNode] = {}

    def rebuild(self) -> SelectionNode:
        """Build a fresh tree from the backend and swap it in.

        Selection is reset: every node starts enabled. On failure the previous
        tree stays current and the error propagates.
        """
        try:
            changes = self.diff_provider.list_changed_paths()
            new_root = build_selection_tree(changes, self.diff_provider)
        except Exception:
            logger.warning("selection tree rebuild failed; keeping previous tree", exc_info=True)
            raise
        refresh_states(new_root)
        self.root = new_root
        self._nodes_by_id = index_nodes_by_id(new_root)
        logger.debug("rebuilt selection tree with %d change(s)", len(changes))
        return new_root

    def _require_root(self) -> SelectionNode:
        if self.root is None:
            raise RuntimeError("selection tree has not been built")
        return self.root

    def node(self, node_id: int) -> SelectionNode:
        self._require_root()
        try:
            return self._nodes_by_id[node_id]
        except KeyError:
            raise KeyError(f"no selection node with id {node_id}") from None

    def nodes_at(self, path: str) -> list[SelectionNode]:
        return find_nodes_by_path(self._require_root(), path)

    def request_toggle(self, node_id: int, value: bool) -> None:
        """Queue a user edit; it takes effect on the next ``refresh``."""
        request_edit(self.node(node_id), value)

    def refresh(self) -> int:
        """Run one update cycle and return the number of edits applied."""
        return run_update_cycle(self._require_root())

    def set_enabled(self, node_id: int, value: bool) -> bool:
        """Apply an edit immediately and re-aggregate the whole tree."""
        effective = set_enabled(self.node(node_id), value)
        refresh_states(self._require_root())
        return effective

    def set_all(self, value: bool) -> bool:
        return self.set_enabled(self._require_root().id, value)

    def selected_paths(self) -> list[str]:
        return collect_selected_paths(self._require_root())

    def stage_selected(self) -> list[str]:
        """Stage every selected leaf in collector order, then rebuild."""
        if self.stage_sink is None:
            raise RuntimeError("no stage sink configured")
        paths = self.selected_paths()
        for path in paths:
            self.stage_sink.stage(path)
        logger.debug("staged %d path(s)", len(paths))
        self.rebuild()
        return paths
