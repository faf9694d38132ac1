"""Selection-tree datatypes shared by builder, state and collector modules."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..changes import ChangeStatus

ROOT_ID = 0
ROOT_DEPTH = -1
ROOT_NAME = "Root"


@dataclass(eq=False)
class SelectionNode:
    """One folder or file row with tri-state selection.

    ``parent`` is a back reference only; ``children`` owns the subtree.
    ``is_mixed`` is recomputed by aggregation and never set by callers.
    ``pending_edit`` holds a queued user edit until the next update cycle.
    """

    id: int
    name: str
    depth: int
    full_path: str = ""
    parent: SelectionNode | None = field(default=None, repr=False)
    children: list[SelectionNode] = field(default_factory=list, repr=False)
    enabled: bool = True
    is_mixed: bool = False
    pending_edit: bool | None = None
    added_lines: int = 0
    removed_lines: int = 0
    status: ChangeStatus | None = None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def add_child(self, child: SelectionNode) -> SelectionNode:
        child.parent = self
        self.children.append(child)
        return child


__all__ = [
    "ROOT_ID",
    "ROOT_DEPTH",
    "ROOT_NAME",
    "SelectionNode",
]
