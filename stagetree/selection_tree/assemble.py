"""Selection-tree assembly from path descriptors plus backend line stats."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from ..changes import ChangedPath, ChangeStatus, DiffProvider
from .path_tree import FileDescriptor, FolderDescriptor, build_path_tree
from .types import ROOT_DEPTH, ROOT_ID, ROOT_NAME, SelectionNode


def assemble_selection_tree(
    path_tree: FolderDescriptor,
    diff_provider: DiffProvider,
    statuses: Mapping[str, ChangeStatus] | None = None,
) -> SelectionNode:
    """Create selection nodes in pre-order with ids counting up from the root.

    Every file descriptor costs one ``diff_provider.line_stats`` call. Errors
    from the provider are not caught; the partially built tree is dropped.
    """
    root = SelectionNode(id=ROOT_ID, name=ROOT_NAME, depth=ROOT_DEPTH)
    next_id = ROOT_ID + 1

    # Reversed pushes keep pops in child order.
    stack: list[tuple[FolderDescriptor | FileDescriptor, SelectionNode]] = [
        (child, root) for child in reversed(path_tree.children)
    ]
    while stack:
        descriptor, parent = stack.pop()
        depth = parent.depth + 1
        if isinstance(descriptor, FileDescriptor):
            stats = diff_provider.line_stats(descriptor.full_path)
            parent.add_child(
                SelectionNode(
                    id=next_id,
                    name=descriptor.name,
                    depth=depth,
                    full_path=descriptor.full_path,
                    added_lines=int(stats.added),
                    removed_lines=int(stats.removed),
                    status=statuses.get(descriptor.full_path) if statuses is not None else None,
                )
            )
            next_id += 1
            continue

        folder = parent.add_child(SelectionNode(id=next_id, name=descriptor.name, depth=depth))
        next_id += 1
        stack.extend((child, folder) for child in reversed(descriptor.children))
    return root


def build_selection_tree(changes: Iterable[ChangedPath], diff_provider: DiffProvider) -> SelectionNode:
    """Run builder and assembler over a changed-path listing."""
    change_list = list(changes)
    statuses = {change.path: change.status for change in change_list}
    path_tree = build_path_tree(change.path for change in change_list)
    return assemble_selection_tree(path_tree, diff_provider, statuses=statuses)
