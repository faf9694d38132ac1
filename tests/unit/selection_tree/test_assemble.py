"""Tests for pre-order selection-tree assembly and line-stat lookups."""

from __future__ import annotations

import unittest

from stagetree.changes import ChangedPath, ChangeStatus, LineStats
from stagetree.selection_tree import (
    ROOT_DEPTH,
    ROOT_ID,
    ROOT_NAME,
    assemble_selection_tree,
    build_path_tree,
    build_selection_tree,
    iter_preorder,
)


class _FakeDiffProvider:
    def __init__(self, stats: dict[str, LineStats] | None = None, fail_on: str | None = None) -> None:
        self.stats = stats or {}
        self.fail_on = fail_on
        self.calls: list[str] = []

    def list_changed_paths(self) -> list[ChangedPath]:
        return [ChangedPath(path, ChangeStatus.MODIFIED) for path in self.stats]

    def line_stats(self, path: str) -> LineStats:
        self.calls.append(path)
        if path == self.fail_on:
            raise RuntimeError(f"diff failed for {path}")
        return self.stats.get(path, LineStats())


class AssembleSelectionTreeTests(unittest.TestCase):
    def test_root_is_synthetic_with_id_zero_and_negative_depth(self) -> None:
        root = assemble_selection_tree(build_path_tree(["x.txt"]), _FakeDiffProvider())

        self.assertEqual((root.id, root.depth, root.name, root.full_path), (ROOT_ID, ROOT_DEPTH, ROOT_NAME, ""))
        self.assertIsNone(root.parent)
        self.assertEqual(root.children[0].depth, 0)
        self.assertIs(root.children[0].parent, root)

    def test_ids_strictly_increase_in_preorder(self) -> None:
        paths = ["a/b/c.txt", "a/d.txt", "e.txt", "a/b/f.txt", "g/h.txt"]
        root = assemble_selection_tree(build_path_tree(paths), _FakeDiffProvider())

        ids = [node.id for node in iter_preorder(root)]
        self.assertEqual(ids, list(range(len(ids))))

    def test_depths_and_full_paths_follow_structure(self) -> None:
        root = assemble_selection_tree(build_path_tree(["a/b.txt", "a/c.txt", "d.txt"]), _FakeDiffProvider())

        rows = [(node.name, node.depth, node.full_path) for node in iter_preorder(root)]
        self.assertEqual(
            rows,
            [
                ("Root", -1, ""),
                ("a", 0, ""),
                ("b.txt", 1, "a/b.txt"),
                ("c.txt", 1, "a/c.txt"),
                ("d.txt", 0, "d.txt"),
            ],
        )

    def test_line_stats_fill_both_fields_and_only_on_leaves(self) -> None:
        provider = _FakeDiffProvider({"a/b.txt": LineStats(added=7, removed=3), "d.txt": LineStats(added=1, removed=0)})
        root = assemble_selection_tree(build_path_tree(["a/b.txt", "d.txt"]), provider)

        folder, leaf_b = root.children[0], root.children[0].children[0]
        leaf_d = root.children[1]
        self.assertEqual((leaf_b.added_lines, leaf_b.removed_lines), (7, 3))
        self.assertEqual((leaf_d.added_lines, leaf_d.removed_lines), (1, 0))
        self.assertEqual((folder.added_lines, folder.removed_lines), (0, 0))

    def test_one_stats_call_per_file_in_preorder(self) -> None:
        provider = _FakeDiffProvider()
        assemble_selection_tree(build_path_tree(["a/b.txt", "d.txt", "a/b.txt"]), provider)

        self.assertEqual(provider.calls, ["a/b.txt", "a/b.txt", "d.txt"])

    def test_provider_failure_propagates(self) -> None:
        provider = _FakeDiffProvider(fail_on="a/c.txt")

        with self.assertRaises(RuntimeError):
            assemble_selection_tree(build_path_tree(["a/b.txt", "a/c.txt", "d.txt"]), provider)
        self.assertNotIn("d.txt", provider.calls)

    def test_every_node_starts_enabled_and_not_mixed(self) -> None:
        root = assemble_selection_tree(build_path_tree(["a/b.txt", "c.txt"]), _FakeDiffProvider())

        for node in iter_preorder(root):
            self.assertTrue(node.enabled)
            self.assertFalse(node.is_mixed)
            self.assertIsNone(node.pending_edit)

    def test_build_selection_tree_attaches_statuses(self) -> None:
        changes = [
            ChangedPath("src/new.py", ChangeStatus.ADDED),
            ChangedPath("old.py", ChangeStatus.DELETED),
        ]
        root = build_selection_tree(changes, _FakeDiffProvider())

        leaves = {node.full_path: node.status for node in iter_preorder(root) if node.is_leaf}
        self.assertEqual(leaves, {"src/new.py": ChangeStatus.ADDED, "old.py": ChangeStatus.DELETED})
        self.assertIsNone(root.children[0].status)

    def test_empty_change_list_yields_bare_root(self) -> None:
        root = build_selection_tree([], _FakeDiffProvider())

        self.assertEqual(root.children, [])


if __name__ == "__main__":
    unittest.main()
