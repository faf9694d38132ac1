"""Tests for selected-leaf collection and path addressing helpers."""

from __future__ import annotations

import unittest

from stagetree.changes import LineStats
from stagetree.selection_tree import (
    SelectionNode,
    assemble_selection_tree,
    build_path_tree,
    collect_selected_paths,
    find_nodes_by_path,
    index_nodes_by_id,
    node_path,
    refresh_states,
    set_enabled,
)


class _ZeroStats:
    def line_stats(self, path: str) -> LineStats:
        return LineStats()


def _tree(paths: list[str]) -> SelectionNode:
    return assemble_selection_tree(build_path_tree(paths), _ZeroStats())


class CollectSelectedPathsTests(unittest.TestCase):
    def test_end_to_end_example(self) -> None:
        root = _tree(["a/b.txt", "a/c.txt", "d.txt"])

        set_enabled(find_nodes_by_path(root, "a/b.txt")[0], False)
        refresh_states(root)

        self.assertEqual(collect_selected_paths(root), ["a/c.txt", "d.txt"])

    def test_all_enabled_returns_every_leaf_in_preorder(self) -> None:
        paths = ["src/app.py", "README.md", "src/lib/util.py", "tests/test_app.py"]
        root = _tree(paths)

        self.assertEqual(
            collect_selected_paths(root),
            ["src/app.py", "src/lib/util.py", "README.md", "tests/test_app.py"],
        )

    def test_toggling_one_leaf_removes_only_that_path(self) -> None:
        paths = ["a/b.txt", "a/c.txt", "a/d/e.txt", "f.txt"]
        root = _tree(paths)
        before = collect_selected_paths(root)

        for path in paths:
            with self.subTest(path=path):
                leaf = find_nodes_by_path(root, path)[0]
                set_enabled(leaf, False)
                refresh_states(root)

                after = collect_selected_paths(root)
                self.assertEqual(after, [p for p in before if p != path])

                set_enabled(leaf, True)
                refresh_states(root)

    def test_folder_state_is_never_consulted(self) -> None:
        root = _tree(["a/b.txt", "a/c.txt"])
        folder = find_nodes_by_path(root, "a")[0]
        folder.enabled = False
        folder.is_mixed = False

        self.assertEqual(collect_selected_paths(root), ["a/b.txt", "a/c.txt"])

        folder.enabled = True
        for leaf in folder.children:
            leaf.enabled = False

        self.assertEqual(collect_selected_paths(root), [])

    def test_leaf_with_empty_full_path_is_skipped(self) -> None:
        root = _tree(["", "x.txt"])

        self.assertEqual(collect_selected_paths(root), ["x.txt"])

    def test_empty_tree_collects_nothing(self) -> None:
        self.assertEqual(collect_selected_paths(_tree([])), [])

    def test_duplicate_paths_are_collected_once_per_leaf(self) -> None:
        root = _tree(["a/b.txt", "a/b.txt"])

        self.assertEqual(collect_selected_paths(root), ["a/b.txt", "a/b.txt"])


class PathAddressingTests(unittest.TestCase):
    def test_node_path_joins_segments_with_slashes(self) -> None:
        root = _tree(["src\\pkg\\mod.py"])
        leaf = find_nodes_by_path(root, "src/pkg/mod.py")[0]

        self.assertEqual(node_path(leaf), "src/pkg/mod.py")
        self.assertEqual(leaf.full_path, "src\\pkg\\mod.py")
        self.assertEqual(node_path(root), "")

    def test_find_nodes_by_path_handles_folders_and_trailing_separator(self) -> None:
        root = _tree(["a/b.txt", "a/c.txt"])

        folders = find_nodes_by_path(root, "a/")
        self.assertEqual([node.name for node in folders], ["a"])
        self.assertEqual(find_nodes_by_path(root, "missing"), [])
        self.assertEqual(find_nodes_by_path(root, ""), [])

    def test_index_nodes_by_id_covers_every_node(self) -> None:
        root = _tree(["a/b.txt", "c.txt"])

        index = index_nodes_by_id(root)

        self.assertEqual(sorted(index), [0, 1, 2, 3])
        self.assertIs(index[0], root)


if __name__ == "__main__":
    unittest.main()
