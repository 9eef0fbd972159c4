"""Tests for directory traversal, refresh, and selection clamping."""

from __future__ import annotations

import random
import tempfile
import unittest
from pathlib import Path

from lazycd.directory_view import ASCEND_ROW, REFRESH_ROW, DirectoryView
from lazycd.errors import FilesystemError, NavigationError
from lazycd.listing import Entry, read_listing


def _make_tree(root: Path) -> None:
    (root / ".git").mkdir()
    (root / "README.md").write_text("hello\n", encoding="utf-8")
    (root / "src").mkdir()
    (root / "src" / "main.py").write_text("print()\n", encoding="utf-8")


class DirectoryViewTraversalTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).absolute()
        _make_tree(self.root)
        self.view = DirectoryView.open(self.root)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_open_starts_at_ascend_row_with_synthetic_rows(self) -> None:
        self.assertEqual(self.view.selected, ASCEND_ROW)
        self.assertEqual(self.view.row_count, 5)
        self.assertEqual(self.view.row_labels(), ["../", "./", ".git/", "README.md", "src/"])
        self.assertIsNone(self.view.entry_for_row(REFRESH_ROW))
        self.assertEqual(self.view.entry_for_row(4).name, "src")

    def test_refresh_is_idempotent_for_unchanged_directory(self) -> None:
        before = self.view.listing
        self.view.refresh()
        self.assertEqual(self.view.listing, before)

    def test_refresh_picks_up_external_changes(self) -> None:
        (self.root / "new.txt").write_text("", encoding="utf-8")
        self.view.refresh()
        self.assertIn("new.txt", [entry.name for entry in self.view.listing])

    def test_refresh_failure_leaves_state_unchanged(self) -> None:
        view = DirectoryView.open(self.root / "src")
        view.select(2)
        before = view.listing
        (self.root / "src" / "main.py").unlink()
        (self.root / "src").rmdir()

        with self.assertRaises(FilesystemError):
            view.refresh()

        self.assertEqual(view.listing, before)
        self.assertEqual(view.selected, 2)

    def test_enter_refresh_row_keeps_directory_and_selection(self) -> None:
        self.view.select(REFRESH_ROW)
        before = len(self.view.listing)

        self.view.enter()

        self.assertEqual(self.view.current_path, self.root)
        self.assertEqual(len(self.view.listing), before)
        self.assertEqual(self.view.selected, REFRESH_ROW)

    def test_enter_directory_descends_and_resets_selection(self) -> None:
        self.view.select(4)

        self.view.enter()

        self.assertEqual(self.view.current_path, self.root / "src")
        self.assertEqual([entry.name for entry in self.view.listing], ["main.py"])
        self.assertEqual(self.view.selected, ASCEND_ROW)

    def test_enter_ascend_row_moves_to_parent_and_resets_selection(self) -> None:
        self.view.select(4)
        self.view.enter()
        self.view.move_selection_down()

        self.view.select(ASCEND_ROW)
        self.view.enter()

        self.assertEqual(self.view.current_path, self.root)
        self.assertEqual(self.view.selected, ASCEND_ROW)
        self.assertEqual(self.view.row_count, 5)

    def test_enter_ascend_at_filesystem_root_stays_valid(self) -> None:
        view = DirectoryView.open(Path("/"))
        view.enter()
        self.assertEqual(view.current_path, Path("/"))
        self.assertEqual(view.selected, ASCEND_ROW)
        self.assertGreaterEqual(view.row_count, 2)

    def test_open_collapses_dot_dot_so_ascend_reaches_grandparent(self) -> None:
        view = DirectoryView.open(self.root / "src" / "..")
        self.assertEqual(view.current_path, self.root)

        view.enter()

        self.assertEqual(view.current_path, self.root.parent)

    def test_enter_non_directory_raises_navigation_error_without_mutation(self) -> None:
        self.view.select(3)
        before_listing = self.view.listing

        with self.assertRaises(NavigationError) as ctx:
            self.view.enter()

        self.assertEqual(ctx.exception.path, self.root / "README.md")
        self.assertEqual(self.view.listing, before_listing)
        self.assertEqual(self.view.selected, 3)
        self.assertEqual(self.view.current_path, self.root)

    def test_enter_without_selection_is_noop(self) -> None:
        self.view.select(None)
        self.view.enter()
        self.assertEqual(self.view.current_path, self.root)
        self.assertIsNone(self.view.selected)

    def test_refresh_listener_runs_after_traversal(self) -> None:
        calls: list[Path] = []
        self.view.add_refresh_listener(lambda: calls.append(self.view.current_path))
        self.view.select(4)

        self.view.enter()

        self.assertEqual(calls, [self.root / "src"])


class DirectoryViewErrorMappingTests(unittest.TestCase):
    def _view_with_reader(self, error: OSError) -> DirectoryView:
        listing = (Entry("locked", Path("/base/locked"), is_dir=True),)

        def reader(directory: Path, _show_hidden: bool) -> tuple[Entry, ...]:
            if directory == Path("/base"):
                return listing
            raise error

        view = DirectoryView(Path("/base"), reader=reader)
        view.refresh()
        view.select(2)
        return view

    def test_permission_denied_is_navigation_error(self) -> None:
        view = self._view_with_reader(PermissionError(13, "Permission denied"))

        with self.assertRaises(NavigationError) as ctx:
            view.enter()

        self.assertIn("Permission denied", str(ctx.exception))
        self.assertEqual(view.current_path, Path("/base"))
        self.assertEqual(view.selected, 2)

    def test_other_os_errors_are_filesystem_errors(self) -> None:
        view = self._view_with_reader(OSError(5, "Input/output error"))

        with self.assertRaises(FilesystemError):
            view.enter()

        self.assertEqual(view.current_path, Path("/base"))


class DirectoryViewMovementTests(unittest.TestCase):
    def _view(self, count: int) -> DirectoryView:
        listing = tuple(Entry(f"e{idx}", Path(f"/base/e{idx}"), is_dir=False) for idx in range(count))
        return DirectoryView(Path("/base"), listing)

    def test_movement_clamps_at_both_ends(self) -> None:
        view = self._view(2)
        view.move_selection_up()
        self.assertEqual(view.selected, 0)
        for _ in range(10):
            view.move_selection_down()
        self.assertEqual(view.selected, 3)

    def test_selection_stays_in_range_for_random_movement(self) -> None:
        rng = random.Random(1234)
        for count in (0, 1, 5, 40):
            view = self._view(count)
            for _ in range(300):
                if rng.random() < 0.5:
                    view.move_selection_down()
                else:
                    view.move_selection_up()
                self.assertGreaterEqual(view.selected, 0)
                self.assertLessEqual(view.selected, count + 1)

    def test_refresh_clamps_selection_when_listing_shrinks(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("a", "b", "c"):
                (root / name).write_text("", encoding="utf-8")
            view = DirectoryView(root, read_listing(root))
            view.select(4)
            (root / "b").unlink()
            (root / "c").unlink()

            view.refresh()

        self.assertEqual(view.selected, 2)


if __name__ == "__main__":
    unittest.main()
