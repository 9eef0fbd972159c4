"""Tests for directory scanning into listing entries."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from lazycd.listing import Entry, read_listing


class ReadListingTests(unittest.TestCase):
    def test_entries_are_sorted_case_insensitively_with_kind_flags(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "src").mkdir()
            (root / "README.md").write_text("readme\n", encoding="utf-8")
            (root / ".git").mkdir()
            (root / "alpha.txt").write_text("", encoding="utf-8")

            listing = read_listing(root)

        self.assertEqual([entry.name for entry in listing], [".git", "alpha.txt", "README.md", "src"])
        self.assertEqual([entry.is_dir for entry in listing], [True, False, False, True])
        self.assertEqual(listing[3].path, root / "src")

    def test_hidden_entries_can_be_skipped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / ".hidden").mkdir()
            (root / "visible").mkdir()

            listing = read_listing(root, show_hidden=False)

        self.assertEqual([entry.name for entry in listing], ["visible"])

    def test_symlink_to_directory_is_not_marked_as_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "real").mkdir()
            os.symlink(root / "real", root / "link")

            listing = read_listing(root)

        link = next(entry for entry in listing if entry.name == "link")
        self.assertFalse(link.is_dir)
        self.assertTrue(link.is_symlink)
        self.assertEqual(link.label, "link@")

    def test_missing_directory_raises_os_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(FileNotFoundError):
                read_listing(Path(tmp) / "missing")

    def test_labels_mark_directories(self) -> None:
        self.assertEqual(Entry("src", Path("/x/src"), is_dir=True).label, "src/")
        self.assertEqual(Entry("a.txt", Path("/x/a.txt"), is_dir=False).label, "a.txt")


if __name__ == "__main__":
    unittest.main()
