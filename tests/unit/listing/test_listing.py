"""Tests for directory listing order, filtering, and failure reporting."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from lazydir.errors import DirectoryAccessError
from lazydir.listing import PLACEHOLDER_NAME, index_of_name, list_directory


class ListDirectoryTests(unittest.TestCase):
    def test_entries_sort_case_sensitively_by_path_string(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            for name in ("zeta", "Alpha", "beta", "Zulu"):
                (root / name).write_text("", encoding="utf-8")

            listing = list_directory(root, show_hidden=False)

        self.assertEqual([entry.name for entry in listing], ["Alpha", "Zulu", "beta", "zeta"])
        self.assertEqual([entry.path for entry in listing], [root / name for name in ("Alpha", "Zulu", "beta", "zeta")])

    def test_directories_and_files_are_interleaved(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "b").mkdir()
            (root / "a.txt").write_text("a", encoding="utf-8")
            (root / "c.txt").write_text("c", encoding="utf-8")

            listing = list_directory(root, show_hidden=False)

        self.assertEqual(
            [(entry.name, entry.is_directory) for entry in listing],
            [("a.txt", False), ("b", True), ("c.txt", False)],
        )

    def test_hidden_entries_follow_policy(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / ".env").write_text("", encoding="utf-8")
            (root / ".git").mkdir()
            (root / "main.py").write_text("", encoding="utf-8")

            hidden = list_directory(root, show_hidden=False)
            shown = list_directory(root, show_hidden=True)

        self.assertEqual([entry.name for entry in hidden], ["main.py"])
        self.assertEqual([entry.name for entry in shown], [".env", ".git", "main.py"])

    def test_empty_directory_yields_single_placeholder(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            listing = list_directory(root, show_hidden=False)

        self.assertEqual(len(listing), 1)
        self.assertTrue(listing[0].is_placeholder)
        self.assertFalse(listing[0].is_directory)
        self.assertEqual(listing[0].name, PLACEHOLDER_NAME)

    def test_directory_of_only_hidden_files_yields_placeholder_when_hidden(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / ".hidden").write_text("", encoding="utf-8")

            listing = list_directory(root, show_hidden=False)

        self.assertEqual(len(listing), 1)
        self.assertTrue(listing[0].is_placeholder)

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks unavailable")
    def test_symlink_to_directory_is_descendable(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "real").mkdir()
            (root / "link").symlink_to(root / "real", target_is_directory=True)
            (root / "dangling").symlink_to(root / "missing")

            listing = list_directory(root, show_hidden=False)

        flags = {entry.name: entry.is_directory for entry in listing}
        self.assertEqual(flags, {"dangling": False, "link": True, "real": True})

    def test_missing_directory_raises_directory_access_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp).resolve() / "gone"
            with self.assertRaises(DirectoryAccessError) as ctx:
                list_directory(missing, show_hidden=False)

        self.assertEqual(ctx.exception.path, missing)
        self.assertIsInstance(ctx.exception, OSError)
        self.assertIsInstance(ctx.exception.__cause__, FileNotFoundError)

    def test_file_path_raises_directory_access_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp).resolve() / "plain.txt"
            target.write_text("x", encoding="utf-8")
            with self.assertRaises(DirectoryAccessError) as ctx:
                list_directory(target, show_hidden=False)

        self.assertIsInstance(ctx.exception.cause, NotADirectoryError)

    def test_index_of_name_ignores_placeholder(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            empty = list_directory(root, show_hidden=False)
            (root / "a").mkdir()
            (root / "b").mkdir()
            listing = list_directory(root, show_hidden=False)

        self.assertIsNone(index_of_name(empty, PLACEHOLDER_NAME))
        self.assertEqual(index_of_name(listing, "b"), 1)
        self.assertIsNone(index_of_name(listing, "c"))


if __name__ == "__main__":
    unittest.main()
