# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

import os
import unittest
from pathlib import Path
from unittest import mock

from athena.core.errors import IoFailureError
from athena.core.walker import enumerate_entries, iter_entries
from tests.test_support import make_tree, temp_directory, tree_paths


def _relative(entries: list[Path], root: Path) -> set[str]:
    return {entry.relative_to(root).as_posix() for entry in entries}


class TestTreeWalker(unittest.TestCase):
    def test_single_file_root_is_the_only_entry(self) -> None:
        with temp_directory() as tmp:
            path = tmp / "notes.txt"
            path.write_bytes(b"x")
            self.assertEqual(enumerate_entries(path), [path])

    def test_symlink_root_is_not_followed(self) -> None:
        with temp_directory() as tmp:
            target = make_tree(tmp / "target", {"inner.txt": b"data"})
            link = tmp / "link"
            os.symlink(target, link)
            self.assertEqual(enumerate_entries(link), [link])

    def test_directory_entries_match_recursive_listing(self) -> None:
        with temp_directory() as tmp:
            root = make_tree(
                tmp / "site",
                {
                    "index.html": "<html/>",
                    "css/site.css": "body {}",
                    "css/vendor/reset.css": "* {}",
                    "img/logo.png": b"\x89PNG",
                    "latest": "->index.html",
                },
            )
            entries = enumerate_entries(root)

            self.assertEqual(len(entries), len(set(entries)))
            self.assertEqual(_relative(entries, root), tree_paths(root))
            self.assertNotIn(root / "css", entries)

    def test_symlinked_directory_is_a_leaf(self) -> None:
        with temp_directory() as tmp:
            outside = make_tree(tmp / "outside", {"secret.txt": b"s"})
            root = make_tree(tmp / "root", {"a.txt": b"a"})
            os.symlink(outside, root / "shortcut")

            entries = enumerate_entries(root)

            self.assertEqual(_relative(entries, root), {"a.txt", "shortcut"})

    def test_empty_directory_yields_nothing(self) -> None:
        with temp_directory() as tmp:
            root = tmp / "empty"
            (root / "nested" / "deeper").mkdir(parents=True)
            self.assertEqual(enumerate_entries(root), [])

    def test_deep_tree_does_not_recurse(self) -> None:
        with temp_directory() as tmp:
            root = tmp / "deep"
            current = root
            for index in range(60):
                current = current / f"d{index}"
            current.mkdir(parents=True)
            (current / "leaf.txt").write_bytes(b"leaf")

            entries = enumerate_entries(root)

            self.assertEqual(entries, [current / "leaf.txt"])

    def test_iter_entries_is_lazy(self) -> None:
        with temp_directory() as tmp:
            root = make_tree(tmp / "root", {"a.txt": b"a", "sub/b.txt": b"b"})
            iterator = iter_entries(root)
            self.assertTrue(hasattr(iterator, "__next__"))
            first = next(iterator)
            self.assertTrue(first.is_relative_to(root))

    def test_directory_read_error_aborts_walk(self) -> None:
        with temp_directory() as tmp:
            root = make_tree(tmp / "root", {"a.txt": b"a"})
            with mock.patch(
                "athena.core.walker.os.scandir",
                side_effect=PermissionError(13, "Permission denied"),
            ):
                with self.assertRaises(IoFailureError) as ctx:
                    enumerate_entries(root)
            self.assertIn("unable to read directory", str(ctx.exception))
            self.assertIn("Permission denied", str(ctx.exception))

    def test_on_entry_called_once_per_entry(self) -> None:
        with temp_directory() as tmp:
            root = make_tree(tmp / "root", {"a.txt": b"a", "b/c.txt": b"c", "b/d.txt": b"d"})
            seen: list[Path] = []
            entries = enumerate_entries(root, on_entry=seen.append)
            self.assertEqual(seen, entries)


if __name__ == "__main__":
    unittest.main()
