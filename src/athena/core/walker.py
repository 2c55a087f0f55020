#!/usr/bin/env python3
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

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path

from .errors import IoFailureError


def iter_entries(root: Path) -> Iterator[Path]:
    """Yield every file and symlink under ``root``.

    Directories are traversed but never yielded. Symlinks are yielded as-is and
    never followed, including when ``root`` itself is one. Order follows
    ``os.scandir`` and carries no guarantee.
    """
    if root.is_symlink() or not root.is_dir():
        yield root
        return

    pending: list[Path] = [root]
    while pending:
        directory = pending.pop()
        subdirs: list[Path] = []
        try:
            with os.scandir(directory) as listing:
                children = list(listing)
        except OSError as exc:
            raise IoFailureError(
                f"unable to read directory {directory}: {exc.strerror or exc}",
                path=directory,
            ) from exc
        for child in children:
            path = Path(child.path)
            try:
                is_dir = child.is_dir(follow_symlinks=False)
            except OSError as exc:
                raise IoFailureError(
                    f"unable to stat {path}: {exc.strerror or exc}", path=path
                ) from exc
            if is_dir:
                subdirs.append(path)
            else:
                yield path
        # Reversed so the stack pops subdirectories in scandir order.
        pending.extend(reversed(subdirs))


def enumerate_entries(
    root: Path,
    *,
    on_entry: Callable[[Path], None] | None = None,
) -> list[Path]:
    entries: list[Path] = []
    for path in iter_entries(root):
        entries.append(path)
        if on_entry is not None:
            on_entry(path)
    return entries
