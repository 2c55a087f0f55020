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
from collections.abc import Callable
from pathlib import Path

from .errors import InputNotFoundError, IoFailureError, OutputAbortedError

ConfirmCallback = Callable[[Path], bool]


def _absolute(path: str | Path) -> Path:
    # Not resolve(): a symlinked input must stay the link itself.
    return Path(os.path.abspath(Path(path).expanduser()))


def _lexists(path: Path) -> bool:
    try:
        path.lstat()
    except FileNotFoundError:
        return False
    except OSError:
        return True
    return True


def validate_input(path: str | Path) -> Path:
    """Return the absolute input path, or raise if nothing exists there."""
    candidate = _absolute(path)
    if not _lexists(candidate):
        raise InputNotFoundError(candidate)
    return candidate


def looks_like_file_target(path: Path) -> bool:
    if not path.suffix:
        return False
    return path.parent.is_dir()


def validate_output(path: str | Path, *, confirm: ConfirmCallback) -> Path:
    """Return a usable output location.

    Existing paths are returned unchanged, as are missing file names whose parent
    directory exists. Any other missing path is treated as a directory that is
    created only after ``confirm`` agrees.
    """
    candidate = _absolute(path)
    if _lexists(candidate):
        return candidate
    if looks_like_file_target(candidate):
        return candidate
    if not confirm(candidate):
        raise OutputAbortedError(candidate)
    try:
        candidate.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise IoFailureError(
            f"unable to create output directory {candidate}: {exc.strerror or exc}",
            path=candidate,
        ) from exc
    return candidate
