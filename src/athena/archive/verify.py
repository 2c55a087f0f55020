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

import tarfile
from pathlib import Path

from ..core.errors import ArtifactFailure, ArtifactInvalidError
from .writer import GZIP_MAGIC

_MESSAGES: dict[ArtifactFailure, str] = {
    "not_written": "Failed to write archive",
    "empty": "No files were processed",
    "invalid": "Invalid archive",
}


def _reject(path: Path, reason: ArtifactFailure, *, remove: bool) -> ArtifactInvalidError:
    if remove:
        path.unlink(missing_ok=True)
    return ArtifactInvalidError(_MESSAGES[reason], path=path, reason=reason)


def _read_magic(path: Path) -> bytes:
    with path.open("rb") as handle:
        return handle.read(len(GZIP_MAGIC))


def _has_members(path: Path) -> bool:
    try:
        with tarfile.open(path, mode="r:") as archive:
            return archive.next() is not None
    except tarfile.ReadError:
        return False


def validate_archive(path: Path, *, compressed: bool, entries: int | None = None) -> Path:
    """Check a finished archive and delete it when it is unusable.

    ``entries`` is the number of entries the builder reports having written;
    when it is zero the archive is rejected as empty even though a tar trailer
    was written.
    """
    if not path.is_file():
        raise _reject(path, "not_written", remove=False)
    if path.stat().st_size == 0:
        raise _reject(path, "empty", remove=True)
    if compressed:
        if _read_magic(path) != GZIP_MAGIC:
            raise _reject(path, "invalid", remove=True)
    if entries == 0:
        raise _reject(path, "empty", remove=True)
    if entries is None and not compressed and not _has_members(path):
        raise _reject(path, "empty", remove=True)
    return path
