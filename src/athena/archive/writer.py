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

import gzip
import tarfile
from pathlib import Path
from typing import BinaryIO

from ..core.errors import IoFailureError
from ..core.models import DEFAULT_COMPRESSION_LEVEL, ArchiveTarget
from .naming import candidate_paths

GZIP_MAGIC = b"\x1f\x8b"


class ArchiveWriter:
    """Sequential tar stream over an optional gzip encoder over the output file.

    Each layer only needs ``write`` and ``close``, so the compressed and raw
    paths share the same tar code. ``close`` finalizes every layer exactly once.
    """

    def __init__(
        self,
        path: Path,
        handle: BinaryIO,
        *,
        compress: bool,
        compression_level: int = DEFAULT_COMPRESSION_LEVEL,
    ) -> None:
        self.path = path
        self.target = ArchiveTarget(path=path)
        self.entries = 0
        self._handle = handle
        self._encoder: gzip.GzipFile | None = None
        stream: BinaryIO = handle
        if compress:
            self._encoder = gzip.GzipFile(
                filename="",
                mode="wb",
                fileobj=handle,
                compresslevel=compression_level,
            )
            stream = self._encoder
        self._tar = tarfile.open(fileobj=stream, mode="w", format=tarfile.PAX_FORMAT)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def add(self, info: tarfile.TarInfo, content: BinaryIO | None = None) -> None:
        if self._closed:
            raise ValueError("archive writer is closed")
        self._tar.addfile(info, content)
        self.entries += 1

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._tar.close()
        finally:
            try:
                if self._encoder is not None:
                    self._encoder.close()
            finally:
                self._handle.close()

    def __enter__(self) -> ArchiveWriter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def _create_exclusive(
    directory: Path, name: str, *, explicit: bool
) -> tuple[ArchiveTarget, BinaryIO]:
    attempts = 0
    for candidate in candidate_paths(directory, name):
        try:
            handle = open(candidate, "xb")
        except FileExistsError:
            attempts += 1
            continue
        except OSError as exc:
            raise IoFailureError(
                f"unable to create archive {candidate}: {exc.strerror or exc}",
                path=candidate,
            ) from exc
        return ArchiveTarget(path=candidate, explicit=explicit, attempts=attempts), handle
    raise IoFailureError(f"no free archive name in {directory}", path=directory)


def open_archive(
    directory: Path,
    name: str,
    *,
    compress: bool,
    compression_level: int = DEFAULT_COMPRESSION_LEVEL,
    explicit: bool = False,
) -> ArchiveWriter:
    """Create the first free ``name`` / ``stem_N.ext`` in ``directory`` and wrap it."""
    target, handle = _create_exclusive(directory, name, explicit=explicit)
    path = target.path
    try:
        writer = ArchiveWriter(
            path,
            handle,
            compress=compress,
            compression_level=compression_level,
        )
    except (OSError, ValueError, tarfile.TarError) as exc:
        handle.close()
        path.unlink(missing_ok=True)
        raise IoFailureError(f"unable to open archive {path}: {exc}", path=path) from exc
    writer.target = target
    return writer
