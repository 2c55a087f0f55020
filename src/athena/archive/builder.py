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

import contextlib
import os
import stat
import tarfile
import threading
from collections.abc import Callable, Sequence
from datetime import datetime
from pathlib import Path

from ..core.errors import BuildFailureError, IoFailureError, RunCancelledError
from ..core.models import ArchiveBuild, ArchiveTarget, EntryKind, ProgressReporter, RunOptions
from .naming import base_target
from .writer import ArchiveWriter, open_archive

try:
    import grp
    import pwd
except ImportError:  # Windows
    grp = None  # type: ignore[assignment]
    pwd = None  # type: ignore[assignment]


def archive_base(input_root: Path) -> Path:
    """Directory stripped from every entry path to form its name inside the archive."""
    if input_root.is_symlink() or not input_root.is_dir():
        return input_root.parent
    return input_root


def archive_name(path: Path, base: Path) -> str:
    try:
        relative = path.relative_to(base)
    except ValueError as exc:
        raise BuildFailureError(f"{path} is outside the input root {base}", entry=path) from exc
    return relative.as_posix()


def _owner_names(st: os.stat_result) -> tuple[str, str]:
    uname = gname = ""
    if pwd is not None:
        try:
            uname = pwd.getpwuid(st.st_uid).pw_name
        except KeyError:
            pass
    if grp is not None:
        try:
            gname = grp.getgrgid(st.st_gid).gr_name
        except KeyError:
            pass
    return uname, gname


def entry_kind(st: os.stat_result) -> EntryKind:
    if stat.S_ISLNK(st.st_mode):
        return EntryKind.SYMLINK
    if stat.S_ISREG(st.st_mode):
        return EntryKind.REGULAR
    return EntryKind.OTHER


def build_tarinfo(path: Path, name: str) -> tuple[tarfile.TarInfo, EntryKind]:
    st = os.lstat(path)
    info = tarfile.TarInfo(name)
    info.mode = stat.S_IMODE(st.st_mode)
    info.mtime = int(st.st_mtime)
    info.uid = st.st_uid
    info.gid = st.st_gid
    info.uname, info.gname = _owner_names(st)
    kind = entry_kind(st)
    if kind is EntryKind.SYMLINK:
        info.type = tarfile.SYMTYPE
        info.linkname = os.readlink(path)
        info.size = 0
    elif kind is EntryKind.REGULAR:
        info.type = tarfile.REGTYPE
        info.size = st.st_size
    elif stat.S_ISFIFO(st.st_mode):
        info.type = tarfile.FIFOTYPE
        info.size = 0
    elif stat.S_ISCHR(st.st_mode) or stat.S_ISBLK(st.st_mode):
        info.type = tarfile.CHRTYPE if stat.S_ISCHR(st.st_mode) else tarfile.BLKTYPE
        info.devmajor = os.major(st.st_rdev)
        info.devminor = os.minor(st.st_rdev)
        info.size = 0
    else:
        raise BuildFailureError(f"unsupported file type: {path}", entry=path)
    return info, kind


def append_entry(writer: ArchiveWriter, path: Path, name: str) -> int:
    """Write one entry; return the number of content bytes copied."""
    info, kind = build_tarinfo(path, name)
    if kind is EntryKind.REGULAR:
        with open(path, "rb") as handle:
            writer.add(info, handle)
        return info.size
    writer.add(info)
    return 0


def build_archive(
    entries: Sequence[Path],
    input_root: Path,
    options: RunOptions,
    *,
    progress: ProgressReporter | None = None,
    on_target: Callable[[ArchiveTarget], None] | None = None,
    cancel: threading.Event | None = None,
    now: datetime | None = None,
) -> ArchiveBuild:
    directory, name, explicit = base_target(
        input_root,
        options.output_path,
        compress=options.compress,
        now=now,
    )
    base = archive_base(input_root)
    writer = open_archive(
        directory,
        name,
        compress=options.compress,
        compression_level=options.compression_level,
        explicit=explicit,
    )
    if on_target is not None:
        on_target(writer.target)
    if progress is not None:
        progress.set_total(len(entries))

    input_bytes = 0
    try:
        for entry in entries:
            if cancel is not None and cancel.is_set():
                raise RunCancelledError()
            try:
                input_bytes += append_entry(writer, entry, archive_name(entry, base))
            except BuildFailureError:
                raise
            except (OSError, ValueError, tarfile.TarError) as exc:
                detail = getattr(exc, "strerror", None) or exc
                raise BuildFailureError(
                    f"unable to archive {entry}: {detail}", entry=entry
                ) from exc
            finally:
                if progress is not None:
                    progress.advance(1)
    except BaseException:
        # The entry failure is what gets reported, not a follow-on close error.
        with contextlib.suppress(OSError):
            writer.close()
        raise
    try:
        writer.close()
    except OSError as exc:
        raise IoFailureError(
            f"unable to finalize archive {writer.path}: {exc.strerror or exc}",
            path=writer.path,
        ) from exc
    return ArchiveBuild(path=writer.path, entries=writer.entries, input_bytes=input_bytes)
