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

from collections.abc import Iterator
from datetime import datetime
from pathlib import Path

from ..core.models import COMPRESSED_SUFFIX, TAR_SUFFIX

TIMESTAMP_FORMAT = "%Y%m%d%H%M"
_MULTI_SUFFIXES = (".tar.gz", ".tar.bz2", ".tar.xz")


def archive_suffix(*, compress: bool) -> str:
    return COMPRESSED_SUFFIX if compress else TAR_SUFFIX


def root_label(input_root: Path) -> str:
    label = input_root.name.strip()
    if label:
        return label
    anchor = input_root.anchor.replace("\\", "-").replace("/", "-").replace(":", "")
    anchor = anchor.strip("-").lower()
    return f"root-{anchor}" if anchor else "root"


def synthesize_name(input_root: Path, *, compress: bool, now: datetime | None = None) -> str:
    moment = now or datetime.now()
    return f"{moment.strftime(TIMESTAMP_FORMAT)}-{root_label(input_root)}" + archive_suffix(
        compress=compress
    )


def split_name(name: str) -> tuple[str, str]:
    """Split ``name`` into stem and extension, keeping ``.tar.gz`` style pairs."""
    lowered = name.lower()
    for suffix in _MULTI_SUFFIXES:
        if lowered.endswith(suffix) and len(name) > len(suffix):
            return name[: -len(suffix)], name[-len(suffix) :]
    dot = name.rfind(".")
    if dot <= 0:
        return name, ""
    return name[:dot], name[dot:]


def names_output_file(output_path: Path) -> bool:
    if output_path.is_dir():
        return False
    return output_path.exists() or output_path.is_symlink() or bool(output_path.suffix)


def candidate_paths(directory: Path, name: str) -> Iterator[Path]:
    """Yield ``name`` then ``stem_1.ext``, ``stem_2.ext`` and so on, forever."""
    stem, ext = split_name(name)
    yield directory / name
    index = 1
    while True:
        yield directory / f"{stem}_{index}{ext}"
        index += 1


def base_target(
    input_root: Path,
    output_path: Path,
    *,
    compress: bool,
    now: datetime | None = None,
) -> tuple[Path, str, bool]:
    """Return the output directory, the preferred file name and whether it was explicit."""
    if names_output_file(output_path):
        return output_path.parent, output_path.name, True
    return output_path, synthesize_name(input_root, compress=compress, now=now), False
