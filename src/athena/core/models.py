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

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

DEFAULT_COMPRESSION_LEVEL = 9
TAR_SUFFIX = ".tar"
COMPRESSED_SUFFIX = ".tgz"


class EntryKind(str, Enum):
    REGULAR = "regular"
    SYMLINK = "symlink"
    OTHER = "other"


class RunStage(str, Enum):
    VALIDATING_INPUT = "validating-input"
    VALIDATING_OUTPUT = "validating-output"
    WALKING = "walking"
    BUILDING = "building"
    VALIDATING_ARTIFACT = "validating-artifact"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class RunOptions:
    input_path: Path
    output_path: Path
    verbose: bool = False
    compress: bool = False
    upload: bool = False
    compression_level: int = DEFAULT_COMPRESSION_LEVEL

    @property
    def suffix(self) -> str:
        return COMPRESSED_SUFFIX if self.compress else TAR_SUFFIX


@dataclass(frozen=True)
class ArchiveTarget:
    path: Path
    explicit: bool = False
    attempts: int = 0


@dataclass(frozen=True)
class ArchiveBuild:
    path: Path
    entries: int
    input_bytes: int


@dataclass(frozen=True)
class ArchiveResult:
    path: Path
    entries: int
    input_bytes: int
    archive_bytes: int

    @property
    def ratio(self) -> float | None:
        if self.input_bytes <= 0:
            return None
        return self.archive_bytes / self.input_bytes


class ProgressReporter(Protocol):
    """Observer for archive progress. Never required for correctness."""

    def set_total(self, total: int) -> None: ...

    def advance(self, count: int = 1) -> None: ...

    def finish(self) -> None: ...

    def finish_with_failure_message(self, message: str) -> None: ...
