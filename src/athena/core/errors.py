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

from pathlib import Path
from typing import Literal

ArtifactFailure = Literal["not_written", "empty", "invalid"]


class AthenaError(Exception):
    """Base class for every failure that aborts an archive run."""


class InputNotFoundError(AthenaError):
    def __init__(self, path: Path) -> None:
        super().__init__("Specified file or directory does not exist.")
        self.path = path


class OutputAbortedError(AthenaError):
    def __init__(self, path: Path, message: str = "Output directory does not exist") -> None:
        super().__init__(message)
        self.path = path


class IoFailureError(AthenaError):
    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class BuildFailureError(AthenaError):
    def __init__(self, message: str, *, entry: Path | None = None) -> None:
        super().__init__(message)
        self.entry = entry


class ArtifactInvalidError(AthenaError):
    def __init__(self, message: str, *, path: Path, reason: ArtifactFailure) -> None:
        super().__init__(message)
        self.path = path
        self.reason = reason


class RunCancelledError(AthenaError):
    def __init__(self) -> None:
        super().__init__("Interrupted")
