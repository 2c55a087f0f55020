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

"""Snapshot a file or directory tree into a single tar archive."""

from .archive.builder import build_archive
from .archive.verify import validate_archive
from .core.errors import (
    ArtifactInvalidError,
    AthenaError,
    BuildFailureError,
    InputNotFoundError,
    IoFailureError,
    OutputAbortedError,
    RunCancelledError,
)
from .core.models import ArchiveBuild, ArchiveResult, RunOptions
from .core.validation import validate_input, validate_output
from .core.walker import enumerate_entries, iter_entries

__all__ = [
    "ArchiveBuild",
    "ArchiveResult",
    "ArtifactInvalidError",
    "AthenaError",
    "BuildFailureError",
    "InputNotFoundError",
    "IoFailureError",
    "OutputAbortedError",
    "RunCancelledError",
    "RunOptions",
    "build_archive",
    "enumerate_entries",
    "iter_entries",
    "validate_archive",
    "validate_input",
    "validate_output",
]
