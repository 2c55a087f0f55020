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

import concurrent.futures
import threading
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from ...archive.builder import build_archive
from ...archive.verify import validate_archive
from ...core.errors import AthenaError, RunCancelledError
from ...core.models import (
    DEFAULT_COMPRESSION_LEVEL,
    ArchiveBuild,
    ArchiveResult,
    ArchiveTarget,
    RunOptions,
    RunStage,
)
from ...core.validation import validate_input, validate_output
from ...core.walker import enumerate_entries
from ..api import TaskReporter, confirm_create_directory, console, progress
from ..core.log import _info, _warn
from ..core.types import ArchiveArgs
from ..startup import run_startup
from ..ui.summary import print_archive_summary

_T = TypeVar("_T")

# Progress reporting intervals
SCAN_UPDATE_INTERVAL = 25


class _ScanTracker:
    def __init__(self, reporter: TaskReporter, cancel: threading.Event) -> None:
        self._reporter = reporter
        self._cancel = cancel
        self.scanned = 0

    def tick(self, _path: Path) -> None:
        if self._cancel.is_set():
            raise RunCancelledError()
        self.scanned += 1
        if self.scanned == 1 or self.scanned % SCAN_UPDATE_INTERVAL == 0:
            self._reporter.describe(f"Processing files... ({self.scanned} found)")


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


class ArchiveRun:
    """One pass through path validation, walk, build and artifact validation.

    Heavy phases run on a worker thread while the main thread keeps the
    progress display alive. Any failure removes the archive this run created.
    """

    def __init__(self, options: RunOptions | None = None, *, quiet: bool) -> None:
        self.options = options
        self.quiet = quiet
        self.stage = RunStage.VALIDATING_INPUT if options is None else RunStage.WALKING
        self.artifact: Path | None = None
        self._cancel = threading.Event()

    def prepare(
        self,
        src: str,
        dest: str,
        *,
        confirm: Callable[[Path], bool],
        verbose: bool = False,
        compress: bool = False,
        upload: bool = False,
        compression_level: int = DEFAULT_COMPRESSION_LEVEL,
    ) -> RunOptions:
        try:
            self.stage = RunStage.VALIDATING_INPUT
            input_path = validate_input(src)
            _info(f"Input: {input_path}", verbose=verbose)
            self.stage = RunStage.VALIDATING_OUTPUT
            output_path = validate_output(dest, confirm=confirm)
            _info(f"Output: {output_path}", verbose=verbose)
        except BaseException:
            self.stage = RunStage.FAILED
            raise
        self.options = RunOptions(
            input_path=input_path,
            output_path=output_path,
            verbose=verbose,
            compress=compress,
            upload=upload,
            compression_level=compression_level,
        )
        return self.options

    def execute(self) -> ArchiveResult:
        if self.options is None:
            raise RuntimeError("prepare() must run before execute()")
        try:
            entries = self._walk()
            build = self._build(entries)
            self.stage = RunStage.VALIDATING_ARTIFACT
            path = validate_archive(
                build.path,
                compressed=self.options.compress,
                entries=build.entries,
            )
        except BaseException:
            self.stage = RunStage.FAILED
            self.cleanup()
            raise
        self.stage = RunStage.DONE
        self.artifact = None
        return ArchiveResult(
            path=path,
            entries=build.entries,
            input_bytes=build.input_bytes,
            archive_bytes=path.stat().st_size,
        )

    def cleanup(self) -> None:
        artifact = self.artifact
        self.artifact = None
        if artifact is None:
            return
        try:
            artifact.unlink(missing_ok=True)
        except OSError as exc:
            _warn(f"unable to remove partial archive {artifact}: {exc}", quiet=self.quiet)

    def _record_target(self, target: ArchiveTarget) -> None:
        self.artifact = target.path
        verbose = self.options.verbose
        if target.attempts:
            label = "Requested" if target.explicit else "Generated"
            _info(
                f"{label} name taken; skipped {_plural(target.attempts, 'candidate')}",
                verbose=verbose,
            )
        _info(f"Writing {target.path}", verbose=verbose)

    def _run_phase(self, func: Callable[..., _T], *args, **kwargs) -> _T:
        with concurrent.futures.ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="athena"
        ) as executor:
            future = executor.submit(func, *args, **kwargs)
            try:
                return future.result()
            except KeyboardInterrupt:
                self._cancel.set()
                concurrent.futures.wait([future])
                raise

    def _walk(self) -> list[Path]:
        self.stage = RunStage.WALKING
        with progress(quiet=self.quiet) as progress_bar:
            reporter = TaskReporter(progress_bar, "Processing files...")
            tracker = _ScanTracker(reporter, self._cancel)
            entries = self._run_phase(
                enumerate_entries,
                self.options.input_path,
                on_entry=tracker.tick,
            )
            reporter.finish()
        if not self.quiet:
            console.print(f"{_plural(len(entries), 'file')} processed")
        return entries

    def _build(self, entries: list[Path]) -> ArchiveBuild:
        self.stage = RunStage.BUILDING
        verb = "Compressing" if self.options.compress else "Archiving"
        with progress(quiet=self.quiet) as progress_bar:
            reporter = TaskReporter(progress_bar, f"{verb} {_plural(len(entries), 'file')}...")
            try:
                build = self._run_phase(
                    build_archive,
                    entries,
                    self.options.input_path,
                    self.options,
                    progress=reporter,
                    on_target=self._record_target,
                    cancel=self._cancel,
                )
            except AthenaError:
                reporter.finish_with_failure_message("Failed")
                raise
            reporter.finish()
        return build


def run_archive_command(args: ArchiveArgs) -> int:
    config, quiet, verbose = run_startup(
        config_path=args.config,
        quiet=args.quiet,
        verbose=args.verbose,
        no_color=args.no_color,
        no_animations=args.no_animations,
        debug=args.debug,
    )
    compress = args.compress or config.archive.compress
    assume_yes = args.assume_yes or config.archive.assume_yes
    if args.upload:
        _warn("upload is not supported yet; the archive is only written locally", quiet=quiet)

    run = ArchiveRun(quiet=quiet)
    run.prepare(
        args.src,
        args.dest,
        confirm=_assume_yes if assume_yes else confirm_create_directory,
        verbose=verbose,
        compress=compress,
        upload=args.upload,
        compression_level=config.archive.compression_level,
    )
    if compress:
        _info(f"Compression: gzip level {config.archive.compression_level}", verbose=verbose)
    result = run.execute()
    if not quiet:
        console.print(f"Archive written to {result.path}", markup=False, highlight=False)
    print_archive_summary(result, quiet=quiet)
    return 0


def _assume_yes(_path: Path) -> bool:
    return True
