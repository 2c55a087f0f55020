#!/usr/bin/env python3
from __future__ import annotations

from collections.abc import Sequence
from contextlib import contextmanager

from rich import box
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)
from rich.table import Table

from .prompts import confirm_create_directory, prompt_yes_no
from .state import UIContext, format_hint, get_context

DEFAULT_CONTEXT = get_context()
THEME = DEFAULT_CONTEXT.theme
console = DEFAULT_CONTEXT.console
console_err = DEFAULT_CONTEXT.console_err


def _resolve_context(context: UIContext | None) -> UIContext:
    return context or DEFAULT_CONTEXT


def configure_ui(
    *,
    no_color: bool,
    no_animations: bool,
    context: UIContext | None = None,
) -> None:
    _resolve_context(context).apply(no_color=no_color, no_animations=no_animations)


@contextmanager
def progress(*, quiet: bool, context: UIContext | None = None):
    context = _resolve_context(context)
    if quiet:
        yield None
        return
    force_render = context.interactive_output
    if context.animations_enabled:
        progress_bar = Progress(
            SpinnerColumn(spinner_name="simpleDotsScrolling", style="accent"),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            TimeRemainingColumn(),
            console=context.console,
            transient=True,
            disable=not force_render,
        )
    else:
        progress_bar = Progress(
            TextColumn("[progress.description]{task.description}"),
            console=context.console,
            transient=True,
            refresh_per_second=2,
            disable=not force_render,
        )
    with progress_bar:
        yield progress_bar


class TaskReporter:
    """Adapts one rich progress task to the archive progress callbacks."""

    def __init__(self, progress_bar: Progress | None, description: str) -> None:
        self._progress = progress_bar
        self._task_id: TaskID | None = None
        if progress_bar is not None:
            self._task_id = progress_bar.add_task(description, total=None)

    def set_total(self, total: int) -> None:
        if self._progress is None or self._task_id is None:
            return
        self._progress.update(self._task_id, total=total, completed=0)

    def advance(self, count: int = 1) -> None:
        if self._progress is None or self._task_id is None:
            return
        self._progress.advance(self._task_id, count)

    def describe(self, description: str) -> None:
        if self._progress is None or self._task_id is None:
            return
        self._progress.update(self._task_id, description=description)

    def finish(self) -> None:
        if self._progress is None or self._task_id is None:
            return
        task = next(task for task in self._progress.tasks if task.id == self._task_id)
        total = task.total if task.total is not None else task.completed
        self._progress.update(self._task_id, total=total, completed=total)
        self._progress.remove_task(self._task_id)
        self._task_id = None

    def finish_with_failure_message(self, message: str) -> None:
        if self._progress is None or self._task_id is None:
            return
        self._progress.update(self._task_id, description=f"[error]{message}[/error]")
        self._progress.stop_task(self._task_id)
        self._task_id = None


def build_kv_table(rows: Sequence[tuple[str, str]], *, title: str | None = None) -> Table:
    table = Table(title=title, show_header=False, box=box.SIMPLE, show_lines=False)
    table.add_column("Field", style="bold", no_wrap=True)
    table.add_column("Value")
    for key, value in rows:
        table.add_row(str(key), str(value))
    return table


def panel(title: str, renderable, *, style: str = "panel") -> Panel:
    return Panel(
        renderable,
        title=title,
        title_align="left",
        border_style=style,
        box=box.ROUNDED,
        padding=(1, 2),
    )


__all__ = [
    "THEME",
    "TaskReporter",
    "build_kv_table",
    "configure_ui",
    "confirm_create_directory",
    "console",
    "console_err",
    "format_hint",
    "panel",
    "progress",
    "prompt_yes_no",
]
