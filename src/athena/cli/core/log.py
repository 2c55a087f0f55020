#!/usr/bin/env python3
from __future__ import annotations

from rich.markup import escape

from ..ui import console, console_err


def _warn(message: str, *, quiet: bool) -> None:
    if quiet:
        return
    console_err.print(f"[yellow]Warning:[/yellow] {escape(message)}")


def _info(message: str, *, verbose: bool) -> None:
    if not verbose:
        return
    console.print(f"[muted]- {escape(message)}[/muted]")
