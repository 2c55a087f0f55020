#!/usr/bin/env python3
from __future__ import annotations

from rich.filesize import decimal

from ...core.models import ArchiveResult
from . import build_kv_table, console, panel


def format_ratio(result: ArchiveResult) -> str:
    ratio = result.ratio
    if ratio is None:
        return "n/a"
    saved = (1.0 - ratio) * 100.0
    return f"{ratio:.2f} ({saved:.1f}% saved)" if saved > 0 else f"{ratio:.2f}"


def summary_rows(result: ArchiveResult) -> list[tuple[str, str]]:
    suffix = "entry" if result.entries == 1 else "entries"
    return [
        ("Archived", f"{result.entries} {suffix}"),
        ("Input size", decimal(result.input_bytes)),
        ("Archive size", decimal(result.archive_bytes)),
        ("Ratio", format_ratio(result)),
        ("Output", str(result.path)),
    ]


def print_archive_summary(result: ArchiveResult, *, quiet: bool) -> None:
    if quiet:
        return
    console.print(panel("Archive summary", build_kv_table(summary_rows(result))))
