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

import sys
from pathlib import Path

import questionary
from rich.padding import Padding

from .state import UIContext, format_hint, get_context, isatty

QUESTIONARY_STYLE = questionary.Style(
    [
        ("question", "bold"),
        ("answer", "bold"),
        ("pointer", "bold"),
        ("highlighted", "reverse"),
        ("instruction", "fg:ansibrightblack"),
    ]
)

DEFAULT_CONTEXT = get_context()
_YES = {"y", "yes"}
CREATE_DIRECTORY_HINT = "Pass --yes to create a missing output directory without asking."


def _resolve_context(context: UIContext | None) -> UIContext:
    return context or DEFAULT_CONTEXT


def _stdin_interactive() -> bool:
    return isatty(sys.stdin, sys.__stdin__)


def _read_line_answer(prompt: str, *, default: bool, context: UIContext) -> bool:
    suffix = "[Y/n]" if default else "[y/N]"
    context.console_err.print(f"{prompt} {suffix} ", end="", markup=False, highlight=False)
    try:
        line = sys.stdin.readline()
    except (OSError, ValueError):
        return default
    if not line:
        # EOF
        context.console_err.print()
        return default
    answer = line.strip().lower()
    if not answer:
        return default
    return answer in _YES


def prompt_yes_no(
    prompt: str,
    *,
    default: bool,
    help_text: str | None = None,
    context: UIContext | None = None,
) -> bool:
    context = _resolve_context(context)
    if help_text:
        context.console_err.print(Padding(format_hint(help_text), (0, 0, 0, 1)))
    if not _stdin_interactive():
        return _read_line_answer(prompt, default=default, context=context)
    value = questionary.confirm(
        prompt,
        default=default,
        qmark="",
        style=QUESTIONARY_STYLE,
    ).ask()
    if value is None:
        raise KeyboardInterrupt
    return value


def confirm_create_directory(path: Path, *, context: UIContext | None = None) -> bool:
    context = _resolve_context(context)
    context.console_err.print(
        f"Output directory does not exist: '{path}'", markup=False, highlight=False
    )
    return prompt_yes_no(
        "Create it?",
        default=False,
        help_text=CREATE_DIRECTORY_HINT,
        context=context,
    )
