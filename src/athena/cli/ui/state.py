#!/usr/bin/env python3
from __future__ import annotations

import sys
from dataclasses import dataclass

from rich.console import Console
from rich.text import Text
from rich.theme import Theme


def isatty(stream, fallback) -> bool:
    if stream is not None:
        try:
            return bool(stream.isatty())
        except (OSError, ValueError, AttributeError):
            return False
    return bool(getattr(fallback, "isatty", lambda: False)())


# Styles referenced by markup across the cli package.
THEME = Theme(
    {
        "accent": "cyan",
        "warning": "yellow",
        "error": "red",
        "panel": "cyan",
        "muted": "dim",
        "hint": "dim italic",
    }
)


@dataclass
class UIContext:
    """Consoles and display switches shared by one CLI process."""

    theme: Theme
    console: Console
    console_err: Console
    animations_enabled: bool = True

    def apply(self, *, no_color: bool, no_animations: bool) -> None:
        self.animations_enabled = not no_animations
        for target in (self.console, self.console_err):
            target.no_color = no_color

    @property
    def interactive_output(self) -> bool:
        """True when progress bars should render live."""
        return isatty(sys.__stdout__, sys.stdout)


def _build_console(*, stderr: bool) -> Console:
    raw = sys.__stderr__ if stderr else sys.__stdout__
    fallback = sys.stderr if stderr else sys.stdout
    return Console(stderr=stderr, theme=THEME, force_terminal=isatty(raw, fallback))


def create_default_context() -> UIContext:
    return UIContext(
        theme=THEME,
        console=_build_console(stderr=False),
        console_err=_build_console(stderr=True),
    )


DEFAULT_CONTEXT = create_default_context()


def get_context() -> UIContext:
    return DEFAULT_CONTEXT


def format_hint(help_text: str) -> Text:
    return Text.assemble(("Hint: ", "muted"), (help_text, "hint"))
