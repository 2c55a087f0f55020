#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import archive as archive_command


def register(app: typer.Typer) -> None:
    archive_command.register(app)
