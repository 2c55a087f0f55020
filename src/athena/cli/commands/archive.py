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

import functools

import typer

from ..api import console
from ..core.common import _get_version, _run_cli
from ..core.types import ArchiveArgs
from ..flows.archive import run_archive_command
from ..startup import run_init_config

_ARCHIVE_HELP = (
    "Snapshot a file or directory into a single tar archive.\n\n"
    "Examples:\n"
    "  athena -i ~/projects/site -o ~/backups\n"
    "  athena -i notes.txt -o ~/backups/notes.tgz --compress\n"
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"athena {_get_version()}")
        raise typer.Exit()


def _init_config_callback(value: bool) -> None:
    if value:
        _run_cli(run_init_config, debug=False)
        raise typer.Exit()


def register(app: typer.Typer) -> None:
    app.command(help=_ARCHIVE_HELP)(archive)


def archive(
    src: str = typer.Option(
        ...,
        "--src",
        "-i",
        help="File, symlink or directory to archive.",
        rich_help_panel="Inputs",
    ),
    dest: str = typer.Option(
        ...,
        "--dest",
        "-o",
        help="Output directory, or an explicit archive file name.",
        rich_help_panel="Outputs",
    ),
    compress: bool = typer.Option(
        False,
        "--compress",
        "-c",
        help="Gzip the archive (.tgz).",
        rich_help_panel="Outputs",
    ),
    upload: bool = typer.Option(
        False,
        "--upload",
        "-u",
        help="Upload the archive after writing it (not implemented yet).",
        rich_help_panel="Outputs",
    ),
    assume_yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Create a missing output directory without asking.",
        rich_help_panel="Behavior",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show extra status lines.",
        rich_help_panel="Behavior",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Hide non-error output.",
        rich_help_panel="Behavior",
    ),
    config: str | None = typer.Option(
        None,
        "--config",
        help="Use this TOML config file.",
        rich_help_panel="Config",
    ),
    init_config: bool = typer.Option(
        False,
        "--init-config",
        help="Copy the default config to the user config directory and exit.",
        callback=_init_config_callback,
        is_eager=True,
        rich_help_panel="Config",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output.",
        rich_help_panel="Accessibility",
    ),
    no_animations: bool = typer.Option(
        False,
        "--no-animations",
        help="Reduce motion by disabling spinners and animated updates.",
        rich_help_panel="Accessibility",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Show tracebacks for errors.",
        rich_help_panel="Debug",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
        rich_help_panel="Info",
    ),
) -> None:
    _ = version, init_config
    args = ArchiveArgs(
        src=src,
        dest=dest,
        compress=compress,
        upload=upload,
        verbose=verbose,
        quiet=quiet,
        assume_yes=assume_yes,
        config=config,
        no_color=no_color,
        no_animations=no_animations,
        debug=debug,
    )
    _run_cli(functools.partial(run_archive_command, args), debug=debug)
