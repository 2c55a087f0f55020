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

from rich.traceback import install as install_rich_traceback

from ..config import AppConfig, init_user_config, load_app_config, user_config_needs_init
from ..config.installer import user_config_path
from .api import configure_ui, console


def run_startup(
    *,
    config_path: str | None,
    quiet: bool,
    verbose: bool,
    no_color: bool,
    no_animations: bool,
    debug: bool,
) -> tuple[AppConfig, bool, bool]:
    """Load config, apply UI switches and return (config, quiet, verbose)."""
    config = load_app_config(config_path)
    quiet = quiet or config.ui.quiet
    verbose = (verbose or config.ui.verbose) and not quiet
    configure_ui(
        no_color=no_color or config.ui.no_color,
        no_animations=no_animations or config.ui.no_animations,
    )
    if debug:
        install_rich_traceback(show_locals=True)
    return config, quiet, verbose


def run_init_config() -> None:
    if not user_config_needs_init():
        console.print(f"User config already exists at {user_config_path()}")
        return
    path = init_user_config()
    console.print(f"User config ready at {path}")
