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

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from ..core.models import DEFAULT_COMPRESSION_LEVEL
from .installer import resolve_config_path

MIN_COMPRESSION_LEVEL = 1
MAX_COMPRESSION_LEVEL = 9


@dataclass(frozen=True)
class ArchiveDefaults:
    compress: bool = False
    compression_level: int = DEFAULT_COMPRESSION_LEVEL
    assume_yes: bool = False


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    verbose: bool = False
    no_color: bool = False
    no_animations: bool = False


@dataclass(frozen=True)
class AppConfig:
    path: Path | None = None
    archive: ArchiveDefaults = field(default_factory=ArchiveDefaults)
    ui: UiDefaults = field(default_factory=UiDefaults)


def load_app_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    try:
        data = _load_toml(config_path)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"invalid config file {config_path}: {exc}") from exc
    return AppConfig(
        path=config_path,
        archive=_parse_archive_defaults(_get_dict(data, "archive")),
        ui=_parse_ui_defaults(_get_dict(data, "ui")),
    )


def _parse_archive_defaults(cfg: dict[str, object]) -> ArchiveDefaults:
    level = _parse_optional_int(cfg.get("compression_level"), field="archive.compression_level")
    if level is None:
        level = DEFAULT_COMPRESSION_LEVEL
    if not MIN_COMPRESSION_LEVEL <= level <= MAX_COMPRESSION_LEVEL:
        raise ValueError(
            "archive.compression_level must be between "
            f"{MIN_COMPRESSION_LEVEL} and {MAX_COMPRESSION_LEVEL}"
        )
    return ArchiveDefaults(
        compress=_parse_bool(cfg.get("compress"), field="archive.compress", default=False),
        compression_level=level,
        assume_yes=_parse_bool(cfg.get("assume_yes"), field="archive.assume_yes", default=False),
    )


def _parse_ui_defaults(cfg: dict[str, object]) -> UiDefaults:
    return UiDefaults(
        quiet=_parse_bool(cfg.get("quiet"), field="ui.quiet", default=False),
        verbose=_parse_bool(cfg.get("verbose"), field="ui.verbose", default=False),
        no_color=_parse_bool(cfg.get("no_color"), field="ui.no_color", default=False),
        no_animations=_parse_bool(
            cfg.get("no_animations"),
            field="ui.no_animations",
            default=False,
        ),
    )


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"{field} must be a boolean")
    raise ValueError(f"{field} must be a boolean")


def _parse_optional_int(value: object, *, field: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{field} must be an integer")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError as exc:
            raise ValueError(f"{field} must be an integer") from exc
    raise ValueError(f"{field} must be an integer")
