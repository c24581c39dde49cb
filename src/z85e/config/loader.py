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
from typing import Literal, cast

from .installer import resolve_config_path

Variant = Literal["extended", "strict"]
VARIANTS: tuple[Variant, ...] = ("extended", "strict")


@dataclass(frozen=True)
class CodecDefaults:
    variant: Variant = "extended"
    check_alphabet: bool = False


@dataclass(frozen=True)
class OutputDefaults:
    wrap: int = 0
    newline: bool = True


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class CliDefaults:
    codec: CodecDefaults = field(default_factory=CodecDefaults)
    output: OutputDefaults = field(default_factory=OutputDefaults)
    ui: UiDefaults = field(default_factory=UiDefaults)


def load_cli_defaults(path: str | Path | None = None) -> CliDefaults:
    config_path = resolve_config_path(path)
    data = _load_toml(config_path)
    return _parse_cli_defaults(data)


def _parse_cli_defaults(data: dict[str, object]) -> CliDefaults:
    return CliDefaults(
        codec=_parse_codec_defaults(_get_dict(data, "codec")),
        output=_parse_output_defaults(_get_dict(data, "output")),
        ui=_parse_ui_defaults(_get_dict(data, "ui")),
    )


def _parse_codec_defaults(cfg: dict[str, object]) -> CodecDefaults:
    return CodecDefaults(
        variant=_parse_variant(cfg.get("variant"), field="codec.variant"),
        check_alphabet=_parse_bool(
            cfg.get("check_alphabet"),
            field="codec.check_alphabet",
            default=False,
        ),
    )


def _parse_output_defaults(cfg: dict[str, object]) -> OutputDefaults:
    wrap = cfg.get("wrap")
    wrap_value = 0 if wrap is None else _parse_int_strict(wrap, field="output.wrap")
    if wrap_value < 0:
        raise ValueError("output.wrap must be a non-negative integer")
    return OutputDefaults(
        wrap=wrap_value,
        newline=_parse_bool(cfg.get("newline"), field="output.newline", default=True),
    )


def _parse_ui_defaults(cfg: dict[str, object]) -> UiDefaults:
    return UiDefaults(
        quiet=_parse_bool(cfg.get("quiet"), field="ui.quiet", default=False),
        no_color=_parse_bool(cfg.get("no_color"), field="ui.no_color", default=False),
    )


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_variant(value: object, *, field: str) -> Variant:
    if value is None:
        return "extended"
    if not isinstance(value, str):
        raise ValueError(f"{field} must be 'extended' or 'strict'")
    normalized = value.strip().lower()
    if normalized not in VARIANTS:
        raise ValueError(f"{field} must be 'extended' or 'strict'")
    return cast(Variant, normalized)


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


def _parse_int_strict(value: object, *, field: str) -> int:
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
            raise ValueError(f"{field} must be an integer")
        try:
            return int(text)
        except ValueError as exc:
            raise ValueError(f"{field} must be an integer") from exc
    raise ValueError(f"{field} must be an integer")
