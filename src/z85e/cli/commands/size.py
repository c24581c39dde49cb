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

import typer

from ...config import CliDefaults
from ..core.codec import resolve_codec, resolve_variant
from ..core.common import _ctx_value, _run_cli
from ..ui import console

_SIZE_HELP = (
    "Print the output length for an input of LENGTH bytes (encode) or\n"
    "LENGTH characters (decode).\n\n"
    "Examples:\n"
    "  z85e size encode 32\n"
    "  z85e size decode 42\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_SIZE_HELP)(size)


def _direction_callback(value: str) -> str:
    normalized = value.strip().lower()
    if normalized not in {"encode", "decode"}:
        raise typer.BadParameter("direction must be encode or decode")
    return normalized


def size(
    ctx: typer.Context,
    direction: str = typer.Argument(
        ...,
        help="encode or decode.",
        callback=_direction_callback,
    ),
    length: int = typer.Argument(..., min=0, help="Input length."),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Use strict Z85 length rules.",
        rich_help_panel="Codec",
    ),
    extended: bool = typer.Option(
        False,
        "--extended",
        help="Use Z85 Extended length rules, overriding the config.",
        rich_help_panel="Codec",
    ),
) -> None:
    defaults: CliDefaults = _ctx_value(ctx, "defaults") or CliDefaults()
    debug = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        variant = resolve_variant(
            strict=strict, extended=extended, default=defaults.codec.variant
        )
        codec = resolve_codec(variant)
        if direction == "encode":
            result = codec.encoded_size(length)
        else:
            result = codec.decoded_size(length)
        console.print(str(result), highlight=False)

    _run_cli(_run, debug=debug)
