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
from ...core.errors import LengthPreconditionError
from ..core.codec import resolve_codec, resolve_variant
from ..core.common import _ctx_value, _run_cli
from ..core.log import _warn
from ..core.text import append_hint, wrap_text
from ..io.inputs import _read_input_bytes
from ..io.outputs import _write_output

_ENCODE_HELP = (
    "Encode binary data as Z85 text.\n\n"
    "Extended mode (the default) accepts any input length; strict mode requires\n"
    "a multiple of 4 bytes and produces standard ZeroMQ Z85.\n\n"
    "Examples:\n"
    "  z85e encode key.bin\n"
    "  z85e encode --strict --wrap 80 key.bin -o key.txt\n"
    "  cat key.bin | z85e encode -\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_ENCODE_HELP)(encode)


def encode(
    ctx: typer.Context,
    input_path: str = typer.Argument(
        "-",
        metavar="INPUT",
        help="File to encode ('-' reads stdin).",
        show_default=False,
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write encoded text to this file instead of stdout.",
        rich_help_panel="Output",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Use strict Z85 (whole 4-byte / 5-character groups only).",
        rich_help_panel="Codec",
    ),
    extended: bool = typer.Option(
        False,
        "--extended",
        help="Use Z85 Extended (any length), overriding the config.",
        rich_help_panel="Codec",
    ),
    wrap: int | None = typer.Option(
        None,
        "--wrap",
        min=0,
        help="Wrap output every N characters (0 = single line).",
        rich_help_panel="Output",
    ),
) -> None:
    defaults: CliDefaults = _ctx_value(ctx, "defaults") or CliDefaults()
    quiet = bool(_ctx_value(ctx, "quiet"))
    debug = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        data = _read_input_bytes(input_path)
        if not data:
            _warn("input is empty; writing empty output", quiet=quiet)
        variant = resolve_variant(
            strict=strict, extended=extended, default=defaults.codec.variant
        )
        if variant == "extended" and defaults.codec.variant == "strict":
            _warn(
                "config prefers strict Z85; extended output may not decode with strict Z85 readers",
                quiet=quiet,
            )
        codec = resolve_codec(variant)
        try:
            encoded = codec.encode(data)
        except LengthPreconditionError as exc:
            raise LengthPreconditionError(
                append_hint(str(exc), "Use --extended for inputs of any length.")
            ) from exc
        line_length = defaults.output.wrap if wrap is None else wrap
        lines = wrap_text(encoded, line_length=line_length)
        text = "\n".join(lines)
        if lines and defaults.output.newline:
            text += "\n"
        _write_output(output, text.encode("ascii"), quiet=quiet)

    _run_cli(_run, debug=debug)
