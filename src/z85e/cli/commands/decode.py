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
from ...core.validation import require_alphabet
from ..core.codec import resolve_codec, resolve_variant
from ..core.common import _ctx_value, _run_cli
from ..core.text import append_hint, strip_whitespace
from ..io.inputs import _read_input_text
from ..io.outputs import _write_output

_DECODE_HELP = (
    "Decode Z85 text back to binary data.\n\n"
    "Whitespace (including line breaks from --wrap) is ignored. Characters outside\n"
    "the Z85 alphabet are not detected unless --check is given.\n\n"
    "Examples:\n"
    "  z85e decode key.txt -o key.bin\n"
    "  echo HelloWorld | z85e decode --strict - | xxd\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_DECODE_HELP)(decode)


def decode(
    ctx: typer.Context,
    input_path: str = typer.Argument(
        "-",
        metavar="INPUT",
        help="File to decode ('-' reads stdin).",
        show_default=False,
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write decoded bytes to this file instead of stdout.",
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
    check: bool = typer.Option(
        False,
        "--check",
        help="Reject characters outside the Z85 alphabet before decoding.",
        rich_help_panel="Codec",
    ),
) -> None:
    defaults: CliDefaults = _ctx_value(ctx, "defaults") or CliDefaults()
    quiet = bool(_ctx_value(ctx, "quiet"))
    debug = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        text = strip_whitespace(_read_input_text(input_path))
        if check or defaults.codec.check_alphabet:
            require_alphabet(text, label="input")
        variant = resolve_variant(
            strict=strict, extended=extended, default=defaults.codec.variant
        )
        codec = resolve_codec(variant)
        try:
            data = codec.decode(text)
        except LengthPreconditionError as exc:
            hint = (
                "Use --extended for text produced by Z85 Extended."
                if variant == "strict"
                else "The input may be truncated."
            )
            raise LengthPreconditionError(append_hint(str(exc), hint)) from exc
        _write_output(output, data, quiet=quiet)

    _run_cli(_run, debug=debug)
