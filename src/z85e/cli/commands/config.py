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
from rich.markup import escape

from ...config import init_user_config, resolve_config_path, user_config_needs_init
from ..core.common import _ctx_value, _run_cli
from ..core.log import _warn
from ..ui import console

_CONFIG_HELP = (
    "Show or initialize the active TOML config.\n\n"
    "Examples:\n"
    "  z85e config\n"
    "  z85e config --init\n"
    "  z85e --config ./z85e.toml config\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_CONFIG_HELP)(config)


def config(
    ctx: typer.Context,
    init: bool = typer.Option(
        False,
        "--init",
        help="Copy the default config to the user config directory.",
        rich_help_panel="Behavior",
    ),
) -> None:
    config_value = _ctx_value(ctx, "config")
    quiet = bool(_ctx_value(ctx, "quiet"))
    debug = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        if init:
            path = init_user_config()
            if not quiet:
                console.print(f"User config ready at {escape(str(path))}")
            return
        path = resolve_config_path(config_value)
        console.print(escape(str(path)), soft_wrap=True, highlight=False)
        if config_value is None and user_config_needs_init():
            _warn("no user config found; run `z85e config --init` to create one", quiet=quiet)

    _run_cli(_run, debug=debug)
