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

import sys
from pathlib import Path

from ...core.bounds import MAX_INPUT_BYTES


def _read_input_bytes(path: str, *, limit: int = MAX_INPUT_BYTES) -> bytes:
    if path == "-":
        data = sys.stdin.buffer.read(limit + 1)
    else:
        source = Path(path).expanduser()
        if not source.exists():
            raise ValueError(f"input file not found: {source}")
        if not source.is_file():
            raise ValueError(f"input path is not a file: {source}")
        try:
            with source.open("rb") as handle:
                data = handle.read(limit + 1)
        except OSError as exc:
            raise ValueError(f"unable to read file: {source}") from exc
    if len(data) > limit:
        raise ValueError(f"input exceeds {limit} bytes")
    return data


def _read_input_text(path: str, *, limit: int = MAX_INPUT_BYTES) -> str:
    data = _read_input_bytes(path, limit=limit)
    try:
        return data.decode("ascii")
    except UnicodeDecodeError as exc:
        raise ValueError(
            f"input is not ASCII text (byte 0x{data[exc.start]:02x} at offset {exc.start})"
        ) from exc
