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

# ZeroMQ RFC 32 order; must not be re-derived.
ENCODER = (
    b"0123456789abcdefghijklmnopqrstuvwxyz"
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZ.-:+=^!/*?&<>()[]{}@%$#"
)
ENCODER_TEXT = ENCODER.decode("ascii")

# Marks byte values outside the alphabet; never produced by ENCODER lookups.
UNUSED = 0xFF


def _build_decoder(encoder: bytes) -> bytes:
    table = bytearray([UNUSED]) * 256
    for value, char in enumerate(encoder):
        table[char] = value
    return bytes(table)


DECODER = _build_decoder(ENCODER)


def is_alphabet_char(char: int | str) -> bool:
    code = ord(char) if isinstance(char, str) else char
    return 0 <= code < len(DECODER) and DECODER[code] != UNUSED


__all__ = ["DECODER", "ENCODER", "ENCODER_TEXT", "UNUSED", "is_alphabet_char"]
