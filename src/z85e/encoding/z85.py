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


"""Strict Z85: 4 bytes <-> 5 characters, whole groups only."""

from __future__ import annotations

from typing import Any

from ..core.bounds import BYTE_BASE, BYTE_GROUP_SIZE, CHAR_GROUP_SIZE, Z85_BASE
from ..core.validation import (
    as_byte_view,
    as_char_view,
    as_writable_view,
    require_non_negative_length,
    require_size_multiple_of,
    require_sized_at_least,
)
from .alphabet import DECODER, ENCODER

# 85^4 .. 85^0 and 256^3 .. 256^0
DIVISORS_85 = tuple(Z85_BASE**power for power in range(CHAR_GROUP_SIZE - 1, -1, -1))
DIVISORS_256 = tuple(BYTE_BASE**power for power in range(BYTE_GROUP_SIZE - 1, -1, -1))


def encoded_size(byte_length: int) -> int:
    require_non_negative_length(byte_length, label="byte length")
    require_size_multiple_of(byte_length, BYTE_GROUP_SIZE, label="byte length")
    return byte_length // BYTE_GROUP_SIZE * CHAR_GROUP_SIZE


def decoded_size(char_length: int) -> int:
    require_non_negative_length(char_length, label="char length")
    require_size_multiple_of(char_length, CHAR_GROUP_SIZE, label="char length")
    return char_length // CHAR_GROUP_SIZE * BYTE_GROUP_SIZE


def encode_into(source: Any, destination: Any) -> int:
    """Write the Z85 text of source into destination as ASCII bytes.

    Returns the number of characters written. Length and capacity are checked
    before the first write, so a failed call leaves destination untouched.
    """
    src = as_byte_view(source, label="source")
    size = encoded_size(len(src))
    dest = as_writable_view(destination, label="destination")
    require_sized_at_least(len(dest), size, label="destination")
    encode_groups(src, len(src), dest, 0)
    return size


def encode(source: Any) -> str:
    src = as_byte_view(source, label="source")
    out = bytearray(encoded_size(len(src)))
    encode_groups(src, len(src), out, 0)
    return out.decode("ascii")


def decode_into(chars: Any, destination: Any) -> int:
    """Write the bytes encoded by chars into destination.

    Characters outside the alphabet are not detected and decode to garbage.
    """
    src = as_char_view(chars, label="chars")
    size = decoded_size(len(src))
    dest = as_writable_view(destination, label="destination")
    require_sized_at_least(len(dest), size, label="destination")
    decode_groups(src, len(src), dest, 0)
    return size


def decode(chars: Any) -> bytes:
    src = as_char_view(chars, label="chars")
    out = bytearray(decoded_size(len(src)))
    decode_groups(src, len(src), out, 0)
    return bytes(out)


def encode_groups(src: memoryview, end: int, dest: Any, offset: int) -> int:
    """Encode src[:end] (a multiple of 4) into dest starting at offset.

    Returns the offset just past the last character written.
    """
    pos = offset
    for start in range(0, end, BYTE_GROUP_SIZE):
        value = int.from_bytes(src[start : start + BYTE_GROUP_SIZE], "big")
        for divisor in DIVISORS_85:
            dest[pos] = ENCODER[value // divisor % Z85_BASE]
            pos += 1
    return pos


def decode_groups(src: memoryview, end: int, dest: Any, offset: int) -> int:
    """Decode src[:end] (a multiple of 5) into dest starting at offset."""
    pos = offset
    for start in range(0, end, CHAR_GROUP_SIZE):
        value = 0
        for char in src[start : start + CHAR_GROUP_SIZE]:
            value = value * Z85_BASE + DECODER[char]
        for divisor in DIVISORS_256:
            dest[pos] = value // divisor % BYTE_BASE
            pos += 1
    return pos
