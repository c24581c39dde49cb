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


"""Z85 Extended: Z85 plus a shortened final group for any input length.

A tail of r bytes (1-3) becomes r + 1 characters; a tail of k characters
(2-4) becomes k - 1 bytes. Inputs that are whole groups encode exactly as
strict Z85 does.
"""

from __future__ import annotations

from typing import Any

from ..core.bounds import BYTE_BASE, BYTE_GROUP_SIZE, CHAR_GROUP_SIZE, Z85_BASE
from ..core.validation import (
    as_byte_view,
    as_char_view,
    as_writable_view,
    require_extended_char_length,
    require_non_negative_length,
    require_sized_at_least,
)
from .alphabet import DECODER, ENCODER
from .z85 import DIVISORS_85, DIVISORS_256, decode_groups, encode_groups


def encoded_size(byte_length: int) -> int:
    require_non_negative_length(byte_length, label="byte length")
    remainder = byte_length % BYTE_GROUP_SIZE
    size = byte_length // BYTE_GROUP_SIZE * CHAR_GROUP_SIZE
    if remainder:
        size += remainder + 1
    return size


def decoded_size(char_length: int) -> int:
    require_non_negative_length(char_length, label="char length")
    require_extended_char_length(char_length, label="char length")
    remainder = char_length % CHAR_GROUP_SIZE
    size = char_length // CHAR_GROUP_SIZE * BYTE_GROUP_SIZE
    if remainder:
        size += remainder - 1
    return size


def encode_into(source: Any, destination: Any) -> int:
    src = as_byte_view(source, label="source")
    size = encoded_size(len(src))
    dest = as_writable_view(destination, label="destination")
    require_sized_at_least(len(dest), size, label="destination")
    _encode(src, dest)
    return size


def encode(source: Any) -> str:
    src = as_byte_view(source, label="source")
    out = bytearray(encoded_size(len(src)))
    _encode(src, out)
    return out.decode("ascii")


def decode_into(chars: Any, destination: Any) -> int:
    src = as_char_view(chars, label="chars")
    size = decoded_size(len(src))
    dest = as_writable_view(destination, label="destination")
    require_sized_at_least(len(dest), size, label="destination")
    _decode(src, dest)
    return size


def decode(chars: Any) -> bytes:
    src = as_char_view(chars, label="chars")
    out = bytearray(decoded_size(len(src)))
    _decode(src, out)
    return bytes(out)


def _encode(src: memoryview, dest: Any) -> int:
    length = len(src)
    full = length - length % BYTE_GROUP_SIZE
    pos = encode_groups(src, full, dest, 0)
    if full < length:
        pos = _encode_tail(src[full:], dest, pos)
    return pos


def _decode(src: memoryview, dest: Any) -> int:
    length = len(src)
    full = length - length % CHAR_GROUP_SIZE
    pos = decode_groups(src, full, dest, 0)
    if full < length:
        pos = _decode_tail(src[full:], dest, pos)
    return pos


def _encode_tail(tail: memoryview, dest: Any, offset: int) -> int:
    # r bytes -> r + 1 digits, divisors 85^r .. 85^0
    value = 0
    for byte in tail:
        value = value * BYTE_BASE + byte
    pos = offset
    for divisor in DIVISORS_85[-(len(tail) + 1) :]:
        dest[pos] = ENCODER[value // divisor % Z85_BASE]
        pos += 1
    return pos


def _decode_tail(tail: memoryview, dest: Any, offset: int) -> int:
    # k chars -> k - 1 bytes, divisors 256^(k-2) .. 256^0
    value = 0
    for char in tail:
        value = value * Z85_BASE + DECODER[char]
    pos = offset
    for divisor in DIVISORS_256[-(len(tail) - 1) :]:
        dest[pos] = value // divisor % BYTE_BASE
        pos += 1
    return pos
