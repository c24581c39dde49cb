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

# Binary side of one Z85 group.
BYTE_GROUP_SIZE = 4

# Text side of one Z85 group.
CHAR_GROUP_SIZE = 5

# Radix of the text side.
Z85_BASE = 85

# Radix of the binary side.
BYTE_BASE = 256

# Maximum CLI input size (bytes read from a file or stdin).
MAX_INPUT_BYTES = 67_108_864


__all__ = [
    "BYTE_BASE",
    "BYTE_GROUP_SIZE",
    "CHAR_GROUP_SIZE",
    "MAX_INPUT_BYTES",
    "Z85_BASE",
]
