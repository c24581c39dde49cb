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


"""Z85 and Z85 Extended binary-to-text encoding."""

from __future__ import annotations

from .core.errors import (
    CapacityError as CapacityError,
    LengthPreconditionError as LengthPreconditionError,
    NullInputError as NullInputError,
    Z85Error as Z85Error,
)
from .encoding import z85 as z85, z85_extended as z85_extended
from .encoding.z85_extended import (
    decode as decode,
    decode_into as decode_into,
    decoded_size as decoded_size,
    encode as encode,
    encode_into as encode_into,
    encoded_size as encoded_size,
)

__all__ = [
    "CapacityError",
    "LengthPreconditionError",
    "NullInputError",
    "Z85Error",
    "decode",
    "decode_into",
    "decoded_size",
    "encode",
    "encode_into",
    "encoded_size",
    "z85",
    "z85_extended",
]
