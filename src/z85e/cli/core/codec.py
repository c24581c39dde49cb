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

from types import ModuleType

from ...config import Variant
from ...encoding import z85, z85_extended

_CODECS: dict[str, ModuleType] = {
    "extended": z85_extended,
    "strict": z85,
}


def resolve_codec(variant: Variant) -> ModuleType:
    try:
        return _CODECS[variant]
    except KeyError as exc:
        raise ValueError(f"unknown codec variant: {variant}") from exc


def resolve_variant(*, strict: bool, extended: bool, default: Variant) -> Variant:
    if strict and extended:
        raise ValueError("use either --strict or --extended, not both")
    if strict:
        return "strict"
    if extended:
        return "extended"
    return default
