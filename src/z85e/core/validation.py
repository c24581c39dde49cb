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

from typing import Any

from ..encoding.alphabet import is_alphabet_char
from .bounds import CHAR_GROUP_SIZE
from .errors import CapacityError, LengthPreconditionError, NullInputError


def require_not_none(value: object, *, label: str) -> None:
    """Reject a missing source or destination before any work is done."""
    if value is None:
        raise NullInputError(f"{label} must not be None")


def as_byte_view(value: object, *, label: str) -> memoryview:
    """Return a flat read-only byte view over a bytes-like value."""
    require_not_none(value, label=label)
    if isinstance(value, str):
        raise ValueError(f"{label} must be bytes-like, not str")
    try:
        view = memoryview(value)  # type: ignore[arg-type]
    except TypeError as exc:
        raise ValueError(f"{label} must be bytes-like") from exc
    return _flatten(view, label=label)


def as_char_view(value: object, *, label: str) -> memoryview:
    """Return one byte per character for str or bytes-like encoded text.

    Characters are not checked against the alphabet here; see require_alphabet.
    """
    require_not_none(value, label=label)
    if isinstance(value, str):
        try:
            raw = value.encode("latin-1")
        except UnicodeEncodeError as exc:
            raise ValueError(
                f"{label} must contain only single-byte characters "
                f"(position {exc.start}: {value[exc.start]!r})"
            ) from exc
        return memoryview(raw)
    return as_byte_view(value, label=label)


def as_writable_view(value: object, *, label: str) -> memoryview:
    view = as_byte_view(value, label=label)
    if view.readonly:
        raise ValueError(f"{label} must be writable")
    return view


def require_non_negative_length(length: int, *, label: str) -> int:
    if not isinstance(length, int) or length < 0:
        raise ValueError(f"{label} must be a non-negative int")
    return length


def require_size_multiple_of(length: int, multiple: int, *, label: str) -> None:
    """Validate that a length covers a whole number of groups."""
    if length % multiple != 0:
        raise LengthPreconditionError(
            f"{label} must be a multiple of {multiple}, got {length}"
        )


def require_extended_char_length(length: int, *, label: str) -> None:
    """A trailing group of a single character cannot come from any byte tail."""
    if length % CHAR_GROUP_SIZE == 1:
        raise LengthPreconditionError(
            f"{label} % {CHAR_GROUP_SIZE} cannot be 1, got {length}"
        )


def require_sized_at_least(actual: int, required: int, *, label: str) -> None:
    if actual < required:
        raise CapacityError(f"{label} must hold at least {required} items, got {actual}")


def find_invalid_char(chars: Any) -> int | None:
    """Return the index of the first non-alphabet character, or None."""
    view = as_char_view(chars, label="chars")
    for idx, value in enumerate(view):
        if not is_alphabet_char(value):
            return idx
    return None


def require_alphabet(chars: Any, *, label: str) -> None:
    idx = find_invalid_char(chars)
    if idx is None:
        return
    bad = as_char_view(chars, label=label)[idx]
    raise ValueError(f"{label} contains a non-Z85 character {chr(bad)!r} at position {idx}")


def _flatten(view: memoryview, *, label: str) -> memoryview:
    if view.ndim == 1 and view.format == "B":
        return view
    if not view.c_contiguous:
        raise ValueError(f"{label} must be contiguous")
    return view.cast("B")
