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


class Z85Error(ValueError):
    """Base class for codec failures. Subclasses ValueError so callers can catch either."""


class NullInputError(Z85Error, TypeError):
    """A required source or destination was None."""


class LengthPreconditionError(Z85Error):
    """Input length cannot be split into the groups the codec requires."""


class CapacityError(Z85Error):
    """Destination buffer is smaller than the computed output size."""


__all__ = [
    "CapacityError",
    "LengthPreconditionError",
    "NullInputError",
    "Z85Error",
]
