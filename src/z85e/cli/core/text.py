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


def wrap_text(encoded: str, *, line_length: int) -> list[str]:
    """Split encoded text into lines of at most line_length characters."""
    if not encoded:
        return []
    if line_length <= 0:
        return [encoded]
    return [encoded[i : i + line_length] for i in range(0, len(encoded), line_length)]


def strip_whitespace(text: str) -> str:
    return "".join(text.split())


def append_hint(message: str, hint: str) -> str:
    if not hint:
        return message
    if message.endswith((".", "!", "?")):
        return f"{message} {hint}"
    return f"{message}. {hint}"
