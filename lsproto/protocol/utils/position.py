from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..common_structures import Position, Range


def position_within_range(pos: Position, range: Range) -> bool:
    if pos.line < range.start.line:
        return False
    if pos.line == range.start.line and pos.character < range.start.character:
        return False
    if pos.line > range.end.line:
        return False
    if pos.line == range.end.line and pos.character > range.end.character:
        return False
    return True


def utf16_column(line: str, index: int) -> int:
    """
    Convert a code point index within `line` into a UTF-16 code unit offset,
    the unit `Position.character` is expressed in.
    """
    return sum(2 if ord(c) > 0xFFFF else 1 for c in line[:index])


def code_point_index(line: str, column: int) -> int:
    """
    Inverse of `utf16_column`. A column pointing into the middle of a surrogate
    pair resolves to the character that owns it; columns past the end of the
    line clamp to its length.
    """
    units = 0
    for i, c in enumerate(line):
        width = 2 if ord(c) > 0xFFFF else 1
        if units + width > column:
            return i
        units += width
    return len(line)
