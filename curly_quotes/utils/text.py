"""Offset and range helpers shared by the parsers, the rules and the linter."""

from __future__ import annotations

from typing import List, Sequence, Tuple


def merge_ranges(ranges: Sequence[Tuple[int, int]]) -> List[Tuple[int, int]]:
    """Merge overlapping ranges and return them sorted by start offset."""
    if not ranges:
        return []
    sorted_ranges = sorted(ranges)
    merged: List[Tuple[int, int]] = [sorted_ranges[0]]
    for start, end in sorted_ranges[1:]:
        last_start, last_end = merged[-1]
        if start < last_end:
            merged[-1] = (last_start, max(last_end, end))
        else:
            merged.append((start, end))
    return merged


def line_column_for_offset(text: str, index: int) -> tuple[int, int]:
    """Return the 1-based line and column for a string offset."""
    line = text.count("\n", 0, index) + 1
    last_newline = text.rfind("\n", 0, index)
    if last_newline == -1:
        column = index + 1
    else:
        column = index - last_newline
    return line, column


def offset_for_line_column(text: str, line: int, column: int) -> int:
    """Return the offset of a 1-based line and 0-based column."""
    offset = 0
    for _ in range(line - 1):
        newline = text.find("\n", offset)
        if newline == -1:
            return len(text)
        offset = newline + 1
    return min(offset + column, len(text))


def apply_replacements(
    text: str, replacements: Sequence[tuple[int, int, str]]
) -> tuple[str, int]:
    """Apply sorted, non-overlapping replacements to the provided string.

    Replacements overlapping an already applied one are left out so that a
    later pass can compute them again against the updated text.

    Returns:
        The updated text and the number of replacements applied.
    """
    if not replacements:
        return text, 0

    pieces: List[str] = []
    last_idx = 0
    applied = 0
    for start, end, replacement in sorted(replacements, key=lambda r: (r[0], r[1])):
        if start < last_idx:
            continue
        pieces.append(text[last_idx:start])
        pieces.append(replacement)
        last_idx = end
        applied += 1
    pieces.append(text[last_idx:])
    return "".join(pieces), applied
