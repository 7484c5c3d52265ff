"""Locate the parts of a fragment that are code rather than prose.

Template literals embed ``${ … }`` interpolations whose content is live
JavaScript. Quote conversion must neither touch nor count the quotes found
there, so each interpolation is reported as a half-open range relative to the
fragment text, from the ``$`` through the matching ``}``.

Parsed fragments carry the spans reported by esprima. The text scanner below
only serves fragments built without a parser, such as ``convert`` input; it
does not recognise regular expression literals.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..utils.text import merge_ranges
from .base import ExcludedRange, FragmentKind


def excluded_ranges(
    text: str,
    kind: FragmentKind,
    interpolations: Sequence[ExcludedRange] | None = None,
) -> Tuple[ExcludedRange, ...]:
    """Return the sorted, disjoint ranges of ``text`` to leave untouched.

    Args:
        text: Full source text of the fragment, delimiters included.
        kind: Fragment kind; only template literals embed expressions.
        interpolations: Interpolation spans reported by the parser. When
            ``None``, ``text`` is scanned for them.

    Returns:
        A tuple of ``(start, end)`` ranges, empty for every other kind.

    Examples:
        >>> excluded_ranges('`Say "${name}" now`', FragmentKind.template_literal)
        ((6, 13),)
        >>> excluded_ranges("'${name}'", FragmentKind.literal)
        ()
    """
    if kind is not FragmentKind.template_literal:
        return ()
    if interpolations is None:
        interpolations = _interpolation_ranges(text)
    return tuple(merge_ranges(interpolations))


def _interpolation_ranges(text: str) -> List[ExcludedRange]:
    """Collect top-level ``${ … }`` segments of a template literal."""
    ranges: List[ExcludedRange] = []
    length = len(text)
    # Skip the opening backtick; the closing one never starts a segment.
    i = 1 if text.startswith("`") else 0
    while i < length:
        char = text[i]
        if char == "\\":
            i += 2
            continue
        if char == "$" and text.startswith("{", i + 1):
            end = _skip_expression(text, i + 2)
            ranges.append((i, end))
            i = end
            continue
        i += 1
    return ranges


def _skip_expression(text: str, i: int) -> int:
    """Return the index following the ``}`` closing an interpolation.

    ``i`` points right after the opening ``${``. Nested braces, strings,
    template literals and comments are skipped so that the braces and quotes
    they contain do not end the segment early. An unterminated segment runs to
    the end of ``text``.
    """
    length = len(text)
    depth = 1
    while i < length:
        char = text[i]
        if char in "'\"":
            i = _skip_string(text, i + 1, char)
            continue
        if char == "`":
            i = _skip_template(text, i + 1)
            continue
        if text.startswith("//", i):
            newline = text.find("\n", i)
            i = length if newline == -1 else newline + 1
            continue
        if text.startswith("/*", i):
            close = text.find("*/", i + 2)
            i = length if close == -1 else close + 2
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1
    return length


def _skip_string(text: str, i: int, delimiter: str) -> int:
    """Return the index following the end of a quoted string."""
    length = len(text)
    while i < length:
        char = text[i]
        if char == "\\":
            i += 2
            continue
        if char == delimiter or char == "\n":
            return i + 1
        i += 1
    return length


def _skip_template(text: str, i: int) -> int:
    """Return the index following the end of a nested template literal."""
    length = len(text)
    while i < length:
        char = text[i]
        if char == "\\":
            i += 2
            continue
        if char == "`":
            return i + 1
        if char == "$" and text.startswith("{", i + 1):
            i = _skip_expression(text, i + 2)
            continue
        i += 1
    return length
