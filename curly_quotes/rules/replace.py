"""Replace straight quotes of one family with paired typographic marks."""

from __future__ import annotations

from typing import Iterator, List, Sequence

from .base import ExcludedRange


def convert_quotes(
    text: str,
    trim_width: int,
    quote_char: str,
    opening: str,
    closing: str,
    excluded: Sequence[ExcludedRange] = (),
) -> str:
    """Swap every in-scope ``quote_char`` for ``opening`` or ``closing``.

    Quotes alternate in scan order: the 1st, 3rd, 5th… in-scope occurrence
    becomes ``opening`` and the 2nd, 4th… becomes ``closing``. Characters in the
    first or last ``trim_width`` positions and characters inside ``excluded``
    ranges are copied verbatim and never counted. Offsets are relative to
    ``text`` itself.

    Args:
        text: Full fragment text, delimiters included.
        trim_width: Number of delimiter characters at each end of ``text``.
        quote_char: Straight quote to replace (``'`` or ``"``).
        opening: Replacement for opening occurrences.
        closing: Replacement for closing occurrences.
        excluded: Sorted, disjoint ``(start, end)`` ranges to leave untouched.

    Returns:
        The converted text, or ``text`` itself when no quote is in scope.

    Examples:
        >>> convert_quotes('"She said \\'hi\\' to him"', 1, "'", "‘", "’")
        '"She said ‘hi’ to him"'
    """
    if quote_char not in "".join(iter_unexcluded(text, excluded)):
        return text

    out: List[str] = []
    pending_close = False
    for in_scope, char in _mark_scope(text, trim_width, excluded):
        if not in_scope or char != quote_char:
            out.append(char)
            continue
        out.append(closing if pending_close else opening)
        pending_close = not pending_close
    return "".join(out)


def iter_unexcluded(text: str, excluded: Sequence[ExcludedRange]) -> Iterator[str]:
    """Yield the characters of ``text`` lying outside every excluded range."""
    for in_range, char in _mark_ranges(text, excluded):
        if not in_range:
            yield char


def in_scope_text(text: str, trim_width: int, excluded: Sequence[ExcludedRange]) -> str:
    """Return the characters that are neither excluded nor delimiters."""
    return "".join(
        char for in_scope, char in _mark_scope(text, trim_width, excluded) if in_scope
    )


def _mark_scope(
    text: str, trim_width: int, excluded: Sequence[ExcludedRange]
) -> Iterator[tuple[bool, str]]:
    """Pair each character of ``text`` with whether it may be converted."""
    upper = len(text) - trim_width
    for index, (in_range, char) in enumerate(_mark_ranges(text, excluded)):
        yield (not in_range and trim_width <= index < upper), char


def _mark_ranges(
    text: str, excluded: Sequence[ExcludedRange]
) -> Iterator[tuple[bool, str]]:
    """Pair each character of ``text`` with whether an excluded range covers it."""
    ranges = iter(excluded)
    current = next(ranges, None)
    for index, char in enumerate(text):
        while current is not None and index >= current[1]:
            current = next(ranges, None)
        yield current is not None and current[0] <= index, char


def shift_ranges(
    text: str,
    trim_width: int,
    quote_char: str,
    opening: str,
    closing: str,
    excluded: Sequence[ExcludedRange],
) -> List[ExcludedRange]:
    """Move ``excluded`` to the offsets of ``convert_quotes`` output.

    Arguments are those of the :func:`convert_quotes` call. Converted quotes
    never lie inside a range, so each range moves as a whole by the growth of
    the marks inserted before it.

    Examples:
        >>> shift_ranges("`'a' ${b}`", 1, "'", "&lsquo;", "&rsquo;", [(5, 9)])
        [(17, 21)]
    """
    if quote_char not in "".join(iter_unexcluded(text, excluded)):
        return list(excluded)

    growth: List[tuple[int, int]] = []
    delta = 0
    pending_close = False
    for index, (in_scope, char) in enumerate(_mark_scope(text, trim_width, excluded)):
        if not in_scope or char != quote_char:
            continue
        delta += len(closing if pending_close else opening) - 1
        pending_close = not pending_close
        growth.append((index, delta))

    shifted: List[ExcludedRange] = []
    position = 0
    delta = 0
    for start, end in excluded:
        while position < len(growth) and growth[position][0] < start:
            delta = growth[position][1]
            position += 1
        shifted.append((start + delta, end + delta))
    return shifted
