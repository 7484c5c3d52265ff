"""Extract string-like fragments from JavaScript and JSX with esprima."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

import esprima
from esprima.error_handler import Error as EsprimaError

from ..errors import SourceParseError
from ..rules.base import Fragment, FragmentKind, Region
from ..utils.text import line_column_for_offset


log = logging.getLogger("curly_quotes.parsers")

_PARSE_OPTIONS = {"jsx": True, "range": True}


class _FragmentCollector:
    """esprima node delegate recording the nodes that may hold prose."""

    def __init__(self, source: str, base: int, region: Region) -> None:
        self._source = source
        self._base = base
        self._region = region
        self._found: Dict[Tuple[int, int], Fragment] = {}

    def __call__(self, node: Any, metadata: Any) -> None:
        del metadata
        kind = _fragment_kind(node)
        if kind is None:
            return
        start, end = node.range
        interpolations = None
        if kind is FragmentKind.template_literal:
            interpolations = _interpolation_spans(node, start)
        self._found[(start, end)] = Fragment(
            kind=kind,
            start=self._base + start,
            end=self._base + end,
            text=self._source[start:end],
            region=self._region,
            interpolations=interpolations,
        )

    @property
    def fragments(self) -> List[Fragment]:
        return sorted(self._found.values(), key=lambda f: (f.start, f.end))


def _fragment_kind(node: Any) -> FragmentKind | None:
    node_type = getattr(node, "type", None)
    if node_type == "Literal":
        # Numbers, booleans, null and regular expressions hold no prose.
        value = getattr(node, "value", None)
        if isinstance(value, str) and not getattr(node, "regex", None):
            return FragmentKind.literal
        return None
    if node_type == "TemplateLiteral":
        return FragmentKind.template_literal
    if node_type == "JSXText":
        return FragmentKind.jsx_text
    return None


def _interpolation_spans(node: Any, offset: int) -> Tuple[Tuple[int, int], ...]:
    """Return the ``${ … }`` spans of a template literal relative to its text.

    Template element tokens carry their delimiters: a quasi followed by an
    expression ends with ``${`` and the next one starts with ``}``.
    """
    quasis = node.quasis
    return tuple(
        (before.range[1] - 2 - offset, after.range[0] + 1 - offset)
        for before, after in zip(quasis, quasis[1:])
    )


def parse_script(
    document: str,
    start: int = 0,
    end: int | None = None,
    region: Region = Region.script,
) -> List[Fragment]:
    """Return the string-like fragments of a script.

    The module goal is tried first so that ``import``/``export`` are accepted;
    sources rejected by it (sloppy-mode constructs) are parsed again as a
    classic script.

    Args:
        document: Whole document text.
        start: Offset of the first script character within ``document``.
        end: Offset following the last script character, defaults to the end.
        region: Region recorded on the produced fragments.

    Returns:
        Fragments sorted by position, with offsets into ``document``.

    Raises:
        SourceParseError: When neither goal accepts the source.
    """
    end = len(document) if end is None else end
    source = document[start:end]

    error: EsprimaError | None = None
    for parse in (esprima.parseModule, esprima.parseScript):
        collector = _FragmentCollector(source, start, region)
        try:
            parse(source, dict(_PARSE_OPTIONS), collector)
        except EsprimaError as exc:
            if error is None:
                error = exc
            continue
        return collector.fragments

    assert error is not None
    raise _to_parse_error(error, document, start)


def parse_expression(
    document: str,
    start: int,
    end: int,
    region: Region = Region.template,
) -> List[Fragment]:
    """Return the fragments of an expression embedded in a markup template.

    The text is tried as a parenthesised expression first (object literals,
    plain expressions), then as statements (event handlers such as
    ``count++; notify()``).

    Returns:
        Fragments with offsets into ``document``; an empty list when the text is
        not ECMAScript.
    """
    source = document[start:end]
    for wrapped, shift in ((f"({source})", 1), (source, 0)):
        collector = _FragmentCollector(wrapped, start - shift, region)
        try:
            esprima.parseScript(wrapped, dict(_PARSE_OPTIONS), collector)
        except EsprimaError:
            continue
        return [
            fragment
            for fragment in collector.fragments
            if start <= fragment.start and fragment.end <= end
        ]

    line, column = line_column_for_offset(document, start)
    log.debug(
        "Skipping unparsable template expression at %s:%s: %r", line, column, source
    )
    return []


def _to_parse_error(error: EsprimaError, document: str, start: int) -> SourceParseError:
    message = getattr(error, "description", None) or str(error)
    index = getattr(error, "index", None)
    if index is not None:
        line, column = line_column_for_offset(document, start + index)
        return SourceParseError(message, line, column)

    line_number = getattr(error, "lineNumber", None)
    if line_number is None:
        return SourceParseError(message)
    first_line, _ = line_column_for_offset(document, start)
    return SourceParseError(
        message, first_line + line_number - 1, getattr(error, "column", None)
    )
