"""Extract fragments from Vue single-file components.

BeautifulSoup locates the top-level ``<template>`` and ``<script>`` blocks
together with their source positions. Script blocks are handed to esprima; the
template body is scanned here for text runs, mustache interpolations and
attribute values.
"""

from __future__ import annotations

import logging
import re
from typing import List, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..rules.base import Fragment, FragmentKind, Region
from ..utils.text import offset_for_line_column
from .script import parse_expression, parse_script


log = logging.getLogger("curly_quotes.parsers")

SCRIPT_LANGS = {"js", "jsx", "javascript"}

RE_START_TAG = re.compile(
    r"""<(?P<closing>/)?(?P<name>[A-Za-z][^\s/>]*)"""
    r"""(?P<attrs>(?:[^>"']|"[^"]*"|'[^']*')*)>"""
)
RE_ATTRIBUTE = re.compile(
    r"""(?P<name>[^\s"'<>/=]+)"""
    r"""(?:\s*=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<bare>[^\s"'=<>`]+)))?"""
)
RE_TEMPLATE_TAG = re.compile(
    r"""<(?P<closing>/)?template\b(?:[^>"']|"[^"]*"|'[^']*')*>""", re.I
)
RE_SCRIPT_END = re.compile(r"</script\s*>", re.I)
RE_MUSTACHE = re.compile(r"\{\{(?P<expr>.*?)\}\}", re.S)
RE_V_FOR = re.compile(r"\s*(?:\([^)]*\)|[^\s()]+)\s+(?:in|of)\s+", re.S)

DIRECTIVE_PREFIXES = ("v-", ":", "@", "#")


def parse_vue(source: str) -> List[Fragment]:
    """Return the fragments of a single-file component.

    Args:
        source: Whole ``.vue`` document.

    Returns:
        Template and script fragments sorted by position.

    Raises:
        SourceParseError: When a JavaScript ``<script>`` block is invalid.
    """
    soup = BeautifulSoup(source, "html.parser")
    fragments: List[Fragment] = []

    for block in soup.find_all(["template", "script"], recursive=False):
        bounds = _block_bounds(source, block)
        if bounds is None:
            log.warning("Unable to locate <%s> block, skipping it", block.name)
            continue
        body_start, body_end = bounds
        lang = str(block.get("lang") or "js").lower()

        if block.name == "script":
            if lang not in SCRIPT_LANGS:
                log.warning(
                    "Skipping <script lang=%r>: only JavaScript is supported", lang
                )
                continue
            fragments.extend(parse_script(source, body_start, body_end, Region.script))
            continue

        if lang != "html" and block.get("lang") is not None:
            log.warning("Skipping <template lang=%r>: only HTML is supported", lang)
            continue
        fragments.extend(scan_template(source, body_start, body_end))

    return sorted(fragments, key=lambda f: (f.start, f.end))


def _block_bounds(source: str, block: Tag) -> Tuple[int, int] | None:
    """Return the offsets of the content of a top-level block."""
    if block.sourceline is None or block.sourcepos is None:
        return None
    tag_start = offset_for_line_column(source, block.sourceline, block.sourcepos)
    opening = RE_START_TAG.match(source, tag_start)
    if opening is None:
        return None
    body_start = opening.end()

    if block.name == "script":
        match = RE_SCRIPT_END.search(source, body_start)
        return body_start, match.start() if match else len(source)

    depth = 1
    for match in RE_TEMPLATE_TAG.finditer(source, body_start):
        if match.group("closing"):
            depth -= 1
            if depth == 0:
                return body_start, match.start()
        elif not match.group(0).endswith("/>"):
            depth += 1
    return body_start, len(source)


def scan_template(document: str, start: int, end: int) -> List[Fragment]:
    """Return the fragments of a template body.

    Text runs between tags become ``VText`` fragments, split around mustache
    interpolations whose content is parsed as an expression. Quoted values of
    plain attributes become ``VLiteral`` fragments, quotes included; directive
    values are parsed as expressions. Comments are skipped.

    Args:
        document: Whole document text.
        start: Offset of the first template body character.
        end: Offset following the last template body character.
    """
    fragments: List[Fragment] = []
    text_start = start
    i = start
    while i < end:
        lt = document.find("<", i, end)
        mustache = document.find("{{", i, end)
        if mustache != -1 and (lt == -1 or mustache < lt):
            close = document.find("}}", mustache + 2, end)
            i = end if close == -1 else close + 2
            continue
        if lt == -1:
            break

        if document.startswith("<!--", lt):
            _text_fragments(document, text_start, lt, fragments)
            close = document.find("-->", lt + 4, end)
            i = text_start = end if close == -1 else close + 3
            continue

        tag = RE_START_TAG.match(document, lt, end)
        if tag is None:
            # A lone "<" belongs to the surrounding text.
            i = lt + 1
            continue

        _text_fragments(document, text_start, lt, fragments)
        if not tag.group("closing"):
            _attribute_fragments(
                document, tag.start("attrs"), tag.end("attrs"), fragments
            )
        i = text_start = tag.end()

    _text_fragments(document, text_start, end, fragments)
    return fragments


def _text_fragments(document: str, start: int, end: int, out: List[Fragment]) -> None:
    cursor = start
    for match in RE_MUSTACHE.finditer(document, start, end):
        _append_text(document, cursor, match.start(), out)
        out.extend(parse_expression(document, match.start("expr"), match.end("expr")))
        cursor = match.end()
    _append_text(document, cursor, end, out)


def _append_text(document: str, start: int, end: int, out: List[Fragment]) -> None:
    if start >= end or not document[start:end].strip():
        return
    out.append(
        Fragment(FragmentKind.v_text, start, end, document[start:end], Region.template)
    )


def _attribute_fragments(
    document: str, start: int, end: int, out: List[Fragment]
) -> None:
    for match in RE_ATTRIBUTE.finditer(document, start, end):
        group = "dq" if match.group("dq") is not None else "sq"
        if match.group(group) is None:
            continue
        value_start, value_end = match.start(group), match.end(group)
        name = match.group("name")

        if not name.startswith(DIRECTIVE_PREFIXES):
            out.append(
                Fragment(
                    FragmentKind.v_literal,
                    value_start - 1,
                    value_end + 1,
                    document[value_start - 1 : value_end + 1],
                    Region.template,
                )
            )
            continue

        if name.startswith("#") or name.startswith("v-slot"):
            continue
        if name == "v-for":
            alias = RE_V_FOR.match(document, value_start, value_end)
            if alias is None:
                continue
            value_start = alias.end()
        out.extend(parse_expression(document, value_start, value_end))
