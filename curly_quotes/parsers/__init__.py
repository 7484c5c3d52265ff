"""Turn source documents into the fragments inspected by the rules."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from ..constants import SCRIPT_SUFFIXES, VUE_SUFFIXES
from ..rules.base import Fragment
from .script import parse_expression, parse_script
from .vue import parse_vue, scan_template


LANGUAGES = ("script", "vue")


@dataclass(frozen=True)
class ParsedSource:
    """Fragments of one document and the capabilities of its parser.

    Attributes:
        fragments: String-like nodes sorted by position.
        template_aware: ``True`` when the parser exposes markup template nodes
            alongside script nodes.
    """

    fragments: Tuple[Fragment, ...]
    template_aware: bool


def language_for_path(path: str | Path) -> str | None:
    """Return the language handling ``path``, ``None`` when unsupported."""
    suffix = Path(path).suffix.lower()
    if suffix in SCRIPT_SUFFIXES:
        return "script"
    if suffix in VUE_SUFFIXES:
        return "vue"
    return None


def parse_source(source: str, language: str) -> ParsedSource:
    """Parse ``source`` with the parser registered for ``language``.

    Raises:
        ValueError: When ``language`` is unknown.
        SourceParseError: When a script cannot be parsed.
    """
    if language == "script":
        return ParsedSource(tuple(parse_script(source)), template_aware=False)
    if language == "vue":
        return ParsedSource(tuple(parse_vue(source)), template_aware=True)
    raise ValueError(f"Unsupported language: {language!r}")


__all__ = [
    "LANGUAGES",
    "ParsedSource",
    "language_for_path",
    "parse_expression",
    "parse_script",
    "parse_source",
    "parse_vue",
    "scan_template",
]
