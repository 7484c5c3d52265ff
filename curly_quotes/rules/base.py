r"""Shared abstractions for fragment rules.

This module defines the fragment model handed over by the parsers, the static
dispatch tables keyed by fragment kind, and the :class:`Rule` base class used by
every concrete rule.

Typical usage:
    >>> from curly_quotes.rules.base import Fragment, FragmentKind, Region, trim_width
    >>> fragment = Fragment(FragmentKind.literal, 0, 4, "'a'b", Region.script)
    >>> trim_width(fragment.kind)
    1
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Mapping, Optional, Tuple


RuleResult = Tuple[int, int, str, Optional[str]]
ExcludedRange = Tuple[int, int]


class FragmentKind(str, Enum):  # pylint: disable=invalid-name
    """Closed set of parser nodes whose text may hold prose."""

    literal = "Literal"
    template_literal = "TemplateLiteral"
    jsx_text = "JSXText"
    v_literal = "VLiteral"
    v_text = "VText"


class Region(str, Enum):  # pylint: disable=invalid-name
    """Part of a document a fragment was extracted from."""

    script = "script"
    template = "template"


class Mode(str, Enum):  # pylint: disable=invalid-name
    """Visitor set selected once per document."""

    script = "script"
    markup = "markup"


# Leading/trailing characters that are syntax delimiters, not prose.
TRIM_WIDTHS: Mapping[FragmentKind, int] = {
    FragmentKind.literal: 1,
    FragmentKind.template_literal: 1,
    FragmentKind.jsx_text: 0,
    FragmentKind.v_literal: 1,
    FragmentKind.v_text: 0,
}

_SCRIPT_KINDS = frozenset(
    {FragmentKind.jsx_text, FragmentKind.literal, FragmentKind.template_literal}
)
_TEMPLATE_KINDS = frozenset(
    {
        FragmentKind.literal,
        FragmentKind.template_literal,
        FragmentKind.v_literal,
        FragmentKind.v_text,
    }
)

VISITED_KINDS: Mapping[Mode, Mapping[Region, frozenset[FragmentKind]]] = {
    Mode.script: {Region.script: _SCRIPT_KINDS, Region.template: frozenset()},
    Mode.markup: {Region.script: _SCRIPT_KINDS, Region.template: _TEMPLATE_KINDS},
}


@dataclass(frozen=True)
class Fragment:
    """Source-text-bearing node produced by a parser.

    Attributes:
        kind: Node kind, used to select the trim width.
        start: Absolute start offset of the node within the document.
        end: Absolute end offset (exclusive).
        text: Full source text of the node, delimiters included.
        region: Whether the node lives in a script or in a markup template.
        interpolations: ``${ … }`` spans of a template literal relative to
            ``text``, as reported by the parser. ``None`` when unknown.
    """

    kind: FragmentKind
    start: int
    end: int
    text: str
    region: Region = Region.script
    interpolations: Optional[Tuple[ExcludedRange, ...]] = None


def trim_width(kind: FragmentKind) -> int:
    """Return the number of delimiter characters at each end of ``kind``."""
    return TRIM_WIDTHS[kind]


def is_visited(mode: Mode, fragment: Fragment) -> bool:
    """Return whether ``fragment`` belongs to the visitor set of ``mode``."""
    return fragment.kind in VISITED_KINDS[mode][fragment.region]


class Rule(ABC):
    """Abstract base class for every fragment rule."""

    name: str
    config_attr: str

    def __init__(self, name: str, config_attr: str) -> None:
        """Initialize a rule.

        Args:
            name: Human readable identifier for the rule.
            config_attr: Name of the configuration attribute that controls the rule.
        """
        self.name = name
        self.config_attr = config_attr

    def activate(self, template_aware: bool) -> Mode:
        """Resolve the visitor set for a document.

        Args:
            template_aware: Whether the parser exposes markup template nodes.

        Returns:
            ``Mode.markup`` when template nodes are available, ``Mode.script``
            otherwise.
        """
        return Mode.markup if template_aware else Mode.script

    @abstractmethod
    def detect(self, fragment: Fragment) -> List[RuleResult]:
        """Return findings for the provided fragment.

        Args:
            fragment: Parsed node to inspect.

        Returns:
            A list of tuples describing issues. The tuple contains the absolute
            start index, end index, message, and an optional preview string.
        """
        raise NotImplementedError

    @abstractmethod
    def fix(self, fragment: Fragment) -> str:
        """Return the corrected text of the provided fragment.

        Args:
            fragment: Parsed node to transform.

        Returns:
            The replacement text for the whole fragment span.
        """
        raise NotImplementedError
