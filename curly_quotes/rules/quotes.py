"""Rule that converts straight quotes to typographic quotation marks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from ..constants import (
    DOUBLE_QUOTE,
    LEFT_DOUBLE_QUOTE,
    LEFT_SINGLE_QUOTE,
    RIGHT_DOUBLE_QUOTE,
    RIGHT_SINGLE_QUOTE,
    SINGLE_QUOTE,
)
from .base import ExcludedRange, Fragment, Rule, RuleResult, trim_width
from .ranges import excluded_ranges
from .replace import convert_quotes, in_scope_text, shift_ranges


MESSAGE = "Prefer the use of curly quotes"


@dataclass(frozen=True)
class QuoteOptions:
    """Replacement marks for both quote families, defaults already applied."""

    single_opening: str = LEFT_SINGLE_QUOTE
    single_closing: str = RIGHT_SINGLE_QUOTE
    double_opening: str = LEFT_DOUBLE_QUOTE
    double_closing: str = RIGHT_DOUBLE_QUOTE


class NoStraightQuotesRule(Rule):
    """Report string-like fragments holding straight quotes and curl them."""

    def __init__(self, options: QuoteOptions | None = None) -> None:
        """Register the rule in the orchestrator.

        Args:
            options: Replacement marks; the typographic English defaults are
                used when omitted.
        """
        super().__init__(name="no-straight-quotes", config_attr="level")
        self.options = options or QuoteOptions()

    def detect(self, fragment: Fragment) -> list[RuleResult]:
        """Return one warning when the fragment holds an in-scope straight quote.

        Args:
            fragment: Parsed node to scan.

        Returns:
            An empty list, or a single result spanning the whole fragment with
            the converted text as preview. The preview is ``None`` when the
            configured marks leave the text unchanged.
        """
        width = trim_width(fragment.kind)
        excluded = _excluded(fragment)
        prose = in_scope_text(fragment.text, width, excluded)
        if SINGLE_QUOTE not in prose and DOUBLE_QUOTE not in prose:
            return []

        fixed = self._convert(fragment.text, width, excluded)
        preview = fixed if fixed != fragment.text else None
        return [(fragment.start, fragment.end, MESSAGE, preview)]

    def fix(self, fragment: Fragment) -> str:
        """Convert both quote families, single quotes first.

        Args:
            fragment: Parsed node to transform.

        Returns:
            The fragment text with its prose quotes curled.
        """
        width = trim_width(fragment.kind)
        return self._convert(fragment.text, width, _excluded(fragment))

    def _convert(
        self, text: str, width: int, excluded: Sequence[ExcludedRange]
    ) -> str:
        options = self.options
        single = (SINGLE_QUOTE, options.single_opening, options.single_closing)
        converted = convert_quotes(text, width, *single, excluded)
        if len(converted) != len(text):
            excluded = shift_ranges(text, width, *single, excluded)
        return convert_quotes(
            converted,
            width,
            DOUBLE_QUOTE,
            options.double_opening,
            options.double_closing,
            excluded,
        )


def _excluded(fragment: Fragment) -> Tuple[ExcludedRange, ...]:
    return excluded_ranges(fragment.text, fragment.kind, fragment.interpolations)
