"""Convenience imports and factories for the built-in fragment rules."""

from .base import (
    ExcludedRange,
    Fragment,
    FragmentKind,
    Mode,
    Region,
    Rule,
    RuleResult,
    TRIM_WIDTHS,
    trim_width,
)
from .orchestrator import RuleOrchestrator, RuleWarning
from .quotes import NoStraightQuotesRule, QuoteOptions
from .ranges import excluded_ranges
from .replace import convert_quotes


def build_rules(options: QuoteOptions | None = None) -> tuple[Rule, ...]:
    """Return the rule chain applied to every document."""

    return (NoStraightQuotesRule(options),)


__all__ = [
    "ExcludedRange",
    "Fragment",
    "FragmentKind",
    "Mode",
    "Region",
    "Rule",
    "RuleResult",
    "RuleWarning",
    "RuleOrchestrator",
    "NoStraightQuotesRule",
    "QuoteOptions",
    "TRIM_WIDTHS",
    "build_rules",
    "convert_quotes",
    "excluded_ranges",
    "trim_width",
]
