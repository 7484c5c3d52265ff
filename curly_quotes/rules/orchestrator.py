"""Coordinate execution of fragment rules with warning collection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from .base import Fragment, Rule, is_visited


@dataclass(frozen=True)
class RuleWarning:
    """Diagnostic returned when a rule reports a fragment.

    Attributes:
        rule: Rule that produced the warning.
        start: Start index within the processed document.
        end: End index within the processed document.
        message: Human-readable explanation of the issue.
        preview: Optional preview of the proposed fix.
        replacement: Text replacing ``start:end`` when the rule runs in ``fix``
            mode, ``None`` otherwise.
    """

    rule: Rule
    start: int
    end: int
    message: str
    preview: str | None
    replacement: str | None = None


class RuleOrchestrator:
    """Coordinate the application of fragment rules."""

    def __init__(self, rules: Sequence[Rule]) -> None:
        """Store the rule list for later processing.

        Args:
            rules: Iterable of rule instances to apply in order.
        """
        self._rules: Tuple[Rule, ...] = tuple(rules)

    @property
    def rules(self) -> Tuple[Rule, ...]:
        """Tuple of rules managed by the orchestrator."""
        return self._rules

    def process(
        self,
        fragments: Sequence[Fragment],
        template_aware: bool,
        level_lookup: Callable[[Rule], object],
    ) -> List[RuleWarning]:
        """Run rules over fragments according to their configured level.

        Args:
            fragments: Fragments extracted from one document.
            template_aware: Whether the parser exposed markup template nodes.
            level_lookup: Callable mapping a rule to its severity level (ignore,
                warn, or fix).

        Returns:
            Warnings sorted by position. Rules at ``fix`` level attach the
            replacement text of each reported fragment.

        Examples:
            >>> from curly_quotes.rules.base import FragmentKind
            >>> from curly_quotes.rules.quotes import NoStraightQuotesRule
            >>> orchestrator = RuleOrchestrator((NoStraightQuotesRule(),))
            >>> fragment = Fragment(FragmentKind.jsx_text, 0, 4, '"hi"')
            >>> warnings = orchestrator.process([fragment], False, lambda r: "fix")
            >>> [w.replacement for w in warnings]
            ['“hi”']
        """
        warnings: List[RuleWarning] = []

        for rule in self._rules:
            level = level_lookup(rule)
            level_value = getattr(level, "value", level)
            if level_value == "ignore":
                continue

            mode = rule.activate(template_aware)
            for fragment in fragments:
                if not is_visited(mode, fragment):
                    continue
                for start, end, message, preview in rule.detect(fragment):
                    replacement = None
                    if level_value == "fix" and preview is not None:
                        replacement = rule.fix(fragment)
                    warnings.append(
                        RuleWarning(
                            rule=rule,
                            start=start,
                            end=end,
                            message=message,
                            preview=preview,
                            replacement=replacement,
                        )
                    )

        warnings.sort(key=lambda warning: (warning.start, warning.end))
        return warnings
