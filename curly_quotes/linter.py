"""Lint and fix documents, logging diagnostics as they are found."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Any, List

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import resolve_quote_options
from .constants import MAX_FIX_PASSES
from .parsers import parse_source
from .rules import Rule, RuleOrchestrator, RuleWarning, build_rules
from .utils.text import apply_replacements, line_column_for_offset


log = logging.getLogger("curly_quotes")


@dataclass(frozen=True)
class Issue:
    """Diagnostic located in a document.

    Attributes:
        rule: Name of the rule that reported the issue.
        line: 1-based line of the reported fragment.
        column: 1-based column of the reported fragment.
        message: Human-readable explanation of the issue.
        preview: Proposed replacement of the fragment, if any.
    """

    rule: str
    line: int
    column: int
    message: str
    preview: str | None


@dataclass
class LintReport:
    """Outcome of linting one document."""

    path: str
    issues: List[Issue] = field(default_factory=list)
    fixed: str | None = None
    fixes_applied: int = 0


class Linter:
    """Run the configured rules over script and Vue documents."""

    def __init__(self, config: Any) -> None:
        """Build the rule orchestrator from a validated configuration.

        Args:
            config: ``CurlyQuotesConfig`` or a namespace built by
                :func:`curly_quotes.config.make_linter_config`.
        """
        self.config = config
        self._orchestrator = RuleOrchestrator(
            build_rules(resolve_quote_options(config.options))
        )
        self._collected: list[dict[str, Any]] = []

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Tuple of rules run by the linter."""
        return self._orchestrator.rules

    def _level_for_rule(self, rule: Rule) -> Any:
        """Return the configured severity level for the given rule."""
        return getattr(self.config, rule.config_attr)

    def _warnings(self, source: str, language: str) -> List[RuleWarning]:
        parsed = parse_source(source, language)
        return self._orchestrator.process(
            parsed.fragments, parsed.template_aware, self._level_for_rule
        )

    def lint(self, source: str, language: str, path: str = "<source>") -> LintReport:
        """Report the fragments that still hold straight quotes.

        Args:
            source: Document text.
            language: ``"script"`` or ``"vue"``.
            path: Display name used in log messages.

        Raises:
            SourceParseError: When the document cannot be parsed.
        """
        report = LintReport(path=path)
        for warning in self._warnings(source, language):
            report.issues.append(self._to_issue(source, warning))
        self._emit(report)
        return report

    def fix(self, source: str, language: str, path: str = "<source>") -> LintReport:
        """Apply every available fix, re-linting until the document is stable.

        Fixes of nested fragments overlap (a template literal inside another
        one's interpolation); the outer fix wins and the inner one is computed
        again on the next pass.

        Raises:
            SourceParseError: When the document cannot be parsed.
        """
        report = LintReport(path=path)
        current = source
        for _ in range(MAX_FIX_PASSES):
            warnings = self._warnings(current, language)
            replacements = [
                (warning.start, warning.end, warning.replacement)
                for warning in warnings
                if warning.replacement is not None
            ]
            current, applied = apply_replacements(current, replacements)
            report.fixes_applied += applied
            if not applied:
                break
        else:
            log.warning("%s: fixes still pending after %d passes", path, MAX_FIX_PASSES)

        report.fixed = current
        for warning in self._warnings(current, language):
            report.issues.append(self._to_issue(current, warning))
        self._emit(report)
        return report

    @staticmethod
    def _to_issue(source: str, warning: RuleWarning) -> Issue:
        line, column = line_column_for_offset(source, warning.start)
        return Issue(
            rule=warning.rule.name,
            line=line,
            column=column,
            message=warning.message,
            preview=warning.preview,
        )

    def _emit(self, report: LintReport) -> None:
        """Log issues and optionally store them for the summary table."""
        for issue in report.issues:
            preview_txt = f" → «{issue.preview}»" if issue.preview else ""
            log.warning(
                "[curly-quotes:%s] '%s:%d:%d': %s%s",
                issue.rule,
                report.path,
                issue.line,
                issue.column,
                issue.message,
                preview_txt,
            )
            if self.config.summary:
                self._collected.append(
                    {
                        "rule": issue.rule,
                        "file": report.path,
                        "line": issue.line,
                        "column": issue.column,
                        "message": issue.message,
                        "preview": issue.preview,
                    }
                )

    def print_summary(self, console: Console | None = None) -> None:
        """Display a table of the issues collected while ``summary`` is enabled."""
        if not self._collected:
            return

        table = Table(
            title="Straight quotes summary",
            title_style="bold bright_white",
            header_style="bold magenta",
            show_lines=True,
            box=box.ROUNDED,
            border_style="grey50",
            row_styles=["grey35", ""],
            pad_edge=False,
            padding=(0, 1),
        )
        table.add_column("Rule", style="cyan", no_wrap=True)
        table.add_column("Location", style="green")
        table.add_column("Message", style="white")
        table.add_column("Suggestion", style="dim")

        for entry in self._collected:
            location = f"{entry['file']}:{entry['line']}:{entry['column']}"
            suggestion = escape(f"«{entry['preview']}»") if entry["preview"] else ""
            table.add_row(entry["rule"], location, entry["message"], suggestion)

        (console or Console()).print(table)


def format_relative(path: Path) -> str:
    """Return a path relative to the current working directory when possible."""
    root = Path.cwd().resolve()
    abs_path = path.resolve()
    try:
        return str(abs_path.relative_to(root))
    except ValueError:
        return str(abs_path)
