"""Command-line entry point for curly-quotes."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import Iterable, List, Sequence

from .config import load_config
from .constants import SKIP_DIRECTORIES
from .errors import ConfigurationError, SourceParseError
from .linter import Linter, format_relative
from .parsers import language_for_path
from .rules import Fragment, FragmentKind, NoStraightQuotesRule


def main(argv: Iterable[str] | None = None) -> int:
    """Execute the command-line interface.

    Args:
        argv: Optional iterable overriding ``sys.argv``.

    Returns:
        Exit code (zero on success, non-zero on error or misuse).
    """
    parser = argparse.ArgumentParser(
        prog="curly-quotes",
        description=(
            "Replace straight quotes with typographic quotes in JavaScript and Vue "
            "sources."
        ),
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug messages."
    )
    subparsers = parser.add_subparsers(dest="command")

    _configure_check_parser(subparsers)
    _configure_fix_parser(subparsers)
    _configure_convert_parser(subparsers)

    args = parser.parse_args(list(argv) if argv is not None else None)

    if not getattr(args, "handler", None):
        parser.print_help(sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    return args.handler(args)


def _add_source_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        default=[Path(".")],
        help="Files or directories to process (default: current directory).",
    )
    subparser.add_argument(
        "--config",
        type=Path,
        help="YAML configuration file (default: .curly-quotes.yml when present).",
    )


def _configure_check_parser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
) -> None:
    """Register the ``check`` sub-command listing pending corrections."""

    check_parser = subparsers.add_parser(
        "check", help="List fragments that still contain straight quotes."
    )
    _add_source_arguments(check_parser)
    check_parser.add_argument(
        "--summary", action="store_true", help="Print a summary table at the end."
    )
    check_parser.set_defaults(handler=_run_check)


def _configure_fix_parser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
) -> None:
    """Register the ``fix`` sub-command mutating sources in-place."""

    fix_parser = subparsers.add_parser(
        "fix", help="Rewrite sources with typographic quotes."
    )
    _add_source_arguments(fix_parser)
    fix_parser.set_defaults(handler=_run_fix)


def _configure_convert_parser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
) -> None:
    """Register the ``convert`` sub-command working on a single fragment."""

    convert_parser = subparsers.add_parser(
        "convert", help="Print the conversion of a single fragment text."
    )
    convert_parser.add_argument("text", help="Fragment text, delimiters included.")
    convert_parser.add_argument(
        "--kind",
        choices=[kind.value for kind in FragmentKind],
        default=FragmentKind.literal.value,
        help="Fragment kind deciding the delimiters (default: Literal).",
    )
    convert_parser.add_argument(
        "--config",
        type=Path,
        help="YAML configuration file providing the quote marks.",
    )
    convert_parser.set_defaults(handler=_run_convert)


def _run_check(args: argparse.Namespace) -> int:
    """Display the issues found without modifying files."""

    linter = _build_linter(args)
    if linter is None:
        return 2

    paths = _collect_paths(args.paths, linter.config.extensions)
    if paths is None:
        return 1

    issues_found = False
    for path in paths:
        rel_path = format_relative(path)
        try:
            report = linter.lint(
                path.read_text(encoding="utf-8"), language_for_path(path), rel_path
            )
        except SourceParseError as exc:
            print(f"{rel_path}: parse error: {exc}", file=sys.stderr)
            issues_found = True
            continue
        if not report.issues:
            continue

        issues_found = True
        print(f"{rel_path}:")
        for issue in report.issues:
            preview_txt = f" → «{issue.preview}»" if issue.preview else ""
            print(
                f"  - [{issue.rule}] {issue.line}:{issue.column}: "
                f"{issue.message}{preview_txt}"
            )

    if getattr(args, "summary", False):
        linter.print_summary()

    if issues_found:
        return 1

    print("No straight quotes found.")
    return 0


def _run_fix(args: argparse.Namespace) -> int:
    """Apply corrections in-place."""

    linter = _build_linter(args)
    if linter is None:
        return 2

    paths = _collect_paths(args.paths, linter.config.extensions)
    if paths is None:
        return 1

    failed = False
    updated_files: List[Path] = []
    for path in paths:
        rel_path = format_relative(path)
        original = path.read_text(encoding="utf-8")
        try:
            report = linter.fix(original, language_for_path(path), rel_path)
        except SourceParseError as exc:
            print(f"{rel_path}: parse error: {exc}", file=sys.stderr)
            failed = True
            continue
        if report.fixed is None or report.fixed == original:
            continue
        path.write_text(report.fixed, encoding="utf-8")
        updated_files.append(path)
        print(f"Fixed: {rel_path} ({report.fixes_applied} change(s))")

    if not updated_files:
        print("No changes applied: files were already compliant.")
    else:
        print(f"{len(updated_files)} file(s) updated.")
    return 1 if failed else 0


def _run_convert(args: argparse.Namespace) -> int:
    """Print the converted fragment text."""

    try:
        config = load_config(args.config)
        linter = Linter(config)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    rule = next(r for r in linter.rules if isinstance(r, NoStraightQuotesRule))
    fragment = Fragment(FragmentKind(args.kind), 0, len(args.text), args.text)
    print(rule.fix(fragment))
    return 0


def _build_linter(args: argparse.Namespace) -> Linter | None:
    """Load the configuration and instantiate the linter."""
    try:
        config = load_config(args.config)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None
    if getattr(args, "summary", False):
        config["summary"] = True
    return Linter(config)


def _collect_paths(
    paths: Sequence[Path], extensions: Sequence[str]
) -> List[Path] | None:
    """Expand files and directories into the sorted list of supported sources."""
    suffixes = {suffix.lower() for suffix in extensions}
    collected: set[Path] = set()
    for path in paths:
        if not path.exists():
            print(f"Path not found: {path}", file=sys.stderr)
            return None
        if path.is_file():
            if _is_supported(path, suffixes):
                collected.add(path)
            continue
        for candidate in path.rglob("*"):
            if not candidate.is_file() or not _is_supported(candidate, suffixes):
                continue
            relative_parts = candidate.relative_to(path).parts[:-1]
            if any(
                part in SKIP_DIRECTORIES or part.startswith(".")
                for part in relative_parts
            ):
                continue
            collected.add(candidate)
    return sorted(collected)


def _is_supported(path: Path, suffixes: set[str]) -> bool:
    return path.suffix.lower() in suffixes and language_for_path(path) is not None
