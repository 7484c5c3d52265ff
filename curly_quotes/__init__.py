"""Public package exports for ``curly_quotes``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .rules import convert_quotes, excluded_ranges


if TYPE_CHECKING:  # pragma: no cover - imported only for typing
    from .cli import main
    from .linter import Linter

__all__ = ["Linter", "convert_quotes", "excluded_ranges", "main"]


def __getattr__(name: str) -> Any:
    """
    Lazily import the parsing stack.

    ``curly_quotes.linter`` pulls in esprima, BeautifulSoup and the mkdocs
    configuration machinery. Deferring the import keeps the conversion core
    usable on its own.
    """
    if name == "Linter":
        from .linter import Linter

        return Linter
    if name == "main":
        from .cli import main

        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
