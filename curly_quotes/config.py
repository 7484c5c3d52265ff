"""Configuration schema for curly-quotes and its project file loader."""

from __future__ import annotations

from enum import Enum
import logging
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Mapping

from mkdocs.config import config_options as c
from mkdocs.config.base import Config, LegacyConfig
import yaml

from .constants import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_QUOTE_OPTIONS,
    SCRIPT_SUFFIXES,
    VUE_SUFFIXES,
)
from .errors import ConfigurationError
from .rules import QuoteOptions


log = logging.getLogger("curly_quotes")


class Level(str, Enum):  # pylint: disable=invalid-name
    """Severity levels controlling how rules behave."""

    ignore = "ignore"
    warn = "warn"
    fix = "fix"


QUOTE_OPTIONS_SCHEMA = tuple(
    (key, c.Type(str, default=default))
    for key, default in DEFAULT_QUOTE_OPTIONS.items()
)


class CurlyQuotesConfig(Config):
    """Configuration schema of the project file."""

    level = c.Choice((Level.ignore, Level.warn, Level.fix), default=Level.fix)
    extensions = c.ListOfItems(
        c.Type(str), default=list(SCRIPT_SUFFIXES + VUE_SUFFIXES)
    )
    options = c.Type(dict, default={})
    summary = c.Type(bool, default=False)


def _check(config: Config, origin: str) -> None:
    """Validate ``config`` and raise on errors or unknown keys."""
    errors, warnings = config.validate()
    problems = [f"{key}: {error}" for key, error in errors]
    # mkdocs only warns about unrecognised names; they are rejected here.
    problems.extend(f"{key}: {message}" for key, message in warnings)
    if problems:
        raise ConfigurationError(f"Invalid {origin}: " + "; ".join(problems))


def resolve_quote_options(raw: Mapping[str, Any] | None) -> QuoteOptions:
    """Validate rule options and substitute defaults for absent keys.

    Args:
        raw: Mapping with any of ``single-opening``, ``single-closing``,
            ``double-opening`` and ``double-closing``.

    Returns:
        Fully populated replacement marks.

    Raises:
        ConfigurationError: On unknown keys or non-string values.

    Examples:
        >>> resolve_quote_options({"double-opening": "«"}).double_opening
        '«'
    """
    if raw is not None and not isinstance(raw, Mapping):
        raise ConfigurationError("Invalid rule options: expected a mapping")

    schema = LegacyConfig(QUOTE_OPTIONS_SCHEMA)
    schema.load_dict(dict(raw or {}))
    _check(schema, "rule options")
    return QuoteOptions(
        single_opening=schema["single-opening"],
        single_closing=schema["single-closing"],
        double_opening=schema["double-opening"],
        double_closing=schema["double-closing"],
    )


def load_config(path: str | Path | None = None) -> CurlyQuotesConfig:
    """Load and validate the project file.

    Args:
        path: Explicit YAML file. When omitted, ``.curly-quotes.yml`` in the
            current directory is used if present, defaults otherwise.

    Raises:
        ConfigurationError: When the file is missing, is not valid YAML or does
            not match the schema.
    """
    data: Any = {}
    if path is None and Path(DEFAULT_CONFIG_FILE).is_file():
        path = DEFAULT_CONFIG_FILE

    if path is not None:
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigurationError(f"Configuration file not found: {config_path}")
        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {exc}") from exc
        log.debug("Loaded configuration from %s", config_path)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError("Invalid configuration: expected a mapping")

    config = CurlyQuotesConfig(config_file_path=str(path) if path else None)
    config.load_dict(data)
    _check(config, "configuration")
    # Rule options are checked eagerly so that typos fail at load time.
    resolve_quote_options(config.options)
    return config


def make_linter_config(**overrides: Any) -> SimpleNamespace:
    """Create a lightweight configuration namespace for standalone usage."""

    defaults = {
        "level": Level.fix,
        "extensions": list(SCRIPT_SUFFIXES + VUE_SUFFIXES),
        "options": {},
        "summary": False,
    }
    defaults.update(overrides)
    return SimpleNamespace(**defaults)
