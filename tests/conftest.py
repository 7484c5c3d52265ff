from __future__ import annotations

from pathlib import Path
import sys

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from curly_quotes.config import make_linter_config
from curly_quotes.linter import Linter


@pytest.fixture
def linter_factory():
    def factory(**config_overrides):
        return Linter(make_linter_config(**config_overrides))

    return factory


@pytest.fixture
def project(tmp_path, monkeypatch):
    """Empty working directory so that no project file leaks into a test."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
