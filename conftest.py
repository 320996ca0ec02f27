"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from spellout.models import Locale  # noqa: E402


@pytest.fixture
def en() -> Locale:
    return Locale(language="en")


@pytest.fixture
def sv() -> Locale:
    return Locale(language="sv")
