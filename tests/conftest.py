"""Shared fixtures for the leveling test suite."""
from __future__ import annotations

from fractions import Fraction

import pytest

from mee6_levels.config import get_settings


@pytest.fixture
def float_threshold():
    """Threshold curve re-derived in float, evaluated left to right."""
    def _threshold(level: float) -> float:
        return 5.0 / 6.0 * level * (2.0 * level * level + 27.0 * level + 91.0)
    return _threshold


@pytest.fixture
def exact_threshold():
    """Threshold curve in exact rational arithmetic."""
    def _threshold(level: int) -> Fraction:
        return Fraction(5, 6) * level * (2 * level * level + 27 * level + 91)
    return _threshold


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
