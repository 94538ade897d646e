"""Shared pytest fixtures for odds-distribution tests."""

import pytest

from odds_distribution.config import get_settings
from odds_distribution.lines.models import Line
from odds_distribution.monitoring import configure_logging


@pytest.fixture(autouse=True)
def setup_test_logging():
    """Configure structlog for test output."""
    configure_logging("development")


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Re-read settings for every test so monkeypatched env vars apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def consecutive_lines():
    """Over 28.5 @ -110 and Over 29.5 @ +150 (one-unit ladder)."""
    return [
        Line(direction="over", threshold=28.5, odds=-110),
        Line(direction="over", threshold=29.5, odds=150),
    ]


@pytest.fixture
def gap_lines():
    """Over 25.5 @ -110 and Over 27.5 @ +150 (26-27 falls between)."""
    return [
        Line(direction="over", threshold=25.5, odds=-110),
        Line(direction="over", threshold=27.5, odds=150),
    ]


@pytest.fixture
def mixed_lines():
    """Over 48.5 @ +110 and Under 49.5 @ -130."""
    return [
        Line(direction="over", threshold=48.5, odds=110),
        Line(direction="under", threshold=49.5, odds=-130),
    ]


@pytest.fixture
def vig_pair():
    """Over/Under 30 both at -120 (9.09% vig)."""
    return [
        Line(direction="over", threshold=30, odds=-120),
        Line(direction="under", threshold=30, odds=-120),
    ]
