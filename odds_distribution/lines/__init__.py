"""Betting lines - models, odds conversion and per-threshold normalization.

This module provides:
- Line model and the result types derived from lines
- American odds conversion (american_to_implied_probability, implied_probability_to_american)
- Same-threshold vig removal and threshold normalization
"""

from odds_distribution.lines.models import (
    Line,
    NormalizedThreshold,
    OutcomeRange,
    ValidationIssue,
    ValidationResult,
    threshold_key,
)
from odds_distribution.lines.vig_removal import market_margin, no_vig_probability
from odds_distribution.lines.normalizer import (
    american_to_implied_probability,
    implied_probability_to_american,
    normalize_lines,
)

__all__ = [
    # Models
    "Line",
    "NormalizedThreshold",
    "OutcomeRange",
    "ValidationIssue",
    "ValidationResult",
    "threshold_key",
    # Vig removal
    "no_vig_probability",
    "market_margin",
    # Normalizer functions
    "american_to_implied_probability",
    "implied_probability_to_american",
    "normalize_lines",
]
