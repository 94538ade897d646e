"""Probability distributions from sportsbook Over/Under lines.

Turns a ladder of American-odds lines ("Over 28.5 @ -110", "Over 29.5 @ +150")
into probabilities for every integer outcome range, and flags contradictory
lines, vig and arbitrage.
"""

__version__ = "0.1.0"

from odds_distribution.lines import (
    Line,
    NormalizedThreshold,
    OutcomeRange,
    ValidationIssue,
    ValidationResult,
    american_to_implied_probability,
    normalize_lines,
)
from odds_distribution.analysis import calculate_distribution, validate_lines

__all__ = [
    "__version__",
    "Line",
    "NormalizedThreshold",
    "OutcomeRange",
    "ValidationIssue",
    "ValidationResult",
    "american_to_implied_probability",
    "normalize_lines",
    "calculate_distribution",
    "validate_lines",
]
