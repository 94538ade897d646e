"""Analysis of a line set: outcome distribution and consistency checks.

The two analyses are independent pure functions over the same lines:
- calculate_distribution slices the outcome space into probability ranges
- validate_lines reports contradictions, vig and arbitrage
"""

from odds_distribution.analysis.distribution import (
    calculate_distribution,
    distribution_total,
    probability_of,
)
from odds_distribution.analysis.validation import validate_lines

__all__ = [
    "calculate_distribution",
    "distribution_total",
    "probability_of",
    "validate_lines",
]
