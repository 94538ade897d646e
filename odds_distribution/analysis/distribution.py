"""Outcome distribution from a ladder of Over/Under lines.

Core identity: P(exactly X) = P(Over X-0.5) - P(Over X+0.5)

P(Over X-0.5) covers every outcome >= X and P(Over X+0.5) every outcome
>= X+1, so their difference is the mass of X alone. When consecutive
thresholds skip values (25.5 then 27.5) the same difference is the mass of
the whole block 26-27. The two open tails below the lowest and above the
highest threshold complete the partition.

Example:
    Over 28.5 @ -110 (52.38%), Over 29.5 @ +150 (40%):
    - ≤28: 47.62%
    - 29:  12.38%
    - ≥30: 40.00%
"""

import math
from collections.abc import Sequence

from odds_distribution.lines.models import Line, OutcomeRange
from odds_distribution.lines.normalizer import normalize_lines
from odds_distribution.monitoring import get_logger

log = get_logger(__name__)


def calculate_distribution(lines: Sequence[Line]) -> list[OutcomeRange]:
    """Slice the outcome space into ranges using the given lines.

    Ranges come back ascending by outcome: bottom tail, interior slices left
    to right, top tail. Probabilities are not rounded. Contradictory lines can
    produce negative slices; they are returned as-is so validation can report
    them (see validate_lines).

    Args:
        lines: Lines in any order, Over and Under mixed

    Returns:
        OutcomeRange list, empty only when lines is empty. A single threshold
        yields exactly two ranges (the two tails).
    """
    if not lines:
        return []

    normalized = normalize_lines(lines)
    ranges: list[OutcomeRange] = []

    # Bottom tail: 28.5 -> ≤28
    lowest = normalized[0]
    bottom = math.floor(lowest.threshold)
    ranges.append(
        OutcomeRange(label=f"≤{bottom}", probability=1 - lowest.over_probability, max=bottom)
    )

    for current, following in zip(normalized, normalized[1:]):
        probability = current.over_probability - following.over_probability
        lo = math.ceil(current.threshold)
        hi = math.floor(following.threshold)

        if lo == hi:
            ranges.append(OutcomeRange(label=f"{lo}", probability=probability, min=lo, max=hi))
        else:
            # Gap between lines, or inverted bounds for thresholds less than 1 apart
            ranges.append(OutcomeRange(label=f"{lo}-{hi}", probability=probability, min=lo, max=hi))

    # Top tail: 29.5 -> ≥30
    highest = normalized[-1]
    top = math.ceil(highest.threshold)
    ranges.append(OutcomeRange(label=f"≥{top}", probability=highest.over_probability, min=top))

    log.debug(
        "distribution_calculated",
        line_count=len(lines),
        range_count=len(ranges),
        total=distribution_total(ranges),
    )
    return ranges


def distribution_total(ranges: Sequence[OutcomeRange]) -> float:
    """Sum of range probabilities (1.0 for a consistent ladder)."""
    return sum(r.probability for r in ranges)


def probability_of(ranges: Sequence[OutcomeRange], outcome: int) -> float:
    """Probability of the range containing an integer outcome.

    Args:
        ranges: Output of calculate_distribution
        outcome: Integer outcome (e.g., 29 points)

    Returns:
        Probability of the first range containing the outcome, 0.0 if none does
    """
    for r in ranges:
        if r.contains(outcome):
            return r.probability
    return 0.0
