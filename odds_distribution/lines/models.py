"""Models for betting lines and the results derived from them.

Lines are validated pydantic models supplied by the caller. Everything
derived from lines (normalized thresholds, outcome ranges, validation issues)
is a plain dataclass recomputed on every call.

American odds follow the US convention:
- Negative (-110): amount risked to win 100 units
- Positive (+150): amount won on 100 units risked
"""

import math
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

# Thresholds are grouped on a fixed-point grid of 1/1000
THRESHOLD_RESOLUTION = 1000

Direction = Literal["over", "under"]
Severity = Literal["error", "warning", "info"]
IssueKind = Literal[
    "negative_probability",
    "contradictory_probabilities",
    "vig",
    "arbitrage",
]


def threshold_key(threshold: float) -> Fraction:
    """Exact rational key used to decide whether two thresholds are the same line.

    Args:
        threshold: Line threshold (e.g., 28.5)

    Returns:
        Fraction quantized to 1/THRESHOLD_RESOLUTION

    Examples:
        >>> threshold_key(28.5)
        Fraction(57, 2)
        >>> threshold_key(0.1 + 0.2) == threshold_key(0.3)
        True
    """
    return Fraction(round(threshold * THRESHOLD_RESOLUTION), THRESHOLD_RESOLUTION)


class Line(BaseModel):
    """Single sportsbook line (e.g., Over 28.5 @ -110).

    Attributes:
        direction: "over" or "under"
        threshold: The line value. Usually ends in .5 so no outcome can land
            on it, but integer thresholds are accepted.
        odds: American odds, any non-zero integer
    """

    model_config = ConfigDict(frozen=True)

    direction: Direction
    threshold: float
    odds: int

    @field_validator("threshold")
    @classmethod
    def validate_threshold(cls, v: float) -> float:
        """Reject infinite and NaN thresholds."""
        if not math.isfinite(v):
            raise ValueError(f"Threshold must be a finite number (got {v}).")
        return v

    @field_validator("odds")
    @classmethod
    def validate_american_odds(cls, v: int) -> int:
        """Validate that American odds are defined.

        Raises:
            ValueError: If odds are 0 (no payout structure)
        """
        if v == 0:
            raise ValueError("American odds cannot be 0.")
        return v

    @property
    def threshold_key(self) -> Fraction:
        """Grouping key for same-threshold Over/Under pairs."""
        return threshold_key(self.threshold)

    @property
    def implied_probability(self) -> float:
        """Implied probability of this side winning, vig included."""
        from odds_distribution.lines.normalizer import american_to_implied_probability

        return american_to_implied_probability(self.odds)

    def label(self) -> str:
        """Human-readable form, e.g. "Over 28.5 @ -110"."""
        odds = f"+{self.odds}" if self.odds > 0 else str(self.odds)
        return f"{self.direction.capitalize()} {format_threshold(self.threshold)} @ {odds}"


def format_threshold(threshold: float) -> str:
    """Render a threshold without a trailing .0 for integer values."""
    if float(threshold).is_integer():
        return str(int(threshold))
    return str(threshold)


@dataclass(frozen=True)
class NormalizedThreshold:
    """Probability of the outcome exceeding a threshold.

    Attributes:
        threshold: The line value
        over_probability: P(outcome > threshold), no-vig when both sides were quoted
    """

    threshold: float
    over_probability: float


@dataclass(frozen=True)
class OutcomeRange:
    """Contiguous block of integer outcomes and its probability.

    Attributes:
        label: Display label ("≤28", "29", "26-27", "≥30")
        probability: Probability mass of the block (unrounded, may be negative
            for contradictory inputs)
        min: Lowest outcome in the block, None for the bottom tail
        max: Highest outcome in the block, None for the top tail
    """

    label: str
    probability: float
    min: int | None = None
    max: int | None = None

    def contains(self, outcome: int) -> bool:
        """Check whether an integer outcome falls inside this block."""
        if self.min is not None and outcome < self.min:
            return False
        if self.max is not None and outcome > self.max:
            return False
        return True


@dataclass(frozen=True)
class ValidationIssue:
    """Problem or observation found in a set of lines.

    Attributes:
        kind: Issue category
        message: Human-readable explanation
        severity: "error" makes the line set invalid; "warning" and "info" do not
        margin: Vig or arbitrage margin as a fraction (0.0909 = 9.09%), vig/arbitrage only
    """

    kind: IssueKind
    message: str
    severity: Severity
    margin: float | None = None


@dataclass
class ValidationResult:
    """All issues found for one set of lines."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def errors(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == "error"]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == "warning"]

    @property
    def infos(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == "info"]
