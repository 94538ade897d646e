"""Consistency and market-efficiency checks for a set of lines.

Detects line combinations that are mathematically impossible or that reveal
the bookmaker's margin:
1. Contradictory probabilities (P(Over X) < P(Over X+1))
2. Thresholds closer than one unit apart
3. Negative slice probabilities in the distribution
4. Vig or arbitrage on thresholds quoted on both sides

Probabilities are derived here from the raw lines, independently of
calculate_distribution. Vig reporting never touches the distribution.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from fractions import Fraction

from odds_distribution.lines.models import (
    Line,
    ValidationIssue,
    ValidationResult,
    format_threshold,
)
from odds_distribution.lines.normalizer import american_to_implied_probability
from odds_distribution.lines.vig_removal import market_margin, no_vig_probability
from odds_distribution.monitoring import get_logger

log = get_logger(__name__)

# Adjacent thresholds closer than this produce overlapping outcome labels
MIN_THRESHOLD_GAP = 1.0


@dataclass
class _ThresholdQuote:
    """Both sides quoted at one threshold, as implied probabilities."""

    threshold: float
    over: float | None = None
    under: float | None = None

    @property
    def over_probability(self) -> float:
        if self.over is not None and self.under is not None:
            return no_vig_probability(self.over, self.under)
        if self.over is not None:
            return self.over
        return 1 - self.under


def _pct(probability: float) -> str:
    return f"{probability * 100:.1f}%"


def _group_quotes(lines: Sequence[Line]) -> list[_ThresholdQuote]:
    quotes: dict[Fraction, _ThresholdQuote] = {}
    for line in lines:
        quote = quotes.setdefault(line.threshold_key, _ThresholdQuote(threshold=line.threshold))
        setattr(quote, line.direction, american_to_implied_probability(line.odds))
    return [quotes[key] for key in sorted(quotes)]


def validate_lines(lines: Sequence[Line]) -> ValidationResult:
    """Validate a set of lines for logical consistency.

    Every check runs, so one input can raise several issues. Only "error"
    issues make the result invalid.

    Args:
        lines: Lines in any order

    Returns:
        ValidationResult with issues in check order
    """
    if not lines:
        return ValidationResult()

    quotes = _group_quotes(lines)
    issues: list[ValidationIssue] = []

    issues.extend(_check_monotonicity(quotes))
    issues.extend(_check_proximity(quotes))
    issues.extend(_check_negative_slices(quotes))
    issues.extend(_check_market_efficiency(quotes))

    result = ValidationResult(issues=issues)
    for issue in result.errors:
        log.info("validation_issue_found", kind=issue.kind, message=issue.message)
    log.debug(
        "lines_validated",
        line_count=len(lines),
        issue_count=len(issues),
        is_valid=result.is_valid,
    )
    return result


def _check_monotonicity(quotes: list[_ThresholdQuote]) -> list[ValidationIssue]:
    """Higher thresholds must not be more likely to be exceeded."""
    issues = []
    for current, following in zip(quotes, quotes[1:]):
        if current.over_probability < following.over_probability:
            issues.append(
                ValidationIssue(
                    kind="contradictory_probabilities",
                    message=(
                        f"Contradictory odds: Over {format_threshold(current.threshold)} has lower "
                        f"probability ({_pct(current.over_probability)}) than Over "
                        f"{format_threshold(following.threshold)} "
                        f"({_pct(following.over_probability)}). This is mathematically impossible."
                    ),
                    severity="error",
                )
            )
    return issues


def _check_proximity(quotes: list[_ThresholdQuote]) -> list[ValidationIssue]:
    issues = []
    for current, following in zip(quotes, quotes[1:]):
        gap = following.threshold - current.threshold
        if gap < MIN_THRESHOLD_GAP:
            issues.append(
                ValidationIssue(
                    kind="contradictory_probabilities",
                    message=(
                        f"Lines {format_threshold(current.threshold)} and "
                        f"{format_threshold(following.threshold)} are very close together "
                        f"({gap:.1f} apart). This can create confusing duplicate outcomes in the "
                        f"distribution. Consider using lines at least {MIN_THRESHOLD_GAP:.1f} apart."
                    ),
                    severity="warning",
                )
            )
    return issues


def _check_negative_slices(quotes: list[_ThresholdQuote]) -> list[ValidationIssue]:
    issues = []
    for current, following in zip(quotes, quotes[1:]):
        probability = current.over_probability - following.over_probability
        if probability < 0:
            issues.append(
                ValidationIssue(
                    kind="negative_probability",
                    message=(
                        f"Negative probability ({_pct(probability)}) detected between lines "
                        f"{format_threshold(current.threshold)} and "
                        f"{format_threshold(following.threshold)}. Check your odds."
                    ),
                    severity="error",
                )
            )
    return issues


def _check_market_efficiency(quotes: list[_ThresholdQuote]) -> list[ValidationIssue]:
    """Report vig or arbitrage for thresholds quoted on both sides.

    Uses the raw implied probabilities, never the no-vig ones.
    """
    issues = []
    for quote in quotes:
        if quote.over is None or quote.under is None:
            continue

        total = quote.over + quote.under
        margin = market_margin(quote.over, quote.under)
        threshold = format_threshold(quote.threshold)

        if margin > 0:
            issues.append(
                ValidationIssue(
                    kind="vig",
                    message=(
                        f"Line {threshold} shows {_pct(margin)} vig (bookmaker edge). "
                        f"Over: {_pct(quote.over)} + Under: {_pct(quote.under)} = {_pct(total)}"
                    ),
                    severity="info",
                    margin=margin,
                )
            )
        elif margin < 0:
            issues.append(
                ValidationIssue(
                    kind="arbitrage",
                    message=(
                        f"Arbitrage opportunity on line {threshold}! Total implied probability "
                        f"is {_pct(total)} ({_pct(-margin)} margin). You could bet both sides "
                        f"and guarantee a profit."
                    ),
                    severity="info",
                    margin=-margin,
                )
            )
    return issues
