"""Odds conversion and line normalization.

Converts American odds to implied probabilities and collapses a set of lines
into one "probability of exceeding" value per threshold:
- American: +150, -110 (US betting standard)
- Implied Probability: 0.40, 0.5238 (break-even win rate)

Implied probability is the win rate at which the bet has zero expected value:
    -110: EV = P * 100 - (1 - P) * 110 = 0  ->  P = 110 / 210
    +150: EV = P * 150 - (1 - P) * 100 = 0  ->  P = 100 / 250
"""

from collections.abc import Sequence
from fractions import Fraction

from odds_distribution.lines.vig_removal import no_vig_probability
from odds_distribution.lines.models import Line, NormalizedThreshold
from odds_distribution.monitoring import get_logger

log = get_logger(__name__)


def american_to_implied_probability(american_odds: int) -> float:
    """Convert American odds to implied probability.

    Args:
        american_odds: American format odds (e.g., -110, +150)

    Returns:
        Implied probability in (0, 1), vig included

    Raises:
        ValueError: If odds are 0 (undefined in American format)

    Examples:
        >>> round(american_to_implied_probability(-110), 4)
        0.5238
        >>> american_to_implied_probability(150)
        0.4
        >>> american_to_implied_probability(-300)
        0.75
    """
    if american_odds == 0:
        raise ValueError("American odds cannot be 0.")
    if american_odds < 0:
        # Favorite: risk |odds| to win 100
        risk = abs(american_odds)
        return risk / (risk + 100)
    # Underdog: risk 100 to win odds
    return 100 / (american_odds + 100)


def implied_probability_to_american(probability: float) -> int:
    """Convert a probability to the fair American odds for it.

    Used to show no-vig prices next to the quoted ones. Probabilities of
    0.5 and above price as favorites.

    Args:
        probability: Win probability, strictly between 0 and 1

    Returns:
        American odds rounded to the nearest integer

    Raises:
        ValueError: If probability is not in (0, 1)

    Examples:
        >>> implied_probability_to_american(0.5)
        -100
        >>> implied_probability_to_american(0.4)
        150
        >>> implied_probability_to_american(0.75)
        -300
    """
    if not 0 < probability < 1:
        raise ValueError(f"Probability must be between 0 and 1 exclusive (got {probability}).")
    if probability >= 0.5:
        return -round(probability / (1 - probability) * 100)
    return round((1 - probability) / probability * 100)


def normalize_lines(lines: Sequence[Line]) -> list[NormalizedThreshold]:
    """Collapse lines into one over-probability per distinct threshold.

    Resolution per threshold:
    - Over only: P(over)
    - Under only: 1 - P(under)
    - Both: no-vig P(over) / (P(over) + P(under))

    If a threshold is quoted twice on the same side, the later line wins.

    Args:
        lines: Lines in any order

    Returns:
        NormalizedThreshold list sorted ascending by threshold

    Example:
        >>> normalize_lines([  # doctest: +ELLIPSIS
        ...     Line(direction="over", threshold=29.5, odds=150),
        ...     Line(direction="under", threshold=28.5, odds=110),
        ... ])
        [NormalizedThreshold(threshold=28.5, over_probability=0.5238...), NormalizedThreshold(threshold=29.5, over_probability=0.4)]
    """
    # {threshold_key: {"threshold": float, "over": prob, "under": prob}}
    groups: dict[Fraction, dict[str, float]] = {}

    for line in lines:
        group = groups.setdefault(line.threshold_key, {"threshold": line.threshold})
        group[line.direction] = american_to_implied_probability(line.odds)

    normalized: list[NormalizedThreshold] = []
    for key in sorted(groups):
        group = groups[key]
        over = group.get("over")
        under = group.get("under")

        if over is not None and under is not None:
            over_probability = no_vig_probability(over, under)
        elif over is not None:
            over_probability = over
        elif under is not None:
            over_probability = 1 - under
        else:
            continue

        normalized.append(
            NormalizedThreshold(threshold=group["threshold"], over_probability=over_probability)
        )

    log.debug("lines_normalized", line_count=len(lines), threshold_count=len(normalized))
    return normalized
