"""Vig removal for same-threshold Over/Under pairs.

Uses the margin-proportional method:
1. Convert each side's American odds to an implied probability
2. Sum both sides (above 1.0 when the book charges vig, below 1.0 on arbitrage)
3. Divide each side by the total so the pair sums to exactly 1.0

Example:
    Standard -110/-110 total:
    - Implied probs: [0.5238, 0.5238] = 104.76% (4.76% vig)
    - Fair probs: [0.50, 0.50] = 100%
"""


def no_vig_probability(over_prob: float, under_prob: float) -> float:
    """Fair probability of the Over side after removing the pair's margin.

    Args:
        over_prob: Implied probability of the Over, vig included
        under_prob: Implied probability of the Under at the same threshold

    Returns:
        over_prob / (over_prob + under_prob)

    Raises:
        ValueError: If either probability is not positive

    Example:
        >>> no_vig_probability(0.5238, 0.5238)
        0.5
    """
    if over_prob <= 0 or under_prob <= 0:
        raise ValueError(
            f"Implied probabilities must be positive. Got over={over_prob}, under={under_prob}."
        )
    return over_prob / (over_prob + under_prob)


def market_margin(over_prob: float, under_prob: float) -> float:
    """Signed bookmaker margin for an Over/Under pair.

    Positive values are vig (the book's edge), negative values are an
    arbitrage margin (betting both sides guarantees a profit).

    Example:
        >>> round(market_margin(0.5454, 0.5454), 4)
        0.0908
    """
    return over_prob + under_prob - 1.0
