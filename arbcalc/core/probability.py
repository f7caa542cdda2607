"""Implied probability aggregation across back, lay and freebet legs.

All functions are pure and have no side effects.

Key Formulas:
- Back:    P = 1 / odd
- Freebet: P = 1 / (odd - 1)
- Lay:     P = (E - 1) / E  where E = back_equivalent_odd / (1 - commission)
- Arbitrage Percentage: sum(P) * 100, arbitrage when < 100
"""

from typing import NamedTuple, Sequence

from .bet_types import get_rules
from .models import BookmakerLeg
from .parsing import finite_or_zero

ARBITRAGE_THRESHOLD_PCT = 100.0


class ArbitrageCheck(NamedTuple):
    """Result of summing a book's implied probabilities."""
    probabilities: list[float]
    arbitrage_percentage: float
    is_arbitrage: bool


def effective_probability(leg: BookmakerLeg) -> float:
    """
    Effective implied probability of a single leg.

    Uses the back-equivalent odd, so a lay at 3.00 is treated as a
    back at 1.50 before commission is folded in.
    """
    rules = get_rules(leg.bet_type)
    return finite_or_zero(rules.implied_probability(leg.normalized_odd, leg.commission))


def effective_probabilities(legs: Sequence[BookmakerLeg]) -> list[float]:
    """Effective implied probability for each leg, in input order."""
    return [effective_probability(leg) for leg in legs]


def check_arbitrage(legs: Sequence[BookmakerLeg]) -> ArbitrageCheck:
    """
    Detect whether a set of legs forms an arbitrage.

    The flag is decided on the percentage rounded to cents, matching the
    figure reported to the caller.

    Args:
        legs: One leg per possible outcome

    Returns:
        ArbitrageCheck with per-leg probabilities and the rounded percentage
    """
    probabilities = effective_probabilities(legs)
    probability_sum = sum(probabilities)
    percentage = round(finite_or_zero(probability_sum * 100), 2)

    return ArbitrageCheck(
        probabilities=probabilities,
        arbitrage_percentage=percentage,
        is_arbitrage=percentage < ARBITRAGE_THRESHOLD_PCT,
    )
