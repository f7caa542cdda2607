"""Settlement of a staked book under each possible winning outcome."""

from typing import Sequence

from .bet_types import get_rules
from .models import BookmakerLeg, Scenario
from .parsing import finite_or_zero, round_money


def evaluate_scenario(
    legs: Sequence[BookmakerLeg],
    stakes: Sequence[float],
    winning_index: int,
) -> Scenario:
    """
    Settle every leg assuming the leg at winning_index wins.

    The winning leg pays its return (back: stake * odd, freebet:
    stake * (odd - 1), lay: stake * (1 - commission)). Every other leg
    loses its stake, or its liability for a lay. A winning back bet
    also counts its own stake as outlay, since the payout includes it.

    Args:
        legs: All legs of the book
        stakes: Stake per leg, in the same order
        winning_index: Index of the winning leg

    Returns:
        Scenario with return, outlay and profit rounded to cents
    """
    total_return = 0.0
    total_outlay = 0.0

    for i, leg in enumerate(legs):
        stake = stakes[i] if i < len(stakes) else 0.0
        rules = get_rules(leg.bet_type)

        if i == winning_index:
            total_return += rules.winning_return(stake, leg.final_odd, leg.commission)
            total_outlay += rules.winning_outlay(stake, leg.final_odd)
        else:
            total_outlay += rules.losing_outlay(stake, leg.final_odd)

    profit = finite_or_zero(total_return - total_outlay)
    return Scenario(
        total_return=round_money(total_return),
        total_outlay=round_money(total_outlay),
        profit=round_money(profit),
    )


def evaluate_scenarios(
    legs: Sequence[BookmakerLeg],
    stakes: Sequence[float],
) -> list[Scenario]:
    """Settle the book once per leg, in input order."""
    return [evaluate_scenario(legs, stakes, i) for i in range(len(legs))]


def evaluate_returns(
    legs: Sequence[BookmakerLeg],
    stakes: Sequence[float],
) -> list[float]:
    """Profit of the book for each possible winning leg."""
    return [s.profit for s in evaluate_scenarios(legs, stakes)]


def guaranteed_profit(returns: Sequence[float]) -> float:
    """Worst-case profit across all outcomes; 0 for an empty book."""
    if not returns:
        return 0.0
    return round_money(min(returns))


def profit_percentage(profit: float, investment: float) -> float:
    """Profit as a percentage of capital at risk (0 with no investment)."""
    if investment <= 0:
        return 0.0
    return round_money(profit / investment * 100)
