"""Arbitrage calculation entry point.

Takes a list of bookmaker legs (back, lay or freebet), decides how to
stake them and reports the book's implied percentage, the stakes and the
profit under every outcome.

The calculator never raises on bad input: unusable numbers read as 0
and any leg without a usable odd yields the zeroed result.
"""

import logging
from typing import Any, Sequence

from ..config import DEFAULT_TARGET_INVESTMENT
from ..core.evaluation import evaluate_returns, guaranteed_profit, profit_percentage
from ..core.models import BookmakerLeg, CalculationResult
from ..core.parsing import round_money
from ..core.probability import check_arbitrage
from ..core.sizing import distribute, select_strategy, total_investment

logger = logging.getLogger(__name__)


def to_legs(bookmakers: Sequence[BookmakerLeg | dict[str, Any]]) -> list[BookmakerLeg]:
    """Validate raw records into legs. Anything that is not a mapping reads as an empty leg."""
    legs = []
    for bookmaker in bookmakers:
        if isinstance(bookmaker, BookmakerLeg):
            legs.append(bookmaker)
        elif isinstance(bookmaker, dict):
            legs.append(BookmakerLeg.model_validate(bookmaker))
        else:
            legs.append(BookmakerLeg())
    return legs


def calculate_arbitrage(
    bookmakers: Sequence[BookmakerLeg | dict[str, Any]],
    target_investment: float | None = None,
) -> CalculationResult:
    """
    Calculate stakes and guaranteed profit for a set of legs.

    Strategy is chosen from the input: a pinned stake sizes the other legs
    to match its return, manual stakes are used verbatim, otherwise the
    target investment is split by implied probability.

    Args:
        bookmakers: One record per leg, as BookmakerLeg or camelCase dicts
        target_investment: Capital for the proportional split
            (defaults to DEFAULT_TARGET_INVESTMENT)

    Returns:
        CalculationResult; zeroed when the book is empty or any odd is unusable
    """
    legs = to_legs(bookmakers)

    if not legs:
        logger.debug("No legs supplied")
        return CalculationResult.zeroed()

    invalid = [i for i, leg in enumerate(legs) if leg.normalized_odd <= 0]
    if invalid:
        logger.debug("Unusable odds at legs %s", invalid)
        return CalculationResult.zeroed()

    if target_investment is None:
        target_investment = DEFAULT_TARGET_INVESTMENT

    check = check_arbitrage(legs)

    choice = select_strategy(legs)
    logger.debug(
        "Staking %d legs with %s strategy", len(legs), choice.strategy.value
    )
    stakes = distribute(legs, choice, target_investment, check.probabilities)

    # Stakes stay unrounded until the result is built
    investment = round_money(total_investment(legs, stakes))
    returns = evaluate_returns(legs, stakes)
    profit = guaranteed_profit(returns)

    return CalculationResult(
        arbitrage_percentage=check.arbitrage_percentage,
        is_arbitrage=check.is_arbitrage,
        total_investment=investment,
        distributed_stakes=[round_money(s) for s in stakes],
        returns=returns,
        profit=profit,
        profit_percentage=profit_percentage(profit, investment),
    )
