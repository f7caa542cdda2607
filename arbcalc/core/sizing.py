"""Stake sizing calculations for arbitrage opportunities.

Three mutually exclusive strategies, picked once per calculation from
the shape of the input:

    FIXED         one leg has a pinned stake; every other leg is sized
                  to return the same amount (manual overrides win)
    MANUAL        nothing pinned but manual stakes given; used verbatim
    PROPORTIONAL  split a target investment by implied probability

Key Formulas:
    Fixed:        T = target_return(F, O_fixed);  S_i = T / O_i (per bet type)
    Proportional: S_i = I * P_i / sum(P), then scaled by I / actual_investment
    Investment:   sum(back and freebet stakes) + sum(lay liabilities)
"""

from enum import Enum
from typing import NamedTuple, Sequence

from .bet_types import get_rules
from .models import BookmakerLeg
from .parsing import finite_or_zero, parse_index, parse_numeric_or_zero, round_money
from .probability import effective_probabilities


class StakeStrategy(str, Enum):
    FIXED = "fixed"
    MANUAL = "manual"
    PROPORTIONAL = "proportional"


class StrategyChoice(NamedTuple):
    """Strategy selected for a calculation."""
    strategy: StakeStrategy
    fixed_index: int = -1
    fixed_stake: float = 0.0


def select_strategy(legs: Sequence[BookmakerLeg]) -> StrategyChoice:
    """
    Pick the stake distribution strategy for a set of legs.

    Only the first leg flagged as fixed is honoured. A pinned leg without
    a positive stake is treated as not pinned.
    """
    fixed_index = next(
        (i for i, leg in enumerate(legs) if leg.is_stake_fixed), -1
    )
    if fixed_index >= 0 and legs[fixed_index].stake > 0:
        return StrategyChoice(
            StakeStrategy.FIXED, fixed_index, legs[fixed_index].stake
        )

    if any(leg.has_manual_stake for leg in legs):
        return StrategyChoice(StakeStrategy.MANUAL)

    return StrategyChoice(StakeStrategy.PROPORTIONAL)


def distribute(
    legs: Sequence[BookmakerLeg],
    choice: StrategyChoice,
    target_investment: float,
    probabilities: Sequence[float] | None = None,
) -> list[float]:
    """Run the selected strategy. Stakes keep full precision."""
    if choice.strategy is StakeStrategy.FIXED:
        return distribute_fixed(legs, choice.fixed_index, choice.fixed_stake)
    if choice.strategy is StakeStrategy.MANUAL:
        return distribute_manual(legs)
    return distribute_proportional(legs, target_investment, probabilities)


def distribute_fixed(
    legs: Sequence[BookmakerLeg],
    fixed_index: int,
    fixed_stake: float,
) -> list[float]:
    """
    Size every leg to return what the pinned leg returns when it wins.

    Legs carrying a manual stake keep it, even if that breaks the
    equal-return balance.

    Args:
        legs: All legs of the book
        fixed_index: Index of the pinned leg
        fixed_stake: Stake on the pinned leg

    Returns:
        Stakes in input order, unrounded
    """
    fixed_leg = legs[fixed_index]
    fixed_rules = get_rules(fixed_leg.bet_type)
    target = fixed_rules.target_return(
        fixed_stake, fixed_leg.final_odd, fixed_leg.commission
    )

    stakes = []
    for i, leg in enumerate(legs):
        if i == fixed_index:
            stakes.append(fixed_stake)
        elif leg.has_manual_stake:
            stakes.append(leg.manual_stake)
        else:
            rules = get_rules(leg.bet_type)
            stakes.append(
                rules.stake_for_target(target, leg.final_odd, leg.commission)
            )

    return [finite_or_zero(s) for s in stakes]


def distribute_manual(legs: Sequence[BookmakerLeg]) -> list[float]:
    """Use each leg's manual stake as is; legs without one get 0."""
    return [leg.manual_stake or 0.0 for leg in legs]


def distribute_proportional(
    legs: Sequence[BookmakerLeg],
    target_investment: float,
    probabilities: Sequence[float] | None = None,
) -> list[float]:
    """
    Split a target investment across legs by implied probability.

    The first pass weights stakes by probability. Lay legs put their
    liability, not their stake, at risk, so the first pass misses the
    target; every stake is then scaled by target / actual investment.

    Args:
        legs: All legs of the book
        target_investment: Capital to put at risk
        probabilities: Effective probabilities per leg, when already known

    Returns:
        Stakes in input order, unrounded
    """
    if probabilities is None:
        probabilities = effective_probabilities(legs)
    probability_sum = sum(probabilities)

    if probability_sum <= 0:
        return [0.0 for _ in legs]

    initial_stakes = [
        target_investment * p / probability_sum if leg.final_odd > 0 else 0.0
        for leg, p in zip(legs, probabilities)
    ]

    actual_investment = total_investment(legs, initial_stakes)
    if actual_investment == 0:
        return [0.0 for _ in legs]

    scale = target_investment / actual_investment
    return [finite_or_zero(s * scale) for s in initial_stakes]


def total_investment(legs: Sequence[BookmakerLeg], stakes: Sequence[float]) -> float:
    """
    Capital at risk: back and freebet stakes plus lay liabilities.

    Legs with an unusable odd are skipped.
    """
    total = 0.0
    for leg, stake in zip(legs, stakes):
        if leg.final_odd <= 0:
            continue
        total += get_rules(leg.bet_type).losing_outlay(stake, leg.final_odd)
    return total


def distribute_stakes(
    odds: Sequence[float | str],
    fixed_index: int | float | str,
    fixed_stake: float | str,
) -> list[float]:
    """
    Distribute stakes from one fixed stake using plain back odds.

    Kept for callers that predate bet types: knows nothing of lay bets,
    freebets or commission.

        ratio = fixed_stake / (1 / odds[fixed_index])
        stake_i = (1 / odds_i) * ratio

    Example:
        odds [2.0, 2.0], fixed_index 0, fixed_stake 100 → [100, 100]

    Returns:
        One stake per odd; all zeros when any input is unusable
    """
    parsed_odds = [parse_numeric_or_zero(odd) for odd in odds]
    stake = parse_numeric_or_zero(fixed_stake)
    index = parse_index(fixed_index)

    if index is None or not 0 <= index < len(parsed_odds) or stake <= 0:
        return [0.0 for _ in parsed_odds]

    if any(odd <= 0 for odd in parsed_odds):
        return [0.0 for _ in parsed_odds]

    ratio = stake / (1 / parsed_odds[index])

    stakes = []
    for i, odd in enumerate(parsed_odds):
        if i == index:
            stakes.append(stake)
        else:
            stakes.append(round_money((1 / odd) * ratio))
    return stakes
