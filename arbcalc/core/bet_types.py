"""Per-bet-type rules for probability, sizing and settlement.

Every leg is exactly one of BACK, LAY or FREEBET. Each type answers the
same questions differently:

    implied probability   how much of the book the leg consumes
    target return         what a pinned stake returns when it wins
    stake for target      the stake that returns a given amount
    winning return        what the leg pays when its outcome wins
    outlay                what the leg costs when it wins / loses

Commission is always passed as a fraction (5% → 0.05). Odds passed to
``implied_probability`` are normalized (lay odds already converted to
back-equivalent); every other rule works on the quoted odd.
"""

from enum import Enum


class BetType(str, Enum):
    BACK = "back"
    LAY = "lay"
    FREEBET = "freebet"


class BetRules:
    """Base rules: a conventional back bet."""

    @staticmethod
    def implied_probability(odd: float, commission: float) -> float:
        if odd <= 0:
            return 0.0
        return 1.0 / odd

    @staticmethod
    def target_return(stake: float, odd: float, commission: float) -> float:
        return stake * odd

    @staticmethod
    def stake_for_target(target: float, odd: float, commission: float) -> float:
        if odd <= 0:
            return 0.0
        return target / odd

    @staticmethod
    def winning_return(stake: float, odd: float, commission: float) -> float:
        return stake * odd

    @staticmethod
    def winning_outlay(stake: float, odd: float) -> float:
        # Payout includes the returned stake
        return stake

    @staticmethod
    def losing_outlay(stake: float, odd: float) -> float:
        return stake


class BackRules(BetRules):
    pass


class FreebetRules(BetRules):
    """Freebets pay net profit only; the stake is never returned."""

    @staticmethod
    def implied_probability(odd: float, commission: float) -> float:
        if odd <= 1:
            return 0.0
        return 1.0 / (odd - 1)

    @staticmethod
    def target_return(stake: float, odd: float, commission: float) -> float:
        return stake * (odd - 1)

    @staticmethod
    def stake_for_target(target: float, odd: float, commission: float) -> float:
        if odd <= 1:
            return 0.0
        return target / (odd - 1)

    @staticmethod
    def winning_return(stake: float, odd: float, commission: float) -> float:
        return stake * (odd - 1)

    @staticmethod
    def winning_outlay(stake: float, odd: float) -> float:
        return 0.0


class LayRules(BetRules):
    """
    Lay bets: win the backer's stake less commission, or pay the liability.

    Commission on lay winnings is the same as having been matched at a
    worse price, so the probability term inflates the odd by 1 / (1 - c)
    before taking (odd - 1) / odd.
    """

    @staticmethod
    def implied_probability(odd: float, commission: float) -> float:
        keep = 1 - commission
        if odd <= 0 or keep <= 0:
            return 0.0
        effective_odd = odd / keep
        return (effective_odd - 1) / effective_odd

    @staticmethod
    def target_return(stake: float, odd: float, commission: float) -> float:
        liability = stake * (odd - 1)
        return stake + liability - stake * commission

    @staticmethod
    def stake_for_target(target: float, odd: float, commission: float) -> float:
        # S + S * (odd - 1) - S * c = target  =>  S = target / (odd - c)
        factor = odd - commission
        if odd <= 0 or factor <= 0:
            return 0.0
        return target / factor

    @staticmethod
    def winning_return(stake: float, odd: float, commission: float) -> float:
        return stake * (1 - commission)

    @staticmethod
    def winning_outlay(stake: float, odd: float) -> float:
        return 0.0

    @staticmethod
    def losing_outlay(stake: float, odd: float) -> float:
        return stake * (odd - 1)


BET_RULES: dict[BetType, type[BetRules]] = {
    BetType.BACK: BackRules,
    BetType.LAY: LayRules,
    BetType.FREEBET: FreebetRules,
}


def get_rules(bet_type: BetType) -> type[BetRules]:
    """Get the rule set for a bet type."""
    return BET_RULES[bet_type]
