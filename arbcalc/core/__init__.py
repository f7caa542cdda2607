from .models import BookmakerLeg, CalculationResult, Scenario
from .bet_types import BetType, get_rules
from .parsing import parse_numeric_or_zero
from .probability import effective_probabilities, check_arbitrage
from .sizing import (
    StakeStrategy,
    select_strategy,
    distribute,
    distribute_stakes,
    total_investment,
)
from .evaluation import evaluate_scenario, evaluate_returns

__all__ = [
    "BookmakerLeg",
    "CalculationResult",
    "Scenario",
    "BetType",
    "get_rules",
    "parse_numeric_or_zero",
    "effective_probabilities",
    "check_arbitrage",
    "StakeStrategy",
    "select_strategy",
    "distribute",
    "distribute_stakes",
    "total_investment",
    "evaluate_scenario",
    "evaluate_returns",
]
