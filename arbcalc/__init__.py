"""Stake distribution and profit calculator for betting arbitrage."""

from .core.models import BookmakerLeg, CalculationResult
from .core.sizing import distribute_stakes
from .engine.calculator import calculate_arbitrage

__all__ = [
    "BookmakerLeg",
    "CalculationResult",
    "calculate_arbitrage",
    "distribute_stakes",
]
