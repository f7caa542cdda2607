from .calculator import calculate_arbitrage, to_legs
from .instructions import (
    format_result,
    format_instruction,
    format_result_short,
    format_result_json,
    generate_disclaimer,
)

__all__ = [
    "calculate_arbitrage",
    "to_legs",
    "format_result",
    "format_instruction",
    "format_result_short",
    "format_result_json",
    "generate_disclaimer",
]
