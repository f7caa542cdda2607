"""Odds conversion utilities.

Supports Decimal, American and lay-to-back conversions.
"""

from ..core.parsing import parse_numeric_or_zero


def convert_lay_to_back(lay_odd: float | str | None) -> float:
    """
    Convert exchange lay odds to their back-odds equivalent.

    Laying at L is the same position as backing the other side at
    L / (L - 1). Odds at or below 1 are unusable and return 0.

    Examples:
        2.00 → 2.00
        3.00 → 1.50
        1.50 → 3.00
    """
    lay_value = parse_numeric_or_zero(lay_odd)
    if lay_value <= 1:
        return 0.0
    return lay_value / (lay_value - 1)


def decimal_to_american(decimal_odds: float) -> int:
    """
    Convert Decimal odds to American odds.

    Decimal → American:
    - If decimal >= 2.0: american = (decimal - 1) * 100
    - If decimal < 2.0: american = -100 / (decimal - 1)

    Odds at or below 1.0 have no American form and return 0.

    Examples:
        2.10 → +110
        1.909 → -110
        3.00 → +200
        1.50 → -200
    """
    if decimal_odds <= 1.0:
        return 0
    if decimal_odds >= 2.0:
        return int(round((decimal_odds - 1) * 100))
    return int(round(-100 / (decimal_odds - 1)))


def format_american_odds(american_odds: int) -> str:
    """Format American odds with + or - prefix."""
    if american_odds > 0:
        return f"+{american_odds}"
    return str(american_odds)
