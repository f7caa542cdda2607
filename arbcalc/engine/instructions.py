"""Human-readable instruction generation.

Converts a calculation into step-by-step instructions that a human can
place manually.

Output must be:
- Exact stakes (and liabilities for lays)
- Bet type per leg
- Specific odds
- Profit for every outcome
"""

from typing import Sequence

from ..core.bet_types import BetType
from ..core.models import BookmakerLeg, CalculationResult
from ..utils.odds import decimal_to_american, format_american_odds

BET_LABELS = {
    BetType.BACK: "Back",
    BetType.LAY: "Lay",
    BetType.FREEBET: "Freebet",
}


def format_result(result: CalculationResult, legs: Sequence[BookmakerLeg]) -> str:
    """
    Format a calculation as human-readable instructions.

    Example output:
    ```
    ARBITRAGE FOUND - Book: 96.40%
    Guaranteed Profit: 3.73 (3.73%)

    INSTRUCTIONS:
    1. Back 49.40 @ 2.10 (+110)
    2. Back 50.60 @ 2.05 (+105)

    Total Investment: 100.00

    OUTCOMES:
      Leg 1 wins: +3.73
      Leg 2 wins: +3.73
    ```
    """
    if not result.distributed_stakes:
        return "No calculation possible: every leg needs odds above zero."

    lines = []

    header = "ARBITRAGE FOUND" if result.is_arbitrage else "NO ARBITRAGE"
    lines.append(f"{header} - Book: {result.arbitrage_percentage:.2f}%")
    label = "Guaranteed Profit" if result.profit >= 0 else "Worst-Case Loss"
    lines.append(f"{label}: {result.profit:.2f} ({result.profit_percentage:.2f}%)")
    lines.append("")

    lines.append("INSTRUCTIONS:")
    for i, (leg, stake) in enumerate(zip(legs, result.distributed_stakes), 1):
        lines.append(format_instruction(leg, stake, i))
    lines.append("")

    lines.append(f"Total Investment: {result.total_investment:.2f}")
    lines.append("")

    lines.append("OUTCOMES:")
    for i, ret in enumerate(result.returns, 1):
        lines.append(f"  Leg {i} wins: {ret:+.2f}")

    return "\n".join(lines)


def format_instruction(leg: BookmakerLeg, stake: float, step_num: int) -> str:
    """
    Format a single leg.

    Examples:
        "1. Back 49.40 @ 2.10 (+110)"
        "2. Lay 50.00 @ 3.00 (+200) | Liability 100.00 | Commission 2%"
    """
    label = BET_LABELS[leg.bet_type]
    american = format_american_odds(decimal_to_american(leg.final_odd))
    line = f"{step_num}. {label} {stake:.2f} @ {leg.final_odd:.2f} ({american})"

    if leg.bet_type is BetType.LAY:
        liability = stake * (leg.final_odd - 1)
        line += f" | Liability {liability:.2f}"
        if leg.commission_rate > 0:
            line += f" | Commission {leg.commission_rate:g}%"

    return line


def format_result_short(result: CalculationResult) -> str:
    """
    Format a calculation as a single-line summary.

    Example: "ARB 96.40% | profit 3.73 (3.73%) on 100.00"
    """
    tag = "ARB" if result.is_arbitrage else "---"
    return (
        f"{tag} {result.arbitrage_percentage:.2f}% | profit {result.profit:.2f} "
        f"({result.profit_percentage:.2f}%) on {result.total_investment:.2f}"
    )


def format_result_json(result: CalculationResult, legs: Sequence[BookmakerLeg]) -> dict:
    """
    Format a calculation as a JSON-serializable dict.

    Used for API responses. Keys follow the camelCase wire format.
    """
    payload = result.model_dump(by_alias=True)
    payload["legs"] = [
        {
            "step": i + 1,
            "betType": leg.bet_type.value,
            "finalOdd": leg.final_odd,
            "oddsAmerican": format_american_odds(decimal_to_american(leg.final_odd)),
            "stake": stake,
        }
        for i, (leg, stake) in enumerate(zip(legs, result.distributed_stakes))
    ]
    payload["formattedText"] = format_result(result, legs)
    return payload


def generate_disclaimer() -> str:
    """Advisory disclaimer text shown with every API response."""
    return """
DISCLAIMER: This is advisory information only. No bets are placed automatically.
Odds can change rapidly; verify current odds and exchange commission before
placing any bets. Gamble responsibly.
""".strip()
