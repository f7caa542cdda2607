"""API routes for the arbitrage calculator.

All endpoints are stateless and advisory.
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any

from ..core.sizing import distribute_stakes
from ..engine import calculate_arbitrage, format_result_json, generate_disclaimer, to_legs
from ..config import MAX_OUTCOMES


router = APIRouter(prefix="/api", tags=["calculator"])


class CalculateRequest(BaseModel):
    """Body of POST /api/calculate."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    bookmakers: list[dict[str, Any]]
    target_investment: float | None = Field(None, gt=0)


class DistributeRequest(BaseModel):
    """Body of POST /api/distribute."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    odds: list[float | str | None]
    fixed_index: int
    fixed_stake: float | str | None = 0.0


def _check_size(count: int) -> None:
    if count > MAX_OUTCOMES:
        raise HTTPException(
            status_code=400,
            detail=f"At most {MAX_OUTCOMES} outcomes per calculation, got {count}",
        )


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "Arbitrage Calculator",
        "version": "1.0.0",
        "max_outcomes": MAX_OUTCOMES,
    }


@router.post("/calculate")
async def calculate(request: CalculateRequest):
    """
    Calculate stakes and guaranteed profit for a set of legs.

    Each bookmaker record takes camelCase keys: finalOdd, isLayBet,
    commissionRate, freebet, isStakeFixed, stake, manualStake.
    """
    _check_size(len(request.bookmakers))

    legs = to_legs(request.bookmakers)
    result = calculate_arbitrage(legs, request.target_investment)

    payload = format_result_json(result, legs)
    payload["disclaimer"] = generate_disclaimer()
    return payload


@router.post("/distribute")
async def distribute(request: DistributeRequest):
    """Distribute stakes from one fixed stake over plain back odds."""
    _check_size(len(request.odds))

    stakes = distribute_stakes(request.odds, request.fixed_index, request.fixed_stake)
    return {"stakes": stakes}
