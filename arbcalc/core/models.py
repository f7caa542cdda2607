from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .bet_types import BetType
from .parsing import parse_flag, parse_numeric_or_zero, parse_optional_numeric
from ..utils.odds import convert_lay_to_back


class BookmakerLeg(BaseModel):
    """One bet leg at a bookmaker or exchange.

    Accepts camelCase (``finalOdd``) or snake_case (``final_odd``) keys.
    Bad numeric input never fails validation; it reads as 0.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    final_odd: float = 0.0
    is_lay_bet: bool = False
    commission_rate: float = 0.0  # Percent, 0-100
    freebet: bool = False
    is_stake_fixed: bool = False
    stake: float = 0.0
    manual_stake: float | None = None

    @field_validator("final_odd", "commission_rate", "stake", mode="before")
    @classmethod
    def _parse_number(cls, value: Any) -> float:
        return parse_numeric_or_zero(value)

    @field_validator("manual_stake", mode="before")
    @classmethod
    def _parse_manual_stake(cls, value: Any) -> float | None:
        return parse_optional_numeric(value)

    @field_validator("is_lay_bet", "freebet", "is_stake_fixed", mode="before")
    @classmethod
    def _parse_flag(cls, value: Any) -> bool:
        return parse_flag(value)

    @property
    def bet_type(self) -> BetType:
        if self.is_lay_bet:
            return BetType.LAY
        if self.freebet:
            return BetType.FREEBET
        return BetType.BACK

    @property
    def commission(self) -> float:
        """Commission as a fraction (5% → 0.05)."""
        return self.commission_rate / 100

    @property
    def has_manual_stake(self) -> bool:
        return self.manual_stake is not None

    @property
    def normalized_odd(self) -> float:
        """Back-equivalent odd: lay odds converted, others passed through."""
        if self.final_odd <= 0:
            return 0.0
        if self.is_lay_bet:
            return convert_lay_to_back(self.final_odd)
        return self.final_odd


class CalculationResult(BaseModel):
    """Result bundle of one arbitrage calculation.

    Serialises with camelCase keys (``model_dump(by_alias=True)``).
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    arbitrage_percentage: float = 0.0
    is_arbitrage: bool = False
    total_investment: float = 0.0
    distributed_stakes: list[float] = Field(default_factory=list)
    returns: list[float] = Field(default_factory=list)
    profit: float = 0.0
    profit_percentage: float = 0.0

    @classmethod
    def zeroed(cls) -> "CalculationResult":
        """The 'not computable' bundle returned for invalid input."""
        return cls()


class Scenario(NamedTuple):
    """Settlement of every leg when one outcome wins."""
    total_return: float   # Paid by the winning leg
    total_outlay: float   # Stakes and liabilities given up
    profit: float         # total_return - total_outlay, to cents
