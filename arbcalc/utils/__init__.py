from .odds import (
    convert_lay_to_back,
    decimal_to_american,
    format_american_odds,
)

__all__ = [
    "convert_lay_to_back",
    "decimal_to_american",
    "format_american_odds",
]
