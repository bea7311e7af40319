"""StableSwap pricing for two-token wells.

The Stable2 well function prices a two-token pool on a StableSwap curve:
- calc_lp_token_supply: invariant D from reserves
- calc_reserve: one reserve from D and the other reserve
- calc_rate: marginal exchange rate
- calc_reserve_at_ratio_swap / calc_reserve_at_ratio_liquidity: reserve that
  realises a target price, seeded from a lookup table
"""

from .config import DEFAULT_CONFIG, Stable2Config
from .errors import (
    ConvergenceFailure,
    InvalidLUT,
    InvalidReservesLength,
    InvalidTokenDecimals,
    InvalidWellData,
    Stable2Error,
)
from .lut import PriceBracket, Stable2LUT1
from .scaling import decode_well_data, encode_well_data
from .well_function import PriceData, Stable2, get_default_well_function

__all__ = [
    # Well function
    "Stable2",
    "PriceData",
    "get_default_well_function",
    # Configuration
    "Stable2Config",
    "DEFAULT_CONFIG",
    # Lookup table
    "Stable2LUT1",
    "PriceBracket",
    # Well data
    "encode_well_data",
    "decode_well_data",
    # Errors
    "Stable2Error",
    "InvalidTokenDecimals",
    "InvalidReservesLength",
    "InvalidLUT",
    "InvalidWellData",
    "ConvergenceFailure",
]
