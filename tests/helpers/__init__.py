"""Test helpers module for shared test utilities.

- constants: Units, well data and pinned pool vectors
"""

from tests.helpers.constants import (
    BALANCED_RESERVES,
    MIXED_LP_TOKEN_SUPPLY,
    MIXED_RATE_0_PER_1,
    MIXED_RATE_1_PER_0,
    MIXED_RESERVES,
    ONE,
    ONE_USDC,
    OSCILLATING_RESERVES,
    PEGGED_LP_TOKEN_SUPPLY,
    PEGGED_RATE_0_PER_1,
    PEGGED_RATE_1_PER_0,
    PEGGED_RESERVES,
    WELL_DATA_6_18,
    WELL_DATA_18_18,
    WELL_DATA_DEFAULT,
)

__all__ = [
    "ONE",
    "ONE_USDC",
    "WELL_DATA_18_18",
    "WELL_DATA_DEFAULT",
    "WELL_DATA_6_18",
    "BALANCED_RESERVES",
    "PEGGED_RESERVES",
    "PEGGED_LP_TOKEN_SUPPLY",
    "PEGGED_RATE_0_PER_1",
    "PEGGED_RATE_1_PER_0",
    "MIXED_RESERVES",
    "MIXED_LP_TOKEN_SUPPLY",
    "MIXED_RATE_0_PER_1",
    "MIXED_RATE_1_PER_0",
    "OSCILLATING_RESERVES",
]
