"""Pydantic models for the pricing HTTP API.

uint256 values travel as decimal strings so that JSON clients without big
integers do not lose precision.
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field

from stableswap.scaling import encode_well_data

# Maximum uint256 value
UINT256_MAX = 2**256 - 1


def validate_uint256(value: Any) -> str:
    """Validate that a value is a uint256, as an int or decimal string.

    Args:
        value: Value to validate (string or int)

    Returns:
        Valid uint256 as decimal string

    Raises:
        ValueError: If value is not a non-negative integer within uint256 range
    """
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"Uint256 must be string or int, got {type(value).__name__}")

    try:
        int_value = int(value)
    except ValueError as err:
        raise ValueError(f"Uint256 must be a decimal integer string: '{value}'") from err

    if int_value < 0:
        raise ValueError(f"Uint256 cannot be negative: {value}")
    if int_value > UINT256_MAX:
        raise ValueError(f"Uint256 overflow: {value} > 2^256-1")
    return str(int_value)


# 256-bit unsigned integer as decimal string (validated)
Uint256 = Annotated[
    str,
    BeforeValidator(validate_uint256),
    Field(description="256-bit unsigned integer as decimal string"),
]

# Token decimals; 0 means 18, values above 18 are rejected by the well function
Decimals = Annotated[int, Field(ge=0, le=255)]


class PoolRequest(BaseModel):
    """Fields shared by every pricing request."""

    reserves: list[Uint256] = Field(description="Reserves in native token decimals.")
    decimals: list[Decimals] = Field(
        default_factory=lambda: [18, 18],
        min_length=2,
        max_length=2,
        description="Token decimals (0 means 18).",
    )

    model_config = {"populate_by_name": True}

    @property
    def reserve_values(self) -> list[int]:
        return [int(r) for r in self.reserves]

    @property
    def well_data(self) -> bytes:
        return encode_well_data(self.decimals[0], self.decimals[1])


class LpTokenSupplyRequest(PoolRequest):
    """Body of POST /lp-token-supply."""


class ReserveRequest(PoolRequest):
    """Body of POST /reserve."""

    j: int = Field(description="Index of the reserve to solve for.")
    lp_token_supply: Uint256 = Field(alias="lpTokenSupply", description="Target invariant D.")


class RateRequest(PoolRequest):
    """Body of POST /rate."""

    i: int = Field(description="Token quoted.")
    j: int = Field(description="Token the quote is per unit of.")


class RatioRequest(PoolRequest):
    """Body of POST /reserve-at-ratio/{mode}."""

    j: int = Field(description="Index of the reserve to solve for.")
    ratios: list[Uint256] = Field(description="Target ratio in native token decimals.")

    @property
    def ratio_values(self) -> list[int]:
        return [int(r) for r in self.ratios]


class LpTokenSupplyResponse(BaseModel):
    lp_token_supply: Uint256 = Field(alias="lpTokenSupply")

    model_config = {"populate_by_name": True}


class ReserveResponse(BaseModel):
    reserve: Uint256


class RateResponse(BaseModel):
    rate: Uint256 = Field(description="Rate of token i per token j, 6-decimal fixed point.")


class ErrorResponse(BaseModel):
    detail: str
    error: str
