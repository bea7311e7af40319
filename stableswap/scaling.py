"""Well data codec and decimal scaling helpers.

A pool's per-token decimals travel as opaque "well data": the ABI encoding
of two uint256 words (decimal0, decimal1). A word of 0 means 18 decimals,
so an all-zero payload describes two 18-decimal tokens.

All pool math runs on reserves normalised to 18 decimals. Scaling up
multiplies by 10^(18 - decimals); scaling down divides by the same factor
and truncates. Round trips are only exact for 18-decimal tokens.
"""

from __future__ import annotations

from collections.abc import Sequence

from .constants import N_COINS, POOL_PRECISION_DECIMALS, WELL_DATA_LENGTH
from .errors import InvalidReservesLength, InvalidTokenDecimals, InvalidWellData

_WORD = 32


def encode_well_data(decimal0: int = 0, decimal1: int = 0) -> bytes:
    """Encode token decimals as two big-endian uint256 words.

    Args:
        decimal0: Decimals of token 0 (0 means 18)
        decimal1: Decimals of token 1 (0 means 18)

    Returns:
        64 bytes of well data
    """
    if decimal0 < 0 or decimal1 < 0:
        raise InvalidTokenDecimals(f"Decimals must be non-negative, got ({decimal0}, {decimal1})")
    return decimal0.to_bytes(_WORD, "big") + decimal1.to_bytes(_WORD, "big")


def decode_well_data(data: bytes) -> tuple[int, int]:
    """Decode well data into per-token decimals.

    Args:
        data: 64 bytes produced by encode_well_data (or abi.encode)

    Returns:
        (decimal0, decimal1), with 0 replaced by 18

    Raises:
        InvalidWellData: If data is not exactly two words
        InvalidTokenDecimals: If either value exceeds 18
    """
    if len(data) != WELL_DATA_LENGTH:
        raise InvalidWellData(f"Well data must be {WELL_DATA_LENGTH} bytes, got {len(data)}")

    decimal0 = int.from_bytes(data[:_WORD], "big")
    decimal1 = int.from_bytes(data[_WORD:], "big")

    # 0 is the unset sentinel, not "zero decimal places"
    if decimal0 == 0:
        decimal0 = POOL_PRECISION_DECIMALS
    if decimal1 == 0:
        decimal1 = POOL_PRECISION_DECIMALS

    if decimal0 > POOL_PRECISION_DECIMALS or decimal1 > POOL_PRECISION_DECIMALS:
        raise InvalidTokenDecimals(
            f"Token decimals must be <= {POOL_PRECISION_DECIMALS}, got ({decimal0}, {decimal1})"
        )
    return decimal0, decimal1


def scaling_factor(decimals: int) -> int:
    """Factor that lifts an amount with `decimals` places to 18 decimals."""
    if not 0 <= decimals <= POOL_PRECISION_DECIMALS:
        raise InvalidTokenDecimals(f"Token decimals must be in [0, 18], got {decimals}")
    return 10 ** (POOL_PRECISION_DECIMALS - decimals)


def scale(amount: int, decimals: int) -> int:
    """Scale a native-decimal amount up to 18 decimals."""
    return amount * scaling_factor(decimals)


def unscale(amount: int, decimals: int) -> int:
    """Scale an 18-decimal amount down to native decimals, truncating."""
    return amount // scaling_factor(decimals)


def check_reserves_length(reserves: Sequence[int]) -> None:
    """Raise InvalidReservesLength unless exactly two reserves are given."""
    if len(reserves) != N_COINS:
        raise InvalidReservesLength(f"Expected {N_COINS} reserves, got {len(reserves)}")


def check_index(index: int) -> None:
    """Raise InvalidReservesLength unless index addresses one of the two tokens."""
    if index not in (0, 1):
        raise InvalidReservesLength(f"Token index must be 0 or 1, got {index}")


def get_scaled_reserves(reserves: Sequence[int], decimals: tuple[int, int]) -> list[int]:
    """Scale both reserves to 18 decimals.

    Args:
        reserves: Reserves in native token decimals
        decimals: Decoded (decimal0, decimal1)

    Returns:
        New list of 18-decimal reserves

    Raises:
        InvalidReservesLength: If reserves does not have two entries
    """
    check_reserves_length(reserves)
    return [scale(reserves[0], decimals[0]), scale(reserves[1], decimals[1])]
