"""Lookup table data structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class Breakpoint:
    """A point on the curve where the rate of i per j equals `price`.

    Attributes:
        price: Rate of token i per token j, 6-decimal fixed point
        ratio_i: Reserve i at that price, scaled by the table precision
        ratio_j: Reserve j at that price, scaled by the table precision
    """

    price: int
    ratio_i: int
    ratio_j: int


@dataclass(frozen=True)
class PriceBracket:
    """The two breakpoints that enclose a queried price.

    Reserve ratios are scaled by `precision`. Lower prices mean more of
    token j in the pool, so low_price_j > high_price_j.
    """

    high_price: int
    high_price_i: int
    high_price_j: int
    low_price: int
    low_price_i: int
    low_price_j: int
    precision: int

    @property
    def price_range(self) -> int:
        return self.high_price - self.low_price


@runtime_checkable
class LookupTable(Protocol):
    """Interface the well function needs from a lookup table."""

    def a_parameter(self) -> int: ...

    def bracket_for_swap(self, price: int) -> PriceBracket: ...

    def bracket_for_liquidity(self, price: int) -> PriceBracket: ...
