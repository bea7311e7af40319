"""Stable2LUT1: the lookup table for a = 1 pools.

Each table is a sorted run of breakpoints; consecutive breakpoints form a
bracket. A query bisects the price column and returns the bracket that
contains the price. Prices outside the covered domain resolve to the first
or last bracket rather than failing.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence

from stableswap.errors import InvalidLUT

from .data import A_PARAMETER as DATA_A_PARAMETER
from .data import LIQUIDITY_BREAKPOINTS, SWAP_BREAKPOINTS, TABLE_PRECISION
from .types import Breakpoint, PriceBracket


class _BreakpointTable:
    """An immutable, validated breakpoint column with bracket search."""

    __slots__ = ("_breakpoints", "_prices", "precision")

    def __init__(self, rows: Sequence[tuple[int, int, int]], precision: int) -> None:
        if precision <= 0:
            raise InvalidLUT(f"Table precision must be positive, got {precision}")
        if len(rows) < 2:
            raise InvalidLUT(f"A table needs at least two breakpoints, got {len(rows)}")

        breakpoints = tuple(Breakpoint(*row) for row in rows)
        for lower, upper in zip(breakpoints, breakpoints[1:]):
            if lower.price >= upper.price:
                raise InvalidLUT(f"Breakpoint prices must increase: {lower.price} >= {upper.price}")
            if lower.ratio_j <= upper.ratio_j:
                raise InvalidLUT(f"ratio_j must decrease as price increases (at price {upper.price})")

        self._breakpoints = breakpoints
        self._prices = tuple(bp.price for bp in breakpoints)
        self.precision = precision

    def __len__(self) -> int:
        return len(self._breakpoints)

    @property
    def min_price(self) -> int:
        return self._prices[0]

    @property
    def max_price(self) -> int:
        return self._prices[-1]

    def bracket(self, price: int) -> PriceBracket:
        # low.price <= price < high.price, clamped to the edge brackets
        index = bisect_right(self._prices, price) - 1
        index = min(max(index, 0), len(self._prices) - 2)

        low = self._breakpoints[index]
        high = self._breakpoints[index + 1]
        return PriceBracket(
            high_price=high.price,
            high_price_i=high.ratio_i,
            high_price_j=high.ratio_j,
            low_price=low.price,
            low_price_i=low.ratio_i,
            low_price_j=low.ratio_j,
            precision=self.precision,
        )


class Stable2LUT1:
    """Lookup table for Stable2 pools with amplification coefficient 1.

    The swap table holds reserves on the curve D = 2 * precision (so
    parity is (precision, precision)); the liquidity table holds reserve j
    relative to reserve i = precision.
    """

    A_PARAMETER = DATA_A_PARAMETER

    def __init__(
        self,
        swap_breakpoints: Sequence[tuple[int, int, int]] = SWAP_BREAKPOINTS,
        liquidity_breakpoints: Sequence[tuple[int, int, int]] = LIQUIDITY_BREAKPOINTS,
        precision: int = TABLE_PRECISION,
    ) -> None:
        self._swap = _BreakpointTable(swap_breakpoints, precision)
        self._liquidity = _BreakpointTable(liquidity_breakpoints, precision)

    def a_parameter(self) -> int:
        return self.A_PARAMETER

    def bracket_for_swap(self, price: int) -> PriceBracket:
        """Bracket for a swap (D-preserving) search around `price`."""
        return self._swap.bracket(price)

    def bracket_for_liquidity(self, price: int) -> PriceBracket:
        """Bracket for a single-sided liquidity search around `price`."""
        return self._liquidity.bracket(price)

    @property
    def swap_domain(self) -> tuple[int, int]:
        return self._swap.min_price, self._swap.max_price

    @property
    def liquidity_domain(self) -> tuple[int, int]:
        return self._liquidity.min_price, self._liquidity.max_price
