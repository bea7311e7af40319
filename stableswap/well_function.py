"""Stable2 well function.

Entry points take raw reserves (native token decimals) plus encoded well
data, scale everything to 18 decimals, run the pool math and scale the
result back down to the decimals of the token it belongs to.

The two ratio solvers find the reserve of token j at which the rate of
token i per token j matches a target:

- swap: D is held fixed; each round moves reserve j and re-solves reserve i
  on the curve.
- liquidity: reserve i is held fixed; each round moves reserve j and
  recomputes D.

Both seed their search from a lookup table bracket and move reserve j by a
share of the bracket's reserve span proportional to the remaining price gap.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import lru_cache

import structlog

from . import stable_math
from .config import DEFAULT_CONFIG, Stable2Config
from .constants import MAX_ITERATIONS, NAME, PRICE_PRECISION, PRICE_THRESHOLD, SYMBOL
from .errors import ConvergenceFailure
from .lut import LookupTable, PriceBracket
from .safe_int import S
from .scaling import (
    check_index,
    check_reserves_length,
    decode_well_data,
    get_scaled_reserves,
    unscale,
)

logger = structlog.get_logger()


@dataclass
class PriceData:
    """Working state of a ratio search.

    Attributes:
        target_price: Price being solved for (6 decimals)
        current_price: Price at the current reserve estimate
        new_price: Price after the latest step
        max_step_size: Reserve movement for a full-bracket price gap
        lut_data: Bracket that seeded the search
    """

    target_price: int
    lut_data: PriceBracket
    current_price: int = 0
    new_price: int = 0
    max_step_size: int = 0

    def closer_to_low(self) -> bool:
        """True when the target sits nearer the bracket's low price."""
        return (
            self.lut_data.high_price - self.target_price
            > self.target_price - self.lut_data.low_price
        )

    def converged(self) -> bool:
        return S(self.new_price).within(self.target_price, PRICE_THRESHOLD)


class Stable2:
    """StableSwap pricing for a two-token well.

    Args:
        config: Lookup table and amplification coefficient. Defaults to
            Stable2LUT1 (a = 1).
    """

    def __init__(self, config: Stable2Config = DEFAULT_CONFIG) -> None:
        self._config = config

    @classmethod
    def from_lookup_table(cls, lookup_table: LookupTable | None) -> Stable2:
        """Build from a table; raises InvalidLUT when it is missing."""
        return cls(Stable2Config(lookup_table=lookup_table))

    @property
    def a(self) -> int:
        return self._config.a

    @property
    def lookup_table(self) -> LookupTable:
        return self._config.lookup_table  # type: ignore[return-value]

    def name(self) -> str:
        return NAME

    def symbol(self) -> str:
        return SYMBOL

    def decode_well_data(self, data: bytes) -> tuple[int, int]:
        return decode_well_data(data)

    # -------------------------------------------------------------------------
    # Invariant and rate
    # -------------------------------------------------------------------------

    def calc_lp_token_supply(self, reserves: Sequence[int], data: bytes) -> int:
        """Invariant D of the pool, 18 decimals.

        Args:
            reserves: Token reserves in native decimals
            data: Encoded well data (token decimals)

        Returns:
            D, or 0 when both reserves are 0

        Raises:
            InvalidReservesLength: If reserves does not have two entries
            InvalidTokenDecimals: If a decimals entry exceeds 18
            ConvergenceFailure: If Newton-Raphson does not converge
        """
        scaled_reserves = get_scaled_reserves(reserves, decode_well_data(data))
        return stable_math.calc_lp_token_supply(self.a, scaled_reserves)

    def calc_reserve(self, reserves: Sequence[int], j: int, lp_token_supply: int, data: bytes) -> int:
        """Reserve of token j that, with the other reserve, yields `lp_token_supply`.

        Args:
            reserves: Token reserves in native decimals (entry j is ignored)
            j: Index of the reserve to solve for
            lp_token_supply: Target invariant D
            data: Encoded well data

        Returns:
            Reserve j in token j's native decimals

        Raises:
            InvalidReservesLength: If reserves does not have two entries or j is not 0/1
            ConvergenceFailure: If Newton-Raphson does not converge
        """
        check_index(j)
        decimals = decode_well_data(data)
        scaled_reserves = get_scaled_reserves(reserves, decimals)

        reserve = stable_math.calc_reserve(self.a, scaled_reserves, j, lp_token_supply)
        return unscale(reserve, decimals[j])

    def calc_rate(self, reserves: Sequence[int], i: int, j: int, data: bytes) -> int:
        """Marginal rate of token i per unit of token j, 6-decimal fixed point.

        The rate is quoted between 18-decimal units, so 1_000_000 means one
        scaled unit of j trades for one scaled unit of i.

        Raises:
            InvalidReservesLength: If reserves does not have two entries or an index is not 0/1
            ValueError: If i == j
            ConvergenceFailure: If computing D does not converge
        """
        check_reserves_length(reserves)
        check_index(i)
        check_index(j)
        if i == j:
            raise ValueError("Cannot quote a token against itself")

        scaled_reserves = get_scaled_reserves(reserves, decode_well_data(data))
        lp_token_supply = stable_math.calc_lp_token_supply(self.a, scaled_reserves)
        return stable_math.calc_rate(self.a, scaled_reserves, i, j, lp_token_supply)

    def calc_lp_token_underlying(
        self,
        lp_token_amount: int,
        reserves: Sequence[int],
        lp_token_supply: int,
        data: bytes,
    ) -> list[int]:
        """Reserves redeemable for `lp_token_amount`, pro rata.

        `data` is accepted for interface parity and not used.
        """
        check_reserves_length(reserves)
        return [S(reserve).mul_div(lp_token_amount, lp_token_supply).value for reserve in reserves]

    # -------------------------------------------------------------------------
    # Ratio solvers
    # -------------------------------------------------------------------------

    def calc_reserve_at_ratio_swap(
        self,
        reserves: Sequence[int],
        j: int,
        ratios: Sequence[int],
        data: bytes,
    ) -> int:
        """Reserve of token j after swapping the pool to the price implied by `ratios`.

        D is preserved: every candidate reserve j is paired with the reserve i
        that keeps the pool on its current curve.

        Args:
            reserves: Token reserves in native decimals
            j: Index of the reserve to solve for
            ratios: Target ratio in native decimals; the target price of i per j
                is ratios[i] / ratios[j]
            data: Encoded well data

        Returns:
            Reserve j in native decimals

        Raises:
            InvalidReservesLength: If reserves or ratios are malformed, or j is not 0/1
            ConvergenceFailure: If the search does not reach the target price
        """
        check_index(j)
        i = 1 - j
        decimals = decode_well_data(data)
        scaled_reserves = get_scaled_reserves(reserves, decimals)
        pd = self._price_data(ratios, decimals, i, j, self.lookup_table.bracket_for_swap)

        lp_token_supply = stable_math.calc_lp_token_supply(self.a, scaled_reserves)
        # Both reserves equal D / 2 at parity
        parity_reserve = S(lp_token_supply // 2)

        lut = pd.lut_data
        if pd.closer_to_low():
            scaled_reserves[i] = parity_reserve.mul_div(lut.low_price_i, lut.precision).value
            scaled_reserves[j] = parity_reserve.mul_div(lut.low_price_j, lut.precision).value
            pd.current_price = lut.low_price
        else:
            scaled_reserves[i] = parity_reserve.mul_div(lut.high_price_i, lut.precision).value
            scaled_reserves[j] = parity_reserve.mul_div(lut.high_price_j, lut.precision).value
            pd.current_price = lut.high_price

        pd.max_step_size = _max_step_size(lut, scaled_reserves[j])

        for k in range(MAX_ITERATIONS):
            scaled_reserves[j] = _update_reserve(pd, scaled_reserves[j])
            scaled_reserves[i] = stable_math.calc_reserve(self.a, scaled_reserves, i, lp_token_supply)
            pd.new_price = stable_math.calc_rate(self.a, scaled_reserves, i, j, lp_token_supply)

            if pd.converged():
                logger.debug(
                    "ratio_swap_converged",
                    iterations=k + 1,
                    target_price=pd.target_price,
                    price=pd.new_price,
                )
                return unscale(scaled_reserves[j], decimals[j])

            pd.current_price = pd.new_price

        raise _no_convergence("calc_reserve_at_ratio_swap", pd)

    def calc_reserve_at_ratio_liquidity(
        self,
        reserves: Sequence[int],
        j: int,
        ratios: Sequence[int],
        data: bytes,
    ) -> int:
        """Reserve of token j that, next to the current reserve i, prices the pool at `ratios`.

        Reserve i is held fixed, as when liquidity is added on one side only.

        Args:
            reserves: Token reserves in native decimals (entry j is ignored)
            j: Index of the reserve to solve for
            ratios: Target ratio in native decimals
            data: Encoded well data

        Returns:
            Reserve j in native decimals

        Raises:
            InvalidReservesLength: If reserves or ratios are malformed, or j is not 0/1
            ConvergenceFailure: If the search does not reach the target price
        """
        check_index(j)
        i = 1 - j
        decimals = decode_well_data(data)
        scaled_reserves = get_scaled_reserves(reserves, decimals)
        pd = self._price_data(ratios, decimals, i, j, self.lookup_table.bracket_for_liquidity)

        lut = pd.lut_data
        if pd.closer_to_low():
            scaled_reserves[j] = scaled_reserves[i] * lut.low_price_j // lut.precision
            pd.current_price = lut.low_price
        else:
            scaled_reserves[j] = scaled_reserves[i] * lut.high_price_j // lut.precision
            pd.current_price = lut.high_price

        pd.max_step_size = _max_step_size(lut, scaled_reserves[j])

        for k in range(MAX_ITERATIONS):
            scaled_reserves[j] = _update_reserve(pd, scaled_reserves[j])
            lp_token_supply = stable_math.calc_lp_token_supply(self.a, scaled_reserves)
            pd.new_price = stable_math.calc_rate(self.a, scaled_reserves, i, j, lp_token_supply)

            if pd.converged():
                logger.debug(
                    "ratio_liquidity_converged",
                    iterations=k + 1,
                    target_price=pd.target_price,
                    price=pd.new_price,
                )
                return unscale(scaled_reserves[j], decimals[j])

            pd.current_price = pd.new_price

        raise _no_convergence("calc_reserve_at_ratio_liquidity", pd)

    @staticmethod
    def _price_data(
        ratios: Sequence[int],
        decimals: tuple[int, int],
        i: int,
        j: int,
        lookup: Callable[[int], PriceBracket],
    ) -> PriceData:
        """Target price from the ratios and the bracket that contains it."""
        scaled_ratios = get_scaled_reserves(ratios, decimals)
        target_price = (S(scaled_ratios[i]) * PRICE_PRECISION // scaled_ratios[j]).value
        return PriceData(target_price=target_price, lut_data=lookup(target_price))


def _max_step_size(lut: PriceBracket, reserve_j: int) -> int:
    """Reserve j movement that corresponds to crossing the whole bracket."""
    if lut.low_price_j > lut.high_price_j:
        return reserve_j * (lut.low_price_j - lut.high_price_j) // lut.low_price_j
    # Unreachable with a validated table; kept for tables built elsewhere
    return reserve_j * (lut.high_price_j - lut.low_price_j) // lut.high_price_j


def _update_reserve(pd: PriceData, reserve: int) -> int:
    """Move reserve j toward the target price.

    More of token j lowers the price of j in i, so a price above target
    means adding to reserve j and a price below target means removing.
    """
    price_range = pd.lut_data.price_range
    if pd.target_price > pd.current_price:
        step = pd.max_step_size * (pd.target_price - pd.current_price) // price_range
        if step >= reserve:
            raise ConvergenceFailure(
                f"Step of {step} would empty reserve {reserve} (target price {pd.target_price})"
            )
        return reserve - step
    return reserve + pd.max_step_size * (pd.current_price - pd.target_price) // price_range


def _no_convergence(operation: str, pd: PriceData) -> ConvergenceFailure:
    logger.warning(
        "ratio_search_did_not_converge",
        operation=operation,
        target_price=pd.target_price,
        last_price=pd.new_price,
        iterations=MAX_ITERATIONS,
    )
    return ConvergenceFailure(f"{operation} did not converge after {MAX_ITERATIONS} iterations")


@lru_cache(maxsize=1)
def get_default_well_function() -> Stable2:
    """Shared Stable2 instance built from the default configuration."""
    return Stable2()
