"""Stable2 invariant and rate math.

Core math for the two-token StableSwap curve, operating on reserves that
are already scaled to 18 decimals. Uses Newton-Raphson iteration for the
invariant and for solving a single reserve; the marginal rate is closed form.

IMPORTANT: All calculations use SafeInt so that a degenerate input (a zero
reserve on one side, for instance) raises instead of returning nonsense.
"""

from __future__ import annotations

from collections.abc import Sequence

from .constants import A_PRECISION, MAX_ITERATIONS, N_COINS, PRICE_PRECISION
from .errors import ConvergenceFailure
from .safe_int import S


def amp_times_n_squared(a: int) -> int:
    """Ann as used by the Newton update: a * N^2 * A_PRECISION.

    For N = 2 this equals the A * n^n of the original StableSwap paper.
    """
    return a * N_COINS * N_COINS * A_PRECISION


def calc_lp_token_supply(a: int, scaled_reserves: Sequence[int]) -> int:
    """Calculate the invariant D using Newton-Raphson iteration.

    Algorithm:
        1. Initial guess: D = x0 + x1
        2. d_p = D^3 / (4 * x0 * x1), accumulated as two mul/div steps
        3. D = (Ann*S/A_P + d_p*N) * D / ((Ann - A_P)*D/A_P + (N+1)*d_p)
        4. Stop once |D_new - D_old| <= 1
        5. Max iterations: 255

    Args:
        a: Amplification parameter (unscaled, as returned by the lookup table)
        scaled_reserves: Both reserves, 18 decimals

    Returns:
        The invariant D (18 decimals)

    Raises:
        ConvergenceFailure: If iteration doesn't converge
        DivisionByZero: If exactly one reserve is zero
        Uint256Overflow: If D does not fit in a uint256
    """
    x0, x1 = S(scaled_reserves[0]), S(scaled_reserves[1])
    if not x0 and not x1:
        return 0

    ann = S(amp_times_n_squared(a))
    n = S(N_COINS)
    sum_reserves = x0 + x1
    d = sum_reserves

    for _ in range(MAX_ITERATIONS):
        d_p = d * d // (x0 * n)
        d_p = d_p * d // (x1 * n)

        d_prev = d
        numerator = (ann * sum_reserves // A_PRECISION + d_p * n) * d
        denominator = (ann - A_PRECISION) * d // A_PRECISION + (n + 1) * d_p
        d = numerator // denominator

        if d.within(d_prev, 1):
            return d.to_uint256()

    raise ConvergenceFailure(f"calc_lp_token_supply did not converge after {MAX_ITERATIONS} iterations")


def get_b_and_c(ann: int, lp_token_supply: int, reserve: int) -> tuple[int, int]:
    """Coefficients of the quadratic y^2 + (b - D)*y - c = 0.

    Args:
        ann: a * N^2 * A_PRECISION
        lp_token_supply: The invariant D
        reserve: The known (other) reserve, 18 decimals

    Returns:
        (b, c)
    """
    d, x, n = S(lp_token_supply), S(reserve), S(N_COINS)
    c = d * d // (x * n) * d * A_PRECISION // (ann * n)
    b = x + d * A_PRECISION // ann
    return b.value, c.value


def calc_reserve(a: int, scaled_reserves: Sequence[int], j: int, lp_token_supply: int) -> int:
    """Solve for reserve j given D and the other reserve.

    Newton-Raphson on y^2 + (b - D)*y - c = 0, rearranged as
    y = (y^2 + c) / (2y + b - D) and seeded at y = D.

    Args:
        a: Amplification parameter
        scaled_reserves: Both reserves, 18 decimals (entry j is ignored)
        j: Index of the reserve to solve for
        lp_token_supply: The invariant D to preserve

    Returns:
        Reserve j, 18 decimals

    Raises:
        ConvergenceFailure: If iteration doesn't converge
    """
    d = S(lp_token_supply)
    b, c = get_b_and_c(amp_times_n_squared(a), lp_token_supply, scaled_reserves[1 - j])

    reserve = d
    for _ in range(MAX_ITERATIONS):
        prev_reserve = reserve
        reserve = (reserve * reserve + c) // (reserve * 2 + b - d)

        if reserve.within(prev_reserve, 1):
            return reserve.to_uint256()

    raise ConvergenceFailure(f"calc_reserve did not converge after {MAX_ITERATIONS} iterations")


def calc_rate(a: int, scaled_reserves: Sequence[int], i: int, j: int, lp_token_supply: int) -> int:
    """Marginal rate of token i per unit of token j, 6-decimal fixed point.

    Differentiating y^2 + (b - D)*y - c = 0 with y = x_i and b, c built from
    x_j gives -dy/dx_j = (y + c/x_j) / (2y + b - D). No iteration.
    """
    x_i, x_j = S(scaled_reserves[i]), S(scaled_reserves[j])
    b, c = get_b_and_c(amp_times_n_squared(a), lp_token_supply, x_j.value)

    numerator = (x_i * x_j + c) * PRICE_PRECISION
    denominator = x_j * (x_i * 2 + b - lp_token_supply)
    return (numerator // denominator).to_uint256()
