#!/usr/bin/env python3
"""Generate the Stable2LUT1 breakpoint tables.

For every grid price p the script finds the reserve ratio r = x_j / x_i at
which the marginal rate of i per j equals p (bisection on ln r), then emits:

- swap rows: both reserves rescaled onto the curve D = 2 (parity = 1)
- liquidity rows: x_i = 1, x_j = r

Ratios are scaled by 10^18 and rounded to 15 significant digits. The grid is
geometric away from parity and linear across [0.5, 2).

Usage:
    python scripts/generate_lut.py > stableswap/lut/data.py.new
"""

import argparse
import logging
import math
import sys

import structlog

logger = structlog.get_logger()

A_PARAMETER = 1
PRECISION = 10**18
SIGNIFICANT_DIGITS = 15

# (geometric factor away from parity, linear step across [0.5, 2))
GRIDS = {
    "swap": (1.25, 0.02),
    "liquidity": (1.5, 0.05),
}


def invariant(x: float, y: float, ann: float) -> float:
    """Float Newton-Raphson for D on the two-token curve."""
    s = x + y
    d = s
    for _ in range(500):
        d_p = d * d / (2 * x) * d / (2 * y)
        prev = d
        d = (ann * s + d_p * 2) * d / ((ann - 1) * d + 3 * d_p)
        if abs(d - prev) < 1e-15 * d:
            break
    return d


def rate(x_i: float, x_j: float, ann: float) -> float:
    """Closed-form rate of i per j, same formula as stable_math.calc_rate."""
    d = invariant(x_i, x_j, ann)
    b = x_j + d / ann
    c = d**3 / (4 * x_j * ann)
    return (x_i + c / x_j) / (2 * x_i + b - d)


def ratio_for_price(price: float, ann: float) -> float:
    """Bisect ln(x_j / x_i) until rate(1, r) == price."""
    lo, hi = -40.0, 40.0
    for _ in range(300):
        mid = (lo + hi) / 2
        if rate(1.0, math.exp(mid), ann) > price:
            lo = mid
        else:
            hi = mid
    return math.exp((lo + hi) / 2)


def round_significant(value: float) -> int:
    """Round to SIGNIFICANT_DIGITS, keeping small values as plain integers."""
    exponent = math.floor(math.log10(value))
    if exponent < SIGNIFICANT_DIGITS:
        return round(value)
    shift = exponent - (SIGNIFICANT_DIGITS - 1)
    return round(value / 10**shift) * 10**shift


def price_grid(factor: float, step: float) -> list[int]:
    """Grid prices in 6-decimal fixed point, from 0.001 to 1000."""
    prices = []
    k = 0
    while (p := 0.001 * factor**k) < 0.5:
        prices.append(int(p * 1e6 + 0.5))
        k += 1
    p = 0.5
    while p < 2.0 - 1e-9:
        prices.append(int(p * 1e6 + 0.5))
        p += step
    k = 0
    while (p := 2.0 * factor**k) < 1000:
        prices.append(int(p * 1e6 + 0.5))
        k += 1
    prices.append(1000 * 10**6)
    return prices


def build_rows(kind: str, ann: float) -> list[tuple[int, int, int]]:
    factor, step = GRIDS[kind]
    rows = []
    for price in price_grid(factor, step):
        r = ratio_for_price(price / 1e6, ann)
        logger.debug("breakpoint", table=kind, price=price, ratio=r)
        if kind == "swap":
            d = invariant(1.0, r, ann)
            rows.append((price, round_significant(2 / d * PRECISION), round_significant(2 * r / d * PRECISION)))
        else:
            rows.append((price, PRECISION, round_significant(r * PRECISION)))
    return rows


HEADER = '''"""Breakpoint tables for Stable2LUT1 (a = {a}).

Generated by scripts/generate_lut.py. Rows are (price, ratio_i, ratio_j):
price is the rate of token i per token j in 6-decimal fixed point, and the
ratios are reserves scaled by TABLE_PRECISION.

Swap rows lie on the curve D = 2 * TABLE_PRECISION. Liquidity rows fix
reserve i at TABLE_PRECISION.

Do not edit by hand.
"""
'''


def render(a: int, swap: list[tuple[int, int, int]], liquidity: list[tuple[int, int, int]]) -> str:
    lines = [
        HEADER.format(a=a),
        "# Amplification coefficient the rows were generated for",
        f"A_PARAMETER = {a}",
        "",
        "TABLE_PRECISION = 10**18",
        "",
    ]
    for name, rows in (("SWAP_BREAKPOINTS", swap), ("LIQUIDITY_BREAKPOINTS", liquidity)):
        lines.append(f"{name}: tuple[tuple[int, int, int], ...] = (")
        lines.extend(f"    ({p}, {i}, {j})," for p, i, j in rows)
        lines.append(")")
        lines.append("")
    return "\n".join(lines)


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--a", type=int, default=A_PARAMETER, help="Amplification parameter")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    args = parser.parse_args()

    # Log to stderr; stdout carries the generated module
    log_level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )

    ann = float(args.a * 4)
    swap = build_rows("swap", ann)
    liquidity = build_rows("liquidity", ann)
    sys.stdout.write(render(args.a, swap, liquidity))
    logger.info("lut_generated", a=args.a, swap_rows=len(swap), liquidity_rows=len(liquidity))
    return 0


if __name__ == "__main__":
    sys.exit(main())
