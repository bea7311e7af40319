"""Precomputed price brackets for seeding the ratio solver."""

from .stable2_lut1 import Stable2LUT1
from .types import Breakpoint, LookupTable, PriceBracket

__all__ = [
    "Breakpoint",
    "LookupTable",
    "PriceBracket",
    "Stable2LUT1",
]
