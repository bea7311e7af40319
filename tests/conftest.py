"""Pytest configuration and fixtures."""

import pytest

from stableswap.lut import Stable2LUT1
from stableswap.well_function import Stable2


@pytest.fixture
def lookup_table() -> Stable2LUT1:
    """The shipped a = 1 lookup table."""
    return Stable2LUT1()


@pytest.fixture
def well_function(lookup_table: Stable2LUT1) -> Stable2:
    """A Stable2 instance over the shipped table."""
    return Stable2.from_lookup_table(lookup_table)
