"""Stable2 error classes.

These errors map to the custom errors of the Stable2 well function.
"""


class Stable2Error(Exception):
    """Base error for Stable2 operations."""

    pass


class InvalidTokenDecimals(Stable2Error):
    """A token's decimals exceed 18."""

    pass


class InvalidReservesLength(Stable2Error):
    """Reserves do not contain exactly two entries, or a token index is not 0 or 1."""

    pass


class InvalidLUT(Stable2Error):
    """The lookup table is missing or malformed."""

    pass


class InvalidWellData(Stable2Error):
    """Encoded well data is not two 32-byte words."""

    pass


class ConvergenceFailure(Stable2Error):
    """An iterative solver exhausted its round limit without meeting its tolerance."""

    pass
