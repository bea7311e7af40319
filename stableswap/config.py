"""Configuration for the Stable2 well function and its HTTP service."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from stableswap.errors import InvalidLUT
from stableswap.lut import LookupTable, Stable2LUT1


@dataclass(frozen=True)
class Stable2Config:
    """Immutable configuration of a Stable2 instance.

    The amplification coefficient is read from the lookup table once, at
    construction, so a table and its `a` can never drift apart.

    Attributes:
        lookup_table: Table used to seed the ratio solver
        a: Amplification coefficient (derived, not passed in)
    """

    lookup_table: LookupTable | None
    a: int = field(init=False)

    def __post_init__(self) -> None:
        if self.lookup_table is None:
            raise InvalidLUT("A lookup table is required")
        if not isinstance(self.lookup_table, LookupTable):
            raise InvalidLUT(f"Not a lookup table: {type(self.lookup_table).__name__}")
        a = self.lookup_table.a_parameter()
        if a <= 0:
            raise InvalidLUT(f"Amplification parameter must be positive, got {a}")
        object.__setattr__(self, "a", a)


# Default configuration instance
DEFAULT_CONFIG = Stable2Config(lookup_table=Stable2LUT1())


@dataclass(frozen=True)
class ServiceSettings:
    """HTTP service settings, read from the environment.

    - STABLESWAP_HOST: Host to bind to (default: 0.0.0.0)
    - STABLESWAP_PORT: Port to bind to (default: 8000)
    - STABLESWAP_DEBUG: Enable debug/reload mode (default: false)
    """

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    @classmethod
    def from_env(cls) -> ServiceSettings:
        return cls(
            host=os.environ.get("STABLESWAP_HOST", "0.0.0.0"),
            port=int(os.environ.get("STABLESWAP_PORT", "8000")),
            debug=os.environ.get("STABLESWAP_DEBUG", "false").lower() in ("true", "1", "yes"),
        )
