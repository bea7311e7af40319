"""Tests for Stable2Config and ServiceSettings."""

import dataclasses

import pytest

from stableswap.config import DEFAULT_CONFIG, ServiceSettings, Stable2Config
from stableswap.errors import InvalidLUT
from stableswap.lut import Stable2LUT1


class ZeroAmpTable(Stable2LUT1):
    """A table reporting an unusable amplification coefficient."""

    def a_parameter(self) -> int:
        return 0


class TestStable2Config:
    """Tests for the well function configuration."""

    def test_default_uses_lut1(self):
        assert isinstance(DEFAULT_CONFIG.lookup_table, Stable2LUT1)
        assert DEFAULT_CONFIG.a == 1

    def test_a_is_read_from_table(self, lookup_table):
        assert Stable2Config(lookup_table=lookup_table).a == lookup_table.a_parameter()

    def test_missing_table_rejected(self):
        with pytest.raises(InvalidLUT):
            Stable2Config(lookup_table=None)

    def test_non_table_rejected(self):
        """Objects without the lookup table methods are refused."""
        with pytest.raises(InvalidLUT):
            Stable2Config(lookup_table=object())  # type: ignore[arg-type]

    def test_non_positive_a_rejected(self):
        with pytest.raises(InvalidLUT):
            Stable2Config(lookup_table=ZeroAmpTable())

    def test_frozen(self):
        """Config cannot be mutated after construction."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.a = 2  # type: ignore[misc]


class TestServiceSettings:
    """Tests for environment-driven service settings."""

    def test_defaults(self, monkeypatch):
        for name in ("STABLESWAP_HOST", "STABLESWAP_PORT", "STABLESWAP_DEBUG"):
            monkeypatch.delenv(name, raising=False)
        settings = ServiceSettings.from_env()
        assert settings == ServiceSettings(host="0.0.0.0", port=8000, debug=False)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("STABLESWAP_HOST", "127.0.0.1")
        monkeypatch.setenv("STABLESWAP_PORT", "9100")
        monkeypatch.setenv("STABLESWAP_DEBUG", "Yes")
        settings = ServiceSettings.from_env()
        assert settings.host == "127.0.0.1"
        assert settings.port == 9100
        assert settings.debug is True

    def test_debug_off_for_other_values(self, monkeypatch):
        monkeypatch.setenv("STABLESWAP_DEBUG", "off")
        assert ServiceSettings.from_env().debug is False
