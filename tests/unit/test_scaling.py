"""Tests for the well data codec and decimal scaling."""

import pytest

from stableswap.errors import InvalidReservesLength, InvalidTokenDecimals, InvalidWellData
from stableswap.scaling import (
    check_index,
    decode_well_data,
    encode_well_data,
    get_scaled_reserves,
    scale,
    scaling_factor,
    unscale,
)


class TestWellData:
    """Tests for encode_well_data / decode_well_data."""

    def test_encoding_is_two_abi_words(self):
        data = encode_well_data(6, 18)
        assert len(data) == 64
        assert data[31] == 6
        assert data[63] == 18
        assert data[:31] == bytes(31)

    def test_decode(self):
        assert decode_well_data(encode_well_data(6, 8)) == (6, 8)

    def test_zero_means_eighteen(self):
        """0 is the unset sentinel, never zero decimal places."""
        assert decode_well_data(encode_well_data(0, 0)) == (18, 18)
        assert decode_well_data(encode_well_data(0, 6)) == (18, 6)
        assert decode_well_data(bytes(64)) == (18, 18)

    def test_decimals_above_18_rejected(self):
        with pytest.raises(InvalidTokenDecimals):
            decode_well_data(encode_well_data(19, 18))
        with pytest.raises(InvalidTokenDecimals):
            decode_well_data(encode_well_data(18, 24))

    def test_negative_decimals_rejected_at_encode(self):
        with pytest.raises(InvalidTokenDecimals):
            encode_well_data(-1, 18)

    @pytest.mark.parametrize("length", [0, 32, 63, 65, 96])
    def test_wrong_length_rejected(self, length: int):
        with pytest.raises(InvalidWellData):
            decode_well_data(bytes(length))


class TestScaling:
    """Tests for scale / unscale."""

    def test_scaling_factor(self):
        assert scaling_factor(18) == 1
        assert scaling_factor(6) == 10**12
        assert scaling_factor(0) == 10**18

    def test_scaling_factor_rejects_more_than_18(self):
        with pytest.raises(InvalidTokenDecimals):
            scaling_factor(19)

    def test_scale_6_decimals(self):
        assert scale(1_000_000, 6) == 10**18

    def test_unscale_truncates(self):
        assert unscale(1_500_000_999_999_999_999, 6) == 1_500_000

    @pytest.mark.parametrize("value", [0, 1, 999, 10**18, 2**255 + 12345])
    def test_round_trip_exact_at_18_decimals(self, value: int):
        assert unscale(scale(value, 18), 18) == value

    def test_round_trip_lossy_below_18_decimals(self):
        """Scaling down drops the sub-unit remainder; scaling back up does not restore it."""
        assert scale(unscale(1_000_000_000_000_000_001, 6), 6) == 10**18


class TestScaledReserves:
    """Tests for get_scaled_reserves and index checks."""

    def test_mixed_decimals(self):
        assert get_scaled_reserves([1_000_000, 10**18], (6, 18)) == [10**18, 10**18]

    def test_returns_new_list(self):
        reserves = [1, 2]
        scaled = get_scaled_reserves(reserves, (18, 18))
        scaled[0] = 99
        assert reserves == [1, 2]

    @pytest.mark.parametrize("reserves", [[], [1], [1, 2, 3]])
    def test_wrong_length_rejected(self, reserves: list[int]):
        with pytest.raises(InvalidReservesLength):
            get_scaled_reserves(reserves, (18, 18))

    @pytest.mark.parametrize("index", [-1, 2])
    def test_index_out_of_range(self, index: int):
        with pytest.raises(InvalidReservesLength):
            check_index(index)
