"""Tests for AES variant parameters and state helpers."""

import pytest

from blockcipher.exceptions import InvalidKeyLength
from blockcipher.utils import (
    bytes_to_state,
    format_state_grid,
    state_to_bytes,
    xor_bytes,
)
from blockcipher.variants import AES128, AES192, AES256, AesVariant, variant_for_key


class TestAesVariant:
    """Tests for AesVariant validation and derived values."""

    @pytest.mark.parametrize("variant,nk,nr,ek_len", [
        (AES128, 4, 10, 176),
        (AES192, 6, 12, 208),
        (AES256, 8, 14, 240),
    ])
    def test_parameters(self, variant, nk, nr, ek_len):
        assert variant.nk == nk
        assert variant.nr == nr
        assert variant.expanded_key_len == ek_len

    @pytest.mark.parametrize("key_len,expected", [(16, AES128), (24, AES192), (32, AES256)])
    def test_variant_for_key(self, key_len, expected):
        assert variant_for_key(bytes(key_len)) is expected

    def test_variant_for_bad_key(self):
        with pytest.raises(InvalidKeyLength):
            variant_for_key(bytes(12))

    def test_rejects_mismatched_rounds(self):
        with pytest.raises(ValueError, match="needs 10 rounds"):
            AesVariant(name="bad", key_len=16, nr=12)

    def test_rejects_bad_key_len(self):
        with pytest.raises(ValueError, match="key_len must be"):
            AesVariant(name="bad", key_len=20, nr=11)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            AES128.nr = 12


class TestStateHelpers:
    """Column-major state conversion helpers."""

    def test_column_major_layout(self):
        data = bytes(range(16))
        state = bytes_to_state(data)

        assert state[0] == [0, 4, 8, 12]
        assert state[3] == [3, 7, 11, 15]
        assert state_to_bytes(state) == data

    def test_format_state_grid(self):
        grid = format_state_grid(bytes.fromhex("3243f6a8885a308d313198a2e0370734"))

        assert grid.splitlines() == [
            "  32 88 31 e0",
            "  43 5a 31 37",
            "  f6 30 98 07",
            "  a8 8d a2 34",
        ]

    def test_bytes_to_state_rejects_wrong_length(self):
        with pytest.raises(ValueError, match="Expected 16 bytes"):
            bytes_to_state(bytes(15))

    def test_xor_bytes(self):
        assert xor_bytes(b"\x0f\xf0", b"\xff\xff") == b"\xf0\x0f"
        with pytest.raises(ValueError, match="Length mismatch"):
            xor_bytes(b"\x00", b"\x00\x00")
