"""Tests for the AES constant tables."""

import pytest

from blockcipher.tables import (
    GF_MUL2,
    GF_MUL3,
    GF_MUL9,
    GF_MUL11,
    GF_MUL13,
    GF_MUL14,
    INV_SBOX,
    RCON,
    SBOX,
)


def xtime(a: int) -> int:
    """Multiply by x in GF(2^8)."""
    return ((a << 1) ^ 0x1b) & 0xff if a & 0x80 else (a << 1) & 0xff


def gf_mul(a: int, b: int) -> int:
    """Shift-and-add multiplication in GF(2^8)."""
    result = 0
    while b:
        if b & 1:
            result ^= a
        a = xtime(a)
        b >>= 1
    return result


class TestSbox:
    """Tests for the forward and inverse S-box."""

    def test_sizes(self):
        assert len(SBOX) == 256
        assert len(INV_SBOX) == 256

    def test_is_permutation(self):
        assert sorted(SBOX) == list(range(256))

    def test_inverse(self):
        """INV_SBOX undoes SBOX for all 256 inputs."""
        for i in range(256):
            assert INV_SBOX[SBOX[i]] == i, f"Inverse S-box mismatch at 0x{i:02x}"

    def test_known_entries(self):
        """FIPS-197 Figure 7: S(00) = 63, S(53) = ed."""
        assert SBOX[0x00] == 0x63
        assert SBOX[0x53] == 0xed
        assert INV_SBOX[0x63] == 0x00

    def test_no_fixed_points(self):
        for i in range(256):
            assert SBOX[i] != i
            assert SBOX[i] != i ^ 0xff


class TestGfTables:
    """Multiplication tables agree with GF(2^8) arithmetic."""

    @pytest.mark.parametrize("factor,table", [
        (2, GF_MUL2),
        (3, GF_MUL3),
        (9, GF_MUL9),
        (11, GF_MUL11),
        (13, GF_MUL13),
        (14, GF_MUL14),
    ])
    def test_table_matches_multiplication(self, factor, table):
        assert len(table) == 256
        for i in range(256):
            assert table[i] == gf_mul(i, factor), (
                f"GF_MUL{factor}[0x{i:02x}]: expected 0x{gf_mul(i, factor):02x}, "
                f"got 0x{table[i]:02x}"
            )

    def test_fips_197_xtime_example(self):
        """FIPS-197 Section 4.2.1: {57} * {13} = {fe}."""
        assert gf_mul(0x57, 0x13) == 0xfe
        assert GF_MUL2[0x57] == 0xae


class TestRcon:
    """Tests for the round constants."""

    def test_rcon_is_powers_of_x(self):
        value = 1
        for i in range(10):
            assert RCON[i] == value
            value = xtime(value)
