"""
Tests for the AES cipher objects.

Covers known answers, round trips, key/block length checks and sharing a
single instance between threads.
"""

import logging
import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from blockcipher import (
    Aes,
    Aes128,
    Aes192,
    Aes256,
    BlockCipherError,
    InvalidBlockLength,
    InvalidKeyLength,
)
from blockcipher.golden import FIPS_197_TEST_VECTORS, golden_encrypt
from blockcipher.utils import bytes_to_hex, hex_to_bytes


PLAINTEXT = "00112233445566778899aabbccddeeff"

# FIPS-197 Appendix C
# Format: (cipher_class, key_hex, expected_ciphertext_hex)
APPENDIX_C = [
    (Aes128, "000102030405060708090a0b0c0d0e0f", "69c4e0d86a7b0430d8cdb78070b4c55a"),
    (Aes192, "000102030405060708090a0b0c0d0e0f1011121314151617",
     "dda97ca4864cdfe06eaf70a0ec0d7191"),
    (Aes256, "000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f",
     "8ea2b7ca516745bfeafc49904b496089"),
]


def random_bytes(n: int, rng: random.Random) -> bytes:
    """Generate n random bytes."""
    return bytes(rng.randint(0, 255) for _ in range(n))


class TestKnownAnswers:
    """FIPS-197 known-answer tests."""

    @pytest.mark.parametrize("cls,key_hex,ct_hex", APPENDIX_C)
    def test_appendix_c_encrypt(self, cls, key_hex, ct_hex):
        cipher = cls(hex_to_bytes(key_hex))
        ciphertext = cipher.encrypt(hex_to_bytes(PLAINTEXT))

        assert bytes_to_hex(ciphertext) == ct_hex

    @pytest.mark.parametrize("cls,key_hex,ct_hex", APPENDIX_C)
    def test_appendix_c_decrypt(self, cls, key_hex, ct_hex):
        cipher = cls(hex_to_bytes(key_hex))
        plaintext = cipher.decrypt(hex_to_bytes(ct_hex))

        assert bytes_to_hex(plaintext) == PLAINTEXT

    @pytest.mark.parametrize("cls,key_hex,ct_hex", APPENDIX_C)
    def test_generic_aes_picks_variant(self, cls, key_hex, ct_hex):
        """Aes with no fixed size gives the same result as the sized class."""
        cipher = Aes(hex_to_bytes(key_hex))

        assert cipher.rounds == cls.variant.nr
        assert bytes_to_hex(cipher.encrypt(hex_to_bytes(PLAINTEXT))) == ct_hex

    @pytest.mark.parametrize("vec", FIPS_197_TEST_VECTORS)
    def test_all_reference_vectors(self, vec):
        assert Aes(vec["key"]).encrypt(vec["plaintext"]) == vec["ciphertext"]


class TestRoundTrip:
    """decrypt(encrypt(p)) == p for every key size."""

    @pytest.mark.parametrize("key_len", [16, 24, 32])
    @pytest.mark.parametrize("seed", range(10))
    def test_random_round_trip(self, key_len, seed):
        rng = random.Random(seed)
        cipher = Aes(random_bytes(key_len, rng))
        pt = random_bytes(16, rng)

        assert cipher.decrypt(cipher.encrypt(pt)) == pt
        assert cipher.encrypt(cipher.decrypt(pt)) == pt

    @pytest.mark.parametrize("key_len", [16, 24, 32])
    @pytest.mark.parametrize("seed", range(10))
    def test_matches_pycryptodome(self, key_len, seed):
        rng = random.Random(1000 + seed)
        key = random_bytes(key_len, rng)
        pt = random_bytes(16, rng)

        expected = golden_encrypt(key, pt)
        computed = Aes(key).encrypt(pt)

        assert computed == expected, (
            f"Seed {seed}: expected {bytes_to_hex(expected)}, "
            f"got {bytes_to_hex(computed)}"
        )

    def test_deterministic(self):
        cipher = Aes(bytes(range(32)))
        pt = bytes(range(16, 32))

        results = {cipher.encrypt(pt) for _ in range(5)}
        results.add(Aes(bytes(range(32))).encrypt(pt))

        assert len(results) == 1

    def test_accepts_bytes_like_input(self):
        cipher = Aes(bytearray(16))
        pt = bytes(range(16))

        assert cipher.encrypt(bytearray(pt)) == cipher.encrypt(pt)
        assert cipher.encrypt(memoryview(pt)) == cipher.encrypt(pt)

    def test_input_block_not_modified(self):
        cipher = Aes(bytes(16))
        block = bytearray(range(16))

        cipher.encrypt(block)
        cipher.decrypt(block)

        assert block == bytearray(range(16))

    def test_returns_bytes(self):
        cipher = Aes(bytes(16))
        assert isinstance(cipher.encrypt(bytearray(16)), bytes)
        assert isinstance(cipher.decrypt(bytearray(16)), bytes)


class TestKeySchedule:
    """Structural checks on the stored key schedule."""

    @pytest.mark.parametrize("key_len,rounds", [(16, 10), (24, 12), (32, 14)])
    def test_expanded_key_length(self, key_len, rounds):
        cipher = Aes(bytes(key_len))

        assert cipher.rounds == rounds
        assert len(cipher.expanded_key) == (rounds + 1) * 16
        assert cipher.key_variant.expanded_key_len == (rounds + 1) * 16

    def test_expanded_key_is_immutable(self):
        cipher = Aes(bytes(16))
        assert isinstance(cipher.expanded_key, bytes)

    def test_key_copied_at_construction(self):
        """Mutating the caller's key buffer does not affect the cipher."""
        key = bytearray(16)
        cipher = Aes(key)
        before = cipher.encrypt(bytes(16))

        key[0] = 0xff

        assert cipher.encrypt(bytes(16)) == before

    def test_repr_hides_key(self):
        key = bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c")
        text = repr(Aes(key))

        assert "AES-128" in text
        assert "2b7e" not in text


class TestKeyLength:
    """Key length gating."""

    @pytest.mark.parametrize("key_len", [0, 1, 8, 15, 17, 23, 25, 31, 33, 48])
    def test_invalid_key_length(self, key_len):
        with pytest.raises(InvalidKeyLength, match="Key must be 16, 24 or 32 bytes"):
            Aes(bytes(key_len))

    @pytest.mark.parametrize("cls,good_len", [(Aes128, 16), (Aes192, 24), (Aes256, 32)])
    @pytest.mark.parametrize("key_len", [16, 24, 32])
    def test_sized_class_rejects_other_lengths(self, cls, good_len, key_len):
        if key_len == good_len:
            assert cls(bytes(key_len)).rounds == cls.variant.nr
        else:
            with pytest.raises(InvalidKeyLength, match=f"Key must be {good_len} bytes"):
                cls(bytes(key_len))

    def test_error_attributes(self):
        with pytest.raises(InvalidKeyLength) as excinfo:
            Aes(bytes(20))

        assert excinfo.value.length == 20
        assert excinfo.value.allowed == (16, 24, 32)

    def test_error_hierarchy(self):
        """InvalidKeyLength is both a package error and a ValueError."""
        with pytest.raises(ValueError):
            Aes(bytes(5))
        with pytest.raises(BlockCipherError):
            Aes(bytes(5))


class TestBlockLength:
    """Block length gating."""

    @pytest.mark.parametrize("block_len", [0, 1, 15, 17, 32])
    def test_encrypt_rejects_wrong_block(self, block_len):
        with pytest.raises(InvalidBlockLength, match="Block must be 16 bytes"):
            Aes(bytes(16)).encrypt(bytes(block_len))

    @pytest.mark.parametrize("block_len", [0, 8, 31])
    def test_decrypt_rejects_wrong_block(self, block_len):
        with pytest.raises(InvalidBlockLength, match=f"got {block_len}"):
            Aes(bytes(32)).decrypt(bytes(block_len))


class TestConcurrency:
    """A single instance can be shared between threads."""

    def test_shared_instance(self):
        rng = random.Random(7)
        cipher = Aes256(random_bytes(32, rng))
        blocks = [random_bytes(16, rng) for _ in range(64)]
        expected = [golden_encrypt(cipher.expanded_key[:32], b) for b in blocks]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(cipher.encrypt, blocks))
            round_trips = list(pool.map(cipher.decrypt, results))

        assert results == expected
        assert round_trips == blocks


class TestLogging:
    """Construction is logged at DEBUG without key material."""

    def test_debug_log_on_construction(self, caplog):
        key = bytes.fromhex("603deb1015ca71be2b73aef0857d77811f352c073b6108d72d9810a30914dff4")

        with caplog.at_level(logging.DEBUG, logger="blockcipher"):
            Aes(key)

        assert "AES-256" in caplog.text
        assert "14 rounds" in caplog.text
        assert key.hex() not in caplog.text
        assert "603deb10" not in caplog.text
