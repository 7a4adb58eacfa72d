"""Golden reference block ciphers using PyCryptodome."""

from Crypto.Cipher import AES, ARC2

from .variants import VARIANTS


def golden_encrypt(key: bytes, plaintext: bytes) -> bytes:
    """Encrypt a single block using PyCryptodome as golden reference.

    Args:
        key: 16, 24 or 32-byte AES key
        plaintext: 16-byte plaintext block

    Returns:
        16-byte ciphertext block

    Raises:
        ValueError: If key or plaintext has the wrong length
    """
    _check_aes_inputs(key, plaintext)
    return AES.new(key, AES.MODE_ECB).encrypt(plaintext)


def golden_decrypt(key: bytes, ciphertext: bytes) -> bytes:
    """Decrypt a single block using PyCryptodome as golden reference."""
    _check_aes_inputs(key, ciphertext)
    return AES.new(key, AES.MODE_ECB).decrypt(ciphertext)


def golden_rc2_encrypt(key: bytes, plaintext: bytes) -> bytes:
    """Encrypt one 8-byte block with PyCryptodome's ARC2.

    The effective key length is the full key length in bits. PyCryptodome
    only accepts keys of 5 bytes or more.
    """
    if len(plaintext) != 8:
        raise ValueError(f"Plaintext must be 8 bytes, got {len(plaintext)}")
    cipher = ARC2.new(key, ARC2.MODE_ECB, effective_keylen=len(key) * 8)
    return cipher.encrypt(plaintext)


def validate_against_golden(
    key: bytes, plaintext: bytes, candidate_ciphertext: bytes
) -> tuple[bool, str]:
    """Validate a candidate AES ciphertext against the golden reference.

    Args:
        key: AES key
        plaintext: 16-byte plaintext block
        candidate_ciphertext: 16-byte ciphertext to validate

    Returns:
        Tuple of (is_correct, error_detail)
    """
    expected = golden_encrypt(key, plaintext)
    if candidate_ciphertext == expected:
        return True, ""
    else:
        return False, (
            f"Ciphertext mismatch: expected {expected.hex()}, "
            f"got {bytes(candidate_ciphertext).hex()}"
        )


def _check_aes_inputs(key: bytes, block: bytes) -> None:
    if len(key) not in VARIANTS:
        raise ValueError(f"Key must be 16, 24 or 32 bytes, got {len(key)}")
    if len(block) != 16:
        raise ValueError(f"Block must be 16 bytes, got {len(block)}")


# FIPS-197 Appendix B and C test vectors
FIPS_197_TEST_VECTORS = [
    # Appendix B - Cipher Example
    {
        "key": bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c"),
        "plaintext": bytes.fromhex("3243f6a8885a308d313198a2e0370734"),
        "ciphertext": bytes.fromhex("3925841d02dc09fbdc118597196a0b32"),
    },
    # Appendix C.1 - AES-128
    {
        "key": bytes.fromhex("000102030405060708090a0b0c0d0e0f"),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a"),
    },
    # Appendix C.2 - AES-192
    {
        "key": bytes.fromhex("000102030405060708090a0b0c0d0e0f1011121314151617"),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("dda97ca4864cdfe06eaf70a0ec0d7191"),
    },
    # Appendix C.3 - AES-256
    {
        "key": bytes.fromhex(
            "000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f"
        ),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("8ea2b7ca516745bfeafc49904b496089"),
    },
    # Additional test vectors from NIST
    {
        "key": bytes.fromhex("00000000000000000000000000000000"),
        "plaintext": bytes.fromhex("00000000000000000000000000000000"),
        "ciphertext": bytes.fromhex("66e94bd4ef8a2c3b884cfa59ca342b2e"),
    },
    {
        "key": bytes.fromhex("ffffffffffffffffffffffffffffffff"),
        "plaintext": bytes.fromhex("ffffffffffffffffffffffffffffffff"),
        "ciphertext": bytes.fromhex("bcbf217cb280cf30b2517052193ab979"),
    },
]

# RFC 2268 Section 5 vectors whose effective key length equals the key length
RFC_2268_TEST_VECTORS = [
    {
        "key": bytes.fromhex("ffffffffffffffff"),
        "plaintext": bytes.fromhex("ffffffffffffffff"),
        "ciphertext": bytes.fromhex("278b27e42e2f0d49"),
    },
    {
        "key": bytes.fromhex("3000000000000000"),
        "plaintext": bytes.fromhex("1000000000000001"),
        "ciphertext": bytes.fromhex("30649edf9be7d2c2"),
    },
    {
        "key": bytes.fromhex("88bca90e90875a7f0f79c384627bafb2"),
        "plaintext": bytes.fromhex("0000000000000000"),
        "ciphertext": bytes.fromhex("2269552ab0f85ca6"),
    },
]
