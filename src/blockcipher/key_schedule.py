"""
AES key expansion (FIPS-197 Section 5.2).

The expanded key is a sequence of 4-byte words w[0 .. Nb*(Nr+1)). The
first Nk words are the cipher key itself; each later word is

    w[i] = w[i-Nk] XOR temp

where temp is w[i-1], transformed when i is a multiple of Nk
(RotWord, SubWord, Rcon) and, for 256-bit keys only, when i % Nk == 4
(SubWord alone).
"""

from __future__ import annotations

import logging

from .tables import RCON, SBOX
from .variants import BLOCK_SIZE, NB, WORD_SIZE, variant_for_key

logger = logging.getLogger(__name__)


def rot_word(word: bytes) -> bytes:
    """RotWord([b0, b1, b2, b3]) = [b1, b2, b3, b0]."""
    return bytes((word[1], word[2], word[3], word[0]))


def sub_word(word: bytes) -> bytes:
    """SubWord: apply the S-box to each byte of a word."""
    return bytes(SBOX[b] for b in word)


def expand_key(key: bytes) -> bytes:
    """
    Expand a cipher key into the full round-key schedule.

    Args:
        key: 16, 24 or 32 byte AES key

    Returns:
        (Nr + 1) * 16 bytes; the first len(key) bytes are the key

    Raises:
        InvalidKeyLength: If the key length is not 16, 24 or 32
    """
    variant = variant_for_key(key)
    nk = variant.nk

    ek = bytearray(variant.expanded_key_len)
    ek[:len(key)] = key

    for i in range(nk, NB * (variant.nr + 1)):
        temp = ek[(i - 1) * WORD_SIZE:i * WORD_SIZE]

        if i % nk == 0:
            temp = bytearray(sub_word(rot_word(temp)))
            temp[0] ^= RCON[i // nk - 1]
        elif nk > 6 and i % nk == 4:
            temp = sub_word(temp)

        prev = (i - nk) * WORD_SIZE
        base = i * WORD_SIZE
        for j in range(WORD_SIZE):
            ek[base + j] = ek[prev + j] ^ temp[j]

    logger.debug("Expanded %s key into %d round keys", variant.name, variant.nr + 1)
    return bytes(ek)


def round_key(expanded_key: bytes, round_num: int) -> bytes:
    """Return the 16-byte round key for the given round."""
    if not 0 <= round_num < len(expanded_key) // BLOCK_SIZE:
        raise IndexError(f"Round {round_num} is outside the key schedule")
    start = round_num * BLOCK_SIZE
    return bytes(expanded_key[start:start + BLOCK_SIZE])
