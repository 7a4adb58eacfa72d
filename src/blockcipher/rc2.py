"""
RC2 block cipher (RFC 2268).

RC2 works on 64-bit blocks as four little-endian 16-bit words R[0..3]
and a 64-word expanded key K[0..63]. Encryption is 16 MIX rounds with a
MASH round after the 5th and the 11th; decryption runs the reverse
rounds with K consumed from the end.

The effective key length T1 is always the full key length in bits.
"""

from __future__ import annotations

import struct

from .cipher import BlockCipher
from .exceptions import InvalidKeyLength

MASK16 = 0xFFFF

# PITABLE from RFC 2268 Section 2, a permutation of 0..255 derived from pi
PI_TABLE = bytes([
    0xd9, 0x78, 0xf9, 0xc4, 0x19, 0xdd, 0xb5, 0xed, 0x28, 0xe9, 0xfd, 0x79, 0x4a, 0xa0, 0xd8, 0x9d,
    0xc6, 0x7e, 0x37, 0x83, 0x2b, 0x76, 0x53, 0x8e, 0x62, 0x4c, 0x64, 0x88, 0x44, 0x8b, 0xfb, 0xa2,
    0x17, 0x9a, 0x59, 0xf5, 0x87, 0xb3, 0x4f, 0x13, 0x61, 0x45, 0x6d, 0x8d, 0x09, 0x81, 0x7d, 0x32,
    0xbd, 0x8f, 0x40, 0xeb, 0x86, 0xb7, 0x7b, 0x0b, 0xf0, 0x95, 0x21, 0x22, 0x5c, 0x6b, 0x4e, 0x82,
    0x54, 0xd6, 0x65, 0x93, 0xce, 0x60, 0xb2, 0x1c, 0x73, 0x56, 0xc0, 0x14, 0xa7, 0x8c, 0xf1, 0xdc,
    0x12, 0x75, 0xca, 0x1f, 0x3b, 0xbe, 0xe4, 0xd1, 0x42, 0x3d, 0xd4, 0x30, 0xa3, 0x3c, 0xb6, 0x26,
    0x6f, 0xbf, 0x0e, 0xda, 0x46, 0x69, 0x07, 0x57, 0x27, 0xf2, 0x1d, 0x9b, 0xbc, 0x94, 0x43, 0x03,
    0xf8, 0x11, 0xc7, 0xf6, 0x90, 0xef, 0x3e, 0xe7, 0x06, 0xc3, 0xd5, 0x2f, 0xc8, 0x66, 0x1e, 0xd7,
    0x08, 0xe8, 0xea, 0xde, 0x80, 0x52, 0xee, 0xf7, 0x84, 0xaa, 0x72, 0xac, 0x35, 0x4d, 0x6a, 0x2a,
    0x96, 0x1a, 0xd2, 0x71, 0x5a, 0x15, 0x49, 0x74, 0x4b, 0x9f, 0xd0, 0x5e, 0x04, 0x18, 0xa4, 0xec,
    0xc2, 0xe0, 0x41, 0x6e, 0x0f, 0x51, 0xcb, 0xcc, 0x24, 0x91, 0xaf, 0x50, 0xa1, 0xf4, 0x70, 0x39,
    0x99, 0x7c, 0x3a, 0x85, 0x23, 0xb8, 0xb4, 0x7a, 0xfc, 0x02, 0x36, 0x5b, 0x25, 0x55, 0x97, 0x31,
    0x2d, 0x5d, 0xfa, 0x98, 0xe3, 0x8a, 0x92, 0xae, 0x05, 0xdf, 0x29, 0x10, 0x67, 0x6c, 0xba, 0xc9,
    0xd3, 0x00, 0xe6, 0xcf, 0xe1, 0x9e, 0xa8, 0x2c, 0x63, 0x16, 0x01, 0x3f, 0x58, 0xe2, 0x89, 0xa9,
    0x0d, 0x38, 0x34, 0x1b, 0xab, 0x33, 0xff, 0xb0, 0xbb, 0x48, 0x0c, 0x5f, 0xb9, 0xb1, 0xcd, 0x2e,
    0xc5, 0xf3, 0xdb, 0x47, 0xe5, 0xa5, 0x9c, 0x77, 0x0a, 0xa6, 0x20, 0x68, 0xfe, 0x7f, 0xc1, 0xad,
])

# Rotation amounts s[i] for the four words of a MIX round
MIX_SHIFTS = (1, 2, 3, 5)

# MASH after these MIX rounds (0-based)
MASH_AFTER = (4, 10)

_BLOCK = struct.Struct("<4H")


def _rol16(x: int, n: int) -> int:
    return ((x << n) | (x >> (16 - n))) & MASK16


def _ror16(x: int, n: int) -> int:
    return ((x >> n) | (x << (16 - n))) & MASK16


def expand_rc2_key(key: bytes) -> tuple[int, ...]:
    """
    RC2 key expansion with effective key bits T1 = 8 * len(key).

    Args:
        key: 1..16 byte key

    Returns:
        64 little-endian 16-bit key words K[0..63]
    """
    if not Rc2.MIN_KEY_LEN <= len(key) <= Rc2.MAX_KEY_LEN:
        raise InvalidKeyLength(len(key), range(Rc2.MIN_KEY_LEN, Rc2.MAX_KEY_LEN + 1))

    t = len(key)
    t1 = t * 8
    t8 = (t1 + 7) // 8
    tm = 255 % (2 ** (8 + t1 - 8 * t8))

    buf = bytearray(128)
    buf[:t] = key
    for i in range(t, 128):
        buf[i] = PI_TABLE[(buf[i - 1] + buf[i - t]) & 0xFF]

    buf[128 - t8] = PI_TABLE[buf[128 - t8] & tm]
    for i in range(127 - t8, -1, -1):
        buf[i] = PI_TABLE[buf[i + 1] ^ buf[i + t8]]

    return struct.unpack("<64H", buf)


class Rc2(BlockCipher):
    """RC2 on 8-byte blocks."""

    name = "rc2"
    description = "RC2 (RFC 2268), 8-byte block, 1-16 byte key"
    block_size = 8

    MIN_KEY_LEN = 1
    MAX_KEY_LEN = 16

    def __init__(self, key: bytes):
        self._ek = expand_rc2_key(bytes(key))

    def encrypt(self, block: bytes) -> bytes:
        self.validate_block(block)
        ek = self._ek
        r = list(_BLOCK.unpack(bytes(block)))

        j = 0
        for i in range(16):
            # MIX round
            for w in range(4):
                r[w] = (
                    r[w]
                    + ek[j]
                    + (r[(w - 1) % 4] & r[(w - 2) % 4])
                    + (~r[(w - 1) % 4] & r[(w - 3) % 4])
                ) & MASK16
                r[w] = _rol16(r[w], MIX_SHIFTS[w])
                j += 1

            if i in MASH_AFTER:
                for w in range(4):
                    r[w] = (r[w] + ek[r[(w - 1) % 4] & 63]) & MASK16

        return _BLOCK.pack(*r)

    def decrypt(self, block: bytes) -> bytes:
        self.validate_block(block)
        ek = self._ek
        r = list(_BLOCK.unpack(bytes(block)))

        j = 63
        for i in range(16):
            # R-MIX round
            for w in (3, 2, 1, 0):
                r[w] = _ror16(r[w], MIX_SHIFTS[w])
                r[w] = (
                    r[w]
                    - ek[j]
                    - (r[(w - 1) % 4] & r[(w - 2) % 4])
                    - (~r[(w - 1) % 4] & r[(w - 3) % 4])
                ) & MASK16
                j -= 1

            if i in MASH_AFTER:
                for w in (3, 2, 1, 0):
                    r[w] = (r[w] - ek[r[(w - 1) % 4] & 63]) & MASK16

        return _BLOCK.pack(*r)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(block_size={self.block_size})"


class Rc2K128B128(BlockCipher):
    """RC2 with a 16-byte key over 16-byte blocks.

    Each 16-byte block is two independent 8-byte RC2 blocks, which gives
    RC2 the same block size as AES.
    """

    name = "rc2-128"
    description = "RC2 with 16-byte key, two 8-byte blocks per 16-byte block"
    block_size = 16

    KEY_LEN = 16

    def __init__(self, key: bytes):
        if len(key) != self.KEY_LEN:
            raise InvalidKeyLength(len(key), (self.KEY_LEN,))
        self._inner = Rc2(key)

    def encrypt(self, block: bytes) -> bytes:
        self.validate_block(block)
        return self._inner.encrypt(block[:8]) + self._inner.encrypt(block[8:])

    def decrypt(self, block: bytes) -> bytes:
        self.validate_block(block)
        return self._inner.decrypt(block[:8]) + self._inner.decrypt(block[8:])
