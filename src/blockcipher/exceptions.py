"""Exception types raised by the block ciphers."""

from __future__ import annotations

from typing import Iterable


class BlockCipherError(Exception):
    """Base class for all errors raised by this package."""


class InvalidKeyLength(BlockCipherError, ValueError):
    """Raised when a cipher is constructed with a key of unsupported length."""

    def __init__(self, length: int, allowed: Iterable[int]):
        self.length = length
        self.allowed = tuple(allowed)
        if len(self.allowed) == 1:
            expected = str(self.allowed[0])
        elif self.allowed == tuple(range(self.allowed[0], self.allowed[-1] + 1)):
            expected = f"{self.allowed[0]}..{self.allowed[-1]}"
        else:
            expected = ", ".join(str(n) for n in self.allowed[:-1])
            expected += f" or {self.allowed[-1]}"
        super().__init__(f"Key must be {expected} bytes, got {length}")


class InvalidBlockLength(BlockCipherError, ValueError):
    """Raised when a block passed to encrypt/decrypt has the wrong size."""

    def __init__(self, length: int, block_size: int):
        self.length = length
        self.block_size = block_size
        super().__init__(f"Block must be {block_size} bytes, got {length}")
