"""Single-block cipher objects.

All ciphers share the BlockCipher contract: construct from a key, then
call encrypt(block) / decrypt(block) on exactly block_size bytes. An
instance keeps only its immutable key schedule, so it can be shared
between threads.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

from .exceptions import InvalidBlockLength, InvalidKeyLength
from .key_schedule import expand_key
from .rounds import decrypt_state, encrypt_state
from .trace import TraceRecorder
from .variants import AES128, AES192, AES256, BLOCK_SIZE, AesVariant, variant_for_key

logger = logging.getLogger(__name__)


class BlockCipher(ABC):
    """Abstract base class for block ciphers.

    Subclasses set the class attributes and implement encrypt()/decrypt().
    """

    # Class attributes to be overridden by subclasses
    name: ClassVar[str] = "base"
    description: ClassVar[str] = "Base block cipher (abstract)"
    block_size: ClassVar[int] = BLOCK_SIZE

    @abstractmethod
    def encrypt(self, block: bytes) -> bytes:
        """Encrypt exactly one block.

        Args:
            block: block_size bytes of plaintext

        Returns:
            block_size bytes of ciphertext
        """
        raise NotImplementedError

    @abstractmethod
    def decrypt(self, block: bytes) -> bytes:
        """Decrypt exactly one block.

        Args:
            block: block_size bytes of ciphertext

        Returns:
            block_size bytes of plaintext
        """
        raise NotImplementedError

    def validate_block(self, block: bytes) -> None:
        """Check the block size."""
        if len(block) != self.block_size:
            raise InvalidBlockLength(len(block), self.block_size)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class Aes(BlockCipher):
    """AES with the variant picked from the key length.

    The key schedule is computed once here and never modified.
    """

    name = "aes"
    description = "AES (FIPS-197), key length selects 128/192/256-bit variant"

    # Fixed variant for the sized subclasses, None to accept any AES key length
    variant: ClassVar[AesVariant | None] = None

    def __init__(self, key: bytes):
        fixed = type(self).variant
        if fixed is not None and len(key) != fixed.key_len:
            raise InvalidKeyLength(len(key), (fixed.key_len,))
        self._variant = fixed or variant_for_key(key)
        self._expanded_key = expand_key(bytes(key))
        logger.debug("Created %s cipher (%d rounds)", self._variant.name, self._variant.nr)

    @property
    def key_variant(self) -> AesVariant:
        return self._variant

    @property
    def rounds(self) -> int:
        """Number of rounds, Nr."""
        return self._variant.nr

    @property
    def expanded_key(self) -> bytes:
        """The (Nr + 1) * 16 byte round-key schedule."""
        return self._expanded_key

    def encrypt(self, block: bytes, tracer: TraceRecorder | None = None) -> bytes:
        self.validate_block(block)
        state = bytearray(block)
        encrypt_state(state, self._expanded_key, self._variant.nr, tracer)
        return bytes(state)

    def decrypt(self, block: bytes, tracer: TraceRecorder | None = None) -> bytes:
        self.validate_block(block)
        state = bytearray(block)
        decrypt_state(state, self._expanded_key, self._variant.nr, tracer)
        return bytes(state)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(variant={self._variant.name!r}, rounds={self.rounds})"


class Aes128(Aes):
    """AES with a 128-bit key, 10 rounds."""

    name = "aes-128"
    description = "AES-128 (16-byte key, 10 rounds)"
    variant = AES128


class Aes192(Aes):
    """AES with a 192-bit key, 12 rounds."""

    name = "aes-192"
    description = "AES-192 (24-byte key, 12 rounds)"
    variant = AES192


class Aes256(Aes):
    """AES with a 256-bit key, 14 rounds."""

    name = "aes-256"
    description = "AES-256 (32-byte key, 14 rounds)"
    variant = AES256
