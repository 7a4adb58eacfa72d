"""AES key-length variants.

FIPS-197 Figure 4, key-block-round combinations:

            Nk (words)   Nb (words)   Nr
  AES-128       4            4        10
  AES-192       6            4        12
  AES-256       8            4        14
"""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import InvalidKeyLength

WORD_SIZE = 4
BLOCK_SIZE = 16
NB = BLOCK_SIZE // WORD_SIZE


@dataclass(frozen=True)
class AesVariant:
    """Parameters of one AES key-length variant."""

    name: str
    key_len: int
    nr: int

    def __post_init__(self) -> None:
        """Validate the key length / round count pairing."""
        expected_nr = {16: 10, 24: 12, 32: 14}.get(self.key_len)
        if expected_nr is None:
            raise ValueError(f"key_len must be 16, 24 or 32, got {self.key_len}")
        if self.nr != expected_nr:
            raise ValueError(
                f"{self.name} with a {self.key_len}-byte key needs {expected_nr} rounds, "
                f"got {self.nr}"
            )

    @property
    def nk(self) -> int:
        """Key length in 32-bit words."""
        return self.key_len // WORD_SIZE

    @property
    def expanded_key_len(self) -> int:
        """Length in bytes of the round-key schedule, (Nr + 1) * 16."""
        return (self.nr + 1) * BLOCK_SIZE


AES128 = AesVariant(name="AES-128", key_len=16, nr=10)
AES192 = AesVariant(name="AES-192", key_len=24, nr=12)
AES256 = AesVariant(name="AES-256", key_len=32, nr=14)

VARIANTS: dict[int, AesVariant] = {v.key_len: v for v in (AES128, AES192, AES256)}
VALID_ROUNDS = frozenset(v.nr for v in VARIANTS.values())


def variant_for_key(key: bytes) -> AesVariant:
    """Select the AES variant implied by the key length.

    Raises:
        InvalidKeyLength: If the key is not 16, 24 or 32 bytes long
    """
    try:
        return VARIANTS[len(key)]
    except KeyError:
        raise InvalidKeyLength(len(key), VARIANTS) from None
