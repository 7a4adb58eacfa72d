"""
AES round transforms and the forward/inverse round pipelines.

Every transform works in place on a 16-byte bytearray holding the state
in column-major order:

    [0, 4,  8, 12]
    [1, 5,  9, 13]
    [2, 6, 10, 14]
    [3, 7, 11, 15]

Cipher (FIPS-197 Section 5.1):
- Round 0: AddRoundKey
- Rounds 1..Nr-1: SubBytes, ShiftRows, MixColumns, AddRoundKey
- Round Nr: SubBytes, ShiftRows, AddRoundKey (no MixColumns)

Inverse cipher (Section 5.3) runs the inverse steps in mirrored order.
"""

from __future__ import annotations

from .tables import (
    GF_MUL2,
    GF_MUL3,
    GF_MUL9,
    GF_MUL11,
    GF_MUL13,
    GF_MUL14,
    INV_SBOX,
    SBOX,
)
from .trace import TraceRecorder
from .variants import BLOCK_SIZE, VALID_ROUNDS

# Source index for each output position after ShiftRows / InvShiftRows
SHIFT_ROWS = (0, 5, 10, 15, 4, 9, 14, 3, 8, 13, 2, 7, 12, 1, 6, 11)
INV_SHIFT_ROWS = (0, 13, 10, 7, 4, 1, 14, 11, 8, 5, 2, 15, 12, 9, 6, 3)


def sub_bytes(state: bytearray) -> None:
    """Apply the S-box to each byte."""
    state[:] = state.translate(SBOX)


def inv_sub_bytes(state: bytearray) -> None:
    """Apply the inverse S-box to each byte."""
    state[:] = state.translate(INV_SBOX)


def shift_rows(state: bytearray) -> None:
    """Rotate row k left by k positions; row 0 is unchanged."""
    state[:] = bytes(state[i] for i in SHIFT_ROWS)


def inv_shift_rows(state: bytearray) -> None:
    """Rotate row k right by k positions; row 0 is unchanged."""
    state[:] = bytes(state[i] for i in INV_SHIFT_ROWS)


def mix_columns(state: bytearray) -> None:
    """Multiply each column by {03}x^3 + {01}x^2 + {01}x + {02}."""
    for c in range(0, BLOCK_SIZE, 4):
        a0, a1, a2, a3 = state[c:c + 4]
        state[c] = GF_MUL2[a0] ^ GF_MUL3[a1] ^ a2 ^ a3
        state[c + 1] = a0 ^ GF_MUL2[a1] ^ GF_MUL3[a2] ^ a3
        state[c + 2] = a0 ^ a1 ^ GF_MUL2[a2] ^ GF_MUL3[a3]
        state[c + 3] = GF_MUL3[a0] ^ a1 ^ a2 ^ GF_MUL2[a3]


def inv_mix_columns(state: bytearray) -> None:
    """Multiply each column by {0b}x^3 + {0d}x^2 + {09}x + {0e}."""
    for c in range(0, BLOCK_SIZE, 4):
        a0, a1, a2, a3 = state[c:c + 4]
        state[c] = GF_MUL14[a0] ^ GF_MUL11[a1] ^ GF_MUL13[a2] ^ GF_MUL9[a3]
        state[c + 1] = GF_MUL9[a0] ^ GF_MUL14[a1] ^ GF_MUL11[a2] ^ GF_MUL13[a3]
        state[c + 2] = GF_MUL13[a0] ^ GF_MUL9[a1] ^ GF_MUL14[a2] ^ GF_MUL11[a3]
        state[c + 3] = GF_MUL11[a0] ^ GF_MUL13[a1] ^ GF_MUL9[a2] ^ GF_MUL14[a3]


def add_round_key(state: bytearray, expanded_key: bytes, round_num: int) -> None:
    """XOR the state with the round key at offset round_num * 16."""
    offset = round_num * BLOCK_SIZE
    assert len(expanded_key) >= offset + BLOCK_SIZE, "round key outside key schedule"
    for i in range(BLOCK_SIZE):
        state[i] ^= expanded_key[offset + i]


def _check_schedule(state: bytearray, expanded_key: bytes, nr: int) -> None:
    assert nr in VALID_ROUNDS, f"invalid round count: {nr}"
    assert len(expanded_key) == (nr + 1) * BLOCK_SIZE, (
        f"expanded key is {len(expanded_key)} bytes, {nr} rounds need "
        f"{(nr + 1) * BLOCK_SIZE}"
    )
    assert len(state) == BLOCK_SIZE, f"state must be {BLOCK_SIZE} bytes"


def encrypt_state(
    state: bytearray,
    expanded_key: bytes,
    nr: int,
    tracer: TraceRecorder | None = None,
) -> None:
    """
    Run the forward cipher on the state in place.

    Args:
        state: 16-byte working block, overwritten with the ciphertext
        expanded_key: (nr + 1) * 16 byte key schedule
        nr: Number of rounds (10, 12 or 14)
        tracer: Optional trace recorder, called after every step
    """
    _check_schedule(state, expanded_key, nr)

    add_round_key(state, expanded_key, 0)
    if tracer:
        tracer.record(round=0, operation="AddRoundKey", state=bytes(state))

    for round_num in range(1, nr + 1):
        steps = [("SubBytes", sub_bytes), ("ShiftRows", shift_rows)]
        # Final round: no MixColumns
        if round_num != nr:
            steps.append(("MixColumns", mix_columns))

        for name, step in steps:
            step(state)
            if tracer:
                tracer.record(round=round_num, operation=name, state=bytes(state))

        add_round_key(state, expanded_key, round_num)
        if tracer:
            tracer.record(round=round_num, operation="AddRoundKey", state=bytes(state))


def decrypt_state(
    state: bytearray,
    expanded_key: bytes,
    nr: int,
    tracer: TraceRecorder | None = None,
) -> None:
    """
    Run the inverse cipher on the state in place.

    Args:
        state: 16-byte working block, overwritten with the plaintext
        expanded_key: (nr + 1) * 16 byte key schedule
        nr: Number of rounds (10, 12 or 14)
        tracer: Optional trace recorder, called after every step
    """
    _check_schedule(state, expanded_key, nr)

    steps = [
        ("AddRoundKey", lambda s: add_round_key(s, expanded_key, nr)),
        ("InvShiftRows", inv_shift_rows),
        ("InvSubBytes", inv_sub_bytes),
    ]
    for name, step in steps:
        step(state)
        if tracer:
            tracer.record(round=0, operation=name, state=bytes(state))

    for round_num in range(1, nr):
        add_round_key(state, expanded_key, nr - round_num)
        if tracer:
            tracer.record(round=round_num, operation="AddRoundKey", state=bytes(state))

        for name, step in (
            ("InvMixColumns", inv_mix_columns),
            ("InvShiftRows", inv_shift_rows),
            ("InvSubBytes", inv_sub_bytes),
        ):
            step(state)
            if tracer:
                tracer.record(round=round_num, operation=name, state=bytes(state))

    add_round_key(state, expanded_key, 0)
    if tracer:
        tracer.record(round=nr, operation="AddRoundKey", state=bytes(state))
