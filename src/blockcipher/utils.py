"""
Utility functions for byte/state conversions and hex formatting.

AES state is 4x4 bytes in column-major order:
  state[row][col] where row, col in [0..3]

Column-major mapping from 16-byte array:
  byte[0]  -> state[0][0]
  byte[1]  -> state[1][0]
  byte[2]  -> state[2][0]
  byte[3]  -> state[3][0]
  byte[4]  -> state[0][1]
  ...
  byte[15] -> state[3][3]
"""


def bytes_to_state(data: bytes) -> list[list[int]]:
    """
    Convert 16 bytes to a 4x4 AES state matrix (column-major).

    Args:
        data: 16 bytes of input

    Returns:
        4x4 list of integers (0-255), indexed [row][col]
    """
    if len(data) != 16:
        raise ValueError(f"Expected 16 bytes, got {len(data)}")

    return [[data[col * 4 + row] for col in range(4)] for row in range(4)]


def state_to_bytes(state: list[list[int]]) -> bytes:
    """
    Convert a 4x4 AES state matrix back to 16 bytes (column-major).
    """
    return bytes(state[row][col] for col in range(4) for row in range(4))


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Convert a hex string to bytes, ignoring embedded whitespace.
    """
    return bytes.fromhex("".join(hex_str.split()))


def bytes_to_hex(data: bytes) -> str:
    """
    Convert bytes to a lowercase hex string.
    """
    return bytes(data).hex()


def format_state_grid(data: bytes) -> str:
    """
    Format a 16-byte block as a readable 4x4 grid (rows of the state).

    Returns multi-line string like:
      32 88 31 e0
      43 5a 31 37
      f6 30 98 07
      a8 8d a2 34
    """
    state = bytes_to_state(data)
    lines = []
    for row in range(4):
        row_hex = [f"{state[row][col]:02x}" for col in range(4)]
        lines.append("  " + " ".join(row_hex))
    return "\n".join(lines)


def format_state_words(data: bytes) -> str:
    """Format a 16-byte block as 4 space-separated 32-bit words (columns)."""
    return " ".join(bytes(data[i:i + 4]).hex() for i in range(0, 16, 4))


def xor_bytes(a: bytes, b: bytes) -> bytes:
    """
    XOR two byte sequences of equal length.
    """
    if len(a) != len(b):
        raise ValueError(f"Length mismatch: {len(a)} vs {len(b)}")
    return bytes(x ^ y for x, y in zip(a, b))
