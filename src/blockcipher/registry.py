"""Lookup of block ciphers by name."""

from .cipher import Aes, Aes128, Aes192, Aes256, BlockCipher
from .rc2 import Rc2, Rc2K128B128

# Registry of available ciphers
CIPHERS: dict[str, type[BlockCipher]] = {
    cls.name: cls for cls in (Aes, Aes128, Aes192, Aes256, Rc2, Rc2K128B128)
}


def get_cipher(name: str) -> type[BlockCipher]:
    """Get cipher class by name.

    Args:
        name: Cipher name, e.g. "aes-256" or "rc2-128"

    Returns:
        Cipher class; instantiate it with a key

    Raises:
        KeyError: If cipher not found
    """
    if name not in CIPHERS:
        available = ", ".join(CIPHERS.keys())
        raise KeyError(f"Unknown cipher '{name}'. Available: {available}")
    return CIPHERS[name]


def list_ciphers() -> list[dict[str, str]]:
    """List all available ciphers with descriptions.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    result = []
    for name, cls in CIPHERS.items():
        result.append({
            "name": name,
            "description": getattr(cls, "description", "No description"),
        })
    return result
