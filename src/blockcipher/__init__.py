"""Single-block AES (FIPS-197) and RC2 (RFC 2268) ciphers."""

__version__ = "0.1.0"

from .cipher import BlockCipher, Aes, Aes128, Aes192, Aes256
from .exceptions import BlockCipherError, InvalidKeyLength, InvalidBlockLength
from .key_schedule import expand_key
from .rc2 import Rc2, Rc2K128B128
from .registry import CIPHERS, get_cipher, list_ciphers
from .trace import TraceRecorder
from .variants import AesVariant, AES128, AES192, AES256

__all__ = [
    "BlockCipher",
    "Aes",
    "Aes128",
    "Aes192",
    "Aes256",
    "BlockCipherError",
    "InvalidKeyLength",
    "InvalidBlockLength",
    "expand_key",
    "Rc2",
    "Rc2K128B128",
    "CIPHERS",
    "get_cipher",
    "list_ciphers",
    "TraceRecorder",
    "AesVariant",
    "AES128",
    "AES192",
    "AES256",
]
