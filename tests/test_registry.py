"""Tests for cipher lookup and the shared block cipher contract."""

import pytest

from blockcipher import Aes, Aes128, Aes256, BlockCipher, Rc2K128B128
from blockcipher.registry import CIPHERS, get_cipher, list_ciphers


class TestRegistry:
    """Tests for cipher lookup."""

    def test_all_ciphers_registered(self):
        assert set(CIPHERS) == {"aes", "aes-128", "aes-192", "aes-256", "rc2", "rc2-128"}

    def test_get_cipher(self):
        assert get_cipher("aes") is Aes
        assert get_cipher("aes-128") is Aes128
        assert get_cipher("rc2-128") is Rc2K128B128

    def test_unknown_cipher(self):
        with pytest.raises(KeyError, match="Unknown cipher 'des'"):
            get_cipher("des")

    def test_list_ciphers(self):
        listed = list_ciphers()

        assert [c["name"] for c in listed] == list(CIPHERS)
        assert all(c["description"] for c in listed)

    def test_registered_classes_are_block_ciphers(self):
        for cls in CIPHERS.values():
            assert issubclass(cls, BlockCipher)

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            BlockCipher()


class TestUniformContract:
    """16-byte ciphers can be used interchangeably."""

    @pytest.mark.parametrize("name,key_len", [
        ("aes-128", 16),
        ("aes-192", 24),
        ("aes-256", 32),
        ("rc2-128", 16),
    ])
    def test_round_trip_by_name(self, name, key_len):
        cipher = get_cipher(name)(bytes(range(key_len)))
        block = bytes(range(100, 116))

        assert cipher.block_size == 16
        ct = cipher.encrypt(block)
        assert len(ct) == 16
        assert ct != block
        assert cipher.decrypt(ct) == block

    def test_different_ciphers_differ(self):
        key = bytes(16)
        block = bytes(16)

        assert Aes128(key).encrypt(block) != Rc2K128B128(key).encrypt(block)

    def test_repr(self):
        assert repr(Aes256(bytes(32))) == "Aes256(variant='AES-256', rounds=14)"
        assert repr(Rc2K128B128(bytes(16))) == "Rc2K128B128(name='rc2-128')"
