"""Tests for the engine registry and cipher selection."""

import pytest

from cipher_suite.core.exceptions import InvalidKeyError, KeyTypeError, TextTooLongError
from cipher_suite.models.schemas import CipherFamily, CipherType, Direction, KeyKind
from cipher_suite.services.engines.monoalphabetic import CaesarEngine
from cipher_suite.services.engines.polyalphabetic import VigenereEngine
from cipher_suite.services.engines.polygraphic import PlayfairEngine
from cipher_suite.services.engines.registry import EngineRegistry
from cipher_suite.services.transform import transform


class TestCipherRegistry:
    """Test the cipher registry."""

    def test_all_ciphers_registered(self):
        registered = EngineRegistry.list_registered()

        for cipher_type in [CipherType.CAESAR, CipherType.VIGENERE, CipherType.PLAYFAIR]:
            assert cipher_type in registered, f"{cipher_type} not registered"

    def test_get_engines_by_family(self):
        assert EngineRegistry.get_engines_by_family(CipherFamily.MONOALPHABETIC) == [CaesarEngine]
        assert EngineRegistry.get_engines_by_family(CipherFamily.POLYALPHABETIC) == [VigenereEngine]
        assert EngineRegistry.get_engines_by_family(CipherFamily.POLYGRAPHIC) == [PlayfairEngine]

    @pytest.mark.parametrize(
        "cipher_type, key, engine_class",
        [
            (CipherType.CAESAR, 3, CaesarEngine),
            (CipherType.VIGENERE, "key", VigenereEngine),
            (CipherType.PLAYFAIR, "keyword", PlayfairEngine),
        ],
    )
    def test_create(self, cipher_type, key, engine_class):
        engine = EngineRegistry.create(cipher_type, key)
        assert isinstance(engine, engine_class)

    def test_create_builds_independent_instances(self):
        first = EngineRegistry.create(CipherType.CAESAR, 1)
        second = EngineRegistry.create(CipherType.CAESAR, 2)

        assert first is not second
        assert first.encrypt("a") == "b"
        assert second.encrypt("a") == "c"

    @pytest.mark.parametrize(
        "cipher_type, key",
        [
            (CipherType.CAESAR, "3"),
            (CipherType.CAESAR, "abc"),
            (CipherType.CAESAR, True),
            (CipherType.VIGENERE, 3),
            (CipherType.PLAYFAIR, 7),
        ],
    )
    def test_key_kind_mismatch(self, cipher_type, key):
        with pytest.raises(KeyTypeError) as exc_info:
            EngineRegistry.create(cipher_type, key)

        assert exc_info.value.details["received"] == key

    def test_key_kinds(self):
        assert CaesarEngine.key_kind == KeyKind.INTEGER
        assert VigenereEngine.key_kind == KeyKind.TEXT
        assert PlayfairEngine.key_kind == KeyKind.TEXT


class TestAliases:
    """Test algorithm and direction identifiers."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("caesar", CipherType.CAESAR),
            ("c", CipherType.CAESAR),
            ("vigenere", CipherType.VIGENERE),
            ("v", CipherType.VIGENERE),
            ("playfair", CipherType.PLAYFAIR),
            ("P", CipherType.PLAYFAIR),
        ],
    )
    def test_cipher_type_aliases(self, value, expected):
        assert CipherType(value) is expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("encrypt", Direction.ENCRYPT),
            ("e", Direction.ENCRYPT),
            ("decrypt", Direction.DECRYPT),
            ("d", Direction.DECRYPT),
        ],
    )
    def test_direction_aliases(self, value, expected):
        assert Direction(value) is expected

    def test_unknown_cipher_type(self):
        with pytest.raises(ValueError):
            CipherType("rot13")

    def test_aliases_property(self):
        assert CipherType.CAESAR.aliases == ["c"]


class TestTransform:
    """Test the shared encrypt/decrypt entry point."""

    def test_encrypt(self):
        assert transform(CipherType.CAESAR, Direction.ENCRYPT, 13, "test") == "grfg"

    def test_decrypt(self):
        assert transform(CipherType.PLAYFAIR, Direction.DECRYPT, "keyword", "NORDKU") == "SECRET"

    def test_max_length(self):
        with pytest.raises(TextTooLongError):
            transform(CipherType.VIGENERE, Direction.ENCRYPT, "key", "secret", max_length=5)

    def test_invalid_key_value(self):
        with pytest.raises(InvalidKeyError):
            transform(CipherType.VIGENERE, Direction.ENCRYPT, "", "secret")
