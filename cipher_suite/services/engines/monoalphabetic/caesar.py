from cipher_suite.models.schemas import CipherFamily, CipherType, KeyKind
from cipher_suite.services.engines.base import CipherEngine, is_ascii_letter, shift_letter
from cipher_suite.services.engines.registry import EngineRegistry


@EngineRegistry.register
class CaesarEngine(CipherEngine):
    """
    Caesar cipher engine.

    The Caesar cipher is a simple substitution cipher that shifts each letter
    by a fixed amount. Letters keep their case; every other character is
    copied through unchanged.
    """

    name = "Caesar"
    cipher_type = CipherType.CAESAR
    cipher_family = CipherFamily.MONOALPHABETIC
    key_kind = KeyKind.INTEGER
    description = (
        "A substitution cipher where each letter is shifted by a fixed amount. "
        "Named after Julius Caesar who used it for military communications."
    )

    def __init__(self, key: int):
        self.key = key
        # Python's % is never negative for a positive modulus
        self.shift = key % 26

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext with the shift.

        >>> CaesarEngine(3).encrypt("abc")
        'def'
        """
        return "".join(
            shift_letter(char, self.shift) if is_ascii_letter(char) else char
            for char in plaintext
        )

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt by encrypting with the negated key.

        >>> CaesarEngine(3).decrypt("def")
        'abc'
        """
        return CaesarEngine(-self.key).encrypt(ciphertext)
