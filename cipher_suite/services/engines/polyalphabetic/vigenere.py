from cipher_suite.core.exceptions import InvalidKeyError
from cipher_suite.models.schemas import CipherFamily, CipherType, Direction, KeyKind
from cipher_suite.services.engines.base import (
    CipherEngine,
    ascii_lower,
    is_ascii_letter,
    shift_letter,
)
from cipher_suite.services.engines.registry import EngineRegistry


@EngineRegistry.register
class VigenereEngine(CipherEngine):
    """
    Vigenère cipher engine.

    A polyalphabetic substitution cipher that uses a keyword to determine
    the shift for each letter. Each letter of the keyword represents a
    different Caesar shift applied in sequence.

    The key stream advances on every input character, not only on letters,
    so "a b" and "ab" line up with different key letters for "b".
    Non-letters themselves are copied through unchanged.
    """

    name = "Vigenere"
    cipher_type = CipherType.VIGENERE
    cipher_family = CipherFamily.POLYALPHABETIC
    key_kind = KeyKind.TEXT
    description = (
        "A polyalphabetic cipher where each letter is shifted by a different amount "
        "based on a repeating keyword. More secure than Caesar but vulnerable to "
        "Kasiski examination and frequency analysis per key position."
    )

    def __init__(self, key: str):
        if not key:
            raise InvalidKeyError("Vigenere key must not be empty", {"key": key})
        self.key = ascii_lower(key)

    def encrypt(self, plaintext: str) -> str:
        """Encrypt by shifting each letter forward by its key letter.

        >>> VigenereEngine("key").encrypt("secret")
        'ciabir'
        """
        return self._transform(plaintext, Direction.ENCRYPT)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt by shifting each letter back by its key letter.

        >>> VigenereEngine("key").decrypt("ciabir")
        'secret'
        """
        return self._transform(ciphertext, Direction.DECRYPT)

    def _transform(self, text: str, direction: Direction) -> str:
        period = len(self.key)

        result = []
        for i, char in enumerate(text):
            if is_ascii_letter(char):
                result.append(shift_char(char, self.key[i % period], direction))
            else:
                result.append(char)

        return "".join(result)


def key_shift(key_char: str) -> int:
    """Shift contributed by one (lower-cased) key character."""
    return (ord(key_char) - ord("a")) % 26


def shift_char(base_char: str, key_char: str, direction: Direction) -> str:
    """
    Shift a single letter by a key character's value.

    Args:
        base_char: Letter to be shifted
        key_char: Key character supplying the shift
        direction: Encrypt adds the shift, decrypt subtracts it

    Returns:
        The shifted letter, in the case of base_char
    """
    shift = key_shift(ascii_lower(key_char))
    if direction == Direction.DECRYPT:
        shift = -shift
    return shift_letter(base_char, shift)
