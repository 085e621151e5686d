import string
from abc import ABC, abstractmethod

from cipher_suite.models.schemas import CipherFamily, CipherType, KeyKind


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    An engine is constructed around a single key and keeps any state derived
    from it for its whole lifetime. Each implementation must provide:
    - encrypt(): Transform plaintext into ciphertext
    - decrypt(): Invert encrypt()

    Both operations are pure: they never mutate the engine, so one instance
    can be shared freely.
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    key_kind: KeyKind
    description: str

    key: int | str

    @abstractmethod
    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt plaintext with this engine's key.

        Args:
            plaintext: The plaintext to encrypt

        Returns:
            Ciphertext
        """
        pass

    @abstractmethod
    def decrypt(self, ciphertext: str) -> str:
        """
        Decrypt ciphertext with this engine's key.

        Args:
            ciphertext: The ciphertext to decrypt

        Returns:
            Plaintext
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r})"


def is_ascii_letter(char: str) -> bool:
    """True for A-Z and a-z only; str.isalpha() also accepts non-ASCII letters."""
    return char in string.ascii_letters


def shift_letter(char: str, shift: int) -> str:
    """Shift an ASCII letter around the alphabet, keeping its case."""
    base = ord("a") if char.islower() else ord("A")
    return chr((ord(char) - base + shift) % 26 + base)


_ASCII_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_ASCII_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def ascii_lower(text: str) -> str:
    """Lower-case A-Z only; other characters are left as they are."""
    return text.translate(_ASCII_TO_LOWER)


def ascii_upper(text: str) -> str:
    """Upper-case a-z only; other characters are left as they are."""
    return text.translate(_ASCII_TO_UPPER)
