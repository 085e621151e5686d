from typing import ClassVar

from cipher_suite.core.exceptions import KeySquareError, UnsupportedCharacterError
from cipher_suite.models.schemas import CipherFamily, CipherType, Direction, KeyKind
from cipher_suite.services.engines.base import CipherEngine, ascii_upper, is_ascii_letter
from cipher_suite.services.engines.registry import EngineRegistry

KeySquare = tuple[tuple[str, ...], ...]


@EngineRegistry.register
class PlayfairEngine(CipherEngine):
    """
    Playfair cipher engine.

    The Playfair cipher encrypts digraphs (pairs of letters) using a 5x5 key square.
    The alphabet is reduced to 25 letters (I and J are combined).

    Rules for encryption:
    1. Same row: replace each letter with the one to its right
    2. Same column: replace each letter with the one below
    3. Rectangle: swap corners horizontally

    A digraph of two identical letters has its second letter replaced by 'X'
    (e.g., "LL" is looked up as "LX"). Odd-length input is padded with a
    trailing 'x' that stays in the output.

    Encryption gives each output letter the case of the input letter at the
    same position. Decryption always returns upper-case letters.
    """

    name = "Playfair"
    cipher_type = CipherType.PLAYFAIR
    cipher_family = CipherFamily.POLYGRAPHIC
    key_kind = KeyKind.TEXT
    description = (
        "A digraph substitution cipher using a 5x5 key square. "
        "Pairs of letters are encrypted together based on their positions "
        "in the square. I and J are treated as the same letter."
    )

    ALPHABET: ClassVar[str] = "ABCDEFGHIKLMNOPQRSTUVWXYZ"  # 25 letters, I=J
    SIZE: ClassVar[int] = 5
    FILLER: ClassVar[str] = "X"
    PADDING: ClassVar[str] = "x"

    def __init__(self, key: str):
        self.key = key
        self.matrix: KeySquare = self._build_key_square(key)

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext, mirroring the case of each input letter.

        >>> PlayfairEngine("keyword").encrypt("secret")
        'nordku'
        """
        text = self._pad(plaintext)

        result = []
        for i in range(0, len(text), 2):
            a, b = text[i], text[i + 1]
            enc_a, enc_b = self.swap_chars(a.upper(), b.upper(), Direction.ENCRYPT)
            result.append(enc_a if a.isupper() else enc_a.lower())
            result.append(enc_b if b.isupper() else enc_b.lower())

        return "".join(result)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt ciphertext into upper-case letters.

        >>> PlayfairEngine("keyword").decrypt("NORDKU")
        'SECRET'
        """
        text = ascii_upper(self._pad(ciphertext))

        result = []
        for i in range(0, len(text), 2):
            result.extend(self.swap_chars(text[i], text[i + 1], Direction.DECRYPT))

        return "".join(result)

    def swap_chars(self, first: str, second: str, direction: Direction) -> tuple[str, str]:
        """
        Substitute one upper-case digraph.

        Args:
            first: First letter of the pair
            second: Second letter of the pair
            direction: Encrypt moves right/down, decrypt moves left/up

        Returns:
            The substituted pair
        """
        if first == second:
            second = self.FILLER

        translation = 1 if direction == Direction.ENCRYPT else -1
        row_a, col_a = self.find_position(first)
        row_b, col_b = self.find_position(second)
        square = self.matrix

        if row_a == row_b:
            return (
                square[row_a][(col_a + translation) % self.SIZE],
                square[row_b][(col_b + translation) % self.SIZE],
            )
        if col_a == col_b:
            return (
                square[(row_a + translation) % self.SIZE][col_a],
                square[(row_b + translation) % self.SIZE][col_b],
            )
        # Rectangle: its own inverse, so direction does not matter
        return square[row_a][col_b], square[row_b][col_a]

    def find_position(self, char: str) -> tuple[int, int]:
        """Find the row and column of a letter in the square, J counting as I."""
        if char == "J":
            char = "I"
        for row in range(self.SIZE):
            for col in range(self.SIZE):
                if self.matrix[row][col] == char:
                    return (row, col)
        raise KeySquareError(char)

    def _pad(self, text: str) -> str:
        """Append the padding letter to odd-length text and check every character."""
        if len(text) % 2 != 0:
            text += self.PADDING

        for position, char in enumerate(text):
            if not is_ascii_letter(char):
                raise UnsupportedCharacterError(self.name, char, position)

        return text

    @classmethod
    def _build_key_square(cls, keyword: str) -> KeySquare:
        """Build the 5x5 key square from a keyword."""
        # Remove duplicates while preserving order
        seen = set()
        key_letters = []
        for char in ascii_upper(keyword):
            if char in cls.ALPHABET and char not in seen:
                seen.add(char)
                key_letters.append(char)

        # Add remaining alphabet letters
        for char in cls.ALPHABET:
            if char not in seen:
                key_letters.append(char)

        return tuple(
            tuple(key_letters[row * cls.SIZE:(row + 1) * cls.SIZE])
            for row in range(cls.SIZE)
        )
