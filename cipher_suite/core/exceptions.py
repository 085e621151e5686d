from typing import Any


class CipherSuiteError(Exception):
    """Base exception for all cipher suite errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CipherSuiteError):
    """Raised when user input validation fails."""

    pass


class KeyTypeError(ValidationError):
    """Raised when the key's kind does not match the selected cipher."""

    def __init__(self, cipher_name: str, expected: str, received: Any):
        super().__init__(
            f"{cipher_name} key must be {expected}, got {type(received).__name__} {received!r}",
            {"cipher": cipher_name, "expected": expected, "received": received},
        )


class InvalidKeyError(ValidationError):
    """Raised when a key has the right kind but an unusable value."""

    pass


class UnsupportedCharacterError(ValidationError):
    """Raised when a cipher cannot represent a character of the input."""

    def __init__(self, cipher_name: str, character: str, position: int):
        super().__init__(
            f"{cipher_name} cannot process character {character!r} at position {position}",
            {"cipher": cipher_name, "character": character, "position": position},
        )


class TextTooLongError(ValidationError):
    """Raised when input text exceeds the configured maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Text length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class EngineError(CipherSuiteError):
    """Base exception for cipher engine errors."""

    pass


class EngineNotFoundError(EngineError):
    """Raised when requested cipher engine is not found."""

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher engine '{engine_name}' not found",
            {"engine_name": engine_name},
        )


class KeySquareError(EngineError):
    """Raised when a letter is missing from a Playfair key square.

    The square always holds all 25 letters, so this signals a defect
    rather than bad input.
    """

    def __init__(self, character: str):
        super().__init__(
            f"Character '{character}' not found in key square",
            {"character": character},
        )
