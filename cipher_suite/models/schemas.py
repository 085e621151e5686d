from enum import Enum

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    MONOALPHABETIC = "monoalphabetic"
    POLYALPHABETIC = "polyalphabetic"
    POLYGRAPHIC = "polygraphic"


class CipherType(str, Enum):
    """
    Specific cipher types.

    Lookup also accepts the one-letter aliases used on the command line,
    so ``CipherType("p")`` is ``CipherType.PLAYFAIR``.
    """

    CAESAR = "caesar"
    VIGENERE = "vigenere"
    PLAYFAIR = "playfair"

    @property
    def aliases(self) -> list[str]:
        return [alias for alias, target in _CIPHER_ALIASES.items() if target == self.value]

    @classmethod
    def _missing_(cls, value: object) -> "CipherType | None":
        if isinstance(value, str):
            target = _CIPHER_ALIASES.get(value.lower(), value.lower())
            for member in cls:
                if member.value == target:
                    return member
        return None


class Direction(str, Enum):
    """Transformation direction, with ``e``/``d`` accepted as aliases."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"

    @classmethod
    def _missing_(cls, value: object) -> "Direction | None":
        if isinstance(value, str):
            target = _DIRECTION_ALIASES.get(value.lower(), value.lower())
            for member in cls:
                if member.value == target:
                    return member
        return None


class KeyKind(str, Enum):
    """The natural form of a cipher's key."""

    INTEGER = "integer"
    TEXT = "text"


_CIPHER_ALIASES: dict[str, str] = {
    "c": "caesar",
    "v": "vigenere",
    "p": "playfair",
}

_DIRECTION_ALIASES: dict[str, str] = {
    "e": "encrypt",
    "d": "decrypt",
}


# ============================================================================
# Request Schemas
# ============================================================================


class CipherRequest(BaseModel):
    """Fields shared by the encrypt and decrypt requests."""

    cipher_type: CipherType
    # Taken without coercion; the registry rejects anything but int or str keys
    key: StrictInt | StrictStr | StrictBool | StrictFloat


class EncryptRequest(CipherRequest):
    """Request schema for /encrypt endpoint."""

    plaintext: str


class DecryptRequest(CipherRequest):
    """Request schema for /decrypt endpoint."""

    ciphertext: str


# ============================================================================
# Response Schemas
# ============================================================================


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    ciphertext: str
    cipher_type: CipherType
    key_used: StrictInt | StrictStr


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    plaintext: str
    cipher_type: CipherType
    key_used: StrictInt | StrictStr


class CipherInfo(BaseModel):
    """Description of one registered cipher."""

    cipher_type: CipherType
    name: str
    cipher_family: CipherFamily
    key_kind: KeyKind
    aliases: list[str] = Field(default_factory=list)
    description: str


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, object] = Field(default_factory=dict)
