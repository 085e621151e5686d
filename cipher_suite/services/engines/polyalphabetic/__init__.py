"""Polyalphabetic cipher engines."""

from cipher_suite.services.engines.polyalphabetic.vigenere import VigenereEngine

__all__ = [
    "VigenereEngine",
]
