import logging

from cipher_suite.core.exceptions import TextTooLongError
from cipher_suite.models.schemas import CipherType, Direction
from cipher_suite.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)


def transform(
    cipher_type: CipherType,
    direction: Direction,
    key: int | str,
    text: str,
    max_length: int | None = None,
) -> str:
    """
    Run one encrypt or decrypt call.

    Args:
        cipher_type: The cipher to use
        direction: Encrypt or decrypt
        key: Key in the cipher's natural form
        text: Input text
        max_length: Optional upper bound on len(text)

    Returns:
        The transformed text

    Raises:
        TextTooLongError: If text is longer than max_length
        KeyTypeError: If the key kind does not match the cipher
    """
    if max_length is not None and len(text) > max_length:
        raise TextTooLongError(len(text), max_length)

    engine = EngineRegistry.create(cipher_type, key)
    logger.debug("%s %d characters with %r", direction.value, len(text), engine)

    if direction == Direction.ENCRYPT:
        return engine.encrypt(text)
    return engine.decrypt(text)
