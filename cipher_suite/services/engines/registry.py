import logging
from typing import Type

from cipher_suite.core.exceptions import EngineNotFoundError, KeyTypeError
from cipher_suite.models.schemas import CipherFamily, CipherType, KeyKind
from cipher_suite.services.engines.base import CipherEngine

logger = logging.getLogger(__name__)


class EngineRegistry:
    """
    Registry for cipher engines.

    Manages the available engine classes and builds keyed engine instances
    after checking that the key has the kind the cipher expects.
    """

    _engines: dict[CipherType, Type[CipherEngine]] = {}

    @classmethod
    def register(cls, engine_class: Type[CipherEngine]) -> Type[CipherEngine]:
        """
        Register a cipher engine class.

        Can be used as a decorator:
            @EngineRegistry.register
            class CaesarEngine(CipherEngine):
                ...

        Args:
            engine_class: The engine class to register

        Returns:
            The engine class (for decorator usage)
        """
        cls._engines[engine_class.cipher_type] = engine_class
        return engine_class

    @classmethod
    def get_engine_class(cls, cipher_type: CipherType) -> Type[CipherEngine]:
        """
        Get the engine class for the specified cipher type.

        Raises:
            EngineNotFoundError: If no engine is registered for the type
        """
        try:
            return cls._engines[cipher_type]
        except KeyError:
            raise EngineNotFoundError(getattr(cipher_type, "value", str(cipher_type))) from None

    @classmethod
    def create(cls, cipher_type: CipherType, key: int | str) -> CipherEngine:
        """
        Build an engine for the given cipher type and key.

        Args:
            cipher_type: The type of cipher
            key: An int for integer-keyed ciphers, a str for text-keyed ones

        Returns:
            A new engine instance owning the key

        Raises:
            EngineNotFoundError: If no engine is registered for the type
            KeyTypeError: If the key's kind does not match the cipher
        """
        engine_class = cls.get_engine_class(cipher_type)
        check_key_kind(engine_class, key)
        logger.debug("Creating %s engine", engine_class.name)
        return engine_class(key)

    @classmethod
    def get_engines_by_family(cls, family: CipherFamily) -> list[Type[CipherEngine]]:
        """
        Get all engine classes belonging to a cipher family.

        Args:
            family: The cipher family

        Returns:
            List of engine classes
        """
        return [
            engine_class
            for engine_class in cls._engines.values()
            if engine_class.cipher_family == family
        ]

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """
        List all registered cipher types.

        Returns:
            List of registered cipher types
        """
        return list(cls._engines.keys())

    @classmethod
    def is_registered(cls, cipher_type: CipherType) -> bool:
        """
        Check if a cipher type is registered.

        Args:
            cipher_type: The cipher type to check

        Returns:
            True if registered
        """
        return cipher_type in cls._engines


def check_key_kind(engine_class: Type[CipherEngine], key: object) -> None:
    """Raise KeyTypeError unless key matches the engine's key kind."""
    # bool is an int subclass but never a meaningful shift
    if engine_class.key_kind == KeyKind.INTEGER:
        valid = isinstance(key, int) and not isinstance(key, bool)
    else:
        valid = isinstance(key, str)

    if not valid:
        raise KeyTypeError(engine_class.name, engine_class.key_kind.value, key)


# Import engines to trigger registration
def _load_engines() -> None:
    """Load all engine modules to trigger registration."""
    from cipher_suite.services.engines.monoalphabetic import caesar  # noqa: F401
    from cipher_suite.services.engines.polyalphabetic import vigenere  # noqa: F401
    from cipher_suite.services.engines.polygraphic import playfair  # noqa: F401


# Load engines when module is imported
_load_engines()
