"""Command-line front end: ``cipher-suite -a caesar -d encrypt -k 3 "text"``."""

import argparse
import logging
import sys

from cipher_suite import __version__
from cipher_suite.core.config import get_settings
from cipher_suite.core.exceptions import ValidationError
from cipher_suite.core.logging import configure_logging
from cipher_suite.models.schemas import CipherType, Direction
from cipher_suite.services.engines.registry import EngineRegistry
from cipher_suite.services.transform import transform

logger = logging.getLogger(__name__)


def parse_algorithm(value: str) -> CipherType:
    try:
        return CipherType(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid algorithm '{value}' (choose from caesar/c, vigenere/v, playfair/p)"
        ) from None


def parse_direction(value: str) -> Direction:
    try:
        return Direction(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid direction '{value}' (choose from encrypt/e, decrypt/d)"
        ) from None


def parse_key(value: str) -> int | str:
    """Read the key as an integer when it looks like one, otherwise as text."""
    try:
        return int(value)
    except ValueError:
        return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cipher-suite",
        description="Encrypt or decrypt text with a classical cipher.",
    )
    parser.add_argument(
        "-a", "--algorithm",
        type=parse_algorithm,
        required=True,
        metavar="{caesar,c,vigenere,v,playfair,p}",
        help="encryption algorithm to use",
    )
    parser.add_argument(
        "-d", "--direction",
        type=parse_direction,
        required=True,
        metavar="{encrypt,e,decrypt,d}",
        help="encrypt or decrypt",
    )
    parser.add_argument(
        "-k", "--key",
        type=parse_key,
        required=True,
        help="integer shift for caesar, keyword for vigenere and playfair",
    )
    parser.add_argument(
        "-b", "--brute-force",
        action="store_true",
        help="search for the key (decrypt only; not implemented, the given key is used)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="log debug output to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("input_text", help="text to encrypt or decrypt")
    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Reject argument combinations the ciphers cannot run with."""
    if args.brute_force and args.direction == Direction.ENCRYPT:
        raise ValidationError("Brute force mode cannot be used with encryption.")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else get_settings().log_level)

    try:
        validate_args(args)
        if args.brute_force:
            logger.warning("Brute force key search is not implemented; using the supplied key")

        output_text = transform(
            args.algorithm,
            args.direction,
            args.key,
            args.input_text,
            max_length=get_settings().max_text_length,
        )
    except ValidationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print(f"Algorithm: {EngineRegistry.get_engine_class(args.algorithm).name}")
    print(f"Direction: {args.direction.name.capitalize()}")
    print(f"Output: {output_text}")
    return 0
