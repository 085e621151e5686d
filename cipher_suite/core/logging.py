import logging
import sys

from cipher_suite.core.config import LogLevel

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: LogLevel | int) -> None:
    """Send log records at or above level to stderr."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
