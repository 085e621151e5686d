"""Allows running the command-line tool via: python -m cipher_suite"""

import sys

from cipher_suite.cli import main

if __name__ == "__main__":
    sys.exit(main())
