"""Classical substitution ciphers with a command-line and HTTP front end."""

__version__ = "0.1.0"
