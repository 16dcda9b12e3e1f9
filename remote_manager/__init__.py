"""Remote Manager - command-line remote loader."""

__version__ = "1.0.0"
