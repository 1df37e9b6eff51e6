"""rollkit - dice notation interpreter."""

__version__ = "0.1.0"
