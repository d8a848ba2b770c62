"""A terminal Monopoly game for two to six players."""

__version__ = "0.1.0"
__all__ = ["__version__"]