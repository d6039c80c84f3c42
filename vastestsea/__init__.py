"""Storage and JSON request handlers for a register of languages and their words."""

__version__ = "0.1.0"
__all__ = ["__version__"]