"""printf-style formatting with flags, width, precision and length modifiers."""

__version__ = "0.1.0"
__all__ = ["integers", "numbers", "printf", "spec", "sprintf"]