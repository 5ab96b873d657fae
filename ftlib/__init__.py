"""Character, memory and string helpers that follow the classic C library routines."""

__version__ = "0.1.0"
__all__ = ["chars", "convert", "memory", "strings"]