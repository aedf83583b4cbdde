"""Character, byte-buffer, string, linked-list and formatted-output helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "search", "lists", "text", "output", "printf"]