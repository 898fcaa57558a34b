"""ASCII character, string, number conversion, arena, linked list, output and line-reading helpers."""

__version__ = "0.1.0"

__all__ = [
    "arena",
    "chars",
    "conversions",
    "linereader",
    "linkedlist",
    "output",
    "strings",
]