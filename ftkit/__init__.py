"""Memory, character, string, conversion, output, linked-list and stack helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "conversions",
    "demo",
    "dlist",
    "linkedlist",
    "memory",
    "output",
    "search",
    "stack",
    "text",
]