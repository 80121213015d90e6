"""Character, conversion, memory and string routines, and a doubly linked list."""

__version__ = "0.1.0"
__all__ = ["chars", "convert", "memory", "search", "transform", "output", "linked_list"]