"""Character, memory, string, number, linked-list, output, printf and line-reading utilities."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "numbers", "linked_list", "output", "printf", "reader"]