"""Classic algorithms on linked lists, strings, arrays, matrices and integers."""

__version__ = "0.1.0"

__all__ = ["arrays", "grid", "linked_list", "numbers", "search", "strings"]