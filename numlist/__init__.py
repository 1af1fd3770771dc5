"""Base conversion, digit sums, counting and factorials, and a singly linked list."""

__version__ = "0.1.0"