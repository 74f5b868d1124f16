"""A singly linked list with positional insertion and removal, and a demonstration command."""

__version__ = "0.1.0"
__all__ = ["__version__"]