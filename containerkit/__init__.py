"""Growable arrays, linked lists, a binary search tree and bit-flag helpers."""

__version__ = "0.1.0"
__all__ = ["arrays", "basics", "bst", "linked_list"]