"""Classic data structures and algorithms: arrays, searching, sorting,
recursion, text patterns, linked lists, a stack, a max-heap and binary trees."""

__version__ = "0.1.0"