"""Array, hashing, linked-list and tree exercises with nodes, a linked list and an LRU cache."""

__version__ = "0.1.0"

__all__ = ["arrays", "cli", "hashing", "linked", "lru", "mylinkedlist", "nodes"]