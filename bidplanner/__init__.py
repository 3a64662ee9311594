"""Console tools for bids and courses: CSV reading, sorting, a linked list, a hash table and a binary search tree."""

__version__ = "1.0.0"

__all__ = ["bid", "courses", "csvparser", "hashtable", "linkedlist", "sorting"]