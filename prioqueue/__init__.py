"""A linked-list priority queue and a benchmark of its operations."""

__version__ = "0.1.0"
__all__ = ["linked_queue", "benchmark"]