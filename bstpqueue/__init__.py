"""A stable priority queue kept in a binary search tree keyed on priority, with a small demo."""

__version__ = "0.1.0"
__all__ = ["priorityqueue", "demo"]