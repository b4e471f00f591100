"""A priority queue stored as a binary search tree keyed on priority.

Entries that share a priority are kept in the same tree node, in the
order they were enqueued, so the queue is stable: among equal
priorities the earliest entry leaves first. Lower priority numbers
leave the queue first.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("priority", "values", "left", "right")

    def __init__(self, priority: int, value: T) -> None:
        self.priority = priority
        self.values: deque[T] = deque([value])
        self.left: _Node[T] | None = None
        self.right: _Node[T] | None = None


class PriorityQueue(Generic[T]):
    """Stable min-priority queue backed by an unbalanced binary search tree."""

    def __init__(self) -> None:
        self._root: _Node[T] | None = None
        self._size = 0

    def enqueue(self, value: T, priority: int) -> None:
        """Insert *value* with the given *priority*."""
        self._size += 1
        if self._root is None:
            self._root = _Node(priority, value)
            return
        node = self._root
        while True:
            if priority < node.priority:
                if node.left is None:
                    node.left = _Node(priority, value)
                    return
                node = node.left
            elif priority > node.priority:
                if node.right is None:
                    node.right = _Node(priority, value)
                    return
                node = node.right
            else:
                node.values.append(value)
                return

    def _leftmost(self) -> tuple[_Node[T] | None, _Node[T]]:
        if self._root is None:
            raise IndexError("priority queue is empty")
        parent = None
        node = self._root
        while node.left is not None:
            parent, node = node, node.left
        return parent, node

    def dequeue(self) -> T:
        """Remove and return the value with the lowest priority number."""
        parent, node = self._leftmost()
        value = node.values.popleft()
        if not node.values:
            if parent is None:
                self._root = node.right
            else:
                parent.left = node.right
        self._size -= 1
        return value

    def peek(self) -> T:
        """Return the value that :meth:`dequeue` would return, leaving it queued."""
        _, node = self._leftmost()
        return node.values[0]

    def clear(self) -> None:
        """Remove every entry."""
        self._root = None
        self._size = 0

    def copy(self) -> PriorityQueue[T]:
        """Return an independent queue with the same entries and tree shape."""
        clone: PriorityQueue[T] = PriorityQueue()
        clone._size = self._size
        if self._root is None:
            return clone

        def duplicate(source: _Node[T]) -> _Node[T]:
            node = _Node(source.priority, source.values[0])
            node.values = deque(source.values)
            return node

        clone._root = duplicate(self._root)
        stack = [(self._root, clone._root)]
        while stack:
            source, target = stack.pop()
            if source.left is not None:
                target.left = duplicate(source.left)
                stack.append((source.left, target.left))
            if source.right is not None:
                target.right = duplicate(source.right)
                stack.append((source.right, target.right))
        return clone

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __iter__(self) -> Iterator[tuple[int, T]]:
        """Yield ``(priority, value)`` pairs in dequeue order."""
        stack: list[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            for value in node.values:
                yield node.priority, value
            node = node.right

    def __str__(self) -> str:
        return "".join(f"{priority} value: {value}\n" for priority, value in self)

    def __repr__(self) -> str:
        return f"PriorityQueue({list(self)!r})"

    def __eq__(self, other: object) -> bool:
        """Equal when both trees hold the same entries in the same shape."""
        if not isinstance(other, PriorityQueue):
            return NotImplemented
        if self._size != other._size:
            return False
        stack = [(self._root, other._root)]
        while stack:
            mine, theirs = stack.pop()
            if mine is None or theirs is None:
                if mine is not theirs:
                    return False
                continue
            if mine.priority != theirs.priority or mine.values != theirs.values:
                return False
            stack.append((mine.left, theirs.left))
            stack.append((mine.right, theirs.right))
        return True

    __hash__ = None  # type: ignore[assignment]