"""Fixed-capacity queue and stack."""

from collections import deque


class BoundedQueue:
    """A FIFO queue that holds at most ``capacity`` values."""

    def __init__(self, capacity):
        if capacity < 0:
            raise ValueError("capacity cannot be negative")
        self.capacity = capacity
        self._items = deque()

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def append(self, value):
        """Add ``value`` at the tail; raise OverflowError when full."""
        if len(self._items) >= self.capacity:
            raise OverflowError("queue is full")
        self._items.append(value)

    def dequeue(self):
        """Remove and return the head; raise IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def is_empty(self):
        return not self._items


class BoundedStack:
    """A LIFO stack that holds at most ``capacity`` values."""

    def __init__(self, capacity):
        if capacity < 0:
            raise ValueError("capacity cannot be negative")
        self.capacity = capacity
        self._items = []

    def __len__(self):
        return len(self._items)

    def append(self, value):
        """Push ``value``; raise OverflowError when full."""
        if len(self._items) >= self.capacity:
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self):
        """Remove and return the top value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def is_empty(self):
        return not self._items

    def values(self):
        """Return the stored values from bottom to top."""
        return tuple(self._items)