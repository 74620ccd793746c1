# src/cursorq/core/queue.py
"""FIFO queue with stable indices and an independently steerable read cursor.

Elements are stored in a sparse map keyed by a monotonically increasing
index that is never reused. ``head`` is the next index to assign and
``tail`` the oldest resident index, so the resident window is
``[tail, head - 1]``. Polled entries are deleted from the map; the index
counter keeps growing, the storage footprint does not.

The cursor is a read position into the resident window. A cursor captured
at index ``k`` always refers to the same element until that element is
polled, after which reads through it fail cleanly with OutOfBoundsError.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Self

from cursorq.contracts.errors import OutOfBoundsError


class IndexedQueue[T]:
    """First-in-first-out queue with a boundable read cursor.

    Modeled after java.util.Deque: ``add`` appends at the head, ``peek`` and
    ``poll`` read and remove at the tail (the oldest element).

    Thread Safety:
        NOT thread-safe. External synchronization required if used from
        multiple threads. Every operation is O(1) and never blocks.

    Cursor bounds:
        ``set_cursor`` and ``peek_at_position`` validate against the
        resident window. ``increment_cursor`` and ``decrement_cursor`` are
        unchecked by default; callers move blindly and then probe with
        ``peek_at_cursor_position``. Pass ``checked=True`` to validate the
        move instead.

    Example:
        queue = IndexedQueue[str]()
        queue.add("foo").add("bar").add("baz")
        queue.set_cursor(queue.head_index - 1)
        queue.peek_at_cursor_position()  # "baz"
        queue.poll()  # "foo"
    """

    def __init__(self) -> None:
        """Initialize empty queue."""
        self._elements: dict[int, T] = {}
        self._head: int = 0
        self._tail: int = 0
        self._cursor: int = 0

    def add(self, element: T) -> Self:
        """Add the element to the head of the queue.

        Growth never moves the cursor.

        Returns:
            This queue, for chaining
        """
        self._elements[self._head] = element
        self._head += 1
        return self

    def is_empty(self) -> bool:
        """Return True if the queue holds no elements."""
        return self._head == self._tail

    def size(self) -> int:
        """Return the number of resident elements."""
        return self._head - self._tail

    def peek(self) -> T | None:
        """Return but do not remove the oldest element.

        Returns:
            The element at the tail of the queue, or None if empty
        """
        if self.is_empty():
            return None
        return self._elements[self._tail]

    def poll(self) -> T | None:
        """Return and remove the oldest element.

        A cursor left behind the new tail is pulled forward to it; a cursor
        at or beyond the new tail is left untouched.

        Returns:
            The element at the tail of the queue, or None if empty
        """
        if self.is_empty():
            return None

        element = self._elements.pop(self._tail)
        self._tail += 1

        # The cursor must never reference a removed index
        if self._cursor < self._tail:
            self._cursor = self._tail

        return element

    @property
    def head_index(self) -> int:
        """Next index to be assigned by ``add`` (exclusive upper bound)."""
        return self._head

    @property
    def tail_index(self) -> int:
        """Index of the oldest resident element (inclusive lower bound)."""
        return self._tail

    @property
    def cursor(self) -> int:
        """Current cursor index. Meaningless while the queue is empty."""
        return self._cursor

    def is_index_out_of_bounds(self, index: int) -> bool:
        """Return True if ``index`` lies outside ``[tail, head - 1]``.

        Every index is out of bounds on an empty queue.
        """
        return self.is_empty() or index < self._tail or index > self._head - 1

    def set_cursor(self, index: int) -> Self:
        """Move the cursor to ``index``.

        Raises:
            OutOfBoundsError: If index is outside the resident window. The
                cursor is left unchanged.
        """
        self._check_bounds(index)
        self._cursor = index
        return self

    def increment_cursor(self, *, checked: bool = False) -> int:
        """Move the cursor one step toward the head.

        Args:
            checked: If True, refuse to move outside the resident window

        Returns:
            The new cursor value

        Raises:
            OutOfBoundsError: Only when checked is True and the move would
                leave the resident window
        """
        return self._move_cursor(1, checked=checked)

    def decrement_cursor(self, *, checked: bool = False) -> int:
        """Move the cursor one step toward the tail.

        Args:
            checked: If True, refuse to move outside the resident window

        Returns:
            The new cursor value

        Raises:
            OutOfBoundsError: Only when checked is True and the move would
                leave the resident window
        """
        return self._move_cursor(-1, checked=checked)

    def peek_at_position(self, index: int) -> T:
        """Return the element at ``index`` without removing it.

        Raises:
            OutOfBoundsError: If the queue is empty or index is outside the
                resident window
        """
        self._check_bounds(index)
        return self._elements[index]

    def peek_at_cursor_position(self) -> T:
        """Return the element under the cursor without removing it.

        Raises:
            OutOfBoundsError: If the queue is empty or the cursor has been
                moved outside the resident window
        """
        return self.peek_at_position(self._cursor)

    def _move_cursor(self, step: int, *, checked: bool) -> int:
        target = self._cursor + step
        if checked:
            self._check_bounds(target)
        self._cursor = target
        return self._cursor

    def _check_bounds(self, index: int) -> None:
        if self.is_index_out_of_bounds(index):
            raise OutOfBoundsError(index, self._tail, self._head)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[T]:
        """Iterate resident elements from oldest to newest."""
        for index in range(self._tail, self._head):
            yield self._elements[index]

    def __repr__(self) -> str:
        return f"IndexedQueue(tail={self._tail}, head={self._head}, cursor={self._cursor}, size={self.size()})"
