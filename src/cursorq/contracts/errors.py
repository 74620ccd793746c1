# src/cursorq/contracts/errors.py
"""Queue error contracts.

A single error kind exists: an index-based read or cursor write that falls
outside the resident window ``[tail, head - 1]``. It signals a caller
programming error and is never retried internally.
"""


class OutOfBoundsError(IndexError):
    """Raised when an index lies outside the queue's resident window.

    Raised by ``IndexedQueue.set_cursor``, ``IndexedQueue.peek_at_position``
    (and transitively ``peek_at_cursor_position``), and by the checked
    cursor moves. An empty queue has no resident window, so every index
    is out of bounds.

    Attributes:
        index: The rejected index
        tail_index: Oldest resident index at the time of the failure
        head_index: Next index to be assigned at the time of the failure
    """

    def __init__(self, index: int, tail_index: int, head_index: int) -> None:
        self.index = index
        self.tail_index = tail_index
        self.head_index = head_index
        if tail_index == head_index:
            message = f"Index {index} is out of bounds: queue is empty"
        else:
            message = f"Index {index} is out of bounds: valid range is [{tail_index}, {head_index - 1}]"
        super().__init__(message)
