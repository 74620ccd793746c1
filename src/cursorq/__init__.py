"""
cursorq: FIFO queues with stable indices and a steerable read cursor.

Elements keep the index they were added at for as long as they are
resident, so a cursor can browse history while new items keep arriving.
"""

from cursorq.contracts.errors import OutOfBoundsError
from cursorq.core.queue import IndexedQueue
from cursorq.history import InputHistory

__version__ = "0.1.0"

__all__ = [
    "IndexedQueue",
    "InputHistory",
    "OutOfBoundsError",
    "__version__",
]
