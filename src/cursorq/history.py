# src/cursorq/history.py
"""Bounded input history with shell-style navigation.

Entries are recorded into an IndexedQueue. Navigation walks the queue's
cursor from the newest entry toward the oldest and back, the way an input
line recalls earlier commands with the up and down keys.

Cursor moves are blind: the cursor is stepped unchecked and the new
position is then probed with ``peek_at_cursor_position``. An
OutOfBoundsError from the probe means the walk ran off either end of
the history.

Key design decisions:
- Eviction polls the oldest entry, so indices of surviving entries stay stable
- Recording ends any navigation in progress
- Aggregate logging: evictions are logged every _LOG_INTERVAL, not per entry
"""

from __future__ import annotations

import structlog

from cursorq.contracts.errors import OutOfBoundsError
from cursorq.core.config import HistorySettings
from cursorq.core.queue import IndexedQueue

logger = structlog.get_logger(__name__)


class InputHistory:
    """Bounded history of input lines with previous/next navigation.

    Thread Safety:
        NOT thread-safe. Intended for a single UI thread.

    Example:
        history = InputHistory(max_entries=100)
        history.record("ls")
        history.record("cd src")
        history.previous()  # "cd src"
        history.previous()  # "ls"
        history.next()  # "cd src"
        history.next()  # None (back to the blank input line)
    """

    # Log aggregate eviction counts every N evictions
    _LOG_INTERVAL = 100

    def __init__(self, max_entries: int = 500, *, ignore_consecutive_duplicates: bool = True) -> None:
        """Initialize an empty history.

        Args:
            max_entries: Maximum number of resident entries. Recording beyond
                this evicts the oldest entry. Defaults to 500.
            ignore_consecutive_duplicates: Skip recording an entry equal to
                the newest resident entry.

        Raises:
            ValueError: If max_entries < 1.
        """
        if max_entries < 1:
            raise ValueError(f"max_entries must be >= 1, got {max_entries}")
        self._queue: IndexedQueue[str] = IndexedQueue()
        self._max_entries = max_entries
        self._ignore_consecutive_duplicates = ignore_consecutive_duplicates
        self._navigating = False
        self._evicted_count = 0
        self._last_logged_evicted_count = 0

    @classmethod
    def from_settings(cls, settings: HistorySettings) -> InputHistory:
        """Create a history from validated settings."""
        return cls(
            max_entries=settings.max_entries,
            ignore_consecutive_duplicates=settings.ignore_consecutive_duplicates,
        )

    def record(self, entry: str) -> None:
        """Append an entry, evicting the oldest one when over capacity.

        Args:
            entry: The input line to remember.
        """
        self._navigating = False

        if self._ignore_consecutive_duplicates and not self._queue.is_empty():
            newest = self._queue.peek_at_position(self._queue.head_index - 1)
            if newest == entry:
                return

        self._queue.add(entry)
        if self._queue.size() > self._max_entries:
            self._queue.poll()
            self._evicted_count += 1

            if self._evicted_count - self._last_logged_evicted_count >= self._LOG_INTERVAL:
                logger.debug(
                    "History entries evicted",
                    evicted_since_last_log=self._evicted_count - self._last_logged_evicted_count,
                    evicted_total=self._evicted_count,
                    max_entries=self._max_entries,
                )
                self._last_logged_evicted_count = self._evicted_count

    def previous(self) -> str | None:
        """Step to the next older entry.

        The first call starts navigation at the newest entry.

        Returns:
            The entry stepped to, or None if the history is empty or
            navigation is already at the oldest entry.
        """
        if self._queue.is_empty():
            return None

        if not self._navigating:
            self._queue.set_cursor(self._queue.head_index - 1)
            self._navigating = True
            return self._queue.peek_at_cursor_position()

        self._queue.decrement_cursor()
        try:
            return self._queue.peek_at_cursor_position()
        except OutOfBoundsError:
            # Ran past the oldest entry; stay on it
            self._queue.increment_cursor()
            return None

    def next(self) -> str | None:
        """Step to the next newer entry.

        Returns:
            The entry stepped to, or None when not navigating or when the
            step passes the newest entry. Passing the newest entry ends
            navigation.
        """
        if not self._navigating:
            return None

        self._queue.increment_cursor()
        try:
            return self._queue.peek_at_cursor_position()
        except OutOfBoundsError:
            self._queue.decrement_cursor()
            self._navigating = False
            return None

    def reset(self) -> None:
        """End navigation; the next ``previous`` starts from the newest entry."""
        self._navigating = False

    @property
    def is_navigating(self) -> bool:
        """True while a previous/next walk is in progress."""
        return self._navigating

    @property
    def current(self) -> str | None:
        """Entry under the navigation cursor, or None when not navigating."""
        if not self._navigating:
            return None
        return self._queue.peek_at_cursor_position()

    @property
    def evicted_count(self) -> int:
        """Number of entries evicted due to capacity."""
        return self._evicted_count

    def entries(self) -> list[str]:
        """Return resident entries from oldest to newest."""
        return list(self._queue)

    def matching(self, prefix: str) -> list[str]:
        """Return distinct resident entries starting with prefix, newest first."""
        seen: set[str] = set()
        matches: list[str] = []
        for entry in reversed(self.entries()):
            if entry.startswith(prefix) and entry not in seen:
                seen.add(entry)
                matches.append(entry)
        return matches

    def __len__(self) -> int:
        """Return the number of resident entries."""
        return len(self._queue)
