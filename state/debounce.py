"""
Debounced Statements
====================

Collects statement keystrokes and commits only the last value per card once
it has been quiet for the debounce window. Clock-driven rather than timer
threads: callers ``poll()`` to commit what is due and ``flush()`` to force
everything through before a transition that reads statements.
"""

from __future__ import annotations

import time
from typing import Callable


class DebouncedStatements:
    """Pending statement writes keyed by card id."""

    def __init__(
        self,
        commit: Callable[[int, str], object],
        wait_seconds: float = 0.5,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            commit: Called as ``commit(card_id, text)`` when a write fires
            wait_seconds: Quiet period before a pending write is due
            clock: Monotonic time source (injectable for tests)
        """
        self._commit = commit
        self.wait_seconds = wait_seconds
        self._clock = clock
        self._pending: dict[int, tuple[str, float]] = {}  # card_id -> (text, due_at)

    @property
    def pending(self) -> dict[int, str]:
        """Texts waiting to be committed."""
        return {card_id: text for card_id, (text, _) in self._pending.items()}

    def submit(self, card_id: int, text: str) -> None:
        """Record a keystroke; supersedes any pending text for the same card."""
        self._pending[card_id] = (text, self._clock() + self.wait_seconds)

    def poll(self) -> int:
        """Commit every pending write whose quiet period has elapsed."""
        now = self._clock()
        due = [card_id for card_id, (_, due_at) in self._pending.items() if due_at <= now]
        for card_id in due:
            text, _ = self._pending.pop(card_id)
            self._commit(card_id, text)
        return len(due)

    def flush(self) -> int:
        """Commit every pending write immediately."""
        count = 0
        while self._pending:
            card_id = next(iter(self._pending))
            text, _ = self._pending.pop(card_id)
            self._commit(card_id, text)
            count += 1
        return count

    def cancel(self) -> None:
        """Drop pending writes without committing them."""
        self._pending.clear()
