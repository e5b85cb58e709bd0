"""
Linear Undo Stack
=================

Snapshot-based linear undo history over an opaque state value.
Supports undo/redo navigation through every committed change.
"""

from __future__ import annotations

import copy
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class LinearUndoStack(Generic[T]):
    """
    Linear undo history of independent state snapshots.

    Strictly linear:
    - execute() commits a new current state and drops any redo history
    - undo() moves back one step
    - redo() moves forward if available

    Every value going in or coming out is a deep copy, so callers may mutate
    what they receive without touching stored history.
    """

    def __init__(self, initial_state: T, max_undos: Optional[int] = None):
        """
        Initialize the undo stack.

        Args:
            initial_state: State the history starts from
            max_undos: Maximum number of undo states to keep (None = unlimited)
        """
        self.max_undos = max_undos

        self._undo: list[T] = []  # Oldest first
        self._redo: list[T] = []  # Oldest first
        self._current: T = copy.deepcopy(initial_state)

    def execute(self, new_state: T) -> None:
        """
        Commit ``new_state`` as the current state.

        The previous current state becomes undoable and the redo history is
        discarded.
        """
        self._undo.append(copy.deepcopy(self._current))
        self._current = copy.deepcopy(new_state)
        self._redo.clear()

        # Trim oldest if over limit
        if self.max_undos is not None and len(self._undo) > self.max_undos:
            del self._undo[: len(self._undo) - self.max_undos]

    def undo(self) -> Optional[T]:
        """
        Move back one step in history.

        Returns:
            A copy of the restored state, or None if there is nothing to undo
        """
        if not self._undo:
            return None

        self._redo.append(copy.deepcopy(self._current))
        self._current = self._undo.pop()
        return copy.deepcopy(self._current)

    def redo(self) -> Optional[T]:
        """
        Move forward one step if available.

        Returns:
            A copy of the restored state, or None if there is nothing to redo
        """
        if not self._redo:
            return None

        self._undo.append(copy.deepcopy(self._current))
        self._current = self._redo.pop()
        return copy.deepcopy(self._current)

    def get_state(self) -> T:
        """Get a copy of the current state without moving."""
        return copy.deepcopy(self._current)

    def can_undo(self) -> bool:
        """Check if undo is available."""
        return bool(self._undo)

    def can_redo(self) -> bool:
        """Check if redo is available."""
        return bool(self._redo)

    def depth(self) -> tuple[int, int]:
        """Number of (undo, redo) snapshots currently held."""
        return len(self._undo), len(self._redo)
