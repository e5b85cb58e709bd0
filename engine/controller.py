"""
Workflow Controller
===================

Owns the exercise history and is the only place state changes. Commands go
through ``dispatch``; each is validated by the workflow rules and, only if
accepted, committed to the undo stack. Listeners hear about every commit,
undo and redo.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from data.value_definitions import LIMITED_COUNT
from state.models import AppState
from state.undo_stack import LinearUndoStack

from . import workflow
from .errors import WorkflowRejection

Listener = Callable[[AppState], None]


@dataclass
class CommandResult:
    """Outcome of a dispatched command."""

    state: AppState
    committed: bool = False
    rejection: Optional[WorkflowRejection] = None

    @property
    def rejected(self) -> bool:
        return self.rejection is not None

    @property
    def reason(self) -> Optional[str]:
        return str(self.rejection) if self.rejection else None


class WorkflowController:
    """Single writer of the exercise state."""

    def __init__(
        self,
        initial_state: Optional[AppState] = None,
        core_limit: int = workflow.CORE_LIMIT,
        limited_count: int = LIMITED_COUNT,
        max_undos: Optional[int] = None,
    ):
        self.core_limit = core_limit
        self.limited_count = limited_count

        if initial_state is None:
            initial_state = workflow.default_state("limited", limited_count)
        self.history: LinearUndoStack[AppState] = LinearUndoStack(initial_state, max_undos=max_undos)

        self._listeners: list[Listener] = []

    @property
    def state(self) -> AppState:
        """Copy of the current state."""
        return self.history.get_state()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register ``listener(state)`` for state changes.

        Returns:
            A callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, command) -> CommandResult:
        """
        Validate and commit one command.

        Rejections leave the state untouched and are returned, not raised.
        """
        current = self.history.get_state()
        try:
            candidate = workflow.apply(
                current,
                command,
                core_limit=self.core_limit,
                limited_count=self.limited_count,
            )
        except WorkflowRejection as rejection:
            return CommandResult(state=current, rejection=rejection)

        if candidate is None:
            return CommandResult(state=current)

        self.history.execute(candidate)
        new_state = self.history.get_state()
        self._emit()
        return CommandResult(state=new_state, committed=True)

    def undo(self) -> Optional[AppState]:
        """Restore the previous snapshot. Returns None if there is none."""
        restored = self.history.undo()
        if restored is not None:
            self._emit()
        return restored

    def redo(self) -> Optional[AppState]:
        """Re-apply the next snapshot. Returns None if there is none."""
        restored = self.history.redo()
        if restored is not None:
            self._emit()
        return restored

    def can_undo(self) -> bool:
        return self.history.can_undo()

    def can_redo(self) -> bool:
        return self.history.can_redo()

    def _emit(self) -> None:
        # Each listener gets its own copy
        for listener in list(self._listeners):
            listener(self.history.get_state())
