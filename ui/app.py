"""
Valuesort App Controller
========================

Main controller that wires together the workflow engine, state persistence,
the journal and the UI collaborators (confirmation, notifications, debounced
statement inputs).
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from config import ValuesortConfig
from data.journal import Journal
from data.value_definitions import VALUE_SETS
from engine.commands import (
    AddCustomValue,
    Advance,
    CancelDescriptionEdit,
    Finish,
    MoveCard,
    Restart,
    SaveDescriptionEdit,
    StartEditingDescription,
    ToggleValueSet,
    UpdateStatement,
)
from engine.controller import CommandResult, WorkflowController
from engine.workflow import default_state
from state.debounce import DebouncedStatements
from state.models import AppState
from state.session import ExerciseStore

Confirm = Callable[[str, str], bool]
Notify = Callable[[str, str, str], None]

RESET_WARNING = "Switching value sets will reset your current progress. Are you sure?"
RESTART_WARNING = (
    "Are you sure you want to restart the exercise? All progress will be lost. "
    "This action cannot be undone."
)


def _log(message: str):
    """Print a timestamped log message to stdout."""
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] [Valuesort] {message}")


@dataclass
class Notification:
    """A message queued for the user."""

    title: str
    message: str
    severity: str = "info"


class ValuesApp:
    """Main controller wiring engine, state, and UI."""

    def __init__(
        self,
        session_dir: str,
        config: Optional[ValuesortConfig] = None,
        notify: Optional[Notify] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config = config or ValuesortConfig()
        self.session_dir = Path(session_dir)
        self.session_dir.mkdir(parents=True, exist_ok=True)

        self.store = ExerciseStore(self.session_dir / "state.json")
        self.journal = Journal(self.session_dir / "journal")

        # Default sink keeps notifications until the UI drains them
        self.notifications: list[Notification] = []
        self._notify = notify or self._queue_notification

        self.controller = WorkflowController(
            self._load_initial_state(),
            core_limit=self.config.core_limit,
            limited_count=self.config.limited_count,
            max_undos=self.config.max_undos,
        )
        self.controller.subscribe(self.store.save)

        self.statements = DebouncedStatements(
            self.update_statement,
            wait_seconds=self.config.statement_debounce_seconds,
            clock=clock,
        )

    def _load_initial_state(self) -> AppState:
        """Resume from disk, or seed a fresh exercise."""
        saved = self.store.load()
        if saved is not None:
            _log(f"Resuming exercise at {saved.current_part} ({len(saved.cards)} cards)")
            self.journal.log_init(saved.value_set, len(saved.cards), resumed=True)
            return saved

        if self.store.exists():
            _log("Saved state unreadable, starting a fresh exercise")

        state = default_state(self.config.default_value_set, self.config.limited_count)
        self.journal.log_init(state.value_set, len(state.cards))
        return state

    def _queue_notification(self, title: str, message: str, severity: str) -> None:
        self.notifications.append(Notification(title, message, severity))

    # =========================================================================
    # State access
    # =========================================================================

    @property
    def state(self) -> AppState:
        """Copy of the authoritative state."""
        return self.controller.state

    def can_undo(self) -> bool:
        return self.controller.can_undo()

    def can_redo(self) -> bool:
        return self.controller.can_redo()

    def subscribe(self, listener: Callable[[AppState], None]) -> Callable[[], None]:
        """Register a state-change listener; returns the unsubscribe callable."""
        return self.controller.subscribe(listener)

    def drain_notifications(self) -> list[Notification]:
        """Return and clear queued notifications."""
        pending, self.notifications = self.notifications, []
        return pending

    # =========================================================================
    # Sorting (Parts 1-3)
    # =========================================================================

    def move_card(self, card_id: int, column: str) -> CommandResult:
        return self._run(MoveCard(card_id, column))

    def add_custom_value(self, name: str, description: str) -> CommandResult:
        return self._run(AddCustomValue(name, description))

    def advance(self) -> CommandResult:
        return self._run(Advance())

    def start_editing_description(self, card_id: int) -> CommandResult:
        return self._run(StartEditingDescription(card_id))

    def save_description_edit(self, card_id: int, text: str) -> CommandResult:
        return self._run(SaveDescriptionEdit(card_id, text))

    def cancel_description_edit(self) -> CommandResult:
        return self._run(CancelDescriptionEdit())

    # =========================================================================
    # Statements (Part 4)
    # =========================================================================

    def submit_statement(self, card_id: int, text: str) -> None:
        """Record a keystroke; committed once the input has been quiet."""
        self.statements.submit(card_id, text)
        self.statements.poll()

    def commit_due_statements(self) -> int:
        """Commit statement input whose quiet period has elapsed."""
        return self.statements.poll()

    def flush_statements(self) -> int:
        """Commit all pending statement input now."""
        return self.statements.flush()

    def update_statement(self, card_id: int, text: str) -> CommandResult:
        """Commit a statement immediately."""
        return self._dispatch(UpdateStatement(card_id, text))

    def finish(self) -> CommandResult:
        """Complete Part 4. Pending statement input is committed first."""
        self.statements.flush()
        return self._dispatch(Finish())

    # =========================================================================
    # Resets
    # =========================================================================

    def restart(self, confirm: Optional[Confirm] = None) -> Optional[CommandResult]:
        """
        Reseed the exercise from the active value set.

        Outside the review, ``confirm`` gates the reset; a False answer leaves
        everything as it is and returns None.
        """
        state = self.controller.state
        if state.current_part != "review" and confirm and not confirm("Restart exercise", RESTART_WARNING):
            return None

        self.statements.cancel()
        self.store.clear()
        result = self._dispatch(Restart())
        self.journal.log_restart(result.state.value_set)
        _log(f"Exercise restarted with {result.state.value_set} set")
        return result

    def select_value_set(self, value_set: str, confirm: Optional[Confirm] = None) -> Optional[CommandResult]:
        """
        Switch to ``value_set``, discarding progress. No-op if already active.

        Raises:
            ValueError: If ``value_set`` is not a known value set
        """
        if value_set not in VALUE_SETS:
            raise ValueError(f"Unknown value set: {value_set!r}")
        if value_set == self.controller.state.value_set:
            return None
        if confirm and not confirm("Switch value set", RESET_WARNING):
            return None

        self.statements.cancel()
        result = self._dispatch(ToggleValueSet())
        self.journal.log_restart(result.state.value_set)
        _log(f"Value set switched to {result.state.value_set}")
        return result

    # =========================================================================
    # History
    # =========================================================================

    def undo(self) -> Optional[AppState]:
        """Undo the last committed change."""
        self.statements.flush()
        before = self.controller.state.current_part
        restored = self.controller.undo()
        if restored is None:
            return None

        self.journal.log_undo(before, restored.current_part)
        _log(f"Undo: {before} -> {restored.current_part}")
        return restored

    def redo(self) -> Optional[AppState]:
        """Redo the last undone change."""
        self.statements.flush()
        before = self.controller.state.current_part
        restored = self.controller.redo()
        if restored is None:
            return None

        self.journal.log_redo(before, restored.current_part)
        _log(f"Redo: {before} -> {restored.current_part}")
        return restored

    # =========================================================================
    # Review
    # =========================================================================

    def get_review_summary(self) -> str:
        """Markdown summary of core values and statements."""
        return self.journal.generate_review_summary(self.controller.state)

    def export_summary(self) -> Path:
        """Write the review summary next to the session log."""
        path = self.journal.save_summary(self.controller.state)
        _log(f"Summary saved to {path}")
        return path

    def get_journal_content(self) -> str:
        return self.journal.get_content()

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _run(self, command) -> CommandResult:
        """Commit statement input that has gone quiet, then dispatch."""
        self.statements.poll()
        return self._dispatch(command)

    def _dispatch(self, command) -> CommandResult:
        before = self.controller.state.current_part
        result = self.controller.dispatch(command)

        if result.rejected:
            self.journal.log_rejection(repr(command), result.reason)
            self._notify(result.rejection.title, result.reason, result.rejection.severity)
            return result

        if result.committed:
            after = result.state.current_part
            if after != before:
                self.journal.log_transition(before, after, len(result.state.cards))
                _log(f"Moved {before} -> {after}")
            else:
                self.journal.log_commit(repr(command), after)
        return result
