"""
Session Journal
===============

Dual-mode logging for Valuesort sessions.
- Session log: Chronological record of everything
- Review summary: Clean write-up of the chosen values and statements
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from .value_definitions import description_for

if TYPE_CHECKING:
    from state.models import AppState, ValueCard


def card_description(card: "ValueCard") -> str:
    """A card's own description, falling back to the built-in definition."""
    if card.description is not None:
        return card.description
    return description_for(card.name)


class Journal:
    """
    Dual-mode logging for Valuesort sessions.

    - Session log: Chronological record of everything (commits, rejections, undos)
    - Review summary: Core and additional values with statements (for keeping)
    """

    def __init__(self, save_dir: Path):
        self.save_dir = Path(save_dir)
        self.save_dir.mkdir(parents=True, exist_ok=True)
        self.session_path = self.save_dir / "session_log.md"
        if not self.session_path.exists():
            self._init_session_log()

    def _init_session_log(self):
        """Start a new session log with timestamp."""
        header = f"""# Valuesort Session Log
*Started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}*

---

"""
        with open(self.session_path, "w") as f:
            f.write(header)

    def _append(self, text: str):
        """Append to session log."""
        with open(self.session_path, "a") as f:
            f.write(text + "\n")

    def _timestamp(self) -> str:
        """Get current timestamp for log entries."""
        return datetime.now().strftime("%H:%M:%S")

    def log_init(self, value_set: str, card_count: int, resumed: bool = False):
        """Log the exercise starting or resuming."""
        verb = "Resumed" if resumed else "Started"
        self._append(f"[{self._timestamp()}] {verb} exercise: `{value_set}` set, {card_count} cards")

    def log_commit(self, action: str, part: str):
        """Log an accepted command."""
        self._append(f"[{self._timestamp()}] {action} ({part})")

    def log_transition(self, from_part: str, to_part: str, card_count: int):
        """Log a stage change."""
        self._append(f"[{self._timestamp()}] Moved {from_part} -> {to_part} with {card_count} cards")

    def log_rejection(self, action: str, reason: str):
        """Log a rejected command."""
        self._append(f"[{self._timestamp()}] Rejected {action}: {reason}")

    def log_undo(self, from_part: str, to_part: str):
        """Log an undo action."""
        self._append(f"[{self._timestamp()}] Undo: {from_part} -> {to_part}")

    def log_redo(self, from_part: str, to_part: str):
        """Log a redo action."""
        self._append(f"[{self._timestamp()}] Redo: {from_part} -> {to_part}")

    def log_restart(self, value_set: str):
        """Log a full reseed."""
        self._append(f"\n[{self._timestamp()}] Restarted with `{value_set}` set\n")

    def get_content(self) -> str:
        """Read and return the full session log content."""
        if self.session_path.exists():
            return self.session_path.read_text()
        return "*No log yet*"

    def generate_review_summary(self, state: "AppState") -> str:
        """
        Generate a clean summary of the exercise outcome.
        Core values with their statements, then the additional values.
        """
        core = [card for card in state.cards if card.column == "core"]
        additional = [card for card in state.cards if card.column == "additional"]

        lines = [
            "# My Core Values",
            f"*Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}*",
            "",
            "---",
            "",
        ]

        if not core:
            lines.append("*No core values chosen yet.*")
            lines.append("")
        for card in core:
            statement = (state.final_statements.get(card.id) or "").strip()
            lines.append(f"## {card.name}")
            lines.append("")
            lines.append(f"*{card_description(card)}*")
            lines.append("")
            lines.append(f"> {statement}" if statement else "> (No statement written)")
            lines.append("")

        if additional:
            lines.extend(["## Also Something I Want", ""])
            for card in additional:
                lines.append(f"- **{card.name}**: {card_description(card)}")
            lines.append("")

        return "\n".join(lines)

    def save_summary(self, state: "AppState", filename: Optional[str] = None) -> Path:
        """Save the review summary to a file."""
        path = self.save_dir / (filename or "summary.md")
        with open(path, "w") as f:
            f.write(self.generate_review_summary(state))
        return path
