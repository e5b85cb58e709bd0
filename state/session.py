"""
Exercise Store
==============

Durable save/load of the exercise state for resume.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from .models import AppState


class ExerciseStore:
    """
    JSON file holding the latest committed AppState.

    A session directory contains:
        state.json        - This state
        journal/          - Journal logs
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def exists(self) -> bool:
        """Check whether anything has been saved yet."""
        return self.path.exists()

    def load(self) -> Optional[AppState]:
        """
        Load the saved state.

        Returns:
            The saved AppState, or None if nothing usable is on disk. Content
            that does not parse or lacks required fields counts as nothing.
        """
        if not self.path.exists():
            return None

        try:
            with open(self.path) as f:
                data = json.load(f)
            return AppState.from_dict(data)
        except (OSError, ValueError, KeyError, TypeError):
            return None

    def save(self, state: AppState) -> None:
        """Save state to JSON, replacing the previous file atomically."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w") as f:
            json.dump(state.to_dict(), f, indent=2)
        tmp_path.replace(self.path)

    def clear(self) -> None:
        """Remove the saved state, if any."""
        if self.path.exists():
            self.path.unlink()
