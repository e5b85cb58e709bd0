"""
Valuesort Configuration
=======================

All tunable parameters in one place. Supports JSON serialization for session persistence.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict, fields
from typing import Optional

from data.value_definitions import VALUE_SETS


@dataclass
class ValuesortConfig:
    """All tunable parameters in one place."""

    # Exercise rules
    default_value_set: str = "limited"
    limited_count: int = 10
    core_limit: int = 5

    # Part 4 statement inputs commit after this much quiet time
    statement_debounce_seconds: float = 0.5

    # Undo settings
    max_undos: Optional[int] = None  # None = unlimited

    # Paths
    save_dir: str = "./valuesort_sessions"

    # Browser sessions idle longer than this are dropped from memory
    session_ttl_minutes: int = 120

    def __post_init__(self):
        if self.default_value_set not in VALUE_SETS:
            raise ValueError(f"default_value_set must be one of {VALUE_SETS}, got {self.default_value_set!r}")
        if self.core_limit < 1:
            raise ValueError("core_limit must be at least 1")

    def save(self, path: str) -> None:
        """Save configuration to JSON file."""
        with open(path, "w") as f:
            json.dump(asdict(self), f, indent=2)

    @classmethod
    def load(cls, path: str) -> "ValuesortConfig":
        """Load configuration from JSON file. Unknown keys are ignored."""
        with open(path) as f:
            data = json.load(f)
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def to_dict(self) -> dict:
        """Convert to dictionary for display."""
        return asdict(self)
