"""
Exercise State
==============

The single authoritative snapshot of a card-sorting exercise and the cards
inside it. Both are plain dataclasses so the history engine can deep-copy them
and the store can round-trip them through JSON.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Optional

PARTS = ("part1", "part2", "part3", "part4", "review")

SORTING_PARTS = ("part1", "part2")
NARROWED_PARTS = ("part3", "part4", "review")

UNASSIGNED = "unassigned"
NOT_IMPORTANT = "notImportant"
IMPORTANT = "important"
VERY_IMPORTANT = "veryImportant"
CORE = "core"
ADDITIONAL = "additional"

SORTING_COLUMNS = (UNASSIGNED, NOT_IMPORTANT, IMPORTANT, VERY_IMPORTANT)
NARROWED_COLUMNS = (CORE, ADDITIONAL)


def columns_for(part: str) -> tuple[str, ...]:
    """Columns a card may occupy while the exercise is in ``part``."""
    if part in SORTING_PARTS:
        return SORTING_COLUMNS
    if part in NARROWED_PARTS:
        return NARROWED_COLUMNS
    raise ValueError(f"Unknown part: {part}")


@dataclass
class ValueCard:
    """One sortable value."""

    id: int
    name: str
    column: str = UNASSIGNED
    order: int = 0

    # None falls back to the built-in definition for this name
    description: Optional[str] = None
    is_custom: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "ValueCard":
        """Build a card from its JSON form. Raises on missing or mistyped fields."""
        card = cls(
            id=int(data["id"]),
            name=str(data["name"]),
            column=str(data["column"]),
            order=int(data.get("order", 0)),
            description=data.get("description"),
            is_custom=bool(data.get("is_custom", False)),
        )
        if card.description is not None and not isinstance(card.description, str):
            raise TypeError(f"Card {card.id} has a non-string description")
        return card


@dataclass
class AppState:
    """Serializable exercise state."""

    current_part: str = "part1"
    cards: list[ValueCard] = field(default_factory=list)

    # Statement per core card id, written in part4
    final_statements: dict[int, str] = field(default_factory=dict)

    value_set: str = "limited"
    editing_description_card_id: Optional[int] = None

    def find_card(self, card_id: int) -> Optional[ValueCard]:
        """Return the card with ``card_id`` or None."""
        for card in self.cards:
            if card.id == card_id:
                return card
        return None

    def cards_in(self, column: str) -> list[ValueCard]:
        """Cards currently classified in ``column``, in list order."""
        return [card for card in self.cards if card.column == column]

    def to_dict(self) -> dict:
        """Convert to a JSON-compatible dictionary."""
        data = asdict(self)
        # JSON object keys are strings
        data["final_statements"] = {
            str(card_id): text for card_id, text in self.final_statements.items()
        }
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "AppState":
        """
        Restore a state from its JSON form.

        ``current_part``, ``cards`` and ``final_statements`` are required.
        ``value_set`` defaults to "limited" and ``editing_description_card_id``
        to None so older saved shapes still load.

        Raises:
            KeyError, TypeError, ValueError: If the data is not a usable state
        """
        if not isinstance(data, dict):
            raise TypeError("Saved state must be a JSON object")

        current_part = data["current_part"]
        if current_part not in PARTS:
            raise ValueError(f"Unknown part: {current_part!r}")

        value_set = data.get("value_set") or "limited"
        if value_set not in ("limited", "all"):
            raise ValueError(f"Unknown value set: {value_set!r}")

        statements = data["final_statements"]
        if not isinstance(statements, dict):
            raise TypeError("final_statements must be a JSON object")

        editing = data.get("editing_description_card_id")

        return cls(
            current_part=current_part,
            cards=[ValueCard.from_dict(item) for item in data["cards"]],
            final_statements={int(k): str(v) for k, v in statements.items()},
            value_set=value_set,
            editing_description_card_id=int(editing) if editing is not None else None,
        )
