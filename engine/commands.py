"""
Workflow Commands
=================

Every state mutation is expressed as one of these commands and handed to
``WorkflowController.dispatch``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MoveCard:
    card_id: int
    column: str


@dataclass(frozen=True)
class AddCustomValue:
    name: str
    description: str


@dataclass(frozen=True)
class Advance:
    """Move forward from part1, part2 or part3."""


@dataclass(frozen=True)
class Finish:
    """Move from part4 to the review."""


@dataclass(frozen=True)
class Restart:
    """Reseed from the active value set."""


@dataclass(frozen=True)
class ToggleValueSet:
    """Switch between the limited and full value sets, discarding progress."""


@dataclass(frozen=True)
class StartEditingDescription:
    card_id: int


@dataclass(frozen=True)
class SaveDescriptionEdit:
    card_id: int
    text: str


@dataclass(frozen=True)
class CancelDescriptionEdit:
    pass


@dataclass(frozen=True)
class UpdateStatement:
    card_id: int
    text: str


Command = (
    MoveCard
    | AddCustomValue
    | Advance
    | Finish
    | Restart
    | ToggleValueSet
    | StartEditingDescription
    | SaveDescriptionEdit
    | CancelDescriptionEdit
    | UpdateStatement
)
