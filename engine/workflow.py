"""
Workflow Rules
==============

Stage transitions and card mutations as pure functions of
``(state, command) -> next state``. A rule either returns the candidate state,
returns None when the command is a no-op, or raises a WorkflowRejection.
The input state is never modified.
"""

from __future__ import annotations

import copy
from dataclasses import replace
from typing import Optional

from data.value_definitions import LIMITED_COUNT, definitions_for
from state.models import (
    CORE,
    SORTING_PARTS,
    UNASSIGNED,
    VERY_IMPORTANT,
    AppState,
    ValueCard,
    columns_for,
)

from .commands import (
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
from .errors import (
    CoreOverflowError,
    DuplicateNameError,
    EmptyFieldError,
    IncompleteSortError,
    MissingStatementError,
    StageMismatchError,
)

CORE_LIMIT = 5

PART_TITLES = {
    "part1": "Part 1",
    "part2": "Part 2",
    "part3": "Part 3",
    "part4": "Part 4",
    "review": "the review",
}


def default_state(value_set: str = "limited", limited_count: int = LIMITED_COUNT) -> AppState:
    """Fresh exercise seeded from the chosen value set."""
    cards = [
        ValueCard(id=index + 1, name=definition.name, column=UNASSIGNED, order=index)
        for index, definition in enumerate(definitions_for(value_set, limited_count))
    ]
    return AppState(
        current_part="part1",
        cards=cards,
        final_statements={},
        value_set=value_set,
        editing_description_card_id=None,
    )


def next_custom_id(state: AppState) -> int:
    """Next free custom id: one below the lowest id in use, and always negative."""
    return min([0] + [card.id for card in state.cards]) - 1


def apply(
    state: AppState,
    command,
    core_limit: int = CORE_LIMIT,
    limited_count: int = LIMITED_COUNT,
) -> Optional[AppState]:
    """
    Compute the state that results from ``command``.

    Returns:
        The candidate next state, or None when the command changes nothing

    Raises:
        WorkflowRejection: If the command fails validation
        TypeError: If ``command`` is not a known command
    """
    new_state = copy.deepcopy(state)

    if isinstance(command, MoveCard):
        return _move_card(new_state, command.card_id, command.column, core_limit)
    if isinstance(command, AddCustomValue):
        return _add_custom_value(new_state, command.name, command.description)
    if isinstance(command, Advance):
        return _advance(new_state, core_limit)
    if isinstance(command, Finish):
        return _finish(new_state)
    if isinstance(command, Restart):
        return default_state(state.value_set, limited_count)
    if isinstance(command, ToggleValueSet):
        next_set = "all" if state.value_set == "limited" else "limited"
        return default_state(next_set, limited_count)
    if isinstance(command, StartEditingDescription):
        if new_state.find_card(command.card_id) is None:
            return None
        new_state.editing_description_card_id = command.card_id
        return new_state
    if isinstance(command, SaveDescriptionEdit):
        return _save_description(new_state, command.card_id, command.text)
    if isinstance(command, CancelDescriptionEdit):
        new_state.editing_description_card_id = None
        return new_state
    if isinstance(command, UpdateStatement):
        return _update_statement(new_state, command.card_id, command.text)

    raise TypeError(f"Unknown command: {command!r}")


# =========================================================================
# Stage transitions
# =========================================================================


def _advance(state: AppState, core_limit: int) -> AppState:
    part = state.current_part

    if part == "part1":
        _require_sorted(state, PART_TITLES["part2"])
        state.cards = [
            replace(card, column=UNASSIGNED)
            for card in state.cards
            if card.column == VERY_IMPORTANT
        ]
        state.current_part = "part2"
        return _prune(state)

    if part == "part2":
        _require_sorted(state, "the next part")
        very_important = state.cards_in(VERY_IMPORTANT)
        # Both branches start with every survivor in core
        state.cards = [
            replace(card, column=CORE, order=index)
            for index, card in enumerate(very_important)
        ]
        state.current_part = "part4" if len(very_important) <= core_limit else "part3"
        return _prune(state)

    if part == "part3":
        core_count = len(state.cards_in(CORE))
        if core_count > core_limit:
            raise CoreOverflowError(core_count, core_limit)
        state.current_part = "part4"
        return state

    raise StageMismatchError(PART_TITLES[part], "advance")


def _finish(state: AppState) -> AppState:
    if state.current_part != "part4":
        raise StageMismatchError(PART_TITLES[state.current_part], "finish the exercise")

    missing = [
        card.name
        for card in state.cards_in(CORE)
        if not (state.final_statements.get(card.id) or "").strip()
    ]
    if missing:
        raise MissingStatementError(missing)

    state.current_part = "review"
    return state


def _require_sorted(state: AppState, destination: str) -> None:
    unassigned = len(state.cards_in(UNASSIGNED))
    if unassigned > 0:
        raise IncompleteSortError(unassigned, destination)


def _prune(state: AppState) -> AppState:
    """Drop statements and edit mode that refer to cards no longer present."""
    ids = {card.id for card in state.cards}
    state.final_statements = {
        card_id: text for card_id, text in state.final_statements.items() if card_id in ids
    }
    if state.editing_description_card_id not in ids:
        state.editing_description_card_id = None
    return state


# =========================================================================
# Card mutations
# =========================================================================


def _move_card(state: AppState, card_id: int, column: str, core_limit: int) -> Optional[AppState]:
    card = state.find_card(card_id)
    if card is None:
        return None

    if column not in columns_for(state.current_part):
        raise StageMismatchError(PART_TITLES[state.current_part], f"move a card to '{column}'")

    # Cards already in core may be re-dropped there without hitting the cap
    if state.current_part == "part3" and column == CORE:
        core_count = len(state.cards_in(CORE))
        if core_count >= core_limit and card.column != CORE:
            raise CoreOverflowError(core_count, core_limit)

    card.column = column
    card.order = max(c.order for c in state.cards) + 1
    return state


def _add_custom_value(state: AppState, name: str, description: str) -> AppState:
    name = (name or "").strip().upper()
    description = (description or "").strip()

    if not name:
        raise EmptyFieldError("name")
    if not description:
        raise EmptyFieldError("description")
    if state.current_part not in SORTING_PARTS:
        raise StageMismatchError(PART_TITLES[state.current_part], "add a custom value")
    if any(card.name.casefold() == name.casefold() for card in state.cards):
        raise DuplicateNameError(name)

    state.cards.append(
        ValueCard(
            id=next_custom_id(state),
            name=name,
            column=UNASSIGNED,
            order=0,
            description=description,
            is_custom=True,
        )
    )

    unassigned = sorted(state.cards_in(UNASSIGNED), key=lambda c: c.name)
    for index, card in enumerate(unassigned):
        card.order = index
    state.cards = unassigned + [card for card in state.cards if card.column != UNASSIGNED]
    return state


def _save_description(state: AppState, card_id: int, text: str) -> AppState:
    text = (text or "").strip()
    card = state.find_card(card_id)

    if card is not None:
        if text:
            card.description = text
        elif card.is_custom:
            raise EmptyFieldError("description")
        else:
            # Blank falls back to the built-in definition
            card.description = None

    state.editing_description_card_id = None
    return state


def _update_statement(state: AppState, card_id: int, text: str) -> Optional[AppState]:
    if state.current_part != "part4":
        raise StageMismatchError(PART_TITLES[state.current_part], "edit statements")

    card = state.find_card(card_id)
    if card is None or card.column != CORE:
        return None
    if state.final_statements.get(card_id) == text:
        return None

    state.final_statements[card_id] = text
    return state
