"""Tests for the pure workflow rules."""

import copy

import pytest

from engine import workflow
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
from engine.errors import (
    CoreOverflowError,
    DuplicateNameError,
    EmptyFieldError,
    IncompleteSortError,
    MissingStatementError,
    StageMismatchError,
)
from engine.workflow import apply, default_state, next_custom_id


# ---------------------------------------------------------------------------
# default_state
# ---------------------------------------------------------------------------


class TestDefaultState:

    def test_limited_set_has_ten_cards(self):
        state = default_state("limited")
        assert len(state.cards) == 10
        assert state.current_part == "part1"
        assert state.final_statements == {}
        assert state.editing_description_card_id is None

    def test_all_set_has_every_definition(self):
        state = default_state("all")
        assert len(state.cards) == 83
        assert state.value_set == "all"

    def test_cards_are_seeded_in_definition_order(self):
        state = default_state("limited")
        assert [c.id for c in state.cards] == list(range(1, 11))
        assert [c.order for c in state.cards] == list(range(10))
        assert state.cards[0].name == "ACCEPTANCE"
        assert all(c.column == "unassigned" for c in state.cards)
        assert all(c.description is None and not c.is_custom for c in state.cards)

    def test_unknown_value_set_raises(self):
        with pytest.raises(ValueError):
            default_state("some")


# ---------------------------------------------------------------------------
# Stage transitions
# ---------------------------------------------------------------------------


class TestPart1ToPart2:

    def test_blocks_while_cards_are_unassigned(self, build_state):
        state = build_state("part1", [("A", "veryImportant"), ("B", "unassigned"), ("C", "unassigned")])
        snapshot = copy.deepcopy(state)

        with pytest.raises(IncompleteSortError) as exc_info:
            apply(state, Advance())

        assert exc_info.value.count == 2
        assert "2 unassigned" in str(exc_info.value)
        assert state == snapshot

    def test_keeps_only_very_important_cards_unassigned(self, build_state):
        state = build_state("part1", [
            ("A", "veryImportant"),
            ("B", "important"),
            ("C", "veryImportant"),
            ("D", "notImportant"),
        ])

        result = apply(state, Advance())

        assert result.current_part == "part2"
        assert [c.name for c in result.cards] == ["A", "C"]
        assert all(c.column == "unassigned" for c in result.cards)

    def test_input_state_is_not_modified(self, build_state):
        state = build_state("part1", [("A", "veryImportant"), ("B", "important")])
        snapshot = copy.deepcopy(state)
        apply(state, Advance())
        assert state == snapshot


class TestPart2Transition:

    def test_four_very_important_skip_to_part4(self, build_state):
        state = build_state("part2", [
            ("V1", "veryImportant"),
            ("V2", "veryImportant"),
            ("V3", "veryImportant"),
            ("V4", "veryImportant"),
            ("I1", "important"),
        ])

        result = apply(state, Advance())

        assert result.current_part == "part4"
        assert [c.name for c in result.cards] == ["V1", "V2", "V3", "V4"]
        assert all(c.column == "core" for c in result.cards)

    def test_exactly_five_skips_part3(self, build_state):
        state = build_state("part2", [(f"V{i}", "veryImportant") for i in range(5)])
        assert apply(state, Advance()).current_part == "part4"

    def test_six_go_to_part3_with_reindexed_order(self, build_state):
        state = build_state("part2", [
            ("N1", "notImportant"),
            *[(f"V{i}", "veryImportant") for i in range(6)],
        ])

        result = apply(state, Advance())

        assert result.current_part == "part3"
        assert len(result.cards) == 6
        assert [c.order for c in result.cards] == list(range(6))
        assert all(c.column == "core" for c in result.cards)

    def test_blocks_while_cards_are_unassigned(self, build_state):
        state = build_state("part2", [("V1", "veryImportant"), ("U1", "unassigned")])
        with pytest.raises(IncompleteSortError) as exc_info:
            apply(state, Advance())
        assert exc_info.value.count == 1

    def test_statements_for_dropped_cards_are_pruned(self, build_state):
        state = build_state("part2", [("V1", "veryImportant"), ("I1", "important")], statements={2: "stale"})
        result = apply(state, Advance())
        assert result.final_statements == {}


class TestPart3ToPart4:

    def test_six_core_cards_are_rejected(self, build_state):
        state = build_state("part3", [(f"C{i}", "core") for i in range(6)])

        with pytest.raises(CoreOverflowError) as exc_info:
            apply(state, Advance())

        assert exc_info.value.count == 6
        assert exc_info.value.limit == 5

    def test_five_core_one_additional_advances_unchanged(self, build_state):
        state = build_state("part3", [*[(f"C{i}", "core") for i in range(5)], ("A1", "additional")])

        result = apply(state, Advance())

        assert result.current_part == "part4"
        assert [c.column for c in result.cards] == ["core"] * 5 + ["additional"]


class TestFinish:

    def test_reports_missing_statement_names(self, build_state):
        state = build_state("part4", [("HONESTY", "core"), ("FUN", "core"), ("RISK", "additional")],
                            statements={1: "Always tell the truth"})

        with pytest.raises(MissingStatementError) as exc_info:
            apply(state, Finish())

        assert exc_info.value.names == ["FUN"]
        assert "FUN" in str(exc_info.value)

    def test_blank_statement_counts_as_missing(self, build_state):
        state = build_state("part4", [("HONESTY", "core")], statements={1: "   "})
        with pytest.raises(MissingStatementError):
            apply(state, Finish())

    def test_complete_statements_reach_review(self, build_state):
        state = build_state("part4", [("HONESTY", "core"), ("RISK", "additional")], statements={1: "Truth"})
        assert apply(state, Finish()).current_part == "review"

    def test_finish_outside_part4_is_rejected(self, fresh_state):
        with pytest.raises(StageMismatchError):
            apply(fresh_state, Finish())


class TestAdvanceFromLateStages:

    @pytest.mark.parametrize("part", ["part4", "review"])
    def test_advance_is_rejected(self, build_state, part):
        state = build_state(part, [("A", "core")], statements={1: "x"})
        with pytest.raises(StageMismatchError):
            apply(state, Advance())


class TestResets:

    def test_restart_reseeds_active_value_set(self, build_state):
        state = build_state("review", [("A", "core")], statements={1: "x"}, value_set="all")
        result = apply(state, Restart())
        assert result.current_part == "part1"
        assert result.value_set == "all"
        assert len(result.cards) == 83
        assert result.final_statements == {}

    def test_toggle_switches_set_and_resets_progress(self, build_state):
        state = build_state("part4", [("A", "core")], statements={1: "x"})

        result = apply(state, ToggleValueSet())

        assert result.value_set == "all"
        assert result.current_part == "part1"
        assert result.final_statements == {}
        assert len(result.cards) == 83

    def test_toggle_back_to_limited(self):
        result = apply(default_state("all"), ToggleValueSet())
        assert result.value_set == "limited"
        assert len(result.cards) == 10


# ---------------------------------------------------------------------------
# Card mutations
# ---------------------------------------------------------------------------


class TestMoveCard:

    def test_unknown_card_is_a_noop(self, fresh_state):
        assert apply(fresh_state, MoveCard(999, "important")) is None

    def test_move_sets_column_and_restamps_order(self, fresh_state):
        result = apply(fresh_state, MoveCard(1, "veryImportant"))
        card = result.find_card(1)
        assert card.column == "veryImportant"
        assert card.order > max(c.order for c in fresh_state.cards)

    def test_successive_moves_get_increasing_order(self, fresh_state):
        first = apply(fresh_state, MoveCard(1, "important"))
        second = apply(first, MoveCard(2, "important"))
        assert second.find_card(2).order > second.find_card(1).order

    def test_column_must_belong_to_current_part(self, fresh_state):
        with pytest.raises(StageMismatchError):
            apply(fresh_state, MoveCard(1, "core"))

    def test_part3_core_cap_blocks_new_entries(self, build_state):
        state = build_state("part3", [*[(f"C{i}", "core") for i in range(5)], ("A1", "additional")])

        with pytest.raises(CoreOverflowError):
            apply(state, MoveCard(6, "core"))

    def test_part3_card_already_core_can_be_redropped(self, build_state):
        state = build_state("part3", [*[(f"C{i}", "core") for i in range(5)], ("A1", "additional")])
        result = apply(state, MoveCard(1, "core"))
        assert result.find_card(1).column == "core"

    def test_part3_below_cap_accepts_new_core(self, build_state):
        state = build_state("part3", [*[(f"C{i}", "core") for i in range(4)], ("A1", "additional"), ("A2", "additional")])
        result = apply(state, MoveCard(5, "core"))
        assert len(result.cards_in("core")) == 5

    def test_part3_can_move_core_to_additional(self, build_state):
        state = build_state("part3", [(f"C{i}", "core") for i in range(6)])
        result = apply(state, MoveCard(1, "additional"))
        assert len(result.cards_in("core")) == 5


class TestAddCustomValue:

    def test_new_card_is_custom_unassigned_with_negative_id(self, fresh_state):
        result = apply(fresh_state, AddCustomValue("  my value ", " something I care about "))

        card = next(c for c in result.cards if c.is_custom)
        assert card.id < 0
        assert card.name == "MY VALUE"
        assert card.column == "unassigned"
        assert card.description == "something I care about"
        assert len(result.cards) == 11

    def test_duplicate_name_is_rejected_case_insensitively(self, fresh_state):
        state = apply(fresh_state, AddCustomValue("MY VALUE", "first"))

        with pytest.raises(DuplicateNameError):
            apply(state, AddCustomValue("my value", "second"))

    def test_duplicate_of_builtin_is_rejected(self, fresh_state):
        with pytest.raises(DuplicateNameError):
            apply(fresh_state, AddCustomValue("acceptance", "again"))

    @pytest.mark.parametrize("name,description,field", [
        ("", "desc", "name"),
        ("   ", "desc", "name"),
        ("NAME", "", "description"),
        ("NAME", "  ", "description"),
    ])
    def test_empty_fields_are_rejected(self, fresh_state, name, description, field):
        with pytest.raises(EmptyFieldError) as exc_info:
            apply(fresh_state, AddCustomValue(name, description))
        assert exc_info.value.field == field

    def test_ids_keep_decreasing(self, fresh_state):
        first = apply(fresh_state, AddCustomValue("ALPHA", "a"))
        second = apply(first, AddCustomValue("BETA", "b"))
        ids = sorted(c.id for c in second.cards if c.is_custom)
        assert ids == [-2, -1]
        assert next_custom_id(second) == -3

    def test_unassigned_cards_are_sorted_alphabetically(self, build_state):
        state = build_state("part1", [("ZEAL", "unassigned"), ("FUN", "important"), ("BEAUTY", "unassigned")])

        result = apply(state, AddCustomValue("MERCY", "kindness"))

        assert [c.name for c in result.cards] == ["BEAUTY", "MERCY", "ZEAL", "FUN"]
        assert [c.order for c in result.cards_in("unassigned")] == [0, 1, 2]
        assert result.find_card(2).order == 1

    def test_rejected_after_narrowing(self, build_state):
        state = build_state("part3", [("A", "core")])
        with pytest.raises(StageMismatchError):
            apply(state, AddCustomValue("NEW", "desc"))


class TestDescriptionEditing:

    def test_start_editing_sets_card(self, fresh_state):
        result = apply(fresh_state, StartEditingDescription(3))
        assert result.editing_description_card_id == 3

    def test_starting_another_edit_supersedes(self, fresh_state):
        state = apply(fresh_state, StartEditingDescription(3))
        result = apply(state, StartEditingDescription(4))
        assert result.editing_description_card_id == 4

    def test_start_editing_unknown_card_is_a_noop(self, fresh_state):
        assert apply(fresh_state, StartEditingDescription(999)) is None

    def test_save_trims_text_and_leaves_edit_mode(self, fresh_state):
        state = apply(fresh_state, StartEditingDescription(3))
        result = apply(state, SaveDescriptionEdit(3, "  my own words  "))
        assert result.find_card(3).description == "my own words"
        assert result.editing_description_card_id is None

    def test_save_unknown_card_still_clears_edit_mode(self, fresh_state):
        state = apply(fresh_state, StartEditingDescription(3))
        result = apply(state, SaveDescriptionEdit(999, "text"))
        assert result.editing_description_card_id is None
        assert result.cards == state.cards

    def test_blank_text_restores_builtin_description(self, fresh_state):
        state = apply(fresh_state, SaveDescriptionEdit(3, "override"))
        result = apply(state, SaveDescriptionEdit(3, "   "))
        assert result.find_card(3).description is None

    def test_blank_text_on_custom_card_is_rejected(self, fresh_state):
        state = apply(fresh_state, AddCustomValue("MINE", "desc"))
        custom_id = next(c.id for c in state.cards if c.is_custom)
        with pytest.raises(EmptyFieldError):
            apply(state, SaveDescriptionEdit(custom_id, ""))

    def test_cancel_only_clears_edit_mode(self, fresh_state):
        state = apply(fresh_state, StartEditingDescription(3))
        result = apply(state, CancelDescriptionEdit())
        assert result.editing_description_card_id is None
        assert result.cards == state.cards

    def test_narrowing_clears_edit_mode_for_dropped_card(self, build_state):
        state = build_state("part1", [("A", "veryImportant"), ("B", "important")])
        state.editing_description_card_id = 2
        result = apply(state, Advance())
        assert result.editing_description_card_id is None


class TestUpdateStatement:

    def test_sets_statement_for_core_card(self, build_state):
        state = build_state("part4", [("A", "core")])
        result = apply(state, UpdateStatement(1, "It matters"))
        assert result.final_statements == {1: "It matters"}

    def test_non_core_card_is_a_noop(self, build_state):
        state = build_state("part4", [("A", "core"), ("B", "additional")])
        assert apply(state, UpdateStatement(2, "nope")) is None

    def test_unchanged_text_is_a_noop(self, build_state):
        state = build_state("part4", [("A", "core")], statements={1: "same"})
        assert apply(state, UpdateStatement(1, "same")) is None

    def test_outside_part4_is_rejected(self, fresh_state):
        with pytest.raises(StageMismatchError):
            apply(fresh_state, UpdateStatement(1, "text"))


class TestUnknownCommand:

    def test_raises_type_error(self, fresh_state):
        with pytest.raises(TypeError):
            apply(fresh_state, object())


def test_core_limit_is_configurable(build_state):
    state = build_state("part2", [(f"V{i}", "veryImportant") for i in range(4)])
    assert apply(state, Advance(), core_limit=3).current_part == "part3"
    assert workflow.CORE_LIMIT == 5
