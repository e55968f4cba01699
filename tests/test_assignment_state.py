"""Tests for assignment state data models."""

import pytest

from src.attribute_assignment.assignment_state import (
    AssignmentState,
    MoveResult,
    get_slot_name,
    parse_slot,
)
from src.attribute_assignment.config import ATTRIBUTE_SLOTS


# ── Helpers ──────────────────────────────────────────────────────────

def _make_state(values=None):
    return AssignmentState.create_new(values or [15, 14, 13, 12, 10, 9, 8])


# ── Slot parsing ─────────────────────────────────────────────────────

class TestParseSlot:
    def test_known_slot(self):
        assert parse_slot("STR") == "STR"

    def test_case_insensitive(self):
        assert parse_slot("luc") == "LUC"
        assert parse_slot(" Per ") == "PER"

    def test_unknown_slot(self):
        with pytest.raises(ValueError, match="Unknown attribute slot 'DEX'"):
            parse_slot("DEX")

    def test_slot_names(self):
        assert get_slot_name("STR") == "Strength"
        assert get_slot_name("cor") == "Coordination"
        assert get_slot_name("PRS") == "Presence"


# ── Construction ─────────────────────────────────────────────────────

class TestCreateNew:
    def test_pool_is_tuple_of_values(self):
        state = _make_state()
        assert state.pool == (15, 14, 13, 12, 10, 9, 8)

    def test_every_slot_unassigned(self):
        state = _make_state()
        assert set(state.assignment) == set(ATTRIBUTE_SLOTS)
        assert all(v is None for v in state.assignment.values())

    def test_accepts_floats(self):
        state = _make_state([1.5, 2, 3, 4, 5, 6, 7])
        assert state.pool[0] == 1.5

    def test_duplicate_values_allowed(self):
        state = _make_state([10, 10, 10, 10, 10, 10, 10])
        assert state.remaining_values() == [10] * 7

    def test_wrong_length_rejected(self):
        with pytest.raises(ValueError, match="must match"):
            AssignmentState.create_new([15, 14, 13])

    def test_non_numeric_rejected(self):
        with pytest.raises(ValueError, match="position 2 must be a finite number"):
            AssignmentState.create_new([15, 14, "13", 12, 10, 9, 8])

    def test_none_rejected(self):
        with pytest.raises(ValueError, match="must be a finite number"):
            AssignmentState.create_new([15, None, 13, 12, 10, 9, 8])

    def test_bool_rejected(self):
        with pytest.raises(ValueError, match="must be a finite number"):
            AssignmentState.create_new([True, 14, 13, 12, 10, 9, 8])

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rejected(self, bad):
        with pytest.raises(ValueError, match="position 0 must be a finite number"):
            AssignmentState.create_new([bad, 14, 13, 12, 10, 9, 8])

    def test_default_state_covers_every_slot(self):
        state = AssignmentState()
        assert state.pool == ()
        assert set(state.assignment) == set(ATTRIBUTE_SLOTS)


# ── Transitions ──────────────────────────────────────────────────────

class TestWithMove:
    def test_moves_value_into_slot(self):
        state = _make_state().with_move(0, "STR")
        assert state.assignment["STR"] == 15
        assert state.pool == (None, 14, 13, 12, 10, 9, 8)

    def test_original_untouched(self):
        original = _make_state()
        original.with_move(0, "STR")
        assert original.pool[0] == 15
        assert original.assignment["STR"] is None

    def test_state_is_frozen(self):
        state = _make_state()
        with pytest.raises(AttributeError):
            state.pool = ()

    def test_assignment_map_is_read_only(self):
        state = _make_state()
        with pytest.raises(TypeError):
            state.assignment["STR"] = 99
        assert state.assignment["STR"] is None

    def test_source_dict_is_copied(self):
        source = {slot: None for slot in ATTRIBUTE_SLOTS}
        state = AssignmentState(pool=(15,), assignment=source)
        source["STR"] = 15
        assert state.assignment["STR"] is None

    def test_state_is_hashable(self):
        a = _make_state().with_move(0, "STR")
        b = _make_state().with_move(0, "STR")
        assert a == b
        assert hash(a) == hash(b)

    def test_equal_to_plain_dict_map(self):
        state = _make_state()
        assert state.assignment == {slot: None for slot in ATTRIBUTE_SLOTS}


# ── Queries ──────────────────────────────────────────────────────────

class TestQueries:
    def test_position_availability(self):
        state = _make_state().with_move(3, "INT")
        assert state.is_position_available(0)
        assert not state.is_position_available(3)
        assert not state.is_position_available(7)
        assert not state.is_position_available(-1)

    def test_slot_open(self):
        state = _make_state().with_move(3, "INT")
        assert state.is_slot_open("STR")
        assert not state.is_slot_open("INT")
        assert not state.is_slot_open("DEX")

    def test_open_slots_in_display_order(self):
        state = _make_state().with_move(0, "COR")
        assert state.open_slots() == ["STR", "STA", "PER", "INT", "PRS", "LUC"]

    def test_available_positions(self):
        state = _make_state().with_move(1, "STR").with_move(4, "LUC")
        assert state.available_positions() == [0, 2, 3, 5, 6]

    def test_remaining_and_assigned_values(self):
        state = _make_state().with_move(1, "STR").with_move(4, "LUC")
        assert sorted(state.assigned_values()) == [10, 14]
        assert state.remaining_values() == [15, 13, 12, 9, 8]

    def test_is_complete(self):
        state = _make_state()
        assert not state.is_complete()
        for position, slot in enumerate(ATTRIBUTE_SLOTS):
            state = state.with_move(position, slot)
        assert state.is_complete()
        assert state.remaining_values() == []


class TestMoveResult:
    def test_defaults(self):
        result = MoveResult(accepted=False, source_position=0, target_slot="STR")
        assert result.value is None
        assert result.reason is None
