"""Move legality checks for the assignment engine."""

from numbers import Integral
from typing import Optional, Tuple

from src.attribute_assignment.assignment_state import AssignmentState, parse_slot


class AssignmentRules:
    """Enforces the rules for moving a pool value into a slot."""

    def validate_move(
        self, state: AssignmentState, source_position: object, target_slot: object
    ) -> Tuple[bool, Optional[str]]:
        """
        Validate if a move is legal against the given state.

        Returns:
            (is_valid, error_message) - (True, None) if valid
        """
        # Check 1: Is the target a known slot?
        try:
            slot = parse_slot(target_slot)
        except ValueError as e:
            return False, str(e)

        # Check 2: Is the source a real pool position?
        if isinstance(source_position, bool) or not isinstance(
            source_position, Integral
        ):
            return False, f"Pool position {source_position!r} is not an integer"
        if not 0 <= source_position < len(state.pool):
            return (
                False,
                f"Pool position {source_position} out of range "
                f"[0, {len(state.pool)})",
            )

        # Check 3: Does the position still hold a value?
        if not state.is_position_available(source_position):
            return False, f"Pool position {source_position} is already empty"

        # Check 4: Is the slot still open?
        if not state.is_slot_open(slot):
            return (
                False,
                f"{slot} already has a score ({state.get_score(slot)})",
            )

        return True, None
