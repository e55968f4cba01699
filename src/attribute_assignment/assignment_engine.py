"""Assignment engine - owns the pool/slot state and applies moves and resets."""

import logging
from typing import Callable, List, Optional, Sequence

import pandas as pd

from src.attribute_assignment.assignment_rules import AssignmentRules
from src.attribute_assignment.assignment_state import (
    AssignmentState,
    MoveResult,
    ScoreValue,
    parse_slot,
)
from src.attribute_assignment.config import ATTRIBUTE_NAMES, ATTRIBUTE_SLOTS

logger = logging.getLogger(__name__)

StateListener = Callable[[AssignmentState], None]


class AssignmentEngine:
    """Main controller for assigning pool values to attribute slots.

    Coordinates between AssignmentRules (validation) and AssignmentState
    (the pool/slot pair). State is never edited in place: each transition
    swaps in a new AssignmentState and notifies subscribed listeners.
    """

    def __init__(self):
        self.rules = AssignmentRules()
        self._state = AssignmentState()
        self._initial_values: tuple = ()
        self._initialized = False
        self._listeners: List[StateListener] = []

    # ── Lifecycle ────────────────────────────────────────────────────

    def initialize(self, values: Sequence[ScoreValue]) -> bool:
        """Seed the pool with the starting values.

        Repeated calls after the first are ignored so that a presentation
        layer may call this on every mount/update.

        Returns:
            True if the engine was seeded, False if it was already initialized.

        Raises:
            ValueError: If the number of values does not match the number of
                slots, or a value is not a finite number.
        """
        if self._initialized:
            logger.debug("Initialize ignored: engine already initialized")
            return False

        state = AssignmentState.create_new(values)
        self._initial_values = state.pool
        self._initialized = True
        self._state = state

        logger.info("Initialized score pool: %s", list(state.pool))
        self._notify()
        return True

    def reset(self) -> AssignmentState:
        """Clear every slot and restore the pool captured at initialize."""
        self._state = AssignmentState(pool=self._initial_values)
        logger.info("Reset assignment; pool restored to %s", list(self._initial_values))
        self._notify()
        return self._state

    # ── Moves ────────────────────────────────────────────────────────

    def move(self, source_position: int, target_slot: str) -> MoveResult:
        """Move the value at a pool position into an attribute slot.

        Illegal moves (slot already filled, position already empty, unknown
        slot or position) leave the state untouched and do not raise.
        Listeners run after the move is applied; an error raised by a
        listener reaches the caller, but the move stays applied.

        Returns:
            MoveResult describing whether the move was applied.
        """
        is_valid, error_msg = self.rules.validate_move(
            self._state, source_position, target_slot
        )
        if not is_valid:
            logger.debug("Move rejected: %s", error_msg)
            return MoveResult(
                accepted=False,
                source_position=source_position,
                target_slot=target_slot,
                reason=error_msg,
            )

        position = int(source_position)
        slot = parse_slot(target_slot)
        value = self._state.pool[position]
        self._state = self._state.with_move(position, slot)

        logger.info(
            "Assigned %s to %s (%s) from pool position %d",
            value,
            slot,
            ATTRIBUTE_NAMES[slot],
            position,
        )
        result = MoveResult(
            accepted=True,
            source_position=position,
            target_slot=slot,
            value=value,
        )
        self._notify()
        return result

    def assign_in_order(self) -> List[MoveResult]:
        """Move pool position i into slot i wherever both are still free.

        Used when scores are fixed by roll order rather than chosen.
        """
        results = []
        for position, slot in enumerate(ATTRIBUTE_SLOTS):
            if self._state.is_position_available(position) and self._state.is_slot_open(slot):
                results.append(self.move(position, slot))
        return results

    # ── Queries ──────────────────────────────────────────────────────

    def get_state(self) -> AssignmentState:
        """Current (pool, assignment) snapshot for rendering."""
        return self._state

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def is_complete(self) -> bool:
        """Whether every slot has been assigned."""
        return self._state.is_complete()

    @property
    def initial_values(self) -> tuple:
        """The values captured at initialize; reset restores these."""
        return self._initial_values

    def get_open_slots(self) -> List[str]:
        return self._state.open_slots()

    def get_available_positions(self) -> List[int]:
        return self._state.available_positions()

    def get_score(self, slot: str) -> Optional[ScoreValue]:
        """Get the score assigned to a slot (None if unassigned)."""
        return self._state.get_score(parse_slot(slot))

    def get_attribute_table(self) -> pd.DataFrame:
        """Build the attribute/score/value table drawn by the selector.

        One row per slot in display order. ``value`` is the pool entry at
        the same row index, so rows line up with the draggable values.
        """
        pool = self._state.pool
        rows = []
        for index, slot in enumerate(ATTRIBUTE_SLOTS):
            rows.append(
                {
                    "attribute": slot,
                    "name": ATTRIBUTE_NAMES[slot],
                    "score": self._state.get_score(slot),
                    "value": pool[index] if index < len(pool) else None,
                }
            )
        # object dtype keeps empty cells as None instead of NaN
        return pd.DataFrame(
            rows, columns=["attribute", "name", "score", "value"], dtype=object
        )

    # ── Observers ────────────────────────────────────────────────────

    def subscribe(self, listener: StateListener) -> None:
        """Register a callback invoked with the new state after each change."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self):
        """Call listeners with the current state; listener errors propagate."""
        for listener in list(self._listeners):
            listener(self._state)
