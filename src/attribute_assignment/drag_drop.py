"""Drag-and-drop boundary - turns presentation-layer ids into engine calls.

Drag sources are encoded as ``draggable<INDEX>`` and drop targets as
``droppable<SLOT>``. Only this module knows about the string encoding.
"""

import logging
from typing import Optional

from src.attribute_assignment.assignment_engine import AssignmentEngine
from src.attribute_assignment.assignment_state import (
    AssignmentState,
    MoveResult,
    parse_slot,
)
from src.attribute_assignment.config import DRAGGABLE_PREFIX, DROPPABLE_PREFIX

logger = logging.getLogger(__name__)


def parse_source_id(drag_id: object) -> Optional[int]:
    """Parse a source id ("draggable3" -> 3). None if it does not parse."""
    text = str(drag_id)
    if not text.startswith(DRAGGABLE_PREFIX):
        return None
    suffix = text[len(DRAGGABLE_PREFIX):]
    if not suffix.isdecimal():
        return None
    return int(suffix)


def parse_target_id(drop_id: object) -> Optional[str]:
    """Parse a target id ("droppableSTR" -> "STR"). None if it does not parse."""
    text = str(drop_id)
    if not text.startswith(DROPPABLE_PREFIX):
        return None
    try:
        return parse_slot(text[len(DROPPABLE_PREFIX):])
    except ValueError:
        return None


def make_source_id(position: int) -> str:
    return f"{DRAGGABLE_PREFIX}{position}"


def make_target_id(slot: str) -> str:
    return f"{DROPPABLE_PREFIX}{parse_slot(slot)}"


class DragDropAdapter:
    """Forwards drag-release and reset gestures to an AssignmentEngine."""

    def __init__(self, engine: AssignmentEngine):
        self.engine = engine

    def handle_drag_end(
        self, active_id: object, over_id: Optional[object]
    ) -> Optional[MoveResult]:
        """Handle a drag release.

        Args:
            active_id: Id of the dragged element ("draggable<INDEX>").
            over_id: Id of the element it was dropped on, or None if it was
                released outside any drop target.

        Returns:
            The engine's MoveResult, or None if the gesture was ignored
            before reaching the engine.
        """
        if over_id is None:
            return None

        position = parse_source_id(active_id)
        slot = parse_target_id(over_id)
        if position is None or slot is None:
            logger.debug(
                "Ignoring drop with unrecognized ids: active=%r over=%r",
                active_id,
                over_id,
            )
            return None

        return self.engine.move(position, slot)

    def handle_reset(self) -> AssignmentState:
        """Handle the reset control."""
        return self.engine.reset()
