from src.attribute_assignment.assignment_engine import AssignmentEngine
from src.attribute_assignment.assignment_rules import AssignmentRules
from src.attribute_assignment.assignment_state import (
    AssignmentState,
    MoveResult,
    get_slot_name,
    parse_slot,
)
from src.attribute_assignment.drag_drop import (
    DragDropAdapter,
    parse_source_id,
    parse_target_id,
)

__all__ = [
    "AssignmentEngine",
    "AssignmentRules",
    "AssignmentState",
    "DragDropAdapter",
    "MoveResult",
    "get_slot_name",
    "parse_slot",
    "parse_source_id",
    "parse_target_id",
]
