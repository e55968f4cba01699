"""Assignment state data models - the pool and slot map, replaced as a pair."""

import math
from dataclasses import dataclass, field
from numbers import Real
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple, Union

from src.attribute_assignment.config import ATTRIBUTE_NAMES, ATTRIBUTE_SLOTS

ScoreValue = Union[int, float]


def parse_slot(slot: str) -> str:
    """Normalize a slot identifier ("str" -> "STR").

    Raises:
        ValueError: If the identifier is not one of ATTRIBUTE_SLOTS.
    """
    normalized = str(slot).strip().upper()
    if normalized not in ATTRIBUTE_SLOTS:
        raise ValueError(
            f"Unknown attribute slot '{slot}'. "
            f"Must be one of: {', '.join(ATTRIBUTE_SLOTS)}"
        )
    return normalized


def get_slot_name(slot: str) -> str:
    """Get the display name for a slot (STR -> Strength)."""
    return ATTRIBUTE_NAMES[parse_slot(slot)]


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a single move request."""

    accepted: bool
    source_position: object
    target_slot: object
    value: Optional[ScoreValue] = None
    reason: Optional[str] = None  # Why the move was rejected


@dataclass(frozen=True)
class AssignmentState:
    """Pool of score values plus the slot assignment map.

    Instances are never changed after construction. The assignment map is a
    read-only view; every transition builds a new state, so a state handed
    to a renderer stays consistent.
    """

    pool: Tuple[Optional[ScoreValue], ...] = ()
    assignment: Mapping[str, Optional[ScoreValue]] = field(
        default_factory=lambda: {slot: None for slot in ATTRIBUTE_SLOTS},
        hash=False,
    )

    def __post_init__(self):
        object.__setattr__(self, "pool", tuple(self.pool))
        object.__setattr__(
            self, "assignment", MappingProxyType(dict(self.assignment))
        )

    @classmethod
    def create_new(cls, values: Sequence[ScoreValue]) -> "AssignmentState":
        """Factory method to create an unassigned state from initial values."""
        values = tuple(values)
        if len(values) != len(ATTRIBUTE_SLOTS):
            raise ValueError(
                f"values length ({len(values)}) must match "
                f"number of attribute slots ({len(ATTRIBUTE_SLOTS)})"
            )
        for position, value in enumerate(values):
            if (
                isinstance(value, bool)
                or not isinstance(value, Real)
                or not math.isfinite(value)
            ):
                raise ValueError(
                    f"Score value at position {position} must be a finite "
                    f"number, got {value!r}"
                )

        return cls(pool=values)

    def is_position_available(self, position: int) -> bool:
        """Check if a pool position still holds a value."""
        return 0 <= position < len(self.pool) and self.pool[position] is not None

    def is_slot_open(self, slot: str) -> bool:
        """Check if a slot has not been assigned yet."""
        return slot in self.assignment and self.assignment[slot] is None

    def get_score(self, slot: str) -> Optional[ScoreValue]:
        """Get the value assigned to a slot (None if unassigned)."""
        return self.assignment.get(slot)

    def with_move(self, position: int, slot: str) -> "AssignmentState":
        """Build the state that results from moving pool[position] into slot.

        Legality is checked by AssignmentRules; this only performs the copy.
        """
        pool = list(self.pool)
        assignment = dict(self.assignment)
        assignment[slot] = pool[position]
        pool[position] = None
        return AssignmentState(pool=tuple(pool), assignment=assignment)

    def available_positions(self) -> List[int]:
        """Pool positions that can still be used as a move source."""
        return [i for i, value in enumerate(self.pool) if value is not None]

    def open_slots(self) -> List[str]:
        """Slots still unassigned, in display order."""
        return [slot for slot in ATTRIBUTE_SLOTS if self.assignment.get(slot) is None]

    def remaining_values(self) -> List[ScoreValue]:
        """Values still sitting in the pool."""
        return [value for value in self.pool if value is not None]

    def assigned_values(self) -> List[ScoreValue]:
        """Values already placed in slots."""
        return [value for value in self.assignment.values() if value is not None]

    def is_complete(self) -> bool:
        """Every slot has a value."""
        return not self.open_slots()
