"""
Scripted attribute selection session.

Usage:
    python -m src.attribute_assignment.run_selector 15 14 13 12 10 9 8 0:STR 1:COR reset 2:LUC

Numeric arguments seed the score pool; ``POSITION:SLOT`` arguments are
applied as moves in order; ``reset`` restores the original pool.
"""

import logging
import math
import sys
from typing import List, Sequence, Tuple

from src.attribute_assignment.assignment_engine import AssignmentEngine
from src.attribute_assignment.assignment_state import ScoreValue
from src.attribute_assignment.config import DEFAULT_LOG_LEVEL, RESET_COMMAND
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _parse_number(text: str) -> ScoreValue:
    try:
        return int(text)
    except ValueError:
        value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Score value must be finite, got '{text}'")
    return value


def parse_arguments(args: Sequence[str]) -> Tuple[List[ScoreValue], List[str]]:
    """Split command-line arguments into initial values and commands.

    Leading numeric arguments are values; everything from the first
    non-numeric argument on is a command.
    """
    values: List[ScoreValue] = []
    for index, arg in enumerate(args):
        try:
            values.append(_parse_number(arg))
        except ValueError:
            return values, list(args[index:])
    return values, []


def run_session(values: Sequence[ScoreValue], commands: Sequence[str]) -> AssignmentEngine:
    """Initialize an engine and replay commands against it.

    Args:
        values: Initial score pool, one value per attribute slot.
        commands: ``"POSITION:SLOT"`` moves or the reset command.

    Returns:
        The engine in its final state.

    Raises:
        ValueError: If the values are invalid or a command is malformed.
    """
    engine = AssignmentEngine()
    engine.initialize(values)

    for command in commands:
        if command.strip().lower() == RESET_COMMAND:
            engine.reset()
            continue

        position_text, sep, slot = command.partition(":")
        if not sep or not position_text.strip().isdecimal():
            raise ValueError(
                f"Malformed command '{command}'. "
                f"Expected POSITION:SLOT or '{RESET_COMMAND}'"
            )

        result = engine.move(int(position_text), slot)
        if not result.accepted:
            logger.warning("Move %s ignored: %s", command, result.reason)

    return engine


if __name__ == "__main__":
    setup_logging(DEFAULT_LOG_LEVEL)

    values, commands = parse_arguments(sys.argv[1:])

    try:
        engine = run_session(values, commands)
    except ValueError:
        logger.exception("Selection session failed")
        sys.exit(1)

    print(engine.get_attribute_table().to_string(index=False))
    if engine.is_complete:
        print("All attributes assigned.")
