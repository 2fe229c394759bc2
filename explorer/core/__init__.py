"""
Core types and constants for the Map Explorer.
"""

# Instead of from explorer.core.types import Facing, you can do: from explorer.core import Facing
from .types import (
    GridPos,
    Facing,
    CommandType,
    TurnDirection,
    CommandValidation,
    INITIAL_MAP_SIZE,
    SEQUENCE_LENGTH,
    UNSEEN,
    WALL,
    FLOOR,
)
from .validation import is_valid_sequence, validate_command
from .commands import Command


__all__ = [
    "GridPos",
    "Facing",
    "CommandType",
    "TurnDirection",
    "CommandValidation",
    "Command",
    "INITIAL_MAP_SIZE",
    "SEQUENCE_LENGTH",
    "UNSEEN",
    "WALL",
    "FLOOR",
    "is_valid_sequence",
    "validate_command",
]
