"""
Core type definitions for the Map Explorer.

This module contains all fundamental types, enums, and constants used
throughout the system. No logic beyond direction arithmetic, just pure data
structures.
"""

from __future__ import annotations
from enum import Enum, auto
from typing import FrozenSet, Tuple
from dataclasses import dataclass
import string

# ============================================================================
# SPATIAL TYPES
# ============================================================================

# Grid position: (row, col) where:
# - ROW increases DOWNWARD (screen convention)
# - COL increases to the RIGHT
# - Origin (0, 0) is the TOP-LEFT cell
GridPos = Tuple[int, int]

# Edge length of the world before any growth
INITIAL_MAP_SIZE = 3

# Number of cells revealed by every move or turn
SEQUENCE_LENGTH = 3


# ============================================================================
# CELLS
# ============================================================================

UNSEEN = " "
WALL = "#"
FLOOR = "."

# Characters allowed in a revealed sequence
REVEAL_CHARS: FrozenSet[str] = frozenset(FLOOR + WALL + string.ascii_lowercase)

# Characters that may be stored in the grid
CELL_CHARS: FrozenSet[str] = REVEAL_CHARS | {UNSEEN}


class Facing(Enum):
    """
    Actor facing directions using screen coordinates (row+ = DOWN).
    Each direction provides a delta tuple (drow, dcol).
    """
    NORTH = (-1, 0)  # Toward row 0
    EAST = (0, 1)  # Toward higher columns
    SOUTH = (1, 0)  # Toward higher rows
    WEST = (0, -1)  # Toward column 0

    @property
    def delta(self) -> Tuple[int, int]:
        """Get the (drow, dcol) movement delta."""
        return self.value

    @property
    def glyph(self) -> str:
        """Get the display glyph drawn over the actor's cell."""
        return {
            Facing.NORTH: "^",
            Facing.EAST: ">",
            Facing.SOUTH: "V",
            Facing.WEST: "<",
        }[self]

    @property
    def right(self) -> Facing:
        """Facing after a clockwise quarter turn."""
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 1) % 4]

    @property
    def left(self) -> Facing:
        """Facing after a counter-clockwise quarter turn."""
        return _CLOCKWISE[(_CLOCKWISE.index(self) - 1) % 4]

    def __str__(self) -> str:
        return self.name


_CLOCKWISE = (Facing.NORTH, Facing.EAST, Facing.SOUTH, Facing.WEST)


# ============================================================================
# COMMANDS
# ============================================================================

class CommandType(Enum):
    """Keywords of the command language."""
    FORWARD = "forward"  # Step one cell ahead
    LEFT = "left"  # Quarter turn counter-clockwise
    RIGHT = "right"  # Quarter turn clockwise
    QUIT = "quit"  # Stop reading commands

    def __str__(self) -> str:
        return self.value

    @property
    def takes_sequence(self) -> bool:
        """Whether the keyword must be followed by a revealed sequence."""
        return self is not CommandType.QUIT


class TurnDirection(Enum):
    """Rotation applied by a turn command."""
    LEFT = auto()
    RIGHT = auto()

    def apply(self, facing: Facing) -> Facing:
        """Return the facing that results from turning this way."""
        return facing.left if self is TurnDirection.LEFT else facing.right

    def __str__(self) -> str:
        return self.name


# ============================================================================
# COMMAND VALIDATION
# ============================================================================

@dataclass
class CommandValidation:
    """
    Structured result of validating or attempting a command.

    This provides detailed information about why a command is valid or
    invalid, so the runner can pick the right diagnostic.

    Attributes:
        valid: Whether the command is valid
        error_code: Machine-readable error code (None if valid)
        message: Human-readable message explaining the result

    Error codes:
        - "UNKNOWN_COMMAND": Keyword is not part of the command language
        - "MISSING_SEQUENCE": Keyword needs a sequence but none was given
        - "INVALID_SEQUENCE": Sequence is not 3 characters of '.', '#', a-z
        - "BLOCKED": A wall is directly ahead
        - "INCONSISTENT_MAP": Sequence contradicts cells already revealed
    """
    valid: bool
    error_code: str | None = None
    message: str = ""

    @staticmethod
    def success(message: str = "") -> CommandValidation:
        """Create a validation success result."""
        return CommandValidation(valid=True, error_code=None, message=message)

    @staticmethod
    def fail(error_code: str, message: str) -> CommandValidation:
        """Create a validation failure result."""
        return CommandValidation(valid=False, error_code=error_code, message=message)
