"""
ActorState - position and facing of the single explorer.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Dict

from ..core.types import Facing, GridPos


@dataclass
class ActorState:
    """
    Where the actor stands and which way it looks.

    Attributes:
        row: Row index of the occupied cell
        col: Column index of the occupied cell
        facing: Current facing direction
    """
    row: int = 1
    col: int = 1
    facing: Facing = Facing.NORTH

    @property
    def pos(self) -> GridPos:
        return (self.row, self.col)

    def ahead(self, facing: Facing | None = None) -> GridPos:
        """Position one step away in the given (default: current) facing."""
        drow, dcol = (facing or self.facing).delta
        return (self.row + drow, self.col + dcol)

    def copy(self) -> ActorState:
        """Return an independent copy for rollback."""
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dict."""
        return {
            "row": self.row,
            "col": self.col,
            "facing": self.facing.name,
        }
