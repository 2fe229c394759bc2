"""
World state for the Map Explorer.

This module provides:
- Grid: Character map storage, growth, snapshots and rendering
- ActorState: Position and facing of the explorer
"""

from .grid import Grid
from .actor import ActorState

__all__ = [
    "Grid",
    "ActorState",
]
