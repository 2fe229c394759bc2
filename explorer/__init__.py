"""
Map Explorer - grows a character map from line-of-sight reports.

    from explorer import ExplorerEnv
"""

from .core import Command, CommandType, Facing, TurnDirection
from .world import Grid, ActorState
from .mechanics import NavigationEngine, NavigationResult
from .environment import ExplorerEnv, StepResult

__all__ = [
    "Command",
    "CommandType",
    "Facing",
    "TurnDirection",
    "Grid",
    "ActorState",
    "NavigationEngine",
    "NavigationResult",
    "ExplorerEnv",
    "StepResult",
]
