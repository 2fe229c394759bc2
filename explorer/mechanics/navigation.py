"""
NavigationEngine - Actor movement and map revelation.

This module handles:
- Blocked-move detection
- Stepping forward and turning
- Growing the grid when the actor reaches an edge
- Applying revealed sequences with confirm-or-reject semantics
- Rolling back to the snapshot when a sequence contradicts the map
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

from infra.logger import get_logger

from ..core.types import (
    CommandType,
    CommandValidation,
    Facing,
    GridPos,
    TurnDirection,
    UNSEEN,
    WALL,
)
from ..core.validation import is_valid_sequence
from ..world.actor import ActorState
from ..world.grid import Grid
from .scan import scan_cells

log = get_logger(__name__)


@dataclass
class NavigationResult:
    """
    Result of attempting a single navigation command.

    Attributes:
        command: Command that was attempted
        success: Whether the command was committed
        old_pos: Actor position before the attempt
        new_pos: Actor position after the attempt (same as old if failed)
        old_facing: Facing before the attempt
        new_facing: Facing after the attempt (same as old if failed)
        failure_reason: Machine-readable reason code when the command fails
        message: Human-readable diagnostic for failures
        rendered: Rendered map text when the command succeeded
    """
    command: CommandType
    success: bool
    old_pos: GridPos
    new_pos: GridPos
    old_facing: Facing
    new_facing: Facing
    failure_reason: str | None = None
    message: str = ""
    rendered: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the move (map text excluded) to a plain dict."""
        return {
            "command": self.command.value,
            "success": self.success,
            "old_pos": self.old_pos,
            "new_pos": self.new_pos,
            "old_facing": self.old_facing.name,
            "new_facing": self.new_facing.name,
            "failure_reason": self.failure_reason,
            "message": self.message,
        }


class NavigationEngine:
    """
    Owns the map and the actor, and applies commands atomically.

    Every attempt follows the same protocol:
    snapshot -> tentative mutation -> validate -> commit or rollback.
    A failed attempt leaves the grid, position and facing exactly as
    they were.

    Attributes:
        grid: The live map
        actor: Actor position and facing
    """

    def __init__(self, grid: Optional[Grid] = None, actor: Optional[ActorState] = None):
        """
        Initialize the engine.

        Args:
            grid: Starting map (default: the 3x3 unseen map)
            actor: Starting actor (default: centre of the 3x3 map, facing NORTH)

        Raises:
            ValueError: If the actor does not stand inside the grid
        """
        self.grid = grid if grid is not None else Grid.create_initial()
        self.actor = actor if actor is not None else ActorState()

        if not self.grid.in_bounds(*self.actor.pos):
            raise ValueError(f"Actor position {self.actor.pos} outside {self.grid}")

        # Single rollback point, replaced by every attempt
        self._saved_grid: Optional[Grid] = None
        self._saved_actor: Optional[ActorState] = None

    # ========================================================================
    # QUERIES
    # ========================================================================

    @property
    def last(self) -> str:
        """True map content beneath the actor."""
        return self.grid.cell(*self.actor.pos)

    def state(self) -> Dict[str, Any]:
        """Read-only summary of the actor and map dimensions."""
        return {
            **self.actor.to_dict(),
            "last": self.last,
            "width": self.grid.width,
            "height": self.grid.height,
        }

    def render(self) -> str:
        """Render the map with the actor glyph."""
        return self.grid.render(self.actor.row, self.actor.col, self.actor.facing)

    def can_move_forward(self) -> bool:
        """False when the cell directly ahead is a wall."""
        return self.grid.cell(*self.actor.ahead()) != WALL

    # ========================================================================
    # COMMANDS
    # ========================================================================

    def reveal_initial(self, sequence: str) -> NavigationResult:
        """
        Record the first view from the starting position.

        The sequence fills the cells ahead in the current facing without
        moving or turning.
        """
        self._require_sequence(sequence)
        before = self.actor.copy()
        self._take_snapshot()

        validation = self._apply_reveal(sequence, self.actor.pos, self.actor.facing)
        if not validation.valid:
            return self._rollback(CommandType.FORWARD, before, validation)
        return self._commit(CommandType.FORWARD, before)

    def attempt_forward(self, sequence: str) -> NavigationResult:
        """
        Step one cell ahead and reveal the three cells beyond.

        Args:
            sequence: Cells seen after the step, in scan order

        Returns:
            NavigationResult; failure_reason is BLOCKED or INCONSISTENT_MAP
        """
        self._require_sequence(sequence)
        before = self.actor.copy()

        if not self.can_move_forward():
            log.debug("Forward blocked at %s facing %s", before.pos, before.facing)
            return self._result(
                CommandType.FORWARD,
                before,
                CommandValidation.fail("BLOCKED", "Blocked"),
            )

        self._take_snapshot()

        facing = self.actor.facing
        self.actor.row, self.actor.col = self.actor.ahead()

        if self.grid.at_edge(self.actor.pos, facing):
            self.grid = self.grid.expand_toward(facing)
            drow, dcol = facing.delta
            # Growth on the low-index side pushes everything one cell further
            if drow < 0:
                self.actor.row += 1
            if dcol < 0:
                self.actor.col += 1
            log.debug("Grid expanded toward %s to %s", facing, self.grid)

        validation = self._apply_reveal(sequence, self.actor.pos, facing)
        if not validation.valid:
            return self._rollback(CommandType.FORWARD, before, validation)
        return self._commit(CommandType.FORWARD, before)

    def attempt_turn(self, direction: TurnDirection, sequence: str) -> NavigationResult:
        """
        Turn in place and reveal the three cells now in view.

        Args:
            direction: LEFT or RIGHT
            sequence: Cells seen after turning, in scan order

        Returns:
            NavigationResult; failure_reason is INCONSISTENT_MAP on conflict
        """
        self._require_sequence(sequence)
        command = CommandType.LEFT if direction is TurnDirection.LEFT else CommandType.RIGHT
        before = self.actor.copy()
        self._take_snapshot()

        self.actor.facing = direction.apply(self.actor.facing)

        validation = self._apply_reveal(sequence, self.actor.pos, self.actor.facing)
        if not validation.valid:
            return self._rollback(command, before, validation)
        return self._commit(command, before)

    # ========================================================================
    # INTERNALS
    # ========================================================================

    @staticmethod
    def _require_sequence(sequence: str) -> None:
        if not is_valid_sequence(sequence):
            raise ValueError(f"Invalid revealed sequence: {sequence!r}")

    def _take_snapshot(self) -> None:
        self._saved_grid = self.grid.snapshot()
        self._saved_actor = self.actor.copy()

    def _apply_reveal(self, sequence: str, pos: GridPos, facing: Facing) -> CommandValidation:
        """
        Write each revealed cell, or reject the whole sequence.

        A target cell accepts the incoming character when it is unseen or
        already holds that same character.
        """
        for (row, col), incoming in zip(scan_cells(pos, facing), sequence):
            current = self.grid.cell(row, col)
            if current != UNSEEN and current != incoming:
                return CommandValidation.fail(
                    "INCONSISTENT_MAP",
                    "Inconsistent map"
                )
            self.grid.set_cell(row, col, incoming)
        return CommandValidation.success()

    def _rollback(
        self,
        command: CommandType,
        before: ActorState,
        validation: CommandValidation,
    ) -> NavigationResult:
        self.grid = Grid.restore(self._saved_grid)
        self.actor = self._saved_actor.copy()
        log.debug("%s rolled back: %s", command, validation.error_code)
        return self._result(command, before, validation)

    def _commit(self, command: CommandType, before: ActorState) -> NavigationResult:
        log.debug(
            "%s committed: %s %s -> %s %s",
            command, before.pos, before.facing, self.actor.pos, self.actor.facing,
        )
        return self._result(command, before, CommandValidation.success(), rendered=self.render())

    def _result(
        self,
        command: CommandType,
        before: ActorState,
        validation: CommandValidation,
        rendered: str | None = None,
    ) -> NavigationResult:
        return NavigationResult(
            command=command,
            success=validation.valid,
            old_pos=before.pos,
            new_pos=self.actor.pos,
            old_facing=before.facing,
            new_facing=self.actor.facing,
            failure_reason=validation.error_code,
            message=validation.message,
            rendered=rendered,
        )
