"""
ExplorerEnv - Main exploration session interface.

This is the primary API for the Map Explorer. It validates commands and
hands them to the NavigationEngine, keeping track of session progress.

Usage:
    from explorer import ExplorerEnv, Command

    env = ExplorerEnv()
    result = env.reveal("...")
    print(result.rendered)

    result = env.step(Command.forward("#.#"))
    if not result.success:
        print(result.message)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

from infra.logger import get_logger

from .core.types import CommandType, CommandValidation
from .core.commands import Command
from .core.validation import is_valid_sequence, validate_command
from .mechanics import NavigationEngine, NavigationResult

log = get_logger(__name__)


@dataclass
class StepResult:
    """
    Outcome of one command, as seen by a runner or API client.

    Attributes:
        success: Whether the command was committed
        failure_reason: Error code (INVALID_COMMAND, BLOCKED, INCONSISTENT_MAP)
        message: Diagnostic for failures
        rendered: Map text to display after a committed command
        done: True once the session has been quit
        command: The command that was run (None for syntax errors and the startup view)
        navigation: Engine-level result with positions and facings
    """
    success: bool
    failure_reason: str | None = None
    message: str = ""
    rendered: str | None = None
    done: bool = False
    command: Optional[Command] = None
    navigation: Optional[NavigationResult] = None

    @classmethod
    def from_navigation(cls, result: NavigationResult, command: Optional[Command] = None) -> StepResult:
        return cls(
            success=result.success,
            failure_reason=result.failure_reason,
            message=result.message,
            rendered=result.rendered,
            command=command,
            navigation=result,
        )

    @classmethod
    def invalid(cls, validation: CommandValidation) -> StepResult:
        log.debug("Rejected command: %s (%s)", validation.message, validation.error_code)
        return cls(success=False, failure_reason="INVALID_COMMAND", message="Invalid command")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a plain dict."""
        return {
            "success": self.success,
            "failure_reason": self.failure_reason,
            "message": self.message,
            "map": self.rendered,
            "done": self.done,
            "command": self.command.to_dict() if self.command else None,
            "move": self.navigation.to_dict() if self.navigation else None,
        }


class ExplorerEnv:
    """
    Map Explorer session.

    The environment manages:
    - The navigation engine (map + actor)
    - The startup reveal
    - Command validation and dispatch
    - Step counting and quit handling

    Attributes:
        engine: Current navigation engine
        steps: Number of committed commands
        done: Whether the session has been quit
    """

    def __init__(self):
        """Initialize a fresh exploration session."""
        self.engine: NavigationEngine = NavigationEngine()
        self.started = False
        self.done = False
        self.steps = 0

    def reset(self) -> None:
        """Discard the current map and start over from the 3x3 world."""
        self.engine = NavigationEngine()
        self.started = False
        self.done = False
        self.steps = 0

    def reveal(self, sequence: str) -> StepResult:
        """
        Apply the startup view that precedes any command.

        Args:
            sequence: Three cells seen from the starting position

        Returns:
            StepResult with the first rendered map, or INVALID_COMMAND
        """
        if not is_valid_sequence(sequence):
            return StepResult.invalid(
                CommandValidation.fail("INVALID_SEQUENCE", f"Invalid revealed sequence {sequence!r}")
            )

        result = StepResult.from_navigation(self.engine.reveal_initial(sequence))
        if result.success:
            self.started = True
            self.steps += 1
        return result

    def execute(self, keyword: str, sequence: Optional[str] = None) -> StepResult:
        """
        Validate raw command text and run it.

        Syntax errors return INVALID_COMMAND without touching the map.
        """
        validation = validate_command(keyword, sequence)
        if not validation.valid:
            return StepResult.invalid(validation)

        command_type = CommandType(keyword)
        command = Command(command_type, sequence if command_type.takes_sequence else None)
        return self.step(command)

    def step(self, command: Command) -> StepResult:
        """
        Run one already validated command.

        Args:
            command: Command to apply

        Returns:
            StepResult for the attempt
        """
        if self.done:
            raise RuntimeError("Exploration session already finished")

        if command.type == CommandType.QUIT:
            self.done = True
            log.info("Session quit after %d committed commands", self.steps)
            return StepResult(success=True, done=True, command=command)

        if command.type == CommandType.FORWARD:
            nav = self.engine.attempt_forward(command.sequence)
        else:
            nav = self.engine.attempt_turn(command.turn, command.sequence)

        if nav.success:
            self.steps += 1
        return StepResult.from_navigation(nav, command)

    def render(self) -> str:
        """Current map text."""
        return self.engine.render()

    def status(self) -> Dict[str, Any]:
        """Summary used by the HTTP API."""
        return {
            "started": self.started,
            "done": self.done,
            "steps": self.steps,
            "actor": self.engine.state(),
        }

    def __str__(self) -> str:
        return f"ExplorerEnv(steps={self.steps}, grid={self.engine.grid}, done={self.done})"
