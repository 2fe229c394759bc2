"""
Command definitions and utilities.

Commands are what the script (or an API client) asks the explorer to do.
This module provides:
- Command dataclass
- Parameter validation
- Command factory methods
- Command serialization (to_dict)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .types import CommandType, TurnDirection
from .validation import is_valid_sequence


@dataclass
class Command:
    """
    A single command of the explorer language.

    Use static factory methods for convenient construction:
        - Command.forward("..#")
        - Command.left("a..")
        - Command.right("###")
        - Command.quit()

    Or construct directly:
        - Command(CommandType.FORWARD, "...")
    """

    type: CommandType
    sequence: Optional[str] = None

    def __post_init__(self):
        """Validate command parameters after initialization."""
        self._validate()

    def _validate(self) -> None:
        """
        Validate that the sequence matches the command type.

        Raises:
            ValueError: If the sequence is missing, malformed or unexpected
        """
        if self.type == CommandType.QUIT:
            if self.sequence is not None:
                raise ValueError("QUIT command takes no sequence")
            return

        if self.sequence is None:
            raise ValueError(f"{self.type.name} command requires a sequence")
        if not is_valid_sequence(self.sequence):
            raise ValueError(f"Invalid revealed sequence: {self.sequence!r}")

    @property
    def turn(self) -> Optional[TurnDirection]:
        """Rotation for LEFT/RIGHT commands, None otherwise."""
        if self.type == CommandType.LEFT:
            return TurnDirection.LEFT
        if self.type == CommandType.RIGHT:
            return TurnDirection.RIGHT
        return None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert command to a JSON-serializable dictionary.

        Returns:
            Dictionary representation of the command
        """
        return {
            "type": self.type.value,
            "sequence": self.sequence,
        }

    def __str__(self) -> str:
        """Human-readable string representation."""
        if self.sequence is None:
            return self.type.value
        return f"{self.type.value} {self.sequence}"

    # FACTORY METHODS
    @staticmethod
    def forward(sequence: str) -> Command:
        """
        Create a FORWARD command.

        Args:
            sequence: The three cells seen after stepping forward

        Returns:
            Command that moves the actor one cell ahead.
        """
        return Command(CommandType.FORWARD, sequence)

    @staticmethod
    def left(sequence: str) -> Command:
        """Create a LEFT turn command with the cells seen after turning."""
        return Command(CommandType.LEFT, sequence)

    @staticmethod
    def right(sequence: str) -> Command:
        """Create a RIGHT turn command with the cells seen after turning."""
        return Command(CommandType.RIGHT, sequence)

    @staticmethod
    def quit() -> Command:
        """Create a QUIT command."""
        return Command(CommandType.QUIT)
