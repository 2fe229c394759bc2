"""
Shared command validation helpers.

The runner, the HTTP API and the Command dataclass all use these checks so a
keyword or a revealed sequence is judged by the same rules everywhere. None
of this touches the map; syntax errors never reach the navigation engine.
"""
from __future__ import annotations

from typing import Optional

from .types import CommandType, CommandValidation, REVEAL_CHARS, SEQUENCE_LENGTH


def is_valid_sequence(text: Optional[str]) -> bool:
    """
    Check that a revealed sequence is exactly three cells of '.', '#' or a-z.

    Args:
        text: Candidate sequence token

    Returns:
        True if the sequence can be applied to the map
    """
    if not isinstance(text, str) or len(text) != SEQUENCE_LENGTH:
        return False
    return all(ch in REVEAL_CHARS for ch in text)


def parse_keyword(token: str) -> Optional[CommandType]:
    """Return the CommandType for an exact keyword, or None if unknown."""
    try:
        return CommandType(token)
    except ValueError:
        return None


def validate_command(keyword: str, sequence: Optional[str] = None) -> CommandValidation:
    """
    Validate a raw keyword and its (optional) sequence.

    Args:
        keyword: Command keyword as typed
        sequence: Revealed sequence token, if any

    Returns:
        CommandValidation describing the first problem found
    """
    command_type = parse_keyword(keyword)
    if command_type is None:
        return CommandValidation.fail(
            "UNKNOWN_COMMAND",
            f"Unknown command {keyword!r}"
        )

    if not command_type.takes_sequence:
        return CommandValidation.success()

    if sequence is None:
        return CommandValidation.fail(
            "MISSING_SEQUENCE",
            f"{command_type.value} requires a revealed sequence"
        )

    if not is_valid_sequence(sequence):
        return CommandValidation.fail(
            "INVALID_SEQUENCE",
            f"Invalid revealed sequence {sequence!r}"
        )

    return CommandValidation.success()
