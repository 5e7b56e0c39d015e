"""Input validation for command requests."""

from __future__ import annotations

EMPTY_COMMAND_MESSAGE = "Command must be a non-empty string"


class EmptyCommandError(ValueError):
    """Raised when a command is blank after trimming."""

    def __init__(self, message: str = EMPTY_COMMAND_MESSAGE) -> None:
        super().__init__(message)


def validate_command(raw: str) -> str:
    """Return *raw* stripped of surrounding whitespace, or raise if nothing is left."""
    command = raw.strip()
    if not command:
        raise EmptyCommandError()
    return command
