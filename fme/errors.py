# python
"""
fme/errors.py
Exception classes raised while parsing and executing batch commands.
"""
from typing import Optional


class FmeError(Exception):
    """Base exception for all fme errors."""

    pass


class CommandError(FmeError):
    """Base exception for a single failing batch command."""

    pass


class ArgumentCountError(CommandError):
    """Raised when a command receives the wrong number of path arguments."""

    def __init__(self, command: str, expected: int, got: int):
        """
        Params:
            command: The command name (e.g. "md")
            expected: Number of path arguments the command takes
            got: Number of path arguments found on the line
        """
        self.command = command
        self.expected = expected
        self.got = got
        super().__init__(
            f"{command} - invalid number of arguments, expected {expected}, got {got}"
        )


class InvalidPathError(CommandError):
    """Raised when a path argument does not follow the /seg1/seg2 grammar."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"invalid path - '{path}': {reason}")


class UnknownCommandError(CommandError):
    """Raised when the command token is not a recognised command."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"unknown command - {command}")


class EmptyCommandError(CommandError):
    """Raised for a blank batch line."""

    def __init__(self):
        super().__init__("empty command")


class ResolutionError(CommandError):
    """Raised when a required node or parent directory cannot be resolved."""

    def __init__(self, path: str, message: str):
        """
        Params:
            path: The path (as written in the batch) that failed to resolve
            message: Human readable cause
        """
        self.path = path
        super().__init__(f"{message}: '{path}'")


class NameCollisionError(CommandError):
    """Raised when the target name is already taken and must not be overwritten."""

    def __init__(self, name: str, message: str):
        self.name = name
        super().__init__(f"{message}: '{name}'")


class RootViolationError(CommandError):
    """Raised when a command tries to remove, copy or move the root directory."""

    def __init__(self, command: str):
        self.command = command
        verb = {"rm": "removal", "cp": "copy", "mv": "move"}.get(command, command)
        super().__init__(f"{verb} of root is not allowed")


class InvalidMoveError(CommandError):
    """Raised when a directory would be moved into itself or its own subtree."""

    def __init__(self, source: str, destination: str):
        self.source = source
        self.destination = destination
        super().__init__(
            f"cannot move '{source}' into its own subtree '{destination}'"
        )


class SnapshotError(FmeError):
    """Raised when a JSON tree snapshot is malformed."""

    def __init__(self, reason: str, location: Optional[str] = None):
        self.reason = reason
        self.location = location
        if location:
            super().__init__(f"invalid snapshot at {location}: {reason}")
        else:
            super().__init__(f"invalid snapshot: {reason}")


class EventLogError(FmeError):
    """Raised when the JSONL event file cannot be written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot write events file '{path}': {reason}")
