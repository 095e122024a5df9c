"""
Exception types raised by format-message-cli.

Translation loading raises these at its boundary; the validators catch them
and turn them into pre-flight messages, so they never reach the user as
tracebacks.

format_message_cli/errors.py
"""

from pathlib import Path
from typing import Union

__all__ = [
    "FormatMessageError",
    "MissingFileError",
    "TranslationParseError",
    "PipelineNotFoundError",
]


class FormatMessageError(Exception):
    """Base class for all errors raised by format-message-cli."""


class MissingFileError(FormatMessageError):
    """A path named on the command line does not exist."""

    def __init__(self, path: Union[str, Path]):
        self.path = str(path)
        super().__init__(f"{self.path} doesn't exist")


class TranslationParseError(FormatMessageError):
    """A translations file could not be read or is not valid JSON.

    The message is the parser's own message, unchanged.
    """

    def __init__(self, path: Union[str, Path], message: str):
        self.path = str(path)
        super().__init__(message)


class PipelineNotFoundError(FormatMessageError):
    """No pipeline implementation is installed for a command."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(
            f"No {command} pipeline is installed. "
            f"Install a package that provides the '{command}' entry point "
            "in the 'format_message_cli.pipelines' group."
        )
