"""format-message-cli: command-line front end for message-pattern tooling.

Resolves input files, validates options and hands normalized requests to the
lint, extract and transform pipelines.
"""

__version__ = "0.1.0"

from format_message_cli.errors import (
    FormatMessageError,
    MissingFileError,
    PipelineNotFoundError,
    TranslationParseError,
)
from format_message_cli.options import ExtractOptions, LintOptions, TransformOptions
from format_message_cli.pipelines import Pipelines, load_pipelines
from format_message_cli.stdin import SourceUnit, StdinSource

__all__ = [
    "__version__",
    # Errors
    "FormatMessageError",
    "MissingFileError",
    "PipelineNotFoundError",
    "TranslationParseError",
    # Pipeline requests
    "LintOptions",
    "ExtractOptions",
    "TransformOptions",
    "SourceUnit",
    "StdinSource",
    # Pipelines
    "Pipelines",
    "load_pipelines",
]
