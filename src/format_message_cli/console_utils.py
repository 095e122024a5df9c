"""
Shared console utilities for format-message-cli.

Provides a centralized Rich Console instance for messages on stderr.

format_message_cli/console_utils.py
"""

from rich.console import Console

__all__ = ["console"]

# stdout belongs to the pipelines, so everything the CLI says goes to stderr
console = Console(stderr=True)
