"""
Main entry point for format-message-cli when run as a module.

Allows execution via: python -m format_message_cli

format_message_cli/__main__.py
"""

from .cli import main

if __name__ == "__main__":
    main()
