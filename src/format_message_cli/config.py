"""Configuration loading for format-message-cli.

Reads command defaults from the [tool.format-message] section of the nearest
pyproject.toml. Keys at the top of the section apply to every command; keys
in [tool.format-message.lint], [tool.format-message.extract] and
[tool.format-message.transform] apply to that command only. Values given on
the command line always win.

format_message_cli/config.py
"""

import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):

    import tomllib
else:

    try:

        import tomli as tomllib
    except ImportError as e:

        raise ImportError(
            "format-message-cli requires Python 3.11+ or the 'tomli' package "
            "to parse pyproject.toml on Python 3.10. "
            "Hint: Try running: pip install tomli"
        ) from e

from .pipelines import COMMAND_NAMES

__all__ = ["TOOL_SECTION", "Config", "find_pyproject", "load_config"]
logger = logging.getLogger(__name__)

TOOL_SECTION = "format-message"


def find_pyproject(start_path: Path) -> Optional[Path]:
    """Walks up from start_path to the first directory holding pyproject.toml."""
    current = start_path.resolve()
    if current.is_file():
        current = current.parent
    for parent in [current] + list(current.parents):
        candidate = parent / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def _option_key(key: str) -> str:
    return key.replace("-", "_")


class Config:
    """Holds the [tool.format-message] settings.

    Attributes:
    path: The pyproject.toml the settings came from, or None.
    settings: Read-only view of the section. Empty if the file or section
    is missing or invalid.
    """

    def __init__(self, path: Optional[Path], config_dict: Dict[str, Any]):
        self._path = path
        self._config_dict = dict(config_dict)

    @property
    def path(self) -> Optional[Path]:
        return self._path

    @property
    def settings(self) -> Mapping[str, Any]:
        return self._config_dict

    def is_present(self) -> bool:
        return self._path is not None and bool(self._config_dict)

    def command_defaults(self, command: str) -> Dict[str, Any]:
        """Defaults for one command, keyed by click parameter name."""
        defaults = {
            _option_key(key): value
            for key, value in self._config_dict.items()
            if key not in COMMAND_NAMES and not isinstance(value, Mapping)
        }
        command_table = self._config_dict.get(command, {})
        if isinstance(command_table, Mapping):
            defaults.update({_option_key(key): value for key, value in command_table.items()})
        else:
            logger.warning(
                f"Configuration key '{command}' in [tool.{TOOL_SECTION}] is not a table. Ignoring it."
            )
        return defaults

    def default_map(self) -> Dict[str, Dict[str, Any]]:
        """The click default_map for the command group."""
        return {command: self.command_defaults(command) for command in COMMAND_NAMES}


def load_config(start_path: Path) -> Config:
    """Loads [tool.format-message] from the nearest pyproject.toml.

    A missing file or section yields an empty Config. A file that cannot be
    parsed is logged and ignored.
    """
    pyproject_path = find_pyproject(start_path)
    if pyproject_path is None:
        logger.debug(f"No pyproject.toml found searching from '{start_path}'")
        return Config(None, {})

    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"Failed to load config from {pyproject_path}: {e}")
        return Config(None, {})

    section = data.get("tool", {}).get(TOOL_SECTION, {})
    if not isinstance(section, Mapping):
        logger.warning(f"[tool.{TOOL_SECTION}] in {pyproject_path} is not a table. Ignoring it.")
        return Config(None, {})

    if section:
        logger.debug(f"Loaded config from {pyproject_path}")
    return Config(pyproject_path, section)
