"""
Translation catalog loading.

format_message_cli/translations.py
"""

import json
import logging
from pathlib import Path
from typing import Any, Union

from .errors import MissingFileError, TranslationParseError

__all__ = ["load_translations"]
logger = logging.getLogger(__name__)


def load_translations(path: Union[str, Path]) -> Any:
    """
    Reads a UTF-8 JSON translations file into memory.

    Raises:
    MissingFileError: If nothing exists at `path`.
    TranslationParseError: If the file cannot be read or decoded, or is not
    valid JSON. The parser's message is kept as the error message.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise MissingFileError(path)

    try:
        catalog = json.loads(file_path.read_text(encoding="utf-8"))
    except (ValueError, OSError) as e:
        raise TranslationParseError(path, str(e)) from e

    logger.debug(f"Loaded translations from {file_path}")
    return catalog
