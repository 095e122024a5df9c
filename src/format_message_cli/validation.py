"""
Pre-flight validation for the lint, extract and transform commands.

Every rule for a command runs, even after an earlier one fails, so the user
sees all problems in a single report. Messages are kept in rule order.

format_message_cli/validation.py
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Sequence

from .errors import MissingFileError, TranslationParseError
from .translations import load_translations

__all__ = [
    "MISSING_TRANSLATION_BEHAVIORS",
    "Preflight",
    "check_files_exist",
    "collect_translations",
    "validate_lint",
    "validate_extract",
    "validate_transform",
]
logger = logging.getLogger(__name__)

MISSING_TRANSLATION_BEHAVIORS = ("error", "warning", "ignore")
ERROR_SEPARATOR = ". "


@dataclass
class Preflight:
    """Outcome of validating one command invocation.

    Attributes:
    errors: Messages in the order the rules produced them.
    translations: The parsed catalog, when a translations path was given
    and loaded successfully.
    """

    errors: List[str] = field(default_factory=list)
    translations: Any = None

    def add(self, message: str) -> None:
        logger.debug(f"Validation error: {message}")
        self.errors.append(message)

    @property
    def failed(self) -> bool:
        return bool(self.errors)

    def message(self) -> str:
        """All errors joined into the single line printed to stderr."""
        return ERROR_SEPARATOR.join(self.errors)


def check_files_exist(files: Sequence[str], preflight: Preflight) -> None:
    for file in files:
        if not Path(file).exists():
            preflight.add(str(MissingFileError(file)))


def collect_translations(path: Optional[str], preflight: Preflight) -> Any:
    """Loads a translations file, recording a failure instead of raising."""
    if not path:
        return None
    try:
        preflight.translations = load_translations(path)
    except (MissingFileError, TranslationParseError) as e:
        preflight.add(str(e))
    return preflight.translations


def validate_lint(files: Sequence[str], translations: Optional[str] = None) -> Preflight:
    preflight = Preflight()
    check_files_exist(files, preflight)
    collect_translations(translations, preflight)
    return preflight


def validate_extract(files: Sequence[str]) -> Preflight:
    preflight = Preflight()
    check_files_exist(files, preflight)
    return preflight


def validate_transform(
    files: Sequence[str],
    out_file: Optional[str] = None,
    out_dir: Optional[str] = None,
    source_maps: bool = False,
    translations: Optional[str] = None,
    missing_translation: Optional[str] = "error",
) -> Preflight:
    """Checks a transform invocation.

    An output directory needs real input files, since stdin has no path to
    mirror. Source maps written to disk need an output file or directory to
    sit beside.
    """
    preflight = Preflight()
    check_files_exist(files, preflight)
    if out_dir and not files:
        preflight.add("files required for --out-dir")
    if out_file and out_dir:
        preflight.add("cannot have --out-file and --out-dir")
    if source_maps and not out_file and not out_dir:
        preflight.add("--source-maps requires --out-file or --out-dir")
    collect_translations(translations, preflight)
    if missing_translation not in MISSING_TRANSLATION_BEHAVIORS:
        preflight.add('--missing-translation must be "error" "warning" or "ignore"')
    return preflight
