"""
Normalized options handed to the lint, extract and transform pipelines.

Each dataclass is built once per invocation after validation has passed.
Field names are the pipeline-facing names, not the command-line flags.

format_message_cli/options.py
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

__all__ = [
    "DEFAULT_FUNCTION_NAME",
    "DEFAULT_KEY_TYPE",
    "DEFAULT_LOCALE",
    "DEFAULT_STDIN_FILENAME",
    "DEFAULT_MISSING_TRANSLATION",
    "LintOptions",
    "ExtractOptions",
    "TransformOptions",
]

DEFAULT_FUNCTION_NAME = "formatMessage"
DEFAULT_KEY_TYPE = "underscored_crc32"
DEFAULT_LOCALE = "en"
DEFAULT_STDIN_FILENAME = "stdin"
DEFAULT_MISSING_TRANSLATION = "error"


@dataclass(frozen=True)
class LintOptions:
    function_name: str = DEFAULT_FUNCTION_NAME
    auto_detect_function_name: bool = True
    translations: Any = None
    key_type: str = DEFAULT_KEY_TYPE


@dataclass(frozen=True)
class ExtractOptions:
    generate_id: str = DEFAULT_KEY_TYPE
    locale: str = DEFAULT_LOCALE
    out_file: Optional[str] = None
    format: Optional[str] = None


@dataclass(frozen=True)
class TransformOptions:
    """Options for the transform pipeline.

    `source_maps` is "inline" to append the map to the generated code, True
    to write it beside the output, or None for no map. `root` is the prefix
    stripped from source filenames when writing into `out_dir`.
    """

    root: str
    generate_id: str = DEFAULT_KEY_TYPE
    inline: bool = False
    locale: str = DEFAULT_LOCALE
    translations: Any = None
    missing_translation: str = DEFAULT_MISSING_TRANSLATION
    missing_replacement: Optional[str] = None
    source_maps: Union[str, bool, None] = None
    out_file: Optional[str] = None
    out_dir: Optional[str] = None
