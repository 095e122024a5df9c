"""
Input file discovery for format-message-cli.

Expands the file arguments given on the command line into concrete paths.
Patterns support `**` and `{a,b}` alternatives. They are expanded in the
order they were given and the results are concatenated, so a file matched
by two patterns appears twice.

format_message_cli/discovery.py
"""

import logging
from typing import List, Optional, Sequence, Union

from wcmatch import glob

__all__ = ["GLOB_FLAGS", "has_magic", "resolve_patterns"]
logger = logging.getLogger(__name__)

GLOB_FLAGS = glob.GLOBSTAR | glob.BRACE


def has_magic(pattern: str) -> bool:
    """Returns True if the pattern contains wildcards or brace alternatives."""
    return glob.is_magic(pattern, flags=GLOB_FLAGS)


def resolve_patterns(patterns: Optional[Union[str, Sequence[str]]]) -> List[str]:
    """
    Expands glob patterns into a list of file paths.

    A bare string is treated as a single pattern. Patterns without wildcards
    are kept as literal paths even if nothing exists there, so the caller's
    existence check can report them. Wildcard patterns that match nothing
    contribute nothing.

    Args:
    patterns: Zero or more glob patterns, in command-line order.

    Returns:
    Paths in pattern order, duplicates preserved. An empty list means no
    files were given and input should be read from stdin.

    format_message_cli/discovery.py
    """
    if patterns is None:
        return []
    if isinstance(patterns, str):
        patterns = [patterns]

    files: List[str] = []
    for pattern in patterns:
        if not has_magic(pattern):
            files.append(pattern)
            continue

        matches = sorted(glob.glob(pattern, flags=GLOB_FLAGS))
        if not matches:
            logger.debug(f"Pattern '{pattern}' matched no files")
        else:
            logger.debug(f"Pattern '{pattern}' matched {len(matches)} file(s)")
        files.extend(matches)

    return files
