"""
Standard input capture.

When no files are given, the whole of stdin becomes one in-memory source with
a virtual filename. This is the only place the CLI suspends, and it is only
reached after validation has passed.

format_message_cli/stdin.py
"""

import asyncio
import io
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO, Union

__all__ = ["StdinSource", "SourceUnit", "read_to_end", "capture_if_empty"]
logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class StdinSource:
    """Source code read from stdin, labelled with a virtual filename."""

    source_code: str
    source_file_name: str


SourceUnit = Union[str, StdinSource]


async def read_to_end(stream: TextIO, chunk_size: int = CHUNK_SIZE) -> str:
    """Reads a text stream until it reports end of input."""
    chunks: List[str] = []
    while True:
        chunk = await asyncio.to_thread(stream.read, chunk_size)
        if not chunk:
            break
        chunks.append(chunk)
    return "".join(chunks)


async def capture_if_empty(
    files: List[SourceUnit], filename: str, stream: Optional[TextIO] = None
) -> List[SourceUnit]:
    """
    Falls back to stdin when no input files were resolved.

    Returns `files` untouched when it is non-empty. Otherwise reads stdin as
    UTF-8 text until EOF, replacing undecodable bytes with U+FFFD, and
    returns a single StdinSource named `filename`. There is no timeout; the
    read ends when the stream closes.
    """
    if files:
        return files

    owned = stream is None
    if owned:
        stream = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8", errors="replace")

    logger.debug(f"No input files, reading source from stdin as '{filename}'")
    try:
        source_code = await read_to_end(stream)
    finally:
        if owned:
            # leave sys.stdin.buffer open
            stream.detach()
    logger.debug(f"Read {len(source_code)} character(s) from stdin")
    return [StdinSource(source_code=source_code, source_file_name=filename)]
