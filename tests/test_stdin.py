"""Tests for stdin capture."""

import asyncio
import io

import pytest

from format_message_cli.stdin import StdinSource, capture_if_empty, read_to_end


class ChunkedStream:
    """Text stream that hands out fixed chunks and then signals EOF."""

    def __init__(self, *chunks: str):
        self.chunks = list(chunks)
        self.reads = 0

    def read(self, size: int = -1) -> str:
        self.reads += 1
        if not self.chunks:
            return ""
        return self.chunks.pop(0)


def test_read_to_end_joins_chunks():
    stream = ChunkedStream("abc", "def")

    assert asyncio.run(read_to_end(stream)) == "abcdef"
    assert stream.reads == 3


def test_capture_with_default_filename():
    stream = ChunkedStream("abc", "def")

    files = asyncio.run(capture_if_empty([], "stdin", stream=stream))

    assert files == [StdinSource(source_code="abcdef", source_file_name="stdin")]


def test_capture_with_explicit_filename():
    files = asyncio.run(capture_if_empty([], "src/entry.js", stream=io.StringIO("abcdef")))

    assert len(files) == 1
    assert files[0].source_code == "abcdef"
    assert files[0].source_file_name == "src/entry.js"


def test_capture_empty_input():
    files = asyncio.run(capture_if_empty([], "stdin", stream=io.StringIO("")))

    assert files == [StdinSource(source_code="", source_file_name="stdin")]


def test_capture_skipped_when_files_given():
    stream = ChunkedStream("never read")
    files = ["a.js", "b.js"]

    result = asyncio.run(capture_if_empty(files, "stdin", stream=stream))

    assert result is files
    assert stream.reads == 0


def test_stdin_source_is_immutable():
    source = StdinSource(source_code="x", source_file_name="stdin")

    with pytest.raises(AttributeError):
        source.source_code = "y"
