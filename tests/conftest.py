"""Pytest configuration and fixtures for format-message-cli tests."""

import json
from pathlib import Path
from typing import Any, List, Optional

import pytest
from click.testing import CliRunner

from format_message_cli.cli import build_cli
from format_message_cli.pipelines import Pipelines


class RecordingPipeline:
    """Pipeline stand-in that remembers every request it receives."""

    def __init__(self, status: Optional[int] = None):
        self.status = status
        self.calls: List[tuple] = []

    def __call__(self, files: List[Any], options: Any) -> Optional[int]:
        self.calls.append((files, options))
        return self.status

    @property
    def called(self) -> bool:
        return bool(self.calls)

    @property
    def files(self) -> List[Any]:
        return self.calls[-1][0]

    @property
    def options(self) -> Any:
        return self.calls[-1][1]


@pytest.fixture
def pipelines() -> Pipelines:
    return Pipelines(
        lint=RecordingPipeline(),
        extract=RecordingPipeline(),
        transform=RecordingPipeline(),
    )


@pytest.fixture
def cli(pipelines: Pipelines):
    """The command group wired to recording pipelines."""
    return build_cli(pipelines=pipelines)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def source_file(workdir: Path) -> Path:
    """A JavaScript file with one message pattern."""
    file_path = workdir / "file.js"
    file_path.write_text(
        "import formatMessage from 'format-message'\n"
        "formatMessage('Hello, { name }!', { name: 'World' })\n"
    )
    return file_path


@pytest.fixture
def translations_file(workdir: Path) -> Path:
    file_path = workdir / "translations.json"
    file_path.write_text(json.dumps({"hello_name_3e9f2a": "Hola, { name }!"}), encoding="utf-8")
    return file_path


@pytest.fixture
def invalid_translations_file(workdir: Path) -> Path:
    file_path = workdir / "broken.json"
    file_path.write_text('{"hello": ', encoding="utf-8")
    return file_path
