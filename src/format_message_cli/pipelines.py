"""
Lookup of the lint, extract and transform pipelines.

The pipelines live in separate packages and advertise themselves through the
`format_message_cli.pipelines` entry-point group, one entry point per
command name. A pipeline is any callable taking the resolved sources and the
command's options dataclass; it may return an exit status.

format_message_cli/pipelines.py
"""

from __future__ import annotations

import importlib.metadata
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

from .errors import PipelineNotFoundError
from .stdin import SourceUnit

__all__ = ["ENTRY_POINT_GROUP", "COMMAND_NAMES", "Pipeline", "Pipelines", "load_pipelines"]
logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "format_message_cli.pipelines"
COMMAND_NAMES = ("lint", "extract", "transform")


class Pipeline(Protocol):
    """Protocol for pipeline entry points."""

    def __call__(self, files: List[SourceUnit], options: Any) -> Optional[int]: ...


@dataclass
class Pipelines:
    """The pipeline implementation available for each command."""

    lint: Optional[Pipeline] = None
    extract: Optional[Pipeline] = None
    transform: Optional[Pipeline] = None

    def get(self, command: str) -> Pipeline:
        """Returns the pipeline for a command, raising if none is installed."""
        pipeline = getattr(self, command, None) if command in COMMAND_NAMES else None
        if pipeline is None:
            raise PipelineNotFoundError(command)
        return pipeline


def load_pipelines() -> Pipelines:
    """Loads installed pipelines from entry points."""
    found: Dict[str, Pipeline] = {}
    for entry_point in importlib.metadata.entry_points(group=ENTRY_POINT_GROUP):
        if entry_point.name not in COMMAND_NAMES:
            logger.debug(f"Ignoring unknown pipeline entry point '{entry_point.name}'")
            continue
        try:
            found[entry_point.name] = entry_point.load()
        except (ImportError, AttributeError) as e:
            logger.warning(
                f"Failed to load pipeline '{entry_point.name}' from entry point {entry_point.value}: {e}"
            )
    logger.debug(f"Pipeline discovery complete: {sorted(found)}")
    return Pipelines(**found)
