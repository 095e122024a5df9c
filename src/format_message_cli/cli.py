"""CLI for format-message: lint, extract and transform commands.

Each command resolves its input files, validates its options, reads stdin
if no files were given and hands a normalized request to its pipeline.
The group is built from an explicit command table by `build_cli()`.

format_message_cli/cli.py
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Sequence

import click
from click.core import ParameterSource

from format_message_cli import __version__
from format_message_cli.config import load_config
from format_message_cli.console_utils import console
from format_message_cli.discovery import resolve_patterns
from format_message_cli.errors import PipelineNotFoundError
from format_message_cli.options import (
    DEFAULT_FUNCTION_NAME,
    DEFAULT_KEY_TYPE,
    DEFAULT_LOCALE,
    DEFAULT_MISSING_TRANSLATION,
    DEFAULT_STDIN_FILENAME,
    ExtractOptions,
    LintOptions,
    TransformOptions,
)
from format_message_cli.pipelines import Pipeline, Pipelines, load_pipelines
from format_message_cli.stdin import SourceUnit, capture_if_empty
from format_message_cli.validation import (
    Preflight,
    validate_extract,
    validate_lint,
    validate_transform,
)

logger = logging.getLogger(__name__)

PROG_NAME = "format-message"
VALIDATION_EXIT_CODE = 2
USAGE_ERROR_EXIT_CODE = 1
KEY_TYPES_HELP = "literal | normalized | underscored | underscored_crc32"


@dataclass
class CliContext:
    """Shared context for CLI commands."""

    pipelines: Optional[Pipelines] = None

    def pipeline(self, command: str) -> Pipeline:
        """Returns the pipeline for a command, discovering pipelines on first use."""
        if self.pipelines is None:
            self.pipelines = load_pipelines()
        return self.pipelines.get(command)


class FormatMessageGroup(click.Group):
    """Command group whose usage errors exit with status 1.

    Status 2 belongs to failed pre-flight validation, so click's own usage
    errors (unknown options, missing option values) are moved off it.
    """

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = USAGE_ERROR_EXIT_CODE
            raise

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            e.exit_code = USAGE_ERROR_EXIT_CODE
            raise


def _exit_on_errors(ctx: click.Context, preflight: Preflight) -> None:
    if not preflight.failed:
        return
    logger.debug(f"{ctx.info_name}: {len(preflight.errors)} validation error(s)")
    click.secho(preflight.message(), fg="red", err=True)
    ctx.exit(VALIDATION_EXIT_CODE)


def _read_sources(files: List[str], filename: str) -> List[SourceUnit]:
    return asyncio.run(capture_if_empty(list(files), filename))


def _dispatch(ctx: click.Context, command: str, sources: List[SourceUnit], options: Any) -> None:
    state: CliContext = ctx.obj
    try:
        pipeline = state.pipeline(command)
    except PipelineNotFoundError as e:
        click.secho(str(e), fg="red", err=True)
        ctx.exit(1)

    logger.debug(f"Dispatching {len(sources)} source(s) to the {command} pipeline")
    status = pipeline(sources, options)
    if status:
        ctx.exit(status)


@click.command("lint")
@click.argument("files", nargs=-1)
@click.option(
    "-n",
    "--function-name",
    default=DEFAULT_FUNCTION_NAME,
    show_default=True,
    help="Find function calls with this name",
)
@click.option(
    "--no-auto",
    is_flag=True,
    help="Disable auto-detecting the function name from import or require calls",
)
@click.option(
    "-k",
    "--key-type",
    default=DEFAULT_KEY_TYPE,
    show_default=True,
    help=f"Derived key from source pattern ({KEY_TYPES_HELP})",
)
@click.option(
    "-t",
    "--translations",
    help="JSON file with message translations; if given, translations are also checked for errors",
)
@click.option(
    "-f",
    "--filename",
    default=DEFAULT_STDIN_FILENAME,
    show_default=True,
    help="Filename to use when reading from stdin, used in source maps and errors",
)
@click.pass_context
def lint(
    ctx: click.Context,
    files: Sequence[str],
    function_name: str,
    no_auto: bool,
    key_type: str,
    translations: Optional[str],
    filename: str,
) -> None:
    """Find message patterns in files and verify there are no obvious problems."""
    resolved = resolve_patterns(files)
    preflight = validate_lint(resolved, translations=translations)
    _exit_on_errors(ctx, preflight)

    sources = _read_sources(resolved, filename)
    options = LintOptions(
        function_name=function_name,
        auto_detect_function_name=not no_auto,
        translations=preflight.translations,
        key_type=key_type,
    )
    _dispatch(ctx, "lint", sources, options)


@click.command("extract")
@click.argument("files", nargs=-1)
@click.option(
    "-g",
    "--generate-id",
    default=DEFAULT_KEY_TYPE,
    show_default=True,
    help=f"Generate missing ids from the default message pattern ({KEY_TYPES_HELP})",
)
@click.option(
    "-l",
    "--locale",
    default=DEFAULT_LOCALE,
    show_default=True,
    help="BCP 47 language tag of the source default locale",
)
@click.option(
    "-f",
    "--filename",
    default=DEFAULT_STDIN_FILENAME,
    show_default=True,
    help="Filename to use when reading from stdin, used in errors",
)
@click.option("-o", "--out-file", help="Write messages to this file instead of to stdout")
@click.option(
    "--format",
    help="Use this format instead of detecting it from the --out-file extension "
    "(yaml | es6 | commonjs | json)",
)
@click.pass_context
def extract(
    ctx: click.Context,
    files: Sequence[str],
    generate_id: str,
    locale: str,
    filename: str,
    out_file: Optional[str],
    format: Optional[str],
) -> None:
    """Find and list all message patterns in files."""
    resolved = resolve_patterns(files)
    _exit_on_errors(ctx, validate_extract(resolved))

    sources = _read_sources(resolved, filename)
    options = ExtractOptions(
        generate_id=generate_id,
        locale=locale,
        out_file=out_file,
        format=format,
    )
    _dispatch(ctx, "extract", sources, options)


@click.command("transform")
@click.argument("files", nargs=-1)
@click.option(
    "-g",
    "--generate-id",
    default=DEFAULT_KEY_TYPE,
    show_default=True,
    help=f"Generate missing ids from the default message pattern ({KEY_TYPES_HELP})",
)
@click.option("-i", "--inline", is_flag=True, help="Inline the translation for the specified locale")
@click.option(
    "-l",
    "--locale",
    default=DEFAULT_LOCALE,
    show_default=True,
    help="BCP 47 language tag of the target locale",
)
@click.option("-t", "--translations", help="JSON file with message translations")
@click.option(
    "-e",
    "--missing-translation",
    default=DEFAULT_MISSING_TRANSLATION,
    show_default=True,
    help="Behavior when a translated pattern is missing (error | warning | ignore)",
)
@click.option(
    "-m",
    "--missing-replacement",
    help="Pattern to inline when a translated pattern is missing, defaults to the source pattern",
)
@click.option("--source-maps-inline", is_flag=True, help="Append a sourceMappingURL comment to the code")
@click.option("-s", "--source-maps", is_flag=True, help="Save the source map alongside the compiled code")
@click.option(
    "-f",
    "--filename",
    default=DEFAULT_STDIN_FILENAME,
    show_default=True,
    help="Filename to use when reading from stdin, used in source maps and errors",
)
@click.option("-o", "--out-file", help="Compile all input files into a single file")
@click.option("-d", "--out-dir", help="Compile input files into an output directory")
@click.option(
    "-r",
    "--root",
    help="Root path removed from source filenames in the output directory [default: cwd]",
)
@click.pass_context
def transform(
    ctx: click.Context,
    files: Sequence[str],
    generate_id: str,
    inline: bool,
    locale: str,
    translations: Optional[str],
    missing_translation: str,
    missing_replacement: Optional[str],
    source_maps_inline: bool,
    source_maps: bool,
    filename: str,
    out_file: Optional[str],
    out_dir: Optional[str],
    root: Optional[str],
) -> None:
    """Transform formatMessage calls, adding generated ids or inlining a translation."""
    resolved = resolve_patterns(files)
    preflight = validate_transform(
        resolved,
        out_file=out_file,
        out_dir=out_dir,
        source_maps=source_maps,
        translations=translations,
        missing_translation=missing_translation,
    )
    _exit_on_errors(ctx, preflight)

    sources = _read_sources(resolved, filename)
    options = TransformOptions(
        generate_id=generate_id,
        inline=inline,
        locale=locale,
        translations=preflight.translations,
        missing_translation=missing_translation,
        missing_replacement=missing_replacement,
        source_maps="inline" if source_maps_inline else (source_maps or None),
        out_file=out_file,
        out_dir=out_dir,
        root=root or os.getcwd(),
    )
    _dispatch(ctx, "transform", sources, options)


COMMANDS = (lint, extract, transform)


def build_cli(
    pipelines: Optional[Pipelines] = None, commands: Sequence[click.Command] = COMMANDS
) -> click.Group:
    """Builds the command group from a command table.

    Args:
    pipelines: Pipelines to dispatch to. When None, they are discovered from
    entry points the first time a command needs one.
    commands: The subcommands to expose.
    """

    @click.group(name=PROG_NAME, cls=FormatMessageGroup, commands=list(commands))
    @click.version_option(__version__, prog_name=PROG_NAME)
    @click.option("--color/--no-color", default=False, help="Use colors in errors and warnings")
    @click.option("--verbose", "-v", is_flag=True, help="Verbose output")
    @click.pass_context
    def cli(ctx: click.Context, color: bool, verbose: bool) -> None:
        """format-message: lint, extract and transform message patterns."""
        if ctx.get_parameter_source("color") is not ParameterSource.DEFAULT:
            ctx.color = color

        # Configure logging
        if verbose:
            logging.basicConfig(level=logging.DEBUG)
        else:
            logging.basicConfig(level=logging.WARNING)

        config = load_config(Path.cwd())
        ctx.default_map = config.default_map()
        ctx.obj = CliContext(pipelines=pipelines)

    return cli


def main() -> None:
    """Entry point for the format-message CLI."""
    cli = build_cli()
    try:
        cli(prog_name=PROG_NAME)
    except SystemExit as e:
        sys.exit(e.code)
    except Exception as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        logger.error("CLI error", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
