# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line entry point for stylecheck."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Final

import typer
from pydantic import ValidationError

from ..engine import EngineFactory, available_engines, load_engine_factory
from ..errors import ConfigurationError, StylecheckError
from ..logging import CLILogger
from ..models import Report
from ..options import LintOptions
from ..orchestration.standalone import lint_sync

EXIT_OK: Final[int] = 0
EXIT_FAILURE: Final[int] = 1
EXIT_LINT_ERRORS: Final[int] = 2
EXIT_CONFIG: Final[int] = 78

app = typer.Typer(
    name="stylecheck",
    help="Lint stylesheets with a pluggable engine.",
    add_completion=False,
)


def resolve_cli_engine(reference: str | None) -> EngineFactory:
    """Return the engine factory selected on the command line.

    Args:
        reference: Value of ``--engine``; when omitted the single installed
            engine plugin is used.

    Returns:
        EngineFactory: Loaded engine factory.

    Raises:
        ConfigurationError: If no engine can be selected unambiguously.
    """

    if reference:
        return load_engine_factory(reference)
    installed = available_engines()
    if len(installed) == 1:
        return load_engine_factory(installed[0])
    if not installed:
        raise ConfigurationError("No lint engine installed; pass --engine module:factory")
    raise ConfigurationError(f"Several lint engines installed ({', '.join(installed)}); pass --engine")


def emit_report(report: Report) -> None:
    """Write the formatted report, and any needless disables, to stdout."""

    if report.output:
        typer.echo(report.output, nl=not report.output.endswith("\n"))
    if report.needless_disables is not None:
        payload = [entry.model_dump(mode="json") for entry in report.needless_disables]
        typer.echo(json.dumps(payload, indent=2))


@app.command()
def main(
    files: Annotated[list[str] | None, typer.Argument(help="Glob patterns of files to lint.", show_default=False)] = None,
    code: Annotated[str | None, typer.Option("--code", help="Lint this source text instead of files.")] = None,
    code_filename: Annotated[
        Path | None,
        typer.Option("--code-filename", help="Filename reported for inline or stdin source."),
    ] = None,
    ignore_path: Annotated[
        Path | None,
        typer.Option("--ignore-path", "-i", help="Path to a gitignore-style ignore file."),
    ] = None,
    disable_default_ignores: Annotated[
        bool,
        typer.Option("--disable-default-ignores", "--di", help="Also lint dependency directories."),
    ] = False,
    formatter: Annotated[str, typer.Option("--formatter", "-f", help="json, string, or verbose.")] = "string",
    report_needless_disables: Annotated[
        bool,
        typer.Option("--report-needless-disables", "--rd", help="Report disable comments that suppress nothing."),
    ] = False,
    ignore_disables: Annotated[
        bool,
        typer.Option("--ignore-disables", "--id", help="Ignore disable comments in sources."),
    ] = False,
    max_concurrency: Annotated[
        int | None,
        typer.Option("--max-concurrency", min=1, help="Cap on concurrently linted files."),
    ] = None,
    engine: Annotated[
        str | None,
        typer.Option("--engine", envvar="STYLECHECK_ENGINE", help="Engine entry point name or module:factory."),
    ] = None,
    config_file: Annotated[Path | None, typer.Option("--config", help="Engine configuration file.")] = None,
    config_basedir: Annotated[
        Path | None,
        typer.Option("--config-basedir", help="Directory engine configuration paths are relative to."),
    ] = None,
    syntax: Annotated[str | None, typer.Option("--syntax", "-s", help="Source syntax understood by the engine.")] = None,
    custom_syntax: Annotated[str | None, typer.Option("--custom-syntax", help="Module providing a custom syntax.")] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Print orchestration debug messages.")] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in messages.")] = False,
) -> None:
    """Lint the files matching FILES, or source text from --code or stdin."""

    logger = CLILogger(use_emoji=not no_emoji, debug_enabled=debug)
    if not files and code is None:
        code = typer.get_text_stream("stdin").read()
    try:
        options = LintOptions(
            files=files or None,
            code=code,
            code_filename=code_filename,
            ignore_path=ignore_path,
            disable_default_ignores=disable_default_ignores,
            formatter=formatter,
            report_needless_disables=report_needless_disables,
            ignore_disables=ignore_disables,
            max_concurrency=max_concurrency,
            config_file=config_file,
            config_basedir=config_basedir,
            syntax=syntax,
            custom_syntax=custom_syntax,
        )
        report = lint_sync(options, engine_factory=resolve_cli_engine(engine), debug_logger=logger.debug)
    except (ConfigurationError, ValidationError) as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=EXIT_CONFIG) from exc
    except StylecheckError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=EXIT_FAILURE) from exc

    if files and not report.results:
        logger.warn(f"No files matching {', '.join(files)} were linted")
    emit_report(report)
    raise typer.Exit(code=EXIT_LINT_ERRORS if report.errored else EXIT_OK)


__all__ = ["app", "emit_report", "main", "resolve_cli_engine"]
