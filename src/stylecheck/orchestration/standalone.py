# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""High level entry point linting inline code or file globs."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence
from functools import partial

from typing_extensions import TypeAliasType

from ..constants import ALWAYS_IGNORED_GLOBS, INLINE_SOURCE_PLACEHOLDER
from ..discovery.ignore import build_ignore_matcher
from ..discovery.resolver import ensure_single_mode, resolve_inputs
from ..engine import EngineFactory, LintEngine, load_engine_factory
from ..models import FileInput, InlineInput, LintInput, Report, ResultRecord
from ..options import LintOptions
from ..reporting.formatters import resolve_formatter
from .aggregator import aggregate
from .executor import BatchExecutor

DebugLogger = TypeAliasType("DebugLogger", Callable[[str], None])


def source_label(target: LintInput) -> str:
    """Return the ``source`` reported for ``target``.

    Args:
        target: Resolved lint input.

    Returns:
        str: Display path for files; the code filename or the inline
        placeholder for inline source.
    """

    if isinstance(target, FileInput):
        return target.display_path
    if target.code_filename is not None:
        return str(target.code_filename)
    return INLINE_SOURCE_PLACEHOLDER


async def lint_target(engine: LintEngine, target: LintInput) -> ResultRecord:
    """Lint one input with ``engine`` and normalise the outcome.

    Args:
        engine: Engine created for this invocation.
        target: Resolved input to analyse.

    Returns:
        ResultRecord: Record labelled with the input's source.
    """

    outcome = await engine.lint(target)
    return ResultRecord.from_outcome(outcome, source_label(target))


def _coerce_options(options: LintOptions | None, overrides: dict[str, object]) -> LintOptions:
    """Return the options object for an invocation.

    Args:
        options: Prebuilt options, if the caller supplied them.
        overrides: Keyword options used when ``options`` is ``None``.

    Returns:
        LintOptions: Validated options.

    Raises:
        TypeError: If both ``options`` and keyword options are given.
    """

    if options is not None and overrides:
        raise TypeError("Pass either 'options' or keyword options, not both")
    if options is not None:
        return options
    return LintOptions.model_validate(overrides)


async def lint(
    options: LintOptions | None = None,
    *,
    engine_factory: EngineFactory | str,
    debug_logger: DebugLogger | None = None,
    default_ignores: Sequence[str] = ALWAYS_IGNORED_GLOBS,
    **overrides: object,
) -> Report:
    """Lint inline code or the files matched by glob patterns.

    Configuration problems (conflicting input modes, an unknown formatter, an
    unknown engine) surface before any filesystem access or engine work.
    Parse failures become errored results; any other failure raised while
    linting aborts the whole run.

    Args:
        options: Invocation options; alternatively pass them as keywords.
        engine_factory: Engine factory, or a reference accepted by
            :func:`stylecheck.engine.load_engine_factory`.
        debug_logger: Optional callable receiving debug messages.
        default_ignores: Globs always excluded unless disabled by options.
        **overrides: Keyword form of :class:`LintOptions` fields.

    Returns:
        Report: Aggregated report for the invocation.

    Raises:
        ConfigurationError: If the options are invalid.
        IgnoreFileReadError: If the ignore file exists but cannot be read.
    """

    resolved_options = _coerce_options(options, overrides)
    mode = ensure_single_mode(resolved_options)
    formatter = resolve_formatter(resolved_options.formatter)
    factory = load_engine_factory(engine_factory) if isinstance(engine_factory, str) else engine_factory
    if debug_logger:
        debug_logger(f"mode={mode} formatter={formatter!r} cwd={resolved_options.cwd}")

    matcher = build_ignore_matcher(resolved_options.ignore_path, cwd=resolved_options.cwd)
    engine = factory(resolved_options.engine_options())
    resolved = resolve_inputs(
        resolved_options,
        matcher,
        default_ignores=default_ignores,
        debug_logger=debug_logger,
    )
    inputs = [resolved] if isinstance(resolved, InlineInput) else resolved

    executor = BatchExecutor(max_concurrency=resolved_options.max_concurrency, debug_logger=debug_logger)
    results = await executor.run(inputs, partial(lint_target, engine))
    return aggregate(
        results,
        formatter,
        report_needless_disables=resolved_options.report_needless_disables,
    )


def lint_sync(
    options: LintOptions | None = None,
    *,
    engine_factory: EngineFactory | str,
    debug_logger: DebugLogger | None = None,
    default_ignores: Sequence[str] = ALWAYS_IGNORED_GLOBS,
    **overrides: object,
) -> Report:
    """Run :func:`lint` to completion on a fresh event loop."""

    return asyncio.run(
        lint(
            options,
            engine_factory=engine_factory,
            debug_logger=debug_logger,
            default_ignores=default_ignores,
            **overrides,
        ),
    )


__all__ = ["lint", "lint_sync", "lint_target", "source_label"]
