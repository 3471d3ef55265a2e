# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve invocation options into the concrete inputs handed to the engine."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

from ..constants import ALWAYS_IGNORED_GLOBS
from ..models import FileInput, InlineInput
from ..options import LintMode, LintOptions
from .globbing import NEGATION_PREFIX, expand_globs
from .ignore import IgnoreMatcher


def ensure_single_mode(options: LintOptions) -> LintMode:
    """Validate that exactly one input mode is selected.

    This check performs no I/O so callers can fail fast.

    Args:
        options: Invocation options.

    Returns:
        LintMode: The selected mode.

    Raises:
        ConfigurationError: If both or neither of ``code`` and ``files`` are set.
    """

    return options.mode()


def resolve_code_filename(code_filename: Path | None, cwd: Path) -> Path | None:
    """Return ``code_filename`` made absolute against ``cwd``."""

    if code_filename is None or code_filename.is_absolute():
        return code_filename
    return cwd / code_filename


def build_file_patterns(
    patterns: Sequence[str],
    *,
    disable_default_ignores: bool,
    default_ignores: Sequence[str] = ALWAYS_IGNORED_GLOBS,
) -> list[str]:
    """Return user patterns followed by negated default exclusions.

    Args:
        patterns: User-supplied glob patterns.
        disable_default_ignores: Skip the default exclusions when ``True``.
        default_ignores: Globs always excluded unless disabled.

    Returns:
        list[str]: Patterns ready for expansion.
    """

    combined = list(patterns)
    if not disable_default_ignores:
        combined.extend(f"{NEGATION_PREFIX}{glob}" for glob in default_ignores)
    return combined


def resolve_inputs(
    options: LintOptions,
    matcher: IgnoreMatcher,
    *,
    default_ignores: Sequence[str] = ALWAYS_IGNORED_GLOBS,
    debug_logger: Callable[[str], None] | None = None,
) -> InlineInput | list[FileInput]:
    """Resolve ``options`` into a single inline input or a list of file inputs.

    Args:
        options: Invocation options.
        matcher: Ignore matcher applied to expanded file paths.
        default_ignores: Globs excluded unless ``disable_default_ignores`` is set.
        debug_logger: Optional callable receiving debug messages.

    Returns:
        InlineInput | list[FileInput]: Inline input in code mode, otherwise the
        possibly empty list of files that survived filtering.

    Raises:
        ConfigurationError: If both or neither of ``code`` and ``files`` are set.
    """

    cwd = options.cwd
    if ensure_single_mode(options) == "code":
        return InlineInput(
            code=options.code or "",
            code_filename=resolve_code_filename(options.code_filename, cwd),
        )

    patterns = build_file_patterns(
        options.file_patterns(),
        disable_default_ignores=options.disable_default_ignores,
        default_ignores=default_ignores,
    )
    expanded = expand_globs(patterns, cwd=cwd)
    kept = matcher.filter(expanded)
    if debug_logger is not None:
        debug_logger(f"patterns={len(patterns)} matched={len(expanded)} kept={len(kept)}")
    return [FileInput(absolute_path=_absolute(path, cwd), display_path=path) for path in kept]


def _absolute(path: str, cwd: Path) -> Path:
    candidate = Path(path)
    return candidate if candidate.is_absolute() else (cwd / candidate)


__all__ = [
    "build_file_patterns",
    "ensure_single_mode",
    "resolve_code_filename",
    "resolve_inputs",
]
