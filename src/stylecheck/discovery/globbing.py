# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Expand user-supplied glob patterns into concrete file paths."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Final

from wcmatch import glob

NEGATION_PREFIX: Final[str] = "!"
GLOB_FLAGS: Final[int] = glob.GLOBSTAR | glob.BRACE


def split_patterns(patterns: Iterable[str]) -> tuple[list[str], list[str]]:
    """Partition ``patterns`` into positive globs and negated globs.

    Args:
        patterns: Raw patterns where a leading ``!`` marks a negation.

    Returns:
        tuple[list[str], list[str]]: Positive patterns and negated patterns
        with the ``!`` prefix stripped, both in their original order.
    """

    positives: list[str] = []
    negations: list[str] = []
    for pattern in patterns:
        if pattern.startswith(NEGATION_PREFIX):
            negated = pattern[len(NEGATION_PREFIX) :]
            if negated:
                negations.append(negated)
            continue
        if pattern:
            positives.append(pattern)
    return positives, negations


def expand_globs(patterns: Sequence[str], *, cwd: Path) -> list[str]:
    """Return files matched by ``patterns`` relative to ``cwd``.

    Positive patterns are expanded in order, each pattern's matches sorted
    lexically, and duplicates keep their first position. Braces expand to
    alternatives (``*.{css,scss}``). Negated patterns are anchored at ``cwd``
    like positive ones and remove matches regardless of where they appear in
    ``patterns``, so ``!a.css`` drops ``a.css`` but keeps ``sub/a.css``.

    Args:
        patterns: Glob patterns, optionally negated with ``!``.
        cwd: Directory relative patterns are expanded against.

    Returns:
        list[str]: POSIX-style paths of matched files relative to ``cwd``.
    """

    positives, negations = split_patterns(patterns)
    matched: list[str] = []
    seen: set[str] = set()
    for pattern in positives:
        for candidate in _expand_one(pattern, cwd):
            if candidate in seen or _is_negated(candidate, negations):
                continue
            seen.add(candidate)
            matched.append(candidate)
    return matched


def _expand_one(pattern: str, cwd: Path) -> list[str]:
    """Return sorted files matched by a single positive ``pattern``.

    Args:
        pattern: Glob pattern, absolute or relative to ``cwd``.
        cwd: Base directory for relative patterns.

    Returns:
        list[str]: Matched files as POSIX paths relative to ``cwd``.
    """

    results: list[str] = []
    for raw in glob.glob(pattern, flags=GLOB_FLAGS, root_dir=os.fspath(cwd)):
        absolute = Path(raw) if os.path.isabs(raw) else cwd / raw
        if not absolute.is_file():
            continue
        results.append(Path(os.path.relpath(absolute, cwd)).as_posix())
    return sorted(results)


def _is_negated(candidate: str, negations: Sequence[str]) -> bool:
    """Return whether ``candidate`` matches any negated pattern.

    Args:
        candidate: POSIX path relative to the working directory.
        negations: Negated patterns with the ``!`` prefix removed.

    Returns:
        bool: ``True`` when the path must be dropped from the expansion.
    """

    return bool(negations) and glob.globmatch(candidate, negations, flags=GLOB_FLAGS)


__all__ = ["GLOB_FLAGS", "NEGATION_PREFIX", "expand_globs", "split_patterns"]
