# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Gitignore-style matcher used to drop files before they are linted."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Final

from pathspec import GitIgnoreSpec

from ..constants import DEFAULT_IGNORE_FILENAME
from ..errors import IgnoreFileReadError

_LINE_BREAK: Final[re.Pattern[str]] = re.compile(r"\r?\n")


class IgnoreMatcher:
    """Decide whether working-directory-relative paths are ignored."""

    def __init__(self, patterns: Sequence[str] = (), *, source: Path | None = None) -> None:
        """Compile ``patterns`` using git's ignore-file semantics.

        Args:
            patterns: Raw ignore-file lines; blanks and comments are allowed.
            source: Ignore file the patterns were read from, if any.
        """

        self.patterns = tuple(patterns)
        self.source = source
        self._spec = GitIgnoreSpec.from_lines(self.patterns)

    @classmethod
    def from_text(cls, text: str, *, source: Path | None = None) -> IgnoreMatcher:
        """Return a matcher for the contents of an ignore file.

        Args:
            text: Ignore-file contents using either line-ending convention.
            source: Ignore file the text was read from, if any.

        Returns:
            IgnoreMatcher: Matcher compiled from every line of ``text``.
        """

        return cls(_LINE_BREAK.split(text), source=source)

    def ignores(self, path: str | Path) -> bool:
        """Return whether ``path`` matches any ignore rule.

        Args:
            path: Path relative to the working directory.

        Returns:
            bool: ``True`` when the path should be excluded.
        """

        candidate = path.as_posix() if isinstance(path, Path) else path
        return self._spec.match_file(candidate)

    def filter(self, paths: Iterable[str]) -> list[str]:
        """Return the paths that no rule ignores, in their original order.

        Args:
            paths: Paths relative to the working directory.

        Returns:
            list[str]: Surviving paths.
        """

        return [path for path in paths if not self.ignores(path)]

    def __repr__(self) -> str:
        return f"IgnoreMatcher(source={self.source!s}, patterns={len(self.patterns)})"


def resolve_ignore_path(path: str | Path | None, cwd: Path) -> Path:
    """Return the absolute ignore-file location.

    Args:
        path: Configured ignore path; ``None`` or ``""`` selects
            ``DEFAULT_IGNORE_FILENAME``.
        cwd: Working directory relative paths are resolved against.

    Returns:
        Path: Absolute path of the ignore file.
    """

    candidate = Path(path) if path else Path(DEFAULT_IGNORE_FILENAME)
    return candidate if candidate.is_absolute() else cwd / candidate


def build_ignore_matcher(path: str | Path | None = None, *, cwd: Path) -> IgnoreMatcher:
    """Load the ignore file at ``path`` and compile it into a matcher.

    A missing ignore file is not an error and yields a matcher that ignores
    nothing. Any other read failure aborts the invocation.

    Args:
        path: Ignore file location, absolute or relative to ``cwd``.
        cwd: Working directory for resolving ``path``.

    Returns:
        IgnoreMatcher: Compiled matcher.

    Raises:
        IgnoreFileReadError: If the file exists but cannot be read.
    """

    resolved = resolve_ignore_path(path, cwd)
    try:
        text = resolved.read_text(encoding="utf-8")
    except FileNotFoundError:
        return IgnoreMatcher(source=None)
    except (OSError, UnicodeDecodeError) as exc:
        raise IgnoreFileReadError(resolved, str(exc)) from exc
    return IgnoreMatcher.from_text(text, source=resolved)


__all__ = ["IgnoreMatcher", "build_ignore_matcher", "resolve_ignore_path"]
