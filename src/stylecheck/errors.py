# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception taxonomy raised by the stylecheck orchestration core."""

from __future__ import annotations

from pathlib import Path


class StylecheckError(Exception):
    """Base class for every error raised by stylecheck itself."""


class ConfigurationError(StylecheckError):
    """Raised when invocation options are invalid or contradictory."""


class IgnoreFileReadError(StylecheckError):
    """Raised when an ignore file exists but cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialise the error with the offending path.

        Args:
            path: Absolute path of the ignore file.
            reason: Description of the underlying read failure.
        """

        super().__init__(f"Unable to read ignore file {path}: {reason}")
        self.path = path
        self.reason = reason


class ParseFailure(StylecheckError):
    """Recoverable structural error raised while parsing a single input.

    Engines raise a subclass of this error when the source text itself is
    malformed. The batch executor converts it into an errored result record
    instead of aborting the run.
    """

    def __init__(
        self,
        reason: str,
        *,
        line: int | None = None,
        column: int | None = None,
        file: str | None = None,
    ) -> None:
        """Initialise the parse failure.

        Args:
            reason: Short human-readable description of the syntax problem.
            line: 1-based line where parsing failed, when known.
            column: 1-based column where parsing failed, when known.
            file: Path of the file being parsed; ``None`` for inline code.
        """

        super().__init__(reason)
        self.reason = reason
        self.line = line
        self.column = column
        self.file = file

    @property
    def error_name(self) -> str:
        """Return the name reported as the rule of the synthetic warning."""

        return type(self).__name__

    def __str__(self) -> str:
        location = ""
        if self.line is not None:
            location = f":{self.line}"
            if self.column is not None:
                location += f":{self.column}"
        subject = self.file or "<input>"
        return f"{self.error_name}: {subject}{location}: {self.reason}"


class CssSyntaxError(ParseFailure):
    """Parse failure raised by engines for malformed stylesheet syntax."""


class EngineFailure(StylecheckError):
    """Fatal error raised from inside a lint engine."""


__all__ = [
    "ConfigurationError",
    "CssSyntaxError",
    "EngineFailure",
    "IgnoreFileReadError",
    "ParseFailure",
    "StylecheckError",
]
