# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the stylecheck package."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer
from typing_extensions import TypeAliasType

JsonScalar = TypeAliasType("JsonScalar", str | int | float | bool | None)
JsonValue = TypeAliasType("JsonValue", JsonScalar | list["JsonValue"] | dict[str, "JsonValue"])

ALL_RULES_KEY = "all"


class Severity(str, Enum):
    """Severity levels attached to lint warnings."""

    ERROR = "error"
    WARNING = "warning"


class LintWarning(BaseModel):
    """Single problem reported against a source, either by an engine or synthesised."""

    model_config = ConfigDict(frozen=True)

    line: int | None = None
    column: int | None = None
    rule: str
    severity: Severity
    text: str


class Deprecation(BaseModel):
    """Deprecation notice emitted by the engine for a configured rule or option."""

    model_config = ConfigDict(frozen=True)

    text: str
    reference: str | None = None


class InvalidOptionWarning(BaseModel):
    """Notice emitted when the engine rejects a configured rule option."""

    model_config = ConfigDict(frozen=True)

    text: str


class DisabledRange(BaseModel):
    """Line span in which a disable comment suppressed warnings.

    ``end`` is ``None`` when the disable comment was never re-enabled, in which
    case the range extends to the end of the source.
    """

    model_config = ConfigDict(frozen=True)

    start: int
    end: int | None = None

    def covers(self, line: int | None) -> bool:
        """Return whether ``line`` falls inside this range.

        Args:
            line: 1-based line number of a warning, or ``None`` when unknown.

        Returns:
            bool: ``True`` when the line is within ``start`` and ``end``.
        """

        if line is None:
            return False
        return self.start <= line and (self.end is None or line <= self.end)


class InlineInput(BaseModel):
    """Lint target supplied as literal source text."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["inline"] = "inline"
    code: str
    code_filename: Path | None = None


class FileInput(BaseModel):
    """Lint target read from a file on disk."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["file"] = "file"
    absolute_path: Path
    display_path: str


LintInput = TypeAliasType("LintInput", Annotated[InlineInput | FileInput, Field(discriminator="kind")])


class EngineOutcome(BaseModel):
    """Raw analysis outcome produced by a lint engine for one input."""

    model_config = ConfigDict(frozen=True)

    warnings: tuple[LintWarning, ...] = Field(default_factory=tuple)
    deprecations: tuple[Deprecation, ...] = Field(default_factory=tuple)
    invalid_option_warnings: tuple[InvalidOptionWarning, ...] = Field(default_factory=tuple)
    failed: bool = False
    disabled_ranges: dict[str, tuple[DisabledRange, ...]] | None = None


class ResultRecord(BaseModel):
    """Uniform per-input result consumed by formatters and analyses."""

    model_config = ConfigDict(frozen=True)

    source: str
    warnings: tuple[LintWarning, ...] = Field(default_factory=tuple)
    deprecations: tuple[Deprecation, ...] = Field(default_factory=tuple)
    invalid_option_warnings: tuple[InvalidOptionWarning, ...] = Field(default_factory=tuple)
    errored: bool = False
    disabled_ranges: dict[str, tuple[DisabledRange, ...]] | None = Field(default=None, exclude=True)

    @classmethod
    def from_outcome(cls, outcome: EngineOutcome, source: str) -> ResultRecord:
        """Build a record from an engine outcome.

        Args:
            outcome: Raw outcome returned by the engine.
            source: Display path, or the inline placeholder, for the input.

        Returns:
            ResultRecord: Record flagged as errored when the engine marked the
            input failed or reported at least one error-severity warning.
        """

        errored = outcome.failed or any(warning.severity is Severity.ERROR for warning in outcome.warnings)
        return cls(
            source=source,
            warnings=outcome.warnings,
            deprecations=outcome.deprecations,
            invalid_option_warnings=outcome.invalid_option_warnings,
            errored=errored,
            disabled_ranges=outcome.disabled_ranges,
        )


class UnusedDisableRanges(BaseModel):
    """Disable comments in one source that suppressed no warnings."""

    model_config = ConfigDict(frozen=True)

    source: str
    ranges: tuple[DisabledRange, ...] = Field(default_factory=tuple)


class Report(BaseModel):
    """Final value returned by a lint invocation."""

    model_config = ConfigDict(frozen=True)

    errored: bool
    output: str
    results: tuple[ResultRecord, ...] = Field(default_factory=tuple)
    needless_disables: tuple[UnusedDisableRanges, ...] | None = None

    @model_serializer(mode="wrap")
    def _omit_unrequested_analyses(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        """Drop ``needless_disables`` from payloads when it was not requested.

        Args:
            handler: Pydantic's default serializer for this model.

        Returns:
            dict[str, Any]: Serialised report payload.
        """

        payload = handler(self)
        if self.needless_disables is None:
            payload.pop("needless_disables", None)
        return payload


__all__ = [
    "ALL_RULES_KEY",
    "Deprecation",
    "DisabledRange",
    "EngineOutcome",
    "FileInput",
    "InlineInput",
    "InvalidOptionWarning",
    "JsonValue",
    "LintInput",
    "LintWarning",
    "Report",
    "ResultRecord",
    "Severity",
    "UnusedDisableRanges",
]
