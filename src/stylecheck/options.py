# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Invocation options accepted by the stylecheck orchestration core."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing_extensions import TypeAliasType

from .errors import ConfigurationError
from .models import JsonValue, ResultRecord

FormatterFunction = TypeAliasType("FormatterFunction", Callable[[Sequence[ResultRecord]], str])
LintMode = TypeAliasType("LintMode", Literal["code", "files"])

SINGLE_MODE_MESSAGE = "You must pass stylecheck a `files` glob or a `code` string, though not both"


class EngineOptions(BaseModel):
    """Options forwarded verbatim to the engine factory."""

    model_config = ConfigDict(frozen=True)

    config: dict[str, JsonValue] | None = None
    config_file: Path | None = None
    config_basedir: Path | None = None
    config_overrides: dict[str, JsonValue] | None = None
    ignore_disables: bool = False
    report_needless_disables: bool = False
    syntax: str | None = None
    custom_syntax: str | None = None


class LintOptions(BaseModel):
    """Options describing a single lint invocation."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    files: str | list[str] | None = None
    code: str | None = None
    code_filename: Path | None = None
    ignore_path: Path | None = None
    disable_default_ignores: bool = False
    formatter: str | Callable[[Sequence[ResultRecord]], str] | None = None
    report_needless_disables: bool = False
    max_concurrency: int | None = Field(default=None, ge=1)
    cwd: Path = Field(default_factory=Path.cwd)

    config: dict[str, JsonValue] | None = None
    config_file: Path | None = None
    config_basedir: Path | None = None
    config_overrides: dict[str, JsonValue] | None = None
    ignore_disables: bool = False
    syntax: str | None = None
    custom_syntax: str | None = None

    @field_validator("ignore_path", "formatter", mode="before")
    @classmethod
    def _blank_means_default(cls, value: object) -> object:
        """Treat an empty string as an unset option.

        Args:
            value: Raw value supplied for the field.

        Returns:
            object: ``None`` for ``""``; otherwise ``value`` unchanged.
        """

        return None if value == "" else value

    def mode(self) -> LintMode:
        """Return which input mode the options select.

        Returns:
            LintMode: ``"code"`` for inline source, ``"files"`` for glob patterns.

        Raises:
            ConfigurationError: If both or neither of ``code`` and ``files`` are set.
        """

        has_code = self.code is not None
        has_files = self.files is not None and self.files != ""
        if has_code == has_files:
            raise ConfigurationError(SINGLE_MODE_MESSAGE)
        return "code" if has_code else "files"

    def file_patterns(self) -> list[str]:
        """Return ``files`` normalised to a list of patterns."""

        if self.files is None:
            return []
        if isinstance(self.files, str):
            return [self.files]
        return list(self.files)

    def engine_options(self) -> EngineOptions:
        """Project the pass-through subset consumed by the engine factory.

        Returns:
            EngineOptions: Engine options; disables are ignored whenever
            needless-disable reporting is requested so suppressed warnings
            remain visible to the analysis.
        """

        return EngineOptions(
            config=self.config,
            config_file=self.config_file,
            config_basedir=self.config_basedir,
            config_overrides=self.config_overrides,
            ignore_disables=self.ignore_disables or self.report_needless_disables,
            report_needless_disables=self.report_needless_disables,
            syntax=self.syntax,
            custom_syntax=self.custom_syntax,
        )


__all__ = [
    "EngineOptions",
    "FormatterFunction",
    "LintMode",
    "LintOptions",
    "SINGLE_MODE_MESSAGE",
]
