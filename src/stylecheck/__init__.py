# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Orchestration core for linting stylesheets with a pluggable engine."""

from __future__ import annotations

from .engine import EngineFactory, LintEngine, load_engine_factory
from .errors import (
    ConfigurationError,
    CssSyntaxError,
    EngineFailure,
    IgnoreFileReadError,
    ParseFailure,
    StylecheckError,
)
from .models import (
    Deprecation,
    DisabledRange,
    EngineOutcome,
    FileInput,
    InlineInput,
    InvalidOptionWarning,
    LintWarning,
    Report,
    ResultRecord,
    Severity,
    UnusedDisableRanges,
)
from .options import EngineOptions, LintOptions
from .orchestration import lint, lint_sync

__all__ = [
    "ConfigurationError",
    "CssSyntaxError",
    "Deprecation",
    "DisabledRange",
    "EngineFactory",
    "EngineFailure",
    "EngineOptions",
    "EngineOutcome",
    "FileInput",
    "IgnoreFileReadError",
    "InlineInput",
    "InvalidOptionWarning",
    "LintEngine",
    "LintOptions",
    "LintWarning",
    "ParseFailure",
    "Report",
    "ResultRecord",
    "Severity",
    "StylecheckError",
    "UnusedDisableRanges",
    "lint",
    "lint_sync",
    "load_engine_factory",
]
