# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Orchestration of resolution, batch execution, and aggregation."""

from __future__ import annotations

from .aggregator import aggregate
from .executor import BatchExecutor, convert_parse_failure
from .standalone import lint, lint_sync, lint_target, source_label

__all__ = [
    "BatchExecutor",
    "aggregate",
    "convert_parse_failure",
    "lint",
    "lint_sync",
    "lint_target",
    "source_label",
]
