# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reporting helpers: formatters and secondary analyses."""

from __future__ import annotations

from .formatters import (
    FORMATTERS,
    BuiltinFormatter,
    CustomFormatter,
    ResolvedFormatter,
    json_formatter,
    resolve_formatter,
    string_formatter,
    verbose_formatter,
)
from .needless_disables import find_needless_disables

__all__ = [
    "FORMATTERS",
    "BuiltinFormatter",
    "CustomFormatter",
    "ResolvedFormatter",
    "find_needless_disables",
    "json_formatter",
    "resolve_formatter",
    "string_formatter",
    "verbose_formatter",
]
