# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core constants shared by discovery, orchestration, and reporting."""

from __future__ import annotations

from typing import Final

DEFAULT_IGNORE_FILENAME: Final[str] = ".stylecheckignore"

ALWAYS_IGNORED_GLOBS: Final[tuple[str, ...]] = (
    "**/node_modules/**",
    "**/bower_components/**",
)

INLINE_SOURCE_PLACEHOLDER: Final[str] = "<input css 1>"

ENGINE_PLUGIN_GROUP: Final[str] = "stylecheck.engines"

DEFAULT_FORMATTER: Final[str] = "json"

__all__ = [
    "ALWAYS_IGNORED_GLOBS",
    "DEFAULT_FORMATTER",
    "DEFAULT_IGNORE_FILENAME",
    "ENGINE_PLUGIN_GROUP",
    "INLINE_SOURCE_PLACEHOLDER",
]
