# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Discovery helpers turning options into lint inputs."""

from __future__ import annotations

from .globbing import expand_globs, split_patterns
from .ignore import IgnoreMatcher, build_ignore_matcher, resolve_ignore_path
from .resolver import build_file_patterns, ensure_single_mode, resolve_code_filename, resolve_inputs

__all__ = [
    "IgnoreMatcher",
    "build_file_patterns",
    "build_ignore_matcher",
    "ensure_single_mode",
    "expand_globs",
    "resolve_code_filename",
    "resolve_ignore_path",
    "resolve_inputs",
    "split_patterns",
]
