# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line interface for stylecheck."""

from __future__ import annotations

from .command import app

__all__ = ["app"]
