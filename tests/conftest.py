# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from pathlib import Path

import pytest

from stylecheck.models import EngineOutcome, FileInput, InlineInput
from stylecheck.options import EngineOptions

INLINE_KEY = "<inline>"


class FakeEngine:
    """Engine stub returning canned outcomes keyed by display path."""

    def __init__(
        self,
        outcomes: Mapping[str, EngineOutcome | BaseException] | None = None,
        *,
        delays: Mapping[str, float] | None = None,
    ) -> None:
        self.outcomes = dict(outcomes or {})
        self.delays = dict(delays or {})
        self.calls: list[str] = []
        self.completed: list[str] = []
        self.active = 0
        self.peak_active = 0

    async def lint(self, target: InlineInput | FileInput) -> EngineOutcome:
        key = target.display_path if isinstance(target, FileInput) else INLINE_KEY
        self.calls.append(key)
        self.active += 1
        self.peak_active = max(self.peak_active, self.active)
        try:
            await asyncio.sleep(self.delays.get(key, 0))
            result = self.outcomes.get(key, EngineOutcome())
            if isinstance(result, BaseException):
                raise result
            self.completed.append(key)
            return result
        finally:
            self.active -= 1


class FakeEngineFactory:
    """Factory stub recording the options it was created with."""

    def __init__(self, engine: FakeEngine) -> None:
        self.engine = engine
        self.options: list[EngineOptions] = []

    def __call__(self, options: EngineOptions) -> FakeEngine:
        self.options.append(options)
        return self.engine


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def engine_factory(fake_engine: FakeEngine) -> FakeEngineFactory:
    return FakeEngineFactory(fake_engine)


@pytest.fixture
def css_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a small stylesheet tree and make it the working directory."""

    (tmp_path / "a.css").write_text("a { color: red; }\n", encoding="utf-8")
    (tmp_path / "b.css").write_text("b { color: blue; }\n", encoding="utf-8")
    styles = tmp_path / "styles"
    styles.mkdir()
    (styles / "main.css").write_text(".main { margin: 0; }\n", encoding="utf-8")
    vendor = tmp_path / "node_modules" / "lib"
    vendor.mkdir(parents=True)
    (vendor / "vendor.css").write_text(".vendor {}\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("not a stylesheet\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path
