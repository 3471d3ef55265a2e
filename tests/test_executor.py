# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for concurrent batch execution."""

from functools import partial
from pathlib import Path

import pytest

from stylecheck.errors import CssSyntaxError, EngineFailure, ParseFailure
from stylecheck.models import EngineOutcome, FileInput, InlineInput, LintWarning, Severity
from stylecheck.orchestration.executor import BatchExecutor, convert_parse_failure
from stylecheck.orchestration.standalone import lint_target


def _inputs(*names: str) -> list[FileInput]:
    return [FileInput(absolute_path=Path("/project") / name, display_path=name) for name in names]


@pytest.mark.asyncio
async def test_results_follow_input_order_not_completion_order(fake_engine) -> None:
    fake_engine.delays.update({"a.css": 0.05, "b.css": 0.02, "c.css": 0.0})
    inputs = _inputs("a.css", "b.css", "c.css")

    results = await BatchExecutor().run(inputs, partial(lint_target, fake_engine))

    assert [record.source for record in results] == ["a.css", "b.css", "c.css"]
    assert fake_engine.completed == ["c.css", "b.css", "a.css"]


@pytest.mark.asyncio
async def test_all_inputs_start_without_waiting(fake_engine) -> None:
    fake_engine.delays.update({name: 0.01 for name in ("a.css", "b.css", "c.css", "d.css")})

    await BatchExecutor().run(_inputs("a.css", "b.css", "c.css", "d.css"), partial(lint_target, fake_engine))

    assert fake_engine.peak_active == 4


@pytest.mark.asyncio
async def test_max_concurrency_caps_active_invocations(fake_engine) -> None:
    names = [f"{index}.css" for index in range(6)]
    fake_engine.delays.update({name: 0.01 for name in names})

    results = await BatchExecutor(max_concurrency=2).run(_inputs(*names), partial(lint_target, fake_engine))

    assert fake_engine.peak_active == 2
    assert [record.source for record in results] == names


@pytest.mark.asyncio
async def test_parse_failure_is_isolated_to_its_input(fake_engine) -> None:
    warning = LintWarning(line=1, column=3, rule="color-named", severity=Severity.WARNING, text="named color")
    fake_engine.outcomes.update(
        {
            "a.css": EngineOutcome(warnings=(warning,)),
            "b.css": CssSyntaxError("Unclosed block", line=4, column=2, file="/project/b.css"),
        },
    )

    results = await BatchExecutor().run(_inputs("a.css", "b.css", "c.css"), partial(lint_target, fake_engine))

    assert [record.errored for record in results] == [False, True, False]
    assert results[0].warnings == (warning,)
    broken = results[1]
    assert broken.source == "/project/b.css"
    assert broken.warnings[0].rule == "CssSyntaxError"
    assert broken.warnings[0].text == "Unclosed block (CssSyntaxError)"
    assert (broken.warnings[0].line, broken.warnings[0].column) == (4, 2)
    assert broken.warnings[0].severity is Severity.ERROR
    assert results[2].warnings == ()


@pytest.mark.asyncio
async def test_fatal_failure_rejects_whole_batch(fake_engine) -> None:
    fake_engine.delays.update({"a.css": 0.05})
    fake_engine.outcomes.update({"b.css": EngineFailure("rule crashed")})

    with pytest.raises(EngineFailure, match="rule crashed"):
        await BatchExecutor().run(_inputs("a.css", "b.css", "c.css"), partial(lint_target, fake_engine))

    assert "a.css" not in fake_engine.completed


@pytest.mark.asyncio
async def test_arbitrary_errors_are_fatal_and_unwrapped(fake_engine) -> None:
    fake_engine.outcomes.update({"a.css": PermissionError("denied")})

    with pytest.raises(PermissionError):
        await BatchExecutor().run(_inputs("a.css"), partial(lint_target, fake_engine))


@pytest.mark.asyncio
async def test_empty_batch_returns_no_results(fake_engine) -> None:
    assert await BatchExecutor().run([], partial(lint_target, fake_engine)) == []
    assert fake_engine.calls == []


@pytest.mark.asyncio
async def test_inline_parse_failure_uses_placeholder_source(fake_engine) -> None:
    fake_engine.outcomes.update({"<inline>": CssSyntaxError("Unknown word", line=1, column=1)})

    results = await BatchExecutor().run([InlineInput(code="a {")], partial(lint_target, fake_engine))

    assert results[0].source == "<input css 1>"
    assert results[0].errored


def test_convert_parse_failure_uses_subclass_name() -> None:
    class ScssSyntaxError(ParseFailure):
        pass

    record = convert_parse_failure(ScssSyntaxError("Expected }", line=2))

    assert record.warnings[0].rule == "ScssSyntaxError"
    assert record.warnings[0].text == "Expected } (ScssSyntaxError)"
    assert record.warnings[0].column is None
    assert record.deprecations == ()
    assert record.invalid_option_warnings == ()
