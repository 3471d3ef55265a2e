# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Concurrent execution of a lint callable across every resolved input."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass

from typing_extensions import TypeAliasType

from ..constants import INLINE_SOURCE_PLACEHOLDER
from ..errors import ParseFailure
from ..models import LintInput, LintWarning, ResultRecord, Severity

LintCallable = TypeAliasType("LintCallable", Callable[[LintInput], Awaitable[ResultRecord]])


def convert_parse_failure(error: ParseFailure) -> ResultRecord:
    """Convert a parse failure into an errored result record.

    Args:
        error: Parse failure raised while linting one input.

    Returns:
        ResultRecord: Record holding a single error warning named after the
        failure type so formatters can present it like any other problem.
    """

    return ResultRecord(
        source=error.file or INLINE_SOURCE_PLACEHOLDER,
        errored=True,
        warnings=(
            LintWarning(
                line=error.line,
                column=error.column,
                rule=error.error_name,
                severity=Severity.ERROR,
                text=f"{error.reason} ({error.error_name})",
            ),
        ),
    )


def _first_failure(group: BaseExceptionGroup[BaseException]) -> BaseException:
    """Return the first leaf exception collected in ``group``."""

    first = group.exceptions[0]
    if isinstance(first, BaseExceptionGroup):
        return _first_failure(first)
    return first


@dataclass(slots=True)
class BatchExecutor:
    """Run ``lint_one`` over a batch of inputs with order-preserving results.

    Every input is scheduled immediately. When ``max_concurrency`` is set a
    semaphore caps how many invocations run at once; the observable results
    are identical either way.
    """

    max_concurrency: int | None = None
    debug_logger: Callable[[str], None] | None = None

    async def run(
        self,
        inputs: Sequence[LintInput],
        lint_one: LintCallable,
    ) -> list[ResultRecord]:
        """Lint every input concurrently.

        Args:
            inputs: Inputs to lint; result ``i`` corresponds to ``inputs[i]``.
            lint_one: Coroutine function linting a single input.

        Returns:
            list[ResultRecord]: One record per input in input order.

        Raises:
            Exception: The first non-parse failure raised by ``lint_one``. The
                remaining in-flight invocations are cancelled and no partial
                results are returned.
        """

        if not inputs:
            return []
        slots: list[ResultRecord | None] = [None] * len(inputs)
        semaphore = asyncio.Semaphore(self.max_concurrency) if self.max_concurrency else None

        async def run_slot(index: int, target: LintInput) -> None:
            if semaphore is None:
                slots[index] = await self._lint_isolated(target, lint_one)
                return
            async with semaphore:
                slots[index] = await self._lint_isolated(target, lint_one)

        self._debug(f"batch size={len(inputs)} max_concurrency={self.max_concurrency or 'unbounded'}")
        try:
            async with asyncio.TaskGroup() as group:
                for index, target in enumerate(inputs):
                    group.create_task(run_slot(index, target))
        except BaseExceptionGroup as failures:
            self._debug(f"batch aborted failures={len(failures.exceptions)}")
            raise _first_failure(failures) from None
        return [record for record in slots if record is not None]

    async def _lint_isolated(
        self,
        target: LintInput,
        lint_one: LintCallable,
    ) -> ResultRecord:
        """Lint ``target`` downgrading parse failures to result records."""

        try:
            return await lint_one(target)
        except ParseFailure as error:
            self._debug(f"parse failure rule={error.error_name} source={error.file or INLINE_SOURCE_PLACEHOLDER}")
            return convert_parse_failure(error)

    def _debug(self, message: str) -> None:
        if self.debug_logger:
            self.debug_logger(message)


__all__ = ["BatchExecutor", "LintCallable", "convert_parse_failure"]
