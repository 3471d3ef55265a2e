# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Detect disable comments that suppressed no warnings."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..models import ALL_RULES_KEY, DisabledRange, LintWarning, ResultRecord, UnusedDisableRanges


@dataclass(slots=True)
class _TrackedRange:
    """Disabled range plus whether a warning fell inside it."""

    span: DisabledRange
    used: bool = False

    @property
    def key(self) -> tuple[int, int | None]:
        return (self.span.start, self.span.end)


def find_needless_disables(results: Sequence[ResultRecord]) -> tuple[UnusedDisableRanges, ...]:
    """Return, per source, the disabled ranges that covered no warning.

    Results without disabled-range data, such as those synthesised from parse
    failures, are skipped. The engine is expected to have reported warnings
    with disables ignored so that suppressed problems are still visible here.

    Args:
        results: Result records produced for the batch.

    Returns:
        tuple[UnusedDisableRanges, ...]: One entry per analysed source.
    """

    report: list[UnusedDisableRanges] = []
    for record in results:
        if record.disabled_ranges is None:
            continue
        tracked = {
            rule: [_TrackedRange(span) for span in spans] for rule, spans in record.disabled_ranges.items()
        }
        for warning in record.warnings:
            _mark_covering_range(tracked, warning)
        report.append(UnusedDisableRanges(source=record.source, ranges=tuple(_collect_unused(tracked))))
    return tuple(report)


def _mark_covering_range(tracked: dict[str, list[_TrackedRange]], warning: LintWarning) -> None:
    """Flag the last range that suppresses ``warning`` as used.

    Rule-specific ranges take precedence over ranges disabling every rule.
    """

    for candidate in (tracked.get(warning.rule, []), tracked.get(ALL_RULES_KEY, [])):
        for entry in reversed(candidate):
            if entry.span.covers(warning.line):
                entry.used = True
                return


def _collect_unused(tracked: dict[str, list[_TrackedRange]]) -> list[DisabledRange]:
    # The same comment can appear in both the rule-specific and the "all"
    # range sets; a use of either copy makes the comment needed.
    entries = [entry for group in tracked.values() for entry in group]
    used = {entry.key for entry in entries if entry.used}
    unused: dict[tuple[int, int | None], DisabledRange] = {}
    for entry in entries:
        if entry.key not in used:
            unused.setdefault(entry.key, entry.span)
    return list(unused.values())


__all__ = ["find_needless_disables"]
