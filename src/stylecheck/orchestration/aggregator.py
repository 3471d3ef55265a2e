# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Assemble per-input result records into the final report."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from ..models import Report, ResultRecord
from ..reporting.needless_disables import find_needless_disables


def aggregate(
    results: Sequence[ResultRecord],
    formatter: Callable[[Sequence[ResultRecord]], str],
    *,
    report_needless_disables: bool = False,
) -> Report:
    """Build the report for a completed batch.

    Args:
        results: Result records in input order.
        formatter: Pure function rendering ``results`` to text.
        report_needless_disables: Attach the needless-disable analysis when
            ``True``; otherwise the field stays unset.

    Returns:
        Report: Immutable report whose ``errored`` flag is set when any
        record errored.
    """

    records = tuple(results)
    return Report(
        errored=any(record.errored for record in records),
        output=formatter(records),
        results=records,
        needless_disables=find_needless_disables(records) if report_needless_disables else None,
    )


__all__ = ["aggregate"]
