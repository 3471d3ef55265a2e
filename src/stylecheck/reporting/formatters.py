# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Built-in report formatters and formatter selection."""

from __future__ import annotations

import json
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from io import StringIO
from typing import Final

from rich.console import Console, RenderableType
from rich.table import Table
from rich.text import Text
from typing_extensions import TypeAliasType

from ..constants import DEFAULT_FORMATTER
from ..errors import ConfigurationError
from ..models import LintWarning, ResultRecord, Severity
from ..options import FormatterFunction

OUTPUT_WIDTH: Final[int] = 120
SEVERITY_SYMBOLS: Final[dict[Severity, str]] = {
    Severity.ERROR: "✖",
    Severity.WARNING: "⚠",
}


def json_formatter(results: Sequence[ResultRecord]) -> str:
    """Render ``results`` as a JSON array of result records."""

    return json.dumps([record.model_dump(mode="json") for record in results])


def string_formatter(results: Sequence[ResultRecord]) -> str:
    """Render a compact human-readable listing of every warning.

    Deprecations and invalid option warnings are listed once at the top,
    followed by one table per source that has warnings.

    Args:
        results: Result records to render.

    Returns:
        str: Rendered report; empty when there is nothing to report.
    """

    renderables: list[RenderableType] = []
    for text in _unique(deprecation.text for record in results for deprecation in record.deprecations):
        renderables.append(Text(f"Deprecation Warning: {text}"))
    for text in _unique(warning.text for record in results for warning in record.invalid_option_warnings):
        renderables.append(Text(f"Invalid Option: {text}"))

    for record in results:
        if not record.warnings:
            continue
        renderables.append(Text(""))
        renderables.append(Text(record.source, style="underline"))
        renderables.append(_warning_table(record.warnings))

    if not renderables:
        return ""
    return _render(renderables)


def verbose_formatter(results: Sequence[ResultRecord]) -> str:
    """Render the string report followed by source and problem summaries.

    Args:
        results: Result records to render.

    Returns:
        str: Rendered report including per-severity and per-rule counts.
    """

    lines = [string_formatter(results)]
    lines.append(f"\n{len(results)} {_plural('source', len(results))} checked\n")
    for record in results:
        lines.append(f" {record.source}{' (errored)' if record.errored else ''}\n")

    warnings = [warning for record in results for warning in record.warnings]
    lines.append(f"\n{len(warnings)} {_plural('problem', len(warnings))} found\n")
    for severity, grouped in _group_by_severity(warnings).items():
        lines.append(f' severity level "{severity.value}": {len(grouped)}\n')
        for rule, count in Counter(warning.rule for warning in grouped).items():
            lines.append(f"  {rule}: {count}\n")
    return "".join(lines) + "\n"


FORMATTERS: Final[Mapping[str, FormatterFunction]] = {
    "json": json_formatter,
    "string": string_formatter,
    "verbose": verbose_formatter,
}


@dataclass(frozen=True, slots=True)
class BuiltinFormatter:
    """Formatter selected by name from :data:`FORMATTERS`."""

    name: str

    def __call__(self, results: Sequence[ResultRecord]) -> str:
        """Render ``results`` with the registered formatter.

        Args:
            results: Lint results in input order.

        Returns:
            str: Formatted report text.
        """

        return FORMATTERS[self.name](results)


@dataclass(frozen=True, slots=True)
class CustomFormatter:
    """Formatter supplied by the caller as a plain function."""

    function: FormatterFunction

    def __call__(self, results: Sequence[ResultRecord]) -> str:
        """Render ``results`` with the caller-supplied function.

        Args:
            results: Lint results in input order.

        Returns:
            str: Whatever text the function produced.
        """

        return self.function(results)


ResolvedFormatter = TypeAliasType("ResolvedFormatter", BuiltinFormatter | CustomFormatter)


def resolve_formatter(formatter: str | FormatterFunction | None) -> ResolvedFormatter:
    """Resolve a formatter name or callable into a formatter.

    Args:
        formatter: Registered formatter name, a custom function, or ``None``
            for the default JSON formatter.

    Returns:
        ResolvedFormatter: Formatter ready to render results.

    Raises:
        ConfigurationError: If ``formatter`` names no registered formatter.
    """

    if formatter is None:
        return BuiltinFormatter(DEFAULT_FORMATTER)
    if isinstance(formatter, str):
        if formatter not in FORMATTERS:
            names = ", ".join(f"'{name}'" for name in FORMATTERS)
            raise ConfigurationError(f"You must use a valid formatter option: {names}, or a function")
        return BuiltinFormatter(formatter)
    if callable(formatter):
        return CustomFormatter(formatter)
    raise ConfigurationError(f"Formatter must be a name or a function, not {type(formatter).__name__}")


def _warning_table(warnings: Iterable[LintWarning]) -> Table:
    """Return a borderless table of ``warnings`` ordered by position.

    Args:
        warnings: Warnings reported for a single source.

    Returns:
        Table: Rows of location, severity symbol, message and rule.
    """

    table = Table(box=None, show_header=False, pad_edge=False, padding=(0, 1))
    table.add_column("location", justify="right", no_wrap=True)
    table.add_column("severity", no_wrap=True)
    table.add_column("message")
    table.add_column("rule", style="dim", no_wrap=True)
    ordered = sorted(warnings, key=lambda warning: (warning.line or 0, warning.column or 0))
    for warning in ordered:
        location = f"{warning.line or 0}:{warning.column or 0}"
        table.add_row(location, SEVERITY_SYMBOLS[warning.severity], warning.text, warning.rule)
    return table


def _render(renderables: Sequence[RenderableType]) -> str:
    """Print ``renderables`` to an uncoloured in-memory console.

    Args:
        renderables: Rich objects to print in order.

    Returns:
        str: Captured plain-text output.
    """

    buffer = StringIO()
    console = Console(
        file=buffer,
        width=OUTPUT_WIDTH,
        no_color=True,
        color_system=None,
        highlight=False,
        emoji=False,
        force_terminal=False,
    )
    for renderable in renderables:
        console.print(renderable)
    return buffer.getvalue()


def _unique(values: Iterable[str]) -> list[str]:
    """Return ``values`` without duplicates, keeping first occurrences."""

    return list(dict.fromkeys(values))


def _group_by_severity(warnings: Iterable[LintWarning]) -> dict[Severity, list[LintWarning]]:
    """Group ``warnings`` by severity in first-seen order.

    Args:
        warnings: Warnings collected across every result.

    Returns:
        dict[Severity, list[LintWarning]]: Warnings keyed by severity.
    """

    grouped: dict[Severity, list[LintWarning]] = {}
    for warning in warnings:
        grouped.setdefault(warning.severity, []).append(warning)
    return grouped


def _plural(word: str, count: int) -> str:
    """Return ``word`` pluralised for ``count``."""

    return word if count == 1 else f"{word}s"


__all__ = [
    "BuiltinFormatter",
    "CustomFormatter",
    "FORMATTERS",
    "ResolvedFormatter",
    "json_formatter",
    "resolve_formatter",
    "string_formatter",
    "verbose_formatter",
]
