# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Lint engine contracts and entry-point loading helpers.

The rule engine itself lives outside this package. Engines are provided by
third-party distributions that register a factory under the
``stylecheck.engines`` entry-point group, or referenced directly with a
``module:attribute`` string.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from importlib import import_module, metadata
from importlib.metadata import EntryPoint, EntryPoints
from typing import Protocol, TypeAlias, cast, runtime_checkable

from .constants import ENGINE_PLUGIN_GROUP
from .errors import ConfigurationError
from .models import EngineOutcome, LintInput
from .options import EngineOptions


@runtime_checkable
class LintEngine(Protocol):
    """Engine that analyses one input at a time."""

    async def lint(self, target: LintInput) -> EngineOutcome:
        """Analyse ``target`` and return its raw outcome.

        Args:
            target: Inline source or file reference to analyse.

        Returns:
            EngineOutcome: Warnings and metadata produced for ``target``.

        Raises:
            ParseFailure: If the input's syntax cannot be parsed.
        """

        ...


class EngineFactory(Protocol):
    """Callable creating a configured :class:`LintEngine`."""

    def __call__(self, options: EngineOptions) -> LintEngine:
        """Return an engine configured with ``options``."""

        ...


_EntryPointSource: TypeAlias = EntryPoints | Mapping[str, Sequence[EntryPoint]]


def _select_entry_points(entries: _EntryPointSource, group: str) -> Iterable[EntryPoint]:
    """Return entry points exposed under ``group`` from ``entries``.

    Args:
        entries: Raw entry-point container returned by :func:`metadata.entry_points`.
        group: Name of the entry-point group to extract.

    Returns:
        Iterable[EntryPoint]: Entry points belonging to ``group``.
    """

    if isinstance(entries, Mapping):
        return entries.get(group, ())
    return entries.select(group=group)


def _engine_entry_points() -> dict[str, EntryPoint]:
    entries = cast(_EntryPointSource, metadata.entry_points())
    return {entry.name: entry for entry in _select_entry_points(entries, ENGINE_PLUGIN_GROUP)}


def available_engines() -> tuple[str, ...]:
    """Return the names of engines registered through entry points.

    Returns:
        tuple[str, ...]: Sorted engine names.
    """

    return tuple(sorted(_engine_entry_points()))


def load_engine_factory(reference: str) -> EngineFactory:
    """Resolve ``reference`` into an engine factory.

    Args:
        reference: Either ``module:attribute`` or the name of an entry point
            registered under the ``stylecheck.engines`` group.

    Returns:
        EngineFactory: Loaded factory callable.

    Raises:
        ConfigurationError: If the reference cannot be resolved to a callable.
    """

    try:
        if ":" in reference:
            module_name, _, attribute = reference.partition(":")
            candidate = getattr(import_module(module_name), attribute)
        else:
            entry = _engine_entry_points().get(reference)
            if entry is None:
                known = ", ".join(available_engines()) or "none installed"
                raise ConfigurationError(f"Unknown lint engine '{reference}' (available: {known})")
            candidate = entry.load()
    except (AttributeError, ImportError, ValueError) as exc:
        raise ConfigurationError(f"Unable to load lint engine '{reference}': {exc}") from exc
    if not callable(candidate):
        raise ConfigurationError(f"Lint engine '{reference}' is not callable")
    return cast(EngineFactory, candidate)


__all__ = [
    "EngineFactory",
    "LintEngine",
    "available_engines",
    "load_engine_factory",
]
