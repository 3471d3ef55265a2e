# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

import re
from dataclasses import dataclass

from rich.text import Text

from .console import detect_tty, get_console_manager

_KEY_VALUE: re.Pattern[str] = re.compile(r"([\w-]+)=(\".*?\"|\S+)")


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(msg: str, *, style: str | None, use_emoji: bool, use_color: bool | None = None) -> None:
    """Render ``msg`` to the shared console.

    Args:
        msg: Message text to print.
        style: Rich style applied when colour output is active.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a warning message."""

    _print_line(f"{emoji('⚠️ ', use_emoji)}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message."""

    _print_line(f"{emoji('❌ ', use_emoji)}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


@dataclass(slots=True)
class CLILogger:
    """Adapter around the logging helpers honouring CLI presentation flags."""

    use_emoji: bool = True
    use_color: bool | None = None
    debug_enabled: bool = False

    def fail(self, message: str) -> None:
        """Emit an error message honouring the CLI presentation flags.

        Args:
            message: Text to print to the error console.
        """

        fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        """Emit a warning message honouring the CLI presentation flags.

        Args:
            message: Text to print to the error console.
        """

        warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def debug(self, message: str) -> None:
        """Emit ``message`` with ``key=value`` highlighting when debugging.

        Args:
            message: Debug payload, typically a series of ``key=value`` pairs.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in _KEY_VALUE.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            text.append(match.group(1), style="bold magenta")
            text.append("=", style="dim")
            text.append(match.group(2), style="bold green")
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        color_enabled = detect_tty() if self.use_color is None else self.use_color
        get_console_manager().get(color=color_enabled, emoji=self.use_emoji).print(text)


__all__ = ["CLILogger", "emoji", "fail", "warn"]
