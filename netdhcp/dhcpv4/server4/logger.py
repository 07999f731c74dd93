"""Loggers used by the DHCPv4 server to report messages and events."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

__all__ = ["EmptyLogger", "ShortSummaryLogger", "DebugLogger"]

_log = logging.getLogger("netdhcp.dhcpv4")


def _default_printer(text: str) -> None:
    _log.info("[dhcpv4] %s", text)


def _format(fmt: str, args: tuple) -> str:
    return fmt % args if args else fmt


class EmptyLogger:
    """A logger that prints nothing.

    Formats are still checked, so a bad format fails the same way with every
    logger; the finished line is then dropped.
    """

    def printf(self, fmt: str, *args: Any) -> None:
        line = _format(fmt, args)
        if not isinstance(line, str):
            raise TypeError("log format must produce a string")

    def print_message(self, prefix: str, message: Any) -> None:
        self.printf("%s: %s", prefix, message)


@dataclass
class ShortSummaryLogger:
    """Prints DHCP messages in their one-line form.

    Formats are %-style; ``printer`` receives each finished line.
    """

    printer: Callable[[str], None] = field(default=_default_printer)

    def printf(self, fmt: str, *args: Any) -> None:
        self.printer(_format(fmt, args))

    def print_message(self, prefix: str, message: Any) -> None:
        self.printf("%s: %s", prefix, message)


@dataclass
class DebugLogger:
    """Prints DHCP messages in their full multi-line summary form.

    Formats are %-style; ``printer`` receives each finished line.
    """

    printer: Callable[[str], None] = field(default=_default_printer)

    def printf(self, fmt: str, *args: Any) -> None:
        self.printer(_format(fmt, args))

    def print_message(self, prefix: str, message: Any) -> None:
        summary = getattr(message, "summary", None)
        text = summary() if callable(summary) else str(message)
        self.printf("%s: %s", prefix, text)