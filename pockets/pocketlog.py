"""A small levelled logger.

Create a :class:`Logger` with a threshold :class:`Level`; messages of lesser
criticality are not written. Sharing the logger is the caller's business.

Three levels are available:

- ``Level.DEBUG``: step-by-step detail, mostly for debugging code
- ``Level.INFO``: messages marking the milestones of a process
- ``Level.ERROR``: messages explaining what went wrong

Messages use printf-style formatting (``"%s"``, ``"%d"`` ...). Message options
are callables taking ``(message, level)`` and returning the message to write.
They are applied in order before formatting.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from datetime import datetime
from enum import IntEnum
from typing import TextIO

MessageOption = Callable[[str, "Level"], str]


class Level(IntEnum):
    """Logging level, from least to most critical."""

    DEBUG = 0
    INFO = 1
    ERROR = 2

    @property
    def prefix(self) -> str:
        """The label written in front of messages at this level."""
        return self.name


class Logger:
    """Writes formatted messages at or above a threshold level."""

    def __init__(
        self,
        threshold: Level,
        output: TextIO | None = None,
        message_options: Iterable[MessageOption] | None = None,
    ) -> None:
        self.threshold = threshold
        self.output = output
        self.message_options: list[MessageOption] = [
            option for option in (message_options or ()) if option is not None
        ]

    def _write(self, msg: str, args: tuple[object, ...]) -> None:
        stream = sys.stdout if self.output is None else self.output
        text = msg % args if args else msg
        stream.write(text + "\n")

    def logf(self, level: Level, msg: str, *args: object) -> None:
        """Write ``msg % args`` if ``level`` reaches the threshold."""
        if self.threshold > level:
            return
        for option in self.message_options:
            msg = option(msg, level)
        self._write(msg, args)

    def debugf(self, msg: str, *args: object) -> None:
        """Log a message at debug level."""
        self.logf(Level.DEBUG, msg, *args)

    def infof(self, msg: str, *args: object) -> None:
        """Log a message at info level."""
        self.logf(Level.INFO, msg, *args)

    def errorf(self, msg: str, *args: object) -> None:
        """Log a message at error level."""
        self.logf(Level.ERROR, msg, *args)


def add_prefix_based_on_level() -> MessageOption:
    """Return an option that prefixes messages with their level, e.g. ``[ERROR]``."""

    def prefix(msg: str, level: Level) -> str:
        try:
            label = Level(level).prefix
        except ValueError:
            return msg
        return f"[{label}] {msg}"

    return prefix


def _rfc3339_now() -> str:
    stamp = datetime.now().astimezone().isoformat(timespec="seconds")
    if stamp.endswith("+00:00"):
        stamp = stamp[: -len("+00:00")] + "Z"
    return stamp


def add_date() -> MessageOption:
    """Return an option that prefixes messages with the current RFC 3339 time."""

    def date(msg: str, level: Level) -> str:
        return f"{_rfc3339_now()}| {msg}"

    return date