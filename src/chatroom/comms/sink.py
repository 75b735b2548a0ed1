"""Output sinks -- where rendered lines go instead of process-wide stdout."""

from __future__ import annotations

import logging
from typing import Protocol

import click

logger = logging.getLogger(__name__)


class Sink(Protocol):
    """Anything that accepts one rendered line of output."""

    def notify(self, line: str) -> None: ...


class ConsoleSink:
    """Writes lines to the terminal via click."""

    def __init__(self, err: bool = False) -> None:
        self._err = err

    def notify(self, line: str) -> None:
        click.echo(line, err=self._err)


class LoggingSink:
    """Forwards lines to a logger at a fixed level (`chatroom demo --log-output`)."""

    def __init__(
        self, logger_: logging.Logger | None = None, level: int = logging.INFO
    ) -> None:
        self._logger = logger_ or logger
        self._level = level

    def notify(self, line: str) -> None:
        self._logger.log(self._level, "%s", line)


class ListSink:
    """Collects lines in memory, mostly for tests."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def notify(self, line: str) -> None:
        self.lines.append(line)

    def clear(self) -> None:
        self.lines.clear()
