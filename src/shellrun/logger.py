"""Pluggable sinks for the start/end/error lines a run emits."""

import logging
from typing import Protocol


class RunLogger(Protocol):
    def info(self, tag: str, message: str) -> None: ...

    def error(self, tag: str, message: str) -> None: ...


class NullRunLogger:
    """Drop every message."""

    def info(self, tag: str, message: str) -> None:
        pass

    def error(self, tag: str, message: str) -> None:
        pass


class LoggingRunLogger:
    """Forward run messages to a stdlib logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("shellrun")

    def info(self, tag: str, message: str) -> None:
        self._logger.info("%s %s", tag, message)

    def error(self, tag: str, message: str) -> None:
        self._logger.error("%s %s", tag, message)
