"""Shared fixtures for shellrun tests."""

import os

import pytest

requires_bash = pytest.mark.skipif(
    os.name == "nt" or not os.path.exists("/bin/bash"),
    reason="needs a POSIX host with /bin/bash",
)


class RecordingRunLogger:
    """RunLogger fake that keeps every call."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, str]] = []

    def info(self, tag: str, message: str) -> None:
        self.records.append(("info", tag, message))

    def error(self, tag: str, message: str) -> None:
        self.records.append(("error", tag, message))

    def messages(self, level: str) -> list[str]:
        return [message for lvl, _, message in self.records if lvl == level]


@pytest.fixture
def recorder() -> RecordingRunLogger:
    return RecordingRunLogger()
