"""Outcome of a single command run."""

import enum
import io
from dataclasses import dataclass


class FailureKind(enum.Enum):
    FORMAT = "format"
    LAUNCH = "launch"
    RUNTIME = "runtime"


@dataclass
class RunResult:
    """Either the captured output of a finished child, or why there is none.

    ``stdout`` is positioned at the start and holds everything the child
    wrote. A non-zero ``returncode`` still counts as success; only a failure
    to format, launch, or read the child produces ``failure``.
    """

    command: str
    stdout: io.StringIO | None = None
    stderr: str | None = None
    returncode: int | None = None
    failure: FailureKind | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def succeeded(
        cls, command: str, output: str, returncode: int, stderr: str | None = None
    ) -> "RunResult":
        return cls(
            command=command,
            stdout=io.StringIO(output),
            stderr=stderr,
            returncode=returncode,
        )

    @classmethod
    def failed(cls, command: str, kind: FailureKind, error: BaseException) -> "RunResult":
        return cls(command=command, failure=kind, error=error)
