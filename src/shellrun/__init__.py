"""Run a command through the platform shell and capture its output."""

from shellrun.logger import LoggingRunLogger, NullRunLogger, RunLogger
from shellrun.models import FailureKind, RunnerConfig, RunResult
from shellrun.platform_defaults import default_config
from shellrun.runner import CommandRunner

__version__ = "0.1.0"

__all__ = [
    "CommandRunner",
    "FailureKind",
    "LoggingRunLogger",
    "NullRunLogger",
    "RunLogger",
    "RunResult",
    "RunnerConfig",
    "default_config",
]
