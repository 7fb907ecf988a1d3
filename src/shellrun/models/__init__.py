"""Model package for shellrun."""

from shellrun.models.run_result import FailureKind, RunResult
from shellrun.models.runner_config import RunnerConfig

__all__ = [
    "FailureKind",
    "RunResult",
    "RunnerConfig",
]
