"""Default interpreter and argument template for the host platform."""

import os

from shellrun.models import RunnerConfig

POSIX_EXECUTABLE = "/bin/bash"
POSIX_ARGUMENT_TEMPLATE = '-c "{0} "'
WINDOWS_EXECUTABLE = "powershell.exe"
WINDOWS_ARGUMENT_TEMPLATE = "-NoProfile -ExecutionPolicy unrestricted {0}"


def is_windows(os_name: str | None = None) -> bool:
    """Return whether the given (or current) ``os.name`` is Windows."""
    return (os.name if os_name is None else os_name) == "nt"


def default_config(os_name: str | None = None) -> RunnerConfig:
    """Return the interpreter settings for the given (or current) platform."""
    if is_windows(os_name):
        return RunnerConfig(
            executable=WINDOWS_EXECUTABLE,
            argument_template=WINDOWS_ARGUMENT_TEMPLATE,
        )
    return RunnerConfig(
        executable=POSIX_EXECUTABLE,
        argument_template=POSIX_ARGUMENT_TEMPLATE,
    )
