"""Error taxonomy for command runs."""

from shellrun.models import FailureKind


class ShellRunError(Exception):
    """Base class for everything that can stop a command run."""

    kind = FailureKind.RUNTIME


class TemplateFormatError(ShellRunError):
    """The argument template could not take the command text."""

    kind = FailureKind.FORMAT


class LaunchError(ShellRunError):
    """The interpreter could not be started."""

    kind = FailureKind.LAUNCH


class ExecutionError(ShellRunError):
    """The child started but its output could not be collected."""

    kind = FailureKind.RUNTIME
