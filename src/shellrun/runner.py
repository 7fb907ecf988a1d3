"""Run one command through the configured interpreter and capture its output.

A ``CommandRunner`` owns a ``RunnerConfig`` (interpreter binary plus an
argument template with a single ``{0}`` slot) and a ``RunLogger`` sink.
Each ``run`` call formats the command into the template, starts one child
process with ``shell=False``, reads its standard output to the end, waits
for it to exit, and returns a ``RunResult``. Nothing raised along the way
escapes ``run``; every failure comes back as a tagged result and an error
line on the sink.

There is no timeout: a child that never exits blocks the caller forever.
"""

import logging
import os
import shlex
import string
import subprocess

from shellrun.errors import ExecutionError, LaunchError, ShellRunError, TemplateFormatError
from shellrun.logger import NullRunLogger, RunLogger
from shellrun.models import FailureKind, RunnerConfig, RunResult
from shellrun.platform_defaults import default_config, is_windows

log = logging.getLogger(__name__)

TAG = "[CommandRunner]"
START_BANNER = "============== Start Executing [{}] ==============="
END_BANNER = "============== End ==============="

# Not exported by the subprocess module outside Windows.
CREATE_NO_WINDOW = getattr(subprocess, "CREATE_NO_WINDOW", 0x08000000)


def format_arguments(template: str, command: str) -> str:
    """Insert the command text into the template's single ``{0}`` / ``{}`` slot."""
    try:
        fields = [
            name for _, name, _, _ in string.Formatter().parse(template) if name is not None
        ]
    except ValueError as e:
        raise TemplateFormatError(f"invalid argument template {template!r}: {e}") from e

    if fields not in (["0"], [""]):
        raise TemplateFormatError(
            f"argument template must contain exactly one {{0}} slot, got {template!r}"
        )
    try:
        return template.format(command)
    except (IndexError, KeyError, ValueError) as e:
        raise TemplateFormatError(f"cannot format {template!r}: {e}") from e


class CommandRunner:
    """Launch commands through a shell interpreter, one blocking child at a time."""

    def __init__(
        self,
        config: RunnerConfig | None = None,
        logger: RunLogger | None = None,
    ) -> None:
        self.config = config.model_copy() if config is not None else default_config()
        self._logger: RunLogger = logger if logger is not None else NullRunLogger()

    @property
    def logger(self) -> RunLogger:
        return self._logger

    def set_logger(self, logger: RunLogger | None) -> None:
        """Replace the message sink; ``None`` silences the runner."""
        self._logger = logger if logger is not None else NullRunLogger()

    def set_executable_path(self, path: str) -> None:
        """Replace the interpreter binary used by later runs."""
        self.config = self.config.model_copy(update={"executable": path})

    def set_argument_template(self, template: str) -> None:
        """Replace the template; it is checked on the next ``run``, not here."""
        self.config = self.config.model_copy(update={"argument_template": template})

    def build_launch_args(self, command: str) -> list[str] | str:
        """Return the Popen ``args`` for a command under the current config.

        Windows takes a single command line, the way the interpreter expects
        it. Elsewhere the template is split with POSIX rules first and the
        command is then inserted into its token verbatim, so quotes inside
        the command reach the interpreter untouched.
        """
        template = self.config.argument_template
        arguments = format_arguments(template, command)
        if is_windows():
            return f"{subprocess.list2cmdline([self.config.executable])} {arguments}"
        try:
            tokens = shlex.split(template)
        except ValueError as e:
            raise TemplateFormatError(f"cannot split argument template {template!r}: {e}") from e
        try:
            return [self.config.executable, *(token.format(command) for token in tokens)]
        except (IndexError, KeyError, ValueError) as e:
            raise TemplateFormatError(f"cannot format {template!r}: {e}") from e

    def _launch(
        self,
        args: list[str] | str,
        working_directory: str | os.PathLike | None,
        create_window: bool,
        redirect_error: bool,
        redirect_input: bool,
    ) -> subprocess.Popen:
        creationflags = 0
        if is_windows() and not create_window:
            creationflags = CREATE_NO_WINDOW
        try:
            process = subprocess.Popen(
                args,
                cwd=working_directory,
                stdin=subprocess.PIPE if redirect_input else None,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE if redirect_error else None,
                shell=False,
                text=True,
                errors="replace",
                creationflags=creationflags,
            )
        except (OSError, ValueError) as e:
            raise LaunchError(f"cannot start {self.config.executable}: {e}") from e
        log.debug("started pid %d: %r (cwd=%s)", process.pid, args, working_directory)
        return process

    @staticmethod
    def _collect(process: subprocess.Popen) -> tuple[str, str | None, int]:
        """Read the child's output to the end and wait for it to exit."""
        try:
            output, errors = process.communicate()
            returncode = process.returncode
        except Exception as e:
            process.kill()
            process.wait()
            raise ExecutionError(f"lost child pid {process.pid}: {e}") from e
        log.debug("pid %d exited with %d", process.pid, returncode)
        return output, errors, returncode

    def run(
        self,
        command: str | None,
        working_directory: str | os.PathLike | None,
        create_window: bool = False,
        redirect_error: bool = True,
        redirect_input: bool = True,
        redirect_output: bool = True,
    ) -> RunResult:
        """Execute ``command`` and wait for it; never raises."""
        command_text = command or ""
        self._logger.info(TAG, START_BANNER.format(command_text))
        try:
            args = self.build_launch_args(command_text)
            if not redirect_output:
                # Output is always read back, so an inherited stdout cannot work.
                raise ExecutionError("standard output is not redirected and cannot be read")
            process = self._launch(
                args, working_directory, create_window, redirect_error, redirect_input
            )
            output, errors, returncode = self._collect(process)
            self._logger.info(TAG, output)
            self._logger.info(TAG, END_BANNER)
        except ShellRunError as e:
            self._logger.error(TAG, f"{command_text} threw an exception {e}")
            return RunResult.failed(command_text, e.kind, e)
        except Exception as e:
            log.debug("unexpected failure running %r", command_text, exc_info=True)
            self._logger.error(TAG, f"{command_text} threw an exception {e!r}")
            return RunResult.failed(command_text, FailureKind.RUNTIME, e)

        return RunResult.succeeded(command_text, output, returncode, stderr=errors)
