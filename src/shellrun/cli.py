"""Command-line interface for shellrun."""

import argparse
import logging
import sys

from shellrun import __version__
from shellrun.config import load_config
from shellrun.logger import LoggingRunLogger
from shellrun.runner import CommandRunner


def build_parser() -> argparse.ArgumentParser:
    """Build parser for the run command."""
    parser = argparse.ArgumentParser(
        prog="shellrun",
        description="Run a command through the platform shell and print its output",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-C",
        "--directory",
        default=None,
        help="Working directory for the command (default: current directory)",
    )
    parser.add_argument("--executable", help="Interpreter binary to launch")
    parser.add_argument(
        "--arguments",
        help="Argument template with a single {0} slot for the command",
    )
    parser.add_argument(
        "--create-window",
        action="store_true",
        help="Let the child open a console window (Windows only)",
    )
    parser.add_argument(
        "--no-redirect-error",
        action="store_true",
        help="Let the child write stderr straight to this terminal",
    )
    parser.add_argument(
        "--no-redirect-input",
        action="store_true",
        help="Let the child read stdin from this terminal",
    )
    parser.add_argument(
        "words",
        nargs=argparse.REMAINDER,
        metavar="command",
        help="The command to run; everything after the first word is passed through",
    )
    return parser


def exit_status(returncode: int) -> int:
    """Map a child return code to a shell-style exit status."""
    # Popen reports death by signal N as -N; shells report 128 + N.
    if returncode < 0:
        return 128 - returncode
    return returncode


def main(argv: list[str] | None = None) -> int:
    """Run one command and mirror its output and exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.words:
        parser.error("a command is required")

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    runner = CommandRunner(load_config(), logger=LoggingRunLogger())
    if args.executable:
        runner.set_executable_path(args.executable)
    if args.arguments:
        runner.set_argument_template(args.arguments)

    result = runner.run(
        " ".join(args.words),
        args.directory,
        create_window=args.create_window,
        redirect_error=not args.no_redirect_error,
        redirect_input=not args.no_redirect_input,
    )
    if not result.ok:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    sys.stdout.write(result.stdout.read())
    if result.stderr:
        sys.stderr.write(result.stderr)
    return exit_status(result.returncode)


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
