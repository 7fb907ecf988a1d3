"""Unit tests for shellrun.cli."""

from unittest.mock import MagicMock, patch

import pytest

from conftest import requires_bash
from shellrun.cli import entrypoint, exit_status, main
from shellrun.models import FailureKind, RunResult
from shellrun.platform_defaults import default_config


@pytest.fixture(autouse=True)
def posix_config():
    with patch("shellrun.cli.load_config", return_value=default_config("posix")):
        yield


def _runner_patch(result: RunResult):
    runner = MagicMock()
    runner.run.return_value = result
    return patch("shellrun.cli.CommandRunner", return_value=runner), runner


class TestMainMocked:
    def test_prints_output_and_returns_child_exit_code(self, capsys):
        ctx, runner = _runner_patch(RunResult.succeeded("ls", "a\nb\n", 0, stderr="note\n"))
        with ctx:
            assert main(["ls", "-la"]) == 0

        out, err = capsys.readouterr()
        assert out == "a\nb\n"
        assert err == "note\n"
        runner.run.assert_called_once_with(
            "ls -la",
            None,
            create_window=False,
            redirect_error=True,
            redirect_input=True,
        )

    def test_failure_prints_error_and_returns_one(self, capsys):
        error = FileNotFoundError("no such file")
        ctx, _ = _runner_patch(RunResult.failed("ls", FailureKind.LAUNCH, error))
        with ctx:
            assert main(["ls"]) == 1

        assert "Error: no such file" in capsys.readouterr().err

    def test_flags_reach_the_runner(self):
        ctx, runner = _runner_patch(RunResult.succeeded("x", "", 0))
        with ctx:
            main(
                [
                    "-C", "/tmp",
                    "--executable", "/bin/sh",
                    "--arguments", "-c {0}",
                    "--create-window",
                    "--no-redirect-error",
                    "--no-redirect-input",
                    "x",
                ]
            )

        runner.set_executable_path.assert_called_once_with("/bin/sh")
        runner.set_argument_template.assert_called_once_with("-c {0}")
        runner.run.assert_called_once_with(
            "x",
            "/tmp",
            create_window=True,
            redirect_error=False,
            redirect_input=False,
        )

    def test_dashed_words_after_the_command_belong_to_it(self):
        ctx, runner = _runner_patch(RunResult.succeeded("x", "", 0))
        with ctx:
            main(["-C", "/tmp", "grep", "-r", "--debug", "x"])

        assert runner.run.call_args.args == ("grep -r --debug x", "/tmp")

    def test_requires_a_command(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2


@requires_bash
class TestMainBash:
    def test_echo(self, tmp_path, capsys):
        assert main(["-C", str(tmp_path), "echo", "hi"]) == 0
        assert capsys.readouterr().out == "hi\n"

    def test_command_with_its_own_flags(self, tmp_path, capsys):
        (tmp_path / "marker.txt").write_text("x", encoding="utf-8")
        assert main(["-C", str(tmp_path), "ls", "-a"]) == 0
        assert capsys.readouterr().out == ".\n..\nmarker.txt\n"

    def test_killed_child_reports_shell_style_status(self, tmp_path):
        assert main(["-C", str(tmp_path), "kill -9 $$"]) == 137

    def test_exit_code_is_propagated(self, tmp_path):
        assert main(["-C", str(tmp_path), "exit 4"]) == 4

    def test_missing_executable(self, tmp_path, capsys):
        missing = str(tmp_path / "nope")
        assert main(["-C", str(tmp_path), "--executable", missing, "echo hi"]) == 1
        assert "Error: cannot start" in capsys.readouterr().err


def test_entrypoint_exits_with_main_result():
    with patch("shellrun.cli.main", return_value=7):
        with pytest.raises(SystemExit) as exc_info:
            entrypoint()
    assert exc_info.value.code == 7


class TestExitStatus:
    def test_normal_codes_pass_through(self):
        assert exit_status(0) == 0
        assert exit_status(3) == 3

    def test_signal_deaths_map_to_128_plus_signal(self):
        assert exit_status(-9) == 137
        assert exit_status(-15) == 143
