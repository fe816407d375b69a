"""Integration tests for RealProcessRunner using small shell scripts."""

import stat
import time
from collections.abc import Callable
from pathlib import Path

import pytest

from projrun.core.process import LaunchError, RealProcessRunner


def _script(directory: Path, name: str, body: str) -> Path:
    path = directory / name
    path.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR)
    return path


def _wait_for(predicate: Callable[[], bool], timeout: float = 5.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.05)
    return False


def test_run_returns_exit_status(tmp_path: Path) -> None:
    _script(tmp_path, "check.sh", "exit 3")

    assert RealProcessRunner().run(["./check.sh"], tmp_path, echo_output=False) == 3


def test_run_uses_cwd(tmp_path: Path) -> None:
    _script(tmp_path, "check.sh", "touch ran-here")

    exit_code = RealProcessRunner().run(["./check.sh"], tmp_path, echo_output=False)

    assert exit_code == 0
    assert (tmp_path / "ran-here").exists()


def test_run_discards_output_unless_echoed(
    tmp_path: Path, capfd: pytest.CaptureFixture[str]
) -> None:
    _script(tmp_path, "check.sh", "echo visible; echo also >&2")
    runner = RealProcessRunner()

    runner.run(["./check.sh"], tmp_path, echo_output=False)
    quiet = capfd.readouterr()
    runner.run(["./check.sh"], tmp_path, echo_output=True)
    loud = capfd.readouterr()

    assert "visible" not in quiet.out + quiet.err
    assert "visible" in loud.out
    assert "also" in loud.err


def test_run_missing_executable_raises_launch_error(tmp_path: Path) -> None:
    with pytest.raises(LaunchError) as exc_info:
        RealProcessRunner().run(["./no-such-check.sh"], tmp_path, echo_output=False)

    assert exc_info.value.command == ["./no-such-check.sh"]
    assert exc_info.value.cwd == tmp_path
    assert "Could not start './no-such-check.sh'" in str(exc_info.value)


def test_run_non_executable_file_raises_launch_error(tmp_path: Path) -> None:
    (tmp_path / "check.sh").write_text("exit 0\n", encoding="utf-8")

    with pytest.raises(LaunchError):
        RealProcessRunner().run(["./check.sh"], tmp_path, echo_output=False)


def test_run_streaming_yields_combined_lines(tmp_path: Path) -> None:
    _script(tmp_path, "diagnose.sh", "echo first; echo second >&2; exit 1")

    lines = list(RealProcessRunner().run_streaming(["./diagnose.sh"], tmp_path))

    assert lines == ["first\n", "second\n"]


def test_run_streaming_missing_executable(tmp_path: Path) -> None:
    with pytest.raises(LaunchError):
        list(RealProcessRunner().run_streaming(["./missing.sh"], tmp_path))


def test_spawn_returns_immediately_and_writes_log(tmp_path: Path) -> None:
    _script(tmp_path, "slow.sh", "echo started; sleep 1; echo finished >&2")
    log_path = tmp_path / "streams" / "projrun-output.log"

    start = time.monotonic()
    pid = RealProcessRunner().spawn(["./slow.sh"], tmp_path, log_path)

    assert time.monotonic() - start < 1.0
    assert pid > 0
    assert _wait_for(lambda: "finished" in log_path.read_text(encoding="utf-8"))
    assert log_path.read_text(encoding="utf-8") == "started\nfinished\n"


def test_spawn_missing_executable(tmp_path: Path) -> None:
    with pytest.raises(LaunchError):
        RealProcessRunner().spawn(["./missing.sh"], tmp_path, tmp_path / "out.log")
