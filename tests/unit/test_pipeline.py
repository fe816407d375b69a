"""End-to-end tests of locate → execute → report with fake integrations."""

from pathlib import Path

import pytest

from projrun.core.context import ProjrunContext
from projrun.core.locator import ProjectRoot, RootNotFound
from projrun.core.outcome import LaunchFailed, RunDetached, RunFailed, RunSucceeded
from projrun.core.pipeline import run_in_project
from projrun.core.process import LaunchError
from projrun.core.reporter import SUCCESS_NOTICE, format_failure_notice
from projrun.core.run_config import RunConfiguration, RunMode
from projrun.core.surfaces import SurfaceKind
from tests.fakes.process import FakeProcessRunner
from tests.fakes.refresh import FakeViewRefresher
from tests.fakes.surfaces import FakeSurfaces
from tests.fakes.user_feedback import FakeUserFeedback

MARKER = "project.marker"


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """A project at <tmp>/repo with a nested source directory."""
    root = tmp_path / "repo"
    (root / "src" / "app").mkdir(parents=True)
    (root / MARKER).touch()
    return root


def _config(mode: RunMode = RunMode.SYNC) -> RunConfiguration:
    return RunConfiguration(
        marker_file_name=MARKER,
        command_line="./check.sh",
        diagnostic_command_line="./diagnose.sh",
        mode=mode,
    )


def test_compliant_project(repo: Path) -> None:
    runner = FakeProcessRunner()
    refresher = FakeViewRefresher()
    surfaces = FakeSurfaces()
    feedback = FakeUserFeedback()
    ctx = ProjrunContext.for_test(
        runner=runner, refresher=refresher, surfaces=surfaces, feedback=feedback
    )

    outcome = run_in_project(ctx, repo / "src" / "app", _config())

    expected_root = ProjectRoot(path=repo, marker_file_name=MARKER)
    assert outcome == RunSucceeded(root=expected_root)
    assert runner.run_calls == [(["./check.sh"], repo, False)]
    assert refresher.refresh_calls == [(expected_root, None)]
    assert feedback.messages == [("success", SUCCESS_NOTICE)]
    assert surfaces.created == []


def test_non_compliant_project(repo: Path) -> None:
    runner = FakeProcessRunner(
        exit_codes={"./check.sh": 2},
        outputs={"./diagnose.sh": ["src/app/main.c:3: missing ';'\n"]},
    )
    refresher = FakeViewRefresher()
    surfaces = FakeSurfaces()
    feedback = FakeUserFeedback()
    ctx = ProjrunContext.for_test(
        runner=runner, refresher=refresher, surfaces=surfaces, feedback=feedback
    )

    outcome = run_in_project(ctx, repo / "src" / "app", _config())

    assert isinstance(outcome, RunFailed)
    assert outcome.exit_code == 2
    assert feedback.messages == [("error", format_failure_notice(2))]
    assert len(refresher.refresh_calls) == 1
    assert surfaces.created_of_kind(SurfaceKind.DIAGNOSTIC) == [outcome.diagnostic]
    assert surfaces.content_of(outcome.diagnostic) == "src/app/main.c:3: missing ';'\n"
    assert runner.streaming_calls == [(["./diagnose.sh"], repo)]


def test_no_project_runs_nothing(tmp_path: Path) -> None:
    runner = FakeProcessRunner()
    refresher = FakeViewRefresher()
    feedback = FakeUserFeedback()
    ctx = ProjrunContext.for_test(runner=runner, refresher=refresher, feedback=feedback)
    config = _config().with_overrides(marker_file_name="absent-91c2.marker")

    outcome = run_in_project(ctx, tmp_path, config)

    assert isinstance(outcome, RootNotFound)
    assert runner.total_calls == 0
    assert refresher.refresh_calls == []
    assert feedback.messages == []


def test_launch_failure_is_reported_not_raised(repo: Path) -> None:
    runner = FakeProcessRunner(missing_executables={"./check.sh"})
    refresher = FakeViewRefresher()
    surfaces = FakeSurfaces()
    feedback = FakeUserFeedback()
    ctx = ProjrunContext.for_test(
        runner=runner, refresher=refresher, surfaces=surfaces, feedback=feedback
    )

    outcome = run_in_project(ctx, repo, _config())

    assert isinstance(outcome, LaunchFailed)
    assert outcome.command_line == "./check.sh"
    assert "No such file or directory" in outcome.reason
    assert refresher.refresh_calls == []
    assert surfaces.created == []
    assert feedback.messages == []


def test_diagnostic_launch_failure_propagates(repo: Path) -> None:
    runner = FakeProcessRunner(exit_codes={"./check.sh": 1}, missing_executables={"./diagnose.sh"})
    ctx = ProjrunContext.for_test(runner=runner)

    with pytest.raises(LaunchError):
        run_in_project(ctx, repo, _config())


def test_async_run_is_detached(repo: Path) -> None:
    runner = FakeProcessRunner(pid=31337)
    refresher = FakeViewRefresher()
    surfaces = FakeSurfaces()
    feedback = FakeUserFeedback()
    ctx = ProjrunContext.for_test(
        runner=runner, refresher=refresher, surfaces=surfaces, feedback=feedback
    )

    outcome = run_in_project(ctx, repo / "src", _config(RunMode.ASYNC))

    assert isinstance(outcome, RunDetached)
    assert outcome.pid == 31337
    assert outcome.root.path == repo
    assert surfaces.created_of_kind(SurfaceKind.STREAM) == [outcome.surface]
    assert surfaces.created_of_kind(SurfaceKind.DIAGNOSTIC) == []
    assert feedback.messages == []
    assert refresher.refresh_calls == []


def test_dry_run_context_takes_success_path(
    repo: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    runner = FakeProcessRunner(exit_codes={"./check.sh": 2})
    refresher = FakeViewRefresher()
    ctx = ProjrunContext.for_test(runner=runner, refresher=refresher, dry_run=True)

    outcome = run_in_project(ctx, repo, _config())

    assert isinstance(outcome, RunSucceeded)
    assert runner.total_calls == 0
    assert refresher.refresh_calls == []
    err = capsys.readouterr().err
    assert f"[dry-run] Would run: ./check.sh (in {repo})" in err
    assert f"[dry-run] Would refresh views under {repo}" in err
