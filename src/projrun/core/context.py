"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

import click
from rich.console import Console

from projrun.cli.output import user_output
from projrun.core.process import DryRunProcessRunner, ProcessRunner, RealProcessRunner
from projrun.core.refresh import DryRunViewRefresher, HookViewRefresher, ViewRefresher
from projrun.core.run_config import ConfigStore, FilesystemConfigStore
from projrun.core.surfaces import ConsoleSurfaces, DryRunSurfaces, Surfaces
from projrun.core.user_feedback import InteractiveFeedback, UserFeedback


@dataclass(frozen=True)
class ProjrunContext:
    """Immutable context holding all dependencies for projrun operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    runner: ProcessRunner
    surfaces: Surfaces
    refresher: ViewRefresher
    feedback: UserFeedback
    config_store: ConfigStore
    cwd: Path  # Current working directory at CLI invocation
    dry_run: bool

    @staticmethod
    def for_test(
        runner: ProcessRunner | None = None,
        surfaces: Surfaces | None = None,
        refresher: ViewRefresher | None = None,
        feedback: UserFeedback | None = None,
        config_store: ConfigStore | None = None,
        cwd: Path | None = None,
        dry_run: bool = False,
    ) -> "ProjrunContext":
        """Create test context with optional pre-configured integration classes.

        Any integration not supplied is replaced by its empty fake.

        Example:
            >>> runner = FakeProcessRunner(exit_codes={"./check.sh": 2})
            >>> ctx = ProjrunContext.for_test(runner=runner, cwd=tmp_path)
        """
        from tests.fakes.process import FakeProcessRunner
        from tests.fakes.refresh import FakeViewRefresher
        from tests.fakes.surfaces import FakeSurfaces
        from tests.fakes.user_feedback import FakeUserFeedback

        from projrun.core.run_config import InMemoryConfigStore

        if runner is None:
            runner = FakeProcessRunner()

        if surfaces is None:
            surfaces = FakeSurfaces()

        if refresher is None:
            refresher = FakeViewRefresher()

        if feedback is None:
            feedback = FakeUserFeedback()

        if config_store is None:
            config_store = InMemoryConfigStore(config=None)

        if dry_run:
            runner = DryRunProcessRunner(runner)
            refresher = DryRunViewRefresher(refresher)
            surfaces = DryRunSurfaces(surfaces)

        return ProjrunContext(
            runner=runner,
            surfaces=surfaces,
            refresher=refresher,
            feedback=feedback,
            config_store=config_store,
            cwd=cwd or Path("/test/default/cwd"),
            dry_run=dry_run,
        )


def safe_cwd() -> tuple[Path | None, str | None]:
    """Get current working directory, detecting if it no longer exists.

    Returns:
        (path, None) on success, (None, error_message) if the directory was deleted
    """
    try:
        return (Path.cwd(), None)
    except (FileNotFoundError, OSError):
        return (None, "Current working directory no longer exists")


def create_context(*, dry_run: bool) -> ProjrunContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        dry_run: If True, wrap the process runner, refresher and surfaces so
                 commands are printed instead of executed
    """
    cwd, error_msg = safe_cwd()
    if cwd is None:
        user_output(click.style("Error: ", fg="red") + str(error_msg))
        user_output("Please change to a valid directory and try again.")
        raise SystemExit(1)

    config_store = FilesystemConfigStore()

    runner: ProcessRunner = RealProcessRunner()
    refresher: ViewRefresher = HookViewRefresher(runner)
    surfaces: Surfaces = ConsoleSurfaces(
        console=Console(stderr=True),
        streams_dir=config_store.state_dir() / "streams",
    )
    if dry_run:
        runner = DryRunProcessRunner(runner)
        refresher = DryRunViewRefresher(refresher)
        surfaces = DryRunSurfaces(surfaces)

    return ProjrunContext(
        runner=runner,
        surfaces=surfaces,
        refresher=refresher,
        feedback=InteractiveFeedback(),
        config_store=config_store,
        cwd=cwd,
        dry_run=dry_run,
    )
