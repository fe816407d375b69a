"""Refresh requests for views of files under a project root."""

from projrun.core.refresh.abc import ViewRefresher
from projrun.core.refresh.dry_run import DryRunViewRefresher
from projrun.core.refresh.real import HookViewRefresher, expand_hook_command

__all__ = ["DryRunViewRefresher", "HookViewRefresher", "ViewRefresher", "expand_hook_command"]
