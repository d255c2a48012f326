"""Per-invocation CLI state and the process-wide traceback switch.

The root group builds a :class:`CLIContext` once and parks it on
``click.Context.obj``; subcommands read it back with :func:`get_cli_context`.
The ``--traceback`` flag lives in ``lib_cli_exit_tools.config`` because the
exit helpers read it from there when formatting an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from whatif.composition import AppServices


class TracebackState(NamedTuple):
    """The two ``lib_cli_exit_tools.config`` flags driven by ``--traceback``."""

    enabled: bool
    force_color: bool


@dataclass(slots=True)
class CLIContext:
    """Everything a subcommand needs from the root group."""

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    #: Raw ``--set`` strings, reapplied when a subcommand reloads another profile.
    set_overrides: tuple[str, ...] = ()


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> CLIContext:
    """Swap the services factory in ``ctx.obj`` for a populated :class:`CLIContext`.

    Example:
        >>> from unittest.mock import MagicMock
        >>> from whatif.composition import build_testing
        >>> ctx = MagicMock()
        >>> stored = store_cli_context(ctx, traceback=False, config=MagicMock(), services=build_testing())
        >>> ctx.obj is stored
        True
    """
    cli_ctx = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    ctx.obj = cli_ctx
    return cli_ctx


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Fetch the state stored by the root group.

    Raises:
        RuntimeError: When a subcommand runs without the root group, e.g.
            when invoked directly in a test.
    """
    cli_ctx = ctx.obj
    if isinstance(cli_ctx, CLIContext):
        return cli_ctx
    raise RuntimeError("CLI context not initialized. Call store_cli_context first.")


def apply_traceback_preferences(enabled: bool) -> None:
    """Switch full (colored) tracebacks on or off for the exit helpers."""
    flag = bool(enabled)
    lib_cli_exit_tools.config.traceback = flag
    lib_cli_exit_tools.config.traceback_force_color = flag


def snapshot_traceback_state() -> TracebackState:
    """Read the current traceback flags.

    Example:
        >>> saved = snapshot_traceback_state()
        >>> apply_traceback_preferences(not saved.enabled)
        >>> restore_traceback_state(saved)
        >>> snapshot_traceback_state() == saved
        True
    """
    config = lib_cli_exit_tools.config
    return TracebackState(
        enabled=bool(getattr(config, "traceback", False)),
        force_color=bool(getattr(config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState | tuple[bool, bool]) -> None:
    """Put back flags captured by :func:`snapshot_traceback_state`."""
    enabled, force_color = state
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
