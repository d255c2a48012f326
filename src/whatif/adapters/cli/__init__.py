"""Command line adapter for the conditional expressions.

Importing this package registers every subcommand on :data:`cli`.
"""

from __future__ import annotations

from .commands import cli_choose, cli_config, cli_fail, cli_info, cli_logdemo, cli_nonempty
from .context import apply_traceback_preferences, restore_traceback_state, snapshot_traceback_state
from .main import main
from .root import cli

__all__ = [
    "apply_traceback_preferences",
    "cli",
    "cli_choose",
    "cli_config",
    "cli_fail",
    "cli_info",
    "cli_logdemo",
    "cli_nonempty",
    "main",
    "restore_traceback_state",
    "snapshot_traceback_state",
]
