"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info and failure commands from :mod:`.info`
    * Conditional expression commands from :mod:`.expressions`
    * Config command from :mod:`.config`
    * Logging commands from :mod:`.logging`
"""

from __future__ import annotations

from .config import cli_config
from .expressions import cli_choose, cli_nonempty
from .info import cli_fail, cli_info
from .logging import cli_logdemo

__all__ = [
    "cli_choose",
    "cli_config",
    "cli_fail",
    "cli_info",
    "cli_logdemo",
    "cli_nonempty",
]
