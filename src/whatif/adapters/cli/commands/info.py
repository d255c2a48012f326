"""``whatif info`` and ``whatif fail``."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from whatif import __init__conf__
from whatif.domain.expressions import what_if_true

from ..constants import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Show name, version, homepage and author of the installed package.

    Example:
        >>> from click.testing import CliRunner
        >>> CliRunner().invoke(cli_info).exit_code
        0
    """
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Printing package metadata")
        __init__conf__.print_info()


def _raise_failure() -> None:
    raise RuntimeError("I should fail")


@click.command("fail", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_fail() -> None:
    """Fail on purpose from inside a ``what_if_true`` callback.

    Shows that callback errors pass through the expression untouched and
    are reported by the CLI's exit handling.
    """
    with lib_log_rich.runtime.bind(job_id="cli-fail", extra={"command": "fail"}):
        logger.warning("Raising from a what_if_true callback")
        what_if_true(True, _raise_failure)


__all__ = ["cli_fail", "cli_info"]
