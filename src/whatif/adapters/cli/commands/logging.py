"""``whatif logdemo``: preview how log records look in the console."""

from __future__ import annotations

import lib_log_rich
import lib_log_rich.runtime
import rich_click as click

from ..constants import CLICK_CONTEXT_SETTINGS


@click.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--theme", default="classic", show_default=True, help="Console theme to render the samples with")
def cli_logdemo(theme: str) -> None:
    """Emit one sample record per level using the chosen console theme."""
    # lib_log_rich.logdemo starts a private runtime and refuses to run beside ours.
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()

    result = lib_log_rich.logdemo(theme=theme)
    click.echo(f"\nLog demo completed (theme: {result.theme})")


__all__ = ["cli_logdemo"]
