"""The ``whatif`` command group.

Owns the global options (``--traceback``, ``--profile``, ``--set``), loads
configuration once per invocation and starts logging before any subcommand
runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from whatif import __init__conf__
from whatif.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from whatif.composition import AppServices


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Read layered config for ``profile`` and merge the ``--set`` values.

    Raises:
        click.UsageError: If an override is malformed.
    """
    config = services.get_config(profile=profile)
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Print the full Python traceback when a command fails")
@click.option("--profile", default=None, help="Read configuration from profile/<name>/ in every layer")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value, e.g. whatif.otherwise=n/a (repeatable)",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Prepare configuration, logging and traceback handling for the subcommand.

    ``ctx.obj`` must hold a zero-argument services factory on entry; it is
    replaced by a :class:`~whatif.adapters.cli.context.CLIContext`.

    Example:
        >>> from click.testing import CliRunner
        >>> from whatif.composition import build_testing
        >>> CliRunner().invoke(cli, ["choose", "true", "left"], obj=build_testing).stdout
        'left\\n'
    """
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = factory()

    config = _load_config(services, profile, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Command modules import from this package, so they are pulled in only
# after ``cli`` exists.
def _register_commands() -> None:
    from .commands import cli_choose, cli_config, cli_fail, cli_info, cli_logdemo, cli_nonempty

    for command in (cli_choose, cli_nonempty, cli_info, cli_config, cli_logdemo, cli_fail):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
