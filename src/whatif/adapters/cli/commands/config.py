"""``whatif config``: show the merged configuration and where each value came from."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from whatif.adapters.config.overrides import apply_overrides
from whatif.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_FORMAT_CHOICES = [member.value for member in OutputFormat]


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(_FORMAT_CHOICES, case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    show_default=True,
    help="human: TOML-like text with provenance; json: machine-readable",
)
@click.option("--section", default=None, help="Print a single table only, e.g. whatif or lib_log_rich")
@click.option("--profile", default=None, help="Reload configuration for this profile instead of the root one")
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Print the configuration every other command sees.

    Layers are merged as defaults -> app -> host -> user -> dotenv -> env,
    and the root ``--set`` values are applied last. An unknown ``--section``
    exits with code 22.
    """
    cli_ctx = get_cli_context(ctx)
    config, shown_profile = _config_for_profile(cli_ctx, profile)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(job_id="cli-config", extra={"command": "config", "profile": shown_profile}):
        logger.info("Displaying configuration", extra={"format": fmt.value, "section": section})
        click.echo()
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=shown_profile)
        except ValueError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


def _config_for_profile(cli_ctx: CLIContext, profile: str | None) -> tuple[Config, str | None]:
    """Pick the config to display and the profile to label it with.

    Without a subcommand ``--profile`` the root's config is reused as is.
    Otherwise the layers are read again for that profile and the root
    ``--set`` values are applied on top.
    """
    if not profile:
        return cli_ctx.config, cli_ctx.profile
    reloaded = cli_ctx.services.get_config(profile=profile)
    return apply_overrides(reloaded, cli_ctx.set_overrides), profile


__all__ = ["cli_config"]
