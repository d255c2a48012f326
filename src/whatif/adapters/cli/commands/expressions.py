"""CLI commands evaluating conditional expressions on text arguments.

Contents:
    * :func:`cli_choose` - Print one of two texts depending on a condition token.
    * :func:`cli_nonempty` - Report whether any items were given.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from whatif.domain.errors import ConfigurationError, InvalidConditionError
from whatif.domain.expressions import what_if_let, what_if_let_else, what_if_not_null_or_empty

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _identity(text: str) -> str:
    return text


@click.command("choose", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("given")
@click.argument("when_true")
@click.argument("when_false", required=False)
@click.pass_context
def cli_choose(ctx: click.Context, given: str, when_true: str, when_false: str | None) -> None:
    """Print WHEN_TRUE if GIVEN is a true token, otherwise WHEN_FALSE.

    GIVEN accepts the spellings configured in the ``[whatif]`` section
    (by default true/yes/on/1, false/no/off/0, and none/null/empty for an
    absent condition, which behaves like false). Without WHEN_FALSE the
    configured ``otherwise`` text is printed.

    Example:
        >>> from click.testing import CliRunner
        >>> from whatif.adapters.cli.root import cli
        >>> from whatif.composition import build_testing
        >>> CliRunner().invoke(cli, ["choose", "null", "a", "b"], obj=build_testing).stdout
        'b\\n'
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-choose", extra={"command": "choose"}):
        try:
            tokens = cli_ctx.services.load_condition_tokens(cli_ctx.config)
        except ConfigurationError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.CONFIG_ERROR) from exc

        try:
            condition = tokens.parse(given)
        except InvalidConditionError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc

        logger.debug("Evaluating choose", extra={"given": given, "condition": condition})
        if when_false is None:
            chosen = what_if_let(when_true, condition, tokens.otherwise, _identity)
        else:
            chosen = what_if_let_else(when_true, condition, _identity, lambda _: when_false)
        click.echo(chosen)


@click.command("nonempty", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("items", nargs=-1)
def cli_nonempty(items: tuple[str, ...]) -> None:
    """Print ``NotNullOrEmpty: ITEMS`` when items are given, else ``NullOrEmpty``.

    Example:
        >>> from click.testing import CliRunner
        >>> CliRunner().invoke(cli_nonempty, ["a", "b"]).output
        'NotNullOrEmpty: a, b\\n'
    """
    with lib_log_rich.runtime.bind(job_id="cli-nonempty", extra={"command": "nonempty"}):
        logger.debug("Checking items", extra={"count": len(items)})
        what_if_not_null_or_empty(
            items,
            lambda present: click.echo(f"NotNullOrEmpty: {', '.join(present)}"),
            lambda: click.echo("NullOrEmpty"),
        )


__all__ = ["cli_choose", "cli_nonempty"]
