"""Root group behaviour: tracebacks, main(), help, version and the built-in commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from whatif import __init__conf__
from whatif.adapters import cli as cli_mod
from whatif.composition import build_production


def _flags() -> tuple[bool, bool]:
    return lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color


@pytest.mark.os_agnostic
def test_traceback_flags_start_off(managed_traceback_state: None) -> None:
    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_restoring_a_snapshot_undoes_enabled_tracebacks(managed_traceback_state: None) -> None:
    before = cli_mod.snapshot_traceback_state()
    cli_mod.apply_traceback_preferences(True)
    assert _flags() == (True, True)

    cli_mod.restore_traceback_state(before)

    assert _flags() == (False, False)


@pytest.mark.os_agnostic
def test_traceback_option_applies_only_while_the_command_runs(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
) -> None:
    seen: list[tuple[bool, bool]] = []
    monkeypatch.setattr(__init__conf__, "print_info", lambda: seen.append(_flags()))

    assert cli_mod.main(["--traceback", "info"], services_factory=build_production) == 0

    assert seen == [(True, True)]
    assert _flags() == (False, False)


@pytest.mark.os_agnostic
def test_main_can_leave_traceback_flags_enabled(managed_traceback_state: None) -> None:
    cli_mod.main(["--traceback", "info"], restore_traceback=False, services_factory=build_production)

    assert _flags() == (True, True)


@pytest.mark.os_agnostic
def test_main_requires_a_services_factory() -> None:
    with pytest.raises(ValueError, match="services_factory is required"):
        cli_mod.main(["info"])


@pytest.mark.os_agnostic
def test_main_runs_choose_and_reports_success(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    exit_code = cli_mod.main(["choose", "yes", "left", "right"], services_factory=build_production)

    assert exit_code == 0
    assert "left" in capsys.readouterr().out.splitlines()


@pytest.mark.os_agnostic
def test_main_with_no_arguments_prints_usage(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert cli_mod.main([], services_factory=build_production) == 0
    assert "Usage:" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_version_line_names_the_shell_command(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["--version"], obj=production_factory)

    assert result.exit_code == 0
    assert result.output.strip() == f"{__init__conf__.shell_command} version {__init__conf__.version}"


@pytest.mark.os_agnostic
def test_error_from_a_what_if_true_callback_escapes_the_command(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["fail"], obj=production_factory)

    assert result.exit_code != 0
    assert isinstance(result.exception, RuntimeError)
    assert str(result.exception) == "I should fail"


@pytest.mark.os_agnostic
def test_failure_is_summarised_without_traceback_option(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    exit_code = cli_mod.main(["fail"], services_factory=build_production)
    stderr = strip_ansi(capsys.readouterr().err)

    assert exit_code != 0
    assert "I should fail" in stderr
    assert "Traceback (most recent call last)" not in stderr


@pytest.mark.os_agnostic
def test_failure_shows_whole_traceback_with_traceback_option(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    exit_code = cli_mod.main(["--traceback", "fail"], services_factory=build_production)
    stderr = strip_ansi(capsys.readouterr().err)

    assert exit_code != 0
    assert "Traceback (most recent call last)" in stderr
    assert "_raise_failure" in stderr
    assert "[TRUNCATED" not in stderr
    assert _flags() == (False, False)


@pytest.mark.os_agnostic
def test_info_lists_name_and_version(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["info"], obj=production_factory)

    assert result.exit_code == 0
    assert __init__conf__.name in result.output
    assert __init__conf__.version in result.output


@pytest.mark.os_agnostic
def test_unknown_subcommand_is_a_usage_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["maybe"], obj=production_factory)

    assert result.exit_code == 2
    assert "No such command" in result.output


@pytest.mark.os_agnostic
def test_group_without_services_factory_is_a_wiring_bug(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["info"])

    assert isinstance(result.exception, RuntimeError)
    assert "Services factory not provided" in str(result.exception)


@pytest.mark.os_agnostic
def test_logdemo_reports_the_theme_it_used(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["logdemo"], obj=production_factory)

    assert result.exit_code == 0
    assert "Log demo completed" in result.output
