"""Fixtures shared by the expression, configuration and CLI tests."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import asdict, replace
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from whatif.composition import AppServices

_ANSI = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")


class CallRecorder:
    """Callback double that remembers every argument tuple it was called with.

    ``result`` is returned from each call so a recorder can stand in for a
    mapping callback as well as for a side-effect-only one.
    """

    def __init__(self, result: object = None) -> None:
        self.calls: list[tuple[object, ...]] = []
        self.result = result

    def __call__(self, *args: object) -> object:
        self.calls.append(args)
        return self.result

    @property
    def count(self) -> int:
        return len(self.calls)


def _services_with(get_config: Callable[..., Config]) -> Callable[[], AppServices]:
    """Production services whose only fake part is configuration loading."""
    from whatif.composition import build_production

    services = replace(build_production(), get_config=get_config)
    return lambda: services


@pytest.fixture
def recorder_factory() -> Callable[..., CallRecorder]:
    """``recorder_factory(result=None)`` builds a fresh :class:`CallRecorder`."""
    return CallRecorder


@pytest.fixture
def cli_runner() -> CliRunner:
    # stdout and stderr are kept apart; log lines land on stderr.
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    from whatif.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Remove colour codes so assertions can match Rich output as plain text."""
    return lambda text: _ANSI.sub("", text)


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Start from tracebacks off and put ``lib_cli_exit_tools.config`` back afterwards.

    The CLI flips those flags globally, so any test that runs ``--traceback``
    or calls the traceback helpers directly should request this fixture.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    saved = asdict(lib_cli_exit_tools.config)
    yield
    for name, value in saved.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def clear_config_cache() -> None:
    # Cleared up front only: a test may monkeypatch get_config afterwards.
    from whatif.adapters.config.loader import get_config

    get_config.cache_clear()


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Build an in-memory ``Config`` from a plain dict, no files involved."""

    def _build(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _build


@pytest.fixture
def inject_config(clear_config_cache: None) -> Callable[[Config], Callable[[], AppServices]]:
    """Services factory that hands out a fixed ``Config``.

    Token loading, display and logging remain the real adapters, e.g.
    ``cli_runner.invoke(cli, ["choose", "ja", "left"], obj=inject_config(cfg))``.
    """

    def _inject(config: Config) -> Callable[[], AppServices]:
        return _services_with(lambda **_kwargs: config)

    return _inject


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Like ``inject_config`` but appends each requested profile to a caller list."""

    def _inject(config: Config, seen: list[str | None]) -> Callable[[], AppServices]:
        def _get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            seen.append(profile)
            return config

        return _services_with(_get_config)

    return _inject


@pytest.fixture
def fresh_log_runtime() -> Iterator[None]:
    """Run the test with no lib_log_rich runtime up front and none left behind."""
    import lib_log_rich.runtime

    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()
    yield
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()
