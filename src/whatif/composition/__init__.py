"""Composition root: the only place that picks concrete adapters.

:func:`build_production` wires lib_layered_config, lib_log_rich and the Rich
display; :func:`build_testing` wires the in-memory doubles from
:mod:`whatif.adapters.memory`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.config.tokens import load_condition_tokens
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadConditionTokens,
    )

    # pyright checks each production adapter against its port here.
    _check_get_config: GetConfig = get_config
    _check_display_config: DisplayConfig = display_config
    _check_load_condition_tokens: LoadConditionTokens = load_condition_tokens
    _check_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """One implementation per port, fixed for the lifetime of a CLI run."""

    get_config: GetConfig
    display_config: DisplayConfig
    load_condition_tokens: LoadConditionTokens
    init_logging: InitLogging


def build_production() -> AppServices:
    """Services backed by real configuration files and lib_log_rich."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        load_condition_tokens=load_condition_tokens,
        init_logging=init_logging,
    )


def build_testing() -> AppServices:
    """Services that read no configuration files and log nothing visible.

    Configuration is empty, so condition tokens are the built-in defaults
    and ``otherwise`` is empty.
    """
    from ..adapters import memory

    return AppServices(
        get_config=memory.get_config_in_memory,
        display_config=memory.display_config_in_memory,
        load_condition_tokens=memory.load_condition_tokens_in_memory,
        init_logging=memory.init_logging_in_memory,
    )


__all__ = ["AppServices", "build_production", "build_testing"]
