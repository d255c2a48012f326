"""In-memory stand-ins for every port, used by :func:`whatif.composition.build_testing`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    load_condition_tokens_in_memory,
)
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from whatif.application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadConditionTokens,
    )

    _check_get_config: GetConfig = get_config_in_memory
    _check_display_config: DisplayConfig = display_config_in_memory
    _check_load_condition_tokens: LoadConditionTokens = load_condition_tokens_in_memory
    _check_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_condition_tokens_in_memory",
]
