"""Ports the CLI is written against; see :mod:`.ports`."""

from __future__ import annotations

from .ports import (
    DisplayConfig,
    GetConfig,
    InitLogging,
    LoadConditionTokens,
)

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadConditionTokens",
]
