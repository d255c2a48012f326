"""Configuration doubles: an empty Config and the default condition tokens."""

from __future__ import annotations

from lib_layered_config import Config

from ...domain.enums import OutputFormat
from ..config.tokens import ConditionTokens


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Empty configuration regardless of profile."""
    return Config({}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Render nothing."""


def load_condition_tokens_in_memory(config: Config) -> ConditionTokens:
    """Default spellings, whatever ``config`` holds."""
    return ConditionTokens()


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "load_condition_tokens_in_memory",
]
