"""Configuration adapter - loading, display, overrides, and condition tokens.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.tokens` - ``[whatif]`` section model for condition tokens
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides
from .tokens import ConditionTokens, load_condition_tokens

__all__ = [
    "get_config",
    "get_default_config_path",
    "display_config",
    "apply_overrides",
    "ConditionTokens",
    "load_condition_tokens",
]
