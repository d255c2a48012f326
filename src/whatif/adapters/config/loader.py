"""Layered configuration for whatif, read once per profile.

Layers, lowest precedence first: the bundled ``defaultconfig.toml``, then
app, host and user files, a ``.env`` file, and environment variables,
all resolved by lib_layered_config.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from whatif import __init__conf__

_DEFAULT_CONFIG = Path(__file__).with_name("defaultconfig.toml")


def get_default_config_path() -> Path:
    """Location of the ``defaultconfig.toml`` shipped inside the package.

    Example:
        >>> get_default_config_path().is_file()
        True
    """
    return _DEFAULT_CONFIG


@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=_DEFAULT_CONFIG,
        start_dir=start_dir,
    )


def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration, cached per ``(profile, start_dir)``.

    Args:
        profile: Optional profile; every layer is then read from its
            ``profile/<name>/`` subdirectory.
        start_dir: Directory where ``.env`` discovery starts. Defaults to
            the current working directory.

    Raises:
        ValueError: If ``profile`` is not a safe directory name.

    Example:
        >>> get_config().get("whatif.otherwise", default=None)
        ''
    """
    if profile is not None:
        validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)
    return _read_layers(profile, start_dir)


# Tests re-read the layers after changing the environment.
get_config.cache_clear = _read_layers.cache_clear  # type: ignore[attr-defined]


__all__ = ["get_config", "get_default_config_path"]
