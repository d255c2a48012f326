"""Callable protocols the CLI depends on instead of concrete adapters.

Plain module-level functions satisfy these structurally, so adapters need
no base classes. ``Config`` and ``ConditionTokens`` are imported for type
checking only, keeping this layer free of runtime infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.tokens import ConditionTokens


class GetConfig(Protocol):
    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Print ``config``, or one section of it, in the requested format.

    Implementations raise ValueError for an unknown section.
    """

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadConditionTokens(Protocol):
    """Turn the ``[whatif]`` section into validated token spellings.

    Implementations raise ConfigurationError when the section is invalid.
    """

    def __call__(self, config: Config) -> ConditionTokens: ...


class InitLogging(Protocol):
    """Start logging from the ``[lib_log_rich]`` section; repeated calls are no-ops."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadConditionTokens",
]
