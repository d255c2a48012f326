"""Logging double: a quiet lib_log_rich runtime instead of the configured one."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config

from whatif import __init__conf__


def init_logging_in_memory(config: Config) -> None:
    """Start lib_log_rich without dotenv, backends or console chatter.

    ``config`` is ignored. Commands still need a running runtime for
    ``lib_log_rich.runtime.bind``; an already running one is kept.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.runtime.init(
        lib_log_rich.runtime.RuntimeConfig(
            service=__init__conf__.name,
            environment="test",
            console_level="CRITICAL",
        )
    )


__all__ = ["init_logging_in_memory"]
