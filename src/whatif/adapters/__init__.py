"""Adapters layer - infrastructure and framework integrations.

Contains adapter implementations that connect the conditional expressions to
the command line, configuration files, and logging.

Contents:
    * :mod:`.config` - Configuration loading, display, overrides, condition tokens
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
