"""Exit codes raised by commands for errors they detect themselves.

Uncaught exceptions are mapped by ``lib_cli_exit_tools`` instead.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for command error paths.

    * 22: EINVAL, e.g. an unknown condition token or config section
    * 78: EX_CONFIG (sysexits.h), e.g. an invalid ``[whatif]`` section

    Example:
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
    """

    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
