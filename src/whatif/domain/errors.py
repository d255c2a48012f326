"""Domain-specific exceptions for typed error handling at boundaries.

The conditional expressions never raise these; they belong to the
application shell around them (token parsing and configuration).
"""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or inconsistent configuration.

    Raised when the ``[whatif]`` section cannot be used as given, e.g. when
    the same token is listed as both a true and a false spelling. Caught at
    CLI boundaries to provide user-friendly error messages.

    Example:
        >>> from whatif.domain.errors import ConfigurationError
        >>> err = ConfigurationError("token 'yes' is both true and false")
        >>> str(err)
        "token 'yes' is both true and false"
    """


class InvalidConditionError(ValueError):
    """Condition token is not a known true, false, or absent spelling.

    Inherits from ValueError so callers treating bad input generically
    with ``except ValueError`` still catch it.

    Example:
        >>> err = InvalidConditionError("unrecognized condition token 'maybe'")
        >>> isinstance(err, ValueError)
        True
    """


__all__ = [
    "ConfigurationError",
    "InvalidConditionError",
]
