"""Domain layer - pure logic with no I/O or framework dependencies.

Contains the conditional expressions and the small value types the
application shell needs around them.

Contents:
    * :mod:`.expressions` - Conditional expressions (what_if family)
    * :mod:`.conditions` - Condition token parsing
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .conditions import parse_condition
from .enums import OutputFormat
from .errors import ConfigurationError, InvalidConditionError
from .expressions import (
    what_if,
    what_if_given,
    what_if_lazy,
    what_if_let,
    what_if_let_else,
    what_if_not_null,
    what_if_not_null_as,
    what_if_not_null_or_empty,
    what_if_not_null_with,
    what_if_true,
)

__all__ = [
    # Expressions
    "what_if",
    "what_if_given",
    "what_if_lazy",
    "what_if_let",
    "what_if_let_else",
    "what_if_not_null",
    "what_if_not_null_as",
    "what_if_not_null_or_empty",
    "what_if_not_null_with",
    "what_if_true",
    # Conditions
    "parse_condition",
    # Enums
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "InvalidConditionError",
]
