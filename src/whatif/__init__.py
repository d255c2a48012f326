"""Public package surface exposing the conditional expressions, metadata, and configuration.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: Conditional expressions (what_if family)
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.expressions import (
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
    "get_config",
    "print_info",
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
]
