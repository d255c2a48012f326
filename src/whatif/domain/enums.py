"""Enumerations shared between the domain and the command line."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """How ``whatif config`` renders the merged configuration.

    Members are plain strings, so Click choices and comparisons with raw
    option values work without conversion.

    Example:
        >>> OutputFormat("json") is OutputFormat.JSON
        True
        >>> OutputFormat.HUMAN == "human"
        True
    """

    #: TOML-like text with provenance comments.
    HUMAN = "human"
    #: A JSON document, for scripts.
    JSON = "json"


__all__ = ["OutputFormat"]
