"""``--set SECTION.KEY=VALUE`` handling for the root command.

Values are read as JSON where possible (``true``, ``3``, ``["ja","oui"]``)
and kept as raw text otherwise, so ``--set whatif.otherwise=n/a`` needs no
quoting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Anything :func:`coerce_value` can return."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` argument, split into its parts."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    Only the first ``=`` separates the value, so values may contain ``=``.

    Raises:
        ValueError: For a missing ``=``, a key without a dot, or an empty
            section or key component.

    Examples:
        >>> parse_override("whatif.otherwise=n/a")
        ConfigOverride(section='whatif', key_path=('otherwise',), value='n/a')
        >>> parse_override('whatif.true_tokens=["ja","oui"]').value
        ['ja', 'oui']
    """
    path, sep, value_text = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    if "." not in path:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *keys = path.split(".")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if "" in keys:
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=tuple(keys), value=coerce_value(value_text))


def coerce_value(raw: str) -> CoercedValue:
    """Decode ``raw`` as JSON, or return it unchanged when it is not JSON.

    Examples:
        >>> coerce_value("false"), coerce_value("7"), coerce_value("n/a")
        (False, 7, 'n/a')
        >>> coerce_value("") == ""
        True
    """
    if not raw:
        return raw
    try:
        return cast(CoercedValue, orjson.loads(raw))
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _insert(tree: dict[str, object], override: ConfigOverride) -> None:
    """Place ``override.value`` at its path inside ``tree``, creating tables on the way."""
    table = tree
    for name in (override.section, *override.key_path[:-1]):
        child = table.setdefault(name, {})
        if not isinstance(child, dict):
            raise ValueError(f"Invalid override: {name!r} already holds a value and cannot be a table")
        table = cast("dict[str, object]", child)
    table[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` value merged in.

    Later overrides of the same key win. The original Config is left
    untouched; with no overrides it is returned as is.

    Raises:
        ValueError: If an override string is malformed, or one override
            treats another one's value as a table.

    Example:
        >>> cfg = Config({"whatif": {"otherwise": ""}}, {})
        >>> apply_overrides(cfg, ("whatif.otherwise=-",))["whatif"]["otherwise"]
        '-'
    """
    if not raw_overrides:
        return config

    merged: dict[str, object] = {}
    for raw in raw_overrides:
        _insert(merged, parse_override(raw))
    return config.with_overrides(merged)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
