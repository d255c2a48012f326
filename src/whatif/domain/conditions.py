"""Parse textual condition tokens into optional booleans.

Command line callers pass conditions as text. Tokens map to ``True``,
``False`` or ``None`` (absent); matching is case-insensitive and ignores
surrounding whitespace.
"""

from __future__ import annotations

from collections.abc import Iterable

from .errors import InvalidConditionError

DEFAULT_TRUE_TOKENS: tuple[str, ...] = ("true", "yes", "on", "1")
DEFAULT_FALSE_TOKENS: tuple[str, ...] = ("false", "no", "off", "0")
DEFAULT_ABSENT_TOKENS: tuple[str, ...] = ("", "none", "null")


def _normalize(tokens: Iterable[str]) -> frozenset[str]:
    return frozenset(token.strip().lower() for token in tokens)


def parse_condition(
    token: str,
    *,
    true_tokens: Iterable[str] = DEFAULT_TRUE_TOKENS,
    false_tokens: Iterable[str] = DEFAULT_FALSE_TOKENS,
    absent_tokens: Iterable[str] = DEFAULT_ABSENT_TOKENS,
) -> bool | None:
    """Convert a condition token into ``True``, ``False`` or ``None``.

    Args:
        token: Raw text, e.g. from a CLI argument.
        true_tokens: Spellings of the positive outcome.
        false_tokens: Spellings of the negative outcome.
        absent_tokens: Spellings of an absent condition.

    Returns:
        ``True``, ``False``, or ``None`` for an absent condition.

    Raises:
        InvalidConditionError: If the token matches none of the sets.

    Examples:
        >>> parse_condition("YES")
        True
        >>> parse_condition(" off ")
        False
        >>> parse_condition("null") is None
        True
        >>> parse_condition("maybe")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidConditionError: unrecognized condition token 'maybe'
    """
    normalized = token.strip().lower()
    if normalized in _normalize(true_tokens):
        return True
    if normalized in _normalize(false_tokens):
        return False
    if normalized in _normalize(absent_tokens):
        return None
    raise InvalidConditionError(f"unrecognized condition token {token!r}")


__all__ = [
    "DEFAULT_ABSENT_TOKENS",
    "DEFAULT_FALSE_TOKENS",
    "DEFAULT_TRUE_TOKENS",
    "parse_condition",
]
