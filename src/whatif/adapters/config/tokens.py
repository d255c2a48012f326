"""Condition token configuration model and loader.

Provides the ConditionTokens Pydantic model for the ``[whatif]`` section and
the loader that builds it from a layered Config.
"""

from __future__ import annotations

from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from whatif.domain.conditions import (
    DEFAULT_ABSENT_TOKENS,
    DEFAULT_FALSE_TOKENS,
    DEFAULT_TRUE_TOKENS,
    parse_condition,
)
from whatif.domain.errors import ConfigurationError


class ConditionTokens(BaseModel):
    """Validated, immutable spellings for textual conditions.

    Tokens are stored lower-cased and stripped. The three sets must be
    disjoint; otherwise a token would have two meanings.

    Example:
        >>> tokens = ConditionTokens(true_tokens=["Ja"], false_tokens=["Nein"])
        >>> tokens.true_tokens
        ('ja',)
        >>> tokens.parse("NEIN")
        False
    """

    model_config = ConfigDict(frozen=True)

    true_tokens: tuple[str, ...] = Field(default=DEFAULT_TRUE_TOKENS)
    false_tokens: tuple[str, ...] = Field(default=DEFAULT_FALSE_TOKENS)
    absent_tokens: tuple[str, ...] = Field(default=DEFAULT_ABSENT_TOKENS)
    otherwise: str = ""

    @field_validator("true_tokens", "false_tokens", "absent_tokens", mode="before")
    @classmethod
    def _coerce_tokens(cls, v: Any) -> tuple[str, ...]:
        """Coerce single strings to one-element tuples and normalize case.

        Environment variables and .env files deliver single strings instead
        of TOML arrays.

        Examples:
            >>> ConditionTokens._coerce_tokens(" Yes ")
            ('yes',)
            >>> ConditionTokens._coerce_tokens(["A", "b"])
            ('a', 'b')
        """
        if isinstance(v, str):
            return (v.strip().lower(),)
        if isinstance(v, (list, tuple)):
            return tuple(str(token).strip().lower() for token in cast("list[object]", v))
        return cast("tuple[str, ...]", v)

    @model_validator(mode="after")
    def _reject_overlapping_tokens(self) -> ConditionTokens:
        """Each token must belong to exactly one of the three sets."""
        groups = {
            "true_tokens": set(self.true_tokens),
            "false_tokens": set(self.false_tokens),
            "absent_tokens": set(self.absent_tokens),
        }
        names = list(groups)
        for index, left in enumerate(names):
            for right in names[index + 1 :]:
                shared = groups[left] & groups[right]
                if shared:
                    raise ValueError(f"tokens {sorted(shared)} appear in both {left} and {right}")
        return self

    def parse(self, token: str) -> bool | None:
        """Parse ``token`` with the configured spellings.

        Raises:
            InvalidConditionError: If the token is not configured.
        """
        return parse_condition(
            token,
            true_tokens=self.true_tokens,
            false_tokens=self.false_tokens,
            absent_tokens=self.absent_tokens,
        )


def load_condition_tokens(config: Config) -> ConditionTokens:
    """Load ConditionTokens from the ``[whatif]`` configuration section.

    Args:
        config: Already-loaded layered configuration object.

    Returns:
        Validated token settings; defaults when the section is missing.

    Raises:
        ConfigurationError: If the section fails validation.

    Example:
        >>> from lib_layered_config import Config
        >>> load_condition_tokens(Config({}, {})).otherwise
        ''
        >>> load_condition_tokens(Config({"whatif": {"otherwise": "-"}}, {})).otherwise
        '-'
    """
    raw: object = config.get("whatif", default={})
    try:
        return ConditionTokens.model_validate(cast("dict[str, object]", raw) if raw else {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [whatif] configuration: {exc}") from exc


__all__ = [
    "ConditionTokens",
    "load_condition_tokens",
]
