"""Conditional expressions wrapping a single branch into an inline call.

Every expression inspects one condition and invokes exactly one of the
supplied callbacks. Only the exact value ``True`` selects the positive
branch; ``False``, ``None`` and any other value select the negative branch
(or nothing when no negative callback was given).

Exceptions raised by conditions or callbacks propagate unchanged to the caller.

Contents:
    * :func:`what_if_given` - condition computed from the receiver.
    * :func:`what_if` - literal condition, returns the receiver for chaining.
    * :func:`what_if_lazy` - zero-argument condition, returns the receiver.
    * :func:`what_if_let` / :func:`what_if_let_else` - map the receiver to a result.
    * :func:`what_if_not_null` / :func:`what_if_not_null_with` - ``None`` checks.
    * :func:`what_if_not_null_as` - ``None`` plus ``isinstance`` check.
    * :func:`what_if_true` - the receiver itself is the condition.
    * :func:`what_if_not_null_or_empty` - non-``None`` and non-empty containers.
"""

from __future__ import annotations

from collections.abc import Callable, Sized
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")
C = TypeVar("C", bound=Sized)


def what_if_given(
    receiver: T,
    given: Callable[[T], bool | None],
    what_if: Callable[[], object],
    what_if_not: Callable[[], object] | None = None,
) -> None:
    """Invoke ``what_if`` when ``given(receiver)`` is true.

    Args:
        receiver: Value handed to the condition.
        given: Predicate over the receiver. ``None`` counts as false.
        what_if: Called without arguments on the positive branch.
        what_if_not: Optional callback for the negative branch.

    Example:
        >>> calls = []
        >>> what_if_given(3, lambda n: n > 2, lambda: calls.append("big"), lambda: calls.append("small"))
        >>> what_if_given(1, lambda n: n > 2, lambda: calls.append("big"), lambda: calls.append("small"))
        >>> calls
        ['big', 'small']
    """
    if given(receiver) is True:
        what_if()
    elif what_if_not is not None:
        what_if_not()


def what_if(
    receiver: T,
    given: bool | None,
    what_if: Callable[[T], object],
    what_if_not: Callable[[T], object] | None = None,
) -> T:
    """Invoke ``what_if`` with the receiver when ``given`` is true.

    Returns the receiver itself, so calls can be chained in builder style.

    Args:
        receiver: Value passed to whichever callback runs.
        given: Literal condition. ``None`` counts as false.
        what_if: Positive branch, receives the receiver.
        what_if_not: Optional negative branch, receives the receiver.

    Returns:
        The original receiver (same object).

    Example:
        >>> items = []
        >>> what_if(items, True, lambda it: it.append("a")) is items
        True
        >>> what_if(items, None, lambda it: it.append("b"), lambda it: it.append("c"))
        ['a', 'c']
    """
    if given is True:
        what_if(receiver)
    elif what_if_not is not None:
        what_if_not(receiver)
    return receiver


def what_if_lazy(
    receiver: T,
    given: Callable[[], bool | None],
    what_if_do: Callable[[T], object],
    what_if_not: Callable[[T], object] | None = None,
) -> T:
    """Invoke ``what_if_do`` with the receiver when ``given()`` is true.

    The condition is evaluated once, when this function is called.

    Returns:
        The original receiver (same object).

    Example:
        >>> box = {"count": 0}
        >>> _ = what_if_lazy(box, lambda: True, lambda b: b.update(count=b["count"] + 1))
        >>> box["count"]
        1
    """
    if given() is True:
        what_if_do(receiver)
    elif what_if_not is not None:
        what_if_not(receiver)
    return receiver


def what_if_let(
    receiver: T,
    given: bool | None,
    default: R,
    what_if: Callable[[T], R],
) -> R:
    """Return ``what_if(receiver)`` when ``given`` is true, else ``default``.

    The default is returned as-is, never copied.

    Example:
        >>> what_if_let("abc", True, 0, len)
        3
        >>> what_if_let("abc", None, 0, len)
        0
    """
    if given is True:
        return what_if(receiver)
    return default


def what_if_let_else(
    receiver: T,
    given: bool | None,
    what_if: Callable[[T], R],
    what_if_not: Callable[[T], R],
) -> R:
    """Map the receiver with ``what_if`` or ``what_if_not`` depending on ``given``.

    Example:
        >>> what_if_let_else("abc", False, str.upper, str.title)
        'Abc'
    """
    if given is True:
        return what_if(receiver)
    return what_if_not(receiver)


def what_if_not_null(
    receiver: T | None,
    what_if: Callable[[T], object],
    what_if_not: Callable[[T | None], object] | None = None,
) -> None:
    """Invoke ``what_if`` with the receiver when it is not ``None``.

    The negative callback still receives the receiver, which is ``None`` there.

    Example:
        >>> seen = []
        >>> what_if_not_null("x", seen.append)
        >>> what_if_not_null(None, seen.append, lambda value: seen.append(("absent", value)))
        >>> seen
        ['x', ('absent', None)]
    """
    if receiver is not None:
        what_if(receiver)
    elif what_if_not is not None:
        what_if_not(receiver)


def what_if_not_null_with(
    receiver: T | None,
    what_if: Callable[[T], R],
    what_if_not: Callable[[T | None], R],
) -> R:
    """Map a present receiver with ``what_if``, an absent one with ``what_if_not``.

    Example:
        >>> what_if_not_null_with(None, str, lambda _: "absent")
        'absent'
    """
    if receiver is not None:
        return what_if(receiver)
    return what_if_not(receiver)


def what_if_not_null_as(
    receiver: object,
    type_: type[R],
    what_if: Callable[[R], object],
    what_if_not: Callable[[object], object] | None = None,
) -> None:
    """Invoke ``what_if`` when the receiver is present and an instance of ``type_``.

    Args:
        receiver: Value to inspect.
        type_: Class (or tuple of classes, as accepted by ``isinstance``).
        what_if: Positive branch, receives the receiver typed as ``type_``.
        what_if_not: Optional negative branch, receives the receiver unchanged.

    Example:
        >>> out = []
        >>> what_if_not_null_as(42, int, out.append)
        >>> what_if_not_null_as("42", int, out.append, lambda v: out.append(f"not int: {v}"))
        >>> out
        [42, 'not int: 42']
    """
    if receiver is not None and isinstance(receiver, type_):
        what_if(receiver)
    elif what_if_not is not None:
        what_if_not(receiver)


def what_if_true(
    flag: bool | None,
    what_if: Callable[[], object],
    what_if_not: Callable[[], object] | None = None,
) -> None:
    """Invoke ``what_if`` when ``flag`` is exactly ``True``.

    Example:
        >>> hits = []
        >>> what_if_true(None, lambda: hits.append("yes"), lambda: hits.append("no"))
        >>> hits
        ['no']
    """
    if flag is True:
        what_if()
    elif what_if_not is not None:
        what_if_not()


def what_if_not_null_or_empty(
    container: C | None,
    what_if: Callable[[C], object],
    what_if_not: Callable[[], object] | None = None,
) -> None:
    """Invoke ``what_if`` with the container when it is present and not empty.

    Works for any sized container: sequences, sets, mappings, strings.
    An empty container takes the same branch as ``None``.

    Args:
        container: Optional sized container.
        what_if: Positive branch, receives the non-empty container.
        what_if_not: Optional callback for the absent or empty case.

    Example:
        >>> got = []
        >>> what_if_not_null_or_empty([], got.append, lambda: got.append("empty"))
        >>> what_if_not_null_or_empty({"a": 1}, got.append)
        >>> got
        ['empty', {'a': 1}]
    """
    if container is not None and len(container) > 0:
        what_if(container)
    elif what_if_not is not None:
        what_if_not()


__all__ = [
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
