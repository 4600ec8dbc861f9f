"""Read-only snapshots of captured conditions.

Purpose
-------
Tests usually assert directly on the captured exception instance. When they
need a stable, comparable view instead (kind, message, and the chain of
causes), :func:`describe` builds one.

Contents
--------
* :class:`ConditionInfo` – frozen snapshot of a condition and its causes.
* :func:`describe` – snapshot builder following ``__cause__``/``__context__``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .errors import InvalidArgument


@dataclass(frozen=True, slots=True)
class ConditionInfo:
    """Snapshot of a condition's kind, message, and cause chain.

    Attributes
    ----------
    kind:
        Runtime class of the condition.
    message:
        ``str(condition)``.
    cause_chain:
        Snapshots of the chained conditions, nearest first.
    """

    kind: type[BaseException]
    message: str
    cause_chain: tuple["ConditionInfo", ...] = field(default=())

    def __str__(self) -> str:
        return f"{self.kind.__name__}: {self.message}" if self.message else self.kind.__name__


def describe(condition: BaseException) -> ConditionInfo:
    """Return a :class:`ConditionInfo` for *condition* and its chain.

    What
        Follows the explicit ``__cause__`` first and otherwise the implicit
        ``__context__`` unless ``__suppress_context__`` hides it, exactly as the
        interpreter does when printing a traceback. Cycles end the chain.

    Examples
    --------
    >>> try:
    ...     try:
    ...         {}["missing"]
    ...     except KeyError as exc:
    ...         raise RuntimeError("lookup failed") from exc
    ... except RuntimeError as outer:
    ...     info = describe(outer)
    >>> str(info)
    'RuntimeError: lookup failed'
    >>> [item.kind.__name__ for item in info.cause_chain]
    ['KeyError']
    """

    if condition is None:
        raise InvalidArgument("condition must not be null")
    causes = tuple(_snapshot(link) for link in _chain(condition))
    return ConditionInfo(kind=type(condition), message=str(condition), cause_chain=causes)


def _snapshot(condition: BaseException) -> ConditionInfo:
    """Snapshot a single link without descending into its own chain."""

    return ConditionInfo(kind=type(condition), message=str(condition))


def _chain(condition: BaseException) -> Iterator[BaseException]:
    """Yield the conditions chained behind *condition*, nearest first."""

    seen = {id(condition)}
    current = _next_link(condition)
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = _next_link(current)


def _next_link(condition: BaseException) -> BaseException | None:
    if condition.__cause__ is not None:
        return condition.__cause__
    if condition.__suppress_context__:
        return None
    return condition.__context__
