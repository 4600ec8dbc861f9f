"""Kind matching for expected-condition filters.

Purpose
-------
Decide whether a raised condition satisfies the caller's filter and render
kinds for failure messages.

Contents
--------
* :data:`ANY` – default filter meaning "any condition of the family".
* :func:`matches` – exact-or-subclass check between two kinds.
* :func:`accepts` – applies a filter (possibly :data:`ANY`) to a condition.
* :func:`type_name` – qualified class name used in messages.
"""

from __future__ import annotations

from typing import Final, Union


class _AnyKind:
    """Sentinel type for an omitted filter; distinct from an explicit ``None``."""

    _instance: "_AnyKind | None" = None

    def __new__(cls) -> "_AnyKind":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ANY"

    def __reduce__(self) -> str:
        return "ANY"


ANY: Final = _AnyKind()
"""Filter value accepting every condition of the catcher's family."""

ExpectedKind = Union[type[BaseException], _AnyKind]
"""A filter: an exception class or :data:`ANY`."""


def matches(actual: type[BaseException], expected: type[BaseException]) -> bool:
    """Return ``True`` when *actual* is *expected* or one of its subclasses.

    Examples
    --------
    >>> matches(IndexError, LookupError)
    True
    >>> matches(LookupError, IndexError)
    False
    """

    return issubclass(actual, expected)


def accepts(expected: ExpectedKind, condition: BaseException) -> bool:
    """Return ``True`` when *condition* satisfies the filter *expected*."""

    if expected is ANY:
        return True
    return matches(type(condition), expected)  # type: ignore[arg-type]


def type_name(kind: type) -> str:
    """Return ``module.QualName`` for *kind*, omitting the ``builtins`` module.

    Examples
    --------
    >>> type_name(IndexError)
    'IndexError'
    >>> type_name(ConnectionError)
    'ConnectionError'
    """

    module = kind.__module__
    if module == "builtins":
        return kind.__qualname__
    return f"{module}.{kind.__qualname__}"
