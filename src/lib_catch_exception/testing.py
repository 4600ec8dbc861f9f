"""Deterministic operations for exercising the catchers.

Purpose
    Provide small, predictable operations (one that fails, one that succeeds,
    one that fails with a chained cause) so tests and examples do not need ad
    hoc lambdas to drive every outcome.

Contents
    - ``FAILURE_MESSAGE``: stable message used by :func:`failing` by default.
    - ``failing``: returns an operation raising a given kind and message.
    - ``succeeding``: returns an operation returning a value.
    - ``chained``: returns an operation raising one condition from another.
"""

from __future__ import annotations

from typing import Callable, Final, NoReturn, TypeVar

T = TypeVar("T")

FAILURE_MESSAGE: Final[str] = "i should fail"
"""Stable message raised by :func:`failing` unless another one is given."""


def failing(kind: type[BaseException] = RuntimeError, message: str = FAILURE_MESSAGE) -> Callable[[], NoReturn]:
    """Return a zero-argument operation that always raises ``kind(message)``.

    Examples
    --------
    >>> operation = failing(KeyError, "k")
    >>> operation()
    Traceback (most recent call last):
    ...
    KeyError: 'k'
    """

    def operation() -> NoReturn:
        raise kind(message)

    return operation


def succeeding(value: T = None) -> Callable[[], T]:  # type: ignore[assignment]
    """Return a zero-argument operation that returns *value* without raising."""

    def operation() -> T:
        return value

    return operation


def chained(
    outer: type[BaseException] = RuntimeError,
    inner: type[BaseException] = ValueError,
    message: str = FAILURE_MESSAGE,
) -> Callable[[], NoReturn]:
    """Return an operation raising ``outer(message)`` explicitly caused by ``inner``.

    The inner condition carries the message ``"cause of " + message``.
    """

    def operation() -> NoReturn:
        try:
            raise inner(f"cause of {message}")
        except inner as exc:
            raise outer(message) from exc

    return operation
