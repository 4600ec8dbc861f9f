"""Domain-level exception hierarchy.

Purpose
-------
Expose the stable error taxonomy raised by the catchers themselves, as opposed
to the conditions they capture on behalf of a test. The hierarchy lives in the
domain layer so the application layer and the composition root can share it
without importing each other.

Contents
--------
* :class:`CatchError` – umbrella base class for every error the library raises.
* :class:`InvalidArgument` – caller contract violations (missing operation,
  missing or malformed filter).
* :class:`ConditionNotRaised` – verification failure: nothing was raised.
* :class:`ExceptionNotThrownAssertionError` /
  :class:`ThrowableNotThrownAssertionError` – family-specific verification
  failures.

System Role
-----------
Validation raises :class:`InvalidArgument` before any holder is touched. The
verifier raises a :class:`ConditionNotRaised` subclass so test runners report
it as an ordinary assertion failure. Conditions that do not match a filter are
never wrapped in any of these types.
"""

from __future__ import annotations


class CatchError(Exception):
    """Base type for all exceptions emitted by ``lib_catch_exception``.

    Why
    ----
    Provide a single catch-all type for callers that want to tell library
    failures apart from the conditions raised by the wrapped operation.
    """


class InvalidArgument(CatchError, ValueError):
    """Raised when a caller breaks the argument contract of a catcher.

    Why
    ----
    A missing operation or an explicitly passed ``None`` filter is a bug in the
    test, not a captured condition. Inheriting :class:`ValueError` keeps
    ``except ValueError`` blocks working.

    Typical Sources
    ---------------
    :meth:`Invoker.validate` and the holder adapters' ``set`` methods.
    """


class ConditionNotRaised(CatchError, AssertionError):
    """Signals that a verified operation completed without raising.

    Why
    ----
    Inheriting :class:`AssertionError` makes pytest and unittest count the
    failure like any other failed assertion.

    What
    ----
    Carries ``expected``: the filter class given to the verifier, or ``None``
    when the caller accepted any condition.
    """

    def __init__(self, message: str, expected: type[BaseException] | None = None) -> None:
        super().__init__(message)
        self.expected = expected


class ExceptionNotThrownAssertionError(ConditionNotRaised):
    """Verification failure raised by the ``exception`` family."""


class ThrowableNotThrownAssertionError(ConditionNotRaised):
    """Verification failure raised by the ``throwable`` family."""
