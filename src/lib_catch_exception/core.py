"""Composition root for ``lib_catch_exception``.

Purpose
-------
Wire holders, invokers, and verifiers into the consumer-facing API: the
:class:`Catcher` context object and the module-level functions operating on the
ambient, call-context scoped holders.

Contents
--------
* :class:`Catcher` – family + holder bundle exposing ``catch``/``verify``/
  ``caught``/``reset``.
* :func:`catch_exception` / :func:`verify_exception` /
  :func:`caught_exception` / :func:`reset_caught_exception` – the
  ``exception`` family on the ambient holder.
* :func:`catch_throwable` / :func:`verify_throwable` /
  :func:`caught_throwable` / :func:`reset_caught_throwable` – the
  ``throwable`` family on its own ambient holder.

System Role
-----------
The only module that picks concrete adapters. Tests that want an isolated slot
build a :class:`Catcher` (or use the pytest fixtures) instead of the
module-level functions.
"""

from __future__ import annotations

from typing import Callable

from .adapters.holders.default import ContextVarHolder, SlotHolder
from .application.invoker import Invoker
from .application.matching import ANY, ExpectedKind
from .application.ports import ConditionHolder
from .application.verifier import Verifier
from .domain.family import EXCEPTION_FAMILY, THROWABLE_FAMILY, ConditionFamily


class Catcher:
    """Capture and verify conditions into one holder.

    Why
    ----
    Gives each test an explicit object with a clear lifecycle: create it, use
    it, drop it. Nothing is shared with other catchers unless they are handed
    the same holder.

    Parameters
    ----------
    family:
        :data:`EXCEPTION_FAMILY` (default) or :data:`THROWABLE_FAMILY`.
    holder:
        Slot for captured conditions; a fresh :class:`SlotHolder` when omitted.

    Examples
    --------
    >>> catcher = Catcher()
    >>> catcher.catch(lambda: [][0], IndexError)
    >>> catcher.caught()
    IndexError('list index out of range')
    >>> catcher.reset()
    >>> catcher.caught() is None
    True
    """

    def __init__(self, family: ConditionFamily = EXCEPTION_FAMILY, holder: ConditionHolder | None = None) -> None:
        self.family = family
        self.holder: ConditionHolder = holder if holder is not None else SlotHolder()
        self._invoker = Invoker(family, self.holder)
        self._verifier = Verifier(self._invoker)

    def catch(self, operation: Callable[[], object], expected: ExpectedKind = ANY) -> None:
        """Run *operation*, absorbing a condition that matches *expected*.

        Mismatching conditions propagate unchanged and leave the holder empty.
        """

        self._invoker.capture(operation, expected)

    def verify(self, operation: Callable[[], object], expected: ExpectedKind = ANY) -> None:
        """Like :meth:`catch`, but raise ``ConditionNotRaised`` when nothing was raised."""

        self._verifier.verify(operation, expected)

    def caught(self) -> BaseException | None:
        """Return the last absorbed condition, or ``None``."""

        return self.holder.get()

    def reset(self) -> None:
        """Forget the last absorbed condition."""

        self.holder.clear()

    def __repr__(self) -> str:
        return f"Catcher(family={self.family.name!r}, holder={self.holder!r})"


_EXCEPTIONS = Catcher(EXCEPTION_FAMILY, ContextVarHolder("lib_catch_exception_caught_exception"))
_THROWABLES = Catcher(THROWABLE_FAMILY, ContextVarHolder("lib_catch_exception_caught_throwable"))


def catch_exception(operation: Callable[[], object], expected: ExpectedKind = ANY) -> None:
    """Run *operation* and store a raised :class:`Exception` for later inspection.

    Why
    ----
    Lets a test call code that is expected to fail, keep going, and assert on
    the failure afterwards via :func:`caught_exception`.

    What
    ----
    Clears the ambient holder, runs *operation*, and stores the raised
    exception when *expected* is omitted or the exception is an instance of
    *expected*. Any other exception is re-raised unchanged and the holder
    stays empty. ``BaseException`` subclasses outside :class:`Exception`
    (``KeyboardInterrupt``, ``SystemExit``) always propagate.

    Parameters
    ----------
    operation:
        Zero-argument callable.
    expected:
        Optional exception class; subclasses match too. Passing ``None``
        explicitly is rejected.

    Raises
    ------
    InvalidArgument
        ``"obj must not be null"`` or ``"exceptionClazz must not be null"``;
        the holder is left untouched.

    Examples
    --------
    >>> catch_exception(lambda: int("x"), ValueError)
    >>> type(caught_exception()).__name__
    'ValueError'
    >>> catch_exception(lambda: None)
    >>> caught_exception() is None
    True
    """

    _EXCEPTIONS.catch(operation, expected)


def verify_exception(operation: Callable[[], object], expected: ExpectedKind = ANY) -> None:
    """Like :func:`catch_exception`, but fail when no exception was raised.

    Raises
    ------
    ExceptionNotThrownAssertionError
        ``"Exception expected but not thrown"`` without a filter, or
        ``"Neither an exception of type <T> nor another exception was thrown"``
        with one.
    """

    _EXCEPTIONS.verify(operation, expected)


def caught_exception() -> BaseException | None:
    """Return the exception absorbed by the last ``catch``/``verify`` call in this context."""

    return _EXCEPTIONS.caught()


def reset_caught_exception() -> None:
    """Clear the ambient exception holder."""

    _EXCEPTIONS.reset()


def catch_throwable(operation: Callable[[], object], expected: ExpectedKind = ANY) -> None:
    """Like :func:`catch_exception`, but any :class:`BaseException` may be absorbed.

    Invalid filters are reported as ``"throwableClazz must not be null"``.
    """

    _THROWABLES.catch(operation, expected)


def verify_throwable(operation: Callable[[], object], expected: ExpectedKind = ANY) -> None:
    """Like :func:`verify_exception` for the ``throwable`` family.

    Raises
    ------
    ThrowableNotThrownAssertionError
        ``"Throwable expected but not thrown"`` or
        ``"Neither a throwable of type <T> nor another throwable was thrown"``.
    """

    _THROWABLES.verify(operation, expected)


def caught_throwable() -> BaseException | None:
    """Return the condition absorbed by the last throwable ``catch``/``verify`` call."""

    return _THROWABLES.caught()


def reset_caught_throwable() -> None:
    """Clear the ambient throwable holder."""

    _THROWABLES.reset()


def ambient_holders() -> tuple[ConditionHolder, ConditionHolder]:
    """Return the ambient ``(exception, throwable)`` holders."""

    return _EXCEPTIONS.holder, _THROWABLES.holder


__all__ = [
    "Catcher",
    "ambient_holders",
    "catch_exception",
    "catch_throwable",
    "caught_exception",
    "caught_throwable",
    "reset_caught_exception",
    "reset_caught_throwable",
    "verify_exception",
    "verify_throwable",
]
