"""Run an operation and record the condition it raises.

Purpose
-------
Implement the selective capture rule: a condition that satisfies the filter is
absorbed into the holder, anything else leaves the holder empty and propagates
exactly as if the operation had been called directly.

Contents
--------
* :class:`Invoker` – validation, pure classification (:meth:`Invoker.invoke`),
  and the holder-updating :meth:`Invoker.capture`.

System Role
-----------
The verifier wraps an invoker; the composition root wires one per family and
holder.
"""

from __future__ import annotations

from typing import Callable, NoReturn

from ..domain.errors import InvalidArgument
from ..domain.family import ConditionFamily
from ..domain.outcome import Absorbed, Completed, Outcome, Rethrown
from ..observability import log_debug, make_event
from .matching import ANY, ExpectedKind, accepts, type_name
from .ports import ConditionHolder


class Invoker:
    """Execute zero-argument operations on behalf of a test.

    Parameters
    ----------
    family:
        Which conditions may be absorbed at all.
    holder:
        Slot receiving the absorbed condition.
    """

    def __init__(self, family: ConditionFamily, holder: ConditionHolder) -> None:
        self.family = family
        self.holder = holder

    def capture(self, operation: Callable[[], object], expected: ExpectedKind = ANY) -> None:
        """Run *operation* and absorb a condition that satisfies *expected*.

        What
        ----
        1. Validates the arguments (see :meth:`validate`); the holder is not
           touched when validation fails.
        2. Clears the holder.
        3. Runs *operation* and stores the raised condition when it belongs to
           the family and matches *expected* (equal kind or subclass).

        Raises
        ------
        InvalidArgument
            For a missing operation or a missing/invalid filter.
        BaseException
            The operation's own condition, unchanged, when it does not match
            *expected* or lies outside the family.
        """

        self.validate(operation, expected)
        self.holder.clear()
        outcome = self.invoke(operation, expected)
        if isinstance(outcome, Absorbed):
            self.holder.set(outcome.condition)
        elif isinstance(outcome, Rethrown):
            _propagate(outcome.condition)

    def invoke(self, operation: Callable[[], object], expected: ExpectedKind = ANY) -> Outcome:
        """Run *operation* and classify the result without touching the holder.

        Conditions outside the family are not classified at all; they escape
        this method directly.
        """

        try:
            operation()
        except BaseException as exc:
            if not self.family.is_catchable(exc):
                raise
            if accepts(expected, exc):
                log_debug("condition_absorbed", **make_event(self.family.name, type(exc), {"detail": str(exc)}))
                return Absorbed(exc)
            log_debug(
                "condition_rethrown",
                **make_event(self.family.name, type(exc), {"expected": type_name(expected)}),  # type: ignore[arg-type]
            )
            return Rethrown(exc)
        log_debug("operation_completed", **make_event(self.family.name, None))
        return Completed()

    def validate(self, operation: object, expected: object) -> None:
        """Raise :class:`InvalidArgument` unless the arguments honour the contract.

        Examples
        --------
        >>> from lib_catch_exception.adapters.holders.default import SlotHolder
        >>> from lib_catch_exception.domain.family import EXCEPTION_FAMILY
        >>> Invoker(EXCEPTION_FAMILY, SlotHolder()).validate(None, ANY)
        Traceback (most recent call last):
        ...
        lib_catch_exception.domain.errors.InvalidArgument: obj must not be null
        """

        if operation is None:
            raise InvalidArgument("obj must not be null")
        if not callable(operation):
            raise InvalidArgument("obj must be callable")
        if expected is ANY:
            return
        label = self.family.filter_label
        if expected is None:
            raise InvalidArgument(f"{label} must not be null")
        if not (isinstance(expected, type) and issubclass(expected, self.family.base)):
            raise InvalidArgument(f"{label} must be a subclass of {self.family.base.__name__}")


def _propagate(condition: BaseException) -> NoReturn:
    """Re-raise *condition* without rewriting its implicit chain."""

    # raising outside the original handler would otherwise link any exception
    # the caller is currently handling as __context__
    context = condition.__context__
    try:
        raise condition
    finally:
        condition.__context__ = context
