"""Capture plus the demand that something was actually captured."""

from __future__ import annotations

from typing import Callable

from ..observability import log_info, make_event
from .invoker import Invoker
from .matching import ANY, ExpectedKind, type_name


class Verifier:
    """Fail the test when a wrapped operation does not raise.

    Delegates to an :class:`Invoker`, so validation and the selective re-raise
    of mismatching conditions behave exactly like :meth:`Invoker.capture`.
    Only the "nothing reached the holder" case is turned into the family's
    :class:`~lib_catch_exception.domain.errors.ConditionNotRaised` subclass.
    """

    def __init__(self, invoker: Invoker) -> None:
        self.invoker = invoker

    def verify(self, operation: Callable[[], object], expected: ExpectedKind = ANY) -> None:
        """Run *operation* and require that it raised a condition matching *expected*.

        Side Effects
        ------------
        On success the holder keeps the absorbed condition for inspection.
        """

        self.invoker.capture(operation, expected)
        if self.invoker.holder.get() is not None:
            return
        family = self.invoker.family
        filter_kind = None if expected is ANY else expected
        log_info("condition_not_raised", **make_event(family.name, filter_kind))  # type: ignore[arg-type]
        raise family.failure(self.failure_message(expected), expected=filter_kind)  # type: ignore[arg-type]

    def failure_message(self, expected: ExpectedKind = ANY) -> str:
        """Render the assertion message for an operation that raised nothing.

        Examples
        --------
        >>> from lib_catch_exception.adapters.holders.default import SlotHolder
        >>> from lib_catch_exception.domain.family import EXCEPTION_FAMILY
        >>> verifier = Verifier(Invoker(EXCEPTION_FAMILY, SlotHolder()))
        >>> verifier.failure_message()
        'Exception expected but not thrown'
        >>> verifier.failure_message(IndexError)
        'Neither an exception of type IndexError nor another exception was thrown'
        """

        family = self.invoker.family
        if expected is ANY:
            return f"{family.label} expected but not thrown"
        return (
            f"Neither {family.article} {family.name} of type {type_name(expected)}"  # type: ignore[arg-type]
            f" nor another {family.name} was thrown"
        )
