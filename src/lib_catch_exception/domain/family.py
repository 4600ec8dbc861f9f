"""Condition families: which errors a catcher may absorb and how it reports them.

Purpose
-------
Capture the configuration that distinguishes the ``exception`` catchers from
the ``throwable`` catchers in one immutable value object, so the invoker and
verifier stay family-agnostic.

Contents
--------
* :class:`ConditionFamily` – frozen configuration record.
* :data:`EXCEPTION_FAMILY` – absorbs :class:`Exception` subclasses only.
* :data:`THROWABLE_FAMILY` – absorbs every :class:`BaseException`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .errors import ConditionNotRaised, ExceptionNotThrownAssertionError, ThrowableNotThrownAssertionError


@dataclass(frozen=True, slots=True)
class ConditionFamily:
    """Immutable description of a family of catchable conditions.

    Attributes
    ----------
    name:
        Lower-case family name used in log events and messages.
    base:
        Root class of the conditions the family may absorb. Anything outside
        it propagates untouched.
    filter_label:
        Name reported when the expected-kind filter is invalid.
    article:
        Indefinite article used before ``name`` in failure messages.
    failure:
        :class:`ConditionNotRaised` subclass raised by the verifier.
    """

    name: str
    base: type[BaseException]
    filter_label: str
    article: str
    failure: type[ConditionNotRaised]

    @property
    def label(self) -> str:
        """Capitalised family name, e.g. ``"Exception"``."""

        return self.name.capitalize()

    def is_catchable(self, condition: BaseException) -> bool:
        """Return ``True`` when *condition* belongs to this family."""

        return isinstance(condition, self.base)


EXCEPTION_FAMILY: Final[ConditionFamily] = ConditionFamily(
    name="exception",
    base=Exception,
    filter_label="exceptionClazz",
    article="an",
    failure=ExceptionNotThrownAssertionError,
)

THROWABLE_FAMILY: Final[ConditionFamily] = ConditionFamily(
    name="throwable",
    base=BaseException,
    filter_label="throwableClazz",
    article="a",
    failure=ThrowableNotThrownAssertionError,
)
