"""Holder adapters implementing :class:`~lib_catch_exception.application.ports.ConditionHolder`.

Purpose
-------
Provide the two places a captured condition can live:

* :class:`ContextVarHolder` – one slot per call context (thread or asyncio
  task). Backs the module-level ``catch_exception``/``catch_throwable``
  functions so concurrent tests never overwrite each other's captures.
* :class:`SlotHolder` – a plain instance attribute, for fixtures that create
  a holder per test and drop it afterwards.

Neither adapter locks: a single :class:`SlotHolder` must not be shared across
threads.
"""

from __future__ import annotations

from contextvars import ContextVar

from ...domain.errors import InvalidArgument


def _checked(condition: BaseException) -> BaseException:
    """Reject ``None`` and non-exception values before they reach a slot."""

    if condition is None:
        raise InvalidArgument("condition must not be null")
    if not isinstance(condition, BaseException):
        raise InvalidArgument("condition must be an exception instance")
    return condition


class ContextVarHolder:
    """Store the last captured condition in a :class:`contextvars.ContextVar`.

    Why
    ----
    A process-wide global would leak captures between threads and tasks. A
    context variable gives each call context its own slot while keeping the
    convenient module-level API.

    Parameters
    ----------
    name:
        Context variable name; shows up in ``repr`` and debuggers.
    """

    def __init__(self, name: str) -> None:
        self._var: ContextVar[BaseException | None] = ContextVar(name, default=None)

    @property
    def name(self) -> str:
        return self._var.name

    def clear(self) -> None:
        self._var.set(None)

    def set(self, condition: BaseException) -> None:
        self._var.set(_checked(condition))

    def get(self) -> BaseException | None:
        return self._var.get()

    def __repr__(self) -> str:
        return f"ContextVarHolder({self.name!r})"


class SlotHolder:
    """Store the last captured condition on the instance itself.

    Examples
    --------
    >>> holder = SlotHolder()
    >>> holder.set(KeyError("k"))
    >>> holder.get()
    KeyError('k')
    >>> holder.clear()
    >>> holder.get() is None
    True
    """

    __slots__ = ("_condition",)

    def __init__(self) -> None:
        self._condition: BaseException | None = None

    def clear(self) -> None:
        self._condition = None

    def set(self, condition: BaseException) -> None:
        self._condition = _checked(condition)

    def get(self) -> BaseException | None:
        return self._condition

    def __repr__(self) -> str:
        return f"SlotHolder({self._condition!r})"
