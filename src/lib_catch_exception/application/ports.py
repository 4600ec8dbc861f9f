"""Application-layer ports describing adapter responsibilities.

Purpose
-------
Define the structural contract a condition holder must satisfy so the invoker
and verifier can record captures without depending on where the slot lives.

Contents
--------
* :class:`ConditionHolder` – single-slot storage for the last captured
  condition.

System Role
-----------
The invoker is the only writer; tests and the verifier only read. Adapters in
``lib_catch_exception.adapters.holders`` implement the protocol with
call-context scoped storage or a plain instance slot.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConditionHolder(Protocol):
    """Store at most one captured condition.

    Methods
    -------
    :meth:`clear`
        Drop the stored condition; idempotent.
    :meth:`set`
        Replace the stored condition. ``None`` is rejected with
        :class:`InvalidArgument`.
    :meth:`get`
        Return the stored condition (or ``None``) without mutating the slot.
    """

    def clear(self) -> None:
        """Discard any stored condition."""

    def set(self, condition: BaseException) -> None:
        """Replace the stored condition with *condition*."""

    def get(self) -> BaseException | None:
        """Return the stored condition or ``None``."""
