"""Logging for capture outcomes, keyed to the running test.

The package logger stays silent (``NullHandler``) until a suite attaches a
handler. Each record carries a ``context`` extra holding the test id bound in
:data:`TEST_ID` plus the event fields, so an absorbed or re-raised condition
can be traced back to the test that wrapped it. The pytest plugin binds the
node id; outside pytest the id stays ``None``.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Final, Mapping

TEST_ID: ContextVar[str | None] = ContextVar("lib_catch_exception_test_id", default=None)

_LOGGER: Final[logging.Logger] = logging.getLogger("lib_catch_exception")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Return the package logger for suites that want to see capture events."""

    return _LOGGER


def bind_test_id(test_id: str | None) -> None:
    """Attach *test_id* to subsequent records in this context; ``None`` unbinds.

    >>> bind_test_id('tests/test_demo.py::test_it')
    >>> TEST_ID.get()
    'tests/test_demo.py::test_it'
    >>> bind_test_id(None)
    >>> TEST_ID.get() is None
    True
    """

    TEST_ID.set(test_id)


def log_debug(event: str, **fields: Any) -> None:
    _emit(logging.DEBUG, event, fields)


def log_info(event: str, **fields: Any) -> None:
    _emit(logging.INFO, event, fields)


def make_event(
    family: str,
    kind: type[BaseException] | None,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Return the fields of a capture event: ``family``, ``kind`` and *payload*.

    ``kind`` is reduced to the class name so the fields stay serialisable.

    >>> make_event('exception', IndexError, {'detail': 'list index out of range'})
    {'family': 'exception', 'kind': 'IndexError', 'detail': 'list index out of range'}
    >>> make_event('throwable', None)
    {'family': 'throwable', 'kind': None}
    """

    return {"family": family, "kind": kind.__name__ if kind is not None else None, **(payload or {})}


def _emit(level: int, event: str, fields: Mapping[str, Any]) -> None:
    _LOGGER.log(level, event, extra={"context": {"test_id": TEST_ID.get(), **fields}})
