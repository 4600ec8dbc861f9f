"""Public package surface for capturing and verifying raised conditions.

Tests call :func:`catch_exception` or :func:`verify_exception` with a
zero-argument operation, then inspect :func:`caught_exception`. The
``*_throwable`` variants do the same for every :class:`BaseException`, and
:class:`Catcher` bundles the operations with a private holder for tests that
want explicit ownership of their captures.
"""

from __future__ import annotations

from .adapters.holders.default import ContextVarHolder, SlotHolder
from .application.matching import ANY, matches
from .core import (
    Catcher,
    catch_exception,
    catch_throwable,
    caught_exception,
    caught_throwable,
    reset_caught_exception,
    reset_caught_throwable,
    verify_exception,
    verify_throwable,
)
from .domain.condition import ConditionInfo, describe
from .domain.errors import (
    CatchError,
    ConditionNotRaised,
    ExceptionNotThrownAssertionError,
    InvalidArgument,
    ThrowableNotThrownAssertionError,
)
from .domain.family import EXCEPTION_FAMILY, THROWABLE_FAMILY, ConditionFamily
from .observability import bind_test_id, get_logger

__all__ = [
    "ANY",
    "CatchError",
    "Catcher",
    "ConditionFamily",
    "ConditionInfo",
    "ConditionNotRaised",
    "ContextVarHolder",
    "EXCEPTION_FAMILY",
    "ExceptionNotThrownAssertionError",
    "InvalidArgument",
    "SlotHolder",
    "THROWABLE_FAMILY",
    "ThrowableNotThrownAssertionError",
    "bind_test_id",
    "catch_exception",
    "catch_throwable",
    "caught_exception",
    "caught_throwable",
    "describe",
    "get_logger",
    "matches",
    "reset_caught_exception",
    "reset_caught_throwable",
    "verify_exception",
    "verify_throwable",
]
