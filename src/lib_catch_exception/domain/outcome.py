"""Tagged result of a single invocation.

The invoker classifies what happened while running an operation into exactly
one of three outcomes. Only the composition of :meth:`Invoker.capture` turns
them back into holder writes and re-raised exceptions, which keeps the
classification itself free of side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Absorbed:
    """The operation raised a condition that satisfied the filter."""

    condition: BaseException


@dataclass(frozen=True, slots=True)
class Rethrown:
    """The operation raised a condition that did not satisfy the filter."""

    condition: BaseException


@dataclass(frozen=True, slots=True)
class Completed:
    """The operation returned without raising."""


Outcome = Union[Absorbed, Rethrown, Completed]
