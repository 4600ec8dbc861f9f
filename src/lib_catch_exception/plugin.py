"""pytest integration.

Enable with ``pytest_plugins = ["lib_catch_exception.plugin"]`` in a
``conftest.py``. Every test then starts with empty ambient holders and its node
id bound for log correlation, and may request per-test catchers:

* ``catcher`` – :class:`~lib_catch_exception.core.Catcher` for the
  ``exception`` family over a fresh holder.
* ``throwable_catcher`` – the same for the ``throwable`` family.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from .core import Catcher, ambient_holders
from .domain.family import EXCEPTION_FAMILY, THROWABLE_FAMILY
from .observability import bind_test_id


@pytest.fixture(autouse=True)
def _clean_caught_conditions(request: pytest.FixtureRequest) -> Iterator[None]:
    """Start each test from empty ambient holders and drop captures afterwards."""

    holders = ambient_holders()
    for holder in holders:
        holder.clear()
    bind_test_id(request.node.nodeid)
    yield
    bind_test_id(None)
    for holder in holders:
        holder.clear()


@pytest.fixture()
def catcher() -> Catcher:
    """Provide an isolated exception catcher for one test."""

    return Catcher(EXCEPTION_FAMILY)


@pytest.fixture()
def throwable_catcher() -> Catcher:
    """Provide an isolated throwable catcher for one test."""

    return Catcher(THROWABLE_FAMILY)
