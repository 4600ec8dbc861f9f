from __future__ import annotations

import logging

import pytest

from lib_catch_exception import Catcher, bind_test_id, get_logger
from lib_catch_exception.observability import TEST_ID, log_debug, make_event
from lib_catch_exception.testing import failing


def test_package_logger_is_silent_by_default() -> None:
    assert any(isinstance(handler, logging.NullHandler) for handler in get_logger().handlers)


def test_records_carry_bound_test_id(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="lib_catch_exception")
    bind_test_id("demo::test")
    log_debug("condition_absorbed", **make_event("exception", KeyError))
    assert getattr(caplog.records[-1], "context") == {"test_id": "demo::test", "family": "exception", "kind": "KeyError"}


def test_unbinding_resets_test_id() -> None:
    bind_test_id("temp")
    bind_test_id(None)
    assert TEST_ID.get() is None


def test_event_payload_may_carry_a_message_field(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="lib_catch_exception")
    log_debug("custom", **make_event("exception", None, {"message": "text"}))
    assert getattr(caplog.records[-1], "context")["message"] == "text"


def test_plugin_binds_node_id_into_capture_records(
    caplog: pytest.LogCaptureFixture, request: pytest.FixtureRequest
) -> None:
    caplog.set_level(logging.DEBUG, logger="lib_catch_exception")
    Catcher().catch(failing(ValueError, "v"))
    context = getattr(caplog.records[-1], "context")
    assert context["test_id"] == request.node.nodeid
    assert context["detail"] == "v"
