"""End-to-end scenarios for the module-level ``exception`` family API.

Each test starts with a sentinel condition in the ambient holder so a test can
tell "the catcher cleared the holder" apart from "nothing ever wrote to it".
"""

from __future__ import annotations

import pytest

from lib_catch_exception import (
    ANY,
    ExceptionNotThrownAssertionError,
    InvalidArgument,
    catch_exception,
    caught_exception,
    reset_caught_exception,
    verify_exception,
)
from lib_catch_exception.core import ambient_holders

EXPECTED_MESSAGE = "list index out of range"


class SentinelError(ConnectionError):
    """Marker stored before each test."""


@pytest.fixture(autouse=True)
def sentinel() -> SentinelError:
    condition = SentinelError("detail")
    ambient_holders()[0].set(condition)
    return condition


@pytest.fixture()
def items() -> list[str]:
    return []


def test_catch_no_exception_raised(items: list[str]) -> None:
    catch_exception(items.__len__, IndexError)
    assert caught_exception() is None


def test_catch_actual_class_raised(items: list[str]) -> None:
    catch_exception(lambda: items[0], IndexError)
    caught = caught_exception()
    assert type(caught) is IndexError
    assert str(caught) == EXPECTED_MESSAGE


def test_catch_subclass_of_expected_raised(items: list[str]) -> None:
    catch_exception(lambda: items[0], LookupError)
    assert type(caught_exception()) is IndexError
    assert str(caught_exception()) == EXPECTED_MESSAGE


def test_catch_superclass_of_raised_is_not_absorbed() -> None:
    def raise_lookup() -> None:
        raise LookupError("broad")

    with pytest.raises(LookupError, match="^broad$"):
        catch_exception(raise_lookup, IndexError)
    assert caught_exception() is None


def test_catch_other_class_than_expected_propagates(items: list[str]) -> None:
    with pytest.raises(IndexError, match=EXPECTED_MESSAGE):
        catch_exception(lambda: items[0], ValueError)
    assert caught_exception() is None


def test_catch_rejects_explicit_none_filter(items: list[str], sentinel: SentinelError) -> None:
    with pytest.raises(InvalidArgument, match="^exceptionClazz must not be null$"):
        catch_exception(lambda: items[0], None)  # type: ignore[arg-type]
    assert caught_exception() is sentinel


def test_catch_rejects_missing_operation(sentinel: SentinelError) -> None:
    with pytest.raises(InvalidArgument, match="^obj must not be null$"):
        catch_exception(None, ValueError)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgument, match="^obj must not be null$"):
        catch_exception(None)  # type: ignore[arg-type]
    assert caught_exception() is sentinel


def test_catch_without_filter(items: list[str]) -> None:
    catch_exception(lambda: items[0])
    assert isinstance(caught_exception(), IndexError)


def test_catch_without_filter_no_exception_raised(items: list[str]) -> None:
    catch_exception(items.__len__)
    assert caught_exception() is None


def test_catch_with_explicit_any_filter(items: list[str]) -> None:
    catch_exception(lambda: items[0], ANY)
    assert isinstance(caught_exception(), IndexError)


def test_verify_no_exception_raised_with_filter(items: list[str]) -> None:
    with pytest.raises(ExceptionNotThrownAssertionError) as excinfo:
        verify_exception(items.__len__, IndexError)
    assert caught_exception() is None
    assert str(excinfo.value) == "Neither an exception of type IndexError nor another exception was thrown"
    assert excinfo.value.expected is IndexError


def test_verify_no_exception_raised_without_filter(items: list[str]) -> None:
    with pytest.raises(ExceptionNotThrownAssertionError) as excinfo:
        verify_exception(items.__len__)
    assert caught_exception() is None
    assert str(excinfo.value) == "Exception expected but not thrown"
    assert excinfo.value.expected is None


def test_verify_failure_is_an_assertion_error(items: list[str]) -> None:
    with pytest.raises(AssertionError):
        verify_exception(items.__len__)


def test_verify_actual_class_raised(items: list[str]) -> None:
    verify_exception(lambda: items[0], IndexError)
    assert str(caught_exception()) == EXPECTED_MESSAGE


def test_verify_subclass_of_expected_raised(items: list[str]) -> None:
    verify_exception(lambda: items[0], Exception)
    assert type(caught_exception()) is IndexError


def test_verify_other_class_than_expected_propagates(items: list[str]) -> None:
    with pytest.raises(IndexError):
        verify_exception(lambda: items[0], TypeError)
    assert caught_exception() is None


def test_verify_rejects_explicit_none_filter(items: list[str], sentinel: SentinelError) -> None:
    with pytest.raises(InvalidArgument, match="^exceptionClazz must not be null$"):
        verify_exception(lambda: items[0], None)  # type: ignore[arg-type]
    assert caught_exception() is sentinel


def test_verify_rejects_missing_operation(sentinel: SentinelError) -> None:
    with pytest.raises(InvalidArgument, match="^obj must not be null$"):
        verify_exception(None, ValueError)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgument, match="^obj must not be null$"):
        verify_exception(None)  # type: ignore[arg-type]
    assert caught_exception() is sentinel


def test_verify_without_filter(items: list[str]) -> None:
    verify_exception(lambda: items[0])
    assert str(caught_exception()) == EXPECTED_MESSAGE


def test_keyboard_interrupt_escapes_the_exception_family() -> None:
    def interrupt() -> None:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        catch_exception(interrupt)
    assert caught_exception() is None


def test_custom_exception_from_bound_method() -> None:
    class MyError(Exception):
        pass

    class Something:
        def dooo(self) -> None:
            raise MyError("boom")

    catch_exception(Something().dooo)
    assert isinstance(caught_exception(), MyError)


def test_caught_exception_is_idempotent(items: list[str]) -> None:
    catch_exception(lambda: items[0])
    first = caught_exception()
    assert caught_exception() is first


def test_reset_caught_exception(items: list[str]) -> None:
    catch_exception(lambda: items[0])
    reset_caught_exception()
    assert caught_exception() is None


def test_new_capture_replaces_previous() -> None:
    catch_exception(lambda: {}["a"])
    first = caught_exception()
    catch_exception(lambda: int("x"))
    second = caught_exception()
    assert isinstance(first, KeyError)
    assert isinstance(second, ValueError)
    assert caught_exception() is second
