from collections.abc import Set
import logging
from typing import Callable, Final
import pytest
from unittest.mock import patch
from returns.io import IOFailure, IOResult, IOSuccess
from returns.result import Failure, Result, Success

from utils.logger import FailureLevel, SuccessLevel, log_railway_function


SUCCESS_MESSAGE: Final[str] = "Operation succeeded"
FAILURE_MESSAGE: Final[str] = "Operation failed"
ERROR_VALUE: Final[Exception] = RuntimeError("Something went wrong")


@log_railway_function(failure_message=FAILURE_MESSAGE, success_message=SUCCESS_MESSAGE)
def some_io_function(should_succeed: bool):
    if should_succeed:
        return IOSuccess(42)
    return IOFailure(ERROR_VALUE)


@log_railway_function(failure_message=FAILURE_MESSAGE, success_message=SUCCESS_MESSAGE)
def some_function(should_succeed: bool):
    if should_succeed:
        return Success(42)
    return Failure(ERROR_VALUE)


@log_railway_function(failure_message=FAILURE_MESSAGE, success_message=SUCCESS_MESSAGE)
def some_complex_function(a, *, b, c=3):
    """My function docstring."""
    return Success({"a": a, "x": [b, c]})


@pytest.mark.parametrize(
    "function, should_succeed, message, level",
    (
        pytest.param(some_function, True, SUCCESS_MESSAGE, {"INFO"}, id="Success"),
        pytest.param(
            some_function, False, FAILURE_MESSAGE, {"DEBUG", "ERROR"}, id="Failure"
        ),
        pytest.param(some_io_function, True, SUCCESS_MESSAGE, {"INFO"}, id="IOSuccess"),
        pytest.param(
            some_io_function, False, FAILURE_MESSAGE, {"DEBUG", "ERROR"}, id="IOFailure"
        ),
    ),
)
def test_log_railway_function_capture_log_message(
    function: Callable[[bool], Result | IOResult],
    should_succeed: bool,
    message: str,
    level: Set[str],
    caplog: pytest.LogCaptureFixture,
):
    with caplog.at_level(logging.DEBUG):
        _ = function(should_succeed)

    assert message in caplog.text
    assert {record.levelname for record in caplog.records} == level


@pytest.mark.parametrize(
    "failure_level",
    [FailureLevel.WARNING, FailureLevel.ERROR, FailureLevel.CRITICAL],
)
def test_failure_is_logged_at_requested_level(
    failure_level: FailureLevel, caplog: pytest.LogCaptureFixture
):
    @log_railway_function(failure_message=FAILURE_MESSAGE, failure_level=failure_level)
    def failing_function():
        return Failure(ERROR_VALUE)

    with caplog.at_level(logging.DEBUG):
        _ = failing_function()

    assert {record.levelname for record in caplog.records} == {"DEBUG", failure_level.name}
    assert str(ERROR_VALUE) in caplog.text


@pytest.mark.parametrize("success_message", (None, ""))
def test_empty_success_message_does_not_log_on_success(
    success_message: str | None, caplog: pytest.LogCaptureFixture
):
    @log_railway_function(
        failure_message=FAILURE_MESSAGE, success_message=success_message
    )
    def empty_success_message_func():
        return IOSuccess(100)

    with caplog.at_level(logging.DEBUG):
        _ = empty_success_message_func()

    assert not {record.levelname for record in caplog.records}


def test_non_container_results_are_passed_through(caplog: pytest.LogCaptureFixture):
    @log_railway_function(failure_message=FAILURE_MESSAGE, success_message=SUCCESS_MESSAGE)
    def plain_function():
        return 42

    with caplog.at_level(logging.DEBUG):
        assert plain_function() == 42

    assert not caplog.records


def test_decorator_is_not_destructive():
    result = some_complex_function(1, b=2, c=5)

    assert isinstance(result, Success)
    assert result.unwrap() == {"a": 1, "x": [2, 5]}


def test_decorator_preserves_function_metadata():
    assert some_complex_function.__name__ == "some_complex_function"
    assert some_complex_function.__doc__ == "My function docstring."


@patch("utils.logger.VERBOSE", True)
def test_verbose_mode_logs_function_signature(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG):
        _ = some_complex_function(1, b=2, c=5)

    assert "Calling some_complex_function(1, b=2, c=5)" in caplog.text


@pytest.mark.parametrize("success_level", [SuccessLevel.DEBUG, SuccessLevel.INFO])
def test_success_is_logged_at_requested_level(
    success_level: SuccessLevel, caplog: pytest.LogCaptureFixture
):
    @log_railway_function(
        failure_message=FAILURE_MESSAGE,
        success_message=SUCCESS_MESSAGE,
        success_level=success_level,
    )
    def succeeding_function():
        return Success(42)

    with caplog.at_level(logging.DEBUG):
        _ = succeeding_function()

    assert {record.levelname for record in caplog.records} == {success_level.name}
    assert SUCCESS_MESSAGE in caplog.text
