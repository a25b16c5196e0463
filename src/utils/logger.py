from enum import Enum
from functools import wraps
import logging
from typing import Any, Callable, Final
from itertools import chain

from loguru import logger
from returns.io import IOFailure, IOResult, IOSuccess
from returns.result import Failure, Result, Success

VERBOSE: Final[bool] = False


def _debug_function_signature(func: Callable[..., Any], *args, **kwargs):
    """Log the function signature at debug level."""
    signature = ", ".join(
        chain(
            (repr(arg) for arg in args),
            (f"{key}={repr(value)}" for key, value in kwargs.items()),
        )
    )
    logger.debug(f"Calling {func.__name__}({signature})")


class SuccessLevel(Enum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO


class FailureLevel(Enum):
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


def log_failure(failure_message: str, failure_level: FailureLevel, error: str) -> None:
    logger.debug(f"{failure_message}: {error}")
    logger.log(failure_level.name, failure_message)


def _log_container(
    result: Result | IOResult,
    failure_message: str,
    success_message: str | None,
    success_level: SuccessLevel,
    failure_level: FailureLevel,
) -> None:
    match result:
        case Success() | IOSuccess():
            if success_message:
                logger.log(success_level.name, success_message)
        case Failure(error) | IOFailure(error):
            log_failure(failure_message, failure_level, str(error))


def log_railway_function(
    failure_message: str,
    success_message: str | None = None,
    failure_level: FailureLevel = FailureLevel.ERROR,
    success_level: SuccessLevel = SuccessLevel.INFO,
):
    """
    Log the outcome of a function returning a `Result` or `IOResult` container.

    Success is logged at `success_level` when `success_message` is given. Pipeline
    stages pass `SuccessLevel.DEBUG` so they only show up in verbose output.
    Failure is logged at `failure_level`, with the error itself at debug level.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if VERBOSE:
                _debug_function_signature(func, *args, **kwargs)
            result = func(*args, **kwargs)
            if isinstance(result, (Result, IOResult)):
                _log_container(
                    result, failure_message, success_message, success_level, failure_level
                )
            return result

        return wrapper

    return decorator
