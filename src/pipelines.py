"""
Railway-oriented identicon pipeline.

This module composes the identicon stages into a single railway-oriented
pipeline and provides the public entry points around it.

Railway-oriented programming is a functional error-handling pattern where
operations are chained together in a "railway" with two tracks: a success
track and a failure track. Each operation either continues on the success track
or switches to the failure track, propagating errors automatically without
explicit error checking at each step.

The stages are pure and the pipeline is total over string input, so a failure
on the pure track means an invariant broke inside the pipeline. Writing the
result to storage is the only I/O step and the only expected failure; it runs on
the `IOResult` track and fails with a `StorageError`.
"""

from collections.abc import Callable
from functools import partial
from pathlib import Path
from typing import Any

from returns.interfaces.container import ContainerN
from returns.io import IOResult, IOResultE, impure_safe
from returns.pipeline import flow
from returns.pointfree import bind
from returns.result import Failure, ResultE, Success, safe

from constants import IMAGE_SUFFIX
from container_models import IdenticonImage
from exceptions import IdenticonGenerationError, StorageError
from mutations import BuildGrid, BuildPixelMap, FilterOddSquares, PickColor
from renders import draw_image, save_image
from utils.logger import SuccessLevel, log_railway_function


@log_railway_function("Failed to hash input", "Input hashed", success_level=SuccessLevel.DEBUG)
@safe
def hash_input(text: str) -> IdenticonImage:
    """Start a new identicon record from the MD5 digest of `text`."""
    return IdenticonImage.from_text(text)


IDENTICON_STAGES: tuple[Callable[[Any], Any], ...] = (
    hash_input,
    PickColor(),
    BuildGrid(),
    FilterOddSquares(),
    BuildPixelMap(),
    draw_image,
)


def _capture_result_value[T](result: ResultE[T], error_message: str) -> T:
    match result:
        case Success(value):
            return value
        case Failure(Exception() as error):
            raise IdenticonGenerationError(f"{error_message}: {error}") from error
        case _:
            raise IdenticonGenerationError(error_message)


def _pipeline_flow[T](entry_value: Any | ContainerN, *pipeline: Callable[..., Any]) -> ResultE[T]:
    first_function = None
    pipeline_tasks: Any = pipeline
    if not isinstance(entry_value, ContainerN):
        first_function, *pipeline_tasks = pipeline

    return flow(
        entry_value,
        *((first_function,) if first_function else ()),
        *[bind(task) for task in pipeline_tasks],
    )


def run_pipeline(entry_value: Any | ContainerN, *tasks: Callable[[Any], Any], error_message: str) -> Any:
    """
    Execute a series of tasks in a functional pipeline and return the final result.

    :param entry_value: The initial value to pass into the pipeline. This may be a
        raw value or a Container from the ``returns`` library.
    :param tasks: Callables executed in order. The first one receives the raw entry
        value, every following one is bound to the previous container.
    :param error_message: Message of the ``IdenticonGenerationError`` raised when any
        task fails.

    :returns: The unwrapped success value of the final pipeline result.
    :raises IdenticonGenerationError: If any task returns a failure container.
    """
    return _capture_result_value(_pipeline_flow(entry_value, *tasks), error_message)


def generate_identicon(text: str) -> ResultE[bytes]:
    """Run the identicon pipeline on `text`, keeping the outcome in a container."""
    return _pipeline_flow(text, *IDENTICON_STAGES)


def generate(text: str) -> bytes:
    """
    Render the identicon of `text` as PNG bytes.

    The same text always yields byte-identical output.

    :param text: Any string, the empty string included.
    :returns: The encoded 250x250 PNG image.
    :raises IdenticonGenerationError: If the pipeline breaks one of its invariants.
    """
    return run_pipeline(text, *IDENTICON_STAGES, error_message="Failed to generate identicon")


@impure_safe
def identicon_path(text: str, output_dir: Path) -> Path:
    """
    Build the storage path `<output_dir>/<text>.png` for an identicon.

    :raises StorageError: If the path resolves outside `output_dir`.
    """
    output_path = output_dir / f"{text}{IMAGE_SUFFIX}"
    try:
        inside = output_path.resolve().is_relative_to(output_dir.resolve())
    except (OSError, ValueError) as error:
        raise StorageError(f"Invalid identicon name '{text}': {error}") from error
    if not inside:
        raise StorageError(f"Identicon name '{text}' points outside {output_dir}")
    return output_path


@log_railway_function("Failed to create identicon", "Identicon created")
def create_identicon(text: str, output_dir: Path) -> IOResultE[Path]:
    """
    Render the identicon of `text` and store it as `<text>.png` in `output_dir`.

    :param text: The identicon input, also used as file name.
    :param output_dir: Existing directory to write into.
    :returns: `IOSuccess` with the written path, or `IOFailure` holding a
        `StorageError` when writing fails.
    """
    return IOResult.from_result(generate_identicon(text)).bind(
        lambda data: identicon_path(text, output_dir).bind(partial(save_image, data))
    )
