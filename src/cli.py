"""Command line entry point: render the identicon of a string and write it as PNG."""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from loguru import logger
from returns.io import IOFailure, IOSuccess
from returns.result import Failure, Success

from pipelines import generate, identicon_path
from renders import save_image
from settings import get_settings


def configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")


def main(argv: Sequence[str] | None = None) -> int:
    """
    Render the identicon of the given text and save it as `<text>.png`.

    :param argv: Command line arguments, defaults to ``sys.argv[1:]``.
    :returns: Exit code, 0 when the image was written and 1 on a storage failure.
    """
    parser = argparse.ArgumentParser(description="Generate an identicon PNG from a string")
    parser.add_argument("text", help="Input string, also used as file name")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory to write the image to (default: IDENTICON_OUTPUT_DIR or the working directory)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every pipeline step")
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    output_dir = args.output_dir or get_settings().output_dir

    data = generate(args.text)
    match identicon_path(args.text, output_dir).bind(lambda path: save_image(data, path)):
        case IOSuccess(Success(path)):
            logger.info(f"Identicon written to {path}")
            return 0
        case IOFailure(Failure(error)):
            logger.error(f"Storage failure: {error}")
            return 1


if __name__ == "__main__":
    sys.exit(main())
