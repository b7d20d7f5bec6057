"""Reading input text and writing corrected text, with retries."""

import os
import sys
import time
from collections.abc import Callable
from typing import TypeVar

from loguru import logger

from typofix.core.errors import InputError
from typofix.utils.constants import Constants

T = TypeVar("T")


def retry_io(
    func: Callable[[], T],
    *,
    attempts: int = Constants.IO_RETRY_ATTEMPTS,
    initial_delay: float = Constants.IO_RETRY_INITIAL_DELAY,
    max_delay: float = Constants.IO_RETRY_MAX_DELAY,
    factor: float = 2.0,
    description: str = "I/O operation",
) -> T:
    """Call ``func``, retrying with exponential backoff on ``OSError``.

    Missing files are not retried. The last error is re-raised.

    Raises:
        ValueError: If ``attempts`` is less than 1
    """
    if attempts < 1:
        raise ValueError(f"attempts must be at least 1, got {attempts}")

    delay = initial_delay
    for attempt in range(1, attempts + 1):
        try:
            return func()
        except FileNotFoundError:
            raise
        except OSError as e:
            if attempt == attempts:
                logger.error(f"Failed {description} after {attempts} attempts: {e}")
                raise
            logger.warning(f"Failed {description} ({e}), retrying...")
            time.sleep(delay)
            delay = min(delay * factor, max_delay)


def _read_file(path: str) -> str:
    # newline="" keeps \r\n intact so output matches input byte for byte
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def _write_file(path: str, text: str) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def read_input(text: str | None = None, input_path: str | None = None) -> str:
    """Get the text to correct: inline text, a file, or stdin.

    Raises:
        InputError: If the file or stdin is not valid UTF-8
    """
    if text is not None:
        return text
    source = input_path or "stdin"
    try:
        if input_path:
            return retry_io(lambda: _read_file(input_path), description=f"reading {input_path}")
        return sys.stdin.read()
    except UnicodeDecodeError as e:
        raise InputError(f"Cannot decode {source} as UTF-8: {e}") from e


def write_output(text: str, output_path: str | None = None) -> None:
    """Write corrected text to a file, or to stdout when no path is given."""
    if output_path:
        retry_io(lambda: _write_file(output_path, text), description=f"writing {output_path}")
        logger.info(f"Wrote corrected text to {output_path}")
    else:
        sys.stdout.write(text)
        sys.stdout.flush()
