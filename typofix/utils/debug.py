"""Debug tracing for selected words."""

from collections.abc import Iterable

from loguru import logger


def is_debug_word(word: str, debug_words: Iterable[str]) -> bool:
    """Check whether a word (case-insensitive) is being traced."""
    return word.lower() in debug_words


def log_debug_word(word: str, message: str, stage: str = "") -> None:
    """Log a tracing message for a debug word.

    Args:
        word: The traced word
        message: What happened to it
        stage: Optional stage marker, e.g. "Loading" or "Correction"
    """
    stage_str = f" [{stage}]" if stage else ""
    logger.debug(f"[DEBUG WORD: '{word}']{stage_str} {message}")


def log_if_debug_word(word: str, message: str, debug_words: Iterable[str], stage: str = "") -> None:
    """Log a tracing message only when the word is traced."""
    if debug_words and is_debug_word(word, debug_words):
        log_debug_word(word, message, stage)
