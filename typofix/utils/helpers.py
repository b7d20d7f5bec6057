"""Shared utility functions for TypoFix."""

import functools
import os

from wordfreq import word_frequency as _word_frequency


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


@functools.lru_cache(maxsize=None)
def cached_word_frequency(word: str, lang: str = "en") -> float:
    """Cached wrapper for word_frequency to avoid repeated lookups.

    Args:
        word: The word to look up
        lang: Language code (default: "en")

    Returns:
        Word frequency as a float
    """
    return _word_frequency(word, lang)
