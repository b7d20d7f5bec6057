"""Utility functions for TypoFix."""

from typofix.utils.constants import Constants
from typofix.utils.debug import is_debug_word, log_debug_word, log_if_debug_word
from typofix.utils.helpers import cached_word_frequency, expand_file_path
from typofix.utils.logging import setup_logger

__all__ = [
    "Constants",
    "is_debug_word",
    "log_debug_word",
    "log_if_debug_word",
    "cached_word_frequency",
    "expand_file_path",
    "setup_logger",
]
