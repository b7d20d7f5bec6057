"""TypoFix - Fuzzy spelling corrector.

Correct misspelled words in text against a prefix-tree dictionary, keeping
punctuation, casing and spacing intact.
"""

from loguru import logger

from typofix.core import (
    Config,
    EngineConfig,
    Lexicon,
    build_dictionary,
    correct_text,
    correct_text_with_records,
    load_config,
)
from typofix.processing import run_pipeline
from typofix.utils.logging import setup_logger

# Silent when used as a library; setup_logger turns logging back on
logger.disable("typofix")

__version__ = "0.3.0"
__all__ = [
    "Config",
    "EngineConfig",
    "Lexicon",
    "build_dictionary",
    "correct_text",
    "correct_text_with_records",
    "load_config",
    "run_pipeline",
    "setup_logger",
]
