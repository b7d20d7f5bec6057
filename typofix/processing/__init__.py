"""Processing pipeline: word loading, correction and output."""

from .batch import correct_lines
from .dictionary_loading import DictionaryData, load_dictionaries
from .pipeline import build_lexicon, run_pipeline
from .text_io import read_input, retry_io, write_output

__all__ = [
    "DictionaryData",
    "build_lexicon",
    "correct_lines",
    "load_dictionaries",
    "read_input",
    "retry_io",
    "run_pipeline",
    "write_output",
]
