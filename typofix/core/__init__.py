"""Core domain logic for TypoFix."""

from .candidates import generate_candidates
from .config import Config, EngineConfig, ScoringWeights, load_config
from .engine import (
    Lexicon,
    build_dictionary,
    correct_text,
    correct_text_with_records,
    find_correction,
)
from .errors import (
    ConfigError,
    EmptyDictionaryError,
    FrozenDictionaryError,
    InputError,
    TypoFixError,
)
from .frequency import FrequencyTable
from .records import CorrectionRecord, CorrectionResult, TokenOutcome
from .scoring import COMMON_WORDS, score, select
from .tokens import Token, tokenize
from .trie import Dictionary, DictionaryNode, NodeStorage
from .types import Candidate

__all__ = [
    "COMMON_WORDS",
    "Candidate",
    "Config",
    "ConfigError",
    "CorrectionRecord",
    "CorrectionResult",
    "Dictionary",
    "DictionaryNode",
    "EmptyDictionaryError",
    "EngineConfig",
    "FrequencyTable",
    "FrozenDictionaryError",
    "InputError",
    "Lexicon",
    "NodeStorage",
    "ScoringWeights",
    "Token",
    "TokenOutcome",
    "TypoFixError",
    "build_dictionary",
    "correct_text",
    "correct_text_with_records",
    "find_correction",
    "generate_candidates",
    "load_config",
    "score",
    "select",
    "tokenize",
]
