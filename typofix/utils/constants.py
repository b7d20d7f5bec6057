"""Constants used throughout the TypoFix codebase."""


class Constants:
    """Centralized constants to avoid magic numbers and strings."""

    # Candidate generation
    MAX_CANDIDATES = 10
    """Hard cap on candidates returned for a single word."""

    MAX_EDIT_DISTANCE = 2
    """Largest edit distance the generator will search."""

    MIN_USEFUL_CANDIDATES = 3
    """Distance-1 hit count below which distance 2 is searched."""

    FIRST_PASS_STRIDE = 3
    """Alphabet stride for substitutions in the raw distance-1 edit strings."""

    SECOND_PASS_STRIDE = 2
    """Alphabet stride for substitutions in the second edit pass."""

    ALPHABET = "abcdefghijklmnopqrstuvwxyz"
    """Letters tried by substitutions and insertions."""

    # Token policy
    MIN_CORRECTABLE_LENGTH = 3
    """Tokens shorter than this are never corrected."""

    # Scoring
    DEFAULT_WEIGHT = 1
    """Weight of a word with no frequency entry."""

    SAME_LENGTH_BONUS = 100
    LENGTH_PENALTY = 10
    COMMON_WORD_BONUS = 200

    # Word sources
    FILE_RANK_BASE = 1000
    """Words read from a file are weighted FILE_RANK_BASE - line rank."""

    BUILTIN_BASE_WEIGHT = 5000
    """Weight of the first built-in word; each later one is one lower."""

    MIN_DICTIONARY_WORDS = 100
    """File dictionaries smaller than this are topped up with built-ins."""

    WORDFREQ_SCALE = 1_000_000
    """wordfreq frequencies are scaled to occurrences per million."""

    # Host I/O
    IO_RETRY_ATTEMPTS = 3
    IO_RETRY_INITIAL_DELAY = 0.05
    IO_RETRY_MAX_DELAY = 1.0
