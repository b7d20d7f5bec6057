"""Stage 1: Dictionary word loading."""

import itertools

from english_words import get_english_words_set
from loguru import logger
from pydantic import BaseModel, Field, PrivateAttr
from wordfreq import top_n_list

from typofix.core import Config
from typofix.utils.constants import Constants
from typofix.utils.debug import log_if_debug_word
from typofix.utils.helpers import cached_word_frequency, expand_file_path

# Used when the dictionary file is missing, and to top up very small ones
BUILTIN_WORDS = [
    "the", "is", "a", "an", "and", "are", "as", "at", "be", "but", "by",
    "for", "if", "in", "into", "it", "no", "not", "of", "on", "or", "such",
    "that", "their", "then", "there", "these", "they", "this", "to", "was",
    "will", "with", "he", "she", "them", "we", "us", "our", "you",
    "your", "him", "his", "her", "its", "my", "me", "mine", "sentence",
    "typos", "check", "spell", "checker", "some", "test", "have", "has", "had",
    "do", "does", "did", "can", "could", "would", "should", "may", "might",
    "must", "shall", "from", "about", "like", "know", "think", "see",
    "come", "go", "get", "make", "say", "take", "find", "give", "tell", "work",
    "call", "try", "ask", "need", "feel", "become", "leave", "put", "mean", "keep",
    "let", "begin", "seem", "help", "talk", "turn", "start", "show", "hear", "play",
    "run", "move", "live", "happen", "stand", "lose", "pay", "meet", "include", "continue",
    "set", "learn", "change", "lead", "understand", "watch", "follow", "stop", "create",
    "speak", "read", "allow", "add", "spend", "grow", "open", "walk", "win", "offer",
    "remember", "appear", "buy", "wait", "serve", "die", "send", "expect", "build", "stay",
    "fall", "cut", "reach", "kill", "remain",
]  # fmt: skip


class DictionaryData(BaseModel):
    """Words and weights handed to ``build_dictionary``."""

    words: list[str] = Field(default_factory=list)
    frequencies: dict[str, int] = Field(default_factory=dict)

    _seen: set[str] = PrivateAttr(default_factory=set)

    def model_post_init(self, __context) -> None:
        self._seen = set(self.words)

    def add(self, word: str, weight: int | None = None) -> bool:
        """Add a word unless already present; returns True if it was new.

        A weight is recorded for new words, and replaces an existing weight
        only when it is higher.
        """
        is_new = word not in self._seen
        if is_new:
            self._seen.add(word)
            self.words.append(word)
        if weight is not None and weight > self.frequencies.get(word, -1):
            self.frequencies[word] = weight
        return is_new

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: object) -> bool:
        return word in self._seen


def load_word_list(filepath: str) -> list[str]:
    """Load a word list file, one word per line.

    Lines are stripped and lowercased; blank lines and ``#`` comments are
    skipped. Lines that are not valid UTF-8 are skipped with a warning.

    Raises:
        OSError: If the file cannot be read
    """
    words = []
    skipped = 0
    with open(expand_file_path(filepath), "r", encoding="utf-8", errors="replace") as f:
        for line in f:
            line = line.strip().lower()
            if not line or line.startswith("#"):
                continue
            if "\ufffd" in line:
                skipped += 1
                continue
            words.append(line)
    if skipped:
        logger.warning(f"Skipped {skipped} lines of {filepath} that are not valid UTF-8")
    return words


def rank_weight(rank: int) -> int:
    """Weight of the word on line ``rank`` of a dictionary file; earlier is heavier."""
    return max(0, Constants.FILE_RANK_BASE - rank)


def add_builtin_words(data: DictionaryData) -> int:
    """Add built-in words that are not already present.

    The first added word weighs ``Constants.BUILTIN_BASE_WEIGHT`` and each
    later one a point less. Words already present keep their weight.

    Returns:
        Number of words added
    """
    weight = Constants.BUILTIN_BASE_WEIGHT
    added = 0
    for word in BUILTIN_WORDS:
        if word in data:
            continue
        data.add(word, weight)
        weight -= 1
        added += 1
    return added


def load_wordfreq_words(top_n: int) -> dict[str, int]:
    """Get the top N alphabetic English words from wordfreq with their weights.

    Weights are occurrences per million words (at least 1).
    """
    all_words = top_n_list("en", top_n * 3)
    valid_words = (word.lower() for word in all_words if word.isalpha())
    words = list(dict.fromkeys(itertools.islice(valid_words, top_n)))
    return {
        word: max(1, round(cached_word_frequency(word) * Constants.WORDFREQ_SCALE))
        for word in words
    }


def load_english_words() -> set[str]:
    """Load the english-words dictionary (web2 + gcide)."""
    return get_english_words_set(["web2", "gcide"], lower=True)


def _load_dictionary_file(data: DictionaryData, config: Config, verbose: bool) -> None:
    try:
        file_words = load_word_list(config.dictionary)
    except OSError as e:
        logger.warning(f"Failed to open dictionary file {config.dictionary}: {e}")
        logger.warning("Falling back to the built-in word list")
        add_builtin_words(data)
        return

    for rank, word in enumerate(file_words):
        data.add(word, rank_weight(rank))

    if verbose:
        logger.info(f"  Loaded {len(file_words)} words from {config.dictionary}")

    if len(file_words) < config.min_dictionary_words:
        added = add_builtin_words(data)
        logger.info(
            f"  Dictionary has only {len(file_words)} words, "
            f"added {added} built-in words"
        )


def load_dictionaries(config: Config, verbose: bool = False) -> DictionaryData:
    """Collect dictionary words and weights from every configured source.

    Sources, in order: the dictionary file, the wordfreq top-N list and the
    english-words set. With no source configured the built-in list is used.

    Args:
        config: Configuration object
        verbose: Whether to print verbose output

    Returns:
        DictionaryData with words in first-seen order and their weights
    """
    data = DictionaryData()

    if config.dictionary:
        _load_dictionary_file(data, config, verbose)

    if config.top_n:
        if verbose:
            logger.info(f"  Loading top {config.top_n} words from wordfreq...")
        for word, weight in load_wordfreq_words(config.top_n).items():
            data.add(word, weight)

    if config.english_words:
        if verbose:
            logger.info("  Loading English words dictionary...")
        for word in sorted(load_english_words()):
            data.add(word)

    if not config.dictionary and not config.top_n and not config.english_words:
        if verbose:
            logger.info("  No word source configured, using the built-in word list")
        add_builtin_words(data)

    for word in config.debug_words:
        if word in data:
            log_if_debug_word(
                word,
                f"Loaded with weight {data.frequencies.get(word, Constants.DEFAULT_WEIGHT)}",
                config.debug_words,
                "Loading",
            )
        else:
            log_if_debug_word(word, "Not in any word source", config.debug_words, "Loading")

    if verbose:
        logger.info(f"  Loaded {len(data)} words into the dictionary")

    return data
