"""Dictionary construction and text correction."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from loguru import logger

from typofix.core.candidates import generate_candidates
from typofix.core.config import EngineConfig
from typofix.core.errors import EmptyDictionaryError
from typofix.core.frequency import FrequencyTable
from typofix.core.records import CorrectionRecord, CorrectionResult, TokenOutcome
from typofix.core.scoring import select
from typofix.core.tokens import Token, apply_case, tokenize
from typofix.core.trie import Dictionary
from typofix.core.types import Candidate
from typofix.utils.constants import Constants


@dataclass(frozen=True)
class Lexicon:
    """Everything a correction call reads: dictionary, weights and settings.

    Built once by ``build_dictionary`` and never mutated afterwards, so one
    instance can serve concurrent callers.
    """

    dictionary: Dictionary
    frequencies: FrequencyTable
    config: EngineConfig

    def __contains__(self, word: object) -> bool:
        return word in self.dictionary

    def __len__(self) -> int:
        return len(self.dictionary)


def build_dictionary(
    words: Iterable[str],
    frequencies: Mapping[str, int] | None = None,
    config: EngineConfig | None = None,
) -> Lexicon:
    """Build a frozen Lexicon from a word sequence.

    Words are stripped and lowercased; blank entries are skipped. Frequency
    keys are lowercased the same way.

    Args:
        words: Dictionary words
        frequencies: Optional word -> weight hints
        config: Engine configuration (defaults if None)

    Returns:
        Lexicon ready for ``correct_text``

    Raises:
        EmptyDictionaryError: If no usable word was supplied
    """
    config = config or EngineConfig()
    dictionary = Dictionary(config.node_storage)

    skipped = 0
    for word in words:
        word = word.strip().lower()
        if not word:
            continue
        try:
            dictionary.insert(word)
        except ValueError:
            # Only dense storage rejects words, for characters outside a-z
            skipped += 1

    if skipped:
        logger.warning(f"Skipped {skipped} words that {config.node_storage} storage cannot hold")

    if len(dictionary) == 0:
        raise EmptyDictionaryError("Cannot build a dictionary from zero words")

    dictionary.freeze()
    weights = {word.strip().lower(): weight for word, weight in (frequencies or {}).items()}

    logger.debug(f"Built dictionary with {len(dictionary)} words")
    return Lexicon(dictionary=dictionary, frequencies=FrequencyTable(weights), config=config)


def find_correction(word: str, lexicon: Lexicon) -> Candidate | None:
    """Return the best correction for a lowercase word.

    Returns None when the word is already in the dictionary or when nothing
    lies within the edit budget.
    """
    if lexicon.dictionary.contains(word):
        return None

    candidates = generate_candidates(word, lexicon.dictionary, lexicon.frequencies, lexicon.config)
    best = select(candidates)
    if best is None:
        logger.debug(f"No match found for '{word}'")
    else:
        logger.debug(f"Corrected '{word}' to '{best.word}' (score: {best.score})")
    return best


def correct_token(
    token: Token, lexicon: Lexicon
) -> tuple[str, TokenOutcome, Candidate | None]:
    """Correct a single token.

    Returns:
        Tuple of (token core to emit, outcome, chosen candidate)
    """
    clean = token.clean
    if len(clean) < Constants.MIN_CORRECTABLE_LENGTH or token.is_numeric:
        return token.clean, TokenOutcome.SKIPPED, None

    lowered = clean.lower()
    if lexicon.dictionary.contains(lowered):
        return token.clean, TokenOutcome.KNOWN, None

    best = find_correction(lowered, lexicon)
    if best is None or best.word == lowered:
        return token.clean, TokenOutcome.NO_MATCH, None

    corrected = apply_case(best.word, token.is_all_caps, token.is_capitalized)
    return corrected, TokenOutcome.CORRECTED, best


def correct_text_with_records(text: str, lexicon: Lexicon) -> CorrectionResult:
    """Correct every token in ``text`` and describe what changed.

    Everything outside token cores (whitespace, punctuation, affixes) is
    copied through unchanged.
    """
    parts: list[str] = []
    corrections: list[CorrectionRecord] = []
    unresolved: list[str] = []
    last = 0

    for token in tokenize(text):
        parts.append(text[last : token.offset])
        core, outcome, best = correct_token(token, lexicon)
        parts.append(token.prefix + core + token.suffix)
        last = token.end

        if outcome is TokenOutcome.CORRECTED:
            corrections.append(
                CorrectionRecord(
                    original=token.clean,
                    corrected=core,
                    distance=best.distance,
                    score=best.score,
                    offset=token.offset + len(token.prefix),
                )
            )
        elif outcome is TokenOutcome.NO_MATCH:
            unresolved.append(token.clean)

    parts.append(text[last:])
    return CorrectionResult(text="".join(parts), corrections=corrections, unresolved=unresolved)


def correct_text(text: str, lexicon: Lexicon) -> str:
    """Return ``text`` with misspelled words replaced by their best correction.

    Never fails: in the worst case the input comes back unchanged.
    """
    return correct_text_with_records(text, lexicon).text
