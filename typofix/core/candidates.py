"""Bounded edit-distance candidate generation."""

from loguru import logger

from typofix.core.config import EngineConfig
from typofix.core.frequency import FrequencyTable
from typofix.core.scoring import score
from typofix.core.trie import Dictionary
from typofix.core.types import Candidate
from typofix.utils.constants import Constants


def generate_deletions(word: str) -> list[str]:
    """Remove the character at each position."""
    return [word[:i] + word[i + 1 :] for i in range(len(word))]


def generate_transpositions(word: str) -> list[str]:
    """Swap each pair of adjacent characters."""
    return [word[:i] + word[i + 1] + word[i] + word[i + 2 :] for i in range(len(word) - 1)]


def generate_substitutions(word: str, alphabet: str = Constants.ALPHABET) -> list[str]:
    """Replace the character at each position with every other alphabet letter."""
    typos = []
    for i, original in enumerate(word):
        for c in alphabet:
            if c != original:
                typos.append(word[:i] + c + word[i + 1 :])
    return typos


def generate_insertions(word: str, alphabet: str = Constants.ALPHABET) -> list[str]:
    """Insert every alphabet letter at each position, including both ends."""
    return [word[:i] + c + word[i:] for i in range(len(word) + 1) for c in alphabet]


def generate_edits1(word: str, alphabet: str = Constants.ALPHABET) -> list[str]:
    """All distance-1 edits in enumeration order.

    Order: deletions, transpositions, substitutions, insertions.
    """
    return (
        generate_deletions(word)
        + generate_transpositions(word)
        + generate_substitutions(word, alphabet)
        + generate_insertions(word, alphabet)
    )


def generate_seed_edits(word: str, stride: int) -> list[str]:
    """Raw distance-1 strings that seed the second edit pass.

    Insertions are left out and substitutions use every ``stride``-th letter
    to keep the second pass affordable.
    """
    return (
        generate_deletions(word)
        + generate_transpositions(word)
        + generate_substitutions(word, Constants.ALPHABET[::stride])
    )


def _second_pass_edits(seed: str, alphabet: str):
    """Yield deletions and thinned substitutions of ``seed``, position by position."""
    for i in range(len(seed)):
        yield seed[:i] + seed[i + 1 :]
        for c in alphabet:
            yield seed[:i] + c + seed[i + 1 :]


class _CandidateCollector:
    """Accumulates unique in-dictionary edits in discovery order."""

    def __init__(
        self,
        word: str,
        dictionary: Dictionary,
        frequencies: FrequencyTable,
        config: EngineConfig,
    ) -> None:
        self.word = word
        self.dictionary = dictionary
        self.frequencies = frequencies
        self.config = config
        self.candidates: list[Candidate] = []
        self.seen: set[str] = set()

    def offer(self, edit: str, distance: int) -> None:
        if edit == self.word or edit in self.seen or not self.dictionary.contains(edit):
            return
        self.seen.add(edit)
        self.candidates.append(
            Candidate(
                word=edit,
                distance=distance,
                score=score(edit, len(self.word), self.frequencies, self.config.scoring),
                order=len(self.candidates),
            )
        )

    @property
    def full(self) -> bool:
        return len(self.candidates) >= self.config.max_candidates


def generate_candidates(
    word: str,
    dictionary: Dictionary,
    frequencies: FrequencyTable,
    config: EngineConfig | None = None,
) -> list[Candidate]:
    """Find dictionary words within the configured edit distance of ``word``.

    Distance 1 is searched exhaustively. If it finds more than half the
    candidate cap, only the best-scoring half is kept and the search ends.
    Distance 2 is searched only when distance 1 found fewer than
    ``min_useful_candidates`` words, and stops as soon as the cap is reached.

    Args:
        word: Lowercase query word
        dictionary: Frozen dictionary
        frequencies: Weights used for scoring
        config: Engine configuration (defaults if None)

    Returns:
        Candidates in discovery order; empty if nothing is within reach
    """
    config = config or EngineConfig()
    if not word:
        return []

    collector = _CandidateCollector(word, dictionary, frequencies, config)

    for edit in generate_edits1(word):
        collector.offer(edit, 1)

    half_cap = max(1, config.max_candidates // 2)
    if len(collector.candidates) > half_cap:
        best = sorted(collector.candidates, key=lambda c: (-c.score, c.order))[:half_cap]
        logger.debug(
            f"Trimmed {len(collector.candidates)} distance-1 candidates "
            f"for '{word}' to {half_cap}"
        )
        return sorted(best, key=lambda c: c.order)

    if (
        config.max_edit_distance < 2
        or len(collector.candidates) >= config.min_useful_candidates
        or collector.full
    ):
        return collector.candidates

    second_alphabet = Constants.ALPHABET[:: config.second_pass_stride]
    for seed in generate_seed_edits(word, config.first_pass_stride):
        if seed in collector.seen:
            continue
        for edit in _second_pass_edits(seed, second_alphabet):
            collector.offer(edit, 2)
            if collector.full:
                return collector.candidates

    return collector.candidates
