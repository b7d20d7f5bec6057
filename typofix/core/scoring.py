"""Candidate scoring and selection."""

from collections.abc import Iterable

from typofix.core.config import ScoringWeights
from typofix.core.frequency import FrequencyTable
from typofix.core.types import Candidate

# Closed-class and very frequent words that get a flat bonus
COMMON_WORDS = frozenset(
    {
        "the", "is", "a", "an", "and", "are", "as", "at", "be", "but",
        "by", "for", "if", "in", "into", "it", "no", "not", "of", "on",
        "or", "such", "that", "their", "then", "there", "these", "they", "this", "to",
        "was", "will", "with", "he", "she", "some", "test", "have", "has", "had",
        "do", "does", "did", "can", "could", "would", "should", "may", "might",
        "sentence", "typo", "check", "spell", "checker",
    }
)  # fmt: skip


def score(
    word: str,
    original_length: int,
    frequencies: FrequencyTable,
    weights: ScoringWeights | None = None,
) -> int:
    """Score a candidate word; higher is better.

    Args:
        word: Candidate word
        original_length: Length the candidate is compared against
        frequencies: Frequency table (absent words weigh the default minimum)
        weights: Scoring weights (defaults if None)

    Returns:
        Integer score
    """
    weights = weights or ScoringWeights()
    result = frequencies.weight(word)

    length_diff = abs(len(word) - original_length)
    if length_diff == 0:
        result += weights.same_length_bonus
    else:
        result -= weights.length_penalty * length_diff

    # Shorter wins between otherwise equal words
    result -= len(word)

    if word in COMMON_WORDS:
        result += weights.common_word_bonus

    return result


def ranking_key(candidate: Candidate) -> tuple[int, int, int]:
    """Sort key: closer edits first, then higher score, then first discovered."""
    return (candidate.distance, -candidate.score, candidate.order)


def select(candidates: Iterable[Candidate]) -> Candidate | None:
    """Pick the best candidate, or None when there is nothing to choose from."""
    return min(candidates, key=ranking_key, default=None)
