"""Type definitions for TypoFix."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Candidate:
    """A dictionary word proposed as a correction.

    Attributes:
        word: The proposed word
        distance: Edit distance at which it was found (1 or 2)
        score: Higher is better; only compared within the same distance
        order: Discovery index, the final tie-break
    """

    word: str
    distance: int
    score: int
    order: int = 0
