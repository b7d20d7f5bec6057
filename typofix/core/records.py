"""Data models describing what happened to each token."""

from enum import Enum

from pydantic import BaseModel, Field


class TokenOutcome(Enum):
    """What the engine did with a token."""

    SKIPPED = "skipped"  # too short, numeric, or nothing left after stripping
    KNOWN = "known"  # already a dictionary word
    CORRECTED = "corrected"  # replaced by a dictionary word
    NO_MATCH = "no_match"  # unknown, and nothing within the edit budget


class CorrectionRecord(BaseModel):
    """A single replacement made in the text."""

    original: str
    corrected: str
    distance: int
    score: int
    offset: int


class CorrectionResult(BaseModel):
    """Corrected text plus the details of every replacement."""

    text: str
    corrections: list[CorrectionRecord] = Field(default_factory=list)
    unresolved: list[str] = Field(default_factory=list)
