"""Tokenization and case handling for text-level correction."""

import unicodedata
from dataclasses import dataclass

# Kept inside words rather than splitting them
APOSTROPHES = frozenset("'’")


def is_separator(ch: str) -> bool:
    """Whitespace and punctuation separate tokens; apostrophes do not."""
    if ch in APOSTROPHES:
        return False
    return ch.isspace() or unicodedata.category(ch).startswith("P")


def _is_word_char(ch: str) -> bool:
    return ch.isalnum()


def is_all_uppercase(s: str) -> bool:
    """True if no cased letter in ``s`` is lowercase."""
    return all(not ch.isalpha() or ch.isupper() for ch in s)


@dataclass(frozen=True)
class Token:
    """A word-like slice of the input text, split into affixes and core.

    Attributes:
        text: The raw slice as it appears in the input
        offset: Index of the slice's first character in the input
        prefix: Leading non-alphanumeric characters
        suffix: Trailing non-alphanumeric characters (apostrophes stay in the core)
        clean: What remains between prefix and suffix
    """

    text: str
    offset: int
    prefix: str
    suffix: str
    clean: str

    @property
    def end(self) -> int:
        return self.offset + len(self.text)

    @property
    def is_all_caps(self) -> bool:
        return is_all_uppercase(self.clean)

    @property
    def is_capitalized(self) -> bool:
        return bool(self.clean) and self.clean[0].isupper()

    @property
    def is_numeric(self) -> bool:
        return self.clean.isdecimal()


def split_affixes(raw: str, offset: int = 0) -> Token:
    """Split a raw token into prefix, clean core and suffix."""
    start = 0
    while start < len(raw) and not _is_word_char(raw[start]):
        start += 1

    end = len(raw)
    while end > start and not _is_word_char(raw[end - 1]) and raw[end - 1] not in APOSTROPHES:
        end -= 1

    return Token(
        text=raw,
        offset=offset,
        prefix=raw[:start],
        suffix=raw[end:],
        clean=raw[start:end],
    )


def tokenize(text: str) -> list[Token]:
    """Split text into tokens, recording where each one starts."""
    tokens = []
    start = None
    for i, ch in enumerate(text):
        if is_separator(ch):
            if start is not None:
                tokens.append(split_affixes(text[start:i], start))
                start = None
        elif start is None:
            start = i
    if start is not None:
        tokens.append(split_affixes(text[start:], start))
    return tokens


def apply_case(word: str, all_caps: bool, capitalized: bool) -> str:
    """Re-apply a recorded case pattern to a lowercase word."""
    if all_caps:
        return word.upper()
    if capitalized:
        return word[:1].upper() + word[1:]
    return word
