"""Word frequency weights used for scoring."""

from collections.abc import Iterator, Mapping

from typofix.utils.constants import Constants


class FrequencyTable(Mapping[str, int]):
    """Read-only mapping of word to integer weight.

    Unknown words weigh ``Constants.DEFAULT_WEIGHT`` rather than zero, so
    every dictionary word stays scorable. The table never affects membership.
    """

    def __init__(self, weights: Mapping[str, int] | None = None) -> None:
        self._weights: dict[str, int] = {}
        for word, weight in (weights or {}).items():
            if weight < 0:
                raise ValueError(f"Negative weight {weight} for '{word}'")
            self._weights[word] = int(weight)

    def weight(self, word: str) -> int:
        """Return the weight of a word, falling back to the default minimum."""
        return self._weights.get(word) or Constants.DEFAULT_WEIGHT

    def __getitem__(self, word: str) -> int:
        return self._weights[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._weights)

    def __len__(self) -> int:
        return len(self._weights)
