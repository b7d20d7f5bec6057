"""Prefix-tree dictionary."""

from enum import Enum

from typofix.core.errors import FrozenDictionaryError
from typofix.utils.constants import Constants


class NodeStorage(Enum):
    """How a node stores its children."""

    SPARSE = "sparse"  # dict keyed by character, any Unicode
    DENSE = "dense"  # fixed 26-slot list, lowercase a-z only


_ALPHABET_SIZE = len(Constants.ALPHABET)
_ORD_A = ord("a")


def _dense_slot(ch: str) -> int:
    """Return the list slot of a lowercase ASCII letter."""
    slot = ord(ch) - _ORD_A
    if not 0 <= slot < _ALPHABET_SIZE:
        raise ValueError(f"Character {ch!r} is outside the dense alphabet a-z")
    return slot


class DictionaryNode:
    """A single node of the prefix tree.

    Attributes:
        children: Mapping of character to child node (dict or fixed list)
        word_end: True if the path to this node spells an inserted word
    """

    __slots__ = ("children", "word_end")

    def __init__(self, storage: NodeStorage = NodeStorage.SPARSE) -> None:
        self.children: dict[str, "DictionaryNode"] | list["DictionaryNode | None"]
        if storage is NodeStorage.DENSE:
            self.children = [None] * _ALPHABET_SIZE
        else:
            self.children = {}
        self.word_end = False


class Dictionary:
    """Exact-membership word dictionary backed by a prefix tree.

    Words are inserted once at startup and the dictionary is then frozen.
    After ``freeze()`` the tree is never mutated again, so ``contains`` can be
    called from any number of threads or processes without locking.

    The dictionary never normalizes: callers lowercase words before inserting
    and before looking them up.
    """

    def __init__(self, storage: NodeStorage | str = NodeStorage.SPARSE) -> None:
        self.storage = NodeStorage(storage)
        self.root = DictionaryNode(self.storage)
        self._size = 0
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Forbid further insertions."""
        self._frozen = True

    def insert(self, word: str) -> None:
        """Insert a lowercase word, creating missing nodes along its path.

        Raises:
            FrozenDictionaryError: If the dictionary has been frozen
            ValueError: If the word is empty, or contains a character the
                dense storage cannot hold
        """
        if self._frozen:
            raise FrozenDictionaryError(f"Cannot insert '{word}' into a frozen dictionary")
        if not word:
            raise ValueError("Cannot insert an empty word")

        node = self.root
        if self.storage is NodeStorage.DENSE:
            # Validate first so a bad word leaves no partial path behind
            slots = [_dense_slot(ch) for ch in word]
            for slot in slots:
                child = node.children[slot]
                if child is None:
                    child = DictionaryNode(self.storage)
                    node.children[slot] = child
                node = child
        else:
            for ch in word:
                child = node.children.get(ch)
                if child is None:
                    child = DictionaryNode(self.storage)
                    node.children[ch] = child
                node = child

        if not node.word_end:
            node.word_end = True
            self._size += 1

    def _find_node(self, word: str) -> DictionaryNode | None:
        node = self.root
        if self.storage is NodeStorage.DENSE:
            for ch in word:
                slot = ord(ch) - _ORD_A
                if not 0 <= slot < _ALPHABET_SIZE:
                    return None
                node = node.children[slot]
                if node is None:
                    return None
        else:
            for ch in word:
                node = node.children.get(ch)
                if node is None:
                    return None
        return node

    def contains(self, word: str) -> bool:
        """Return True iff exactly this spelling was inserted."""
        if not word:
            return False
        node = self._find_node(word)
        return node is not None and node.word_end

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return self._size
