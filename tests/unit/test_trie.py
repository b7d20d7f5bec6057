"""Unit tests for the prefix-tree dictionary."""

import pytest

from typofix.core import Dictionary, FrozenDictionaryError, NodeStorage

WORDS = ["hello", "help", "helm", "he", "world"]


@pytest.fixture(params=["sparse", "dense"])
def dictionary(request) -> Dictionary:
    d = Dictionary(request.param)
    for word in WORDS:
        d.insert(word)
    d.freeze()
    return d


class TestMembership:
    """Exact membership behaviour, for both storage layouts."""

    def test_contains_every_inserted_word(self, dictionary: Dictionary) -> None:
        """Every inserted word is found."""
        assert all(dictionary.contains(word) for word in WORDS)

    def test_prefix_of_word_is_not_a_word(self, dictionary: Dictionary) -> None:
        """A path that was never marked as a word end is not a member."""
        assert not dictionary.contains("hel")

    def test_extension_of_word_is_not_a_word(self, dictionary: Dictionary) -> None:
        """Walking past the end of an inserted word finds nothing."""
        assert not dictionary.contains("helpers")

    def test_empty_string_is_not_a_word(self, dictionary: Dictionary) -> None:
        """The root node never counts as a word."""
        assert not dictionary.contains("")

    def test_lookup_is_case_sensitive(self, dictionary: Dictionary) -> None:
        """The dictionary never normalizes; uppercase spellings are absent."""
        assert not dictionary.contains("Hello")

    def test_in_operator_matches_contains(self, dictionary: Dictionary) -> None:
        """``in`` behaves like contains."""
        assert "world" in dictionary

    def test_in_operator_rejects_non_strings(self, dictionary: Dictionary) -> None:
        """Non-string values are never members."""
        assert 42 not in dictionary

    def test_len_counts_distinct_words(self) -> None:
        """Inserting the same word twice counts it once."""
        d = Dictionary()
        d.insert("cat")
        d.insert("cat")
        d.insert("cats")
        assert len(d) == 2


class TestInsertion:
    """Insertion rules."""

    def test_insert_after_freeze_raises(self) -> None:
        """A frozen dictionary refuses new words."""
        d = Dictionary()
        d.insert("cat")
        d.freeze()
        with pytest.raises(FrozenDictionaryError):
            d.insert("dog")

    def test_empty_word_is_rejected(self) -> None:
        """Empty words cannot be inserted."""
        with pytest.raises(ValueError):
            Dictionary().insert("")

    def test_sparse_storage_accepts_unicode(self) -> None:
        """Sparse nodes hold any character."""
        d = Dictionary(NodeStorage.SPARSE)
        d.insert("café")
        assert d.contains("café")

    def test_dense_storage_rejects_non_ascii_letters(self) -> None:
        """Dense nodes only have slots for a-z."""
        with pytest.raises(ValueError):
            Dictionary(NodeStorage.DENSE).insert("café")

    def test_dense_rejection_leaves_no_partial_word(self) -> None:
        """A rejected word does not leave its valid prefix behind as nodes."""
        d = Dictionary(NodeStorage.DENSE)
        with pytest.raises(ValueError):
            d.insert("ab1")
        assert d.root.children[0] is None

    def test_dense_lookup_of_foreign_characters_is_false(self) -> None:
        """Looking up characters outside a-z in dense storage returns False."""
        d = Dictionary(NodeStorage.DENSE)
        d.insert("cafe")
        assert not d.contains("café")

    def test_storage_accepts_string_name(self) -> None:
        """Storage can be given by its configuration name."""
        assert Dictionary("dense").storage is NodeStorage.DENSE
