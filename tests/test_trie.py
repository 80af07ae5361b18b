import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.trie import Trie

WORDS = ["a", "apple", "news", "not", "hello"]


@pytest.fixture
def trie():
    return Trie(WORDS)


@pytest.mark.parametrize("word", WORDS)
def test_inserted_words_present(trie, word):
    assert word in trie


@pytest.mark.parametrize("word", ["app", "ne", "hell", "apples", "b"])
def test_prefixes_and_strangers_absent(trie, word):
    assert word not in trie


def test_empty_word_only_after_insert(trie):
    assert "" not in trie
    trie.insert("")
    assert "" in trie


def test_insert_adds_prefix_word(trie):
    trie.insert("app")
    assert "app" in trie
    assert "appl" not in trie


def test_non_string_not_contained(trie):
    assert 42 not in trie


@given(st.sets(st.text(alphabet="abc", max_size=6)), st.text(alphabet="abc", max_size=6))
def test_membership_matches_set(words, probe):
    trie = Trie(words)
    assert (probe in trie) == (probe in words)