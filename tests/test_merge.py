"""Tests for the sliding-window merge."""

from doc_chunker.config import SplitterConfig
from doc_chunker.length import approximate_token_length
from doc_chunker.splitter.merge import join_splits, merge_splits


def test_single_characters_with_overlap():
    """Ten letters, size 4, overlap 1: each chunk repeats the previous last letter."""
    config = SplitterConfig(chunk_size=4, chunk_overlap=1)

    chunks = merge_splits(list("ABCDEFGHIJ"), "", config)

    assert chunks == ["ABCD", "DEFG", "GHIJ"]


def test_empty_input():
    assert merge_splits([], "\n\n", SplitterConfig(chunk_size=10, chunk_overlap=2)) == []


def test_whitespace_only_chunks_are_dropped():
    config = SplitterConfig(chunk_size=10, chunk_overlap=0)

    assert merge_splits(["  ", " "], " ", config) == []


def test_chunks_are_stripped():
    config = SplitterConfig(chunk_size=20, chunk_overlap=0)

    assert merge_splits([" lead", "trail "], "-", config) == ["lead-trail"]


def test_overlap_is_fragment_granular():
    """
    A fragment larger than chunk_overlap is never carried over.

    Accepted approximation: the repeated tail is whole fragments only, so it
    can be shorter than chunk_overlap (here: nothing at all).
    """
    config = SplitterConfig(chunk_size=9, chunk_overlap=3)

    chunks = merge_splits(["aaaa", "bbbb", "cccc"], " ", config)

    assert chunks == ["aaaa bbbb", "cccc"]


def test_overlap_tail_seeds_next_chunk():
    config = SplitterConfig(chunk_size=9, chunk_overlap=4)

    chunks = merge_splits(["aaaa", "bbbb", "cccc"], " ", config)

    assert chunks == ["aaaa bbbb", "bbbb cccc"]


def test_retained_tail_never_pushes_chunk_over_limit():
    """The tail is shortened further when it would not leave room for the next fragment."""
    config = SplitterConfig(chunk_size=10, chunk_overlap=5)

    chunks = merge_splits(["aaaaa", "bbbb", "cccccccc"], "", config)

    assert chunks == ["aaaaabbbb", "cccccccc"]
    assert all(len(chunk) <= 10 for chunk in chunks)


def test_token_measure_bounds_chunks():
    config = SplitterConfig(chunk_size=3, chunk_overlap=1, length_function=approximate_token_length)
    words = ["word"] * 12

    chunks = merge_splits(words, " ", config)

    assert len(chunks) > 1
    assert all(approximate_token_length(chunk) <= 3 for chunk in chunks)


def test_join_splits():
    assert join_splits(["a", "b", "c"], "-") == "a-b-c"
    assert join_splits([" ", ""], "") is None
