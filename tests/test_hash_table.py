import pytest

from kurdish_vocab.config import VocabConfig
from kurdish_vocab.core.hash_table import NOT_FOUND, WordHashTable, hash_string
from kurdish_vocab.core.registry import build_lookup_index
from kurdish_vocab.data import WORDS
from kurdish_vocab.models.word import Word


def test_hash_string_matches_polynomial_over_bytes():
    # "ab" -> 97 * 31 + 98
    assert hash_string("ab", 101) == (97 * 31 + 98) % 101
    assert hash_string("", 101) == 0


def test_hash_string_wraps_at_64_bits():
    key = "xoshawistim" * 4
    expected = 0
    for byte in key.encode("utf-8"):
        expected = (expected * 31 + byte) % (1 << 64)
    assert hash_string(key, 101) == expected % 101


def test_find_returns_every_builtin_position():
    table = build_lookup_index(WORDS, VocabConfig())
    for index, word in enumerate(WORDS):
        assert table.find(word.kurdish) == index
    assert len(table) == len(WORDS)


def test_find_is_exact_match_only():
    table = build_lookup_index(WORDS, VocabConfig())
    assert table.find("Slaw") == NOT_FOUND
    assert table.find(" slaw") == NOT_FOUND
    assert table.find("roj") == NOT_FOUND
    assert table.find("") == NOT_FOUND
    assert "slaw" in table
    assert "Slaw" not in table


def test_duplicate_key_last_insert_wins():
    words = [Word("nan", "bread", "food"), Word("aw", "water", "food"), Word("nan", "naan", "food")]
    table = build_lookup_index(words, VocabConfig())
    assert table.find("nan") == 2
    assert table.find("aw") == 1
    assert len(table) == 2


def test_colliding_keys_share_a_bucket():
    table = WordHashTable(capacity=1)
    table.insert("slaw", 0)
    table.insert("choni", 1)
    assert len(table.buckets[0]) == 2
    assert table.find("slaw") == 0
    assert table.find("choni") == 1
    assert table.find("mast") == NOT_FOUND


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        WordHashTable(capacity=0)


def test_undecodable_input_bytes_hash_as_raw_bytes():
    # 非 UTF-8 终端把 0xff 读成 "\udcff"
    key = "\udcffslaw"
    expected = 0
    for byte in b"\xffslaw":
        expected = (expected * 31 + byte) % (1 << 64)
    assert hash_string(key, 101) == expected % 101
    table = build_lookup_index(WORDS, VocabConfig())
    assert table.find(key) == NOT_FOUND
    assert key not in table
