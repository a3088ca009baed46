"""
Unit tests for the word dictionary (redpen/dictionary.py).
"""

import logging

import pytest

from redpen.dictionary import Dictionary, load_dictionary
from redpen.exceptions import DictionaryError


class TestDictionary:
    """Tests for the Dictionary value object."""

    def test_words_are_lower_cased(self):
        d = Dictionary.from_words(["Hello", "WORLD"])
        assert d.words == frozenset({"hello", "world"})

    def test_lookup_ignores_case(self):
        d = Dictionary.from_words(["hello"])
        assert d.contains("HeLLo")
        assert "HELLO" in d
        assert "bye" not in d

    def test_non_string_not_contained(self):
        d = Dictionary.from_words(["1"])
        assert 1 not in d

    def test_duplicates_collapse(self):
        d = Dictionary.from_words(["cat", "Cat", "CAT"])
        assert len(d) == 1

    def test_empty_is_falsy(self):
        assert not Dictionary()
        assert Dictionary.from_words(["a"])

    def test_is_immutable(self):
        d = Dictionary.from_words(["a"])
        with pytest.raises(AttributeError):
            d.words = frozenset()

    def test_iteration(self):
        d = Dictionary.from_words(["b", "a"])
        assert sorted(d) == ["a", "b"]


class TestLoadDictionary:
    """Tests for loading word list files."""

    def test_load_file(self, dictionary_file, word_list):
        d = load_dictionary(dictionary_file)
        assert len(d) == len({w.lower() for w in word_list})
        assert "fox" in d
        assert d.source == str(dictionary_file)

    def test_any_whitespace_separates_words(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("Alpha beta\tgamma\n\n  DELTA\r\nepsilon")
        d = load_dictionary(path)
        assert d.words == frozenset({"alpha", "beta", "gamma", "delta", "epsilon"})

    def test_unicode_spaces_do_not_separate_words(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("New\xa0York a\u2028b\nc\x85d\n", encoding="utf-8")
        d = load_dictionary(path)
        assert d.words == frozenset({"new\xa0york", "a\u2028b", "c\x85d"})

    def test_missing_file_yields_empty_dictionary(self, tmp_path, caplog):
        path = tmp_path / "missing.txt"
        with caplog.at_level(logging.ERROR, logger="redpen.dictionary"):
            d = load_dictionary(path)
        assert len(d) == 0
        assert "Cannot open dictionary file" in caplog.text

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("")
        assert not load_dictionary(path)

    def test_logs_size(self, dictionary_file, caplog):
        with caplog.at_level(logging.INFO, logger="redpen.dictionary"):
            d = load_dictionary(dictionary_file)
        assert f"Dictionary loaded: {len(d)} words" in caplog.text


class TestBuiltinDictionary:
    """Tests for the pyspellchecker-backed word list."""

    def test_english_word_list(self):
        d = Dictionary.from_spellchecker("en")
        assert len(d) > 10_000
        assert "the" in d
        assert "philosophy" in d
        assert d.source == "pyspellchecker:en"

    def test_unknown_language(self):
        with pytest.raises(DictionaryError):
            Dictionary.from_spellchecker("xx")
