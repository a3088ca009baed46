"""
Unit tests for token scanning (redpen/scanner.py).
"""

import pytest

from redpen.models import Token
from redpen.scanner import is_word_char, scan_tokens, scan_words


class TestIsWordChar:
    """Tests for the word-character predicate."""

    @pytest.mark.parametrize("char", ["a", "Z", "0", "9", "'", "-"])
    def test_word_chars(self, char):
        assert is_word_char(char)

    @pytest.mark.parametrize("char", [" ", "\n", ".", ",", "&", "_", "é", "’"])
    def test_delimiters(self, char):
        assert not is_word_char(char)


class TestScanWords:
    """Tests for scan_words."""

    def test_simple_sentence(self):
        assert list(scan_words("the cat sat")) == [(0, "the"), (4, "cat"), (8, "sat")]

    def test_base_offset_added(self):
        assert list(scan_words("cat sat", base_offset=100)) == [(100, "cat"), (104, "sat")]

    def test_word_at_end_is_flushed(self):
        assert list(scan_words("end")) == [(0, "end")]

    def test_apostrophes_and_hyphens_stay_in_word(self):
        words = [w for _, w in scan_words("o'clock well-known dogs'")]
        assert words == ["o'clock", "well-known", "dogs'"]

    def test_punctuation_only_runs_skipped(self):
        assert list(scan_words("a --- b '' c")) == [(0, "a"), (6, "b"), (11, "c")]

    def test_numbers_are_candidates(self):
        assert list(scan_words("in 1999, 42")) == [(0, "in"), (3, "1999"), (9, "42")]

    def test_number_punctuation_splits(self):
        """Commas and periods are delimiters for the scanner."""
        words = [w for _, w in scan_words("1,234.5")]
        assert words == ["1", "234", "5"]

    def test_non_ascii_letters_delimit(self):
        words = [w for _, w in scan_words("café au lait")]
        assert words == ["caf", "au", "lait"]

    def test_empty_text(self):
        assert list(scan_words("")) == []

    def test_whitespace_only(self):
        assert list(scan_words(" \n\t ")) == []

    def test_is_lazy(self):
        words = scan_words("one two")
        assert next(words) == (0, "one")

    def test_offsets_strictly_increasing(self):
        text = "It's a well-known fact -- 1960s' dogs' o'clock, mid-1970s!"
        starts = [s for s, _ in scan_words(text)]
        assert starts == sorted(set(starts))


class TestScanTokens:
    """Tests for scan_tokens."""

    def test_classifies_words(self, dictionary):
        tokens = scan_tokens("the dg sat", dictionary)
        assert tokens == [
            Token(start=0, length=3, is_valid=True),
            Token(start=4, length=2, is_valid=False),
            Token(start=7, length=3, is_valid=True),
        ]

    def test_tokens_do_not_overlap(self, dictionary):
        text = "the quick brown fox jumps over the lazy dog's mat"
        tokens = scan_tokens(text, dictionary)
        for before, after in zip(tokens, tokens[1:]):
            assert before.end < after.start

    def test_token_text(self, dictionary):
        text = "hello wrld"
        tokens = scan_tokens(text, dictionary, base_offset=0)
        assert [t.text_in(text) for t in tokens] == ["hello", "wrld"]
