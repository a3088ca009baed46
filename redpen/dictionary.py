"""
Word dictionary for spell checking.

The dictionary is a frozen set of lower-cased words. It is built once,
before any text is checked, and is then shared read-only by every worker.

Two sources are supported:
- A plain word list file (whitespace-separated words)
- pyspellchecker's bundled word-frequency list for a language
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from redpen.exceptions import DictionaryError

logger = logging.getLogger(__name__)

# Entries are separated by ASCII whitespace only; NBSP and other Unicode
# spaces stay inside an entry
DICTIONARY_WORD_PATTERN = re.compile(r"[^ \t\n\r\f\v]+")


# =============================================================================
# DICTIONARY
# =============================================================================


@dataclass(frozen=True)
class Dictionary:
    """
    Immutable set of known-correct words, stored lower-case.

    Lookups are case-insensitive. Instances can be shared across threads
    without locking and pickled into worker processes.

    Attributes:
        words: The lower-cased word set.
        source: Human-readable description of where the words came from.

    Example:
        >>> from redpen.dictionary import Dictionary
        >>> d = Dictionary.from_words(["Dog", "cat"])
        >>> "DOG" in d
        True
        >>> len(d)
        2
    """

    words: frozenset[str] = field(default_factory=frozenset)
    source: str = "<memory>"

    @classmethod
    def from_words(cls, words: Iterable[str], source: str = "<memory>") -> Dictionary:
        """Build a dictionary from an iterable of words (any case)."""
        return cls(words=frozenset(w.lower() for w in words), source=source)

    @classmethod
    def from_spellchecker(cls, language: str = "en") -> Dictionary:
        """
        Build a dictionary from pyspellchecker's bundled word list.

        Args:
            language: pyspellchecker language code ("en", "de", "fr", ...).

        Returns:
            Dictionary containing every word of the language's frequency list.
        """
        from spellchecker import SpellChecker

        try:
            spell = SpellChecker(language=language)
        except ValueError as e:
            raise DictionaryError(f"No built-in word list for language {language!r}") from e

        dictionary = cls.from_words(
            spell.word_frequency.keys(), source=f"pyspellchecker:{language}"
        )
        logger.info("Dictionary loaded: %d words from %s", len(dictionary), dictionary.source)
        return dictionary

    def contains(self, word: str) -> bool:
        """
        Check whether a word is known, ignoring case.

        Args:
            word: The word to check.

        Returns:
            True if the lower-cased word is in the dictionary.
        """
        return word.lower() in self.words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __bool__(self) -> bool:
        return bool(self.words)


# =============================================================================
# LOADING
# =============================================================================


def load_dictionary(path: str | Path) -> Dictionary:
    """
    Load a dictionary from a word list file.

    The file holds one word per ASCII-whitespace-separated token; line structure is
    irrelevant. Every word is lower-cased and duplicates collapse.

    A file that cannot be opened is reported through the log and yields an
    empty dictionary. Callers decide whether an empty dictionary is fatal.

    Args:
        path: Path to the word list.

    Returns:
        The loaded Dictionary (empty if the file could not be read).

    Example:
        >>> d = load_dictionary("/usr/share/dict/words")
        >>> "hello" in d
        True
    """
    path = Path(path)

    try:
        with open(path, encoding="utf-8", errors="surrogateescape") as f:
            words = frozenset(
                word.lower() for line in f for word in DICTIONARY_WORD_PATTERN.findall(line)
            )
    except OSError as e:
        logger.error("Cannot open dictionary file: %s (%s)", path, e)
        return Dictionary(source=str(path))

    logger.info("Dictionary loaded: %d words", len(words))
    return Dictionary(words=words, source=str(path))
