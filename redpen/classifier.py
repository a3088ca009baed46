"""
Word validity classification.

Decides whether a single word is spelled correctly. Plain dictionary
membership is extended by a fixed cascade of heuristics, each aimed at a
common class of false positives:

- Numbers ("3.14", "-5", "1,000")
- Decade notation ("1960s", "1960-70s")
- Letter/number compounds ("mid-1970s", "type-2") vs. garbage ("p34r")
- Hyphenated compounds ("well-known")
- Possessives ("dog's", "dogs'")
- Contractions ("don't", "we're", "won't")

The rules run in a fixed order and the first one that applies decides.
No morphological analysis is attempted beyond these rules.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum

from redpen.dictionary import Dictionary

# =============================================================================
# CONSTANTS
# =============================================================================

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)

# Characters allowed in a number besides digits
NUMBER_PUNCTUATION = frozenset(",.+-")

# Contraction endings, tried in this order
CONTRACTION_SUFFIXES = ("n't", "'t", "'re", "'ve", "'ll", "'d", "'m", "'s")

# Contraction stems that are not words on their own ("won't" -> "won")
IRREGULAR_CONTRACTION_STEMS = frozenset(
    {
        "won",
        "can",
        "don",
        "doesn",
        "didn",
        "shouldn",
        "wouldn",
        "couldn",
        "isn",
        "aren",
        "wasn",
        "weren",
        "hasn",
        "haven",
        "hadn",
    }
)


# =============================================================================
# DATA STRUCTURES
# =============================================================================


class Rule(str, Enum):
    """The rule that decided a verdict."""

    EMPTY = "empty"
    NUMERIC = "numeric"
    DECADE = "decade"
    MIXED_COMPOUND = "mixed_compound"
    MIXED_REJECTED = "mixed_rejected"
    DICTIONARY = "dictionary"
    COMPOUND = "compound"
    POSSESSIVE = "possessive"
    CONTRACTION = "contraction"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Verdict:
    """Validity of a word and the rule that decided it."""

    valid: bool
    rule: Rule


# =============================================================================
# CHARACTER HELPERS
# =============================================================================


def has_letters(text: str) -> bool:
    return any(c in LETTERS for c in text)


def has_digits(text: str) -> bool:
    return any(c in DIGITS for c in text)


def is_number(word: str) -> bool:
    """
    Check if a word is a number.

    Accepts digits mixed with commas, periods and signs, as long as there is
    at least one digit: "42", "1,234.5", "-5", "+3.0".
    """
    if not has_digits(word):
        return False
    return all(c in DIGITS or c in NUMBER_PUNCTUATION for c in word)


def is_decade(word: str) -> bool:
    """
    Check for decade notation: digits followed by "s" ("1960s").

    Hyphens are allowed before the "s" as long as everything else is a
    digit ("1960-70s").
    """
    if len(word) < 2 or word[-1] != "s" or word[-2] not in DIGITS:
        return False
    head = word[:-1]
    return all(c in DIGITS or c == "-" for c in head)


# =============================================================================
# CLASSIFICATION
# =============================================================================


def classify_word(word: str, dictionary: Dictionary) -> Verdict:
    """
    Classify a word and report which rule decided.

    Args:
        word: The word, case preserved.
        dictionary: Known words.

    Returns:
        Verdict with the validity and the deciding Rule.

    Example:
        >>> d = Dictionary.from_words(["mid", "dog"])
        >>> classify_word("mid-1970s", d)
        Verdict(valid=True, rule=<Rule.MIXED_COMPOUND: 'mixed_compound'>)
        >>> classify_word("p34r", d).rule
        <Rule.MIXED_REJECTED: 'mixed_rejected'>
    """
    if not word:
        return Verdict(True, Rule.EMPTY)

    if is_number(word):
        return Verdict(True, Rule.NUMERIC)

    if is_decade(word):
        return Verdict(True, Rule.DECADE)

    # Letters and digits together are only allowed as "word-number"
    if has_letters(word) and has_digits(word):
        prefix, hyphen, rest = word.partition("-")
        if hyphen and dictionary.contains(prefix) and has_digits(rest):
            return Verdict(True, Rule.MIXED_COMPOUND)
        return Verdict(False, Rule.MIXED_REJECTED)

    if dictionary.contains(word):
        return Verdict(True, Rule.DICTIONARY)

    prefix, hyphen, rest = word.partition("-")
    if hyphen and prefix and rest:
        if dictionary.contains(prefix) and dictionary.contains(rest):
            return Verdict(True, Rule.COMPOUND)

    if len(word) > 2:
        if word.endswith("'s") and dictionary.contains(word[:-2]):
            return Verdict(True, Rule.POSSESSIVE)
        if word.endswith("s'") and (
            dictionary.contains(word[:-1]) or dictionary.contains(word[:-2])
        ):
            return Verdict(True, Rule.POSSESSIVE)

    if "'" in word and _is_contraction(word, dictionary):
        return Verdict(True, Rule.CONTRACTION)

    return Verdict(False, Rule.UNKNOWN)


def _is_contraction(word: str, dictionary: Dictionary) -> bool:
    """Check a word with an apostrophe against the known contraction endings."""
    lowered = word.lower()
    for suffix in CONTRACTION_SUFFIXES:
        if len(word) > len(suffix) and lowered.endswith(suffix):
            stem = word[: word.index("'")]
            if dictionary.contains(stem) or stem.lower() in IRREGULAR_CONTRACTION_STEMS:
                return True
    return False


def is_word_valid(word: str, dictionary: Dictionary) -> bool:
    """
    Check if a word is spelled correctly.

    Args:
        word: The word, case preserved.
        dictionary: Known words.

    Returns:
        True if the word is valid.

    Example:
        >>> d = Dictionary.from_words(["dog", "well", "known"])
        >>> is_word_valid("dogs'", d), is_word_valid("well-known", d)
        (True, True)
        >>> is_word_valid("p34r", d)
        False
    """
    return classify_word(word, dictionary).valid
