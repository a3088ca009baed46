"""
Token scanning.

Splits text into maximal runs of word characters (ASCII letters and
digits, apostrophe, hyphen) and reports each run with its absolute
offset. Runs made only of apostrophes and hyphens are not words.
"""

from __future__ import annotations

import re
import string
from collections.abc import Iterator

from redpen.classifier import is_word_valid
from redpen.dictionary import Dictionary
from redpen.models import Token

# =============================================================================
# CONSTANTS
# =============================================================================

WORD_CHARS = frozenset(string.ascii_letters + string.digits + "'-")

# Maximal run of word characters
WORD_RUN_PATTERN = re.compile(r"[A-Za-z0-9'\-]+")

# A run is a word only if it holds a letter or a digit
ALNUM_PATTERN = re.compile(r"[A-Za-z0-9]")


def is_word_char(char: str) -> bool:
    """Return True if the character can be part of a word."""
    return char in WORD_CHARS


# =============================================================================
# SCANNING
# =============================================================================


def scan_words(text: str, base_offset: int = 0) -> Iterator[tuple[int, str]]:
    """
    Yield candidate words in a span of text.

    Args:
        text: The span to scan.
        base_offset: Offset of the span within the full text. Added to every
            reported position.

    Yields:
        (start, word) pairs in increasing order of start. A run that reaches
        the end of the span is included.

    Example:
        >>> list(scan_words("it's 42 -- ok", base_offset=10))
        [(10, "it's"), (15, '42'), (21, 'ok')]
    """
    for match in WORD_RUN_PATTERN.finditer(text):
        word = match.group()
        if ALNUM_PATTERN.search(word):
            yield base_offset + match.start(), word


def scan_tokens(text: str, dictionary: Dictionary, base_offset: int = 0) -> list[Token]:
    """
    Scan a span and classify every word in it.

    Args:
        text: The span to scan.
        dictionary: Dictionary used for classification.
        base_offset: Offset of the span within the full text.

    Returns:
        Tokens ordered by start offset.
    """
    return [
        Token(start=start, length=len(word), is_valid=is_word_valid(word, dictionary))
        for start, word in scan_words(text, base_offset)
    ]
