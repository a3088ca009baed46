"""
redpen: highlight misspelled words as HTML.

This library checks every word of a text against a plain word list,
extended by heuristics for numbers, decades, hyphenated compounds,
possessives and contractions, and renders the text as HTML with
misspelled words marked in red. Large texts are checked in parallel.

Example:
    >>> import redpen
    >>> pipeline = redpen.create_pipeline("words.txt")
    >>> result = pipeline.check("The quik brown fox")
    >>> result.misspelled_words
    ['quik']
    >>> html = pipeline.render(result)

Command line:
    redpen words.txt < input.txt > output.html
"""

__version__ = "0.1.0"

from redpen.classifier import Rule, Verdict, classify_word, is_word_valid  # noqa: E402
from redpen.config import CheckerConfig  # noqa: E402
from redpen.dictionary import Dictionary, load_dictionary  # noqa: E402
from redpen.exceptions import (  # noqa: E402
    ConfigurationError,
    DictionaryError,
    RedpenError,
)
from redpen.models import CheckResult, CheckStats, Chunk, Token  # noqa: E402
from redpen.parallel import check_tokens, split_chunks  # noqa: E402
from redpen.pipeline import SpellCheckPipeline, create_pipeline  # noqa: E402
from redpen.render import render_html  # noqa: E402
from redpen.scanner import scan_tokens, scan_words  # noqa: E402

__all__ = [
    # Main API
    "create_pipeline",
    "SpellCheckPipeline",
    "check_tokens",
    "render_html",
    # Configuration
    "CheckerConfig",
    # Dictionary
    "Dictionary",
    "load_dictionary",
    # Classification
    "classify_word",
    "is_word_valid",
    "Rule",
    "Verdict",
    # Scanning
    "scan_words",
    "scan_tokens",
    "split_chunks",
    # Results
    "Token",
    "Chunk",
    "CheckResult",
    "CheckStats",
    # Exceptions
    "RedpenError",
    "DictionaryError",
    "ConfigurationError",
]
