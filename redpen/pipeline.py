"""
Spell-check pipeline.

Wires the dictionary, the parallel scanner and the HTML renderer together:

1. Check: scan and classify every word (in parallel for large texts)
2. Render: produce HTML with misspelled words highlighted

Example:
    >>> from redpen.pipeline import create_pipeline
    >>> pipeline = create_pipeline("words.txt")
    >>> result = pipeline.check("The quik brown fox")
    >>> result.misspelled_words
    ['quik']
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from redpen.config import CheckerConfig
from redpen.dictionary import Dictionary, load_dictionary
from redpen.exceptions import DictionaryError
from redpen.models import CheckResult
from redpen.parallel import check_tokens_with_stats
from redpen.render import render_html

logger = logging.getLogger(__name__)


@dataclass
class SpellCheckPipeline:
    """
    Main spell-check pipeline.

    The dictionary must be non-empty; it is shared read-only by every
    check this pipeline runs.

    Attributes:
        dictionary: Known words.
        config: Parallelism and output settings.

    Raises:
        DictionaryError: If the dictionary is empty.
    """

    dictionary: Dictionary
    config: CheckerConfig = field(default_factory=CheckerConfig)

    def __post_init__(self) -> None:
        """Refuse to run without words to check against."""
        if not self.dictionary:
            raise DictionaryError(
                f"Dictionary is empty or could not be loaded: {self.dictionary.source}"
            )

    def check(self, text: str) -> CheckResult:
        """
        Classify every word of a text.

        Args:
            text: Text to check.

        Returns:
            CheckResult with ordered tokens and statistics.
        """
        if text is None:
            raise ValueError("Input text cannot be None")

        logger.info("Input size: %d characters", len(text))
        tokens, stats = check_tokens_with_stats(
            text,
            self.dictionary,
            workers=self.config.workers,
            threshold=self.config.parallel_threshold,
            executor=self.config.executor,
        )
        return CheckResult(text=text, tokens=tokens, stats=stats)

    def render(self, result: CheckResult) -> str:
        """Render a check result as an HTML document."""
        logger.info("Generating HTML...")
        return render_html(result.text, result.tokens, self.config.highlight_style)

    def process_text(self, text: str) -> str:
        """Check a text and return the highlighted HTML."""
        return self.render(self.check(text))

    def get_info(self) -> dict[str, Any]:
        """Get pipeline configuration information."""
        return {
            "dictionary_source": self.dictionary.source,
            "dictionary_size": len(self.dictionary),
            "workers": self.config.workers,
            "parallel_threshold": self.config.parallel_threshold,
            "executor": self.config.executor,
        }


def create_pipeline(
    dictionary_path: str | Path | None = None,
    config: CheckerConfig | None = None,
    builtin_language: str | None = None,
) -> SpellCheckPipeline:
    """
    Create a pipeline from a word list file or a built-in word list.

    Args:
        dictionary_path: Path to a whitespace-separated word list.
        config: Pipeline configuration (defaults if None).
        builtin_language: pyspellchecker language to use instead of a file.

    Returns:
        Configured SpellCheckPipeline.

    Raises:
        DictionaryError: If neither source is given, or the dictionary is empty.
    """
    if dictionary_path is not None:
        dictionary = load_dictionary(dictionary_path)
    elif builtin_language is not None:
        dictionary = Dictionary.from_spellchecker(builtin_language)
    else:
        raise DictionaryError("A dictionary path or a built-in language is required")

    return SpellCheckPipeline(dictionary=dictionary, config=config or CheckerConfig())
