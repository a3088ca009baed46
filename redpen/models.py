"""
Data models for redpen.

These models carry the output of a spell-check run from the
coordinator to the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Token:
    """A classified word in the checked text."""

    start: int  # Offset into the original text
    length: int
    is_valid: bool

    @property
    def end(self) -> int:
        """Offset one past the last character of the token."""
        return self.start + self.length

    def text_in(self, text: str) -> str:
        """Return the token's characters from the text it was scanned from."""
        return text[self.start : self.end]


@dataclass(frozen=True)
class Chunk:
    """
    A contiguous slice of the input assigned to one worker.

    Chunk boundaries never fall inside a run of word characters, so
    every token lies wholly within exactly one chunk.
    """

    index: int
    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start


@dataclass
class CheckStats:
    """Statistics for a spell-check run."""

    words_checked: int = 0
    errors_detected: int = 0
    chunks: int = 0
    workers: int = 1
    processing_time_ms: float = 0.0


@dataclass
class CheckResult:
    """Result of checking one text."""

    text: str
    tokens: list[Token] = field(default_factory=list)
    stats: CheckStats = field(default_factory=CheckStats)

    @property
    def invalid_tokens(self) -> list[Token]:
        """Tokens classified as misspelled, in text order."""
        return [t for t in self.tokens if not t.is_valid]

    @property
    def misspelled_words(self) -> list[str]:
        """The misspelled words themselves, in text order (duplicates kept)."""
        return [t.text_in(self.text) for t in self.invalid_tokens]
