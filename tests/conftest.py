"""
Pytest configuration and fixtures for redpen tests.
"""

from pathlib import Path

import pytest

WORDS = [
    "the",
    "a",
    "cat",
    "dog",
    "dogs",
    "sat",
    "on",
    "mat",
    "well",
    "known",
    "mid",
    "quick",
    "brown",
    "fox",
    "jumps",
    "over",
    "lazy",
    "it",
    "we",
    "they",
    "you",
    "I",
    "hello",
    "world",
]


@pytest.fixture(scope="session")
def word_list() -> list[str]:
    """Words used to build the test dictionary."""
    return list(WORDS)


@pytest.fixture(scope="session")
def dictionary(word_list):
    """Return a small Dictionary for testing."""
    from redpen import Dictionary

    return Dictionary.from_words(word_list, source="test")


@pytest.fixture
def dictionary_file(tmp_path, word_list) -> Path:
    """Write the test words to a file, several per line."""
    path = tmp_path / "words.txt"
    lines = [" ".join(word_list[i : i + 3]) for i in range(0, len(word_list), 3)]
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture(scope="session")
def sample_config():
    """Return a default CheckerConfig for testing."""
    from redpen import CheckerConfig

    return CheckerConfig()
