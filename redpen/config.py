"""
Configuration for redpen spell checking.

Values can be set directly, loaded from a YAML file, or overridden on the
command line.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal

import yaml

from redpen.exceptions import ConfigurationError

# Inputs shorter than this many characters are scanned on a single worker
DEFAULT_PARALLEL_THRESHOLD = 100_000

DEFAULT_HIGHLIGHT_STYLE = "color:red"

VALID_EXECUTORS = ("thread", "process")


def _is_int(value: Any) -> bool:
    # bool is an int subclass; YAML `true` is not a count
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class CheckerConfig:
    """
    Configuration for a spell-check run.

    All options have sensible defaults. Create a config only
    if you need to customize behavior.

    Example:
        >>> config = CheckerConfig(workers=8, executor="process")
        >>> pipeline = redpen.create_pipeline("words.txt", config)
    """

    # Parallelism
    workers: int | None = None  # None = one per CPU
    parallel_threshold: int = DEFAULT_PARALLEL_THRESHOLD
    executor: Literal["thread", "process"] = "thread"

    # Output
    highlight_style: str = DEFAULT_HIGHLIGHT_STYLE

    def __post_init__(self):
        """Validate configuration."""
        if self.workers is not None and not _is_int(self.workers):
            raise ConfigurationError(
                f"workers must be an integer, got {type(self.workers).__name__}"
            )
        if self.workers is not None and self.workers < 1:
            raise ConfigurationError(f"workers must be >= 1, got {self.workers}")

        if not _is_int(self.parallel_threshold):
            raise ConfigurationError(
                "parallel_threshold must be an integer, "
                f"got {type(self.parallel_threshold).__name__}"
            )
        if self.parallel_threshold < 0:
            raise ConfigurationError(
                f"parallel_threshold must be >= 0, got {self.parallel_threshold}"
            )

        if self.executor not in VALID_EXECUTORS:
            raise ConfigurationError(
                f"executor must be one of {VALID_EXECUTORS}, got {self.executor!r}"
            )

        if not isinstance(self.highlight_style, str):
            raise ConfigurationError(
                f"highlight_style must be a string, got {type(self.highlight_style).__name__}"
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CheckerConfig:
        """Create from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str | Path) -> CheckerConfig:
        """
        Load configuration from a YAML file.

        The file must hold a single mapping, e.g.::

            workers: 4
            parallel_threshold: 50000
            executor: process

        Args:
            path: Path to the YAML file.

        Returns:
            A validated CheckerConfig.

        Raises:
            ConfigurationError: If the file cannot be read, is not valid YAML,
                or contains unknown or invalid options.
        """
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Malformed configuration file {path}: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {path} must contain a mapping, got {type(data).__name__}"
            )
        return cls.from_dict(data)

    def merged(self, **overrides: Any) -> CheckerConfig:
        """Return a copy with the non-None overrides applied."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return CheckerConfig.from_dict(values)
