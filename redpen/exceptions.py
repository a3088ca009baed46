"""
Exception classes for redpen.

All redpen exceptions inherit from RedpenError,
making it easy to catch all library errors.

Example:
    >>> try:
    ...     pipeline = redpen.create_pipeline("missing.txt")
    ... except redpen.DictionaryError as e:
    ...     print(f"Dictionary problem: {e}")
    ... except redpen.RedpenError as e:
    ...     print(f"redpen error: {e}")
"""


class RedpenError(Exception):
    """
    Base exception for all redpen errors.

    Catch this to handle any redpen-specific error.
    """

    pass


class DictionaryError(RedpenError):
    """
    Raised when no usable dictionary is available.

    Loading a word list never raises on its own (an unreadable file yields
    an empty dictionary); the pipeline raises this when asked to check text
    against an empty one.

    Example:
        >>> create_pipeline("missing.txt")
        DictionaryError: Dictionary is empty or could not be loaded: missing.txt
    """

    pass


class ConfigurationError(RedpenError):
    """
    Raised for invalid configuration.

    Example:
        >>> CheckerConfig(executor="fiber")
        ConfigurationError: executor must be one of ('thread', 'process'), got 'fiber'
    """

    pass
