"""
Error taxonomy for the Vigenère attack.

Every error is local to a single attack invocation. The algorithms are
deterministic, so nothing here is retryable: the same input fails the
same way every time.

    CryptanalysisError
      ├── InvalidInputError      text too short, bad key length, bad table
      └── DegenerateResultError  no key length scored above zero

Both subclass ValueError, so callers that already guard cipher calls
with `except ValueError` keep working.
"""


class CryptanalysisError(ValueError):
    """Base class for every failure raised by vigenere_breaker."""


class InvalidInputError(CryptanalysisError):
    """Input cannot produce a meaningful score or key."""


class DegenerateResultError(CryptanalysisError):
    """The key-length search found no candidate with a positive score."""
