"""
VIGENÈRE BREAKER  |  ciphertext-only attack
===========================================
Chains the stages into a full recovery:

    ciphertext ─► Stage 3 key length k ─► Stage 4 key ─► decode ─► plaintext

No key, no crib, no key length needed. The attack is deterministic: the
same ciphertext always gives the same answer, so a failure is final and
is raised to the caller rather than retried with another k.
"""

import logging
from typing import Tuple, Sequence

from .cipher import decode
from .errors import InvalidInputError
from .reference import ALPHABET_SIZE, ENGLISH_FREQUENCIES, MAX_KEY_LENGTH
from .stages import stage3_keylength, stage4_keyrecovery

logger = logging.getLogger(__name__)


def shortest_period(key: str) -> str:
    """
    Shortest unit that repeats to make `key`.

    The estimator can land on a multiple of the true period (2k, 3k all
    score like k), which recovers the key repeated: "KEYKEY" -> "KEY".
    """
    n = len(key)
    for p in range(1, n):
        if n % p == 0 and key == key[:p] * (n // p):
            return key[:p]
    return key


class VigenereBreaker:
    """
    Ciphertext-only Vigenère attack.

    Args:
        max_key_length : largest key length the estimator considers
        reference      : 26 relative letter frequencies of the plaintext
                         language, indexed A..Z
    """

    def __init__(self, max_key_length: int = MAX_KEY_LENGTH,
                 reference: Sequence[float] = ENGLISH_FREQUENCIES):
        if max_key_length < 1:
            raise InvalidInputError(
                f"max_key_length must be >= 1, got {max_key_length}."
            )
        reference = tuple(reference)
        if len(reference) != ALPHABET_SIZE:
            raise InvalidInputError(
                f"Reference table must have {ALPHABET_SIZE} entries, "
                f"got {len(reference)}."
            )
        if any(f < 0 for f in reference):
            raise InvalidInputError("Reference frequencies must be non-negative.")
        self._max_key_length = max_key_length
        self._reference      = reference

    @property
    def max_key_length(self) -> int:
        return self._max_key_length

    @property
    def reference(self) -> Tuple[float, ...]:
        return self._reference

    def estimate_key_length(self, ciphertext: str) -> int:
        return stage3_keylength.estimate_key_length(ciphertext, self._max_key_length)

    def recover_key(self, ciphertext: str, key_length: int) -> str:
        if key_length > self._max_key_length:
            raise InvalidInputError(
                f"Key length {key_length} exceeds the search bound "
                f"({self._max_key_length})."
            )
        return stage4_keyrecovery.recover_key(ciphertext, key_length, self._reference)

    def break_cipher(self, ciphertext: str) -> Tuple[str, str]:
        """
        Recover plaintext and key from ciphertext alone.

        Returns: (plaintext, key)
        Raises InvalidInputError / DegenerateResultError from either stage.
        """
        key_length = self.estimate_key_length(ciphertext)
        key        = shortest_period(self.recover_key(ciphertext, key_length))
        plaintext  = decode(ciphertext, key)
        logger.info(f"Broke {len(ciphertext)}-symbol ciphertext: key={key}")
        return plaintext, key

    def __repr__(self):
        return f"VigenereBreaker(max_key_length={self._max_key_length})"


_DEFAULT = VigenereBreaker()


def estimate_key_length(ciphertext: str) -> int:
    """Most probable key length, searching 1..15."""
    return _DEFAULT.estimate_key_length(ciphertext)


def recover_key(ciphertext: str, key_length: int) -> str:
    """Key of the given length (1..15), recovered against English frequencies."""
    return _DEFAULT.recover_key(ciphertext, key_length)


def break_cipher(ciphertext: str) -> Tuple[str, str]:
    """Full attack with the default configuration. Returns (plaintext, key)."""
    return _DEFAULT.break_cipher(ciphertext)
