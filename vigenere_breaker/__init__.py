"""
vigenere_breaker
================
Vigenère cipher and a ciphertext-only attack that recovers the key
without knowing it or its length.

Stages:
    1  FREQUENCY    — 26-entry letter counts
    2  COINCIDENCE  — Index of Coincidence (skew of a distribution)
    3  KEY LENGTH   — average IC over residue classes, k = 1..15
    4  KEY          — per-column correlation with English frequencies
    ATTACK          — stage 3 → stage 4 → decode

License: Apache 2.0
"""

__version__  = "1.0.0"

from .cipher                     import VigenereCipher, extend_key, encode, decode
from .errors                     import (CryptanalysisError, InvalidInputError,
                                         DegenerateResultError)
from .reference                  import ALPHABET, ENGLISH_FREQUENCIES, MAX_KEY_LENGTH
from .stages.stage1_frequency    import frequency, frequency_by_letter
from .stages.stage2_coincidence  import index_of_coincidence
from .attack                     import (VigenereBreaker, estimate_key_length,
                                         recover_key, break_cipher,
                                         shortest_period)

__all__ = [
    "VigenereCipher",
    "extend_key",
    "encode",
    "decode",
    "CryptanalysisError",
    "InvalidInputError",
    "DegenerateResultError",
    "ALPHABET",
    "ENGLISH_FREQUENCIES",
    "MAX_KEY_LENGTH",
    "frequency",
    "frequency_by_letter",
    "index_of_coincidence",
    "VigenereBreaker",
    "estimate_key_length",
    "recover_key",
    "break_cipher",
    "shortest_period",
]
