"""
Stage 3 — Key Length Estimation
===============================
Friedman-style period search from ciphertext alone.

For each candidate length k, split the ciphertext into k residue classes
(every k-th letter) and average their Index of Coincidence. When k is the
true key length, each class was enciphered by a single key letter, so it
is just shifted English and keeps the skewed English IC (~1.7). Wrong
guesses mix several shift alphabets into one class and flatten it toward
the uniform ~1.0.

Candidates run from 1 to max_key_length, but never past n // 2: a longer
k would leave some class with fewer than two symbols, which has no IC.

Multiples of the true length score as high as the length itself, so the
search may settle on 2k or 3k. The key recovered for such a length is the
true key repeated; attack.shortest_period folds it back. The earliest of
several equal scores wins.
"""

import logging
from collections.abc import Sequence
from typing import List, Tuple

from ..errors import InvalidInputError, DegenerateResultError
from ..reference import MAX_KEY_LENGTH
from .common import residue_classes, best_candidate
from .stage2_coincidence import index_of_coincidence

logger = logging.getLogger(__name__)


def average_ic(ciphertext: Sequence, key_length: int) -> float:
    """Mean IC of the `key_length` residue classes of the ciphertext."""
    classes = residue_classes(ciphertext, key_length)
    return sum(index_of_coincidence(c) for c in classes) / key_length


def score_key_lengths(ciphertext: Sequence,
                      max_key_length: int = MAX_KEY_LENGTH) -> List[Tuple[int, float]]:
    """
    Score every candidate key length.

    Returns: [(k, average IC), ...] for k = 1 .. min(max_key_length, n // 2)
    """
    if max_key_length < 1:
        raise InvalidInputError(f"max_key_length must be >= 1, got {max_key_length}.")
    n = len(ciphertext)
    if n <= 1:
        raise InvalidInputError(
            f"Ciphertext too short to estimate a key length ({n} symbols)."
        )

    upper  = min(max_key_length, n // 2)
    scores = []
    for k in range(1, upper + 1):
        score = average_ic(ciphertext, k)
        logger.debug(f"Key length {k:>2}: avg IC={score:.4f}")
        scores.append((k, score))
    return scores


def estimate_key_length(ciphertext: Sequence,
                        max_key_length: int = MAX_KEY_LENGTH) -> int:
    """
    Most probable key length of a Vigenère ciphertext.

    Raises:
        InvalidInputError     : ciphertext shorter than 2 symbols, or bad bound
        DegenerateResultError : no candidate scored above 0
    """
    best_score, best_k = best_candidate(score_key_lengths(ciphertext, max_key_length))
    if best_k == 0:
        raise DegenerateResultError(
            "No key length scored above zero; ciphertext carries no usable "
            "letter-frequency signal."
        )
    logger.info(f"Estimated key length: {best_k} (avg IC={best_score:.4f})")
    return best_k
