"""
Stage 4 — Key Recovery by Frequency Correlation
===============================================
With the key length k fixed, every column (residue class) of the
ciphertext is a Caesar shift of English. For each column, try all 26
shifts s and score

    correlation(s) = Σ_L  column[(L + s) mod 26] · english[L]

The score peaks when s lines up the column's own peaks with E, T, A, O...
The winning shift is the key letter for that column.

Known limitation: a column with very few letters gives a weak, sometimes
wrong peak. Nothing here can tell; such columns are only logged.
"""

import logging
from collections.abc import Sequence
from typing import Tuple

from ..errors import InvalidInputError
from ..reference import (
    ALPHABET, ALPHABET_SIZE, ENGLISH_FREQUENCIES, LOW_CONFIDENCE_LETTERS,
)
from .common import residue_classes, best_candidate
from .stage1_frequency import frequency

logger = logging.getLogger(__name__)


def correlation(distribution: Tuple[int, ...],
                reference: Tuple[float, ...],
                shift: int) -> float:
    """Dot product of the reference table with the column shifted back by `shift`."""
    return sum(
        distribution[(letter + shift) % ALPHABET_SIZE] * reference[letter]
        for letter in range(ALPHABET_SIZE)
    )


def recover_shift(column: Sequence,
                  reference: Tuple[float, ...] = ENGLISH_FREQUENCIES) -> int:
    """Caesar shift (0-25) that best maps the column onto the reference."""
    dist = frequency(column)
    _, shift = best_candidate(
        ((s, correlation(dist, reference, s)) for s in range(ALPHABET_SIZE)),
        sentinel=0.0,
    )
    return shift


def recover_key(ciphertext: Sequence, key_length: int,
                reference: Tuple[float, ...] = ENGLISH_FREQUENCIES) -> str:
    """
    Recover a `key_length`-letter key from ciphertext.

    Raises InvalidInputError when key_length is not in 1..len(ciphertext).
    """
    n = len(ciphertext)
    if key_length < 1 or key_length > n:
        raise InvalidInputError(
            f"Key length must be between 1 and {n} (ciphertext length), "
            f"got {key_length}."
        )

    key = []
    for position, column in enumerate(residue_classes(ciphertext, key_length)):
        letters = sum(frequency(column))
        if letters < LOW_CONFIDENCE_LETTERS:
            logger.warning(
                f"Column {position} has only {letters} letters; "
                f"key letter may be unreliable."
            )
        key.append(ALPHABET[recover_shift(column, reference)])

    recovered = "".join(key)
    logger.info(f"Recovered key: {recovered}")
    return recovered
