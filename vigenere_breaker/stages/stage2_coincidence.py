"""
Stage 2 — Index of Coincidence
==============================
How skewed is a letter distribution?

    IC = Σ f(L)·(f(L) - 1)  /  ( m·(m - 1) / 26 )

The numerator counts ordered pairs of positions holding the same letter.
The denominator is the number of such pairs expected if the m symbols
were drawn uniformly from 26 letters. So on this scale:

    ~0.0        every letter distinct (uniform spread)
    ~1.0        uniformly random letters
    ~1.7        English text, or any single Caesar shift of it
    up to 26    one letter repeated

m is the full length of the sequence, non-letters included.

The denominator is computed in floating point. Truncating m·(m-1)/26 to
an integer first loses precision for short sequences and reaches zero
for m <= 5, which would make short columns unscoreable.
"""

from collections.abc import Sequence
from typing import Tuple

from ..errors import InvalidInputError
from ..reference import ALPHABET_SIZE
from .stage1_frequency import frequency


def coincidence_count(distribution: Tuple[int, ...]) -> int:
    """Number of ordered same-letter pairs in a frequency distribution."""
    return sum(f * (f - 1) for f in distribution)


def index_of_coincidence(symbols: Sequence) -> float:
    """IC of `symbols`, normalised so that uniform random text scores ~1."""
    m = len(symbols)
    if m <= 1:
        raise InvalidInputError(
            f"Index of Coincidence needs at least 2 symbols, got {m}."
        )
    expected_pairs = m * (m - 1) / ALPHABET_SIZE
    return coincidence_count(frequency(symbols)) / expected_pairs
