"""
Stage 1 — Letter Frequency Distribution
=======================================
Count how often each of the 26 letters occurs in a run of symbols.

The distribution is a 26-tuple indexed by rank (A=0 ... Z=25). Every
letter is present with count 0 before counting starts, so callers never
have to check for a missing entry.

Only "A" through "Z" are counted. Anything else (lowercase, digits,
punctuation, spaces, None or "" placeholders) is skipped silently, so the
counts may sum to less than the number of symbols.
"""

from typing import Iterable, Optional, Tuple, Dict

from ..reference import ALPHABET, ALPHABET_SIZE

_ORD_A = ord("A")
_ORD_Z = ord("Z")


def letter_rank(symbol) -> Optional[int]:
    """Rank 0-25 of an uppercase letter, or None for anything else."""
    if not isinstance(symbol, str) or len(symbol) != 1:
        return None
    code = ord(symbol)
    if _ORD_A <= code <= _ORD_Z:
        return code - _ORD_A
    return None


def frequency(symbols: Iterable) -> Tuple[int, ...]:
    """Letter counts of `symbols`, indexed by rank."""
    counts = [0] * ALPHABET_SIZE
    for symbol in symbols:
        rank = letter_rank(symbol)
        if rank is not None:
            counts[rank] += 1
    return tuple(counts)


def frequency_by_letter(symbols: Iterable) -> Dict[str, int]:
    return dict(zip(ALPHABET, frequency(symbols)))
