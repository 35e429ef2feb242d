"""
Shared building blocks for the attack stages.

ResidueSubsequence : every k-th symbol of a text, as a view (no copy).
residue_classes    : the k views that partition a text.
best_candidate     : argmax fold with a sentinel and first-seen tie-break.
"""

from collections.abc import Sequence
from typing import Iterable, Tuple, Any

from ..errors import InvalidInputError


class ResidueSubsequence(Sequence):
    """
    Positions i of `text` with i % modulus == residue, in original order.

    For a confirmed key length this is a column: every symbol in it was
    enciphered with the same key letter.
    """

    __slots__ = ("_text", "_indices")

    def __init__(self, text: Sequence, modulus: int, residue: int):
        if modulus < 1:
            raise InvalidInputError(f"Modulus must be >= 1, got {modulus}.")
        if not 0 <= residue < modulus:
            raise InvalidInputError(
                f"Residue must be in [0, {modulus}), got {residue}."
            )
        self._text    = text
        self._indices = range(residue, len(text), modulus)

    def __len__(self) -> int:
        return len(self._indices)

    def __getitem__(self, item: int):
        return self._text[self._indices[item]]

    def __iter__(self):
        text = self._text
        for i in self._indices:
            yield text[i]

    def __repr__(self):
        r = self._indices
        return f"ResidueSubsequence(residue={r.start}, modulus={r.step}, len={len(r)})"


def residue_classes(text: Sequence, modulus: int) -> list:
    """Split `text` into `modulus` interleaved residue views."""
    return [ResidueSubsequence(text, modulus, r) for r in range(modulus)]


def best_candidate(scored: Iterable[Tuple[Any, float]],
                   sentinel: float = 0.0) -> Tuple[float, Any]:
    """
    Fold (candidate, score) pairs into (best_score, best_candidate).

    Starts from (sentinel, 0). A candidate replaces the current best only
    if its score is strictly greater, so ties keep the earliest candidate
    and nothing at or below the sentinel is ever selected.
    """
    best_score, best = sentinel, 0
    for candidate, score in scored:
        if score > best_score:
            best_score, best = score, candidate
    return best_score, best
