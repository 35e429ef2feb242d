"""
Vigenère Polyalphabetic Cipher
==============================
The primitive the attack is built around: each letter is shifted by the
key letter at the same position, with the key repeated to the length of
the text.

    C[i] = (P[i] + K[i mod k]) mod 26
    P[i] = (C[i] - K[i mod k]) mod 26

Historical note: Blaise de Vigenère, 1553. Called "le chiffre
indéchiffrable" for 300 years, until Kasiski (1863) and Friedman (1920s)
showed the period leaks through letter statistics. See attack.py.

Characters outside A-Z pass through unchanged but still occupy a
keystream position, so position i of the text is always enciphered by
key letter i mod k. The attack's residue classes rely on that.
"""

from .errors import InvalidInputError
from .reference import ALPHABET, ALPHABET_SIZE


def _check_key(key: str) -> str:
    key = (key or "").upper()
    if not key or any(ch not in ALPHABET for ch in key):
        raise InvalidInputError("Vigenère key must be alphabetic (A-Z).")
    return key


def extend_key(key: str, length: int) -> str:
    """Repeat `key` cyclically until it is exactly `length` letters long."""
    key = _check_key(key)
    if length < 0:
        raise InvalidInputError(f"Keystream length must be >= 0, got {length}.")
    return "".join(key[i % len(key)] for i in range(length))


def _shift(text: str, key: str, direction: int) -> str:
    text      = text.upper()
    keystream = extend_key(key, len(text))
    result    = []
    for ch, k in zip(text, keystream):
        if ch in ALPHABET:
            idx = (ALPHABET.index(ch) + direction * ALPHABET.index(k)) % ALPHABET_SIZE
            result.append(ALPHABET[idx])
        else:
            result.append(ch)
    return "".join(result)


def encode(plaintext: str, key: str) -> str:
    """Encrypt plaintext. Non-letters pass through."""
    return _shift(plaintext, key, +1)


def decode(ciphertext: str, key: str) -> str:
    """Decrypt ciphertext. Non-letters pass through."""
    return _shift(ciphertext, key, -1)


class VigenereCipher:
    """
    Vigenère cipher bound to one key.

    The keystream is the plain periodic repetition of the key, which is
    exactly what makes the cipher breakable: the period k shows up as a
    jump in the Index of Coincidence of every k-th letter.
    """

    def __init__(self, key: str):
        self._key = _check_key(key)

    @property
    def key(self) -> str:
        return self._key

    @property
    def period(self) -> int:
        return len(self._key)

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext string. Non-alpha characters pass through."""
        return encode(plaintext, self._key)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt ciphertext string."""
        return decode(ciphertext, self._key)

    def __repr__(self):
        return f"VigenereCipher(period={self.period})"
