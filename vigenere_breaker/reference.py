"""
Static reference data
=====================
The alphabet, the English letter-frequency model and the search bounds.

All letter-indexed data is a 26-tuple indexed by rank (A=0 ... Z=25),
so every entry is always present and nothing here can be mutated.

English frequencies: relative frequencies in percent, from
https://en.wikipedia.org/wiki/Letter_frequency  (sum ≈ 100). Only
relative magnitudes matter to the correlation attack.
"""

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHABET_SIZE = len(ALPHABET)

ENGLISH_FREQUENCIES = (
    8.167,   # A
    1.492,   # B
    2.782,   # C
    4.253,   # D
    12.702,  # E
    2.228,   # F
    2.015,   # G
    6.094,   # H
    6.966,   # I
    0.253,   # J
    0.772,   # K
    4.025,   # L
    2.406,   # M
    6.749,   # N
    7.507,   # O
    1.929,   # P
    0.095,   # Q
    5.987,   # R
    6.327,   # S
    9.056,   # T
    2.758,   # U
    0.978,   # V
    2.360,   # W
    0.250,   # X
    1.974,   # Y
    0.074,   # Z
)

MAX_KEY_LENGTH = 15          # largest key length the estimator tries
LOW_CONFIDENCE_LETTERS = 20  # columns with fewer letters get a warning
