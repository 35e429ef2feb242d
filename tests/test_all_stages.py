"""
vigenere_breaker — Cipher + Attack Test Suite
=============================================
Run with:  python -m pytest tests/ -v
       or:  python tests/test_all_stages.py
"""

import sys
import os
import logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from vigenere_breaker.cipher                    import VigenereCipher, extend_key, encode, decode
from vigenere_breaker.errors                    import (CryptanalysisError, InvalidInputError,
                                                        DegenerateResultError)
from vigenere_breaker.reference                 import ALPHABET, ENGLISH_FREQUENCIES
from vigenere_breaker.stages.common             import (ResidueSubsequence, residue_classes,
                                                        best_candidate)
from vigenere_breaker.stages.stage1_frequency   import letter_rank, frequency, frequency_by_letter
from vigenere_breaker.stages.stage2_coincidence import coincidence_count, index_of_coincidence
from vigenere_breaker.stages.stage3_keylength   import score_key_lengths
from vigenere_breaker.stages.stage4_keyrecovery import correlation, recover_shift
from vigenere_breaker.attack                    import (VigenereBreaker, estimate_key_length,
                                                        recover_key, break_cipher,
                                                        shortest_period)

SHORT_PT  = "DEFENDTHEEASTWALLOFTHECASTLE"
SHORT_KEY = "FORTIFY"
SHORT_CT  = "ISWXVIRMSVTAYUFZCHNYFJQRLBQC"

PROSE = """
Long before electronic computers, diplomats and generals trusted their
secrets to paper and ink. The cipher that carries the name of Blaise de
Vigenere was admired for three centuries because it seemed to hide the
telltale frequencies of the language. A single letter of the message could
become many different letters in the ciphertext, depending on where it fell
against the repeating keyword. Officers in the field were told that no
enemy could read such a dispatch without the key, and for a long time that
was believed by nearly everyone. The weakness was the repetition itself.
Once the length of the keyword is known, the message falls apart into
several simple shift ciphers, one for every letter of the key. Each of
those pieces still carries the familiar shape of ordinary English, with
plenty of the letter E, a good share of T and A and O, and almost no Q or
Z. Charles Babbage and Friedrich Kasiski found ways to measure the period
in the middle of the nineteenth century, and William Friedman later gave
the method a firm statistical footing with the index of coincidence. After
that, breaking the cipher became a routine exercise for any patient clerk
with a pencil, a sheet of squared paper and a table of letter counts. The
lesson for modern designers is that a cipher must never let the structure
of the plaintext show through, however complicated the machinery around it
may appear to the people who are asked to trust it with their lives.
"""
LONG_PT  = "".join(ch for ch in PROSE.upper() if ch in ALPHABET)
LONG_KEY = "CIPHERTEXT"
LONG_CT  = encode(LONG_PT, LONG_KEY)

# ── Cipher primitive ──────────────────────────────────────────────────────────
def test_cipher_known_vector():
    assert encode(SHORT_PT, SHORT_KEY) == SHORT_CT
    assert decode(SHORT_CT, SHORT_KEY) == SHORT_PT

@pytest.mark.parametrize("key", ["A", "KEY", "LEMON", "ZZZZ", "BLAISE"])
def test_cipher_roundtrip(key):
    assert decode(encode(LONG_PT, key), key) == LONG_PT

def test_cipher_key_a_is_identity():
    assert encode(SHORT_PT, "A") == SHORT_PT

def test_extend_key():
    assert extend_key(SHORT_KEY, 10) == "FORTIFYFOR"
    assert extend_key(SHORT_KEY, 3) == "FOR"
    assert extend_key(SHORT_KEY, 0) == ""
    assert len(extend_key("KEY", 1000)) == 1000

def test_extend_key_rejects_bad_input():
    for bad in ["", "K3Y", "KEY WORD"]:
        with pytest.raises(InvalidInputError):
            extend_key(bad, 5)
    with pytest.raises(InvalidInputError):
        extend_key("KEY", -1)

def test_cipher_non_letters_keep_their_position():
    ct = encode("AB CD", "BC")
    assert ct == "BD EE"
    assert decode(ct, "BC") == "AB CD"

def test_cipher_class_wrapper():
    v = VigenereCipher("fortify")
    assert v.key == SHORT_KEY
    assert v.period == 7
    assert v.encrypt(SHORT_PT) == SHORT_CT
    assert v.decrypt(SHORT_CT) == SHORT_PT
    with pytest.raises(ValueError):
        VigenereCipher("")

# ── Stage 1: frequency ────────────────────────────────────────────────────────
def test_frequency_counts():
    dist = frequency("AAB")
    assert len(dist) == 26
    assert dist[0] == 2 and dist[1] == 1
    assert sum(dist) == 3

def test_frequency_empty_is_all_zero():
    assert frequency("") == (0,) * 26

def test_frequency_skips_non_letters():
    symbols = ["A", None, "", "a", "7", " ", "Z", "AB", "Z"]
    dist = frequency(symbols)
    assert dist[0] == 1 and dist[25] == 2
    assert sum(dist) == 3

def test_letter_rank():
    assert letter_rank("A") == 0
    assert letter_rank("Z") == 25
    assert letter_rank("a") is None
    assert letter_rank(None) is None

def test_frequency_by_letter():
    d = frequency_by_letter(SHORT_PT)
    assert list(d) == list(ALPHABET)
    assert d["E"] == 6 and d["Z"] == 0
    assert sum(d.values()) == len(SHORT_PT)

# ── Stage 2: index of coincidence ─────────────────────────────────────────────
def test_ic_extremes():
    skewed  = index_of_coincidence("AAAA")
    uniform = index_of_coincidence(ALPHABET)
    assert skewed == pytest.approx(26.0)
    assert uniform == 0.0
    assert skewed > uniform

def test_ic_english_vs_ciphertext():
    english = index_of_coincidence(LONG_PT)
    mixed   = index_of_coincidence(LONG_CT)
    assert 1.4 < english < 2.1
    assert mixed < english

def test_ic_non_letters_count_toward_length():
    assert coincidence_count(frequency("AA  ")) == 2
    assert index_of_coincidence("AA  ") == pytest.approx(2 / (4 * 3 / 26))

@pytest.mark.parametrize("text", ["", "A"])
def test_ic_needs_two_symbols(text):
    with pytest.raises(InvalidInputError):
        index_of_coincidence(text)

# ── Partition + selection ─────────────────────────────────────────────────────
def test_residue_classes_partition_text():
    classes = residue_classes(SHORT_CT, 7)
    assert len(classes) == 7
    assert sum(len(c) for c in classes) == len(SHORT_CT)
    assert list(classes[0]) == ["I", "M", "F", "J"]
    for r, column in enumerate(classes):
        assert list(column) == list(SHORT_CT[r::7])
        assert column[-1] == SHORT_CT[r::7][-1]

def test_residue_view_rejects_bad_arguments():
    with pytest.raises(InvalidInputError):
        ResidueSubsequence("ABC", 0, 0)
    with pytest.raises(InvalidInputError):
        ResidueSubsequence("ABC", 3, 3)

def test_best_candidate_first_seen_wins_ties():
    assert best_candidate([(1, 0.5), (2, 0.9), (3, 0.9)]) == (0.9, 2)

def test_best_candidate_sentinel():
    assert best_candidate([(1, 0.0), (2, -1.0)]) == (0.0, 0)
    assert best_candidate([]) == (0.0, 0)
    assert best_candidate([(1, 0.5)], sentinel=0.5) == (0.5, 0)

# ── Stage 3: key length ───────────────────────────────────────────────────────
def test_key_length_long_sample():
    assert estimate_key_length(LONG_CT) == len(LONG_KEY)

def test_key_length_repeated_sample_is_multiple_of_seven():
    ct = encode(SHORT_PT * 10, SHORT_KEY)
    assert estimate_key_length(ct) % 7 == 0

def test_key_length_candidates_bounded():
    scores = score_key_lengths(SHORT_CT)
    assert [k for k, _ in scores] == list(range(1, 15))
    assert [k for k, _ in score_key_lengths(LONG_CT, 4)] == [1, 2, 3, 4]

@pytest.mark.parametrize("text", ["", "Q"])
def test_key_length_degenerate_input(text):
    with pytest.raises(InvalidInputError):
        estimate_key_length(text)

def test_key_length_no_signal():
    with pytest.raises(DegenerateResultError):
        estimate_key_length("AB")

# ── Stage 4: key recovery ─────────────────────────────────────────────────────
def test_correlation_and_shift():
    dist = frequency("E" * 10)
    assert correlation(dist, ENGLISH_FREQUENCIES, 0) == pytest.approx(10 * 12.702)
    assert recover_shift("E" * 10) == 0
    assert recover_shift("H" * 10) == 3

def test_recover_shift_no_letters_defaults_to_a():
    assert recover_shift("  ..") == 0

def test_recover_key_known_length():
    assert recover_key(LONG_CT, len(LONG_KEY)) == LONG_KEY

@pytest.mark.parametrize("k", [0, -3, len(SHORT_CT) + 1])
def test_recover_key_rejects_bad_length(k):
    with pytest.raises(InvalidInputError):
        recover_key(SHORT_CT, k)

def test_recover_key_warns_on_short_columns(caplog):
    with caplog.at_level(logging.WARNING, logger="vigenere_breaker"):
        key = recover_key(SHORT_CT, 7)
    assert len(key) == 7
    assert "unreliable" in caplog.text

# ── Attack ────────────────────────────────────────────────────────────────────
# KEY, LEMON and ABC have multiples within the 15-letter search.
@pytest.mark.parametrize("key", [LONG_KEY, "KEY", "LEMON", "ABC", "FORTIFY", "SECRET"])
def test_break_cipher_full_attack(key):
    plaintext, recovered = break_cipher(encode(LONG_PT, key))
    assert recovered == key
    assert plaintext == LONG_PT

def test_shortest_period():
    assert shortest_period("LEMONLEMONLEMON") == "LEMON"
    assert shortest_period("KEYKEY") == "KEY"
    assert shortest_period("AAAA") == "A"
    assert shortest_period("ABCAB") == "ABCAB"
    assert shortest_period("CIPHERTEXT") == "CIPHERTEXT"

def test_recover_key_rejects_length_past_search_bound():
    with pytest.raises(InvalidInputError):
        recover_key(LONG_CT, 16)
    with pytest.raises(InvalidInputError):
        VigenereBreaker(max_key_length=8).recover_key(LONG_CT, len(LONG_KEY))
    assert VigenereBreaker(max_key_length=8).recover_key(LONG_CT, 8)

def test_break_cipher_surfaces_degenerate_result():
    with pytest.raises(CryptanalysisError):
        break_cipher("AB")
    with pytest.raises(InvalidInputError):
        break_cipher("")

def test_breaker_configuration():
    b = VigenereBreaker(max_key_length=12)
    assert b.max_key_length == 12
    assert b.estimate_key_length(LONG_CT) == len(LONG_KEY)
    with pytest.raises(InvalidInputError):
        VigenereBreaker(max_key_length=0)
    with pytest.raises(InvalidInputError):
        VigenereBreaker(reference=ENGLISH_FREQUENCIES[:25])
    with pytest.raises(InvalidInputError):
        VigenereBreaker(reference=(-1.0,) + ENGLISH_FREQUENCIES[1:])

# ── run directly ─────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import time
    tests = [
        ("Cipher — known vector",              test_cipher_known_vector),
        ("Cipher — roundtrip",                 lambda: test_cipher_roundtrip("LEMON")),
        ("Cipher — extend_key",                test_extend_key),
        ("Cipher — non-letter positions",      test_cipher_non_letters_keep_their_position),
        ("Stage 1 — frequency counts",         test_frequency_counts),
        ("Stage 1 — skips non-letters",        test_frequency_skips_non_letters),
        ("Stage 2 — IC extremes",              test_ic_extremes),
        ("Stage 2 — IC English vs cipher",     test_ic_english_vs_ciphertext),
        ("Stage 3 — partition",                test_residue_classes_partition_text),
        ("Stage 3 — tie-break",                test_best_candidate_first_seen_wins_ties),
        ("Stage 3 — key length (long)",        test_key_length_long_sample),
        ("Stage 3 — key length (repeated)",    test_key_length_repeated_sample_is_multiple_of_seven),
        ("Stage 3 — degenerate input",         test_key_length_no_signal),
        ("Stage 4 — shift recovery",           test_correlation_and_shift),
        ("Stage 4 — key recovery",             test_recover_key_known_length),
        ("Attack  — full break",               lambda: test_break_cipher_full_attack("LEMON")),
        ("Attack  — shortest period",          test_shortest_period),
        ("Attack  — configuration",            test_breaker_configuration),
    ]

    print("\n" + "═" * 70)
    print("  vigenere_breaker — Full Test Suite")
    print("═" * 70)
    passed = failed = 0
    for name, fn in tests:
        t0 = time.perf_counter()
        try:
            fn()
            elapsed = time.perf_counter() - t0
            print(f"  ✓  {name:<45} {elapsed:.3f}s")
            passed += 1
        except Exception as e:
            print(f"  ✗  {name:<45} FAILED: {e}")
            failed += 1
    print("═" * 70)
    print(f"  {passed} passed  |  {failed} failed")
    print("═" * 70 + "\n")
    sys.exit(0 if failed == 0 else 1)
