"""Tests for Turkish letter helpers (alphabet.py) and diacritic equivalence (diacritics.py)."""

from turkmorph.alphabet import (
    contains_vowel,
    is_capitalized,
    last_letter,
    last_vowel,
    normalize_for_analysis,
    turkish_lower,
    turkish_upper,
    voice_last_letter,
    vowel_count,
)
from turkmorph.diacritics import DiacriticEquivalence, fold


# ── Case ──────────────────────────────────────────────────────────────────────

def test_turkish_lower_dotted_and_dotless_i():
    assert turkish_lower("IŞIK") == "ışık"
    assert turkish_lower("İSTANBUL") == "istanbul"


def test_turkish_lower_preserves_length():
    word = "İİIIÇĞÖŞÜ"
    assert len(turkish_lower(word)) == len(word)


def test_turkish_upper():
    assert turkish_upper("istanbul") == "İSTANBUL"
    assert turkish_upper("ışık") == "IŞIK"


def test_is_capitalized():
    assert is_capitalized("Ankara")
    assert not is_capitalized("ankara")
    assert not is_capitalized("")


# ── Normalization ─────────────────────────────────────────────────────────────

def test_normalize_removes_circumflex():
    assert normalize_for_analysis("zekâ") == "zeka"
    assert normalize_for_analysis("Kâtip") == "katip"


def test_normalize_unifies_apostrophes():
    assert normalize_for_analysis("Ankara’da") == "ankara'da"


def test_normalize_preserves_length():
    for word in ["TÜBİTAK’a", "zekâ", "XXIV'ten", "%2,2'si", ":)"]:
        assert len(normalize_for_analysis(word)) == len(word)


# ── Letter classes ────────────────────────────────────────────────────────────

def test_last_vowel():
    assert last_vowel("kitap") == "a"
    assert last_vowel("öğretmen") == "e"
    assert last_vowel("tbmm") is None


def test_last_letter_skips_non_letters():
    assert last_letter("20:30") is None
    assert last_letter("blah-foo") == "o"


def test_vowel_count():
    assert vowel_count("ekonomik") == 4
    assert vowel_count("dr") == 0
    assert contains_vowel("ev")
    assert not contains_vowel("tbmm")


def test_voice_last_letter():
    assert voice_last_letter("kitap") == "kitab"
    assert voice_last_letter("ağaç") == "ağac"
    assert voice_last_letter("armut") == "armud"
    assert voice_last_letter("ekonomik") == "ekonomiğ"
    assert voice_last_letter("renk") == "reng"
    assert voice_last_letter("ev") == "ev"


# ── Diacritic equivalence ─────────────────────────────────────────────────────

def test_fold():
    assert fold("kazançığımızdan") == "kazancigimizdan"
    assert fold("şıra") == "sira"


def test_expand_enabled():
    eq = DiacriticEquivalence(enabled=True)
    assert eq.expand("s") == frozenset({"s", "ş"})
    assert eq.expand("i") == frozenset({"i", "ı", "î"})
    assert eq.expand("ğ") == frozenset({"g", "ğ"})
    assert eq.expand("k") == frozenset({"k"})


def test_expand_disabled_is_identity():
    eq = DiacriticEquivalence()
    assert eq.expand("s") == frozenset({"s"})
    assert eq.key("şıra") == "şıra"


def test_equivalent():
    eq = DiacriticEquivalence(enabled=True)
    assert eq.equivalent("sira", "şıra")
    assert eq.equivalent("cığ", "çig")
    assert not eq.equivalent("sira", "sıraa")
    assert not eq.equivalent("kira", "sıra")


def test_equivalent_disabled_is_equality():
    eq = DiacriticEquivalence(enabled=False)
    assert eq.equivalent("sıra", "sıra")
    assert not eq.equivalent("sira", "sıra")
