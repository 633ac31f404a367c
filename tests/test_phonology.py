"""Tests for phonetic context and template rendering (phonology.py)."""

import pytest
from turkmorph.phonology import Expectation, Phonetics, Rendering, render


def _surfaces(template: str, text: str, **kwargs) -> list[str]:
    return [r.surface for r in render(template, Phonetics.of(text, **kwargs))]


# ── Phonetics ─────────────────────────────────────────────────────────────────

def test_phonetics_of_word():
    p = Phonetics.of("kitap")
    assert p.vowel == "a"
    assert p.letter == "p"
    assert not p.frontal
    assert p.ends_voiceless
    assert not p.ends_with_vowel


def test_phonetics_inverse_harmony_fronts_vowel():
    p = Phonetics.of("saat", inverse_harmony=True)
    assert p.vowel == "e"
    assert p.frontal


def test_phonetics_extend():
    p = Phonetics.of("ev").extend("ler")
    assert p.vowel == "e"
    assert p.letter == "r"
    assert Phonetics.of("ev").extend("") == Phonetics.of("ev")


def test_phonetics_without_vowel_defaults_front():
    p = Phonetics.of("tbmm")
    assert p.frontal
    assert p.letter == "m"


# ── Harmony ───────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("text, expected", [
    ("kitap", "lar"),
    ("ev", "ler"),
    ("okul", "lar"),
    ("göz", "ler"),
])
def test_render_a_harmony(text, expected):
    assert _surfaces("lAr", text) == [expected]


@pytest.mark.parametrize("text, expected", [
    ("kız", "ın"),
    ("ev", "in"),
    ("okul", "un"),
    ("göz", "ün"),
])
def test_render_i_harmony(text, expected):
    assert _surfaces("(n)In", text) == [expected]


def test_render_inverse_harmony():
    assert _surfaces("(y)I", "saat", inverse_harmony=True) == ["i"]


# ── Consonants ────────────────────────────────────────────────────────────────

def test_render_devoicing():
    assert _surfaces("DA", "kitap") == ["ta"]
    assert _surfaces("DA", "ev") == ["de"]
    assert _surfaces("CI", "süt") == ["çü"]
    assert _surfaces("CI", "kazan") == ["cı"]


def test_render_buffer_letters_after_vowel():
    assert _surfaces("(y)A", "sıra") == ["ya"]
    assert _surfaces("(s)I", "sıra") == ["sı"]
    assert _surfaces("(n)In", "sıra") == ["nın"]


def test_render_buffer_letters_after_consonant():
    assert _surfaces("(y)A", "ev") == ["e"]
    assert _surfaces("(s)I", "ev") == ["i"]


def test_render_buffer_vowel():
    assert _surfaces("(I)m", "ev") == ["im"]
    assert _surfaces("(I)m", "sıra") == ["m"]


def test_render_harmony_follows_rendered_letters():
    # the second vowel of -(y)AcA~k harmonizes with the first
    renderings = render("(y)AcA~k", Phonetics.of("gel"))
    assert [r.surface for r in renderings] == ["ecek", "eceğ"]


# ── Final k ───────────────────────────────────────────────────────────────────

def test_render_final_k_gives_two_renderings():
    renderings = render("CI~k", Phonetics.of("kitap"))
    assert renderings == [
        Rendering("çık", Expectation.CONSONANT),
        Rendering("çığ", Expectation.VOWEL),
    ]


def test_final_k_must_end_template():
    with pytest.raises(ValueError):
        render("~kA", Phonetics.of("ev"))


def test_empty_template():
    assert render("", Phonetics.of("ev")) == [Rendering("")]


# ── Expectation ───────────────────────────────────────────────────────────────

def test_expectation_allows():
    assert Expectation.VOWEL.allows("ı")
    assert not Expectation.VOWEL.allows("da")
    assert Expectation.CONSONANT.allows("ta")
    assert not Expectation.CONSONANT.allows("a")
