"""Tests for stem generation and the stem matcher (stems.py)."""

from turkmorph.diacritics import DiacriticEquivalence
from turkmorph.loader import load_lines, parse_line
from turkmorph.phonology import Expectation
from turkmorph.stems import StemGenerator, StemMatcher


def _stems(line: str) -> dict[str, Expectation | None]:
    return {s.surface: s.expects for s in StemGenerator().generate(parse_line(line))}


# ── Generation ────────────────────────────────────────────────────────────────

def test_plain_item_has_single_stem():
    assert _stems("ev") == {"ev": None}


def test_voicing_stems():
    assert _stems("kitap") == {"kitap": Expectation.CONSONANT, "kitab": Expectation.VOWEL}


def test_voicing_after_n():
    assert _stems("renk [A:Voicing]") == {"renk": Expectation.CONSONANT, "reng": Expectation.VOWEL}


def test_doubling_stems():
    assert _stems("hak [A:Doubling]") == {"hak": Expectation.CONSONANT, "hakk": Expectation.VOWEL}


def test_last_vowel_drop_stems():
    assert _stems("ağız [A:LastVowelDrop]") == {"ağız": Expectation.CONSONANT, "ağz": Expectation.VOWEL}


def test_numeral_keeps_written_form():
    # the surface is the same for both; only the pronunciation changes
    stems = StemGenerator().generate(parse_line("dört [P:Num,Card;A:Voicing]"))
    assert [(s.surface, s.phonetics.letter, s.expects) for s in stems] == [
        ("dört", "t", Expectation.CONSONANT),
        ("dörd", "d", Expectation.VOWEL),
    ]


def test_progressive_vowel_drop_stem():
    stems = StemGenerator().generate(parse_line("aramak"))
    dropped = [s for s in stems if s.first_morpheme == "Prog1"]
    assert len(dropped) == 1
    assert dropped[0].surface == "ar"
    assert dropped[0].phonetics.vowel == "a"


def test_abbreviation_dotted_stem():
    stems = StemGenerator().generate(parse_line("Dr [P:Abbrv]"))
    by_surface = {s.surface: s for s in stems}
    assert set(by_surface) == {"dr", "dr."}
    assert by_surface["dr."].no_suffix
    assert not by_surface["dr"].no_suffix


def test_abbreviation_takes_harmony_from_pronunciation():
    stems = StemGenerator().generate(parse_line("TBMM [P:Abbrv;Pr:tebememe]"))
    assert stems[0].phonetics.vowel == "e"
    assert stems[0].phonetics.letter == "e"


# ── Matching ──────────────────────────────────────────────────────────────────

def test_match_all_prefixes():
    matcher = StemMatcher(load_lines(["ev", "evlat [A:NoVoicing]", "kitap"]))
    found = [(m.stem.surface, m.end) for m in matcher.match("evlatlar")]
    assert found == [("ev", 2), ("evlat", 5)]


def test_match_voiced_stem():
    matcher = StemMatcher(load_lines(["kitap"]))
    found = [(m.stem.surface, m.end) for m in matcher.match("kitabı")]
    assert found == [("kitab", 5)]


def test_no_match_is_empty():
    matcher = StemMatcher(load_lines(["kitap"]))
    assert matcher.match("masa") == []
    assert matcher.match("") == []


def test_exact_match_ignores_diacritic_variants_when_disabled():
    matcher = StemMatcher(load_lines(["sıra", "şıra"]))
    assert matcher.match("sira") == []


def test_tolerant_match_returns_every_root():
    matcher = StemMatcher(load_lines(["sıra", "şıra"]), DiacriticEquivalence(enabled=True))
    lemmas = sorted(m.stem.item.lemma for m in matcher.match("sira"))
    assert lemmas == ["sıra", "şıra"]


def test_tolerant_match_exact_first():
    matcher = StemMatcher(load_lines(["sıra", "şıra"]), DiacriticEquivalence(enabled=True))
    matches = matcher.match("sıra")
    assert [m.stem.item.lemma for m in matches] == ["sıra", "şıra"]


def test_tolerant_match_is_superset():
    lex = load_lines(["sıra", "şıra", "kitap", "ekonomik [P:Adj]"])
    strict = StemMatcher(lex)
    tolerant = StemMatcher(lex, DiacriticEquivalence(enabled=True))
    for word in ["sıra", "kitabı", "ekonomik", "ekonomık"]:
        strict_found = {(m.stem, m.end) for m in strict.match(word)}
        tolerant_found = {(m.stem, m.end) for m in tolerant.match(word)}
        assert strict_found <= tolerant_found


def test_stem_count_and_max_length():
    matcher = StemMatcher(load_lines(["kitap", "ev"]))
    assert matcher.stem_count == 3
    assert matcher.max_length == 5
