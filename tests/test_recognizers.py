"""Tests for the token recognizers (recognizers.py)."""

import pytest
from turkmorph.lexicon import PrimaryPos, RootAttribute, SecondaryPos
from turkmorph.loader import load_lines
from turkmorph.recognizers import (
    AbbreviationRecognizer,
    ClockRecognizer,
    DateRecognizer,
    EmoticonRecognizer,
    NumberRecognizer,
    PercentageRecognizer,
    ProperNounRecognizer,
    RatioRecognizer,
    RomanNumeralRecognizer,
    TokenRecognizer,
    default_recognizers,
)


# ── Contract ──────────────────────────────────────────────────────────────────

def test_split_at_first_apostrophe():
    assert TokenRecognizer.split("XXIV'ten") == ("XXIV", "ten")
    assert TokenRecognizer.split("IV") == ("IV", "")
    assert TokenRecognizer.split("Blah-Foo’ya") == ("Blah-Foo", "ya")


def test_default_chain_order():
    chain = default_recognizers()
    assert [type(r) for r in chain] == [
        RomanNumeralRecognizer,
        DateRecognizer,
        ClockRecognizer,
        RatioRecognizer,
        PercentageRecognizer,
        NumberRecognizer,
        EmoticonRecognizer,
        AbbreviationRecognizer,
        ProperNounRecognizer,
    ]
    assert [r.fallback for r in chain][-2:] == [True, True]
    assert not any(r.fallback for r in chain[:-2])


def test_synthesize_without_match_raises():
    with pytest.raises(ValueError):
        RomanNumeralRecognizer().synthesize("kitap")


# ── Roman numerals ────────────────────────────────────────────────────────────

def test_roman_numeral():
    r = RomanNumeralRecognizer()
    assert r.matches("XXIV'ten")
    item = r.synthesize("XXIV'ten")
    assert item.lemma == "XXIV"
    assert item.root == "xxıv"
    assert item.primary_pos is PrimaryPos.NUMERAL
    assert item.secondary_pos is SecondaryPos.ROMAN_NUMERAL
    assert item.pronunciation == "dört"
    assert item.has_attribute(RootAttribute.VOICING)
    assert item.synthesized


def test_roman_ordinal():
    item = RomanNumeralRecognizer().synthesize("XXIV.")
    assert item.root == "xxıv."
    assert item.pronunciation == "dördüncü"


def test_roman_rejects_lowercase_and_words():
    r = RomanNumeralRecognizer()
    assert not r.matches("xxiv")
    assert not r.matches("Dr.")
    assert not r.matches("'ten")


def test_attributes_come_from_lexicon():
    lex = load_lines(["dört [P:Num,Card]"])
    item = RomanNumeralRecognizer(lex).synthesize("IV")
    assert not item.has_attribute(RootAttribute.VOICING)


# ── Dates, clock times, ratios, percentages ──────────────────────────────────

@pytest.mark.parametrize("word", ["1.1.2014", "01/02/2014'te", "31.12.1999"])
def test_date(word):
    r = DateRecognizer()
    assert r.matches(word)
    item = r.synthesize(word)
    assert item.secondary_pos is SecondaryPos.DATE
    assert item.primary_pos is PrimaryPos.NOUN


@pytest.mark.parametrize("word", ["1.1.14", "1/1.2014", "40.1.2014", "1.13.2014"])
def test_not_date(word):
    assert not DateRecognizer().matches(word)


def test_date_reads_year():
    assert DateRecognizer().synthesize("1.1.2014").pronunciation == "dört"


def test_clock():
    r = ClockRecognizer()
    item = r.synthesize("20:30'da")
    assert item.secondary_pos is SecondaryPos.CLOCK
    assert item.pronunciation == "otuz"
    assert r.synthesize("20:00").pronunciation == "yirmi"
    assert not r.matches("25:00")
    assert not r.matches("20:75")


def test_ratio():
    r = RatioRecognizer()
    item = r.synthesize("1/2")
    assert item.secondary_pos is SecondaryPos.RATIO
    assert item.pronunciation == "bir"
    assert not r.matches("1/2/2014")


@pytest.mark.parametrize("word", ["%2", "%2'si", "%2.2'si", "%2,2'si"])
def test_percentage(word):
    r = PercentageRecognizer()
    assert r.matches(word)
    item = r.synthesize(word)
    assert item.secondary_pos is SecondaryPos.PERCENTAGE
    assert item.pronunciation == "iki"


# ── Numbers ───────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("word, secondary, pronunciation", [
    ("24'ü", SecondaryPos.CARDINAL, "dört"),
    ("1.000'den", SecondaryPos.CARDINAL, "bin"),
    ("3,5", SecondaryPos.REAL, "beş"),
    ("24.", SecondaryPos.ORDINAL, "dördüncü"),
    ("-7", SecondaryPos.CARDINAL, "yedi"),
])
def test_number(word, secondary, pronunciation):
    r = NumberRecognizer()
    assert r.matches(word)
    item = r.synthesize(word)
    assert item.primary_pos is PrimaryPos.NUMERAL
    assert item.secondary_pos is secondary
    assert item.pronunciation == pronunciation


def test_number_rejects_other_tokens():
    r = NumberRecognizer()
    for word in ["1.1.2014", "20:30", "%2", "1/2", "12a", "1" * 40]:
        assert not r.matches(word), word


# ── Emoticons ─────────────────────────────────────────────────────────────────

def test_emoticon():
    r = EmoticonRecognizer()
    assert r.matches(":)")
    assert r.matches(":'(")
    item = r.synthesize(":)")
    assert item.primary_pos is PrimaryPos.PUNCTUATION
    assert item.secondary_pos is SecondaryPos.EMOTICON
    assert not r.matches("kitap")


# ── Fallbacks ─────────────────────────────────────────────────────────────────

def test_abbreviation_fallback():
    r = AbbreviationRecognizer()
    assert r.matches("TBMM'ye")
    assert not r.matches("TBMM")
    assert not r.matches("Ankara'ya")
    item = r.synthesize("TBMM'ye")
    assert item.primary_pos is PrimaryPos.ABBREVIATION
    assert item.secondary_pos is SecondaryPos.ABBREVIATION
    assert item.pronunciation == "tebememe"


def test_proper_noun_fallback():
    r = ProperNounRecognizer()
    assert r.matches("Blah-Foo'ya")
    assert not r.matches("Blah-Foo")
    assert not r.matches("blah'ya")
    assert not r.matches("TBMM'ye")
    item = r.synthesize("Blah-Foo'ya")
    assert item.secondary_pos is SecondaryPos.PROPER_NOUN
    assert item.lemma == "Blah-Foo"
