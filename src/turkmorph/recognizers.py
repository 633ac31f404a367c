"""
Recognizers for tokens that no lexicon lists: numerals written in digits or
Roman letters, dates, clock times, ratios, percentages, emoticons, and
apostrophe-suffixed abbreviations or names.

A recognizer looks at the part of a word before its first apostrophe (the
whole word when there is none) and, when it matches, synthesizes a
DictionaryItem for it.  The pronunciation of the synthesized item is the last
word of how the token is read aloud, so that ordinary suffix rules apply:
"XXIV'ten" is read "yirmi dört-ten".

Usage:
    from turkmorph.recognizers import default_recognizers

    for r in default_recognizers(lexicon):
        if r.matches("20:30'da"):
            item = r.synthesize("20:30'da")    # [20:30:Noun,Clock]
"""

from __future__ import annotations

import re

from turkmorph.alphabet import APOSTROPHE, is_capitalized, normalize_apostrophes, normalize_for_analysis, turkish_upper
from turkmorph.lexicon import (
    DictionaryItem,
    PrimaryPos,
    RootAttribute,
    RootLexicon,
    SecondaryPos,
)
from turkmorph.numbers import (
    DEFAULT_ATTRIBUTES,
    MAX_DIGITS,
    decimal_to_words,
    is_roman,
    last_word,
    roman_to_int,
    to_ordinal_words,
    to_words,
)
from turkmorph.pronunciation import guess_pronunciation

EMOTICONS = frozenset({
    ":)", ":-)", ":]", "=)", ":(", ":-(", ":[", "=(", ";)", ";-)", ":D", ":-D",
    "=D", ":P", ":-P", ":p", ":-p", ":O", ":-O", ":o", ":*", ":-*", ":/", ":-/",
    ":|", ":-|", ":'(", "<3", "</3", "XD", "xD", "^^", "^_^", "-_-", "o_O", "O_o",
})


class TokenRecognizer:
    """Base class: split, test and synthesize.

    Subclasses implement ``_read(root)`` returning the spoken form of a root,
    or None when the root is not theirs.  ``fallback`` recognizers are only
    consulted when nothing else produced an analysis.
    """

    primary_pos: PrimaryPos = PrimaryPos.NOUN
    secondary_pos: SecondaryPos = SecondaryPos.NONE
    fallback: bool = False

    def __init__(self, lexicon: RootLexicon | None = None):
        self.lexicon = lexicon or RootLexicon.empty()

    @staticmethod
    def split(word: str) -> tuple[str, str]:
        """(root, rest) at the first apostrophe; rest keeps no apostrophe."""
        word = normalize_apostrophes(word)
        root, sep, rest = word.partition(APOSTROPHE)
        return root, rest

    def matches(self, word: str) -> bool:
        root, _ = self.split(word)
        return bool(root) and self._read(root) is not None

    def synthesize(self, word: str) -> DictionaryItem:
        root, _ = self.split(word)
        reading = self._read(root)
        if reading is None:
            raise ValueError(f"{type(self).__name__} does not match {word!r}")
        pronunciation = last_word(reading)
        return DictionaryItem(
            lemma=root,
            root=normalize_for_analysis(root),
            primary_pos=self.primary_pos,
            secondary_pos=self._secondary(root),
            attributes=self._attributes(pronunciation),
            pronunciation=pronunciation,
            synthesized=True,
        )

    def _read(self, root: str) -> str | None:
        raise NotImplementedError

    def _secondary(self, root: str) -> SecondaryPos:
        return self.secondary_pos

    def _attributes(self, pronunciation: str) -> frozenset[RootAttribute]:
        """Voicing and friends come from the lexicon's number words."""
        for item in self.lexicon.get_matching_items(pronunciation):
            if item.primary_pos is PrimaryPos.NUMERAL:
                return item.attributes
        return DEFAULT_ATTRIBUTES.get(pronunciation, frozenset())

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class RomanNumeralRecognizer(TokenRecognizer):
    """IV, XXIV'ten, and ordinals with a trailing dot: XXIV."""

    primary_pos = PrimaryPos.NUMERAL
    secondary_pos = SecondaryPos.ROMAN_NUMERAL

    def _read(self, root: str) -> str | None:
        ordinal = root.endswith(".")
        numeral = root[:-1] if ordinal else root
        if not is_roman(numeral):
            return None
        value = roman_to_int(numeral)
        return to_ordinal_words(value) if ordinal else to_words(value)


class DateRecognizer(TokenRecognizer):
    """1.1.2014, 01/02/2014'te: read by the year."""

    secondary_pos = SecondaryPos.DATE
    _pattern = re.compile(r"(\d{1,2})([./])(\d{1,2})\2(\d{4})")

    def _read(self, root: str) -> str | None:
        m = self._pattern.fullmatch(root)
        if m is None:
            return None
        day, month, year = int(m.group(1)), int(m.group(3)), int(m.group(4))
        if not (1 <= day <= 31 and 1 <= month <= 12):
            return None
        return " ".join([to_words(day), to_words(month), to_words(year)])


class ClockRecognizer(TokenRecognizer):
    """20:30'da, read as "yirmi otuz"; whole hours by the hour."""

    secondary_pos = SecondaryPos.CLOCK
    _pattern = re.compile(r"(\d{1,2}):(\d{2})")

    def _read(self, root: str) -> str | None:
        m = self._pattern.fullmatch(root)
        if m is None:
            return None
        hour, minute = int(m.group(1)), int(m.group(2))
        if hour > 23 or minute > 59:
            return None
        if minute == 0:
            return to_words(hour)
        return f"{to_words(hour)} {to_words(minute)}"


class RatioRecognizer(TokenRecognizer):
    """1/2 is read "ikide bir", so the numerator gives the ending."""

    secondary_pos = SecondaryPos.RATIO
    _pattern = re.compile(r"(\d+)/(\d+)")

    def _read(self, root: str) -> str | None:
        m = self._pattern.fullmatch(root)
        if m is None or len(m.group(1)) > MAX_DIGITS or len(m.group(2)) > MAX_DIGITS:
            return None
        return f"{to_words(int(m.group(2)))}de {to_words(int(m.group(1)))}"


class PercentageRecognizer(TokenRecognizer):
    """%2, %2'si, %2.2'si, %2,2'si."""

    secondary_pos = SecondaryPos.PERCENTAGE
    _pattern = re.compile(r"%(\d+)(?:[.,](\d+))?")

    def _read(self, root: str) -> str | None:
        m = self._pattern.fullmatch(root)
        if m is None or len(m.group(1)) > MAX_DIGITS or len(m.group(2) or "") > MAX_DIGITS:
            return None
        if m.group(2):
            return "yüzde " + decimal_to_words(m.group(1), m.group(2))
        return "yüzde " + to_words(int(m.group(1)))


class NumberRecognizer(TokenRecognizer):
    """Digits: 24'ü, -3, 1.000'den, 3,5, and ordinals with a trailing dot: 24."""

    primary_pos = PrimaryPos.NUMERAL
    _pattern = re.compile(r"([+-]?)(\d{1,3}(?:\.\d{3})+|\d+)(?:,(\d+))?(\.?)")

    def _parts(self, root: str):
        m = self._pattern.fullmatch(root)
        if m is None:
            return None
        sign, integer, fraction, dot = m.groups()
        integer = integer.replace(".", "")
        if len(integer) > MAX_DIGITS or len(fraction or "") > MAX_DIGITS or (fraction and dot):
            return None
        return sign, integer, fraction, dot

    def _read(self, root: str) -> str | None:
        parts = self._parts(root)
        if parts is None:
            return None
        sign, integer, fraction, dot = parts
        if fraction:
            reading = decimal_to_words(integer, fraction)
        elif dot:
            reading = to_ordinal_words(int(integer))
        else:
            reading = to_words(int(integer))
        return ("eksi " + reading) if sign == "-" else reading

    def _secondary(self, root: str) -> SecondaryPos:
        _, _, fraction, dot = self._parts(root)
        if fraction:
            return SecondaryPos.REAL
        if dot:
            return SecondaryPos.ORDINAL
        return SecondaryPos.CARDINAL


class EmoticonRecognizer(TokenRecognizer):
    primary_pos = PrimaryPos.PUNCTUATION
    secondary_pos = SecondaryPos.EMOTICON

    @staticmethod
    def split(word: str) -> tuple[str, str]:
        # ":'(" carries an apostrophe of its own
        return word, ""

    def _read(self, root: str) -> str | None:
        return "" if root in EMOTICONS else None

    def _attributes(self, pronunciation: str) -> frozenset[RootAttribute]:
        return frozenset()

    def synthesize(self, word: str) -> DictionaryItem:
        if word not in EMOTICONS:
            raise ValueError(f"Not an emoticon: {word!r}")
        return DictionaryItem(
            lemma=word,
            root=normalize_for_analysis(word),
            primary_pos=self.primary_pos,
            secondary_pos=self.secondary_pos,
            pronunciation=word,
            synthesized=True,
        )


# ── Fallbacks ────────────────────────────────────────────────────────────────

def _has_suffix(word: str) -> bool:
    _, rest = TokenRecognizer.split(word)
    return bool(rest)


def _is_all_caps(text: str) -> bool:
    letters = [ch for ch in text if ch.isalpha()]
    return len(letters) > 1 and turkish_upper(text) == text


class AbbreviationRecognizer(TokenRecognizer):
    """Unknown all-capital tokens followed by an apostrophe: TBMM'ye."""

    primary_pos = PrimaryPos.ABBREVIATION
    secondary_pos = SecondaryPos.ABBREVIATION
    fallback = True

    def matches(self, word: str) -> bool:
        return _has_suffix(word) and super().matches(word)

    def _read(self, root: str) -> str | None:
        if not _is_all_caps(root):
            return None
        return guess_pronunciation(root)

    def _attributes(self, pronunciation: str) -> frozenset[RootAttribute]:
        return frozenset()


class ProperNounRecognizer(TokenRecognizer):
    """Unknown capitalized names followed by an apostrophe: Blah-Foo'ya."""

    primary_pos = PrimaryPos.NOUN
    secondary_pos = SecondaryPos.PROPER_NOUN
    fallback = True

    def matches(self, word: str) -> bool:
        return _has_suffix(word) and super().matches(word)

    def _read(self, root: str) -> str | None:
        if not is_capitalized(root) or _is_all_caps(root):
            return None
        if not any(ch.isalpha() for ch in root):
            return None
        return guess_pronunciation(root)

    def _attributes(self, pronunciation: str) -> frozenset[RootAttribute]:
        return frozenset()


def default_recognizers(lexicon: RootLexicon | None = None) -> tuple[TokenRecognizer, ...]:
    """The recognizer chain, in the order it is consulted."""
    return (
        RomanNumeralRecognizer(lexicon),
        DateRecognizer(lexicon),
        ClockRecognizer(lexicon),
        RatioRecognizer(lexicon),
        PercentageRecognizer(lexicon),
        NumberRecognizer(lexicon),
        EmoticonRecognizer(lexicon),
        AbbreviationRecognizer(lexicon),
        ProperNounRecognizer(lexicon),
    )
