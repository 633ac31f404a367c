"""
Turkish number words and Roman numerals.

Suffixes attach to how a number is read, not to its digits: "24'ü" is read
"yirmi dördü", so the analyzer needs the last word of the reading.

Usage:
    from turkmorph.numbers import to_words, roman_to_int, last_word

    to_words(2014)            # "iki bin on dört"
    to_ordinal_words(4)       # "dördüncü"
    roman_to_int("XXIV")      # 24
"""

from __future__ import annotations

import re

from turkmorph.lexicon import RootAttribute
from turkmorph.phonology import Phonetics, render

_ONES = ("", "bir", "iki", "üç", "dört", "beş", "altı", "yedi", "sekiz", "dokuz")
_TENS = ("", "on", "yirmi", "otuz", "kırk", "elli", "altmış", "yetmiş", "seksen", "doksan")
_SCALES = ("", "bin", "milyon", "milyar", "trilyon", "katrilyon", "kentilyon")

MAX_DIGITS = 3 * len(_SCALES)

# Attributes of number words, for when the lexicon has no entry of its own
DEFAULT_ATTRIBUTES: dict[str, frozenset[RootAttribute]] = {
    "dört": frozenset({RootAttribute.VOICING}),
}

_ROMAN_RE = re.compile(r"M{0,3}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})")
_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def _hundreds(n: int) -> list[str]:
    words = []
    h, rest = divmod(n, 100)
    if h:
        # "yüz", never "bir yüz"
        words.extend(["yüz"] if h == 1 else [_ONES[h], "yüz"])
    t, o = divmod(rest, 10)
    if t:
        words.append(_TENS[t])
    if o:
        words.append(_ONES[o])
    return words


def to_words(n: int) -> str:
    """Cardinal reading of an integer."""
    if n == 0:
        return "sıfır"
    if n < 0:
        return "eksi " + to_words(-n)
    if len(str(n)) > MAX_DIGITS:
        raise ValueError(f"Number too large to read: {n}")

    groups = []
    while n:
        n, group = divmod(n, 1000)
        groups.append(group)

    words: list[str] = []
    for scale in range(len(groups) - 1, -1, -1):
        group = groups[scale]
        if not group:
            continue
        if scale == 1 and group == 1:
            words.append("bin")  # "bin", never "bir bin"
            continue
        words.extend(_hundreds(group))
        if scale:
            words.append(_SCALES[scale])
    return " ".join(words)


def ordinal_of(word: str) -> str:
    """dört → dördüncü, iki → ikinci, on → onuncu."""
    if word == "dört":
        return "dördüncü"
    suffix = render("(I)ncI", Phonetics.of(word))[0].surface
    return word + suffix


def to_ordinal_words(n: int) -> str:
    words = to_words(n).split(" ")
    words[-1] = ordinal_of(words[-1])
    return " ".join(words)


def decimal_to_words(integer_part: str, fraction_part: str) -> str:
    """3,5 → "üç virgül beş".  Leading zeros of the fraction are read one by one."""
    words = [to_words(int(integer_part)), "virgül"]
    stripped = fraction_part.lstrip("0")
    words.extend(["sıfır"] * (len(fraction_part) - len(stripped)))
    if stripped:
        words.append(to_words(int(stripped)))
    return " ".join(words)


def last_word(text: str) -> str:
    return text.rsplit(" ", 1)[-1]


# ── Roman numerals ───────────────────────────────────────────────────────────

def is_roman(text: str) -> bool:
    return bool(text) and _ROMAN_RE.fullmatch(text) is not None


def roman_to_int(text: str) -> int:
    if not is_roman(text):
        raise ValueError(f"Not a Roman numeral: {text!r}")
    total = 0
    for i, ch in enumerate(text):
        value = _ROMAN_VALUES[ch]
        if i + 1 < len(text) and _ROMAN_VALUES[text[i + 1]] > value:
            total -= value
        else:
            total += value
    return total
