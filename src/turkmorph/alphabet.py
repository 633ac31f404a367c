"""
Turkish letters and the character-level helpers the analyzer is built on.

Everything here is length preserving: a normalized string has exactly one
character per character of the original, so offsets found on the normalized
form can be used to slice the text the user typed.

Usage:
    from turkmorph.alphabet import normalize_for_analysis, last_vowel

    normalize_for_analysis("TÜBİTAK’a")   # "tübitak'a"
    last_vowel("kitap")                   # "a"
"""

from __future__ import annotations


VOWELS = frozenset("aeıioöuüâîû")
FRONT_VOWELS = frozenset("eiöüî")
ROUNDED_VOWELS = frozenset("oöuüû")

# Consonants that devoice a following D or C (the "fıstıkçı şahap" letters)
VOICELESS_CONSONANTS = frozenset("çfhkpsşt")
STOP_CONSONANTS = frozenset("pçtkg")

# Final consonant voicing before a vowel-initial suffix: kitap → kitabı
VOICING_MAP: dict[str, str] = {"p": "b", "ç": "c", "t": "d", "k": "ğ", "g": "ğ"}

_CIRCUMFLEX_MAP = str.maketrans({"â": "a", "î": "i", "û": "u", "Â": "A", "Î": "İ", "Û": "U"})

# Python's str.lower() maps "I" to "i" and "İ" to two characters.
_TURKISH_LOWER = {"I": "ı", "İ": "i"}
_TURKISH_UPPER = {"ı": "I", "i": "İ"}

APOSTROPHE = "'"
_APOSTROPHE_VARIANTS = frozenset("’‘`´ʼ′")


# ── Case ─────────────────────────────────────────────────────────────────────

def turkish_lower(text: str) -> str:
    """Lowercase with Turkish dotted/dotless i rules, one char per char."""
    out = []
    for ch in text:
        low = _TURKISH_LOWER.get(ch)
        if low is None:
            low = ch.lower()
            if len(low) != 1:
                low = ch
        out.append(low)
    return "".join(out)


def turkish_upper(text: str) -> str:
    out = []
    for ch in text:
        up = _TURKISH_UPPER.get(ch)
        if up is None:
            up = ch.upper()
            if len(up) != 1:
                up = ch
        out.append(up)
    return "".join(out)


def is_capitalized(text: str) -> bool:
    return bool(text) and text[0].isupper()


# ── Normalization ────────────────────────────────────────────────────────────

def normalize_circumflex(text: str) -> str:
    """zekâ → zeka.  The circumflex never changes which root is meant."""
    return text.translate(_CIRCUMFLEX_MAP)


def normalize_apostrophes(text: str) -> str:
    return "".join(APOSTROPHE if ch in _APOSTROPHE_VARIANTS else ch for ch in text)


def normalize_for_analysis(text: str) -> str:
    """Lowercase, strip circumflexes and unify apostrophes."""
    return normalize_circumflex(turkish_lower(normalize_apostrophes(text)))


# ── Letter classes ───────────────────────────────────────────────────────────

def is_vowel(ch: str) -> bool:
    return ch in VOWELS


def contains_vowel(text: str) -> bool:
    return any(ch in VOWELS for ch in text)


def last_vowel(text: str) -> str | None:
    for ch in reversed(text):
        if ch in VOWELS:
            return ch
    return None


def last_letter(text: str) -> str | None:
    for ch in reversed(text):
        if ch.isalpha():
            return ch
    return None


def vowel_count(text: str) -> int:
    """Number of vowels, which in Turkish is the syllable count."""
    return sum(1 for ch in text if ch in VOWELS)


def voice_last_letter(text: str) -> str:
    """Voice a final stop consonant: kitap → kitab, renk → reng.

    Returns the text unchanged when the last letter cannot be voiced.
    """
    if not text:
        return text
    last = text[-1]
    if last not in VOICING_MAP:
        return text
    if last == "k" and len(text) > 1 and text[-2] == "n":
        return text[:-1] + "g"
    return text[:-1] + VOICING_MAP[last]
