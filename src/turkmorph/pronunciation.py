"""
Guess how an abbreviation is read aloud, so suffixes can harmonize with it.

Abbreviations without a vowel are spelled out letter by letter:
TBMM is read "tebememe", so it takes "TBMM'ye" and "TBMM'den".
"""

from __future__ import annotations

from turkmorph.alphabet import contains_vowel, turkish_lower


_LETTER_NAMES: dict[str, str] = {
    "a": "a", "b": "be", "c": "ce", "ç": "çe", "d": "de", "e": "e", "f": "fe",
    "g": "ge", "ğ": "yumuşakge", "h": "he", "ı": "ı", "i": "i", "j": "je",
    "k": "ke", "l": "le", "m": "me", "n": "ne", "o": "o", "ö": "ö", "p": "pe",
    "q": "kü", "r": "re", "s": "se", "ş": "şe", "t": "te", "u": "u", "ü": "ü",
    "v": "ve", "w": "dabılyu", "x": "iks", "y": "ye", "z": "ze",
}


def spell_out(text: str) -> str:
    """Concatenated Turkish letter names; characters without a name are dropped."""
    return "".join(_LETTER_NAMES.get(ch, "") for ch in turkish_lower(text))


def guess_pronunciation(text: str) -> str:
    """Read words with a vowel as written, spell out the rest."""
    lowered = turkish_lower(text)
    letters = "".join(ch for ch in lowered if ch.isalpha())
    if contains_vowel(letters):
        return letters
    return spell_out(letters) or lowered
