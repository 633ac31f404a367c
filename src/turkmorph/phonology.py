"""
Phonetic context and suffix template rendering.

A suffix is written once as a template and rendered against the phonetic
context of everything before it:

    A     a / e          by vowel frontness         (lAr → lar, ler)
    I     ı / i / u / ü  by frontness and rounding  ((s)I → sı, si, su, sü)
    D     d / t          t after a voiceless consonant
    C     c / ç          ç after a voiceless consonant
    (y)   buffer letter, kept only after a vowel     ((y)A → ya, a)
    (n)   "
    (s)   "
    (I)   buffer vowel, kept only after a consonant  ((I)m → ım, m)
    ~k    final k that becomes ğ before a vowel-initial suffix

Usage:
    from turkmorph.phonology import Phonetics, render

    ctx = Phonetics.of("kitap")
    render("DA", ctx)       # [Rendering("ta", None)]
    render("CI~k", ctx)     # [Rendering("çık", CONSONANT), Rendering("çığ", VOWEL)]
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from functools import lru_cache

from turkmorph.alphabet import (
    FRONT_VOWELS,
    ROUNDED_VOWELS,
    VOICELESS_CONSONANTS,
    VOWELS,
    last_letter,
    last_vowel,
)


# Inverse harmony roots (saat → saati) behave as if their last vowel were front.
_FRONTED = {"a": "e", "ı": "i", "o": "ö", "u": "ü", "â": "e", "û": "ü"}

# Harmony of a vowel-less pronunciation (rare once abbreviations are guessed)
_DEFAULT_VOWEL = "e"


class Expectation(enum.Enum):
    """What the next suffix must start with after a voicing-sensitive ending."""

    VOWEL = "vowel"
    CONSONANT = "consonant"

    def allows(self, surface: str) -> bool:
        starts_with_vowel = surface[0] in VOWELS
        return starts_with_vowel if self is Expectation.VOWEL else not starts_with_vowel


@dataclass(frozen=True, slots=True)
class Phonetics:
    """The part of a word's sound that suffix selection depends on."""

    vowel: str  # harmony-effective last vowel
    letter: str | None  # last letter, None for an empty pronunciation

    @classmethod
    def of(cls, text: str, *, inverse_harmony: bool = False) -> Phonetics:
        vowel = last_vowel(text) or _DEFAULT_VOWEL
        if inverse_harmony:
            vowel = _FRONTED.get(vowel, vowel)
        return cls(vowel=vowel, letter=last_letter(text))

    def extend(self, surface: str) -> Phonetics:
        if not surface:
            return self
        return Phonetics(
            vowel=last_vowel(surface) or self.vowel,
            letter=last_letter(surface) or self.letter,
        )

    @property
    def frontal(self) -> bool:
        return self.vowel in FRONT_VOWELS

    @property
    def rounded(self) -> bool:
        return self.vowel in ROUNDED_VOWELS

    @property
    def ends_with_vowel(self) -> bool:
        return self.letter is not None and self.letter in VOWELS

    @property
    def ends_voiceless(self) -> bool:
        return self.letter is not None and self.letter in VOICELESS_CONSONANTS


@dataclass(frozen=True, slots=True)
class Rendering:
    surface: str
    expects: Expectation | None = None


# ── Template compilation ─────────────────────────────────────────────────────

_BUFFERS = {"(y)": "y", "(n)": "n", "(s)": "s"}


@lru_cache(maxsize=None)
def _tokenize(template: str) -> tuple[str, ...]:
    """Split a template into single-letter tokens and bracketed buffers."""
    tokens = []
    i = 0
    while i < len(template):
        if template.startswith("(", i):
            end = template.index(")", i)
            tokens.append(template[i:end + 1])
            i = end + 1
        elif template.startswith("~k", i):
            if i + 2 != len(template):
                raise ValueError(f"'~k' must end the template: {template!r}")
            tokens.append("~k")
            i += 2
        else:
            tokens.append(template[i])
            i += 1
    return tuple(tokens)


def _harmonic_i(ctx: Phonetics) -> str:
    if ctx.frontal:
        return "ü" if ctx.rounded else "i"
    return "u" if ctx.rounded else "ı"


def render(template: str, context: Phonetics) -> list[Rendering]:
    """Render a suffix template after the given context.

    Returns one rendering, or two when the template ends in ``~k``.
    """
    out: list[str] = []
    ctx = context
    for token in _tokenize(template):
        if token == "A":
            ch = "e" if ctx.frontal else "a"
        elif token == "I":
            ch = _harmonic_i(ctx)
        elif token == "D":
            ch = "t" if ctx.ends_voiceless else "d"
        elif token == "C":
            ch = "ç" if ctx.ends_voiceless else "c"
        elif token in _BUFFERS:
            if not ctx.ends_with_vowel:
                continue
            ch = _BUFFERS[token]
        elif token == "(I)":
            if ctx.ends_with_vowel:
                continue
            ch = _harmonic_i(ctx)
        elif token == "~k":
            text = "".join(out)
            return [
                Rendering(text + "k", Expectation.CONSONANT),
                Rendering(text + "ğ", Expectation.VOWEL),
            ]
        else:
            ch = token
        out.append(ch)
        ctx = ctx.extend(ch)
    return [Rendering("".join(out))]
