"""
Stem generation and the stem matcher.

A dictionary item may surface with more than one stem: "kitap" appears as
"kitap" before a consonant (kitapta) and as "kitab" before a vowel (kitabı).
Every item's stems are generated once; the matcher then finds every stem that
is a prefix of the word being analyzed.

Usage:
    from turkmorph.stems import StemMatcher

    matcher = StemMatcher(lexicon)
    for m in matcher.match("kitabı"):
        print(m.stem.surface, m.end)      # kitab 5
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from turkmorph.alphabet import (
    VOICING_MAP,
    contains_vowel,
    is_vowel,
    voice_last_letter,
)
from turkmorph.diacritics import DiacriticEquivalence
from turkmorph.lexicon import DictionaryItem, PrimaryPos, RootAttribute, RootLexicon
from turkmorph.phonology import Expectation, Phonetics


@dataclass(frozen=True, slots=True)
class Stem:
    """One way a dictionary item can begin a word."""

    surface: str  # normalized form matched against the input
    item: DictionaryItem
    phonetics: Phonetics
    expects: Expectation | None = None
    no_suffix: bool = False  # dotted abbreviations: "dr."
    first_morpheme: str | None = None  # vowel-dropped verb stems only take Prog1

    def __repr__(self) -> str:
        return f"Stem({self.surface!r} ← {self.item})"


@dataclass(frozen=True, slots=True)
class StemMatch:
    stem: Stem
    end: int  # offset in the word right after the stem


def _drop_last_vowel(text: str) -> str | None:
    """ağız → ağz, burun → burn."""
    if len(text) < 3 or not is_vowel(text[-2]) or is_vowel(text[-1]):
        return None
    return text[:-2] + text[-1]


class StemGenerator:
    """Derives the stems of a dictionary item from its attributes.

    When the pronunciation is the root itself, sound changes apply to both.
    Otherwise (numerals, spelled-out abbreviations) the written form stays as
    it is and only the pronunciation changes: XXIV'ten but dördü.
    """

    def generate(self, item: DictionaryItem) -> list[Stem]:
        root = item.root
        pron = item.pronunciation
        tied = pron == root
        inverse = item.has_attribute(RootAttribute.INVERSE_HARMONY)
        no_suffix = item.has_attribute(RootAttribute.NO_SUFFIX)

        def make(surface: str, pronunciation: str, expects: Expectation | None = None) -> Stem:
            return Stem(
                surface=surface,
                item=item,
                phonetics=Phonetics.of(pronunciation, inverse_harmony=inverse),
                expects=expects,
                no_suffix=no_suffix,
            )

        stems: list[Stem] = []
        modified = self._modified_pronunciation(item)
        if modified is not None and not no_suffix:
            stems.append(make(root, pron, Expectation.CONSONANT))
            surface = self._modify(item, root) if tied else root
            stems.append(make(surface, modified, Expectation.VOWEL))
        else:
            stems.append(make(root, pron))

        if (
            item.has_attribute(RootAttribute.PROGRESSIVE_VOWEL_DROP)
            and len(root) > 1
            and is_vowel(root[-1])
        ):
            dropped = root[:-1]
            harmony = Phonetics.of(pron, inverse_harmony=inverse)
            if contains_vowel(dropped):
                harmony = Phonetics.of(dropped, inverse_harmony=inverse)
            stems.append(Stem(
                surface=dropped,
                item=item,
                phonetics=Phonetics(vowel=harmony.vowel, letter=dropped[-1]),
                first_morpheme="Prog1",
            ))

        if item.primary_pos is PrimaryPos.ABBREVIATION and not root.endswith("."):
            stems.append(Stem(
                surface=root + ".",
                item=item,
                phonetics=Phonetics.of(pron, inverse_harmony=inverse),
                no_suffix=True,
            ))
        return stems

    def _modified_pronunciation(self, item: DictionaryItem) -> str | None:
        pron = item.pronunciation
        if not pron:
            return None
        if item.has_attribute(RootAttribute.VOICING) and pron[-1] in VOICING_MAP:
            return voice_last_letter(pron)
        if item.has_attribute(RootAttribute.DOUBLING):
            return pron + pron[-1]
        if item.has_attribute(RootAttribute.LAST_VOWEL_DROP):
            return _drop_last_vowel(pron)
        return None

    def _modify(self, item: DictionaryItem, text: str) -> str:
        if item.has_attribute(RootAttribute.VOICING):
            return voice_last_letter(text)
        if item.has_attribute(RootAttribute.DOUBLING):
            return text + text[-1]
        return _drop_last_vowel(text) or text


class StemMatcher:
    """Finds lexicon stems that begin a normalized word.

    Exact matches come first.  With diacritic tolerance on, stems whose
    ASCII-folded form matches are added after them, so tolerance only ever
    adds candidates.
    """

    def __init__(
        self,
        lexicon: RootLexicon,
        equivalence: DiacriticEquivalence | None = None,
        generator: StemGenerator | None = None,
    ):
        self.equivalence = equivalence or DiacriticEquivalence(enabled=False)
        self.generator = generator or StemGenerator()
        self._exact: dict[str, list[Stem]] = {}
        self._folded: dict[str, list[Stem]] = {}
        self.max_length = 0
        self._index(lexicon)

    def _index(self, items: Iterable[DictionaryItem]) -> None:
        for item in items:
            for stem in self.generator.generate(item):
                self._exact.setdefault(stem.surface, []).append(stem)
                if self.equivalence.enabled:
                    key = self.equivalence.key(stem.surface)
                    self._folded.setdefault(key, []).append(stem)
                self.max_length = max(self.max_length, len(stem.surface))

    @property
    def stem_count(self) -> int:
        return sum(len(stems) for stems in self._exact.values())

    def match(self, word: str) -> list[StemMatch]:
        """All (stem, end) pairs whose stem is a prefix of ``word``."""
        matches: list[StemMatch] = []
        limit = min(len(word), self.max_length)
        for end in range(1, limit + 1):
            prefix = word[:end]
            exact = self._exact.get(prefix, ())
            matches.extend(StemMatch(stem, end) for stem in exact)
            if self.equivalence.enabled:
                for stem in self._folded.get(self.equivalence.key(prefix), ()):
                    if stem.surface != prefix:
                        matches.append(StemMatch(stem, end))
        return matches
