"""
Dictionary items and the root lexicon they are looked up in.

Usage:
    from turkmorph.lexicon import DictionaryItem, PrimaryPos, RootLexicon

    item = DictionaryItem("kitap", "kitap", PrimaryPos.NOUN)
    lex = RootLexicon([item])
    lex.get_matching_items("kitap")     # (item,)
"""

from __future__ import annotations

import enum
import logging
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


class _ShortNamed(enum.Enum):
    """Enum whose value is the short name used in dictionary files."""

    @classmethod
    def from_short(cls, name: str):
        name = name.strip()
        for member in cls:
            if member.value == name:
                return member
        raise ValueError(f"Unknown {cls.__name__} {name!r}")

    def __str__(self) -> str:
        return self.value


class PrimaryPos(_ShortNamed):
    NOUN = "Noun"
    ADJECTIVE = "Adj"
    ADVERB = "Adv"
    CONJUNCTION = "Conj"
    INTERJECTION = "Interj"
    VERB = "Verb"
    PRONOUN = "Pron"
    NUMERAL = "Num"
    DETERMINER = "Det"
    POSTPOSITIVE = "Postp"
    QUESTION = "Ques"
    PUNCTUATION = "Punc"
    ABBREVIATION = "Abbrv"


class SecondaryPos(_ShortNamed):
    NONE = "None"
    PROPER_NOUN = "Prop"
    CARDINAL = "Card"
    ORDINAL = "Ord"
    DISTRIBUTION = "Dist"
    REAL = "Real"
    RANGE = "Range"
    RATIO = "Ratio"
    PERCENTAGE = "Percentage"
    ROMAN_NUMERAL = "RomanNumeral"
    DATE = "Date"
    CLOCK = "Clock"
    TIME = "Time"
    EMOTICON = "Emoticon"
    ABBREVIATION = "Abbreviation"
    PERSONAL = "Pers"
    DEMONSTRATIVE = "Demons"
    QUANTITATIVE = "Quant"
    QUESTION = "Ques"
    REFLEXIVE = "Reflex"


class RootAttribute(_ShortNamed):
    VOICING = "Voicing"
    NO_VOICING = "NoVoicing"
    INVERSE_HARMONY = "InverseHarmony"
    DOUBLING = "Doubling"
    LAST_VOWEL_DROP = "LastVowelDrop"
    PROGRESSIVE_VOWEL_DROP = "ProgressiveVowelDrop"
    AORIST_A = "Aorist_A"
    AORIST_I = "Aorist_I"
    NO_SUFFIX = "NoSuffix"


_VERB_ONLY_ATTRIBUTES = frozenset({
    RootAttribute.AORIST_A,
    RootAttribute.AORIST_I,
    RootAttribute.PROGRESSIVE_VOWEL_DROP,
})

_NUMERAL_SECONDARIES = frozenset({
    SecondaryPos.CARDINAL,
    SecondaryPos.ORDINAL,
    SecondaryPos.DISTRIBUTION,
    SecondaryPos.REAL,
    SecondaryPos.ROMAN_NUMERAL,
})


@dataclass(frozen=True, slots=True)
class DictionaryItem:
    """A root the analyzer can start from.

    ``root`` is the normalized lookup key; ``pronunciation`` is what vowel
    harmony and voicing are computed from (it defaults to ``root``, and
    differs for numerals like ``XXIV`` → ``dört`` or abbreviations).
    Synthesized items come from token recognizers, not from a lexicon.
    """

    lemma: str
    root: str
    primary_pos: PrimaryPos
    secondary_pos: SecondaryPos = SecondaryPos.NONE
    attributes: frozenset[RootAttribute] = frozenset()
    pronunciation: str = ""
    synthesized: bool = False

    def __post_init__(self) -> None:
        if not self.lemma or not self.root:
            raise ValueError("Dictionary item needs a non-empty lemma and root")
        attrs = frozenset(self.attributes)
        object.__setattr__(self, "attributes", attrs)
        if not self.pronunciation:
            object.__setattr__(self, "pronunciation", self.root)

        if RootAttribute.VOICING in attrs and RootAttribute.NO_VOICING in attrs:
            raise ValueError(f"{self.lemma!r}: Voicing and NoVoicing are exclusive")
        if self.primary_pos is not PrimaryPos.VERB and attrs & _VERB_ONLY_ATTRIBUTES:
            bad = ", ".join(sorted(a.value for a in attrs & _VERB_ONLY_ATTRIBUTES))
            raise ValueError(f"{self.lemma!r}: {bad} only applies to verbs")
        if self.secondary_pos in _NUMERAL_SECONDARIES and self.primary_pos is not PrimaryPos.NUMERAL:
            raise ValueError(
                f"{self.lemma!r}: secondary {self.secondary_pos.value} requires Num"
            )
        if self.secondary_pos is SecondaryPos.PROPER_NOUN and self.primary_pos is not PrimaryPos.NOUN:
            raise ValueError(f"{self.lemma!r}: proper nouns must be nouns")

    @property
    def id(self) -> str:
        parts = [self.lemma, self.primary_pos.value]
        if self.secondary_pos is not SecondaryPos.NONE:
            parts.append(self.secondary_pos.value)
        return "_".join(parts)

    def has_attribute(self, attribute: RootAttribute) -> bool:
        return attribute in self.attributes

    @property
    def is_proper_noun(self) -> bool:
        return self.secondary_pos is SecondaryPos.PROPER_NOUN

    @property
    def accepts_apostrophe(self) -> bool:
        """Proper nouns, abbreviations and recognized tokens: Ankara'da, TBMM'ye, 20:30'da."""
        return (
            self.synthesized
            or self.is_proper_noun
            or self.primary_pos is PrimaryPos.ABBREVIATION
        )

    def __str__(self) -> str:
        pos = self.primary_pos.value
        if self.secondary_pos is not SecondaryPos.NONE:
            pos += f",{self.secondary_pos.value}"
        return f"[{self.lemma}:{pos}]"


class RootLexicon:
    """An immutable set of dictionary items, indexed by root.

    Items are unique by ``id``; a repeated id keeps the first item.
    """

    def __init__(self, items: Iterable[DictionaryItem] = ()):
        by_id: dict[str, DictionaryItem] = {}
        by_root: dict[str, list[DictionaryItem]] = {}
        for item in items:
            if item.id in by_id:
                logger.warning("Duplicate dictionary item %s ignored", item.id)
                continue
            by_id[item.id] = item
            by_root.setdefault(item.root, []).append(item)

        self._by_id = by_id
        self._by_root = {root: tuple(found) for root, found in by_root.items()}

    @classmethod
    def empty(cls) -> RootLexicon:
        return cls()

    # ── Lookup ───────────────────────────────────────────────────────────

    def get_matching_items(self, root: str) -> tuple[DictionaryItem, ...]:
        return self._by_root.get(root, ())

    def get_item_by_id(self, item_id: str) -> DictionaryItem | None:
        return self._by_id.get(item_id)

    def is_empty(self) -> bool:
        return not self._by_id

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator[DictionaryItem]:
        return iter(self._by_id.values())

    def __contains__(self, item: object) -> bool:
        if isinstance(item, DictionaryItem):
            return self._by_id.get(item.id) == item
        return item in self._by_id

    def __repr__(self) -> str:
        return f"RootLexicon({len(self)} items)"

    def summary(self) -> str:
        lines = [
            f"Items:          {len(self._by_id)}",
            f"Unique roots:   {len(self._by_root)}",
            "",
            "POS breakdown:",
        ]
        pos_counts = Counter(item.primary_pos.value for item in self._by_id.values())
        for pos, count in pos_counts.most_common():
            lines.append(f"  {pos:12s} {count:6d}")
        return "\n".join(lines)
