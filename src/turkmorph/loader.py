"""
Load dictionary lines into a RootLexicon.

Each line holds a lemma, optionally followed by a bracketed block:

    kitap
    dört [P:Num,Card;A:Voicing]
    Tübitak [P:Abbrv]
    TBMM [P:Abbrv;Pr:tebememe]
    gelmek

``P:`` gives the primary and optional secondary category, ``A:`` the
morphophonemic attributes and ``Pr:`` a pronunciation.  Lines starting with
``##`` and blank lines are skipped.  Missing information is inferred the way
Turkish dictionaries usually leave it implicit: verbs end in -mak/-mek,
capitalized nouns are proper nouns, polysyllabic nouns and adjectives ending in
a stop consonant voice it (kitap → kitabı).

Usage:
    from turkmorph.loader import load_lines, load_files

    lex = load_lines(["kitap", "dört [P:Num,Card;A:Voicing]"])
    lex = load_files("data/lexicon.txt")
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from turkmorph.alphabet import (
    STOP_CONSONANTS,
    is_capitalized,
    is_vowel,
    normalize_for_analysis,
    vowel_count,
)
from turkmorph.lexicon import (
    DictionaryItem,
    PrimaryPos,
    RootAttribute,
    RootLexicon,
    SecondaryPos,
)
from turkmorph.pronunciation import guess_pronunciation

logger = logging.getLogger(__name__)


_LINE_RE = re.compile(r"^(?P<word>[^\[\]]+?)\s*(?:\[(?P<meta>[^\[\]]*)\])?\s*$")

# Monosyllabic verbs taking the -Ir aorist (gelir, alır); the rest take -Ar.
AORIST_I_ROOTS = frozenset({
    "al", "bil", "bul", "dur", "gel", "gör", "kal", "ol", "öl", "san", "var", "ver", "vur",
})

_INFINITIVE_ENDINGS = ("mak", "mek")


def _parse_meta(meta: str, line: str) -> dict[str, str]:
    fields: dict[str, str] = {}
    for chunk in meta.split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        if ":" not in chunk:
            raise ValueError(f"Malformed attribute block {chunk!r} in line {line!r}")
        key, value = chunk.split(":", 1)
        key = key.strip()
        if key not in ("P", "A", "Pr"):
            raise ValueError(f"Unknown key {key!r} in line {line!r}")
        fields[key] = value.strip()
    return fields


def _infer_pos(word: str) -> tuple[PrimaryPos, SecondaryPos]:
    if is_capitalized(word):
        return PrimaryPos.NOUN, SecondaryPos.PROPER_NOUN
    lowered = normalize_for_analysis(word)
    if lowered.endswith(_INFINITIVE_ENDINGS) and len(lowered) > 3:
        return PrimaryPos.VERB, SecondaryPos.NONE
    return PrimaryPos.NOUN, SecondaryPos.NONE


def _infer_attributes(
    primary: PrimaryPos,
    secondary: SecondaryPos,
    pronunciation: str,
    explicit: set[RootAttribute],
) -> set[RootAttribute]:
    attrs = set(explicit)
    if primary in (PrimaryPos.NOUN, PrimaryPos.ADJECTIVE) and secondary is not SecondaryPos.PROPER_NOUN:
        if (
            pronunciation
            and pronunciation[-1] in STOP_CONSONANTS
            and vowel_count(pronunciation) > 1
            and RootAttribute.NO_VOICING not in attrs
        ):
            attrs.add(RootAttribute.VOICING)
    elif primary is PrimaryPos.VERB and pronunciation:
        if is_vowel(pronunciation[-1]):
            attrs.add(RootAttribute.PROGRESSIVE_VOWEL_DROP)
        elif not attrs & {RootAttribute.AORIST_A, RootAttribute.AORIST_I}:
            if vowel_count(pronunciation) == 1 and pronunciation not in AORIST_I_ROOTS:
                attrs.add(RootAttribute.AORIST_A)
            else:
                attrs.add(RootAttribute.AORIST_I)
    return attrs


def parse_line(line: str) -> DictionaryItem:
    """Parse one dictionary line.  Raises ValueError naming the line."""
    m = _LINE_RE.match(line.strip())
    if m is None:
        raise ValueError(f"Cannot parse dictionary line {line!r}")
    word = m.group("word").strip()
    fields = _parse_meta(m.group("meta") or "", line)

    if "P" in fields:
        names = [n for n in fields["P"].split(",") if n.strip()]
        if not names or len(names) > 2:
            raise ValueError(f"Bad P: block in line {line!r}")
        primary = PrimaryPos.from_short(names[0])
        secondary = SecondaryPos.from_short(names[1]) if len(names) == 2 else SecondaryPos.NONE
        if primary is PrimaryPos.NOUN and secondary is SecondaryPos.NONE and is_capitalized(word):
            secondary = SecondaryPos.PROPER_NOUN
    else:
        primary, secondary = _infer_pos(word)

    root = normalize_for_analysis(word).replace(" ", "")
    if primary is PrimaryPos.VERB and root.endswith(_INFINITIVE_ENDINGS) and len(root) > 3:
        root = root[:-3]

    if "Pr" in fields:
        pronunciation = normalize_for_analysis(fields["Pr"])
    elif primary is PrimaryPos.ABBREVIATION:
        pronunciation = guess_pronunciation(root)
    else:
        pronunciation = root

    explicit = {
        RootAttribute.from_short(name)
        for name in fields.get("A", "").split(",")
        if name.strip()
    }
    attributes = _infer_attributes(primary, secondary, pronunciation, explicit)

    return DictionaryItem(
        lemma=word,
        root=root,
        primary_pos=primary,
        secondary_pos=secondary,
        attributes=frozenset(attributes),
        pronunciation=pronunciation,
    )


def _iter_items(lines: Iterable[str]) -> Iterable[DictionaryItem]:
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("##"):
            continue
        yield parse_line(stripped)


def load_lines(lines: Iterable[str]) -> RootLexicon:
    return RootLexicon(_iter_items(lines))


def load_files(*paths: str | Path) -> RootLexicon:
    """Load and merge one or more dictionary text files (UTF-8)."""
    items: list[DictionaryItem] = []
    for path in paths:
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            before = len(items)
            items.extend(_iter_items(f))
        logger.info("Loaded %d dictionary items from %s", len(items) - before, path)
    return RootLexicon(items)
