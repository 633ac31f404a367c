"""Shared test fixtures."""

from pathlib import Path

import pytest

from turkmorph.morphology import TurkishMorphology


def _find_config() -> Path | None:
    """Find turkmorph.toml from the project root."""
    for base in [Path("."), Path("..")]:
        p = base / "turkmorph.toml"
        if p.exists():
            return p.resolve()
    return None


def find_data(filename: str) -> Path | None:
    """Find a data file relative to the project root."""
    for base in [Path("data"), Path("../data")]:
        p = base / filename
        if p.exists():
            return p
    return None


@pytest.fixture
def config_path() -> Path:
    """The project's turkmorph.toml.  Skips the test if it is not found."""
    path = _find_config()
    if path is None:
        pytest.skip("turkmorph.toml not found")
    return path


@pytest.fixture(scope="module")
def basic_morphology() -> TurkishMorphology:
    """A small everyday lexicon covering nouns, adjectives, verbs and numbers."""
    return TurkishMorphology.from_lines(
        "kitap",
        "ev",
        "armut",
        "kazan",
        "insan",
        "okul",
        "saat [A:InverseHarmony,NoVoicing]",
        "hak [A:Doubling]",
        "ağız [A:LastVowelDrop]",
        "renk",
        "öğretmen",
        "güzel [P:Adj]",
        "ekonomik [P:Adj]",
        "Ankara",
        "TBMM [P:Abbrv;Pr:tebememe]",
        "gelmek",
        "okumak",
        "aramak",
        "yapmak",
        "dört [P:Num,Card;A:Voicing]",
        "bir [P:Num,Card]",
        "otuz [P:Num,Card]",
        "ve [P:Conj]",
        "çok [P:Adv]",
    )


@pytest.fixture(scope="module")
def tolerant_morphology() -> TurkishMorphology:
    return TurkishMorphology.from_lines(
        "sıra",
        "şıra",
        "armut",
        "kazan",
        "ekonomik [P:Adj]",
        "insan",
        ignore_diacritics=True,
    )


@pytest.fixture
def sample_lexicon_path() -> Path:
    """data/lexicon-sample.txt.  Skips the test if it is not found."""
    path = find_data("lexicon-sample.txt")
    if path is None:
        pytest.skip("data/lexicon-sample.txt not found")
    return path
