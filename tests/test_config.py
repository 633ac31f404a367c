"""Tests for MorphologyConfig (config.py)."""

from pathlib import Path

import pytest
from turkmorph.config import DEFAULT_CACHE_SIZE, ConfigurationError, MorphologyConfig
from turkmorph.lexicon import RootLexicon
from turkmorph.loader import load_lines
from turkmorph.morphology import TurkishMorphology


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


# ── Defaults and validation ───────────────────────────────────────────────────

def test_defaults():
    config = MorphologyConfig()
    assert config.ignore_diacritics is False
    assert config.use_cache is True
    assert config.cache_size == DEFAULT_CACHE_SIZE
    assert config.recognize_tokens is True
    assert not config.has_lexicon_source


def test_config_is_immutable():
    config = MorphologyConfig()
    with pytest.raises(AttributeError):
        config.ignore_diacritics = True


def test_with_options_returns_new_config():
    config = MorphologyConfig(lexicon_lines=("ev",))
    changed = config.with_options(ignore_diacritics=True)
    assert changed.ignore_diacritics
    assert not config.ignore_diacritics
    assert changed.lexicon_lines == ("ev",)


def test_lines_are_stored_as_tuple():
    config = MorphologyConfig(lexicon_lines=["ev", "kitap"])
    assert config.lexicon_lines == ("ev", "kitap")


def test_no_source_and_no_recognizers_is_rejected():
    with pytest.raises(ConfigurationError):
        TurkishMorphology(MorphologyConfig(recognize_tokens=False))


def test_empty_lexicon_counts_as_source():
    morph = TurkishMorphology(MorphologyConfig(lexicon=RootLexicon.empty(), recognize_tokens=False))
    assert morph.analyze("ev").analysis_count() == 0


def test_negative_cache_size_is_rejected():
    with pytest.raises(ConfigurationError, match="cache_size"):
        TurkishMorphology(MorphologyConfig(lexicon_lines=("ev",), cache_size=-1))


def test_missing_lexicon_file_is_rejected(tmp_path):
    config = MorphologyConfig(lexicon_paths=(tmp_path / "nope.txt",))
    with pytest.raises(ConfigurationError, match="nope.txt"):
        config.validate()


def test_configuration_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)


# ── Lexicon building ──────────────────────────────────────────────────────────

def test_build_lexicon_merges_sources(tmp_path):
    p = _write(tmp_path / "lex.txt", "kitap\nev\n")
    config = MorphologyConfig(
        lexicon=load_lines(["armut"]),
        lexicon_lines=("ev", "kazan"),
        lexicon_paths=(p,),
    )
    lex = config.build_lexicon()
    assert sorted(item.lemma for item in lex) == ["armut", "ev", "kazan", "kitap"]


def test_build_lexicon_reuses_prebuilt():
    lex = load_lines(["ev"])
    assert MorphologyConfig(lexicon=lex).build_lexicon() is lex


# ── TOML ──────────────────────────────────────────────────────────────────────

def test_from_toml(tmp_path):
    data = tmp_path / "data"
    data.mkdir()
    _write(data / "a.txt", "kitap\n")
    _write(data / "b.txt", "ev\n")
    cfg = _write(tmp_path / "turkmorph.toml", """
[lexicon]
paths = ["data/*.txt"]
lines = ["dört [P:Num,Card;A:Voicing]"]

[analysis]
ignore_diacritics = true
recognize_tokens = false

[cache]
enabled = true
max_size = 100
""")
    config = MorphologyConfig.from_toml(cfg)
    assert config.lexicon_paths == (data / "a.txt", data / "b.txt")
    assert config.lexicon_lines == ("dört [P:Num,Card;A:Voicing]",)
    assert config.ignore_diacritics
    assert not config.recognize_tokens
    assert config.cache_size == 100

    morph = TurkishMorphology(config)
    assert len(morph.lexicon) == 3


def test_from_toml_defaults(tmp_path):
    cfg = _write(tmp_path / "turkmorph.toml", "")
    config = MorphologyConfig.from_toml(cfg)
    assert config == MorphologyConfig()


def test_from_toml_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        MorphologyConfig.from_toml(tmp_path / "missing.toml")


def test_project_config_loads(config_path):
    morph = TurkishMorphology.from_config(config_path)
    assert len(morph.lexicon) > 0
