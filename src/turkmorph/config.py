"""
Immutable configuration for TurkishMorphology.

Build one directly, or load it from a TOML file:

    [lexicon]
    paths = ["data/*.txt"]          # relative to this file, globs expanded
    lines = ["dört [P:Num,Card;A:Voicing]"]

    [analysis]
    ignore_diacritics = false
    recognize_tokens = true

    [cache]
    enabled = true
    max_size = 50000

Usage:
    from turkmorph.config import MorphologyConfig

    config = MorphologyConfig(lexicon_lines=("kitap", "armut"), ignore_diacritics=True)
    config = MorphologyConfig.from_toml("turkmorph.toml")
"""

from __future__ import annotations

import glob
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Iterable

from turkmorph.lexicon import RootLexicon
from turkmorph.loader import load_files, load_lines

# Distinct words kept per facade; None in code means unbounded
DEFAULT_CACHE_SIZE = 50_000


class ConfigurationError(ValueError):
    """The configuration cannot produce a working analyzer."""


@dataclass(frozen=True)
class MorphologyConfig:
    lexicon: RootLexicon | None = None
    lexicon_lines: tuple[str, ...] = ()
    lexicon_paths: tuple[Path, ...] = ()
    ignore_diacritics: bool = False
    use_cache: bool = True
    cache_size: int | None = DEFAULT_CACHE_SIZE
    recognize_tokens: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "lexicon_lines", tuple(self.lexicon_lines))
        object.__setattr__(self, "lexicon_paths", tuple(Path(p) for p in self.lexicon_paths))

    @property
    def has_lexicon_source(self) -> bool:
        return self.lexicon is not None or bool(self.lexicon_lines) or bool(self.lexicon_paths)

    def validate(self) -> None:
        """Raise ConfigurationError for settings that cannot work."""
        if not self.has_lexicon_source and not self.recognize_tokens:
            raise ConfigurationError(
                "No lexicon source and token recognition disabled: every word would have 0 analyses"
            )
        if self.cache_size is not None and self.cache_size < 0:
            raise ConfigurationError(f"cache_size must be >= 0, got {self.cache_size}")
        missing = [str(p) for p in self.lexicon_paths if not p.is_file()]
        if missing:
            raise ConfigurationError(f"Lexicon file(s) not found: {', '.join(missing)}")

    def build_lexicon(self) -> RootLexicon:
        """Merge every configured source into one lexicon."""
        if self.lexicon is not None and not self.lexicon_lines and not self.lexicon_paths:
            return self.lexicon
        items = list(self.lexicon or ())
        if self.lexicon_paths:
            items.extend(load_files(*self.lexicon_paths))
        if self.lexicon_lines:
            items.extend(load_lines(self.lexicon_lines))
        return RootLexicon(items)

    def with_options(self, **changes: Any) -> MorphologyConfig:
        return replace(self, **changes)

    # ── Loading ──────────────────────────────────────────────────────────

    @classmethod
    def from_toml(cls, config_path: str | Path = "turkmorph.toml") -> MorphologyConfig:
        """Load a config file.  Paths are resolved relative to its directory."""
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        with config_path.open("rb") as f:
            cfg = tomllib.load(f)

        base_dir = config_path.parent
        lex_cfg = cfg.get("lexicon", {})
        analysis_cfg = cfg.get("analysis", {})
        cache_cfg = cfg.get("cache", {})

        return cls(
            lexicon_lines=tuple(lex_cfg.get("lines", [])),
            lexicon_paths=tuple(_resolve_config_paths(lex_cfg.get("paths", []), base_dir)),
            ignore_diacritics=bool(analysis_cfg.get("ignore_diacritics", False)),
            recognize_tokens=bool(analysis_cfg.get("recognize_tokens", True)),
            use_cache=bool(cache_cfg.get("enabled", True)),
            cache_size=cache_cfg.get("max_size", DEFAULT_CACHE_SIZE),
        )


def _resolve_config_paths(raw_paths: Iterable[str], base_dir: Path) -> list[Path]:
    """Resolve config paths relative to base_dir, expanding globs."""
    result = []
    for p in raw_paths:
        full = base_dir / p if not Path(p).is_absolute() else Path(p)
        full_str = str(full)
        if "*" in full_str or "?" in full_str:
            result.extend(Path(m) for m in sorted(glob.glob(full_str)))
        else:
            result.append(full)
    return result
