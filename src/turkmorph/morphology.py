"""
TurkishMorphology: the single entry point for word analysis.

Usage:
    from turkmorph import TurkishMorphology

    morph = TurkishMorphology.from_lines("kitap", "dört [P:Num,Card;A:Voicing]")
    result = morph.analyze("kitaba")
    result.analysis_count()                 # 1
    for a in result:
        print(a.format())                   # [kitap:Noun] kitab:Noun+A3sg+a:Dat

    morph = TurkishMorphology.from_config("turkmorph.toml")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from turkmorph.alphabet import normalize_for_analysis
from turkmorph.analyzer import RuleBasedAnalyzer, SingleAnalysis
from turkmorph.cache import AnalysisCache
from turkmorph.config import MorphologyConfig
from turkmorph.diacritics import DiacriticEquivalence
from turkmorph.lexicon import RootLexicon
from turkmorph.morphotactics import default_morphotactics
from turkmorph.recognizers import TokenRecognizer, default_recognizers
from turkmorph.stems import StemMatcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WordAnalysis:
    """All analyses of one input word, in the order they were found."""

    input: str
    normalized_input: str
    analyses: tuple[SingleAnalysis, ...] = ()

    def analysis_count(self) -> int:
        return len(self.analyses)

    def is_correct(self) -> bool:
        return bool(self.analyses)

    def lemmas(self) -> list[str]:
        return [a.lemma for a in self.analyses]

    def __len__(self) -> int:
        return len(self.analyses)

    def __iter__(self) -> Iterator[SingleAnalysis]:
        return iter(self.analyses)


class TurkishMorphology:
    """Lexicon, suffix graph, recognizers and cache, wired from a config.

    Everything but the cache is read-only after construction, so one
    instance can serve many threads.
    """

    def __init__(self, config: MorphologyConfig | None = None):
        config = config or MorphologyConfig()
        config.validate()
        self._config = config
        self._lexicon = config.build_lexicon()
        self._equivalence = DiacriticEquivalence(enabled=config.ignore_diacritics)
        self._stem_matcher = StemMatcher(self._lexicon, self._equivalence)
        self._analyzer = RuleBasedAnalyzer(
            self._stem_matcher, default_morphotactics(), self._equivalence
        )

        recognizers: tuple[TokenRecognizer, ...] = ()
        if config.recognize_tokens:
            recognizers = default_recognizers(self._lexicon)
        self._recognizers = tuple(r for r in recognizers if not r.fallback)
        self._fallbacks = tuple(r for r in recognizers if r.fallback)

        self._cache: AnalysisCache[str, WordAnalysis] | None = None
        if config.use_cache:
            self._cache = AnalysisCache(config.cache_size)

        logger.info(
            "Built morphology: %d items, %d stems, ignore_diacritics=%s, cache=%s, recognizers=%d",
            len(self._lexicon),
            self._stem_matcher.stem_count,
            config.ignore_diacritics,
            "on" if self._cache is not None else "off",
            len(recognizers),
        )

    # ── Construction helpers ─────────────────────────────────────────────

    @classmethod
    def from_lines(cls, *lines: str, **options) -> TurkishMorphology:
        """Build from literal dictionary lines; ``options`` are MorphologyConfig fields."""
        return cls(MorphologyConfig(lexicon_lines=tuple(lines), **options))

    @classmethod
    def from_lexicon(cls, lexicon: RootLexicon, **options) -> TurkishMorphology:
        return cls(MorphologyConfig(lexicon=lexicon, **options))

    @classmethod
    def from_config(cls, config_path: str | Path = "turkmorph.toml") -> TurkishMorphology:
        return cls(MorphologyConfig.from_toml(config_path))

    @property
    def lexicon(self) -> RootLexicon:
        return self._lexicon

    @property
    def config(self) -> MorphologyConfig:
        return self._config

    @property
    def cache(self) -> AnalysisCache | None:
        return self._cache

    # ── Analysis ─────────────────────────────────────────────────────────

    def analyze(self, word: str) -> WordAnalysis:
        """Every analysis of ``word``.  Unknown words give zero analyses."""
        if self._cache is None:
            return self._analyze(word)
        return self._cache.get_or_compute(word, self._analyze)

    def analyze_all(self, words: Iterable[str]) -> list[WordAnalysis]:
        return [self.analyze(w) for w in words]

    def _analyze(self, word: str) -> WordAnalysis:
        normalized = normalize_for_analysis(word)
        # normalize_for_analysis maps one character to one, so offsets into
        # normalized are offsets into word
        if not word.strip():
            return WordAnalysis(word, normalized)

        analyses = self._analyzer.analyze(word, normalized)
        analyses.extend(self._recognize(word, normalized, self._recognizers))
        # Fallbacks step in only where an exact reading is missing
        if not any(a.exact for a in analyses):
            analyses.extend(self._recognize(word, normalized, self._fallbacks))

        logger.debug("%r: %d analyses", word, len(analyses))
        return WordAnalysis(word, normalized, tuple(analyses))

    def _recognize(
        self,
        word: str,
        normalized: str,
        recognizers: Iterable[TokenRecognizer],
    ) -> list[SingleAnalysis]:
        found: list[SingleAnalysis] = []
        for recognizer in recognizers:
            if not recognizer.matches(word):
                continue
            root, _ = recognizer.split(word)
            item = recognizer.synthesize(word)
            found.extend(self._analyzer.analyze_item(word, normalized, item, len(root)))
        return found

    # ── Introspection ────────────────────────────────────────────────────

    def summary(self) -> str:
        lines = [
            "TurkishMorphology",
            f"  Ignore diacritics: {self._config.ignore_diacritics}",
            f"  Token recognizers: {len(self._recognizers) + len(self._fallbacks)}",
            f"  Stems:             {self._stem_matcher.stem_count}",
        ]
        if self._cache is not None:
            stats = self._cache.stats
            lines.append(f"  Cache:             {stats.size} entries, {stats.hits} hits, {stats.misses} misses")
        else:
            lines.append("  Cache:             off")
        lines.append("  [lexicon]")
        for sub_line in self._lexicon.summary().split("\n"):
            lines.append(f"    {sub_line}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"TurkishMorphology({len(self._lexicon)} items)"
