"""turkmorph: rule-based Turkish morphological analysis."""

from turkmorph.lexicon import DictionaryItem, PrimaryPos, SecondaryPos, RootAttribute, RootLexicon
from turkmorph.loader import load_lines, load_files, parse_line
from turkmorph.diacritics import DiacriticEquivalence
from turkmorph.analyzer import AppliedSuffix, SingleAnalysis, RuleBasedAnalyzer
from turkmorph.config import MorphologyConfig, ConfigurationError
from turkmorph.morphology import TurkishMorphology, WordAnalysis
from turkmorph.coverage import check_coverage, read_word_list, CoverageReport

__all__ = [
    "DictionaryItem", "PrimaryPos", "SecondaryPos", "RootAttribute", "RootLexicon",
    "load_lines", "load_files", "parse_line",
    "DiacriticEquivalence",
    "AppliedSuffix", "SingleAnalysis", "RuleBasedAnalyzer",
    "MorphologyConfig", "ConfigurationError",
    "TurkishMorphology", "WordAnalysis",
    "check_coverage", "read_word_list", "CoverageReport",
]
