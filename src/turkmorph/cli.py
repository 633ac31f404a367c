#!/usr/bin/env python3
"""
Turkish morphological analyzer CLI.

Loads the lexicon from turkmorph.toml by default, or override with flags:

    python -m turkmorph.cli --analyze "kitaba"
    python -m turkmorph.cli --analyze "kitaba" --config turkmorph.toml
    python -m turkmorph.cli --lexicon data/*.txt --analyze "kitaba"
    python -m turkmorph.cli --line "dört [P:Num,Card;A:Voicing]" --analyze "XXIV'ten"
    python -m turkmorph.cli --coverage data/words.txt --missing data/missing.tsv
"""

import argparse
import logging
import sys
from pathlib import Path


def _find_default_config() -> Path | None:
    """Look for turkmorph.toml in CWD."""
    candidate = Path("turkmorph.toml")
    if candidate.exists():
        return candidate
    return None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Turkish morphological analyzer"
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Path to TOML config file (default: auto-detect turkmorph.toml)",
    )
    parser.add_argument(
        "--lexicon",
        nargs="+",
        metavar="FILE",
        help="Path(s) to dictionary text files (overrides config)",
    )
    parser.add_argument(
        "--line",
        action="append",
        default=[],
        metavar="LINE",
        help="Literal dictionary line, may be repeated (overrides config)",
    )
    parser.add_argument(
        "--analyze",
        nargs="+",
        metavar="WORD",
        help="Analyze one or more word forms",
    )
    parser.add_argument(
        "--ignore-diacritics",
        action="store_true",
        help="Let ASCII letters stand for Turkish ones (s for ş, i for ı, ...)",
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Disable the analysis cache",
    )
    parser.add_argument(
        "--coverage",
        metavar="WORDS_FILE",
        help="Run a coverage check over a word list",
    )
    parser.add_argument(
        "--missing",
        metavar="FILE",
        help="Write missing forms and lemma mismatches to a TSV file (use with --coverage)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Debug logging",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # ── Build analyzer ───────────────────────────────────────────────────

    from turkmorph.config import ConfigurationError, MorphologyConfig
    from turkmorph.morphology import TurkishMorphology

    has_explicit_flags = args.lexicon or args.line

    if has_explicit_flags:
        # Explicit flags: build config manually (flags override config)
        config = MorphologyConfig(
            lexicon_lines=tuple(args.line),
            lexicon_paths=tuple(Path(p) for p in args.lexicon or ()),
        )
    else:
        config_path = Path(args.config) if args.config else _find_default_config()
        if config_path is None:
            parser.error(
                "No turkmorph.toml found and no --lexicon/--line flags given.\n"
                "  Either create a config file or pass flags explicitly."
            )
        config = MorphologyConfig.from_toml(config_path)

    if args.ignore_diacritics:
        config = config.with_options(ignore_diacritics=True)
    if args.no_cache:
        config = config.with_options(use_cache=False)

    try:
        morphology = TurkishMorphology(config)
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(morphology.summary())
    print()

    # ── Analyze ──────────────────────────────────────────────────────────

    for word in args.analyze or ():
        result = morphology.analyze(word)
        if result.analyses:
            print(f"═══ Analysis of '{word}' ({result.analysis_count()}) ═══")
            for a in result:
                print(f"  {a.format()}")
        else:
            print(f"'{word}' has no analysis")
        print()

    # ── Coverage ─────────────────────────────────────────────────────────

    if args.coverage:
        from turkmorph.coverage import check_coverage, read_word_list

        report = check_coverage(morphology, read_word_list(args.coverage))
        print(report.summary())
        if args.missing:
            report.write_missing(Path(args.missing))
            print(f"\nMissing forms written to {args.missing}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
