"""
Run a word list through the analyzer to measure lexicon coverage.

This tells us:
- What % of tokens get at least one analysis
- Which tokens are missing (gaps in lexicon coverage)
- How ambiguous the analyzed tokens are
- Where analyses disagree with a gold lemma, when the list has one
- Which categories (primary POS, recognized token types) cover what

Word list format: UTF-8 text.  A line with a tab is ``form<TAB>lemma``;
any other line is running text split on whitespace, with surrounding
punctuation stripped.

Usage:
    from turkmorph import TurkishMorphology, check_coverage, read_word_list

    morph = TurkishMorphology.from_config()
    report = check_coverage(morph, read_word_list("data/words.txt"))
    print(report.summary())
"""

from __future__ import annotations

import csv
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

from turkmorph.lexicon import SecondaryPos
from turkmorph.morphology import TurkishMorphology

# Stripped from both ends of running-text tokens
_EDGE_PUNCTUATION = "\"“”«»()[]{},;!?…"


@dataclass(frozen=True, slots=True)
class WordEntry:
    form: str
    lemma: str | None = None  # gold lemma, when the list provides one


@dataclass
class CoverageReport:
    """Aggregated coverage statistics."""

    total_tokens: int = 0
    skipped_tokens: int = 0  # no letters or digits
    checked_tokens: int = 0
    found_tokens: int = 0
    ambiguous_tokens: int = 0  # more than one analysis
    total_analyses: int = 0
    gold_tokens: int = 0  # tokens that came with a lemma
    lemma_matches: int = 0

    by_category: Counter = field(default_factory=Counter)  # "Noun", "Num,RomanNumeral", ...
    missing_forms: Counter = field(default_factory=Counter)
    lemma_mismatches: list[tuple[str, str, list[str]]] = field(
        default_factory=list
    )  # (form, gold_lemma, [analyzer_lemmas])

    def summary(self) -> str:
        if self.checked_tokens == 0:
            return "No tokens checked."

        pct = lambda n, d: f"{100*n/d:.1f}%" if d > 0 else "N/A"
        missing = self.checked_tokens - self.found_tokens
        avg = self.total_analyses / self.found_tokens if self.found_tokens else 0.0

        lines = [
            "═══ Coverage Report ═══",
            "",
            f"Total tokens:   {self.total_tokens}",
            f"Skipped (punctuation etc.): {self.skipped_tokens}",
            f"Checked:        {self.checked_tokens}",
            "",
            f"Analyzed:            {self.found_tokens:5d}  ({pct(self.found_tokens, self.checked_tokens)})",
            f"  Ambiguous:           {self.ambiguous_tokens:5d}  ({pct(self.ambiguous_tokens, self.found_tokens)})",
            f"  Analyses per token:  {avg:5.2f}",
            f"Not found:           {missing:5d}  ({pct(missing, self.checked_tokens)})",
        ]

        if self.gold_tokens:
            lines.extend([
                "",
                f"With gold lemma:     {self.gold_tokens:5d}",
                f"  Lemma matches:       {self.lemma_matches:5d}  ({pct(self.lemma_matches, self.gold_tokens)})",
            ])

        lines.append("")
        lines.append("─── By category ───")
        for category, count in sorted(self.by_category.items()):
            lines.append(f"  {category:20s}  {count:5d}")

        lines.append("")
        lines.append("─── Top 20 missing forms ───")
        for form, count in self.missing_forms.most_common(20):
            lines.append(f"  {form:25s}  x{count}")

        if self.lemma_mismatches:
            lines.append("")
            lines.append("─── Sample lemma mismatches (form analyzed, lemma disagrees) ───")
            for form, gold, analyzer_lemmas in self.lemma_mismatches[:15]:
                nl = ", ".join(analyzer_lemmas[:3])
                lines.append(f"  {form:20s}  Gold: {gold:15s}  Analyzer: {nl}")

        return "\n".join(lines)

    def write_missing(self, path: str | Path) -> None:
        """Write missing forms and lemma mismatches to a TSV file for manual review.

        Columns: kind, form, gold_lemma, analyzer_lemmas, count
        """
        mismatch_counts: Counter = Counter()
        for form, gold, analyzer_lemmas in self.lemma_mismatches:
            mismatch_counts[(form, gold, tuple(sorted(analyzer_lemmas)))] += 1

        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f, delimiter="\t")
            writer.writerow(["kind", "form", "gold_lemma", "analyzer_lemmas", "count"])
            for form, count in self.missing_forms.most_common():
                writer.writerow(["missing", form, "", "", count])
            for (form, gold, analyzer_lemmas), count in mismatch_counts.most_common():
                writer.writerow(["lemma", form, gold, ", ".join(analyzer_lemmas), count])


def _tokens(line: str) -> Iterator[str]:
    for raw in line.split():
        token = raw.strip(_EDGE_PUNCTUATION)
        if token:
            yield token


def read_word_list(path: str | Path) -> list[WordEntry]:
    """Read a word list file (see module docstring for the format)."""
    entries: list[WordEntry] = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\n")
            if "\t" in line:
                form, lemma = line.split("\t", 1)
                if form.strip():
                    entries.append(WordEntry(form.strip(), lemma.strip() or None))
                continue
            entries.extend(WordEntry(token) for token in _tokens(line))
    return entries


def _category(analysis) -> str:
    item = analysis.item
    if item.secondary_pos is SecondaryPos.NONE:
        return item.primary_pos.value
    return f"{item.primary_pos.value},{item.secondary_pos.value}"


def check_coverage(
    morphology: TurkishMorphology,
    words: Iterable[WordEntry | str],
) -> CoverageReport:
    """
    Check how many words the analyzer can analyze.

    Args:
        morphology: A built analyzer
        words: WordEntry values, or plain strings when no gold lemma is known
    """
    report = CoverageReport()

    for entry in words:
        if isinstance(entry, str):
            entry = WordEntry(entry)
        report.total_tokens += 1

        if not any(ch.isalnum() for ch in entry.form):
            report.skipped_tokens += 1
            continue
        report.checked_tokens += 1

        result = morphology.analyze(entry.form)
        if not result.analyses:
            report.missing_forms[entry.form] += 1
            continue

        report.found_tokens += 1
        report.total_analyses += result.analysis_count()
        if result.analysis_count() > 1:
            report.ambiguous_tokens += 1
        for category in {_category(a) for a in result.analyses}:
            report.by_category[category] += 1

        if entry.lemma is not None:
            report.gold_tokens += 1
            analyzer_lemmas = list(dict.fromkeys(result.lemmas()))
            if entry.lemma in analyzer_lemmas:
                report.lemma_matches += 1
            else:
                report.lemma_mismatches.append((entry.form, entry.lemma, analyzer_lemmas))

    return report
