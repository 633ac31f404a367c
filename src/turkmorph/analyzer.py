"""
Rule-based analysis: walk the suffix graph from every matching stem.

The search is an explicit depth-first work list.  Each search path carries
everything it needs to continue on its own (state, input position, phonetic
context, suffixes so far), so branching is a matter of pushing more paths and
nothing is shared or undone.

Usage:
    from turkmorph.analyzer import RuleBasedAnalyzer

    analyzer = RuleBasedAnalyzer(StemMatcher(lexicon), default_morphotactics())
    for a in analyzer.analyze("kitabı", "kitabı"):
        print(a.format())      # [kitap:Noun] kitab:Noun+A3sg+ı:Acc
"""

from __future__ import annotations

from dataclasses import dataclass

from turkmorph.alphabet import APOSTROPHE
from turkmorph.diacritics import DiacriticEquivalence
from turkmorph.lexicon import DictionaryItem, PrimaryPos
from turkmorph.morphotactics import (
    Morpheme,
    MorphemeState,
    SuffixTransition,
    TurkishMorphotactics,
)
from turkmorph.phonology import Expectation, Phonetics, render
from turkmorph.stems import Stem, StemMatcher

# Empty morphemes left out of the compact format
_HIDDEN_IN_FORMAT = frozenset({"Pnon", "Nom"})


@dataclass(frozen=True, slots=True)
class AppliedSuffix:
    morpheme: Morpheme
    surface: str  # slice of the input this suffix consumed, "" for empty morphemes

    def __str__(self) -> str:
        if self.surface:
            return f"{self.surface}:{self.morpheme.id}"
        return self.morpheme.id


@dataclass(frozen=True, slots=True)
class SingleAnalysis:
    """One complete parse of a word.

    ``stem`` and every suffix surface are slices of the word as typed, so
    ``surface_form()`` gives the input back.  ``exact`` is False when the
    parse relied on diacritic tolerance somewhere.  ``pos`` is the category
    of the whole word after derivations (okumak: Noun).
    """

    item: DictionaryItem
    stem: str
    suffixes: tuple[AppliedSuffix, ...] = ()
    separator: str = ""
    exact: bool = True
    pos: PrimaryPos | None = None

    @property
    def lemma(self) -> str:
        return self.item.lemma

    def surface_form(self) -> str:
        return self.stem + self.separator + "".join(s.surface for s in self.suffixes)

    def morphemes(self) -> list[Morpheme]:
        return [s.morpheme for s in self.suffixes]

    def format(self) -> str:
        """Compact human-readable form: ``[kitap:Noun] kitap:Noun+A3sg+ta:Loc``."""
        parts = [f"{self.item} {self.stem}{self.separator}:{self.item.primary_pos.value}"]
        for suffix in self.suffixes:
            if not suffix.surface and suffix.morpheme.id in _HIDDEN_IN_FORMAT:
                continue
            parts.append("|" if suffix.morpheme.derivational else "+")
            parts.append(str(suffix))
        return "".join(parts)

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True, slots=True)
class _SearchPath:
    stem: Stem
    state: MorphemeState
    position: int
    phonetics: Phonetics
    suffixes: tuple[AppliedSuffix, ...]
    expects: Expectation | None
    pending_derivation: bool  # a zero derivation still waiting for a surface suffix
    needs_surface: bool  # an apostrophe was consumed, a suffix must follow
    separator: str
    exact: bool

    @property
    def at_root(self) -> bool:
        return not self.suffixes


class RuleBasedAnalyzer:
    """Enumerates every parse of a word over a lexicon and the suffix graph."""

    def __init__(
        self,
        stem_matcher: StemMatcher,
        morphotactics: TurkishMorphotactics,
        equivalence: DiacriticEquivalence | None = None,
    ):
        self.stem_matcher = stem_matcher
        self.morphotactics = morphotactics
        self.equivalence = equivalence or stem_matcher.equivalence

    def analyze(self, word: str, normalized: str) -> list[SingleAnalysis]:
        """All parses of ``word`` starting from a lexicon stem.

        ``normalized`` must be the same length as ``word``; matching happens on
        it while recorded surfaces are sliced from ``word``.
        """
        paths: list[_SearchPath] = []
        for match in self.stem_matcher.match(normalized):
            exact = normalized[:match.end] == match.stem.surface
            paths.extend(self._initial_paths(match.stem, match.end, word, normalized, exact))
        return self._search(paths, word, normalized)

    def analyze_item(
        self,
        word: str,
        normalized: str,
        item: DictionaryItem,
        root_length: int,
    ) -> list[SingleAnalysis]:
        """Parses of ``word`` whose first ``root_length`` characters are ``item``.

        Used for items synthesized on the fly, which are not in the lexicon.
        """
        root = normalized[:root_length]
        paths: list[_SearchPath] = []
        for stem in self.stem_matcher.generator.generate(item):
            if stem.surface == root:
                paths.extend(self._initial_paths(stem, root_length, word, normalized, True))
        return self._search(paths, word, normalized)

    # ── Search ───────────────────────────────────────────────────────────

    def _initial_paths(
        self,
        stem: Stem,
        end: int,
        word: str,
        normalized: str,
        exact: bool,
    ) -> list[_SearchPath]:
        path = _SearchPath(
            stem=stem,
            state=self.morphotactics.root_state(stem.item),
            position=end,
            phonetics=stem.phonetics,
            suffixes=(),
            expects=stem.expects,
            pending_derivation=False,
            needs_surface=False,
            separator="",
            exact=exact,
        )
        paths = [path]
        if (
            normalized[end:end + 1] == APOSTROPHE
            and stem.item.accepts_apostrophe
            and not stem.no_suffix
        ):
            paths.append(_SearchPath(
                stem=stem,
                state=path.state,
                position=end + 1,
                phonetics=stem.phonetics,
                suffixes=(),
                expects=stem.expects,
                pending_derivation=False,
                needs_surface=True,
                separator=word[end],
                exact=exact,
            ))
        return paths

    def _search(self, initial: list[_SearchPath], word: str, normalized: str) -> list[SingleAnalysis]:
        results: list[SingleAnalysis] = []
        # Reversed so that paths are completed in the order they were found
        stack = list(reversed(initial))
        while stack:
            path = stack.pop()
            if path.position == len(normalized) and self._can_terminate(path):
                results.append(SingleAnalysis(
                    item=path.stem.item,
                    stem=word[:path.position - len(path.separator) - _consumed(path)],
                    suffixes=path.suffixes,
                    separator=path.separator,
                    exact=path.exact,
                    pos=path.state.pos,
                ))
            advanced: list[_SearchPath] = []
            for transition in path.state.outgoing:
                advanced.extend(self._advance(path, transition, word, normalized))
            stack.extend(reversed(advanced))
        return results

    @staticmethod
    def _can_terminate(path: _SearchPath) -> bool:
        return (
            path.state.terminal
            and not path.pending_derivation
            and not path.needs_surface
            and path.expects is not Expectation.VOWEL
        )

    def _advance(
        self,
        path: _SearchPath,
        transition: SuffixTransition,
        word: str,
        normalized: str,
    ) -> list[_SearchPath]:
        item = path.stem.item
        if not transition.can_pass(item, path.phonetics):
            return []
        if (
            path.at_root
            and path.stem.first_morpheme is not None
            and transition.morpheme.id != path.stem.first_morpheme
        ):
            return []

        out: list[_SearchPath] = []
        for rendering in render(transition.template, path.phonetics):
            surface = rendering.surface
            if not surface:
                # Two zero derivations in a row add nothing
                if transition.target.derivative and path.pending_derivation:
                    continue
                out.append(_SearchPath(
                    stem=path.stem,
                    state=transition.target,
                    position=path.position,
                    phonetics=path.phonetics,
                    suffixes=path.suffixes + (AppliedSuffix(transition.morpheme, ""),),
                    expects=path.expects,
                    pending_derivation=path.pending_derivation or transition.target.derivative,
                    needs_surface=path.needs_surface,
                    separator=path.separator,
                    exact=path.exact,
                ))
                continue

            if path.stem.no_suffix:
                continue
            if path.expects is not None and not path.expects.allows(surface):
                continue
            end = path.position + len(surface)
            typed = normalized[path.position:end]
            if typed == surface:
                exact = path.exact
            elif self.equivalence.equivalent(typed, surface):
                exact = False
            else:
                continue
            out.append(_SearchPath(
                stem=path.stem,
                state=transition.target,
                position=end,
                phonetics=path.phonetics.extend(surface),
                suffixes=path.suffixes + (AppliedSuffix(transition.morpheme, word[path.position:end]),),
                expects=rendering.expects,
                pending_derivation=False,
                needs_surface=False,
                separator=path.separator,
                exact=exact,
            ))
        return out


def _consumed(path: _SearchPath) -> int:
    return sum(len(s.surface) for s in path.suffixes)
