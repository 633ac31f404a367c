"""
The Turkish suffix graph.

States are morphological categories (a noun after its number suffix, a verb
after its tense suffix, ...); edges are suffixes written as phonological
templates (see ``turkmorph.phonology``).  A state is terminal when a word may
end there.  Derivational states change the part of speech of what follows:
kazan (Noun) → kazancık (Dim → Noun), ev (Noun) → evli (With → Adj).

The graph is built once and never modified, so a single instance can be shared
by every analyzer in the process (see ``default_morphotactics``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Callable

from turkmorph.lexicon import DictionaryItem, PrimaryPos, RootAttribute
from turkmorph.phonology import Phonetics


@dataclass(frozen=True, slots=True)
class Morpheme:
    id: str
    name: str
    derivational: bool = False

    def __str__(self) -> str:
        return self.id


Condition = Callable[[DictionaryItem, Phonetics], bool]


# ── Conditions ───────────────────────────────────────────────────────────────

def has_attribute(attribute: RootAttribute) -> Condition:
    def check(item: DictionaryItem, phonetics: Phonetics) -> bool:
        return attribute in item.attributes
    return check


def after_vowel(item: DictionaryItem, phonetics: Phonetics) -> bool:
    return phonetics.ends_with_vowel


def after_consonant(item: DictionaryItem, phonetics: Phonetics) -> bool:
    return not phonetics.ends_with_vowel


def all_of(*conditions: Condition) -> Condition:
    def check(item: DictionaryItem, phonetics: Phonetics) -> bool:
        return all(c(item, phonetics) for c in conditions)
    return check


# ── Graph ────────────────────────────────────────────────────────────────────

@dataclass(eq=False, slots=True)
class MorphemeState:
    """A node of the suffix graph."""

    id: str
    morpheme: Morpheme
    pos: PrimaryPos  # part of speech of the word at this point
    terminal: bool = False
    derivative: bool = False
    outgoing: list[SuffixTransition] = field(default_factory=list)

    def add(self, target: MorphemeState, template: str, condition: Condition | None = None) -> MorphemeState:
        self.outgoing.append(SuffixTransition(self, target, template, condition))
        return self

    def add_empty(self, target: MorphemeState, condition: Condition | None = None) -> MorphemeState:
        return self.add(target, "", condition)

    def __repr__(self) -> str:
        return f"MorphemeState({self.id})"


@dataclass(frozen=True, slots=True)
class SuffixTransition:
    source: MorphemeState
    target: MorphemeState
    template: str
    condition: Condition | None = None

    @property
    def morpheme(self) -> Morpheme:
        return self.target.morpheme

    def can_pass(self, item: DictionaryItem, phonetics: Phonetics) -> bool:
        return self.condition is None or self.condition(item, phonetics)

    def __repr__(self) -> str:
        return f"{self.source.id} -[{self.template or 'ε'}]-> {self.target.id}"


# ── Morphemes ────────────────────────────────────────────────────────────────

def _morphemes(*entries: tuple[str, str] | tuple[str, str, bool]) -> dict[str, Morpheme]:
    return {entry[0]: Morpheme(*entry) for entry in entries}


MORPHEMES: dict[str, Morpheme] = _morphemes(
    # Parts of speech
    ("Noun", "Noun"), ("Adj", "Adjective"), ("Adv", "Adverb"), ("Conj", "Conjunction"),
    ("Interj", "Interjection"), ("Verb", "Verb"), ("Pron", "Pronoun"), ("Num", "Numeral"),
    ("Det", "Determiner"), ("Postp", "PostPositive"), ("Ques", "Question"),
    ("Punc", "Punctuation"), ("Abbrv", "Abbreviation"),
    # Agreement
    ("A1sg", "FirstPersonSingular"), ("A2sg", "SecondPersonSingular"),
    ("A3sg", "ThirdPersonSingular"), ("A1pl", "FirstPersonPlural"),
    ("A2pl", "SecondPersonPlural"), ("A3pl", "ThirdPersonPlural"),
    # Possession
    ("Pnon", "NoPossession"), ("P1sg", "FirstPersonSingularPossessive"),
    ("P2sg", "SecondPersonSingularPossessive"), ("P3sg", "ThirdPersonSingularPossessive"),
    ("P1pl", "FirstPersonPluralPossessive"), ("P2pl", "SecondPersonPluralPossessive"),
    ("P3pl", "ThirdPersonPluralPossessive"),
    # Case
    ("Nom", "Nominal"), ("Dat", "Dative"), ("Acc", "Accusative"), ("Loc", "Locative"),
    ("Abl", "Ablative"), ("Gen", "Genitive"), ("Ins", "Instrumental"), ("Equ", "Equ"),
    # Derivation
    ("Dim", "Diminutive", True), ("Agt", "Agentive", True), ("Ness", "Ness", True),
    ("With", "With", True), ("Without", "Without", True), ("Rel", "Relation", True),
    ("Zero", "Zero", True), ("Inf1", "Infinitive1", True), ("Inf2", "Infinitive2", True),
    # Verbal
    ("Neg", "Negative"), ("Imp", "Imperative"), ("Pres", "PresentTense"),
    ("Past", "PastTense"), ("Narr", "NarrativeTense"), ("Prog1", "Progressive1"),
    ("Aor", "Aorist"), ("Fut", "Future"), ("Cond", "Condition"), ("Cop", "Copula"),
)


class TurkishMorphotactics:
    """Builds and owns the states of the Turkish suffix graph."""

    def __init__(self):
        self.states: dict[str, MorphemeState] = {}
        self._build_nominals()
        self._build_copula()
        self._build_verbs()
        self._build_closed_classes()

    def _state(
        self,
        state_id: str,
        morpheme_id: str,
        pos: PrimaryPos,
        *,
        terminal: bool = False,
        derivative: bool = False,
    ) -> MorphemeState:
        if state_id in self.states:
            raise ValueError(f"Duplicate state {state_id}")
        state = MorphemeState(
            id=state_id,
            morpheme=MORPHEMES[morpheme_id],
            pos=pos,
            terminal=terminal,
            derivative=derivative,
        )
        self.states[state_id] = state
        return state

    # ── Nouns ────────────────────────────────────────────────────────────

    def _build_nominals(self) -> None:
        N = PrimaryPos.NOUN
        s = self._state

        self.noun_S = s("noun_S", "Noun", N)
        self.abbrv_S = s("abbrv_S", "Abbrv", N)
        self.pron_S = s("pron_S", "Pron", PrimaryPos.PRONOUN)
        self.adj_ST = s("adj_ST", "Adj", PrimaryPos.ADJECTIVE, terminal=True)
        self.num_ST = s("num_ST", "Num", PrimaryPos.NUMERAL, terminal=True)

        self.a3sg_S = s("a3sg_S", "A3sg", N)
        self.a3pl_S = s("a3pl_S", "A3pl", N)

        self.pnon_S = s("pnon_S", "Pnon", N)
        self.p1sg_S = s("p1sg_S", "P1sg", N)
        self.p2sg_S = s("p2sg_S", "P2sg", N)
        self.p3sg_S = s("p3sg_S", "P3sg", N)
        self.p1pl_S = s("p1pl_S", "P1pl", N)
        self.p2pl_S = s("p2pl_S", "P2pl", N)
        self.p3pl_S = s("p3pl_S", "P3pl", N)

        self.nom_ST = s("nom_ST", "Nom", N, terminal=True)
        self.possNom_ST = s("possNom_ST", "Nom", N, terminal=True)
        self.dat_ST = s("dat_ST", "Dat", N, terminal=True)
        self.acc_ST = s("acc_ST", "Acc", N, terminal=True)
        self.loc_ST = s("loc_ST", "Loc", N, terminal=True)
        self.abl_ST = s("abl_ST", "Abl", N, terminal=True)
        self.gen_ST = s("gen_ST", "Gen", N, terminal=True)
        self.ins_ST = s("ins_ST", "Ins", N, terminal=True)
        self.equ_ST = s("equ_ST", "Equ", N, terminal=True)

        # Derivations that result in nouns or adjectives
        self.dim_S = s("dim_S", "Dim", N, derivative=True)
        self.agt_S = s("agt_S", "Agt", N, derivative=True)
        self.ness_S = s("ness_S", "Ness", N, derivative=True)
        self.with_ST = s("with_ST", "With", PrimaryPos.ADJECTIVE, terminal=True, derivative=True)
        self.without_ST = s("without_ST", "Without", PrimaryPos.ADJECTIVE, terminal=True, derivative=True)
        self.rel_ST = s("rel_ST", "Rel", PrimaryPos.ADJECTIVE, terminal=True, derivative=True)
        self.zeroNoun_S = s("zeroNoun_S", "Zero", N, derivative=True)

        for root in (self.noun_S, self.abbrv_S, self.dim_S, self.agt_S, self.ness_S, self.zeroNoun_S):
            self._connect_noun(root)

        self.pron_S.add_empty(self.a3sg_S)

        # kitabım, kitabın, kitabı, kitabımız, kitabınız, kitapları
        self.a3sg_S.add_empty(self.pnon_S)
        self.a3sg_S.add(self.p1sg_S, "(I)m")
        self.a3sg_S.add(self.p2sg_S, "(I)n")
        self.a3sg_S.add(self.p3sg_S, "(s)I")
        self.a3sg_S.add(self.p1pl_S, "(I)mIz")
        self.a3sg_S.add(self.p2pl_S, "(I)nIz")
        self.a3sg_S.add(self.p3pl_S, "lArI")

        # kitaplarım ... kitapları (his books / their books)
        self.a3pl_S.add_empty(self.pnon_S)
        self.a3pl_S.add(self.p1sg_S, "Im")
        self.a3pl_S.add(self.p2sg_S, "In")
        self.a3pl_S.add(self.p3sg_S, "I")
        self.a3pl_S.add(self.p1pl_S, "ImIz")
        self.a3pl_S.add(self.p2pl_S, "InIz")
        self.a3pl_S.add(self.p3pl_S, "I")

        self.pnon_S.add_empty(self.nom_ST)
        self._connect_cases(self.pnon_S)
        for poss in (self.p1sg_S, self.p2sg_S, self.p1pl_S, self.p2pl_S):
            poss.add_empty(self.possNom_ST)
            self._connect_cases(poss)
        # After 3rd person possessives cases take an n buffer: evine, evinde
        for poss in (self.p3sg_S, self.p3pl_S):
            poss.add_empty(self.possNom_ST)
            poss.add(self.dat_ST, "nA")
            poss.add(self.acc_ST, "nI")
            poss.add(self.loc_ST, "ndA")
            poss.add(self.abl_ST, "ndAn")
            poss.add(self.gen_ST, "nIn")
            poss.add(self.ins_ST, "(y)lA")
            poss.add(self.equ_ST, "ncA")

        self.nom_ST.add(self.dim_S, "CI~k")
        self.nom_ST.add(self.agt_S, "CI")
        self.nom_ST.add(self.ness_S, "lI~k")
        self.nom_ST.add(self.with_ST, "lI")
        self.nom_ST.add(self.without_ST, "sIz")

        # evdeki, benimki
        self.loc_ST.add(self.rel_ST, "ki")
        self.gen_ST.add(self.rel_ST, "ki")

        for adj in (self.adj_ST, self.with_ST, self.without_ST, self.rel_ST):
            adj.add_empty(self.zeroNoun_S)
            if adj is not self.rel_ST:
                adj.add(self.ness_S, "lI~k")
        self.num_ST.add_empty(self.zeroNoun_S)

    def _connect_noun(self, state: MorphemeState) -> None:
        state.add_empty(self.a3sg_S)
        state.add(self.a3pl_S, "lAr")

    def _connect_cases(self, state: MorphemeState) -> None:
        state.add(self.dat_ST, "(y)A")
        state.add(self.acc_ST, "(y)I")
        state.add(self.loc_ST, "DA")
        state.add(self.abl_ST, "DAn")
        state.add(self.gen_ST, "(n)In")
        state.add(self.ins_ST, "(y)lA")
        state.add(self.equ_ST, "CA")

    # ── Nominal copula: öğretmenim, evdeydi, kitaptır ──────────────────────

    def _build_copula(self) -> None:
        V = PrimaryPos.VERB
        s = self._state

        self.nVerb_S = s("nVerb_S", "Zero", V, derivative=True)
        self.nPres_S = s("nPres_S", "Pres", V)
        self.nPast_S = s("nPast_S", "Past", V)
        self.nNarr_S = s("nNarr_S", "Narr", V)
        self.nCond_S = s("nCond_S", "Cond", V)
        self.nA3sg_S = s("nA3sg_S", "A3sg", V)
        self.cop_ST = s("cop_ST", "Cop", V, terminal=True)

        # Agreement endings shared by every finite verb form
        self.vA1sg_ST = s("vA1sg_ST", "A1sg", V, terminal=True)
        self.vA2sg_ST = s("vA2sg_ST", "A2sg", V, terminal=True)
        self.vA3sg_ST = s("vA3sg_ST", "A3sg", V, terminal=True)
        self.vA1pl_ST = s("vA1pl_ST", "A1pl", V, terminal=True)
        self.vA2pl_ST = s("vA2pl_ST", "A2pl", V, terminal=True)
        self.vA3pl_ST = s("vA3pl_ST", "A3pl", V, terminal=True)

        for nominal in (self.nom_ST, self.possNom_ST, self.loc_ST, self.adj_ST, self.num_ST):
            nominal.add_empty(self.nVerb_S)

        self.nVerb_S.add_empty(self.nPres_S)
        self.nVerb_S.add(self.nPast_S, "(y)DI")
        self.nVerb_S.add(self.nNarr_S, "(y)mIş")
        self.nVerb_S.add(self.nCond_S, "(y)sA")

        self.nPres_S.add(self.vA1sg_ST, "(y)Im")
        self.nPres_S.add(self.vA2sg_ST, "sIn")
        self.nPres_S.add(self.vA1pl_ST, "(y)Iz")
        self.nPres_S.add(self.vA2pl_ST, "sInIz")
        self.nPres_S.add_empty(self.nA3sg_S)
        self.nA3sg_S.add(self.cop_ST, "DIr")

        self._past_agreement(self.nPast_S)
        self._past_agreement(self.nCond_S)
        self._present_agreement(self.nNarr_S)

    def _past_agreement(self, state: MorphemeState) -> None:
        state.add(self.vA1sg_ST, "m")
        state.add(self.vA2sg_ST, "n")
        state.add_empty(self.vA3sg_ST)
        state.add(self.vA1pl_ST, "k")
        state.add(self.vA2pl_ST, "nIz")
        state.add(self.vA3pl_ST, "lAr")

    def _present_agreement(self, state: MorphemeState) -> None:
        state.add(self.vA1sg_ST, "Im")
        state.add(self.vA2sg_ST, "sIn")
        state.add_empty(self.vA3sg_ST)
        state.add(self.vA1pl_ST, "Iz")
        state.add(self.vA2pl_ST, "sInIz")
        state.add(self.vA3pl_ST, "lAr")

    # ── Verbs ────────────────────────────────────────────────────────────

    def _build_verbs(self) -> None:
        V = PrimaryPos.VERB
        s = self._state

        self.verb_S = s("verb_S", "Verb", V)
        self.vNeg_S = s("vNeg_S", "Neg", V)
        self.vNegProg_S = s("vNegProg_S", "Neg", V)
        self.vImp_S = s("vImp_S", "Imp", V)
        self.vPast_S = s("vPast_S", "Past", V)
        self.vNarr_S = s("vNarr_S", "Narr", V)
        self.vProg_S = s("vProg_S", "Prog1", V)
        self.vAor_S = s("vAor_S", "Aor", V)
        self.vNegAor_S = s("vNegAor_S", "Aor", V)
        self.vNegAorZ_S = s("vNegAorZ_S", "Aor", V)
        self.vFut_S = s("vFut_S", "Fut", V)
        self.vCond_S = s("vCond_S", "Cond", V)
        self.inf1_S = s("inf1_S", "Inf1", PrimaryPos.NOUN, derivative=True)
        self.inf2_S = s("inf2_S", "Inf2", PrimaryPos.NOUN, derivative=True)

        self.verb_S.add(self.vNeg_S, "mA")
        self.verb_S.add(self.vNegProg_S, "m")
        self.verb_S.add(self.vProg_S, "Iyor", after_consonant)
        self.verb_S.add(self.vAor_S, "Ar", all_of(after_consonant, has_attribute(RootAttribute.AORIST_A)))
        self.verb_S.add(self.vAor_S, "Ir", all_of(after_consonant, has_attribute(RootAttribute.AORIST_I)))
        self.verb_S.add(self.vAor_S, "r", after_vowel)
        self._connect_tenses(self.verb_S)

        self.vNegProg_S.add(self.vProg_S, "Iyor")

        # gelmez, gelmezsin / gelmem, gelmeyiz
        self.vNeg_S.add(self.vNegAorZ_S, "z")
        self.vNeg_S.add_empty(self.vNegAor_S)
        self._connect_tenses(self.vNeg_S)
        self.vNegAor_S.add(self.vA1sg_ST, "m")
        self.vNegAor_S.add(self.vA1pl_ST, "(y)Iz")
        self.vNegAorZ_S.add(self.vA2sg_ST, "sIn")
        self.vNegAorZ_S.add_empty(self.vA3sg_ST)
        self.vNegAorZ_S.add(self.vA2pl_ST, "sInIz")
        self.vNegAorZ_S.add(self.vA3pl_ST, "lAr")

        # gel, gelsin, gelin, geliniz, gelsinler
        self.vImp_S.add_empty(self.vA2sg_ST)
        self.vImp_S.add(self.vA3sg_ST, "sIn")
        self.vImp_S.add(self.vA2pl_ST, "(y)In")
        self.vImp_S.add(self.vA2pl_ST, "(y)InIz")
        self.vImp_S.add(self.vA3pl_ST, "sInlAr")

        self._past_agreement(self.vPast_S)
        self._past_agreement(self.vCond_S)
        for tense in (self.vNarr_S, self.vProg_S, self.vAor_S, self.vFut_S):
            self._present_agreement(tense)

        self._connect_noun(self.inf1_S)
        self._connect_noun(self.inf2_S)

    def _connect_tenses(self, state: MorphemeState) -> None:
        state.add_empty(self.vImp_S)
        state.add(self.vPast_S, "DI")
        state.add(self.vNarr_S, "mIş")
        state.add(self.vFut_S, "(y)AcA~k")
        state.add(self.vCond_S, "sA")
        state.add(self.inf1_S, "mAk")
        state.add(self.inf2_S, "mA")

    # ── Uninflected categories ───────────────────────────────────────────

    def _build_closed_classes(self) -> None:
        s = self._state
        self.adv_ST = s("adv_ST", "Adv", PrimaryPos.ADVERB, terminal=True)
        self.conj_ST = s("conj_ST", "Conj", PrimaryPos.CONJUNCTION, terminal=True)
        self.interj_ST = s("interj_ST", "Interj", PrimaryPos.INTERJECTION, terminal=True)
        self.det_ST = s("det_ST", "Det", PrimaryPos.DETERMINER, terminal=True)
        self.postp_ST = s("postp_ST", "Postp", PrimaryPos.POSTPOSITIVE, terminal=True)
        self.ques_ST = s("ques_ST", "Ques", PrimaryPos.QUESTION, terminal=True)
        self.punc_ST = s("punc_ST", "Punc", PrimaryPos.PUNCTUATION, terminal=True)

        self._roots: dict[PrimaryPos, MorphemeState] = {
            PrimaryPos.NOUN: self.noun_S,
            PrimaryPos.ADJECTIVE: self.adj_ST,
            PrimaryPos.ADVERB: self.adv_ST,
            PrimaryPos.CONJUNCTION: self.conj_ST,
            PrimaryPos.INTERJECTION: self.interj_ST,
            PrimaryPos.VERB: self.verb_S,
            PrimaryPos.PRONOUN: self.pron_S,
            PrimaryPos.NUMERAL: self.num_ST,
            PrimaryPos.DETERMINER: self.det_ST,
            PrimaryPos.POSTPOSITIVE: self.postp_ST,
            PrimaryPos.QUESTION: self.ques_ST,
            PrimaryPos.PUNCTUATION: self.punc_ST,
            PrimaryPos.ABBREVIATION: self.abbrv_S,
        }

    def root_state(self, item: DictionaryItem) -> MorphemeState:
        """Where traversal starts for an item, by its primary category."""
        return self._roots[item.primary_pos]

    def transition_count(self) -> int:
        return sum(len(state.outgoing) for state in self.states.values())


@lru_cache(maxsize=1)
def default_morphotactics() -> TurkishMorphotactics:
    """The process-wide, read-only suffix graph."""
    return TurkishMorphotactics()
