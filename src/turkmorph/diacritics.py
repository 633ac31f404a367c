"""
Diacritic equivalence: lets ASCII-typed Turkish find its roots.

When enabled, each ASCII letter stands for every Turkish letter it may have
been typed in place of ("s" for s or ş, "i" for i or ı).  Comparison is done by
folding both sides to their ASCII representative, which is the same thing as
expanding every character to its equivalence class and intersecting.

Usage:
    from turkmorph.diacritics import DiacriticEquivalence

    eq = DiacriticEquivalence(enabled=True)
    eq.expand("s")                    # frozenset({"s", "ş"})
    eq.equivalent("sira", "şıra")     # True
"""

from __future__ import annotations


# ASCII representative → letters it may stand for
EQUIVALENCE_CLASSES: dict[str, frozenset[str]] = {
    "a": frozenset("aâ"),
    "c": frozenset("cç"),
    "g": frozenset("gğ"),
    "i": frozenset("iıî"),
    "o": frozenset("oö"),
    "s": frozenset("sş"),
    "u": frozenset("uüû"),
}

_FOLD_TABLE = str.maketrans(
    {member: ascii_ for ascii_, members in EQUIVALENCE_CLASSES.items() for member in members}
)


def fold(text: str) -> str:
    """Map every letter to its ASCII representative: kazançığa → kazanciga."""
    return text.translate(_FOLD_TABLE)


class DiacriticEquivalence:
    """The equivalence layer used by the stem matcher and the suffix engine.

    Disabled instances behave as the identity: ``key`` returns its input and
    ``equivalent`` is plain string equality.
    """

    __slots__ = ("enabled",)

    def __init__(self, enabled: bool = False):
        self.enabled = enabled

    def expand(self, ch: str) -> frozenset[str]:
        """Letters that ``ch`` may represent (just ``ch`` when disabled)."""
        if not self.enabled:
            return frozenset(ch)
        return EQUIVALENCE_CLASSES.get(fold(ch), frozenset(ch))

    def key(self, text: str) -> str:
        """Lookup key for an index built with this layer."""
        return fold(text) if self.enabled else text

    def equivalent(self, a: str, b: str) -> bool:
        if not self.enabled:
            return a == b
        return len(a) == len(b) and fold(a) == fold(b)

    def __repr__(self) -> str:
        return f"DiacriticEquivalence(enabled={self.enabled})"
