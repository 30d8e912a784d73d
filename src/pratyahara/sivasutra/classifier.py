"""Coarse phonetic category for a set of phonemes."""
from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, List

VOWELS: FrozenSet[str] = frozenset(
    ["a", "i", "u", "ṛ", "ḷ", "e", "o", "ai", "au"]
)
CONSONANTS: FrozenSet[str] = frozenset(
    [
        "h", "y", "v", "r", "l",
        "ñ", "m", "ṅ", "ṇ", "n",
        "jh", "bh", "gh", "ḍh", "dh",
        "j", "b", "g", "ḍ", "d",
        "kh", "ph", "ch", "ṭh", "th",
        "c", "ṭ", "t", "k", "p",
        "ś", "ṣ", "s",
    ]
)
SEMIVOWELS: FrozenSet[str] = frozenset(["y", "v", "r", "l"])
NASALS: FrozenSet[str] = frozenset(["ñ", "m", "ṅ", "ṇ", "n"])

# Checked in this order; the first set holding every phoneme names the category.
REFERENCE_SETS: Dict[str, FrozenSet[str]] = {
    "vowels": VOWELS,
    "consonants": CONSONANTS,
    "semivowels": SEMIVOWELS,
    "nasals": NASALS,
}

EMPTY = "empty"
MIXED = "mixed"


def classify(phonemes: Iterable[str]) -> str:
    """
    Return 'vowels', 'consonants', 'semivowels', 'nasals', 'mixed' or 'empty'.
    """
    items = set(phonemes or ())
    if not items:
        return EMPTY
    for category, reference in REFERENCE_SETS.items():
        if items <= reference:
            return category
    return MIXED


def phoneme_classes(phoneme: str) -> List[str]:
    """Names of every reference set that contains a single phoneme."""
    return [name for name, ref in REFERENCE_SETS.items() if phoneme in ref]


__all__ = [
    "VOWELS",
    "CONSONANTS",
    "SEMIVOWELS",
    "NASALS",
    "REFERENCE_SETS",
    "EMPTY",
    "MIXED",
    "classify",
    "phoneme_classes",
]
