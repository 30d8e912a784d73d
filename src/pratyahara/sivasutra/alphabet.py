"""Śivasūtra alphabet: ordered phonemes with their marker (it) letters."""
from __future__ import annotations

from typing import FrozenSet, List, Optional, Sequence, Tuple

# (label, phonemes, marker) for each of the 14 sūtras, in recitation order.
SIVASUTRA_BLOCKS: Tuple[Tuple[str, Tuple[str, ...], str], ...] = (
    ("अइउण्", ("a", "i", "u"), "ṇ"),
    ("ऋऌक्", ("ṛ", "ḷ"), "k"),
    ("एओङ्", ("e", "o"), "ṅ"),
    ("ऐऔच्", ("ai", "au"), "c"),
    ("हयवरट्", ("h", "y", "v", "r"), "ṭ"),
    ("लण्", ("l",), "ṇ"),
    ("ञमङणनम्", ("ñ", "m", "ṅ", "ṇ", "n"), "m"),
    ("झभञ्", ("jh", "bh"), "ñ"),
    ("घढधष्", ("gh", "ḍh", "dh"), "ṣ"),
    ("जबगडदश्", ("j", "b", "g", "ḍ", "d"), "ś"),
    ("खफछठथचटतव्", ("kh", "ph", "ch", "ṭh", "th", "c", "ṭ", "t"), "v"),
    ("कपय्", ("k", "p"), "y"),
    ("शषसर्", ("ś", "ṣ", "s"), "r"),
    ("हल्", ("h",), "l"),
)


def _flatten_blocks() -> Tuple[Tuple[str, ...], FrozenSet[int]]:
    seq: List[str] = []
    positions: List[int] = []
    for _, phonemes, marker in SIVASUTRA_BLOCKS:
        seq.extend(phonemes)
        positions.append(len(seq))
        seq.append(marker)
    return tuple(seq), frozenset(positions)


SIVASUTRA_ALPHABET, MARKER_POSITIONS = _flatten_blocks()

MARKERS: Tuple[str, ...] = tuple(marker for _, _, marker in SIVASUTRA_BLOCKS)

SIVASUTRA_PHONEMES: Tuple[str, ...] = tuple(
    ph
    for i, ph in enumerate(SIVASUTRA_ALPHABET)
    if i not in MARKER_POSITIONS
)

# Distinct ordinary phonemes; "h" closes both sūtra 5 and sūtra 14.
PHONEME_INVENTORY: Tuple[str, ...] = tuple(dict.fromkeys(SIVASUTRA_PHONEMES))


def alphabet() -> Tuple[str, ...]:
    """Return the 57-entry Śivasūtra sequence including markers."""
    return SIVASUTRA_ALPHABET


def marker_positions() -> FrozenSet[int]:
    """Return the absolute indices of the 14 marker letters."""
    return MARKER_POSITIONS


def is_marker_position(index: int) -> bool:
    return index in MARKER_POSITIONS


def occurrences(symbol: str, seq: Optional[Sequence[str]] = None) -> List[int]:
    """All indices at which `symbol` appears in `seq` (canonical alphabet by default)."""
    seq = SIVASUTRA_ALPHABET if seq is None else seq
    return [i for i, ph in enumerate(seq) if ph == symbol]


def is_canonical(seq: Optional[Sequence[str]]) -> bool:
    """True when `seq` is omitted or equal to the canonical alphabet."""
    if seq is None or seq is SIVASUTRA_ALPHABET:
        return True
    return tuple(seq) == SIVASUTRA_ALPHABET


__all__ = [
    "SIVASUTRA_BLOCKS",
    "SIVASUTRA_ALPHABET",
    "MARKER_POSITIONS",
    "MARKERS",
    "SIVASUTRA_PHONEMES",
    "PHONEME_INVENTORY",
    "alphabet",
    "marker_positions",
    "is_marker_position",
    "occurrences",
    "is_canonical",
]
