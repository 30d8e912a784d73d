"""Pratyāhāra construction (Aṣṭādhyāyī 1.1.71, ādir antyena sahetā).

A pratyāhāra names the phonemes from a start letter up to, but not including,
a marker letter of the Śivasūtras. Markers inside the span are not phonemes
of the group and are dropped.
"""
from __future__ import annotations

import logging
from collections import namedtuple
from collections.abc import Sequence
from typing import Dict, List, Optional, Tuple

from .alphabet import SIVASUTRA_ALPHABET, is_canonical, is_marker_position
from .classifier import classify
from .disambiguation import DEFAULT_RESOLVER, OccurrenceResolver

logger = logging.getLogger(__name__)

INVALID_INPUT = "invalid-input"
NOT_FOUND = "not-found"
ORDER_VIOLATION = "order-violation"
UNKNOWN_GROUP = "unknown-group"

# name -> (start, marker) for the traditionally fixed groups, in registry order.
NAMED_PAIRS: Dict[str, Tuple[str, str]] = {
    "ac": ("a", "c"),
    "hal": ("h", "l"),
    "ik": ("i", "k"),
    "aṇ": ("a", "ṇ"),
    "yañ": ("y", "ñ"),
    "jhal": ("jh", "l"),
    "śal": ("ś", "l"),
}
TRADITIONAL_PAIRS = frozenset(NAMED_PAIRS.values())

PratyaharaResult = namedtuple(
    "PratyaharaResult",
    "phonemes valid error message traditional start marker category",
    defaults=(None, None, False, None, None, "empty"),
)


def is_traditional(start: str, marker: str) -> bool:
    """True if (start, marker) is one of the seven named pairs."""
    return (start, marker) in TRADITIONAL_PAIRS


def _failure(code: str, message: str, start=None, marker=None) -> PratyaharaResult:
    logger.debug("pratyahara rejected (%s): start=%r marker=%r", code, start, marker)
    return PratyaharaResult(
        phonemes=[],
        valid=False,
        error=code,
        message=message,
        start=start,
        marker=marker,
    )


def _valid_alphabet(seq) -> bool:
    if isinstance(seq, (str, bytes)) or not isinstance(seq, Sequence):
        return False
    return all(isinstance(ph, str) for ph in seq)


def construct(
    start: str,
    marker: str,
    alphabet: Optional[Sequence[str]] = None,
    resolver: Optional[OccurrenceResolver] = None,
) -> PratyaharaResult:
    """
    Build the pratyāhāra running from `start` up to the marker `marker`.

    With no `alphabet` (or one equal to the Śivasūtras) the occurrence of each
    symbol is resolved through the disambiguation table and markers are
    filtered out of the span. A custom alphabet is sliced as-is.
    """
    if (
        not isinstance(start, str)
        or not isinstance(marker, str)
        or not start
        or not marker
    ):
        return _failure(
            INVALID_INPUT,
            "Invalid input: start phoneme and marker must be non-empty strings",
        )
    if alphabet is not None and not _valid_alphabet(alphabet):
        return _failure(
            INVALID_INPUT,
            "Invalid input: alphabet must be a sequence of strings",
            start,
            marker,
        )

    canonical = is_canonical(alphabet)
    seq = SIVASUTRA_ALPHABET if canonical else tuple(alphabet)
    resolver = resolver or DEFAULT_RESOLVER

    start_idx, marker_idx = resolver.resolve(seq, start, marker, use_table=canonical)

    if start_idx == -1:
        return _failure(
            NOT_FOUND, f"Start phoneme '{start}' not found in alphabet", start, marker
        )
    if marker_idx == -1:
        return _failure(
            NOT_FOUND, f"Marker '{marker}' not found in alphabet", start, marker
        )
    if start_idx >= marker_idx:
        return _failure(
            ORDER_VIOLATION,
            "Start phoneme must come before the marker in the alphabet",
            start,
            marker,
        )

    phonemes: List[str] = []
    seen = set()
    for idx in range(start_idx, marker_idx):
        ph = seq[idx]
        if canonical and (is_marker_position(idx) or ph == marker):
            continue
        if ph in seen:
            continue
        seen.add(ph)
        phonemes.append(ph)

    return PratyaharaResult(
        phonemes=phonemes,
        valid=True,
        error=None,
        message=None,
        traditional=is_traditional(start, marker),
        start=start,
        marker=marker,
        category=classify(phonemes),
    )


def validate(
    start: str, marker: str, alphabet: Optional[Sequence[str]] = None
) -> Dict:
    """Summarize whether (start, marker) forms a valid pratyāhāra."""
    result = construct(start, marker, alphabet)
    return {
        "valid": result.valid,
        "phonemes": result.phonemes,
        "length": len(result.phonemes),
        "error": result.error,
        "category": result.category if result.valid else None,
    }


__all__ = [
    "INVALID_INPUT",
    "NOT_FOUND",
    "ORDER_VIOLATION",
    "UNKNOWN_GROUP",
    "NAMED_PAIRS",
    "TRADITIONAL_PAIRS",
    "PratyaharaResult",
    "is_traditional",
    "construct",
    "validate",
]
