"""Occurrence resolution for symbols that recur in the Śivasūtras.

"a", "h", "l", "ṇ" and "ś" each appear more than once in the alphabet, either
as ordinary phonemes or as markers. The default rule picks the first start
occurrence and the first marker occurrence after it. Traditional pairs that
need something else are declared in ``DISAMBIGUATION_TABLE``; the slicing code
in ``constructor`` never special-cases a symbol.
"""
from __future__ import annotations

from collections import namedtuple
from typing import Dict, Optional, Sequence, Tuple

START_FIRST = "first"
START_LAST = "last"

MARKER_FIRST_AFTER_START = "first-after-start"
MARKER_FIRST_AFTER_ANCHOR = "first-after-anchor"
MARKER_LAST = "last"

Resolution = namedtuple("Resolution", "start marker anchor", defaults=(None,))

DEFAULT_RESOLUTION = Resolution(START_FIRST, MARKER_FIRST_AFTER_START)

DISAMBIGUATION_TABLE: Dict[Tuple[str, str], Resolution] = {
    # aṇ closes on the ṇ of "laṇ", not the ṇ of "a i u ṇ".
    ("a", "ṇ"): Resolution(START_FIRST, MARKER_FIRST_AFTER_ANCHOR, "l"),
    # hal spans the whole consonant block up to the final "l" of "hal".
    ("h", "l"): Resolution(START_FIRST, MARKER_LAST),
    # The first ś is the marker of "jabagaḍadaś"; śal starts in "śaṣasar".
    ("ś", "l"): Resolution(START_LAST, MARKER_LAST),
}


def _index(seq: Sequence[str], symbol: str, start: int = 0) -> int:
    for i in range(max(start, 0), len(seq)):
        if seq[i] == symbol:
            return i
    return -1


def _last_index(seq: Sequence[str], symbol: str) -> int:
    for i in range(len(seq) - 1, -1, -1):
        if seq[i] == symbol:
            return i
    return -1


def _resolve_start(seq: Sequence[str], symbol: str, strategy: str) -> int:
    if strategy == START_FIRST:
        return _index(seq, symbol)
    if strategy == START_LAST:
        return _last_index(seq, symbol)
    raise ValueError(f"Unknown start strategy: {strategy}")


def _resolve_marker(
    seq: Sequence[str],
    symbol: str,
    strategy: str,
    start_idx: int,
    anchor: Optional[str],
) -> int:
    if strategy == MARKER_FIRST_AFTER_START:
        idx = _index(seq, symbol, start_idx) if start_idx >= 0 else -1
        if idx == -1:
            idx = _index(seq, symbol)
        return idx
    if strategy == MARKER_FIRST_AFTER_ANCHOR:
        anchor_idx = _index(seq, anchor) if anchor else -1
        if anchor_idx == -1:
            return -1
        return _index(seq, symbol, anchor_idx)
    if strategy == MARKER_LAST:
        return _last_index(seq, symbol)
    raise ValueError(f"Unknown marker strategy: {strategy}")


class OccurrenceResolver:
    """Resolve (start, marker) symbols to alphabet indices."""

    def __init__(self, table: Optional[Dict[Tuple[str, str], Resolution]] = None):
        self.table: Dict[Tuple[str, str], Resolution] = dict(
            DISAMBIGUATION_TABLE if table is None else table
        )

    def resolution_for(
        self, start: str, marker: str, use_table: bool = True
    ) -> Resolution:
        """Return the table entry for the pair, or the default rule."""
        if use_table:
            return self.table.get((start, marker), DEFAULT_RESOLUTION)
        return DEFAULT_RESOLUTION

    def resolve(
        self,
        seq: Sequence[str],
        start: str,
        marker: str,
        use_table: bool = True,
    ) -> Tuple[int, int]:
        """Return (start_index, marker_index); -1 marks a symbol that was not found."""
        res = self.resolution_for(start, marker, use_table)
        start_idx = _resolve_start(seq, start, res.start)
        marker_idx = _resolve_marker(seq, marker, res.marker, start_idx, res.anchor)
        return start_idx, marker_idx


DEFAULT_RESOLVER = OccurrenceResolver()


__all__ = [
    "START_FIRST",
    "START_LAST",
    "MARKER_FIRST_AFTER_START",
    "MARKER_FIRST_AFTER_ANCHOR",
    "MARKER_LAST",
    "Resolution",
    "DEFAULT_RESOLUTION",
    "DISAMBIGUATION_TABLE",
    "OccurrenceResolver",
    "DEFAULT_RESOLVER",
]
