"""Membership tests and reverse lookup over named pratyāhāras."""
from __future__ import annotations

from collections import namedtuple
from typing import List, Optional

from pratyahara.sivasutra.constructor import INVALID_INPUT, construct

from .named_groups import REGISTRY, PratyaharaRegistry

MembershipResult = namedtuple(
    "MembershipResult", "belongs phonemes group error", defaults=(None,)
)


def _group_phonemes(group: str, registry: PratyaharaRegistry):
    """Return (phonemes, error) for a registered name or a start+marker shorthand."""
    lookup = registry.get(group)
    if lookup.valid:
        return lookup.phonemes, None
    if len(group) < 2:
        return [], lookup.error
    # Shorthand: everything before the final character is the start phoneme.
    # A multi-character marker cannot be written this way.
    result = construct(group[:-1], group[-1])
    if not result.valid:
        return [], result.error
    return result.phonemes, None


def membership(
    phoneme: str, group: str, registry: Optional[PratyaharaRegistry] = None
) -> MembershipResult:
    """Detailed form of ``is_member``."""
    if (
        not isinstance(phoneme, str)
        or not isinstance(group, str)
        or not phoneme
        or not group
    ):
        return MembershipResult(False, [], group, INVALID_INPUT)
    phonemes, error = _group_phonemes(
        group, registry if registry is not None else REGISTRY
    )
    if error:
        return MembershipResult(False, [], group, error)
    return MembershipResult(phoneme in phonemes, phonemes, group, None)


def is_member(
    phoneme: str, group: str, registry: Optional[PratyaharaRegistry] = None
) -> bool:
    """True if `phoneme` belongs to the named group or start+marker shorthand."""
    return membership(phoneme, group, registry).belongs


def find_groups_containing(
    phoneme: str, registry: Optional[PratyaharaRegistry] = None
) -> List[str]:
    """Names of every registered group whose phonemes include `phoneme`."""
    if not isinstance(phoneme, str) or not phoneme:
        return []
    if registry is None:
        registry = REGISTRY
    return [name for name, phonemes in registry.items() if phoneme in phonemes]


__all__ = [
    "MembershipResult",
    "membership",
    "is_member",
    "find_groups_containing",
]
