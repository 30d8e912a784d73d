"""Registry of the traditionally named pratyāhāras, built once at import."""
from __future__ import annotations

import logging
from collections import namedtuple
from typing import Dict, Iterator, List, Optional, Tuple

from pratyahara.sivasutra.classifier import classify
from pratyahara.sivasutra.constructor import (
    INVALID_INPUT,
    NAMED_PAIRS,
    UNKNOWN_GROUP,
    construct,
)

logger = logging.getLogger(__name__)

GroupLookup = namedtuple(
    "GroupLookup",
    "phonemes valid error name category",
    defaults=(None, None, "empty"),
)


class PratyaharaRegistry:
    """Named pratyāhāras keyed by lower-cased name."""

    def __init__(self, pairs: Optional[Dict[str, Tuple[str, str]]] = None):
        pairs = NAMED_PAIRS if pairs is None else pairs
        self.pairs: Dict[str, Tuple[str, str]] = {
            name.lower(): pair for name, pair in pairs.items()
        }
        self._groups: Dict[str, Tuple[str, ...]] = {}
        for name, (start, marker) in self.pairs.items():
            result = construct(start, marker)
            if not result.valid:
                raise RuntimeError(
                    f"Cannot build pratyāhāra '{name}' from ({start}, {marker}): "
                    f"{result.message}"
                )
            self._groups[name] = tuple(result.phonemes)
        logger.debug("Built pratyahara registry with %d groups", len(self._groups))

    def get(self, name: str) -> GroupLookup:
        """Look up a named group; unknown names yield valid=False."""
        if not isinstance(name, str) or not name:
            return GroupLookup(phonemes=[], valid=False, error=INVALID_INPUT)
        key = name.lower()
        phonemes = self._groups.get(key)
        if phonemes is None:
            return GroupLookup(phonemes=[], valid=False, error=UNKNOWN_GROUP)
        return GroupLookup(
            phonemes=list(phonemes),
            valid=True,
            error=None,
            name=key,
            category=classify(phonemes),
        )

    def phonemes(self, name: str) -> Tuple[str, ...]:
        """Cached phoneme tuple for `name`; empty tuple when unknown."""
        if not isinstance(name, str):
            return ()
        return self._groups.get(name.lower(), ())

    def pair(self, name: str) -> Optional[Tuple[str, str]]:
        if not isinstance(name, str):
            return None
        return self.pairs.get(name.lower())

    def names(self) -> List[str]:
        return list(self._groups)

    def items(self) -> Iterator[Tuple[str, Tuple[str, ...]]]:
        return iter(self._groups.items())

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and name.lower() in self._groups

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)


REGISTRY = PratyaharaRegistry()


def get_named_group(name: str) -> GroupLookup:
    """Module-level shortcut for ``REGISTRY.get``."""
    return REGISTRY.get(name)


__all__ = ["GroupLookup", "PratyaharaRegistry", "REGISTRY", "get_named_group"]
