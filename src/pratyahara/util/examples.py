"""Worked examples of pratyāhāra usage in Pāṇinian grammar."""
from __future__ import annotations

from typing import Dict

from pratyahara.registry.named_groups import REGISTRY

_COMMON = [
    {
        "name": "अच्",
        "key": "ac",
        "meaning": "All vowels",
        "usage": "Used in rules about vowel changes, sandhi, etc.",
    },
    {
        "name": "हल्",
        "key": "hal",
        "meaning": "All consonants",
        "usage": "Used in rules about consonant modifications",
    },
    {
        "name": "इक्",
        "key": "ik",
        "meaning": "Close vowels",
        "usage": "Used in guṇa and vṛddhi rules",
    },
]


def get_pratyahara_examples() -> Dict:
    """Return the principle, common groups and construction walkthrough."""
    examples = []
    for entry in _COMMON:
        examples.append(
            {
                "name": entry["name"],
                "construction": list(REGISTRY.pair(entry["key"])),
                "phonemes": list(REGISTRY.phonemes(entry["key"])),
                "meaning": entry["meaning"],
                "usage": entry["usage"],
            }
        )

    return {
        "principle": "आदिरन्त्येन सहेता - Initial with final marker denotes the group",
        "common": {
            "description": "Most frequently used pratyāhāras in Pāṇinian grammar",
            "examples": examples,
        },
        "construction": {
            "description": "How pratyāhāras are constructed from the Śivasūtras",
            "process": [
                "Take the initial phoneme (ādi)",
                "Take the marker (it) letter from a later sūtra",
                "Include all phonemes between them, dropping every marker",
                "The result is the pratyāhāra group",
            ],
            "example": {
                "input": "To get vowels: start with a (अ), end with the marker c (च्)",
                "sivasutras": "अइउण् ऋऌक् एओङ् ऐऔच्",
                "result": "अ इ उ ऋ ऌ ए ओ ऐ औ (all vowels)",
                "notation": "अच्",
            },
        },
        "traditional_note": (
            "The pratyāhāra system gives a compact way to refer to phoneme groups, "
            "so grammatical rules need not enumerate them."
        ),
    }


__all__ = ["get_pratyahara_examples"]
