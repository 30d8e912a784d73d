"""Public query surface used by grammar-rule modules."""

from pratyahara.registry.membership import find_groups_containing, is_member
from pratyahara.registry.named_groups import get_named_group
from pratyahara.sivasutra.classifier import classify
from pratyahara.sivasutra.constructor import construct, validate

__all__ = [
    "construct",
    "validate",
    "get_named_group",
    "is_member",
    "find_groups_containing",
    "classify",
]
