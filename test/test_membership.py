"""Membership tests and reverse lookup."""

import pytest
from pratyahara.registry.membership import find_groups_containing, is_member, membership
from pratyahara.registry.named_groups import PratyaharaRegistry, get_named_group
from pratyahara.sivasutra.constructor import INVALID_INPUT, NOT_FOUND


def test_every_vowel_is_in_ac():
    for ph in get_named_group("ac").phonemes:
        assert is_member(ph, "ac")


def test_no_consonant_is_in_ac():
    for ph in get_named_group("hal").phonemes:
        assert not is_member(ph, "ac")


def test_consonants_in_hal():
    for ph in ("k", "p", "h"):
        assert is_member(ph, "hal")
    assert not is_member("a", "hal")


def test_shorthand_start_plus_marker():
    """Unregistered names are read as start + single-character marker."""
    assert is_member("e", "ic")
    assert not is_member("a", "ic")
    result = membership("u", "ic")
    assert result.belongs
    assert result.phonemes[0] == "i"


def test_shorthand_cannot_express_multichar_marker():
    """'jhaṣ' splits into start 'jha' and marker 'ṣ'; 'jha' is not a phoneme."""
    result = membership("jh", "jhaṣ")
    assert not result.belongs
    assert result.error == NOT_FOUND


def test_shorthand_with_multichar_start():
    assert is_member("bh", "jhñ")


@pytest.mark.parametrize("phoneme,group", [("", "ac"), ("a", ""), (None, "ac"), ("a", None)])
def test_invalid_membership_inputs(phoneme, group):
    assert not is_member(phoneme, group)
    assert membership(phoneme, group).error == INVALID_INPUT


def test_single_character_unknown_group():
    assert not is_member("a", "q")


def test_find_groups_containing_a():
    assert find_groups_containing("a") == ["ac", "aṇ"]


def test_find_groups_containing_k():
    assert find_groups_containing("k") == ["hal", "jhal"]


def test_find_groups_containing_y():
    assert find_groups_containing("y") == ["hal", "aṇ", "yañ"]


def test_find_groups_containing_nothing():
    assert find_groups_containing("z") == []
    assert find_groups_containing("") == []
    assert find_groups_containing(None) == []


def test_find_groups_uses_given_registry():
    reg = PratyaharaRegistry({"ic": ("i", "c")})
    assert find_groups_containing("e", reg) == ["ic"]
    assert is_member("e", "ic", reg)
