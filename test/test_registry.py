"""Named pratyāhāra registry."""

import pytest
from pratyahara.registry.named_groups import REGISTRY, PratyaharaRegistry, get_named_group
from pratyahara.sivasutra.constructor import INVALID_INPUT, NAMED_PAIRS, UNKNOWN_GROUP, construct


def test_registry_holds_seven_groups(registry):
    assert registry.names() == ["ac", "hal", "ik", "aṇ", "yañ", "jhal", "śal"]
    assert len(registry) == 7


@pytest.mark.parametrize("name", list(NAMED_PAIRS))
def test_construct_matches_registry(name):
    """Every traditional pair constructs exactly the registered group."""
    start, marker = NAMED_PAIRS[name]
    assert construct(start, marker).phonemes == get_named_group(name).phonemes


def test_get_ac(registry):
    result = registry.get("ac")
    assert result.valid
    assert result.name == "ac"
    assert result.phonemes == ["a", "i", "u", "ṛ", "ḷ", "e", "o", "ai", "au"]
    assert result.category == "vowels"


def test_get_hal_is_consonants(registry):
    result = registry.get("hal")
    assert result.valid
    assert result.category == "consonants"
    for ph in ("h", "k", "p"):
        assert ph in result.phonemes


def test_case_insensitive_names(registry):
    assert registry.get("AC").phonemes == registry.get("ac").phonemes
    assert registry.get("Ac").valid
    assert registry.get("YAÑ").phonemes == ["y", "v", "r", "l"]
    assert "HAL" in registry


def test_unknown_group(registry):
    result = registry.get("invalid")
    assert not result.valid
    assert result.error == UNKNOWN_GROUP
    assert result.phonemes == []


@pytest.mark.parametrize("bad", ["", None, 3])
def test_invalid_names(registry, bad):
    result = registry.get(bad)
    assert not result.valid
    assert result.error == INVALID_INPUT


def test_returned_lists_do_not_mutate_cache():
    first = REGISTRY.get("ik")
    first.phonemes.append("x")
    assert REGISTRY.get("ik").phonemes == ["i", "u", "ṛ", "ḷ"]


def test_vowels_and_consonants_disjoint():
    ac = set(get_named_group("ac").phonemes)
    hal = set(get_named_group("hal").phonemes)
    assert not ac & hal


def test_subset_relationships():
    assert set(get_named_group("ik").phonemes) <= set(get_named_group("ac").phonemes)
    assert set(get_named_group("yañ").phonemes) <= set(get_named_group("aṇ").phonemes)


def test_registry_build_failure_raises():
    with pytest.raises(RuntimeError):
        PratyaharaRegistry({"bad": ("u", "a")})


def test_custom_registry_pairs():
    reg = PratyaharaRegistry({"IC": ("i", "c")})
    assert reg.names() == ["ic"]
    assert reg.pair("ic") == ("i", "c")
    assert reg.get("ic").phonemes[0] == "i"


def test_hal_matches_traditional_consonant_list():
    """Full hal list, with the second h of "hal" collapsed into the first."""
    expected = [
        "h", "y", "v", "r", "ñ", "m", "ṅ", "ṇ", "n", "jh", "bh", "gh", "ḍh",
        "dh", "j", "b", "g", "ḍ", "d", "kh", "ph", "ch", "ṭh", "th", "c", "ṭ",
        "t", "k", "p", "ś", "ṣ", "s",
    ]
    assert get_named_group("hal").phonemes == expected
    assert construct("h", "l").phonemes == expected


def test_jhal_matches_traditional_list():
    expected = [
        "jh", "bh", "gh", "ḍh", "dh", "j", "b", "g", "ḍ", "d", "kh", "ph",
        "ch", "ṭh", "th", "c", "ṭ", "t", "k", "p", "ś", "ṣ", "s", "h",
    ]
    assert get_named_group("jhal").phonemes == expected
    assert construct("jh", "l").phonemes == expected


def test_an_and_yan_match_traditional_lists():
    assert get_named_group("aṇ").phonemes == [
        "a", "i", "u", "ṛ", "ḷ", "e", "o", "ai", "au", "h", "y", "v", "r", "l",
    ]
    assert get_named_group("yañ").phonemes == ["y", "v", "r", "l"]
    assert get_named_group("śal").phonemes == ["ś", "ṣ", "s", "h"]
