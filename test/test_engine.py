"""Public query surface."""

from pratyahara import engine


def test_engine_exports_queries():
    assert engine.get_named_group("ac").valid
    assert engine.is_member("a", "ac")
    assert engine.find_groups_containing("k") == ["hal", "jhal"]
    assert engine.construct("z", "c").error == "not-found"
    assert engine.construct("u", "a").error == "order-violation"
    assert engine.classify(["a", "k"]) == "mixed"
    assert engine.validate("a", "c")["valid"]
