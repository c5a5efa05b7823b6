# tests/test_trie_set.py
import random
import uuid

import pytest

from keyword_trie import InvalidKeyError, TrieSet


def _uuid_keys(n, seed):
    rng = random.Random(seed)
    return {str(uuid.UUID(int=rng.getrandbits(128))) for _ in range(n)}


@pytest.fixture
def dotted():
    return TrieSet(["a.b.c", "a.b.d"], separator=".")


# insertion/membership -------------------------------------------------------
def test_add_and_contains():
    s = TrieSet()
    s.add("apple")
    s.add("apply")
    assert len(s) == 2
    assert s.count == 2
    assert "apple" in s
    assert s.contains("apply")
    assert "app" not in s


def test_add_existing_key_is_noop():
    s = TrieSet()
    s.add("abc")
    s.add("abc")
    assert len(s) == 1
    assert list(s) == ["abc"]


def test_strict_prefix_is_not_a_member():
    s = TrieSet(["abcd"])
    assert not s.contains("abc")
    assert s.contains_prefix("abc")


def test_no_separator_every_partial_prefix_counts():
    s = TrieSet(["hello"])
    for i in range(1, 6):
        assert s.contains_prefix("hello"[:i])
    assert not s.contains_prefix("help")
    assert not s.contains_prefix("hello!")


def test_separator_boundaries():
    s = TrieSet(["a-b-c"], separator="-")
    assert s.contains_prefix("a")
    assert s.contains_prefix("a-b")
    assert s.contains_prefix("a-b-c")
    assert not s.contains("a-b")


def test_separator_mid_token_prefix_is_rejected():
    s = TrieSet(["a-bc"], separator="-")
    assert s.contains_prefix("a")
    assert s.contains_prefix("a-bc")
    assert not s.contains_prefix("a-b")

    # a-b becomes a real boundary once some key ends there
    s.add("a-b-x")
    assert s.contains_prefix("a-b")


def test_separator_is_elided_from_paths():
    s = TrieSet(["a.b"], separator=".")
    # same token path, the separator creates no edge
    assert "ab" in s
    assert s.node_count() == 2


def test_end_to_end_dotted_scenario(dotted):
    assert dotted.count == 2
    assert dotted.contains("a.b.c")
    assert not dotted.contains("a.b")
    assert dotted.contains_prefix("a.b")
    assert not dotted.contains_prefix("a.c")

    assert dotted.remove("a.b.c")
    assert dotted.count == 1
    assert dotted.contains("a.b.d")
    assert not dotted.contains_prefix("a.b.c")
    assert dotted.contains_prefix("a.b")


def test_tuple_keys_with_segment_tokens():
    s = TrieSet(separator="/")
    key = ("usr", "/", "local", "/", "bin")
    s.add(key)
    assert ("usr", "local", "bin") in s
    assert s.contains_prefix(("usr",))
    assert s.contains_prefix(["usr", "/", "local"])
    assert not s.contains_prefix(("usr", "loc"))
    assert next(iter(s)) is key


def test_empty_key():
    s = TrieSet()
    s.add("")
    assert "" in s
    assert len(s) == 1
    assert s.remove("")
    assert len(s) == 0


# invalid input ---------------------------------------------------------------
def test_add_none_raises_without_mutation():
    s = TrieSet(["x"])
    with pytest.raises(InvalidKeyError):
        s.add(None)
    assert len(s) == 1
    assert s.node_count() == 1


def test_add_rejects_non_iterable_and_unhashable_tokens():
    s = TrieSet()
    with pytest.raises(InvalidKeyError):
        s.add(42)
    with pytest.raises(InvalidKeyError):
        s.add(["ok", ["not", "hashable"]])
    # nothing was half-inserted
    assert s.node_count() == 0
    assert len(s) == 0
    assert issubclass(InvalidKeyError, ValueError)


def test_queries_are_total():
    s = TrieSet(["abc"])
    assert None not in s
    assert 42 not in s
    assert [["x"]] not in s
    assert not s.contains_prefix(None)
    assert not s.contains_prefix(42)
    assert not s.remove(None)
    assert not s.remove(42)
    assert len(s) == 1


# removal/pruning ---------------------------------------------------------------
def test_remove_missing_returns_false():
    s = TrieSet(["abc"])
    assert not s.remove("abd")
    assert not s.remove("ab")  # strict prefix, not a key
    assert not s.remove("abcd")
    assert len(s) == 1
    assert s.node_count() == 3


def test_remove_prunes_dead_branch():
    s = TrieSet(["abc", "abd"])
    assert s.node_count() == 4
    s.remove("abd")
    assert s.node_count() == 3
    assert not s.contains_prefix("abd")
    s.remove("abc")
    assert s.node_count() == 0
    assert not s.contains_prefix("a")


def test_remove_keeps_descendants_of_removed_key():
    s = TrieSet(["ab", "abc"])
    assert s.remove("ab")
    assert "ab" not in s
    assert "abc" in s
    assert s.node_count() == 3


def test_remove_keeps_ancestor_key():
    s = TrieSet(["ab", "abcd"])
    s.remove("abcd")
    assert "ab" in s
    assert s.node_count() == 2


def test_remove_past_a_leaf_key_leaves_it_alone():
    s = TrieSet(["ab"])
    assert not s.remove("abc")
    assert "ab" in s
    assert len(s) == 1
    assert s.node_count() == 2


def test_remove_skips_separators_and_none_tokens():
    s = TrieSet([("a", ".", "b")], separator=".")
    assert s.remove(["a", None, ".", "b"])
    assert len(s) == 0


def test_discard():
    s = TrieSet(["x"])
    s.discard("x")
    s.discard("x")
    assert len(s) == 0


def test_long_key_does_not_hit_recursion_limit():
    s = TrieSet()
    key = "k" * 5000
    s.add(key)
    assert key in s
    assert s.remove(key)
    assert s.node_count() == 0


def test_clear():
    s = TrieSet(["a.b", "c"], separator=".")
    s.clear()
    assert len(s) == 0
    assert list(s) == []
    assert not s.contains_prefix("a")
    s.add("a.b")
    assert "a.b" in s


# enumeration -----------------------------------------------------------------
def test_enumeration_is_preorder_in_insertion_order():
    s = TrieSet(["b", "ab", "a"])
    # root children: b, a; "a" is yielded before "ab" beneath it
    assert list(s) == ["b", "a", "ab"]


def test_enumeration_yields_original_key_objects():
    k1 = ("x", "y")
    k2 = ["x", "z"]
    s = TrieSet([k1, k2])
    out = list(s)
    assert out[0] is k1
    assert out[1] is k2


def test_enumeration_restarts_on_live_tree():
    s = TrieSet(["a"])
    assert list(s) == ["a"]
    s.add("b")
    assert sorted(s) == ["a", "b"]


def test_mutation_during_enumeration_raises():
    s = TrieSet(["a", "b", "c"])
    it = iter(s)
    next(it)
    s.add("d")
    with pytest.raises(RuntimeError):
        next(it)

    it = iter(s)
    next(it)
    s.remove("c")
    with pytest.raises(RuntimeError):
        list(it)


def test_noop_add_does_not_break_enumeration():
    s = TrieSet(["a", "b"])
    seen = []
    for key in s:
        s.add(key)  # already present
        seen.append(key)
    assert seen == ["a", "b"]


def test_copy_to():
    s = TrieSet(["a", "b", "c"])
    buf = [None] * 5
    assert s.copy_to(buf, 1) == 3
    assert buf == [None, "a", "b", "c", None]

    short = [None] * 2
    assert s.copy_to(short) == 2
    assert short == ["a", "b"]

    assert s.copy_to([None] * 2, 5) == 0
    with pytest.raises(ValueError):
        s.copy_to(buf, -1)


def test_bulk_helpers(dotted):
    assert dotted.contains_any(["x", "a.b.c"])
    assert not dotted.contains_any(["a.b", "a"])
    assert dotted.contains_all(["a.b.c", "a.b.d"])
    assert not dotted.contains_all(["a.b.c", "a.b"])
    assert dotted.contains_prefix_any(["z", "a"])
    assert dotted.contains_prefix_all(["a", "a.b", "a.b.d"])
    assert not dotted.contains_prefix_all(["a", "a.c"])
    assert not dotted.contains_any([])
    assert dotted.contains_all([])


def test_repr():
    assert repr(TrieSet(["a"], separator=".")) == "TrieSet(['a'], separator='.')"
    assert repr(TrieSet()) == "TrieSet([])"


# randomized against a set model -----------------------------------------------
@pytest.mark.parametrize("separator", [None, "-"])
def test_random_add_remove_matches_model(separator):
    keys = _uuid_keys(300, seed=11)
    s = TrieSet(separator=separator)
    for k in keys:
        s.add(k)
    assert len(s) == len(keys)

    rng = random.Random(5)
    model = set(keys)
    removed = set(rng.sample(sorted(keys), 150))
    for k in removed:
        assert s.remove(k)
        model.discard(k)

    assert len(s) == len(model)
    assert sorted(s) == sorted(model)
    for k in model:
        if separator is None:
            prefixes = [k[:i + 1] for i in range(len(k))]
        else:
            parts = k.split(separator)
            prefixes = [separator.join(parts[:i + 1]) for i in range(len(parts))]
        for p in prefixes:
            assert s.contains_prefix(p)
            assert s.contains(p) == (p in model)
    for k in removed:
        assert k not in s

    for k in list(model):
        s.remove(k)
    assert len(s) == 0
    assert s.node_count() == 0
