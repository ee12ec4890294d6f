import random

import pytest


def _random_sets(seed, count=30):
    from hashset import HashSet

    rnd = random.Random(seed)
    ret = [HashSet[int]()]
    for _ in range(count):
        size = rnd.randrange(15)
        ret.append(HashSet.from_iterable(rnd.randrange(20) for _ in range(size)))
    return ret


@pytest.fixture
def pairs():
    sets = _random_sets(1)
    others = _random_sets(2)
    return list(zip(sets, others)) + [(s, s) for s in sets[:5]]


def test_commutative(pairs):
    for a, b in pairs:
        assert a.union(b).equal(b.union(a)), (a, b)
        assert a.intersection(b).equal(b.intersection(a)), (a, b)
        assert a.symmetric_difference(b).equal(b.symmetric_difference(a)), (a, b)


def test_symmetric_difference_is_union_of_differences(pairs):
    for a, b in pairs:
        expected = a.difference(b).union(b.difference(a))
        assert a.symmetric_difference(b).equal(expected), (a, b)


def test_difference_with_self_is_empty():
    for a in _random_sets(3):
        assert a.difference(a).is_empty()


def test_subset_superset_converse(pairs):
    for a, b in pairs:
        assert a.is_subset_of(b) == b.is_superset_of(a), (a, b)
        assert b.is_subset_of(a) == a.is_superset_of(b), (a, b)
        # Intersection is a subset of both operands and union a superset.
        assert a.intersection(b).is_subset_of(a)
        assert a.union(b).is_superset_of(b)


def test_disjoint_matches_intersection(pairs):
    for a, b in pairs:
        assert a.is_disjoint(b) == a.intersection(b).is_empty(), (a, b)


def test_algebra_matches_builtin_set(pairs):
    for a, b in pairs:
        sa, sb = set(a), set(b)
        assert set(a.union(b)) == sa | sb
        assert set(a.intersection(b)) == sa & sb
        assert set(a.difference(b)) == sa - sb
        assert set(a.symmetric_difference(b)) == sa ^ sb
        assert a.is_subset_of(b) == (sa <= sb)
        assert a.is_superset_of(sb) == (sa >= sb)
        assert a.is_disjoint(b) == sa.isdisjoint(sb)
        assert a.equal(b) == (sa == sb)


def test_algebra_does_not_change_operands(pairs):
    for a, b in pairs:
        before_a, before_b = a.clone(), b.clone()
        a.union(b)
        a.intersection(b)
        a.difference(b)
        a.symmetric_difference(b)
        assert a.equal(before_a)
        assert b.equal(before_b)


def test_clone_independent():
    for a in _random_sets(4):
        c = a.clone()
        assert c.equal(a)
        c.add(1000)
        assert 1000 not in a
        if not a.is_empty():
            first = next(iter(a))
            c.delete(first)
            assert first in a


def test_add_idempotent():
    for a in _random_sets(5):
        a.add(42)
        size = len(a)
        a.add(42)
        assert len(a) == size


def test_round_trip():
    from hashset import HashSet

    rnd = random.Random(6)
    for _ in range(20):
        elements = [rnd.randrange(30) for _ in range(rnd.randrange(25))]
        s = HashSet(*elements)
        assert len(s) == len(set(elements))
        assert HashSet(*s.to_list()).equal(HashSet(*elements))
        assert sorted(s.to_list()) == sorted(set(elements))
