import itertools
import random

import pytest

from mst_maintenance.structures import DisjointSet


def test_initial_sets_are_singletons():
    sets = DisjointSet(4)
    assert [sets.find(i) for i in range(4)] == [0, 1, 2, 3]


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DisjointSet(-1)


def test_union_is_noop_within_same_set():
    sets = DisjointSet(3)
    sets.union(0, 1)
    rank_before = list(sets.rank)
    sets.union(1, 0)
    assert sets.rank == rank_before


def test_rank_tie_attaches_second_root_under_first():
    sets = DisjointSet(2)
    sets.union(0, 1)
    assert sets.parent[1] == 0
    assert sets.rank[0] == 1


def test_lower_rank_root_goes_under_higher_rank_root():
    sets = DisjointSet(3)
    sets.union(0, 1)
    sets.union(2, 0)
    assert sets.find(2) == 0
    assert sets.rank[0] == 1


def test_find_compresses_whole_path():
    sets = DisjointSet(5)
    # hand-built chain 4 -> 3 -> 2 -> 1 -> 0
    sets.parent = [0, 0, 1, 2, 3]
    assert sets.find(4) == 0
    assert sets.parent == [0, 0, 0, 0, 0]


def test_find_handles_long_chains_without_recursion():
    size = 50_000
    sets = DisjointSet(size)
    sets.parent = [max(i - 1, 0) for i in range(size)]
    assert sets.find(size - 1) == 0


def test_find_matches_transitive_closure_of_unions():
    rng = random.Random(7)
    size = 12
    for _ in range(20):
        sets = DisjointSet(size)
        pairs = [(rng.randrange(size), rng.randrange(size)) for _ in range(8)]
        for left, right in pairs:
            sets.union(left, right)

        neighbours = {i: set() for i in range(size)}
        for left, right in pairs:
            neighbours[left].add(right)
            neighbours[right].add(left)

        def reachable_from(start):
            seen, stack = {start}, [start]
            while stack:
                for nxt in neighbours[stack.pop()] - seen:
                    seen.add(nxt)
                    stack.append(nxt)
            return seen

        for a, b in itertools.combinations(range(size), 2):
            assert (sets.find(a) == sets.find(b)) == (b in reachable_from(a))
