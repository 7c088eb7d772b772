"""
Structural properties which should hold for any sequence of inserts, checked over
ordered, reversed, random and duplicate-heavy sequences at several minimum degrees.
"""

import os
import random
import sys

sys.path.insert(1, os.path.join(sys.path[0], "../.."))

import pytest

from arbor import BTree
from arbor import check_invariants
from arbor import config
from arbor import InvalidInternalStateError
from arbor import to_json
from tests.tools import leaf_depths


def _sequences():
    rng = random.Random(19)
    yield "ascending", list(range(200))
    yield "descending", list(range(200, 0, -1))
    yield "random", rng.sample(range(10_000), 500)
    yield "duplicates", [rng.randint(0, 20) for _ in range(300)]
    yield "zigzag", [v for i in range(100) for v in (i, 1000 - i)]


SEQUENCES = list(_sequences())
DEGREES = [2, 3, 4, 7]


@pytest.mark.parametrize("degree", DEGREES)
@pytest.mark.parametrize("name, keys", SEQUENCES)
def test_in_order_traversal_is_sorted(degree, name, keys):
    btree = BTree(degree)
    btree.extend(keys)
    assert btree.keys() == sorted(keys), name
    assert len(btree) == len(keys)


@pytest.mark.parametrize("degree", DEGREES)
@pytest.mark.parametrize("name, keys", SEQUENCES)
def test_leaves_share_a_depth(degree, name, keys):
    btree = BTree(degree)
    for key in keys:
        btree.insert(key)
        assert len(set(leaf_depths(btree))) == 1, name
    assert leaf_depths(btree)[0] == btree.height - 1


@pytest.mark.parametrize("degree", DEGREES)
@pytest.mark.parametrize("name, keys", SEQUENCES)
def test_node_sizes(degree, name, keys):
    btree = BTree(degree)
    btree.extend(keys)

    for node, depth in btree.walk():
        if depth == 0:
            assert 0 <= len(node.keys) <= btree.max_keys
        else:
            assert btree.min_keys <= len(node.keys) <= btree.max_keys, name
        if not node.leaf:
            assert len(node.children) == len(node.keys) + 1
        else:
            assert node.children == []

    check_invariants(btree)


@pytest.mark.parametrize("degree", DEGREES)
@pytest.mark.parametrize("name, keys", SEQUENCES)
def test_height_grows_only_when_root_full(degree, name, keys):
    btree = BTree(degree)
    for key in keys:
        height_before = btree.height
        root_was_full = btree.root is not None and len(btree.root.keys) == btree.max_keys

        btree.insert(key)

        if height_before == 0:
            assert btree.height == 1
        elif root_was_full:
            assert btree.height == height_before + 1, name
        else:
            assert btree.height == height_before, name


def test_root_growth_count_matches_height():
    btree = BTree(2)
    growths = 0
    for key in range(1_000):
        if btree.root is not None and len(btree.root.keys) == btree.max_keys:
            growths += 1
        btree.insert(key)
    assert btree.height == growths + 1


def test_reading_does_not_change_the_tree():
    keys = random.Random(7).sample(range(1_000), 300)
    btree = BTree(3)
    btree.extend(keys)

    first = [(id(node), list(node.keys), depth) for node, depth in btree.walk()]
    first_json = to_json(btree)
    btree.keys()
    list(btree)
    second = [(id(node), list(node.keys), depth) for node, depth in btree.walk()]

    assert first == second
    assert first_json == to_json(btree)


def test_for_each_node_is_pre_order():
    btree = BTree(2)
    btree.extend([10, 20, 5, 6, 12, 30, 7, 17])

    visited = []
    btree.for_each_node(lambda node, depth: visited.append((list(node.keys), depth)))

    assert visited == [([10, 20], 0), ([5, 6, 7], 1), ([12, 17], 1), ([30], 1)]


def test_for_each_node_on_empty_tree():
    visited = []
    BTree(2).for_each_node(lambda node, depth: visited.append(node))
    assert visited == []


def test_validate_on_insert(monkeypatch):
    monkeypatch.setattr(config, "VALIDATE_ON_INSERT", True)

    btree = BTree(2)
    btree.extend(random.Random(3).sample(range(100), 60))
    check_invariants(btree)

    # damage the tree, the next insert should notice
    btree.root.children[0].keys[-1] = 10_000
    with pytest.raises(InvalidInternalStateError):
        btree.insert(1_000)


if __name__ == "__main__":  # pragma: no cover
    from tests.tools import run_tests

    run_tests()
