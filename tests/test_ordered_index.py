from __future__ import annotations

import math
import random

from microblog_store.infrastructure.ordered_index import (
    BLACK,
    OrderedIndex,
    TraversalOrder,
    _is_red,
)


def _black_height(node) -> int:
    """Black height of a subtree, asserting the red-black rules on the way"""
    if node is None:
        return 1
    if _is_red(node):
        assert not _is_red(node.left)
        assert not _is_red(node.right)
    left = _black_height(node.left)
    right = _black_height(node.right)
    assert left == right
    return left + (0 if _is_red(node) else 1)


def test_get_returns_inserted_values():
    index = OrderedIndex()
    for key in [50, 20, 80, 10, 30]:
        index.insert(key, f"value-{key}")

    assert index.get(30) == "value-30"
    assert index.get(99) is None
    assert 80 in index
    assert 81 not in index
    assert len(index) == 5


def test_red_black_invariants_hold_after_many_inserts():
    rng = random.Random(7)
    index = OrderedIndex()
    keys = [rng.randint(0, 500) for _ in range(1000)]
    for key in keys:
        index.insert(key, key)
        assert index._root.color == BLACK

    _black_height(index._root)
    assert len(index) == 1000
    assert index.height() <= 2 * math.log2(len(index) + 1)


def test_sorted_inserts_stay_balanced():
    index = OrderedIndex()
    for key in range(1024):
        index.insert(key, key)

    _black_height(index._root)
    assert index.height() <= 2 * math.log2(1025)


def test_traversal_orders():
    index = OrderedIndex()
    for key in [5, 1, 4, 2, 3]:
        index.insert(key, key)

    assert list(index.values()) == [5, 4, 3, 2, 1]
    assert list(index.values(TraversalOrder.ASCENDING)) == [1, 2, 3, 4, 5]
    assert list(index) == [1, 2, 3, 4, 5]


def test_traversal_is_lazy():
    index = OrderedIndex()
    for key in range(10):
        index.insert(key, key)

    walk = index.values()
    assert next(walk) == 9
    assert next(walk) == 8


def test_equal_keys_descend_in_insertion_order():
    index = OrderedIndex()
    for label in ["first", "second", "third", "fourth"]:
        index.insert(1, label)
    index.insert(0, "low")
    index.insert(2, "high")

    assert list(index.values()) == ["high", "first", "second", "third", "fourth", "low"]
    assert list(index.values(TraversalOrder.ASCENDING)) == [
        "low", "fourth", "third", "second", "first", "high"
    ]


def test_walk_collects_every_equal_key():
    rng = random.Random(3)
    index = OrderedIndex()
    keys = [rng.randint(0, 20) for _ in range(300)]
    for position, key in enumerate(keys):
        index.insert(key, (key, position))

    def probe(key):
        return (key > 10) - (key < 10)

    matched = list(index.walk(probe))
    expected = [(10, position) for position, key in enumerate(keys) if key == 10]
    assert matched == expected


def test_walk_upper_bound_matches_filtered_scan():
    index = OrderedIndex()
    for key in [9, 3, 7, 1, 5, 3, 8]:
        index.insert(key, key)

    bounded = list(index.walk(lambda key: 0 if key <= 5 else 1))
    assert bounded == [value for value in index.values() if value <= 5]

    ascending = list(index.walk(lambda key: 0 if key <= 5 else 1, TraversalOrder.ASCENDING))
    assert ascending == [1, 3, 3, 5]


def test_custom_comparator_reverses_order():
    index = OrderedIndex(compare=lambda left, right: (left < right) - (left > right))
    for key in [2, 9, 4]:
        index.insert(key, key)

    assert list(index.values(TraversalOrder.ASCENDING)) == [9, 4, 2]
    assert index.get(4) == 4


def test_empty_index():
    index = OrderedIndex()
    assert list(index.values()) == []
    assert list(index.walk(lambda key: 0)) == []
    assert index.get("missing") is None
    assert index.height() == 0
