import random

import pytest

from huffpack.errors import EmptyInput
from huffpack.tree import Fork, Leaf, build_full_tree, calc_freq, weight


def test_calc_freq():
    assert calc_freq(b'test') == {ord('t'): 2, ord('e'): 1, ord('s'): 1}
    assert calc_freq(b'') == {}

def test_empty_table_rejected():
    with pytest.raises(EmptyInput):
        build_full_tree({})

def test_single_symbol_tree_is_a_leaf():
    tree = build_full_tree({ord('a'): 4})
    assert tree.top == Leaf(ord('a'), 4)
    assert tree.forks() == []

def test_test_scenario_merges_t_last():
    tree = build_full_tree(calc_freq(b'test'))
    match tree.top:
        case Fork(low, high, 4):
            assert tree.node(low) == Leaf(ord('t'), 2)
            assert tree.node(high) == Fork(0, 1, 2)
            assert tree.node(0) == Leaf(ord('e'), 1)
            assert tree.node(1) == Leaf(ord('s'), 1)
        case other:
            pytest.fail(f'unexpected root {other!r}')

def test_leaf_and_fork_counts():
    rng = random.Random(7)
    source = bytes(rng.randrange(0, 40) for _ in range(2000))
    freq = calc_freq(source)
    tree = build_full_tree(freq)
    assert len(tree.leaves()) == len(freq)
    assert len(tree.forks()) == len(freq) - 1
    assert weight(tree.top) == len(source)

def test_fork_weight_is_sum_and_low_is_lighter():
    tree = build_full_tree(calc_freq(b'abracadabra alakazam'))
    for fork in tree.forks():
        low, high = tree.node(fork.low), tree.node(fork.high)
        assert fork.weight == weight(low) + weight(high)
        assert weight(low) <= weight(high)

def test_tree_ignores_table_iteration_order():
    freq = {s: 1 + s % 3 for s in range(0, 256, 5)}
    shuffled = list(freq.items())
    random.Random(3).shuffle(shuffled)
    assert build_full_tree(freq) == build_full_tree(dict(shuffled))
    assert build_full_tree(freq) == build_full_tree(dict(reversed(list(freq.items()))))
