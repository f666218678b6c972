import itertools
import random

from bitarray import bitarray

from huffpack.codes import code_lengths, make_code
from huffpack.tree import build_full_tree, calc_freq


def test_test_scenario_codes():
    coding = make_code(build_full_tree(calc_freq(b'test')))
    assert coding == {
        ord('t'): bitarray('0'),
        ord('e'): bitarray('10'),
        ord('s'): bitarray('11'),
    }
    lengths = code_lengths(coding)
    assert lengths[ord('t')] <= lengths[ord('e')]
    assert lengths[ord('t')] <= lengths[ord('s')]

def test_single_symbol_gets_one_bit():
    coding = make_code(build_full_tree({ord('a'): 4}))
    assert coding == {ord('a'): bitarray('0')}

def test_codes_are_prefix_free():
    rng = random.Random(11)
    source = bytes(rng.choice(b'abcdefghij  \n\x00\xff') for _ in range(5000))
    codes = [c.to01() for c in make_code(build_full_tree(calc_freq(source))).values()]
    for a, b in itertools.permutations(codes, 2):
        assert not b.startswith(a)

def test_all_byte_values_get_codes():
    coding = make_code(build_full_tree(calc_freq(bytes(range(256)))))
    assert sorted(coding) == list(range(256))
    # Uniform weights over 256 symbols give a complete tree
    assert set(code_lengths(coding).values()) == {8}
