from bitarray import bitarray

from .tree import Fork, HuffmanTree, Leaf


def make_code(tree: HuffmanTree) -> dict[int, bitarray]:
    coding = {}
    def traverse(index: int, cur_code: bitarray):
        match tree.node(index):
            case Fork(low, high, _):
                low_code = cur_code.copy()
                low_code.append(0)
                traverse(low, low_code)
                high_code = cur_code.copy()
                high_code.append(1)
                traverse(high, high_code)
            case Leaf(symbol, _):
                coding[symbol] = cur_code
            case other:
                raise TypeError(f'not a tree node: {other!r}')
    traverse(tree.root, bitarray(endian='big'))
    # A lone leaf has an empty path; give it one bit per occurrence
    if isinstance(tree.top, Leaf):
        coding[tree.top.symbol] = bitarray('0', endian='big')
    return coding

def code_lengths(coding: dict[int, bitarray]) -> dict[int, int]:
    return {symbol: len(code) for symbol, code in coding.items()}
