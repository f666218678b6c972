import logging

from bitarray import bitarray

from .errors import MalformedContainer
from .tree import Fork, HuffmanTree, Leaf

log = logging.getLogger(__name__)


def encode(source: bytes, coding: dict[int, bitarray]) -> bytes:
    result = bitarray(endian='big')
    for b in source:
        result += coding[b]
    log.debug('packed %d symbols into %d bits', len(source), len(result))
    # tobytes() zero-fills the low end of the last byte
    return result.tobytes()

def decode(payload: bytes, tree: HuffmanTree, count: int) -> bytes:
    source_bits = bitarray(endian='big')
    source_bits.frombytes(payload)
    result = bytearray()
    if count <= 0:
        return bytes(result)

    top = tree.top
    if isinstance(top, Leaf):
        # Single-symbol tree: every bit stands for one occurrence
        if len(source_bits) < count:
            raise MalformedContainer(
                f'payload holds {len(source_bits)} bits, expected at least {count}')
        return bytes([top.symbol]) * count

    cursor = top
    for bit in source_bits:
        match cursor:
            case Fork(low, high, _):
                cursor = tree.node(high if bit else low)
            case _:
                raise AssertionError(f'cursor left the tree: {cursor!r}')
        if isinstance(cursor, Leaf):
            result.append(cursor.symbol)
            if len(result) == count:
                return bytes(result)
            cursor = top
    raise MalformedContainer(
        f'payload ended after {len(result)} of {count} symbols')
