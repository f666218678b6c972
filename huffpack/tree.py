import heapq
import logging
from abc import ABC
from dataclasses import dataclass

from .errors import EmptyInput

log = logging.getLogger(__name__)

# Order tags above every byte value belong to forks
FORK_TAG_BASE = 256

class Node(ABC):
    pass

@dataclass(frozen=True)
class Fork(Node):
    low: int
    high: int
    weight: int = 0

@dataclass(frozen=True)
class Leaf(Node):
    symbol: int
    weight: int = 0


@dataclass(frozen=True)
class HuffmanTree:
    """Arena of nodes addressed by index; `root` indexes the top node."""
    nodes: tuple[Node, ...]
    root: int

    def node(self, index: int) -> Node:
        return self.nodes[index]

    @property
    def top(self) -> Node:
        return self.nodes[self.root]

    def leaves(self) -> list[Leaf]:
        return [n for n in self.nodes if isinstance(n, Leaf)]

    def forks(self) -> list[Fork]:
        return [n for n in self.nodes if isinstance(n, Fork)]


def weight(node: Node) -> int:
    match node:
        case Fork(_, _, w) | Leaf(_, w):
            return w
    raise TypeError(f'not a tree node: {node!r}')

def calc_freq(source: bytes) -> dict[int, int]:
    result = dict()
    for b in source:
        if b in result:
            result[b] += 1
        else:
            result[b] = 1
    return result

def build_leaves(freq_stats: dict[int, int]) -> list[Leaf]:
    return [Leaf(symbol, count) for symbol, count in sorted(freq_stats.items())]

def build_full_tree(freq_stats: dict[int, int]) -> HuffmanTree:
    """
    Merge the two lightest nodes until one is left.

    Ties on weight are broken by an order tag: the symbol value for leaves,
    256 + creation index for forks. The first node taken becomes the low
    child. The result depends only on the (symbol, weight) pairs, never on
    the iteration order of `freq_stats`.
    """
    if not freq_stats:
        raise EmptyInput('cannot build a tree from an empty frequency table')
    nodes: list[Node] = build_leaves(freq_stats)
    queue = [(leaf.weight, leaf.symbol, i) for i, leaf in enumerate(nodes)]
    heapq.heapify(queue)
    forks_made = 0
    while len(queue) > 1:
        low_weight, _, low = heapq.heappop(queue)
        high_weight, _, high = heapq.heappop(queue)
        nodes.append(Fork(low, high, low_weight + high_weight))
        heapq.heappush(queue, (low_weight + high_weight, FORK_TAG_BASE + forks_made, len(nodes) - 1))
        forks_made += 1
    _, _, root = queue[0]
    log.debug('built tree: %d leaves, %d forks, weight %d',
              len(freq_stats), forks_made, weight(nodes[root]))
    return HuffmanTree(tuple(nodes), root)
