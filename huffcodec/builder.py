import heapq
import itertools
import logging
from collections import Counter
from typing import Dict

from .errors import InvalidInputError
from .tree import EncodingTree, Internal, Leaf, tree_height

logger = logging.getLogger(__name__)


# ----------------------------
# 1) Count symbols (freq map)
# ----------------------------
def build_freq_map(text: str) -> Dict[str, int]:
    # Counter keeps first-occurrence order
    return dict(Counter(text))


# ------------------------------------------
# 2) Make heap and merge into Huffman tree
# ------------------------------------------
def build_tree_from_freq(freq_map: Dict[str, int]) -> EncodingTree:
    """
    Greedy Huffman merge over a symbol -> count map.

    Heap entries are (weight, -seq, node): among equal weights the most
    recently pushed entry pops first. The first popped entry of each pair
    becomes the zero child, the second the one child.
    """
    if len(freq_map) < 2:
        raise InvalidInputError(
            f"Need at least two distinct symbols to build a tree, got {len(freq_map)}")
    for sym, count in freq_map.items():
        if count <= 0:
            raise InvalidInputError(f"Bad count {count} for symbol {sym!r}")

    seq = itertools.count()
    h = []
    for sym, count in freq_map.items():
        heapq.heappush(h, (count, -next(seq), Leaf(sym)))

    while len(h) > 1:
        wa, _, a = heapq.heappop(h)
        wb, _, b = heapq.heappop(h)
        heapq.heappush(h, (wa + wb, -next(seq), Internal(a, b)))

    _, _, root = h[0]
    return root


def build_huffman_tree(text: str) -> EncodingTree:
    freq = build_freq_map(text)
    root = build_tree_from_freq(freq)
    logger.debug("built tree: %d symbols, height %d, from %d chars",
                 len(freq), tree_height(root), len(text))
    return root
