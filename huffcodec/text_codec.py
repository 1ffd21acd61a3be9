import logging
from typing import Dict, Iterable

from .bits import BitSequence
from .errors import MalformedInputError
from .tree import EncodingTree, Leaf, Path, iter_paths

logger = logging.getLogger(__name__)


# ---------------------------
# Walk tree -> code map
# ---------------------------
def make_codes(tree: EncodingTree) -> Dict[str, Path]:
    return dict(iter_paths(tree))


def encode_text(tree: EncodingTree, text: str) -> BitSequence:
    """Concatenate the root-to-leaf path of every symbol of text, in order."""
    codes = make_codes(tree)
    bits: BitSequence = []
    for i, sym in enumerate(text):
        try:
            bits.extend(codes[sym])
        except KeyError:
            raise MalformedInputError(f"No encoding for symbol {sym!r} at {i}") from None
    logger.debug("encoded %d symbols into %d bits", len(text), len(bits))
    return bits


def decode_text(tree: EncodingTree, bits: Iterable[int]) -> str:
    """
    Decode by walking the tree: 0 steps to the zero child, 1 to the one child,
    and each leaf reached emits its symbol and restarts at the root.

    Raises MalformedInputError on a bit other than 0/1, or when the bits run
    out partway down a path.
    """
    if isinstance(tree, Leaf):
        raise MalformedInputError("A single leaf has no codable paths")

    out = []
    node = tree
    n = 0
    for n, bit in enumerate(bits, 1):
        if bit == 0:
            node = node.zero
        elif bit == 1:
            node = node.one
        else:
            raise MalformedInputError(f"Bad bit {bit!r} at {n - 1}")
        if isinstance(node, Leaf):
            out.append(node.symbol)
            node = tree
    if node is not tree:
        raise MalformedInputError("Corrupt bitstream (ends mid-symbol)")

    logger.debug("decoded %d bits into %d symbols", n, len(out))
    return "".join(out)
