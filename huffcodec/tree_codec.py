import logging
from typing import List, Sequence, Tuple

from .bits import BitSequence, Cursor, SymbolSequence
from .errors import MalformedInputError
from .tree import EncodingTree, Internal, Leaf

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------
# Tree serialization (preorder): 1 = internal, 0 = leaf + a symbol
# -----------------------------------------------------------------
def flatten_tree(tree: EncodingTree) -> Tuple[BitSequence, SymbolSequence]:
    shape: BitSequence = []
    leaves: SymbolSequence = []
    stack = [tree]
    while stack:
        node = stack.pop()
        if isinstance(node, Leaf):
            shape.append(0)
            leaves.append(node.symbol)
        else:
            shape.append(1)
            # one pushed first so zero is visited first
            stack.append(node.one)
            stack.append(node.zero)
    logger.debug("flattened tree: %d shape bits, %d leaves", len(shape), len(leaves))
    return shape, leaves


def read_tree(shape: Cursor, leaves: Cursor) -> EncodingTree:
    """
    Consume exactly one tree from the two cursors, leaving anything after it
    unread. Raises MalformedInputError if either runs out or a shape bit is
    not 0/1.
    """
    # one frame per open internal node: empty until its zero child is done
    pending: List[List[EncodingTree]] = []
    while True:
        at = shape.pos
        bit = shape.next()
        if bit == 1:
            pending.append([])
            continue
        if bit != 0:
            raise MalformedInputError(f"Bad tree flag {bit!r} at {at}")
        node: EncodingTree = Leaf(leaves.next())

        while True:
            if not pending:
                return node
            frame = pending[-1]
            if not frame:
                frame.append(node)
                break
            pending.pop()
            node = Internal(frame[0], node)


def unflatten_tree(shape_bits: Sequence[int], leaf_symbols: Sequence[str]) -> EncodingTree:
    shape = Cursor(shape_bits, "tree shape bits")
    leaves = Cursor(leaf_symbols, "tree leaves")
    root = read_tree(shape, leaves)
    if not shape.exhausted:
        raise MalformedInputError(f"Extra shape bits after tree data ({shape.remaining})")
    if not leaves.exhausted:
        raise MalformedInputError(f"Extra leaves after tree data ({leaves.remaining})")
    return root
