from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

Path = Tuple[int, ...]


# ---------------------------------------------------
# Encoding tree: a leaf holds one symbol, an internal
# node holds exactly two children (zero, one)
# ---------------------------------------------------
@dataclass(frozen=True)
class Leaf:
    symbol: str


@dataclass(frozen=True)
class Internal:
    zero: "EncodingTree"
    one: "EncodingTree"

    def __post_init__(self):
        for name in ("zero", "one"):
            child = getattr(self, name)
            if not isinstance(child, (Leaf, Internal)):
                raise TypeError(f"Internal.{name} must be a Leaf or Internal, got {type(child).__name__}")


EncodingTree = Union[Leaf, Internal]


def trees_equal(a: Optional[EncodingTree], b: Optional[EncodingTree]) -> bool:
    """Structural equality: same leaf/internal layout and same symbols at the leaves."""
    stack = [(a, b)]
    while stack:
        x, y = stack.pop()
        if x is None or y is None:
            if x is not y:
                return False
            continue
        if isinstance(x, Leaf) != isinstance(y, Leaf):
            return False
        if isinstance(x, Leaf):
            if x.symbol != y.symbol:
                return False
            continue
        stack.append((x.one, y.one))
        stack.append((x.zero, y.zero))
    return True


def iter_paths(tree: EncodingTree) -> Iterator[Tuple[str, Path]]:
    # pre-order, zero branch before one branch
    stack = [(tree, ())]
    while stack:
        node, path = stack.pop()
        if isinstance(node, Leaf):
            yield node.symbol, path
            continue
        stack.append((node.one, path + (1,)))
        stack.append((node.zero, path + (0,)))


def tree_height(tree: EncodingTree) -> int:
    return max(len(path) for _, path in iter_paths(tree))


def leaf_count(tree: EncodingTree) -> int:
    return sum(1 for _ in iter_paths(tree))


# --------------------------------
# Convert Tree to Graphviz format
# --------------------------------
def _label(node: EncodingTree) -> str:
    if isinstance(node, Leaf):
        return repr(node.symbol).replace('"', '\\"')
    return str(leaf_count(node))


def tree_to_dot(tree: EncodingTree, max_depth: Optional[int] = None) -> str:
    dot = "digraph G {\n"
    dot += "node [shape=circle, style=filled, color=lightblue];\n"

    ids = {}

    def node_id(n: EncodingTree) -> str:
        nonlocal dot
        # frozen dataclasses compare by value, so key on identity
        key = id(n)
        if key not in ids:
            ids[key] = f"n{len(ids)}"
            shape = "box" if isinstance(n, Leaf) else "circle"
            dot += f'{ids[key]} [label="{_label(n)}", shape={shape}];\n'
        return ids[key]

    stack = [(tree, 0)]
    node_id(tree)
    while stack:
        n, depth = stack.pop()
        if isinstance(n, Leaf) or (max_depth is not None and depth >= max_depth):
            continue
        for bit, child in ((0, n.zero), (1, n.one)):
            edge = f'{node_id(n)} -> {node_id(child)} [label="{bit}"];\n'
            dot += edge
            stack.append((child, depth + 1))

    dot += "}"
    return dot
