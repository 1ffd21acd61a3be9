import pytest

from huffcodec.tree import Internal, Leaf


def make_reference_tree():
    #        *
    #      /   \
    #     T     *
    #          / \
    #         *   E
    #        / \
    #       R   S
    return Internal(Leaf("T"), Internal(Internal(Leaf("R"), Leaf("S")), Leaf("E")))


@pytest.fixture
def reference_tree():
    return make_reference_tree()
