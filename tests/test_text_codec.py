import pytest

from huffcodec.builder import build_huffman_tree
from huffcodec.errors import MalformedInputError
from huffcodec.text_codec import decode_text, encode_text, make_codes
from huffcodec.tree import Leaf

STREETS = [1, 0, 1, 0, 1, 0, 0, 1, 1, 1, 1, 0, 1, 0, 1]


def test_make_codes(reference_tree):
    assert make_codes(reference_tree) == {
        "T": (0,),
        "R": (1, 0, 0),
        "S": (1, 0, 1),
        "E": (1, 1),
    }


def test_encode_reference(reference_tree):
    assert encode_text(reference_tree, "E") == [1, 1]
    assert encode_text(reference_tree, "SET") == [1, 0, 1, 1, 1, 0]
    assert encode_text(reference_tree, "STREETS") == STREETS
    assert encode_text(reference_tree, "") == []


def test_decode_reference(reference_tree):
    assert decode_text(reference_tree, [1, 1]) == "E"
    assert decode_text(reference_tree, [1, 0, 1, 1, 1, 0]) == "SET"
    assert decode_text(reference_tree, STREETS) == "STREETS"
    assert decode_text(reference_tree, []) == ""


def test_encode_unknown_symbol(reference_tree):
    with pytest.raises(MalformedInputError, match="'X'"):
        encode_text(reference_tree, "SEXT")


def test_decode_ends_mid_symbol(reference_tree):
    with pytest.raises(MalformedInputError):
        decode_text(reference_tree, [1, 0, 1, 1, 0])


def test_decode_bad_bit(reference_tree):
    with pytest.raises(MalformedInputError):
        decode_text(reference_tree, [1, 2])


def test_decode_single_leaf():
    with pytest.raises(MalformedInputError):
        decode_text(Leaf("A"), [0])


@pytest.mark.parametrize("text", [
    "HAPPY HIP HOP",
    "Research is formalized curiosity. It is poking and prying with a purpose. – Zora Neale Hurston",
    "ab" * 500,
])
def test_encode_decode_inverse(text):
    tree = build_huffman_tree(text)
    assert decode_text(tree, encode_text(tree, text)) == text
