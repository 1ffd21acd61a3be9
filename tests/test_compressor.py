import pytest

from huffcodec.compressor import EncodedData, compress, compress_with_stats, compression_stats, decompress
from huffcodec.errors import InvalidInputError, MalformedInputError

INPUTS = [
    "HAPPY HIP HOP",
    "Nana Nana Nana Nana Nana Nana Nana Nana Batman",
    "Research is formalized curiosity. It is poking and prying with a purpose. – Zora Neale Hurston",
    "AB",
]


def test_compress_reference():
    data = compress("STREETTEST")
    assert data.tree_shape == [1, 0, 1, 1, 0, 0, 0]
    assert data.tree_leaves == ["T", "R", "S", "E"]
    assert data.message_bits == [1, 0, 1, 0, 1, 0, 0, 1, 1, 1, 1, 0, 0, 1, 1, 1, 0, 1, 0]


def test_decompress_reference():
    data = EncodedData(
        [1, 0, 1, 1, 0, 0, 0],
        ["T", "R", "S", "E"],
        [0, 1, 0, 0, 1, 1, 1, 0, 1, 1, 0, 1],
    )
    assert decompress(data) == "TRESS"


@pytest.mark.parametrize("text", INPUTS)
def test_roundtrip(text):
    assert decompress(compress(text)) == text


@pytest.mark.parametrize("text", ["", "A", "zzzzzz"])
def test_compress_rejects_single_symbol(text):
    with pytest.raises(InvalidInputError):
        compress(text)


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        compress("A")


def test_decompress_malformed():
    data = compress("STREETTEST")
    data.message_bits.append(1)
    with pytest.raises(MalformedInputError):
        decompress(data)


def test_stats_reference():
    data = compress("STREETTEST")
    stats = compression_stats("STREETTEST", data)
    assert stats["original_bits"] == 80
    assert stats["message_bits"] == 19
    assert stats["compressed_bits"] == 7 + 4 * 8 + 19
    assert stats["unique_symbols"] == 4
    assert stats["tree_height"] == 3
    assert stats["compression_ratio"] == pytest.approx(58 / 80)
    assert stats["space_saved_percent"] == pytest.approx(27.5)
    assert stats["average_code_length"] == pytest.approx(1.9)


def test_compress_with_stats():
    data, stats = compress_with_stats("STREETTEST")
    assert data == compress("STREETTEST")
    for key in ("time_freq", "time_tree", "time_flatten", "time_encode", "time_total"):
        assert stats[key] >= 0
    assert stats["unique_symbols"] == 4
