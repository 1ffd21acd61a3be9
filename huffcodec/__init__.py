from .bits import BitSequence, Cursor, SymbolSequence, from_bitstring, to_bitstring
from .builder import build_freq_map, build_huffman_tree, build_tree_from_freq
from .compressor import EncodedData, compress, compress_with_stats, compression_stats, decompress
from .errors import HuffmanError, InvalidInputError, MalformedInputError
from .text_codec import decode_text, encode_text, make_codes
from .tree import EncodingTree, Internal, Leaf, tree_to_dot, trees_equal
from .tree_codec import flatten_tree, read_tree, unflatten_tree

__version__ = "0.1.0"
