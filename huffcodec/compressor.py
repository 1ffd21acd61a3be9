import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .bits import BitSequence, SymbolSequence
from .builder import build_freq_map, build_tree_from_freq
from .text_codec import decode_text, encode_text
from .tree import tree_height
from .tree_codec import flatten_tree, unflatten_tree

logger = logging.getLogger(__name__)

# cost of one uncompressed symbol, and of one stored leaf, in the size report
BITS_PER_SYMBOL = 8


@dataclass
class EncodedData:
    tree_shape: BitSequence = field(default_factory=list)
    tree_leaves: SymbolSequence = field(default_factory=list)
    message_bits: BitSequence = field(default_factory=list)


# -------------------------
# Compressor
# -------------------------
def compress(text: str) -> EncodedData:
    data, _ = _compress_timed(text)
    return data


def _compress_timed(text: str) -> Tuple[EncodedData, Dict[str, float]]:
    t0 = time.perf_counter()
    freq = build_freq_map(text)
    t_freq = time.perf_counter()

    # raises InvalidInputError before anything is produced
    root = build_tree_from_freq(freq)
    t_tree = time.perf_counter()

    shape, leaves = flatten_tree(root)
    t_flatten = time.perf_counter()

    bits = encode_text(root, text)
    t_encode = time.perf_counter()
    del root

    timings = {
        "time_freq": t_freq - t0,
        "time_tree": t_tree - t_freq,
        "time_flatten": t_flatten - t_tree,
        "time_encode": t_encode - t_flatten,
        "time_total": t_encode - t0,
    }
    logger.debug("compressed %d chars: %d symbols, %d message bits",
                 len(text), len(leaves), len(bits))
    return EncodedData(shape, leaves, bits), timings


# -------------------------
# Decompressor
# -------------------------
def decompress(data: EncodedData) -> str:
    root = unflatten_tree(data.tree_shape, data.tree_leaves)
    text = decode_text(root, data.message_bits)
    del root
    return text


# -------------------------
# Size report
# -------------------------
def compression_stats(text: str, data: EncodedData) -> Dict[str, object]:
    original_bits = len(text) * BITS_PER_SYMBOL
    compressed_bits = (len(data.tree_shape)
                       + len(data.tree_leaves) * BITS_PER_SYMBOL
                       + len(data.message_bits))

    ratio: Optional[float] = None
    space_saved: Optional[float] = None
    avg_code: Optional[float] = None
    if original_bits > 0:
        ratio = compressed_bits / original_bits
        space_saved = ((original_bits - compressed_bits) / original_bits) * 100.0
        avg_code = len(data.message_bits) / len(text)

    height = None
    if data.tree_shape:
        height = tree_height(unflatten_tree(data.tree_shape, data.tree_leaves))

    return {
        "original_bits": original_bits,
        "compressed_bits": compressed_bits,
        "message_bits": len(data.message_bits),
        "unique_symbols": len(data.tree_leaves),
        "tree_height": height,
        "compression_ratio": ratio,
        "space_saved_percent": space_saved,
        "average_code_length": avg_code,
    }


def compress_with_stats(text: str) -> Tuple[EncodedData, Dict[str, object]]:
    data, timings = _compress_timed(text)
    stats = compression_stats(text, data)
    stats.update(timings)
    return data, stats
