# ----------------
# Importations
# ----------------
import logging

import pandas as pd
import streamlit as st

from huffcodec.bits import from_bitstring, to_bitstring
from huffcodec.compressor import EncodedData, compress_with_stats, decompress
from huffcodec.errors import HuffmanError
from huffcodec.text_codec import make_codes
from huffcodec.tree import tree_to_dot
from huffcodec.tree_codec import unflatten_tree

# deeper trees get unreadable in the chart
DOT_MAX_DEPTH = 8

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("huffcodec.app")

# ------------------------
#   Streamlit App
# ------------------------
st.set_page_config(page_title="Huffman Codec", layout="centered")
st.title("Huffman Coding Studio")

# ---------------------
#    Instructions
# ---------------------
st.subheader("1) Instructions")

st.markdown("""
*How to Use This Tool*

1. Pick **Compress** and type some text (at least two different characters).
2. Or pick **Decompress** and paste the tree shape, the leaves and the message bits.
3. Click *Run* to see the result.
""")
st.divider()

action = st.radio("**Choose Action**", ["Compress", "Decompress"])

# ------------------
#  Compression
# ------------------
if action == "Compress":
    st.subheader("2) Text Input")
    text = st.text_area("Text to compress", value="STREETTEST")

    if st.button("Run"):
        st.divider()
        try:
            data, stats = compress_with_stats(text)
        except HuffmanError as e:
            st.error(f"Error: {str(e)}")
        else:
            logger.info("compressed %d chars into %d message bits", len(text), stats["message_bits"])

            st.subheader("3) Encoded Data")
            st.code(f"tree shape   : {to_bitstring(data.tree_shape)}\n"
                    f"tree leaves  : {''.join(data.tree_leaves)!r}\n"
                    f"message bits : {to_bitstring(data.message_bits)}")

            st.subheader("4) Compression Summary")
            col1, col2, col3 = st.columns(3)
            col1.metric("**Original Size**", f"{stats['original_bits']} bits")
            col2.metric("**Compressed Size**", f"{stats['compressed_bits']} bits")
            col3.metric("Space Saved", f"{stats['space_saved_percent']:.2f}%")
            st.markdown(f"*Compression ratio: {stats['compression_ratio']:.4f}*")
            st.markdown(f"*Unique symbols: {stats['unique_symbols']}*")
            st.markdown(f"*Average code length: {stats['average_code_length']:.3f} bits*")

            root = unflatten_tree(data.tree_shape, data.tree_leaves)
            codes = make_codes(root)
            df = pd.DataFrame([(repr(sym), to_bitstring(path), len(path)) for sym, path in codes.items()],
                              columns=["Symbol", "Code", "Length"])
            st.divider()
            st.subheader("5) Code Table")
            st.table(df.sort_values(["Length", "Code"]))

            timings = {
                "Count Symbols": stats["time_freq"],
                "Build Tree": stats["time_tree"],
                "Flatten Tree": stats["time_flatten"],
                "Encode Text": stats["time_encode"],
                "Total": stats["time_total"],
            }
            df = pd.DataFrame(list(timings.items()), columns=["Step", "Time (s)"])
            st.divider()
            st.subheader("6) Processing Timings")
            st.table(df)

            st.divider()
            st.subheader("7) Huffman Tree")
            st.graphviz_chart(tree_to_dot(root, max_depth=DOT_MAX_DEPTH))

# ----------------------
# Decompression
# ---------------------
else:
    st.subheader("2) Encoded Data")
    shape_text = st.text_input("Tree shape bits", value="1011000")
    leaves_text = st.text_input("Tree leaves", value="TRSE")
    bits_text = st.text_input("Message bits", value="010011101101")

    if st.button("Run"):
        st.divider()
        try:
            data = EncodedData(from_bitstring(shape_text.strip()),
                               list(leaves_text),
                               from_bitstring(bits_text.strip()))
            text = decompress(data)
        except HuffmanError as e:
            st.error(f"Error: {str(e)}")
        else:
            logger.info("decompressed %d message bits into %d chars", len(data.message_bits), len(text))
            st.subheader("3) Decompression Report")
            col1, col2 = st.columns(2)
            col1.metric("Message bits", f"{len(data.message_bits)}")
            col2.metric("Restored length", f"{len(text)} chars")
            st.text_area("Restored text", value=text)
