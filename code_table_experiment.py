import os
import sys

from prefixcodes.codec import *
from prefixcodes.logger import *
from prefixcodes.models import *
from prefixcodes.tree_display import *

lorem_ipsum_1par = "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Donec a consectetur ligula. Nunc erat dolor, tristique sed sagittis quis, dignissim eget erat. Vivamus enim lorem, finibus sit amet maximus eget, condimentum sit amet massa. Fusce aliquet velit sit amet ex pretium, ut tincidunt dolor semper. Nulla pellentesque eget massa quis rhoncus. Curabitur maximus quis mauris vel sollicitudin. Integer tristique ut nisl sed consequat. Donec a ipsum ut sem cursus ullamcorper. Sed finibus, sapien id volutpat tempus, turpis odio placerat purus, sit amet scelerisque nibh sem a magna. Sed justo sem, facilisis at imperdiet eu, tincidunt vel quam. Ut id sollicitudin eros, sit amet bibendum tortor. Lorem ipsum dolor sit amet, consectetur adipiscing elit."


def main(output_folder=None):
    alphabet = Alphabet.from_text(lorem_ipsum_1par)
    print(f"Symbols in alphabet: {alphabet.get_size()}")

    logger = Logger()
    table = compute_code_table(alphabet, logger=logger)
    for symbol in table:
        print(f"{symbol.value!r:6} p={symbol.probability:.4f} bits={symbol.bits:.3f} "
              f"SF={symbol.shannon_fano_code:10} H={symbol.huffman_code:10} H+p={symbol.huffman_code_with_parity}")
    print(table.statistics)

    encoded = encode_message(lorem_ipsum_1par, table, HUFFMAN_SCHEME)
    print(f"Size of original data: {len(lorem_ipsum_1par) * 8} bits")
    print(f"Size of Huffman coded data: {len(encoded)} bits")
    decoded = ''.join(decode_message(encoded, table, HUFFMAN_SCHEME))
    if decoded == lorem_ipsum_1par:
        print("Data integrity preserved.")
    else:
        print("Data integrity compromised.")

    if output_folder is not None:
        if not os.path.exists(output_folder):
            os.makedirs(output_folder)
        display = TreeDisplay()
        display.plot_tree(table.build_trie(HUFFMAN_SCHEME), "Huffman Code Tree",
                          save_path=os.path.join(output_folder, "huffman_tree.png"))
        display.plot_tree(table.build_trie(SHANNON_FANO_SCHEME), "Shannon-Fano Code Tree",
                          save_path=os.path.join(output_folder, "shannon_fano_tree.png"))
        display.plot_code_lengths(table, save_path=os.path.join(output_folder, "code_lengths.png"))
        logger.save(os.path.join(output_folder, "code_table.log"))


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else None)
