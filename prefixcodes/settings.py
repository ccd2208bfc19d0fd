#settings.py

# Shannon-Fano split policy: the split index is the first one whose cumulative
# probability reaches half of the partition total. With False the threshold
# must be strictly exceeded instead.
SHANNON_FANO_INCLUSIVE_SPLIT = True

# Huffman merge policy: a merged node goes behind queued nodes of equal
# probability. With False it goes in front of them.
HUFFMAN_MERGED_AFTER_TIES = True

HUFFMAN_SCHEME = "huffman"
SHANNON_FANO_SCHEME = "shannon_fano"
SCHEMES = (HUFFMAN_SCHEME, SHANNON_FANO_SCHEME)

# TreeDisplay defaults
DISPLAY_FIG_SIZE = (10, 6)
DISPLAY_DPI = 100
DISPLAY_FONT_SIZE = 12
DISPLAY_NODE_RADIUS = 0.25
