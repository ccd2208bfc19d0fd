"""
tree_display.py

Static matplotlib rendering of code tries and per-symbol code lengths.
"""


import matplotlib.pyplot as plt
import numpy as np

from .settings import DISPLAY_FIG_SIZE, DISPLAY_DPI, DISPLAY_FONT_SIZE, DISPLAY_NODE_RADIUS
from .trie import TrieNode


class TreeDisplay:
    def __init__(self,
                 fig_size=DISPLAY_FIG_SIZE, dpi=DISPLAY_DPI, font_size=DISPLAY_FONT_SIZE,
                 node_radius=DISPLAY_NODE_RADIUS,
                 node_color='white', edge_color='black',
                 information_color='gray', huffman_color='tab:blue', shannon_fano_color='tab:orange'):
        self.fig_size = fig_size
        self.dpi = dpi
        self.font_size = font_size
        self.node_radius = node_radius
        self.node_color = node_color
        self.edge_color = edge_color
        self.information_color = information_color
        self.huffman_color = huffman_color
        self.shannon_fano_color = shannon_fano_color

    def layout(self, root: TrieNode):
        """
        Assign (x, depth) to every node in post-order: leaves take the next free
        x slot, internal nodes sit midway between their children.
        """
        if root is None:
            raise ValueError("Cannot lay out an empty tree")
        positions = {}
        next_x = [0]

        def assign_positions(node, depth):
            if node.left is not None:
                assign_positions(node.left, depth + 1)
            if node.right is not None:
                assign_positions(node.right, depth + 1)
            if node.is_leaf():
                x = next_x[0]
                next_x[0] += 1
            elif node.left is not None and node.right is not None:
                x = (positions[id(node.left)][0] + positions[id(node.right)][0]) / 2
            elif node.left is not None:
                x = positions[id(node.left)][0]
            else:
                x = positions[id(node.right)][0]
            positions[id(node)] = (x, depth)

        assign_positions(root, 0)
        return positions

    def _finish(self, figure, show_graph, save_path):
        if save_path:
            figure.savefig(save_path)
        if show_graph:
            plt.show()
        else:
            plt.close(figure)

    def plot_tree(self, root: TrieNode, title, show_graph=False, save_path=None):
        positions = self.layout(root)
        figure, axes = plt.subplots(figsize=self.fig_size, dpi=self.dpi)

        def draw(node):
            x, depth = positions[id(node)]
            for child, bit in ((node.left, '0'), (node.right, '1')):
                if child is None:
                    continue
                child_x, child_depth = positions[id(child)]
                axes.plot([x, child_x], [-depth, -child_depth], color=self.edge_color, zorder=1)
                axes.text((x + child_x) / 2, -(depth + child_depth) / 2, bit,
                          fontsize=self.font_size - 2, ha='center', va='bottom')
                draw(child)
            axes.add_patch(plt.Circle((x, -depth), self.node_radius,
                                      facecolor=self.node_color, edgecolor=self.edge_color, zorder=2))
            if node.label is not None:
                axes.text(x, -depth, node.label, fontsize=self.font_size, ha='center', va='center', zorder=3)

        draw(root)
        xs = [x for x, _ in positions.values()]
        depths = [d for _, d in positions.values()]
        axes.set_xlim(min(xs) - 1, max(xs) + 1)
        axes.set_ylim(-max(depths) - 1, 1)
        axes.set_aspect('equal')
        axes.axis('off')
        axes.set_title(title, fontsize=self.font_size + 2)
        figure.tight_layout()
        self._finish(figure, show_graph, save_path)
        return figure

    def plot_code_lengths(self, table, show_graph=False, save_path=None):
        """Compare self-information with Huffman and Shannon-Fano codeword lengths per symbol."""
        symbols = table.get_symbols()
        if not symbols:
            print("No data available for code lengths.")
            return None

        x = np.arange(len(symbols))
        width = 0.25
        information = np.array([s.bits if np.isfinite(s.bits) else 0.0 for s in symbols])
        huffman = np.array([len(s.huffman_code) for s in symbols])
        shannon_fano = np.array([len(s.shannon_fano_code) for s in symbols])

        figure, axes = plt.subplots(figsize=self.fig_size, dpi=self.dpi)
        axes.bar(x - width, information, width, color=self.information_color, label="Information (bits)")
        axes.bar(x, huffman, width, color=self.huffman_color, label="Huffman code length")
        axes.bar(x + width, shannon_fano, width, color=self.shannon_fano_color, label="Shannon-Fano code length")
        axes.set_xticks(x)
        axes.set_xticklabels([s.value for s in symbols], fontsize=self.font_size)
        axes.set_title("Information and Code Lengths", fontsize=self.font_size + 2)
        axes.set_xlabel("Symbol", fontsize=self.font_size)
        axes.set_ylabel("Bits", fontsize=self.font_size)
        axes.grid(True, axis='y')
        axes.legend(fontsize=self.font_size)
        figure.tight_layout()
        self._finish(figure, show_graph, save_path)
        return figure
