import os
import tempfile
import unittest

import matplotlib
matplotlib.use('Agg')

from prefixcodes.tree_display import TreeDisplay
from prefixcodes.codec import compute_code_table
from prefixcodes.models import Alphabet
from prefixcodes.trie import build_trie

class TestTreeDisplay(unittest.TestCase):
    def setUp(self):
        self.display = TreeDisplay(fig_size=(4, 3), dpi=50)
        self.table = compute_code_table(Alphabet.from_text("mississippi river"))

    def test_layout(self):
        root = build_trie([('a', '0'), ('b', '10'), ('c', '11')])
        positions = self.display.layout(root)
        self.assertEqual(positions[id(root.left)], (0, 1))
        self.assertEqual(positions[id(root.right.left)], (1, 2))
        self.assertEqual(positions[id(root.right.right)], (2, 2))
        self.assertEqual(positions[id(root.right)], (1.5, 1))
        self.assertEqual(positions[id(root)], (0.75, 0))

    def test_layout_of_single_node(self):
        root = build_trie([('a', '')])
        self.assertEqual(self.display.layout(root), {id(root): (0, 0)})

    def test_layout_of_empty_tree(self):
        with self.assertRaises(ValueError):
            self.display.layout(None)

    def test_plot_tree_saves_file(self):
        with tempfile.TemporaryDirectory() as folder:
            for scheme in ('huffman', 'shannon_fano'):
                path = os.path.join(folder, f"{scheme}.png")
                self.display.plot_tree(self.table.build_trie(scheme), scheme, save_path=path)
                self.assertTrue(os.path.exists(path))

    def test_plot_code_lengths_saves_file(self):
        with tempfile.TemporaryDirectory() as folder:
            path = os.path.join(folder, "lengths.png")
            figure = self.display.plot_code_lengths(self.table, save_path=path)
            self.assertIsNotNone(figure)
            self.assertTrue(os.path.exists(path))

if __name__ == '__main__':
    unittest.main()
