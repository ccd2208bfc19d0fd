import unittest

from prefixcodes.coders import *
from prefixcodes.models import Symbol, Alphabet
from prefixcodes.probability import compute_probabilities
from prefixcodes.logger import Logger, CodeAssignmentLog, MergeProgressStep, PartitionProgressStep
from prefixcodes.validators import DegenerateInput

CLASSIC_FREQUENCIES = {'a': 5, 'b': 9, 'c': 12, 'd': 13, 'e': 16, 'f': 45}


def codes_by_value(symbols, field):
    return {s.value: getattr(s, field) for s in symbols}


def prepared(frequencies):
    return compute_probabilities(Alphabet.from_frequencies(frequencies))


class TestShannonFanoCoder(unittest.TestCase):
    def setUp(self):
        self.coder = ShannonFanoCoder()

    def test_classic_alphabet(self):
        codes = codes_by_value(self.coder.assign_codes(prepared(CLASSIC_FREQUENCIES)), 'shannon_fano_code')
        self.assertEqual(codes, {'f': '00', 'e': '01', 'd': '100', 'c': '101', 'b': '110', 'a': '111'})

    def test_split_at_first_index_reaching_half(self):
        codes = codes_by_value(self.coder.assign_codes(prepared({'a': 1, 'b': 1, 'c': 1, 'd': 1})),
                               'shannon_fano_code')
        self.assertEqual(codes, {'a': '00', 'b': '01', 'c': '10', 'd': '11'})

    def test_exclusive_split_setting(self):
        coder = ShannonFanoCoder(ShannonFanoCoderSettings(inclusive_split=False))
        codes = codes_by_value(coder.assign_codes(prepared({'a': 1, 'b': 1, 'c': 1, 'd': 1})),
                               'shannon_fano_code')
        self.assertEqual(codes, {'a': '000', 'b': '001', 'c': '01', 'd': '1'})

    def test_two_symbols(self):
        codes = codes_by_value(self.coder.assign_codes(prepared({'a': 1, 'b': 1})), 'shannon_fano_code')
        self.assertEqual(codes, {'a': '0', 'b': '1'})

    def test_single_symbol_gets_empty_code(self):
        symbols = self.coder.assign_codes(prepared({'a': 5}))
        self.assertEqual(symbols[0].shannon_fano_code, '')

    def test_split_keeps_right_half_non_empty(self):
        partition = [Symbol(0, 'a', 1, probability=0.0), Symbol(1, 'b', 1, probability=0.0)]
        self.assertEqual(self.coder.split_index(partition), 0)
        skewed = [Symbol(0, 'a', 1, probability=0.1), Symbol(1, 'b', 1, probability=0.9)]
        self.assertEqual(self.coder.split_index(skewed), 0)

    def test_sort_is_stable(self):
        symbols = prepared({'x': 1, 'y': 2, 'z': 1})
        ordered = self.coder.sort_symbols(symbols)
        self.assertEqual([s.value for s in ordered], ['y', 'x', 'z'])

    def test_keeps_input_order_and_ids(self):
        symbols = prepared(CLASSIC_FREQUENCIES)
        coded = self.coder.assign_codes(symbols)
        self.assertEqual([s.id for s in coded], [s.id for s in symbols])
        self.assertIsNone(symbols[0].shannon_fano_code)

    def test_logging(self):
        logger = Logger()
        logger.record_progress = True
        ShannonFanoCoder(logger=logger).assign_codes(prepared(CLASSIC_FREQUENCIES))
        self.assertEqual(len(logger.get_logs(CodeAssignmentLog)), 6)
        self.assertEqual(len(logger.get_logs(PartitionProgressStep)), 5)


class TestHuffmanCoder(unittest.TestCase):
    def setUp(self):
        self.coder = HuffmanCoder()

    def test_classic_code_lengths(self):
        codes = codes_by_value(self.coder.assign_codes(prepared(CLASSIC_FREQUENCIES)), 'huffman_code')
        lengths = {value: len(code) for value, code in codes.items()}
        self.assertEqual(lengths, {'f': 1, 'c': 3, 'd': 3, 'e': 3, 'a': 4, 'b': 4})

    def test_classic_codes(self):
        codes = codes_by_value(self.coder.assign_codes(prepared(CLASSIC_FREQUENCIES)), 'huffman_code')
        self.assertEqual(codes, {'f': '0', 'c': '100', 'd': '101', 'a': '1100', 'b': '1101', 'e': '111'})

    def test_merged_node_after_ties(self):
        codes = codes_by_value(self.coder.assign_codes(prepared({'a': 1, 'b': 1, 'c': 2})), 'huffman_code')
        self.assertEqual(codes, {'c': '0', 'a': '10', 'b': '11'})

    def test_merged_node_before_ties_setting(self):
        coder = HuffmanCoder(HuffmanCoderSettings(merged_after_ties=False))
        codes = codes_by_value(coder.assign_codes(prepared({'a': 1, 'b': 1, 'c': 2})), 'huffman_code')
        self.assertEqual(codes, {'a': '00', 'b': '01', 'c': '1'})

    def test_equal_probabilities_leave_in_input_order(self):
        codes = codes_by_value(self.coder.assign_codes(prepared({'a': 1, 'b': 1, 'c': 1, 'd': 1})),
                               'huffman_code')
        self.assertEqual(codes, {'a': '00', 'b': '01', 'c': '10', 'd': '11'})

    def test_two_symbols(self):
        codes = codes_by_value(self.coder.assign_codes(prepared({'a': 1, 'b': 1})), 'huffman_code')
        self.assertEqual(codes, {'a': '0', 'b': '1'})

    def test_single_symbol_gets_empty_code(self):
        symbols = self.coder.assign_codes(prepared({'a': 5}))
        self.assertEqual(symbols[0].huffman_code, '')

    def test_carries_shannon_fano_code(self):
        with_shannon_fano = ShannonFanoCoder().assign_codes(prepared(CLASSIC_FREQUENCIES))
        coded = self.coder.assign_codes(with_shannon_fano)
        self.assertEqual(codes_by_value(coded, 'shannon_fano_code'),
                         codes_by_value(with_shannon_fano, 'shannon_fano_code'))

    def test_tree_probabilities(self):
        root = self.coder.build_tree(prepared(CLASSIC_FREQUENCIES))
        self.assertAlmostEqual(root.probability, 1.0)
        self.assertFalse(root.is_leaf())
        self.assertEqual(root.left.symbol.value, 'f')

    def test_logging(self):
        logger = Logger()
        logger.record_progress = True
        HuffmanCoder(logger=logger).assign_codes(prepared(CLASSIC_FREQUENCIES))
        self.assertEqual(len(logger.get_logs(MergeProgressStep)), 5)
        self.assertEqual(logger.merge_progress_count, 5)


class TestCoderInput(unittest.TestCase):
    def test_empty_input(self):
        for coder in (ShannonFanoCoder(), HuffmanCoder()):
            with self.assertRaises(DegenerateInput):
                coder.assign_codes([])

    def test_missing_probability(self):
        for coder in (ShannonFanoCoder(), HuffmanCoder()):
            with self.assertRaises(ValueError):
                coder.assign_codes([Symbol(0, 'a', 1)])

    def test_duplicate_ids(self):
        symbols = [Symbol(0, 'a', 1, probability=0.5), Symbol(0, 'b', 1, probability=0.5)]
        with self.assertRaises(ValueError):
            HuffmanCoder().assign_codes(symbols)

    def test_invalid_settings(self):
        with self.assertRaises(ValueError):
            HuffmanCoder(ShannonFanoCoderSettings())


class TestGetCoder(unittest.TestCase):
    def test_get_shannon_fano_coder(self):
        coder = get_coder(1)
        self.assertIsInstance(coder, ShannonFanoCoder)
        self.assertEqual(coder.get_coder_code(), 1)
        self.assertEqual(coder.scheme, 'shannon_fano')

    def test_get_huffman_coder(self):
        coder = get_coder(2)
        self.assertIsInstance(coder, HuffmanCoder)
        self.assertEqual(coder.get_coder_code(), 2)
        self.assertIsInstance(get_coder_for_scheme('huffman'), HuffmanCoder)

    def test_get_invalid_coder(self):
        with self.assertRaises(ValueError):
            get_coder(99)
        with self.assertRaises(ValueError):
            get_coder_for_scheme('arithmetic')

if __name__ == '__main__':
    unittest.main()
