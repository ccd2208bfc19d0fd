#codec.py

"""
The full code generation pipeline, its aggregate statistics and message coding.

The pipeline is a pure function of an alphabet snapshot. Whenever a frequency
changes, the whole table has to be computed again, since every codeword depends
on the complete distribution.
"""

import numpy as np
from typing import Iterable, List, Optional, Dict, Any

from .coders import ShannonFanoCoder, ShannonFanoCoderSettings, HuffmanCoder, HuffmanCoderSettings
from .logger import Logger
from .models import Symbol
from .parity import generate_even_parity_codes, strip_even_parity
from .probability import compute_probabilities
from .settings import HUFFMAN_SCHEME, SHANNON_FANO_SCHEME, SCHEMES
from .trie import TrieNode, build_trie_for_scheme, decode_bits
from .validators import DegenerateInput, MissingCode, ParityError


class CodeStatistics:
    """
    Aggregate statistics of a code table.

    Efficiency is the average information divided by the average codeword
    length. A single-symbol alphabet has both equal to zero and its efficiency
    is taken as 1.0.
    """
    def __init__(self, symbols: List[Symbol]) -> None:
        if len(symbols) == 0:
            raise DegenerateInput("Cannot compute statistics of an empty code table")
        for symbol in symbols:
            if symbol.huffman_code is None or symbol.shannon_fano_code is None:
                raise MissingCode(f"Symbol {symbol.value!r} has no codes")
            if symbol.probability is None or symbol.bits is None:
                raise MissingCode(f"Symbol {symbol.value!r} has no probability or bits")

        probabilities = np.array([s.probability for s in symbols], dtype=np.float64)
        bits = np.array([s.bits for s in symbols], dtype=np.float64)
        huffman_lengths = np.array([len(s.huffman_code) for s in symbols], dtype=np.float64)
        shannon_fano_lengths = np.array([len(s.shannon_fano_code) for s in symbols], dtype=np.float64)

        # zero-probability symbols carry infinite bits but contribute nothing
        nonzero = probabilities > 0
        self.average_information: float = float(np.sum(probabilities[nonzero] * bits[nonzero]))
        self.average_huffman_length: float = float(np.dot(probabilities, huffman_lengths))
        self.average_shannon_fano_length: float = float(np.dot(probabilities, shannon_fano_lengths))
        self.huffman_efficiency: float = self._efficiency(self.average_huffman_length)
        self.shannon_fano_efficiency: float = self._efficiency(self.average_shannon_fano_length)

    def _efficiency(self, average_length: float) -> float:
        if average_length == 0:
            return 1.0
        return self.average_information / average_length

    def huffman_efficiency_percent(self) -> float:
        return 100 * self.huffman_efficiency

    def shannon_fano_efficiency_percent(self) -> float:
        return 100 * self.shannon_fano_efficiency

    def as_dict(self) -> Dict[str, float]:
        return {
            "average_information": self.average_information,
            "average_huffman_length": self.average_huffman_length,
            "average_shannon_fano_length": self.average_shannon_fano_length,
            "huffman_efficiency": self.huffman_efficiency,
            "shannon_fano_efficiency": self.shannon_fano_efficiency,
        }

    def __str__(self) -> str:
        return (f"Average information: {self.average_information:.4f} bits, "
                f"Huffman: {self.average_huffman_length:.4f} bits ({self.huffman_efficiency_percent():.2f}%), "
                f"Shannon-Fano: {self.average_shannon_fano_length:.4f} bits ({self.shannon_fano_efficiency_percent():.2f}%)")


class CodeTable:
    """
    Symbols enriched with probabilities and both codes, ordered by id.
    """
    def __init__(self, symbols: Iterable[Symbol]) -> None:
        self.symbols: List[Symbol] = sorted(symbols, key=lambda s: s.id)
        self._statistics: Optional[CodeStatistics] = None
        self._code_books: Dict[Any, Dict[str, str]] = {}

    @property
    def statistics(self) -> CodeStatistics:
        if self._statistics is None:
            self._statistics = CodeStatistics(self.symbols)
        return self._statistics

    def get_symbols(self) -> List[Symbol]:
        return list(self.symbols)

    def get_by_value(self, value: str) -> Symbol:
        """
        Get the symbol with the given value; the lowest id wins for repeated values.

        Raises:
            KeyError: If no symbol has the value.
        """
        for symbol in self.symbols:
            if symbol.value == value:
                return symbol
        raise KeyError(value)

    def code_book(self, scheme: str, with_parity: bool = False) -> Dict[str, str]:
        """Map every symbol value to its codeword."""
        key = (scheme, with_parity)
        if key not in self._code_books:
            book = {}
            for symbol in self.symbols:
                book.setdefault(symbol.value, symbol.get_code(scheme, with_parity))
            self._code_books[key] = book
        return self._code_books[key]

    def build_trie(self, scheme: str, with_parity: bool = False) -> TrieNode:
        return build_trie_for_scheme(self.symbols, scheme, with_parity)

    def as_rows(self) -> List[Dict[str, Any]]:
        return [symbol.as_dict() for symbol in self.symbols]

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self):
        return iter(self.symbols)


def compute_code_table(symbols: Iterable[Symbol],
                       shannon_fano_settings: Optional[ShannonFanoCoderSettings] = None,
                       huffman_settings: Optional[HuffmanCoderSettings] = None,
                       logger: Optional[Logger] = None) -> CodeTable:
    """
    Run the full pipeline on a snapshot of symbols.

    Probabilities are derived first, then the Shannon-Fano and Huffman codes
    are assigned and finally both are augmented with an even parity bit.

    Args:
        symbols (Iterable[Symbol]): The symbols, e.g. an Alphabet.
        shannon_fano_settings (Optional[ShannonFanoCoderSettings]): Split policy.
        huffman_settings (Optional[HuffmanCoderSettings]): Merge policy.
        logger (Optional[Logger]): An optional logger.

    Returns:
        CodeTable: The enriched symbols ordered by id.

    Raises:
        DegenerateInput: If there are no symbols or all frequencies are zero.
    """
    with_probabilities = compute_probabilities(symbols, logger)
    with_shannon_fano = ShannonFanoCoder(shannon_fano_settings, logger).assign_codes(with_probabilities)
    with_huffman = HuffmanCoder(huffman_settings, logger).assign_codes(with_shannon_fano)
    with_parity = generate_even_parity_codes(with_huffman)
    return CodeTable(with_parity)


def _validate_scheme(scheme: str) -> None:
    if scheme not in SCHEMES:
        raise ValueError(f"Unknown coding scheme: {scheme}")


def encode_message(message: Iterable[str], table: CodeTable,
                   scheme: str = HUFFMAN_SCHEME, with_parity: bool = False) -> str:
    """
    Concatenate the codewords of every symbol value in the message.

    Raises:
        DegenerateInput: If the table only holds the empty codeword.
        ValueError: If the message contains a value missing from the table.
    """
    _validate_scheme(scheme)
    book = table.code_book(scheme, with_parity)
    if len(table) == 1 and not with_parity:
        raise DegenerateInput("The empty codeword of a single-symbol alphabet cannot be transmitted")
    encoded = []
    for value in message:
        if value not in book:
            raise ValueError(f"Symbol {value!r} is not in the code table")
        encoded.append(book[value])
    return ''.join(encoded)


def decode_message(bits: str, table: CodeTable,
                   scheme: str = HUFFMAN_SCHEME, with_parity: bool = False) -> List[str]:
    """
    Decode a bit string produced by encode_message.

    With parity every codeword is followed by its check bit, which is verified
    and dropped.

    Raises:
        DegenerateInput: If the table only holds the empty codeword.
        ParityError: If a codeword fails its parity check.
        ValueError: If the bits do not form a sequence of codewords.
    """
    _validate_scheme(scheme)
    root = table.build_trie(scheme)
    if not with_parity:
        return decode_bits(root, bits)

    if root.label is not None:
        # every word is just the parity bit of the empty codeword
        for position, bit in enumerate(bits):
            if bit != '0':
                raise ParityError(f"Parity check failed at position {position}")
        return [root.label] * len(bits)

    values = []
    current = root
    word = ''
    position = 0
    while position < len(bits):
        bit = bits[position]
        if bit not in '01':
            raise ValueError(f"Invalid bit {bit!r} at position {position}")
        word += bit
        current = current.child(bit)
        if current is None:
            raise ValueError(f"Bit sequence does not match any code at position {position}")
        if current.label is not None:
            position += 1
            if position >= len(bits):
                raise ValueError("Bit sequence ends before a parity bit")
            if bits[position] not in '01':
                raise ValueError(f"Invalid bit {bits[position]!r} at position {position}")
            strip_even_parity(word + bits[position])
            values.append(current.label)
            current = root
            word = ''
        position += 1
    if current is not root:
        raise ValueError("Bit sequence ends inside a codeword")
    return values
