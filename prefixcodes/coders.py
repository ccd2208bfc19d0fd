"""
coders.py

Prefix code generation: Shannon-Fano bisection and Huffman greedy merging.

Both coders build a binary code tree and assign each symbol the path from the
root to its leaf ('0' for left, '1' for right). A tree made of one leaf, which
happens for a single-symbol alphabet, assigns the empty codeword. That code is
well defined but cannot be used for transmission.
"""


import abc
import heapq
from typing import List, Optional, Dict

from .logger import Logger, CodeAssignmentLog, PartitionProgressStep, MergeProgressStep
from .models import Symbol
from .settings import (
    SHANNON_FANO_INCLUSIVE_SPLIT,
    HUFFMAN_MERGED_AFTER_TIES,
    HUFFMAN_SCHEME,
    SHANNON_FANO_SCHEME,
)
from .validators import DegenerateInput, validate_type


class CodeNode:
    """
    Node of a code tree: a leaf holds a symbol, an internal node holds two children.
    """
    def __init__(self, probability: float, symbol: Optional[Symbol] = None,
                 left: Optional['CodeNode'] = None, right: Optional['CodeNode'] = None) -> None:
        self.probability = probability
        self.symbol = symbol
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        return self.symbol is not None

    def __repr__(self) -> str:
        if self.is_leaf():
            return f"Leaf({self.symbol.value!r}, {self.probability})"
        return f"Internal({self.probability}, {self.left!r}, {self.right!r})"


class CoderBase(abc.ABC):
    """
    Abstract base class for prefix coders.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    @property
    @abc.abstractmethod
    def scheme(self) -> str:
        """Return the name of the coding scheme."""
        pass

    @abc.abstractmethod
    def get_coder_code(self) -> int:
        """
        Get the code for the coder.
        
        Returns:
            int: The coder code.
        """
        pass

    @abc.abstractmethod
    def build_tree(self, symbols: List[Symbol]) -> CodeNode:
        """
        Build the code tree for a non-empty list of symbols with probabilities.
        
        Args:
            symbols (List[Symbol]): The symbols to code.
        
        Returns:
            CodeNode: The root of the code tree.
        """
        pass

    def assign_codes(self, symbols: List[Symbol]) -> List[Symbol]:
        """
        Assign a codeword to every symbol.

        Args:
            symbols (List[Symbol]): Symbols with probability populated.

        Returns:
            List[Symbol]: New symbols, in input order, with the scheme's code field set.
            Any other code fields are carried through unchanged.

        Raises:
            DegenerateInput: If the list of symbols is empty.
            ValueError: If a symbol has no probability.
        """
        symbols = list(symbols)
        if len(symbols) == 0:
            raise DegenerateInput("Cannot assign codes to an empty alphabet")
        for symbol in symbols:
            validate_type(symbol, "Symbol", Symbol)
            if symbol.probability is None:
                raise ValueError(f"Probability of symbol {symbol.value!r} has not been computed")
        if len({s.id for s in symbols}) != len(symbols):
            raise ValueError("Symbol ids must be unique")

        codes = collect_codes(self.build_tree(symbols))
        field = f"{self.scheme}_code"
        result = []
        for symbol in symbols:
            code = codes[symbol.id]
            result.append(symbol.copy(**{field: code}))
            if self.logger:
                self.logger.log(CodeAssignmentLog(self.scheme, symbol.value, code))
        return result


def collect_codes(root: CodeNode) -> Dict[int, str]:
    """
    Walk a code tree and map every leaf's symbol id to its root-to-leaf path.
    """
    codes = {}
    def build_codes(node, code=''):
        if node.is_leaf():
            codes[node.symbol.id] = code
        else:
            build_codes(node.left, code + '0')
            build_codes(node.right, code + '1')
    build_codes(root)
    return codes


class ShannonFanoCoderSettings:
    """
    Settings for the Shannon-Fano coder.

    inclusive_split: split at the first index whose cumulative probability is
    at least half of the partition total (True) or strictly above it (False).
    """

    def __init__(self, inclusive_split: bool = SHANNON_FANO_INCLUSIVE_SPLIT) -> None:
        self.inclusive_split: bool = inclusive_split


class ShannonFanoCoder(CoderBase):
    """
    Shannon-Fano coder: recursive bisection of the symbols sorted by descending probability.
    """

    def __init__(self, settings: Optional[ShannonFanoCoderSettings] = None,
                 logger: Optional[Logger] = None) -> None:
        super().__init__(logger)
        if settings is None:
            settings = ShannonFanoCoderSettings()
        validate_type(settings, "settings", ShannonFanoCoderSettings)
        self.settings: ShannonFanoCoderSettings = settings
        self.coder_code: int = 1

    @property
    def scheme(self) -> str:
        return SHANNON_FANO_SCHEME

    def get_coder_code(self) -> int:
        return self.coder_code

    def sort_symbols(self, symbols: List[Symbol]) -> List[Symbol]:
        """Sort by descending probability, keeping the input order of equal probabilities."""
        return sorted(symbols, key=lambda s: s.probability, reverse=True)

    def split_index(self, partition: List[Symbol]) -> int:
        """
        Find the last index of the left half of a partition of two or more symbols.

        The scan stops at the first index whose cumulative probability reaches
        half of the partition total. The right half always keeps at least one symbol.
        """
        total = 0.0
        for symbol in partition:
            total += symbol.probability
        half = total / 2

        cumulative = 0.0
        for i, symbol in enumerate(partition[:-1]):
            cumulative += symbol.probability
            if cumulative > half or (self.settings.inclusive_split and cumulative == half):
                return i
        return len(partition) - 2

    def build_tree(self, symbols: List[Symbol]) -> CodeNode:
        ordered = self.sort_symbols(symbols)
        total_steps = len(ordered) - 1

        def split_symbols(partition):
            if len(partition) == 1:
                return CodeNode(partition[0].probability, symbol=partition[0])
            index = self.split_index(partition)
            if self.logger:
                self.logger.log(PartitionProgressStep(
                    f"Split {len(partition)} symbols at {index + 1}", total_steps))
            left = split_symbols(partition[:index + 1])
            right = split_symbols(partition[index + 1:])
            return CodeNode(left.probability + right.probability, left=left, right=right)

        return split_symbols(ordered)


class HuffmanCoderSettings:
    """
    Settings for the Huffman coder.

    merged_after_ties: a merged node is queued behind nodes of equal
    probability (True) or in front of them (False).
    """

    def __init__(self, merged_after_ties: bool = HUFFMAN_MERGED_AFTER_TIES) -> None:
        self.merged_after_ties: bool = merged_after_ties


class HuffmanCoder(CoderBase):
    """
    Huffman coder: repeatedly merges the two least probable nodes.

    The working queue is ordered by (probability, sequence). Leaves get the
    sequence of their input position, so equal probabilities leave in input
    order. Merged nodes get a sequence after (or before, depending on the
    settings) every node queued so far. Of the two nodes removed, the first
    becomes the left child.
    """

    def __init__(self, settings: Optional[HuffmanCoderSettings] = None,
                 logger: Optional[Logger] = None) -> None:
        super().__init__(logger)
        if settings is None:
            settings = HuffmanCoderSettings()
        validate_type(settings, "settings", HuffmanCoderSettings)
        self.settings: HuffmanCoderSettings = settings
        self.coder_code: int = 2

    @property
    def scheme(self) -> str:
        return HUFFMAN_SCHEME

    def get_coder_code(self) -> int:
        return self.coder_code

    def build_tree(self, symbols: List[Symbol]) -> CodeNode:
        heap = [(s.probability, i, CodeNode(s.probability, symbol=s)) for i, s in enumerate(symbols)]
        heapq.heapify(heap)
        total_steps = len(heap) - 1
        merges = 0
        while len(heap) > 1:
            _, _, left = heapq.heappop(heap)
            _, _, right = heapq.heappop(heap)
            merged = CodeNode(left.probability + right.probability, left=left, right=right)
            merges += 1
            if self.settings.merged_after_ties:
                sequence = len(symbols) + merges
            else:
                sequence = -merges
            heapq.heappush(heap, (merged.probability, sequence, merged))
            if self.logger:
                self.logger.log(MergeProgressStep(
                    f"Merged nodes into probability {merged.probability}", total_steps))
        return heap[0][2]


def get_coder(code: int, logger: Optional[Logger] = None) -> CoderBase:
    """
    Retrieve a coder instance based on the given code.
    
    Args:
        code (int): The coder code (1 for Shannon-Fano, 2 for Huffman).
        logger (Optional[Logger]): Logger instance for logging.
    
    Returns:
        CoderBase: An instance of a coder.
    
    Raises:
        ValueError: If the coder code is unknown.
    """
    if code == 1:
        return ShannonFanoCoder(ShannonFanoCoderSettings(), logger=logger)
    elif code == 2:
        return HuffmanCoder(HuffmanCoderSettings(), logger=logger)
    else:
        raise ValueError("Unknown coder code: " + str(code))


def get_coder_for_scheme(scheme: str, logger: Optional[Logger] = None) -> CoderBase:
    if scheme == SHANNON_FANO_SCHEME:
        return get_coder(1, logger)
    elif scheme == HUFFMAN_SCHEME:
        return get_coder(2, logger)
    else:
        raise ValueError(f"Unknown coding scheme: {scheme}")
