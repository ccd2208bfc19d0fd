"""
prefixcodes: Shannon-Fano and Huffman prefix codes with entropy statistics for a finite alphabet.
"""

from .models import (
    Symbol,
    Alphabet,
)

from .probability import (
    compute_probabilities,
)

from .coders import (
    CodeNode,
    CoderBase,
    ShannonFanoCoderSettings,
    ShannonFanoCoder,
    HuffmanCoderSettings,
    HuffmanCoder,
    get_coder,
    get_coder_for_scheme,
)

from .parity import (
    add_even_parity,
    strip_even_parity,
    generate_even_parity_codes,
)

from .trie import (
    TrieNode,
    build_trie,
    build_trie_for_scheme,
    read_codes,
    decode_bits,
)

from .codec import (
    CodeStatistics,
    CodeTable,
    compute_code_table,
    encode_message,
    decode_message,
)

from .logger import (
    Logger,
    Log,
    LogLevel,
    ProbabilityLog,
    CodeAssignmentLog,
    DegenerateInputLog,
    PartitionProgressStep,
    MergeProgressStep,
)

from .settings import HUFFMAN_SCHEME, SHANNON_FANO_SCHEME

# Validators
from .validators import *

__all__ = [
    
    "Symbol",
    "Alphabet",
    
    "compute_probabilities",
    
    "CodeNode",
    "CoderBase",
    "ShannonFanoCoderSettings",
    "ShannonFanoCoder",
    "HuffmanCoderSettings",
    "HuffmanCoder",
    "get_coder",
    "get_coder_for_scheme",
    
    "add_even_parity",
    "strip_even_parity",
    "generate_even_parity_codes",
    
    "TrieNode",
    "build_trie",
    "build_trie_for_scheme",
    "read_codes",
    "decode_bits",
    
    "CodeStatistics",
    "CodeTable",
    "compute_code_table",
    "encode_message",
    "decode_message",
    
    "Logger",
    "Log",
    "LogLevel",
    "ProbabilityLog",
    "CodeAssignmentLog",
    "DegenerateInputLog",
    "PartitionProgressStep",
    "MergeProgressStep",
    
    "HUFFMAN_SCHEME",
    "SHANNON_FANO_SCHEME",
    
    "DegenerateInput",
    "MissingCode",
    "InvalidPrefixSet",
    "ParityError",
    "validate_type",
    "validate_frequency",
    "validate_codeword",
]
