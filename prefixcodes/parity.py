"""
parity.py

Even parity check bits for generated codewords.
"""


from typing import Iterable, List

from .models import Symbol
from .validators import MissingCode, ParityError, validate_codeword


def count_ones(code: str) -> int:
    return code.count('1')


def add_even_parity(code: str) -> str:
    """
    Append a check bit so the number of '1' bits in the result is even.

    Raises:
        MissingCode: If the code is None.
        InvalidPrefixSet: If the code contains characters other than '0' and '1'.
    """
    validate_codeword(code)
    parity_bit = '0' if count_ones(code) % 2 == 0 else '1'
    return code + parity_bit


def has_even_parity(code: str) -> bool:
    validate_codeword(code)
    return count_ones(code) % 2 == 0


def strip_even_parity(code: str) -> str:
    """
    Check and remove the trailing parity bit of a parity-augmented codeword.

    Raises:
        ParityError: If the codeword is empty or its parity is odd.
    """
    if len(code) == 0:
        raise ParityError("A parity-augmented codeword cannot be empty")
    if not has_even_parity(code):
        raise ParityError(f"Parity check failed for {code!r}")
    return code[:-1]


def generate_even_parity_codes(symbols: Iterable[Symbol]) -> List[Symbol]:
    """
    Add the parity-augmented Huffman and Shannon-Fano codewords to every symbol.

    Args:
        symbols (Iterable[Symbol]): Symbols with both code fields set.

    Returns:
        List[Symbol]: New symbols in the same order.

    Raises:
        MissingCode: If a symbol lacks either codeword.
    """
    result = []
    for symbol in symbols:
        if symbol.huffman_code is None:
            raise MissingCode(f"Huffman code of symbol {symbol.value!r} has not been assigned")
        if symbol.shannon_fano_code is None:
            raise MissingCode(f"Shannon-Fano code of symbol {symbol.value!r} has not been assigned")
        result.append(symbol.copy(
            huffman_code_with_parity=add_even_parity(symbol.huffman_code),
            shannon_fano_code_with_parity=add_even_parity(symbol.shannon_fano_code),
        ))
    return result
