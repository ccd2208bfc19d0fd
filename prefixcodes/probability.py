"""
probability.py

Derives probability and self-information of every symbol from its frequency.
"""


import math
import numpy as np
from typing import Iterable, List, Optional

from .logger import Logger, ProbabilityLog, DegenerateInputLog
from .models import Symbol
from .validators import DegenerateInput


def code_length_sort_key(symbol: Symbol):
    """Sort key placing undefined code lengths after every finite one."""
    if symbol.code_length is None:
        return (1, 0)
    return (0, symbol.code_length)


def compute_probabilities(symbols: Iterable[Symbol], logger: Optional[Logger] = None) -> List[Symbol]:
    """
    Compute probability, bits and code length for every symbol.

    The returned symbols are new records ordered by ascending code length; ties
    keep the input order. Codes assigned in an earlier run are not carried over.

    Args:
        symbols (Iterable[Symbol]): The symbols with their frequencies.
        logger (Optional[Logger]): An optional logger.

    Returns:
        List[Symbol]: The symbols with probability, bits and code_length set.

    Raises:
        DegenerateInput: If there are no symbols or all frequencies are zero.
    """
    symbols = list(symbols)
    if len(symbols) == 0:
        if logger:
            logger.log(DegenerateInputLog("Alphabet is empty"))
        raise DegenerateInput("Alphabet is empty")

    frequencies = np.array([s.frequency for s in symbols], dtype=np.float64)
    with np.errstate(over='ignore'):
        total = frequencies.sum()
    if not np.isfinite(total):
        # finite frequencies whose sum overflows are rescaled by the largest one
        frequencies = frequencies / frequencies.max()
        total = frequencies.sum()
    if total <= 0:
        if logger:
            logger.log(DegenerateInputLog("Total frequency is zero"))
        raise DegenerateInput("Total frequency is zero, the distribution is undefined")

    probabilities = frequencies / total
    with np.errstate(divide='ignore'):
        bits = -np.log2(probabilities)
    # a symbol carrying all the mass has no information
    bits[probabilities == 1.0] = 0.0

    result = []
    for symbol, probability, symbol_bits in zip(symbols, probabilities, bits):
        probability = float(probability)
        symbol_bits = float(symbol_bits)
        code_length = math.ceil(symbol_bits) if math.isfinite(symbol_bits) else None
        result.append(Symbol(symbol.id, symbol.value, symbol.frequency,
                             probability=probability,
                             bits=symbol_bits,
                             code_length=code_length))
        if logger:
            logger.log(ProbabilityLog(symbol.value, probability, symbol_bits))

    result.sort(key=code_length_sort_key)
    return result
