"""
validators.py

Shared codes for input validation and the error types of prefixcodes.
"""


import math
import numbers
import numpy as np
from typing import Any


class DegenerateInput(ValueError):
    """The alphabet is empty or its total frequency is zero."""
    pass


class MissingCode(ValueError):
    """A stage was given a symbol whose prerequisite code was never assigned."""
    pass


class InvalidPrefixSet(ValueError):
    """A set of codewords is not a prefix code."""
    pass


class ParityError(ValueError):
    """A parity-augmented codeword failed its even parity check."""
    pass


def validate_type(variable: Any, name: str, expected_type: type) -> None:
    """Validate that variable is of the expected type."""
    if not isinstance(variable, expected_type):
        raise ValueError(f"{name} must be of type {expected_type.__name__}")


def validate_frequency(frequency: Any) -> None:
    """Validate that frequency is a non-negative finite number."""
    if isinstance(frequency, (bool, np.bool_)) or not isinstance(frequency, numbers.Real):
        raise ValueError("Frequency must be a number")
    try:
        as_float = float(frequency)
    except OverflowError:
        raise ValueError(f"Frequency is too large to be represented, got {frequency}")
    if not math.isfinite(as_float) or as_float < 0:
        raise ValueError(f"Frequency must be a non-negative finite number, got {frequency}")


def validate_codeword(code: Any, name: str = "Code") -> None:
    """Validate that code is a string of '0' and '1' characters."""
    if code is None:
        raise MissingCode(f"{name} has not been assigned")
    validate_type(code, name, str)
    if any(bit not in "01" for bit in code):
        raise InvalidPrefixSet(f"{name} must contain only '0' and '1', got {code!r}")
