"""
models.py

The shared objects used in the prefixcodes.

"""


from collections import Counter
from typing import Optional, Iterable, List, Dict, Any

from .settings import HUFFMAN_SCHEME, SHANNON_FANO_SCHEME
from .validators import DegenerateInput, validate_type, validate_frequency

_FIELDS = (
    "id",
    "value",
    "frequency",
    "probability",
    "bits",
    "code_length",
    "shannon_fano_code",
    "huffman_code",
    "shannon_fano_code_with_parity",
    "huffman_code_with_parity",
)


class Symbol:
    """
    Represents a single symbol of the alphabet together with its derived fields.

    A symbol is never changed once created; every stage of the pipeline returns
    new symbols through copy().
    """
    def __init__(self,
                 id: int,
                 value: str,
                 frequency: float,
                 probability: Optional[float] = None,
                 bits: Optional[float] = None,
                 code_length: Optional[int] = None,
                 shannon_fano_code: Optional[str] = None,
                 huffman_code: Optional[str] = None,
                 shannon_fano_code_with_parity: Optional[str] = None,
                 huffman_code_with_parity: Optional[str] = None) -> None:
        if isinstance(id, bool) or not isinstance(id, int):
            raise ValueError("Id must be of type int")
        validate_type(value, "Value", str)
        if len(value) == 0:
            raise ValueError("Value cannot be empty")
        validate_frequency(frequency)
        self.id: int = id
        self.value: str = value
        self.frequency: float = frequency
        self.probability: Optional[float] = probability
        self.bits: Optional[float] = bits
        self.code_length: Optional[int] = code_length
        self.shannon_fano_code: Optional[str] = shannon_fano_code
        self.huffman_code: Optional[str] = huffman_code
        self.shannon_fano_code_with_parity: Optional[str] = shannon_fano_code_with_parity
        self.huffman_code_with_parity: Optional[str] = huffman_code_with_parity

    def copy(self, **changes: Any) -> 'Symbol':
        """
        Return a new symbol with the given fields replaced.

        Raises:
            ValueError: If a field name is unknown.
        """
        for name in changes:
            if name not in _FIELDS:
                raise ValueError(f"Unknown symbol field: {name}")
        fields = self.as_dict()
        fields.update(changes)
        return Symbol(**fields)

    def get_code(self, scheme: str, with_parity: bool = False) -> Optional[str]:
        """
        Get the codeword of the symbol for a coding scheme.

        Args:
            scheme (str): Either "huffman" or "shannon_fano".
            with_parity (bool): Return the parity-augmented codeword instead.

        Returns:
            Optional[str]: The codeword, or None when it was not assigned yet.
        """
        if scheme == HUFFMAN_SCHEME:
            return self.huffman_code_with_parity if with_parity else self.huffman_code
        if scheme == SHANNON_FANO_SCHEME:
            return self.shannon_fano_code_with_parity if with_parity else self.shannon_fano_code
        raise ValueError(f"Unknown coding scheme: {scheme}")

    def as_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in _FIELDS}

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Symbol):
            return self.as_dict() == other.as_dict()
        return False

    def __hash__(self) -> int:
        return hash((self.id, self.value))

    def __str__(self) -> str:
        return f"[{self.id}, {self.value!r}, {self.frequency}]"

    def __repr__(self) -> str:
        return f"Symbol({self.id}, {self.value!r}, {self.frequency})"


class Alphabet:
    """
    Represents the active set of symbols, keyed by their unique ids.
    """
    def __init__(self, symbols: Optional[Iterable[Symbol]] = None) -> None:
        self._symbols: Dict[int, Symbol] = {}
        self._last_id: int = -1
        if symbols is not None:
            for symbol in symbols:
                self.add_symbol(symbol)

    @classmethod
    def from_text(cls, text: str) -> 'Alphabet':
        """
        Build an alphabet from the character counts of a text.

        Symbols appear in order of first occurrence with ids starting at 0.

        Raises:
            DegenerateInput: If the text is empty.
        """
        validate_type(text, "Text", str)
        if len(text) == 0:
            raise DegenerateInput("Cannot build an alphabet from empty text")
        return cls.from_frequencies(Counter(text))

    @classmethod
    def from_frequencies(cls, frequencies: Dict[str, float]) -> 'Alphabet':
        """
        Build an alphabet from a mapping of symbol values to frequencies.

        Args:
            frequencies (Dict[str, float]): Values mapped to their frequencies, in order.

        Returns:
            Alphabet: The alphabet with ids assigned in mapping order.
        """
        alphabet = cls()
        for value, frequency in frequencies.items():
            alphabet.add(value, frequency)
        return alphabet

    def add(self, value: str, frequency: float) -> Symbol:
        """
        Add a new symbol with the next free id.

        Returns:
            Symbol: The created symbol.
        """
        symbol = Symbol(self._last_id + 1, value, frequency)
        self.add_symbol(symbol)
        return symbol

    def add_symbol(self, symbol: Symbol) -> None:
        validate_type(symbol, "Symbol", Symbol)
        if symbol.id in self._symbols:
            raise ValueError(f"Symbol id {symbol.id} is already in the alphabet")
        self._symbols[symbol.id] = symbol
        self._last_id = max(self._last_id, symbol.id)

    def remove(self, ids: Iterable[int]) -> int:
        """
        Remove the symbols with the given ids.

        Returns:
            int: Count of symbols that were removed.
        """
        count = 0
        for symbol_id in ids:
            if self._symbols.pop(symbol_id, None) is not None:
                count += 1
        return count

    def update_frequency(self, symbol_id: int, frequency: float) -> Symbol:
        """
        Replace the symbol with a copy carrying a new frequency.

        Raises:
            KeyError: If no symbol has the id.
        """
        symbol = self._symbols[symbol_id]
        updated = Symbol(symbol.id, symbol.value, frequency)
        self._symbols[symbol_id] = updated
        return updated

    def get(self, symbol_id: int) -> Symbol:
        return self._symbols[symbol_id]

    def contains(self, symbol_id: int) -> bool:
        return symbol_id in self._symbols

    def get_size(self) -> int:
        return len(self._symbols)

    def get_symbols(self) -> List[Symbol]:
        """Get the symbols in insertion order."""
        return list(self._symbols.values())

    def get_sorted_symbols(self) -> List[Symbol]:
        """Get the symbols ordered by id."""
        return sorted(self._symbols.values(), key=lambda s: s.id)

    def total_frequency(self) -> float:
        return sum(s.frequency for s in self._symbols.values())

    def __iter__(self):
        return iter(self.get_symbols())

    def __len__(self) -> int:
        return len(self._symbols)

    def __str__(self) -> str:
        symbols_list = ", ".join([str(sym) for sym in self.get_sorted_symbols()])
        return f"Alphabet: [{symbols_list}]"
