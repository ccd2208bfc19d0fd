"""
trie.py

Binary trie replay of a prefix code, used as the view model of a code tree.
"""


from typing import Iterable, List, Optional, Tuple

from .models import Symbol
from .validators import DegenerateInput, InvalidPrefixSet, MissingCode, validate_codeword


class TrieNode:
    """
    A trie node. Labeled nodes terminate a codeword; '0' descends left and '1' right.
    """
    def __init__(self, label: Optional[str] = None) -> None:
        self.label: Optional[str] = label
        self.left: Optional['TrieNode'] = None
        self.right: Optional['TrieNode'] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def child(self, bit: str) -> Optional['TrieNode']:
        return self.left if bit == '0' else self.right

    def __repr__(self) -> str:
        return f"TrieNode({self.label!r}, left={self.left!r}, right={self.right!r})"


def build_trie(codes: Iterable[Tuple[str, str]]) -> TrieNode:
    """
    Build a trie from (value, codeword) pairs.

    An empty codeword labels the root itself.

    Args:
        codes (Iterable[Tuple[str, str]]): The symbol values with their codewords.

    Returns:
        TrieNode: The root of the trie.

    Raises:
        MissingCode: If a codeword is None.
        InvalidPrefixSet: If a codeword is a prefix of another one, is repeated,
            or contains characters other than '0' and '1'.
    """
    root = TrieNode()
    for value, code in codes:
        validate_codeword(code, f"Code of {value!r}")
        current = root
        for bit in code:
            if current.label is not None:
                raise InvalidPrefixSet(f"Code of {current.label!r} is a prefix of {code!r}")
            if bit == '0':
                if current.left is None:
                    current.left = TrieNode()
                current = current.left
            else:
                if current.right is None:
                    current.right = TrieNode()
                current = current.right
        if current.label is not None:
            raise InvalidPrefixSet(f"Code {code!r} is assigned to both {current.label!r} and {value!r}")
        if not current.is_leaf():
            raise InvalidPrefixSet(f"Code {code!r} of {value!r} is a prefix of another code")
        current.label = value
    return root


def build_trie_for_scheme(symbols: Iterable[Symbol], scheme: str, with_parity: bool = False) -> TrieNode:
    """
    Build the trie of one coding scheme from enriched symbols.

    Raises:
        MissingCode: If a symbol has no codeword for the scheme.
    """
    codes = []
    for symbol in symbols:
        code = symbol.get_code(scheme, with_parity)
        if code is None:
            raise MissingCode(f"Symbol {symbol.value!r} has no {scheme} code")
        codes.append((symbol.value, code))
    return build_trie(codes)


def read_codes(root: TrieNode) -> List[Tuple[str, str]]:
    """
    Read back the (value, codeword) pairs of every labeled node, left before right.
    """
    codes = []
    def walk(node, code=''):
        if node is None:
            return
        if node.label is not None:
            codes.append((node.label, code))
        walk(node.left, code + '0')
        walk(node.right, code + '1')
    walk(root)
    return codes


def trie_depth(root: TrieNode) -> int:
    """Number of edges on the longest root-to-leaf path."""
    if root is None or root.is_leaf():
        return 0
    return 1 + max(trie_depth(root.left), trie_depth(root.right))


def count_leaves(root: TrieNode) -> int:
    if root is None:
        return 0
    if root.is_leaf():
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def decode_bits(root: TrieNode, bits: str) -> List[str]:
    """
    Decode a concatenation of codewords by walking the trie.

    Raises:
        DegenerateInput: If the trie only holds the empty codeword.
        ValueError: If the bits leave the trie or end inside a codeword.
    """
    if root.label is not None:
        raise DegenerateInput("The empty codeword of a single-symbol alphabet cannot be decoded")
    values = []
    current = root
    for position, bit in enumerate(bits):
        if bit not in '01':
            raise ValueError(f"Invalid bit {bit!r} at position {position}")
        current = current.child(bit)
        if current is None:
            raise ValueError(f"Bit sequence does not match any code at position {position}")
        if current.label is not None:
            values.append(current.label)
            current = root
    if current is not root:
        raise ValueError("Bit sequence ends inside a codeword")
    return values
