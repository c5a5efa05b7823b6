"""
keyword_trie.core

Prefix-tree containers:
 - TrieSet: set of sequence keys with boundary-aware prefix queries
 - TrieDictionary: mapping from sequence keys to values, same semantics
 - bulk any/all membership helpers (queries)
"""

from .base import InvalidKeyError
from .trie_set import TrieSet
from .trie_dictionary import TrieDictionary
from .protocols import PrefixContainerProtocol

__all__ = [
    "InvalidKeyError",
    "TrieSet",
    "TrieDictionary",
    "PrefixContainerProtocol",
]
