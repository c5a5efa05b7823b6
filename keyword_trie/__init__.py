"""
keyword_trie

Prefix-tree collections for keys made of token sequences:
 - TrieSet: set of keys, exact and boundary-prefix membership
 - TrieDictionary: key -> value mapping with the same prefix semantics
Optional separator tokens split keys into sub-tokens ("a.b.c" at ".").
"""

from .core import InvalidKeyError, TrieDictionary, TrieSet

__all__ = ["InvalidKeyError", "TrieDictionary", "TrieSet"]

__version__ = "0.1.0"
