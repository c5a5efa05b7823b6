# node.py
# Single node of the keyword trie, shared by TrieSet and TrieDictionary.

from __future__ import annotations
from typing import Any, Dict, Hashable, Optional


class TrieNode:
    """
    A single node in the trie.
    children: token -> TrieNode (dict keeps insertion order, so enumeration is stable)
    is_end_of_key: a complete key terminates here
    is_end_of_token: this position is a sub-token boundary of some inserted key
    key/value: the original key object (and its value, dictionaries only)
    """

    __slots__ = ("children", "is_end_of_key", "is_end_of_token", "key", "value")

    def __init__(self) -> None:
        self.children: Dict[Hashable, TrieNode] = {}
        self.is_end_of_key = False
        self.is_end_of_token = False
        self.key: Optional[Any] = None
        self.value: Any = None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def put(self, key: Any, value: Any = None) -> None:
        """Mark this node as the end of `key`. A key end is always a token boundary."""
        self.key = key
        self.value = value
        self.is_end_of_key = True
        self.is_end_of_token = True

    def erase(self) -> None:
        """Drop the stored key/value. The boundary flag stays: children may still rely on it."""
        self.key = None
        self.value = None
        self.is_end_of_key = False

    def __repr__(self) -> str:
        return (
            f"<TrieNode children={len(self.children)} "
            f"end_of_key={self.is_end_of_key} end_of_token={self.is_end_of_token}>"
        )
