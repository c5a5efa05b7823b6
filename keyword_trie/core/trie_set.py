# trie_set.py
# Set of keys stored in a trie, with boundary-aware prefix queries.

from __future__ import annotations
from typing import Any, Hashable, Iterable, Iterator, MutableSequence, Optional

from keyword_trie.core import queries
from keyword_trie.core.base import TrieBase


class TrieSet(TrieBase):
    """
    Set of unique keys (iterables of hashable tokens) backed by a trie.

    Used for keyword registries such as dotted identifiers:
        s = TrieSet(separator=".")
        s.add("ui.button.click")
        "ui.button" in s               -> False (not a stored key)
        s.contains_prefix("ui.button") -> True  (boundary prefix of a stored key)
        s.contains_prefix("ui.but")    -> False (stops mid-token)

    Without a separator every position is a boundary, so any partial prefix
    of a stored key counts.

    Iteration yields the original key objects in pre-order (a key before the
    keys it prefixes, siblings in insertion order). Adding or removing keys
    while iterating raises RuntimeError.
    """

    def __init__(self, keys: Optional[Iterable[Any]] = None, separator: Optional[Hashable] = None) -> None:
        super().__init__(separator=separator)
        if keys is not None:
            self.update(keys)

    # mutation ----------------------------------------------------------------
    def add(self, key: Any) -> None:
        """
        Insert `key`. Adding a key that is already present does nothing.
        Raises InvalidKeyError for None, non-iterable keys or unhashable tokens.
        """
        node = self._insert_path(key)
        if node.is_end_of_key:
            return  # already present
        self._mark_new(node, key)

    def update(self, keys: Iterable[Any]) -> None:
        for key in keys:
            self.add(key)

    def remove(self, key: Any) -> bool:
        """
        Remove `key` and prune branches nothing else needs.
        Returns False (and changes nothing) if the key is not stored.
        """
        return self._remove_key(key)

    def discard(self, key: Any) -> None:
        self._remove_key(key)

    # queries -----------------------------------------------------------------
    def contains(self, key: Any) -> bool:
        """
        Exact membership. A proper prefix of a stored key is not present,
        see contains_prefix() for that.
        """
        return self._contains_key(key)

    def __contains__(self, key: object) -> bool:
        return self._contains_key(key)

    def contains_any(self, keys: Iterable[Any]) -> bool:
        return queries.contains_any(self, keys)

    def contains_all(self, keys: Iterable[Any]) -> bool:
        return queries.contains_all(self, keys)

    def contains_prefix_any(self, prefixes: Iterable[Any]) -> bool:
        return queries.contains_prefix_any(self, prefixes)

    def contains_prefix_all(self, prefixes: Iterable[Any]) -> bool:
        return queries.contains_prefix_all(self, prefixes)

    # enumeration -------------------------------------------------------------
    def __iter__(self) -> Iterator[Any]:
        return (node.key for node in self._iter_terminal_nodes())

    def copy_to(self, buffer: MutableSequence[Any], offset: int = 0) -> int:
        """
        Copy keys into `buffer` starting at `offset`.
        Stops silently when the buffer is full; returns how many keys were written.
        """
        return self._copy_into(iter(self), buffer, offset)

    def __repr__(self) -> str:
        sep = f", separator={self._separator!r}" if self.has_separator else ""
        return f"{type(self).__name__}({list(self)!r}{sep})"
