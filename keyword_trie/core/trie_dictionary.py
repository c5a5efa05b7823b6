# trie_dictionary.py
"""
TrieDictionary - mapping from sequence keys to values, stored in a trie.

Same tree, prefix and pruning semantics as TrieSet, plus a value per key:
 - add()/set()/d[key] = v insert or silently overwrite (count unchanged on overwrite)
 - get()/d[key] raise KeyError for a missing key, try_get() returns (found, value)
 - item helpers (add_item, contains_item, remove_item) work on (key, value) pairs
 - items() is a lazy pre-order walk; keys()/values() are list snapshots

Example:
    d = TrieDictionary(separator=".")
    d["net.http.timeout"] = 30
    d.contains_key_prefix("net.http")  -> True
    "net.http" in d                    -> False
    d.try_get("net.http.retries")      -> (False, None)
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Iterator, List, MutableSequence, Optional, Tuple

from keyword_trie.core import queries
from keyword_trie.core.base import TrieBase

Entry = Tuple[Any, Any]  # (key, value)


class TrieDictionary(TrieBase):
    """
    Mapping of unique keys (iterables of hashable tokens) to arbitrary values.

    Args:
    items: optional iterable of (key, value) pairs to insert in order.
    separator: token splitting keys into sub-tokens, None for no separator.

    iter(d) yields keys, items() yields (key, value) entries; both walk the
    live tree in pre-order and raise RuntimeError if keys are added or removed
    mid-walk. Overwriting a value of an existing key is allowed while walking.
    """

    def __init__(self, items: Optional[Iterable[Entry]] = None, separator: Optional[Hashable] = None) -> None:
        super().__init__(separator=separator)
        if items is not None:
            self.update(items)

    # insertion ---------------------------------------------------------------
    def add(self, key: Any, value: Any) -> None:
        """
        Insert or overwrite. On overwrite the stored key object is replaced by
        the one passed in and the count does not change.
        Raises InvalidKeyError for None, non-iterable keys or unhashable tokens.
        """
        node = self._insert_path(key)
        if node.is_end_of_key:
            node.put(key, value)
            return
        self._mark_new(node, key, value)

    def set(self, key: Any, value: Any) -> None:
        self.add(key, value)

    def __setitem__(self, key: Any, value: Any) -> None:
        self.add(key, value)

    def add_item(self, item: Entry) -> None:
        key, value = item
        self.add(key, value)

    def update(self, items: Iterable[Entry]) -> None:
        for key, value in items:
            self.add(key, value)

    # lookup ------------------------------------------------------------------
    def try_get(self, key: Any) -> Tuple[bool, Any]:
        """Return (True, value) if `key` is stored, else (False, None). Never raises."""
        node = self._find(key)
        if node is not None and node.is_end_of_key:
            return True, node.value
        return False, None

    def get(self, key: Any) -> Any:
        """Value stored for `key`; KeyError if absent (a proper prefix of a key is absent)."""
        found, value = self.try_get(key)
        if not found:
            raise KeyError(key)
        return value

    def __getitem__(self, key: Any) -> Any:
        return self.get(key)

    def contains_key(self, key: Any) -> bool:
        return self._contains_key(key)

    def __contains__(self, key: object) -> bool:
        return self._contains_key(key)

    def contains_key_prefix(self, prefix: Iterable[Hashable]) -> bool:
        """True if some stored key starts with `prefix` on a token boundary."""
        return self.contains_prefix(prefix)

    def contains_item(self, item: Entry) -> bool:
        """True if the key is stored and its value equals the given one."""
        key, value = item
        found, stored = self.try_get(key)
        return found and stored == value

    def contains_key_any(self, keys: Iterable[Any]) -> bool:
        return queries.contains_any(self, keys)

    def contains_key_all(self, keys: Iterable[Any]) -> bool:
        return queries.contains_all(self, keys)

    def contains_key_prefix_any(self, prefixes: Iterable[Any]) -> bool:
        return queries.contains_prefix_any(self, prefixes)

    def contains_key_prefix_all(self, prefixes: Iterable[Any]) -> bool:
        return queries.contains_prefix_all(self, prefixes)

    # removal -----------------------------------------------------------------
    def remove(self, key: Any) -> bool:
        """Remove `key` and its value. False (no change) if the key is not stored."""
        return self._remove_key(key)

    def __delitem__(self, key: Any) -> None:
        if not self._remove_key(key):
            raise KeyError(key)

    def remove_item(self, item: Entry) -> bool:
        """Remove the key only if its stored value equals the given one."""
        if self.contains_item(item):
            return self._remove_key(item[0])
        return False

    # enumeration -------------------------------------------------------------
    def items(self) -> Iterator[Entry]:
        return ((node.key, node.value) for node in self._iter_terminal_nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.key for node in self._iter_terminal_nodes())

    def keys(self) -> List[Any]:
        """Snapshot of the stored keys in enumeration order."""
        return [key for key, _ in self.items()]

    def values(self) -> List[Any]:
        """
        Snapshot of the stored values in enumeration order.
        Equal values stored under different keys are all kept.
        """
        return [value for _, value in self.items()]

    def copy_to(self, buffer: MutableSequence[Any], offset: int = 0) -> int:
        """Copy (key, value) entries into `buffer` from `offset`; returns how many were written."""
        return self._copy_into(self.items(), buffer, offset)

    def __repr__(self) -> str:
        sep = f", separator={self._separator!r}" if self.has_separator else ""
        return f"{type(self).__name__}({list(self.items())!r}{sep})"
