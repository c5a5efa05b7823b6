# base.py
"""
TrieBase - the node-tree algorithm shared by TrieSet and TrieDictionary.

Keys are iterables of hashable tokens (a str is a sequence of characters, a
tuple of path segments works the same way). An optional separator token marks
sub-token boundaries: it never creates an edge, it only flags the node it
stops at as a boundary, so "a.b.c" and "abc" share the same path but only the
first one makes "a" and "a.b" valid prefixes.

Design notes:
 - Strictly owned tree: each node owns a dict of children, no parent pointers.
 - Removal records a trace of (token, node) frames on the way down and prunes
   bottom-up while unwinding it, so long keys never hit the recursion limit.
 - Enumeration is a pre-order walk driven by an explicit stack of child
   iterators (same shape as pygtrie's iterate()).
 - Structural mutations bump a version counter; live enumerations fail fast
   instead of walking a tree that changed under them.
"""

from __future__ import annotations

import logging
from typing import Any, Hashable, Iterable, Iterator, List, MutableSequence, Optional, Tuple

from keyword_trie.core.node import TrieNode

logger = logging.getLogger(__name__)

Token = Hashable
Frame = Tuple[Optional[Token], TrieNode]  # (token leading to node, node)


class InvalidKeyError(ValueError):
    """Raised when a key cannot be stored: None, not iterable, or holding an unhashable token."""


class TrieBase:
    """
    Shared trie machinery. Subclasses expose the public set/mapping surface.

    Args:
    separator: token that splits a key into sub-tokens, or None for no separator
               (every position is then a boundary, so any partial prefix counts).
    """

    def __init__(self, separator: Optional[Token] = None) -> None:
        self._separator = separator
        self._root = TrieNode()
        self._count = 0
        self._version = 0

    # configuration -----------------------------------------------------------
    @property
    def separator(self) -> Optional[Token]:
        return self._separator

    @property
    def has_separator(self) -> bool:
        return self._separator is not None

    @property
    def count(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def _skips(self, token: Any) -> bool:
        """True for tokens that never produce an edge (separator and None)."""
        return token is None or (self._separator is not None and token == self._separator)

    # insertion ---------------------------------------------------------------
    def _tokens_of(self, key: Any) -> List[Token]:
        """Materialize and validate a key before the tree is touched, so a bad key mutates nothing."""
        if key is None:
            raise InvalidKeyError("key must not be None")
        try:
            tokens = list(key)
        except TypeError:
            raise InvalidKeyError(f"key {key!r} is not iterable") from None
        for token in tokens:
            try:
                hash(token)
            except TypeError:
                raise InvalidKeyError(f"token {token!r} of key {key!r} is not hashable") from None
        return tokens

    def _insert_path(self, key: Any) -> TrieNode:
        """Walk (creating nodes as needed) to the node for `key` and return it."""
        node = self._root
        for token in self._tokens_of(key):
            if token is None:
                continue
            if self._separator is None:
                node.is_end_of_token = True
            elif token == self._separator:
                node.is_end_of_token = True
                continue

            child = node.children.get(token)
            if child is None:
                child = TrieNode()
                node.children[token] = child
            node = child
        return node

    def _mark_new(self, node: TrieNode, key: Any, value: Any = None) -> None:
        node.put(key, value)
        self._count += 1
        self._version += 1

    # lookup ------------------------------------------------------------------
    def _trace(self, key: Any) -> Optional[List[Frame]]:
        """
        Return the path to the node for `key` as a list of (token, node) frames,
        root first, or None if there is no such node. Never raises: None keys,
        non-iterables and unhashable tokens simply have no node.
        """
        if key is None:
            return None
        node = self._root
        trace: List[Frame] = [(None, node)]
        try:
            for token in key:
                if self._skips(token):
                    continue
                node = node.children.get(token)
                if node is None:
                    return None
                trace.append((token, node))
        except TypeError:
            return None
        return trace

    def _find(self, key: Any) -> Optional[TrieNode]:
        trace = self._trace(key)
        return trace[-1][1] if trace else None

    def _contains_key(self, key: Any) -> bool:
        node = self._find(key)
        return node is not None and node.is_end_of_key

    def contains_prefix(self, prefix: Iterable[Token]) -> bool:
        """
        True if some stored key starts with `prefix` and the prefix ends on a
        token boundary. A proper prefix of a key counts here, unlike `in`.
        """
        node = self._find(prefix)
        return node is not None and node.is_end_of_token

    # removal -----------------------------------------------------------------
    def _remove_key(self, key: Any) -> bool:
        """
        Unmark the node for `key` and prune what became useless.
        Nothing is mutated when the key is not present.
        """
        trace = self._trace(key)
        if trace is None:
            return False
        node = trace[-1][1]
        if not node.is_end_of_key:
            return False

        node.erase()
        self._count -= 1
        self._version += 1
        pruned = self._prune(trace)
        if pruned:
            logger.debug("pruned %d node(s) after removing %r", pruned, key)
        return True

    @staticmethod
    def _prune(trace: List[Frame]) -> int:
        """
        Detach childless non-terminal nodes along `trace`, deepest first.
        A child is only judged after everything below it has been handled; the
        walk stops at the first node that still carries a key or other children.
        """
        pruned = 0
        i = len(trace) - 1  # trace[0] is the root, never pruned
        while i:
            token, node = trace[i]
            if node.children or node.is_end_of_key:
                break
            parent = trace[i - 1][1]
            del parent.children[token]
            pruned += 1
            i -= 1
        return pruned

    def clear(self) -> None:
        """Drop every key. The old tree becomes unreachable."""
        self._root = TrieNode()
        self._count = 0
        self._version += 1
        logger.debug("%s cleared", type(self).__name__)

    # traversal ---------------------------------------------------------------
    def _iter_terminal_nodes(self) -> Iterator[TrieNode]:
        """
        Pre-order DFS over terminal nodes: a node's own key comes before its
        children, children in insertion order. Raises RuntimeError if the trie
        is structurally modified while the walk is suspended.
        """
        version = self._version
        stack: List[Iterator[TrieNode]] = [iter((self._root,))]
        while stack:
            node = next(stack[-1], None)
            if node is None:
                stack.pop()
                continue
            if node.is_end_of_key:
                yield node
                if self._version != version:
                    raise RuntimeError(f"{type(self).__name__} changed during iteration")
            if node.children:
                stack.append(iter(node.children.values()))

    def node_count(self) -> int:
        """
        Count nodes below the root by walking the tree.
        (Slow: O(N). For verification, not runtime.)
        """
        total = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            total += len(node.children)
            stack.extend(node.children.values())
        return total

    @staticmethod
    def _copy_into(entries: Iterable[Any], buffer: MutableSequence[Any], offset: int) -> int:
        """Write entries into buffer from offset, stopping quietly when the buffer is full."""
        if offset < 0:
            raise ValueError(f"offset must be non-negative, got {offset}")
        written = 0
        for entry in entries:
            if offset + written >= len(buffer):
                break
            buffer[offset + written] = entry
            written += 1
        return written
