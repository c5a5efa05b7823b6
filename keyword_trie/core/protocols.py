# keyword_trie/core/protocols.py
"""
Protocol interfaces used by the bulk query helpers.

Kept small on purpose: queries.py only needs exact membership (`in`) and
boundary-prefix membership, so anything providing both (TrieSet,
TrieDictionary, or a test double) can be queried in bulk.
"""

from __future__ import annotations

from typing import Hashable, Iterable

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class PrefixContainerProtocol(Protocol):
    """Exact and prefix membership over keys made of hashable tokens."""

    def __contains__(self, key: object) -> bool:
        ...

    def contains_prefix(self, prefix: Iterable[Hashable]) -> bool:
        """
        True if some stored key starts with `prefix` on a token boundary.
        """
        ...
