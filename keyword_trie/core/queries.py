# queries.py
# "any of" / "all of" helpers layered on exact and prefix membership.
# No tree logic here: everything goes through the container's own lookups.

from __future__ import annotations
from typing import Any, Iterable

from keyword_trie.core.protocols import PrefixContainerProtocol


def contains_any(container: PrefixContainerProtocol, keys: Iterable[Any]) -> bool:
    """True if at least one of `keys` is stored exactly. Empty input -> False."""
    return any(key in container for key in keys)


def contains_all(container: PrefixContainerProtocol, keys: Iterable[Any]) -> bool:
    """True if every one of `keys` is stored exactly. Empty input -> True."""
    return all(key in container for key in keys)


def contains_prefix_any(container: PrefixContainerProtocol, prefixes: Iterable[Any]) -> bool:
    """True if at least one of `prefixes` is a boundary prefix of a stored key."""
    return any(container.contains_prefix(p) for p in prefixes)


def contains_prefix_all(container: PrefixContainerProtocol, prefixes: Iterable[Any]) -> bool:
    """True if every one of `prefixes` is a boundary prefix of a stored key."""
    return all(container.contains_prefix(p) for p in prefixes)
