"""L-tree compression of an arbitrary number of nodes into a single root."""

from __future__ import annotations

from collections.abc import Iterable

from .hashing import compress_pairs


def ltree(leaves: Iterable[bytes]) -> bytes:
    """Compress nodes pairwise, carrying an odd last node up unchanged, until one remains."""
    level = [bytes(leaf) for leaf in leaves]
    if not level:
        raise ValueError("ltree needs at least one node")
    while len(level) > 1:
        paired = len(level) & ~1
        next_level = compress_pairs(level[:paired])
        if len(level) % 2:
            next_level.append(level[-1])
        level = next_level
    return level[0]