"""Batching of many messages under one Merkle root."""

from __future__ import annotations

from dataclasses import dataclass

from .hashing import compress_pairs, hash_to_n
from .merkle import merkle_compress_auth
from .params import LOG_MAX_BATCH_COUNT, MAX_BATCH_COUNT, BatchError


@dataclass(frozen=True)
class BatchAuth:
    """Authentication path of one message and its index in the batch tree."""

    auth: tuple[bytes, ...]
    index: int


@dataclass(frozen=True)
class BatchGroup:
    """A full batch tree stored in heap order, root first."""

    tree: tuple[bytes, ...]
    count: int

    def root(self) -> bytes:
        """Root of the batch tree."""
        return self.tree[0]

    def extract(self, index: int) -> BatchAuth:
        """Authentication path for the message appended at index."""
        if not 0 <= index < self.count:
            raise BatchError(f"index {index} outside batch of {self.count}")
        offset = MAX_BATCH_COUNT - 1
        tree_index = offset + index
        auth = []
        for _ in range(LOG_MAX_BATCH_COUNT):
            auth.append(self.tree[offset + (index ^ 1)])
            index >>= 1
            offset >>= 1
        return BatchAuth(auth=tuple(auth), index=tree_index)


class BatchBuffer:
    """Collects message digests until they are grouped into a tree."""

    def __init__(self) -> None:
        self._digests: list[bytes] = []

    def __len__(self) -> int:
        return len(self._digests)

    def append(self, msg: bytes) -> int:
        """Add a message; return its index in the batch."""
        if len(self._digests) == MAX_BATCH_COUNT:
            raise BatchError(f"batch is full ({MAX_BATCH_COUNT} messages)")
        self._digests.append(hash_to_n(msg))
        return len(self._digests) - 1

    def group(self) -> BatchGroup:
        """Build the batch tree, padding unused leaves with the first digest."""
        if not self._digests:
            raise BatchError("batch is empty")
        count = len(self._digests)
        leaves = self._digests + [self._digests[0]] * (MAX_BATCH_COUNT - count)
        levels = [leaves]
        while len(levels[-1]) > 1:
            levels.append(compress_pairs(levels[-1]))
        tree = tuple(node for level in reversed(levels) for node in level)
        return BatchGroup(tree=tree, count=count)


def batch_compress_auth(auth: BatchAuth, msg: bytes) -> bytes:
    """Hash a message and climb its batch authentication path."""
    node, _ = merkle_compress_auth(hash_to_n(msg), auth.index, auth.auth)
    return node