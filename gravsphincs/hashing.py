"""Hash primitives over 32-byte nodes and tree addresses."""

from __future__ import annotations

import hashlib
import struct
from collections.abc import Iterable
from dataclasses import dataclass

from .haraka import haraka256, haraka256_chain, haraka512
from .params import HASH_SIZE


@dataclass(frozen=True)
class Address:
    """Position of a key in the hyper-tree: leaf index and layer."""

    index: int = 0
    layer: int = 0

    def iv(self) -> bytes:
        """Counter block used to derive keys: index and layer little-endian, zero counter."""
        return struct.pack("<QI4x", self.index, self.layer)


def _check_node(node: bytes) -> bytes:
    node = bytes(node)
    if len(node) != HASH_SIZE:
        raise ValueError(f"hash node must be {HASH_SIZE} bytes, got {len(node)}")
    return node


def hash_n_to_n(src: bytes) -> bytes:
    """Hash one node to one node."""
    return haraka256(_check_node(src))


def hash_n_to_n_chain(src: bytes, chainlen: int) -> bytes:
    """Hash one node chainlen times."""
    return haraka256_chain(_check_node(src), chainlen)


def hash_2n_to_n(src: bytes) -> bytes:
    """Compress two concatenated nodes into one."""
    src = bytes(src)
    if len(src) != 2 * HASH_SIZE:
        raise ValueError(f"input must be {2 * HASH_SIZE} bytes, got {len(src)}")
    return haraka512(src)


def hash_to_n(data: bytes) -> bytes:
    """Hash arbitrary data to one node."""
    return hashlib.sha256(bytes(data)).digest()


def compress_pairs(nodes: Iterable[bytes]) -> list[bytes]:
    """Compress 2n nodes pairwise into n nodes."""
    nodes = [_check_node(node) for node in nodes]
    if len(nodes) % 2:
        raise ValueError("compress_pairs needs an even number of nodes")
    pairs = iter(nodes)
    return [haraka512(left + right) for left, right in zip(pairs, pairs)]


def compress_all(nodes: Iterable[bytes]) -> bytes:
    """Compress any number of nodes into one with a single large-input hash."""
    return hash_to_n(b"".join(_check_node(node) for node in nodes))


def hash_parallel(nodes: Iterable[bytes]) -> list[bytes]:
    """Hash each node independently."""
    return [hash_n_to_n(node) for node in nodes]


def hash_parallel_chains(nodes: Iterable[bytes], chainlen: int) -> list[bytes]:
    """Hash each node through a chain of length chainlen."""
    return [hash_n_to_n_chain(node, chainlen) for node in nodes]