"""Merkle trees of WOTS keys, authentication paths and octopus proofs."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .hashing import Address, compress_pairs, hash_2n_to_n
from .params import HASH_SIZE, WOTS_ELL, Params, VerificationError
from .wots import lwots_extract, lwots_genpk, wots_gensk, wots_sign


def _split(data: bytes) -> tuple[bytes, ...]:
    return tuple(data[offset:offset + HASH_SIZE] for offset in range(0, len(data), HASH_SIZE))


def _height(count: int) -> int:
    if count < 1 or count & (count - 1):
        raise ValueError(f"number of leaves must be a power of two, got {count}")
    return count.bit_length() - 1


@dataclass(frozen=True)
class MerkleSignature:
    """A WOTS signature with the authentication path of its leaf."""

    wots: tuple[bytes, ...]
    auth: tuple[bytes, ...]

    def to_bytes(self) -> bytes:
        """Serialize as the WOTS values followed by the auth path."""
        return b"".join(self.wots) + b"".join(self.auth)

    @classmethod
    def from_bytes(cls, data: bytes, params: Params) -> MerkleSignature:
        """Parse a serialized signature for the given parameters."""
        data = bytes(data)
        expected = (WOTS_ELL + params.merkle_h) * HASH_SIZE
        if len(data) != expected:
            raise VerificationError(
                f"Merkle signature must be {expected} bytes, got {len(data)}"
            )
        nodes = _split(data)
        return cls(wots=nodes[:WOTS_ELL], auth=nodes[WOTS_ELL:])


def merkle_base_address(address: Address, params: Params) -> tuple[int, Address]:
    """Split an address into the leaf index within its tree and the tree's first leaf."""
    index = address.index & ((1 << params.merkle_h) - 1)
    return index, Address(index=address.index - index, layer=address.layer)


def _leaf_keys(key: bytes, base: Address, params: Params) -> Iterator[list[bytes]]:
    for offset in range(1 << params.merkle_h):
        yield wots_gensk(key, Address(index=base.index + offset, layer=base.layer))


def merkle_genpk(key: bytes, address: Address, params: Params) -> bytes:
    """Root of the Merkle tree containing the address."""
    _, base = merkle_base_address(address, params)
    return merkle_compress_all([lwots_genpk(sk) for sk in _leaf_keys(key, base, params)])


def merkle_sign(
    key: bytes, address: Address, msg: bytes, params: Params
) -> tuple[MerkleSignature, bytes]:
    """Sign msg with the leaf at address; return the signature and the tree root."""
    index, base = merkle_base_address(address, params)
    leaves = []
    wots_values: list[bytes] = []
    for position, sk in enumerate(_leaf_keys(key, base, params)):
        leaves.append(lwots_genpk(sk))
        if position == index:
            wots_values = wots_sign(sk, msg)
    auth, root = merkle_gen_auth(leaves, index)
    return MerkleSignature(wots=tuple(wots_values), auth=tuple(auth)), root


def merkle_extract(
    address: Address, signature: MerkleSignature, msg: bytes, params: Params
) -> bytes:
    """Recover the tree root implied by a signature on msg."""
    if len(signature.auth) != params.merkle_h:
        raise VerificationError(
            f"auth path must hold {params.merkle_h} nodes, got {len(signature.auth)}"
        )
    index, _ = merkle_base_address(address, params)
    leaf = lwots_extract(signature.wots, msg)
    root, _ = merkle_compress_auth(leaf, index, signature.auth)
    return root


def merkle_compress_all(leaves: Sequence[bytes]) -> bytes:
    """Root of a complete binary tree over the leaves."""
    level = [bytes(leaf) for leaf in leaves]
    _height(len(level))
    while len(level) > 1:
        level = compress_pairs(level)
    return level[0]


def merkle_gen_auth(leaves: Sequence[bytes], index: int) -> tuple[list[bytes], bytes]:
    """Authentication path of one leaf, and the tree root."""
    level = [bytes(leaf) for leaf in leaves]
    _height(len(level))
    if not 0 <= index < len(level):
        raise ValueError(f"leaf index {index} out of range")
    auth = []
    while len(level) > 1:
        auth.append(level[index ^ 1])
        index >>= 1
        level = compress_pairs(level)
    return auth, level[0]


def merkle_compress_auth(node: bytes, index: int, auth: Sequence[bytes]) -> tuple[bytes, int]:
    """Climb from a node along its auth path; return the node reached and its index."""
    node = bytes(node)
    for sibling in auth:
        sibling = bytes(sibling)
        node = hash_2n_to_n(node + sibling if index % 2 == 0 else sibling + node)
        index >>= 1
    return node, index


def _sibling_groups(indices: Sequence[int]) -> Iterator[tuple[int, int | None]]:
    """Positions to merge at one level: a left node with its right sibling, or alone."""
    position = 0
    while position < len(indices):
        index = indices[position]
        if (
            index % 2 == 0
            and position + 1 < len(indices)
            and indices[position + 1] == index + 1
        ):
            yield position, position + 1
            position += 2
        else:
            yield position, None
            position += 1


def merkle_gen_octopus(
    leaves: Sequence[bytes], indices: Sequence[int]
) -> tuple[list[bytes], bytes]:
    """Merged authentication paths for several leaves, and the tree root."""
    level = [bytes(leaf) for leaf in leaves]
    _height(len(level))
    current = sorted(indices)
    if any(not 0 <= index < len(level) for index in current):
        raise ValueError("leaf index out of range")
    octopus = []
    while len(level) > 1:
        parents = []
        for first, second in _sibling_groups(current):
            index = current[first]
            if second is None:
                octopus.append(level[index ^ 1])
            parents.append(index >> 1)
        current = parents
        level = compress_pairs(level)
    return octopus, level[0]


def merkle_compress_octopus(
    nodes: Sequence[bytes], height: int, octopus: Sequence[bytes], indices: Sequence[int]
) -> bytes:
    """Root implied by leaves at sorted indices and their octopus proof."""
    nodes = [bytes(node) for node in nodes]
    current = list(indices)
    if not nodes:
        raise ValueError("at least one node is needed")
    if len(nodes) != len(current):
        raise ValueError("nodes and indices must have the same length")
    used = 0
    for _ in range(height):
        next_nodes, next_indices = [], []
        for first, second in _sibling_groups(current):
            index = current[first]
            if second is not None:
                pair = nodes[first] + nodes[second]
            else:
                if used == len(octopus):
                    raise VerificationError("octopus proof is too short")
                extra = bytes(octopus[used])
                used += 1
                pair = nodes[first] + extra if index % 2 == 0 else extra + nodes[first]
            next_nodes.append(hash_2n_to_n(pair))
            next_indices.append(index >> 1)
        nodes, current = next_nodes, next_indices
    if used != len(octopus):
        raise VerificationError("octopus proof is too long")
    return nodes[0]