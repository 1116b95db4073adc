"""PORS few-time signatures and the PORST variant with merged (octopus) auth paths."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from dataclasses import dataclass

from .aes import aes256_ctr, aes256_ctr_zero_iv
from .hashing import Address, hash_2n_to_n, hash_parallel
from .merkle import merkle_compress_all, merkle_compress_octopus, merkle_gen_octopus
from .params import (
    HASH_SIZE,
    PORS_T,
    PORS_TAU,
    GravityError,
    Params,
    VerificationError,
)

_INDEX = struct.Struct("<I")


def _split(data: bytes) -> tuple[bytes, ...]:
    return tuple(data[offset:offset + HASH_SIZE] for offset in range(0, len(data), HASH_SIZE))


@dataclass(frozen=True)
class OctoporstSignature:
    """Revealed secret values, sorted by index, and the octopus proof of their leaves."""

    values: tuple[bytes, ...]
    octopus: tuple[bytes, ...]
    height: int = PORS_TAU

    def to_bytes(self) -> bytes:
        """Serialize as the revealed values followed by the octopus nodes."""
        return b"".join(self.values) + b"".join(self.octopus)

    @classmethod
    def from_bytes(cls, data: bytes, params: Params) -> OctoporstSignature:
        """Parse a serialized signature whose octopus length follows from its size."""
        data = bytes(data)
        values_size = params.pors_k * HASH_SIZE
        if len(data) < values_size:
            raise VerificationError("PORST signature is shorter than its revealed values")
        rest = len(data) - values_size
        if rest % HASH_SIZE:
            raise VerificationError("PORST octopus is not a whole number of nodes")
        if rest // HASH_SIZE > params.pors_k * PORS_TAU:
            raise VerificationError("PORST octopus is longer than any valid proof")
        return cls(
            values=_split(data[:values_size]),
            octopus=_split(data[values_size:]),
            height=PORS_TAU,
        )


def pors_randsubset(rand: bytes, msg: bytes, params: Params) -> tuple[int, list[int]]:
    """Derive the hyper-tree leaf address and k distinct PORS indices from rand and msg."""
    rand, msg = bytes(rand), bytes(msg)
    if len(rand) != HASH_SIZE or len(msg) != HASH_SIZE:
        raise ValueError(f"rand and msg must be {HASH_SIZE} bytes each")
    seed = hash_2n_to_n(rand + msg)
    stream = aes256_ctr_zero_iv(seed, 8 * params.pors_k + HASH_SIZE)

    address = int.from_bytes(stream[:HASH_SIZE], "big") & params.gravity_mask()

    subset: list[int] = []
    seen: set[int] = set()
    for (word,) in _INDEX.iter_unpack(stream):
        if len(subset) == params.pors_k:
            break
        index = word % PORS_T
        if index not in seen:
            seen.add(index)
            subset.append(index)
    if len(subset) < params.pors_k:
        raise GravityError("random stream ran out before enough distinct indices were found")
    return address, subset


def pors_gensk(key: bytes, address: Address) -> list[bytes]:
    """Derive the PORS_T secret values of the key at this address."""
    stream = aes256_ctr(key, address.iv(), PORS_T * HASH_SIZE)
    return list(_split(stream))


def pors_sign(sk: Sequence[bytes], subset: Sequence[int]) -> tuple[bytes, ...]:
    """Reveal the secret values at the subset's indices, in the subset's order."""
    if any(not 0 <= index < len(sk) for index in subset):
        raise ValueError("subset index outside the secret key")
    return tuple(bytes(sk[index]) for index in subset)


def porst_genpk(sk: Sequence[bytes]) -> bytes:
    """Public key: root of the Merkle tree over the hashed secret values."""
    return merkle_compress_all(hash_parallel(sk))


def octoporst_sign(
    sk: Sequence[bytes], subset: Sequence[int]
) -> tuple[OctoporstSignature, bytes]:
    """Sign a subset of indices; return the signature and the public key root."""
    indices = sorted(subset)
    if len(set(indices)) != len(indices):
        raise ValueError("subset indices must be distinct")
    values = pors_sign(sk, indices)
    octopus, root = merkle_gen_octopus(hash_parallel(sk), indices)
    height = len(sk).bit_length() - 1
    return OctoporstSignature(values=values, octopus=tuple(octopus), height=height), root


def octoporst_extract(signature: OctoporstSignature, subset: Sequence[int]) -> bytes:
    """Recover the public key root implied by a signature on a subset."""
    indices = sorted(subset)
    if len(indices) != len(signature.values):
        raise VerificationError("number of revealed values does not match the subset")
    leaves = hash_parallel(signature.values)
    return merkle_compress_octopus(leaves, signature.height, signature.octopus, indices)