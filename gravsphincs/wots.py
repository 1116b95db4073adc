"""Winternitz one-time signatures with an L-tree public key."""

from __future__ import annotations

from collections.abc import Sequence

from .aes import aes256_ctr
from .hashing import Address, hash_n_to_n_chain, hash_parallel_chains
from .ltree import ltree
from .params import HASH_SIZE, WOTS_CHKSUM, WOTS_ELL, WOTS_W


def _message_digits(msg: bytes) -> list[int]:
    """Base-16 digits of the message followed by the checksum digits, low digit first."""
    msg = bytes(msg)
    if len(msg) != HASH_SIZE:
        raise ValueError(f"message must be {HASH_SIZE} bytes, got {len(msg)}")
    digits = [digit for byte in msg for digit in (byte >> 4, byte & 15)]
    checksum = sum(WOTS_W - 1 - digit for digit in digits)
    for _ in range(WOTS_CHKSUM):
        digits.append(checksum & 15)
        checksum >>= 4
    return digits


def _check_chains(nodes: Sequence[bytes], what: str) -> list[bytes]:
    nodes = [bytes(node) for node in nodes]
    if len(nodes) != WOTS_ELL:
        raise ValueError(f"{what} must hold {WOTS_ELL} nodes, got {len(nodes)}")
    return nodes


def wots_chain(src: bytes, count: int) -> bytes:
    """Advance a node count steps along its hash chain."""
    return hash_n_to_n_chain(src, count)


def wots_gensk(key: bytes, address: Address) -> list[bytes]:
    """Derive the secret chain starts for the key at this address."""
    stream = aes256_ctr(key, address.iv(), WOTS_ELL * HASH_SIZE)
    return [stream[offset:offset + HASH_SIZE] for offset in range(0, len(stream), HASH_SIZE)]


def wots_sign(sk: Sequence[bytes], msg: bytes) -> list[bytes]:
    """Sign a 32-byte message digest."""
    sk = _check_chains(sk, "secret key")
    return [wots_chain(start, digit) for start, digit in zip(sk, _message_digits(msg))]


def lwots_ltree(pk: Sequence[bytes]) -> bytes:
    """Compress the chain ends into the L-tree public key."""
    return ltree(_check_chains(pk, "public key"))


def lwots_genpk(sk: Sequence[bytes]) -> bytes:
    """Public key: the L-tree root over all fully advanced chains."""
    sk = _check_chains(sk, "secret key")
    return lwots_ltree(hash_parallel_chains(sk, WOTS_W - 1))


def lwots_extract(signature: Sequence[bytes], msg: bytes) -> bytes:
    """Recover the public key that a signature on msg implies."""
    signature = _check_chains(signature, "signature")
    ends = [
        wots_chain(value, WOTS_W - 1 - digit)
        for value, digit in zip(signature, _message_digits(msg))
    ]
    return lwots_ltree(ends)