import pytest

from gravsphincs.haraka import haraka256, haraka512
from gravsphincs.hashing import (
    Address,
    compress_all,
    compress_pairs,
    hash_2n_to_n,
    hash_n_to_n,
    hash_n_to_n_chain,
    hash_parallel,
    hash_parallel_chains,
    hash_to_n,
)

NODES = [bytes([n]) * 32 for n in range(4)]


def test_hash_to_n_is_sha256():
    expected = bytes.fromhex(
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )
    assert hash_to_n(b"abc") == expected


def test_node_hashes_use_haraka():
    node = bytes(range(32))
    assert hash_n_to_n(node) == haraka256(node)
    assert hash_2n_to_n(node + node) == haraka512(node + node)


def test_chain_matches_repeated_hash():
    node = bytes(range(32))
    assert hash_n_to_n_chain(node, 3) == hash_n_to_n(hash_n_to_n(hash_n_to_n(node)))


def test_compress_pairs():
    result = compress_pairs(NODES)
    assert result == [hash_2n_to_n(NODES[0] + NODES[1]), hash_2n_to_n(NODES[2] + NODES[3])]


def test_compress_pairs_rejects_odd_count():
    with pytest.raises(ValueError):
        compress_pairs(NODES[:3])


def test_compress_all_hashes_concatenation():
    assert compress_all(NODES) == hash_to_n(b"".join(NODES))


def test_parallel_helpers():
    assert hash_parallel(NODES) == [hash_n_to_n(node) for node in NODES]
    assert hash_parallel_chains(NODES, 0) == NODES
    assert hash_parallel_chains(NODES, 2) == [hash_n_to_n(hash_n_to_n(n)) for n in NODES]


def test_wrong_node_size_raises():
    with pytest.raises(ValueError):
        hash_n_to_n(b"short")
    with pytest.raises(ValueError):
        hash_2n_to_n(bytes(32))


def test_address_iv_layout():
    iv = Address(index=0x0102030405060708, layer=0x0A0B0C0D).iv()
    assert iv == bytes.fromhex("08070605040302010d0c0b0a00000000")


def test_address_iv_fields_are_little_endian():
    iv = Address(index=5, layer=2).iv()
    assert iv[:8] == (5).to_bytes(8, "little")
    assert iv[8:12] == (2).to_bytes(4, "little")
    assert iv[12:] == bytes(4)