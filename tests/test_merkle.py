import pytest

from gravsphincs.hashing import Address, hash_2n_to_n, hash_to_n
from gravsphincs.merkle import (
    MerkleSignature,
    merkle_base_address,
    merkle_compress_all,
    merkle_compress_auth,
    merkle_compress_octopus,
    merkle_extract,
    merkle_gen_auth,
    merkle_gen_octopus,
    merkle_genpk,
    merkle_sign,
)
from gravsphincs.params import WOTS_ELL, Params, VerificationError

SMALL = Params(pors_k=1, merkle_h=1, gravity_d=1, gravity_c=0)
KEY = bytes(range(32, 64))
ADDRESS = Address(index=5, layer=0)
MSG = hash_to_n(b"merkle message")


def _leaves(count):
    return [hash_to_n(bytes([n])) for n in range(count)]


@pytest.fixture(scope="module")
def signed():
    return merkle_sign(KEY, ADDRESS, MSG, SMALL)


def test_base_address():
    params = Params(pors_k=1, merkle_h=2, gravity_d=1, gravity_c=0)
    index, base = merkle_base_address(Address(index=5, layer=2), params)
    assert index == 1
    assert base == Address(index=4, layer=2)


def test_sign_matches_genpk(signed):
    signature, root = signed
    assert merkle_genpk(KEY, ADDRESS, SMALL) == root
    assert len(signature.wots) == WOTS_ELL
    assert len(signature.auth) == SMALL.merkle_h


def test_extract_recovers_root(signed):
    signature, root = signed
    assert merkle_extract(ADDRESS, signature, MSG, SMALL) == root


def test_extract_other_message_differs(signed):
    signature, root = signed
    assert merkle_extract(ADDRESS, signature, hash_to_n(b"forged"), SMALL) != root


def test_extract_rejects_bad_auth_length(signed):
    signature, _ = signed
    broken = MerkleSignature(wots=signature.wots, auth=signature.auth + signature.auth)
    with pytest.raises(VerificationError):
        merkle_extract(ADDRESS, broken, MSG, SMALL)


def test_signature_serialization_round_trip(signed):
    signature, _ = signed
    data = signature.to_bytes()
    assert len(data) == (WOTS_ELL + SMALL.merkle_h) * 32
    assert MerkleSignature.from_bytes(data, SMALL) == signature


def test_signature_from_bytes_wrong_length(signed):
    signature, _ = signed
    with pytest.raises(VerificationError):
        MerkleSignature.from_bytes(signature.to_bytes()[:-1], SMALL)


def test_compress_all_small_trees():
    a, b, c, d = _leaves(4)
    assert merkle_compress_all([a, b]) == hash_2n_to_n(a + b)
    assert merkle_compress_all([a, b, c, d]) == hash_2n_to_n(
        hash_2n_to_n(a + b) + hash_2n_to_n(c + d)
    )


def test_compress_all_requires_power_of_two():
    with pytest.raises(ValueError):
        merkle_compress_all(_leaves(3))


@pytest.mark.parametrize("index", [0, 3, 6, 7])
def test_auth_path_round_trip(index):
    leaves = _leaves(8)
    auth, root = merkle_gen_auth(leaves, index)
    assert len(auth) == 3
    assert root == merkle_compress_all(leaves)
    assert merkle_compress_auth(leaves[index], index, auth) == (root, 0)


def test_gen_auth_index_out_of_range():
    with pytest.raises(ValueError):
        merkle_gen_auth(_leaves(4), 4)


def test_octopus_round_trip():
    leaves = _leaves(8)
    indices = [1, 2, 3, 6]
    octopus, root = merkle_gen_octopus(leaves, indices)
    assert root == merkle_compress_all(leaves)
    assert len(octopus) == 3
    chosen = [leaves[i] for i in indices]
    assert merkle_compress_octopus(chosen, 3, octopus, indices) == root


def test_octopus_all_leaves_needs_no_proof():
    leaves = _leaves(4)
    octopus, root = merkle_gen_octopus(leaves, [0, 1, 2, 3])
    assert octopus == []
    assert merkle_compress_octopus(leaves, 2, [], [0, 1, 2, 3]) == root


def test_octopus_does_not_mutate_indices():
    indices = [5, 0]
    merkle_gen_octopus(_leaves(8), indices)
    assert indices == [5, 0]


def test_octopus_too_short_or_long():
    leaves = _leaves(8)
    indices = [1, 6]
    octopus, _ = merkle_gen_octopus(leaves, indices)
    chosen = [leaves[i] for i in indices]
    with pytest.raises(VerificationError):
        merkle_compress_octopus(chosen, 3, octopus[:-1], indices)
    with pytest.raises(VerificationError):
        merkle_compress_octopus(chosen, 3, octopus + [leaves[0]], indices)