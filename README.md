# gravsphincs

Pure-Python building blocks of **Gravity-SPHINCS**, a stateless hash-based
signature scheme. Fixed-size compressions use Haraka, messages are hashed
with SHA-256, and AES-256 in counter mode derives secret values.

## Modules

- `gravsphincs.params`: the `Params` dataclass (PORS subset size `pors_k`,
  Merkle height `merkle_h`, layer count `gravity_d`, cache height `gravity_c`)
  with `gravity_h()`, `gravity_mask()`, `signature_bytes()` and
  `secret_key_bytes()`; the parameter sets `GRAVITY_S`, `GRAVITY_M` and
  `GRAVITY_L`; the exceptions `GravityError`, `VerificationError` and
  `BatchError`
- `gravsphincs.haraka`: `aesenc`, `haraka256`, `haraka256_chain` and
  `haraka512`
- `gravsphincs.aes`: `aes256_ctr`, `aes256_ctr_zero_iv` and
  `aes256_ecb_block`
- `gravsphincs.hashing`: `Address` (leaf index and layer, with `iv()`), and
  `hash_n_to_n`, `hash_n_to_n_chain`, `hash_2n_to_n`, `hash_to_n`,
  `compress_pairs`, `compress_all`, `hash_parallel`, `hash_parallel_chains`
- `gravsphincs.ltree`: `ltree`, compressing any number of nodes to one root
- `gravsphincs.wots`: Winternitz one-time signatures with an L-tree public
  key: `wots_gensk`, `wots_sign`, `lwots_genpk`, `lwots_extract`
- `gravsphincs.merkle`: Merkle trees of WOTS keys (`merkle_genpk`,
  `merkle_sign`, `merkle_extract`, `MerkleSignature`) and tree helpers for
  authentication paths and merged "octopus" paths
- `gravsphincs.pors`: PORS / PORST few-time signatures: `pors_randsubset`,
  `pors_gensk`, `pors_sign`, `porst_genpk`, `octoporst_sign`,
  `octoporst_extract`, `OctoporstSignature`
- `gravsphincs.batch`: `BatchBuffer`, `BatchGroup`, `BatchAuth` and
  `batch_compress_auth` for gathering many messages under one Merkle root
- `gravsphincs.rng`: the deterministic AES-256 CTR DRBG (`AesCtrDrbg`), its
  update step `aes256_ctr_drbg_update`, and `SeedExpander`

## Installation

```
pip install .
```

The only runtime dependency is `cryptography`, used for AES.

## Examples

A Merkle tree of one-time keys, signing a 32-byte digest:

```python
import os
from gravsphincs.hashing import Address, hash_to_n
from gravsphincs.merkle import merkle_genpk, merkle_sign, merkle_extract
from gravsphincs.params import GRAVITY_S

key = os.urandom(32)
address = Address(index=3, layer=0)
digest = hash_to_n(b"attack at dawn")

signature, root = merkle_sign(key, address, digest, GRAVITY_S)
assert root == merkle_genpk(key, address, GRAVITY_S)
assert merkle_extract(address, signature, digest, GRAVITY_S) == root
```

A PORST signature over a subset of indices derived from a message:

```python
from gravsphincs.pors import pors_randsubset, pors_gensk, octoporst_sign, octoporst_extract

leaf_address, subset = pors_randsubset(os.urandom(32), digest, GRAVITY_S)
secret_values = pors_gensk(key, Address(index=leaf_address, layer=GRAVITY_S.gravity_d))
signature, root = octoporst_sign(secret_values, subset)
assert octoporst_extract(signature, subset) == root
```

`octoporst_extract` and `merkle_compress_octopus` raise `VerificationError`
when the octopus proof has the wrong number of nodes.

Batching:

```python
from gravsphincs.batch import BatchBuffer, batch_compress_auth

buffer = BatchBuffer()
index = buffer.append(b"first message")
buffer.append(b"second message")
group = buffer.group()
auth = group.extract(index)
assert batch_compress_auth(auth, b"first message") == group.root()
```

A deterministic random stream:

```python
from gravsphincs.rng import AesCtrDrbg

drbg = AesCtrDrbg(bytes(range(48)))
seed = drbg.random_bytes(48)
```

## What the package does not do

The package provides the components of the scheme, not the assembled
scheme. It has no hyper-tree key generation, signing or verification over
the cached top tree, no key pair or signed-message interface, and no
command-line tools: there is no command for writing known-answer test files
and none for benchmarking. `Params.signature_bytes()` and
`Params.secret_key_bytes()` report the sizes such structures would have.