"""Scheme parameters, fixed sizes and error types for Gravity-SPHINCS."""

from __future__ import annotations

from dataclasses import dataclass

HASH_SIZE = 32

WOTS_LOG_ELL1 = 6
WOTS_ELL1 = 1 << WOTS_LOG_ELL1
WOTS_CHKSUM = 3
WOTS_ELL = WOTS_ELL1 + WOTS_CHKSUM
WOTS_W = 16

PORS_TAU = 16
PORS_T = 1 << PORS_TAU

LOG_MAX_BATCH_COUNT = 10
MAX_BATCH_COUNT = 1 << LOG_MAX_BATCH_COUNT

PUBLIC_KEY_BYTES = HASH_SIZE

_U64_MASK = 0xFFFFFFFFFFFFFFFF
# The octopus length counter plus padding up to the hash alignment.
_OCTOLEN_FIELD_BYTES = 16


class GravityError(Exception):
    """Base class for errors raised by the signature scheme."""


class VerificationError(GravityError):
    """A signature is malformed or does not verify."""


class BatchError(GravityError):
    """A batch is empty, full, or an index lies outside it."""


@dataclass(frozen=True)
class Params:
    """One parameter set: PORS subset size k, Merkle height h, layers d, cache height c."""

    pors_k: int
    merkle_h: int
    gravity_d: int
    gravity_c: int
    name: str = ""

    def __post_init__(self) -> None:
        for field_name in ("pors_k", "merkle_h", "gravity_d", "gravity_c"):
            value = getattr(self, field_name)
            if not isinstance(value, int) or value < 0:
                raise ValueError(f"{field_name} must be a non-negative integer, got {value!r}")
        if not 1 <= self.pors_k <= PORS_T:
            raise ValueError(f"pors_k must lie in 1..{PORS_T}, got {self.pors_k}")
        if self.merkle_h < 1:
            raise ValueError("merkle_h must be at least 1")

    def gravity_h(self) -> int:
        """Total height of the hyper-tree including the cached top."""
        return self.merkle_h * self.gravity_d + self.gravity_c

    def gravity_mask(self) -> int:
        """Mask applied to the leaf address derived from a message."""
        height = self.gravity_h()
        if height < 64:
            return ~(_U64_MASK << height) & _U64_MASK
        return _U64_MASK

    def signature_bytes(self) -> int:
        """Size of the fixed-layout signature structure."""
        octoporst = (
            self.pors_k * HASH_SIZE
            + self.pors_k * PORS_TAU * HASH_SIZE
            + _OCTOLEN_FIELD_BYTES
        )
        merkle = (WOTS_ELL + self.merkle_h) * HASH_SIZE
        return HASH_SIZE + octoporst + self.gravity_d * merkle + self.gravity_c * HASH_SIZE

    def secret_key_bytes(self) -> int:
        """Size of a secret key: seed, salt and the cached top tree."""
        cache_nodes = 2 * (1 << self.gravity_c) - 1
        return 2 * HASH_SIZE + cache_nodes * HASH_SIZE


GRAVITY_S = Params(pors_k=24, merkle_h=5, gravity_d=1, gravity_c=10, name="Gravity-SPHINCS S")
GRAVITY_M = Params(pors_k=32, merkle_h=5, gravity_d=7, gravity_c=15, name="Gravity-SPHINCS M")
GRAVITY_L = Params(pors_k=28, merkle_h=5, gravity_d=10, gravity_c=14, name="Gravity-SPHINCS L")