"""Deterministic AES-256 CTR DRBG and seed expander used to generate known-answer tests."""

from __future__ import annotations

from .aes import aes256_ecb_block

SEED_MATERIAL_BYTES = 48
KEY_BYTES = 32
BLOCK_BYTES = 16
DIVERSIFIER_BYTES = 8
MAX_EXPANDER_LENGTH = 1 << 32

_BLOCK_MASK = (1 << (8 * BLOCK_BYTES)) - 1
_COUNTER32_MASK = 0xFFFFFFFF


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def _check_length(value: bytes, size: int, what: str) -> bytes:
    value = bytes(value)
    if len(value) != size:
        raise ValueError(f"{what} must be {size} bytes, got {len(value)}")
    return value


def aes256_ctr_drbg_update(
    provided_data: bytes | None, key: bytes, v: bytes
) -> tuple[bytes, bytes]:
    """Run the DRBG update step; return the new (key, V)."""
    key = _check_length(key, KEY_BYTES, "key")
    counter = int.from_bytes(_check_length(v, BLOCK_BYTES, "V"), "big")
    blocks = []
    for _ in range(3):
        counter = (counter + 1) & _BLOCK_MASK
        blocks.append(aes256_ecb_block(key, counter.to_bytes(BLOCK_BYTES, "big")))
    temp = b"".join(blocks)
    if provided_data is not None:
        temp = _xor(temp, _check_length(provided_data, SEED_MATERIAL_BYTES, "provided data"))
    return temp[:KEY_BYTES], temp[KEY_BYTES:]


class AesCtrDrbg:
    """AES-256 CTR DRBG seeded from 48 bytes of entropy, without reseeding."""

    def __init__(
        self,
        entropy_input: bytes,
        personalization_string: bytes | None = None,
        security_strength: int = 256,
    ) -> None:
        seed_material = _check_length(entropy_input, SEED_MATERIAL_BYTES, "entropy input")
        if personalization_string is not None:
            seed_material = _xor(
                seed_material,
                _check_length(
                    personalization_string, SEED_MATERIAL_BYTES, "personalization string"
                ),
            )
        self.security_strength = security_strength
        self._key, self._v = aes256_ctr_drbg_update(
            seed_material, bytes(KEY_BYTES), bytes(BLOCK_BYTES)
        )
        self.reseed_counter = 1

    def random_bytes(self, length: int) -> bytes:
        """Return length pseudo-random bytes and advance the state."""
        if length < 0:
            raise ValueError("length must not be negative")
        counter = int.from_bytes(self._v, "big")
        out = bytearray()
        while len(out) < length:
            counter = (counter + 1) & _BLOCK_MASK
            out += aes256_ecb_block(self._key, counter.to_bytes(BLOCK_BYTES, "big"))
        self._v = counter.to_bytes(BLOCK_BYTES, "big")
        self._key, self._v = aes256_ctr_drbg_update(None, self._key, self._v)
        self.reseed_counter += 1
        return bytes(out[:length])


class SeedExpander:
    """AES-256 based extendable output from a 32-byte seed and an 8-byte diversifier."""

    def __init__(self, seed: bytes, diversifier: bytes, maxlen: int) -> None:
        if not 0 <= maxlen < MAX_EXPANDER_LENGTH:
            raise ValueError(f"maxlen must lie in 0..{MAX_EXPANDER_LENGTH - 1}, got {maxlen}")
        self._key = _check_length(seed, KEY_BYTES, "seed")
        self._prefix = _check_length(diversifier, DIVERSIFIER_BYTES, "diversifier") + (
            maxlen.to_bytes(4, "big")
        )
        self.length_remaining = maxlen
        self._block_counter = 0
        self._buffer = b""

    def read(self, length: int) -> bytes:
        """Return the next length bytes of output."""
        if length < 0:
            raise ValueError("length must not be negative")
        if length >= self.length_remaining:
            raise ValueError(
                f"request of {length} bytes exceeds the {self.length_remaining} remaining"
            )
        self.length_remaining -= length
        out = bytearray()
        while length > len(self._buffer):
            out += self._buffer
            length -= len(self._buffer)
            block = self._prefix + self._block_counter.to_bytes(4, "big")
            self._buffer = aes256_ecb_block(self._key, block)
            self._block_counter = (self._block_counter + 1) & _COUNTER32_MASK
        out += self._buffer[:length]
        self._buffer = self._buffer[length:]
        return bytes(out)