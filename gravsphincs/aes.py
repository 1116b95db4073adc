"""AES-256 in counter and single-block modes."""

from __future__ import annotations

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

KEY_SIZE = 32
BLOCK_SIZE = 16


def _check_key(key: bytes) -> bytes:
    key = bytes(key)
    if len(key) != KEY_SIZE:
        raise ValueError(f"AES-256 key must be {KEY_SIZE} bytes, got {len(key)}")
    return key


def aes256_ctr(key: bytes, counter: bytes, length: int) -> bytes:
    """Return length bytes of AES-256-CTR keystream from a 16-byte big-endian counter."""
    key = _check_key(key)
    counter = bytes(counter)
    if len(counter) != BLOCK_SIZE:
        raise ValueError(f"counter must be {BLOCK_SIZE} bytes, got {len(counter)}")
    if length < 0:
        raise ValueError("length must not be negative")
    if length == 0:
        return b""
    encryptor = Cipher(algorithms.AES(key), modes.CTR(counter)).encryptor()
    return encryptor.update(bytes(length)) + encryptor.finalize()


def aes256_ctr_zero_iv(key: bytes, length: int) -> bytes:
    """AES-256-CTR keystream starting from the all-zero counter."""
    return aes256_ctr(key, bytes(BLOCK_SIZE), length)


def aes256_ecb_block(key: bytes, block: bytes) -> bytes:
    """Encrypt a single 16-byte block with AES-256."""
    key = _check_key(key)
    block = bytes(block)
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(block)}")
    encryptor = Cipher(algorithms.AES(key), modes.ECB()).encryptor()
    return encryptor.update(block) + encryptor.finalize()