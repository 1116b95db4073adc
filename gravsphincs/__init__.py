"""Building blocks of the Gravity-SPHINCS hash-based signature scheme."""

__version__ = "0.1.0"

__all__ = [
    "aes",
    "batch",
    "haraka",
    "hashing",
    "ltree",
    "merkle",
    "params",
    "pors",
    "rng",
    "wots",
]