"""Haraka v2 short-input hash functions built on single AES rounds."""

from __future__ import annotations

import struct

ROUNDS = 6

_RC = (
    0x75817B9D, 0xB2C5FEF0, 0xE620C00A, 0x0684704C, 0x2F08F717, 0x640F6BA4,
    0x88F3A06B, 0x8B66B4E1, 0x9F029114, 0xCF029D60, 0x53F28498, 0x3402DE2D,
    0xFD5B4F79, 0xBBF3BCAF, 0x2E7B4F08, 0x0ED6EAE6, 0xBE397044, 0x79EECD1C,
    0x4872448B, 0xCBCFB0CB, 0x2B8A057B, 0x8D5335ED, 0x6E9032B7, 0x7EEACDEE,
    0xDA4FEF1B, 0xE2412761, 0x5E2E7CD0, 0x67C28F43, 0x1FC70B3B, 0x675FFDE2,
    0xAFCACC07, 0x2924D9B0, 0xB9D465EE, 0xECDB8FCA, 0xE6867FE9, 0xAB4D63F1,
    0xAD037E33, 0x5B2A404F, 0xD4B7CD64, 0x1C30BF84, 0x8DF69800, 0x69028B2E,
    0x941723BF, 0xB2CC0BB9, 0x5C9D2D8A, 0x4AAA9EC8, 0xDE6F5572, 0xFA0478A6,
    0x29129FD4, 0x0EFA4F2E, 0x6B772A12, 0xDFB49F2B, 0xBB6A12EE, 0x32D611AE,
    0xF449A236, 0x1EA10344, 0x9CA8ECA6, 0x5F9600C9, 0x4B050084, 0xAF044988,
    0x27E593EC, 0x78A2C7E3, 0x9D199C4F, 0x21025ED8, 0x82D40173, 0xB9282ECD,
    0xA759C9B7, 0xBF3AAAF8, 0x10307D6B, 0x37F2EFD9, 0x6186B017, 0x6260700D,
    0xF6FC9AC6, 0x81C29153, 0x21300443, 0x5ACA45C2, 0x36D1943A, 0x2CAF92E8,
    0x226B68BB, 0x9223973C, 0xE51071B4, 0x6CBAB958, 0x225886EB, 0xD3BF9238,
    0x24E1128D, 0x933DFDDD, 0xAEF0C677, 0xDB863CE5, 0xCB2212B1, 0x83E48DE3,
    0xFFEBA09C, 0xBB606268, 0xC72BF77D, 0x2DB91A4E, 0xE2E4D19C, 0x734BD3DC,
    0x2CB3924E, 0x4B1415C4, 0x61301B43, 0x43BB47C3, 0x16EB6899, 0x03B231DD,
    0xE707EFF6, 0xDBA775A8, 0x7ECA472C, 0x8E5E2302, 0x3C755977, 0x6DF3614B,
    0xB88617F9, 0x6D1BE5B9, 0xD6DE7D77, 0xCDA75A17, 0xA946EE5D, 0x9D6C069D,
    0x6BA8E9AA, 0xEC6B43F0, 0x3BF327C1, 0xA2531159, 0xF957332B, 0xCB1E6950,
    0x600ED0D9, 0xE4ED0353, 0x00DA619C, 0x2CEE0C75, 0x63A4A350, 0x80BBBABC,
    0x96E90CAB, 0xF0B1A5A1, 0x938DCA39, 0xAB0DDE30, 0x5E962988, 0xAE3DB102,
    0x2E75B442, 0x8814F3A8, 0xD554A40B, 0x17BB8F38, 0x360A16F6, 0xAEB6B779,
    0x5F427FD7, 0x34BB8A5B, 0xFFBAAFDE, 0x43CE5918, 0xCBE55438, 0x26F65241,
    0x839EC978, 0xA2CA9CF7, 0xB9F3026A, 0x4CE99A54, 0x22901235, 0x40C06E28,
    0x1BDFF7BE, 0xAE51A51A, 0x48A659CF, 0xC173BC0F, 0xBA7ED22B, 0xA0C1613C,
    0xE9C59DA1, 0x4AD6BDFD, 0x02288288, 0x756ACC03, 0x848F2AD2, 0x367E4778,
    0x0DE7D31E, 0x2FF37238, 0xB73BD58F, 0xEE36B135, 0xCF74BE8B, 0x08D95C6A,
    0xA3743E4A, 0x66AE1838, 0xC9D6EE98, 0x5880F434, 0x9A9369BD, 0xD0FDF4C7,
    0xAEFABD99, 0x593023F0, 0x6F1ECB2A, 0xA5CC637B, 0xEB606E6F, 0x329AE3D1,
    0xCB7594AB, 0xA4DC93D6, 0x49E01594, 0xE00207EB, 0x65208EF8, 0x942366A6,
    0xF751C880, 0x1CAA0C4F, 0xE3E67E4A, 0xBD03239F, 0xDB2DC1DD, 0x02F7F57F,
)

_RC_BYTES = struct.pack(f"<{len(_RC)}I", *_RC)
_ROUND_KEYS = tuple(_RC_BYTES[offset:offset + 16] for offset in range(0, len(_RC_BYTES), 16))

_SBOX = bytes.fromhex(
    "637c777bf26b6fc53001672bfed7ab76"
    "ca82c97dfa5947f0add4a2af9ca472c0"
    "b7fd9326363ff7cc34a5e5f171d83115"
    "04c723c31896059a071280e2eb27b275"
    "09832c1a1b6e5aa0523bd6b329e32f84"
    "53d100ed20fcb15b6acbbe394a4c58cf"
    "d0efaafb434d338545f9027f503c9fa8"
    "51a3408f929d38f5bcb6da2110fff3d2"
    "cd0c13ec5f974417c4a77e3d645d1973"
    "60814fdc222a908846eeb814de5e0bdb"
    "e0323a0a4906245cc2d3ac629195e479"
    "e7c8376d8dd54ea96c56f4ea657aae08"
    "ba78252e1ca6b4c6e8dd741f4bbd8b8a"
    "703eb5664803f60e613557b986c11d9e"
    "e1f8981169d98e949b1e87e9ce5528df"
    "8ca1890dbfe6426841992d0fb054bb16"
)

_XT = bytes(((x << 1) ^ (0x1B if x & 0x80 else 0)) & 0xFF for x in range(256))

# Source byte for each (column, row) after the row shift.
_SHIFT = tuple(4 * ((col + row) % 4) + row for col in range(4) for row in range(4))


def _xor(a: bytes, b: bytes) -> bytes:
    return (int.from_bytes(a, "little") ^ int.from_bytes(b, "little")).to_bytes(len(a), "little")


def _words(block: bytes) -> list[bytes]:
    return [block[offset:offset + 4] for offset in range(0, 16, 4)]


def aesenc(state: bytes, round_key: bytes) -> bytes:
    """One AES encryption round (SubBytes, ShiftRows, MixColumns, AddRoundKey)."""
    if len(state) != 16 or len(round_key) != 16:
        raise ValueError("aesenc needs a 16-byte state and a 16-byte round key")
    shifted = [_SBOX[state[i]] for i in _SHIFT]
    mixed = bytearray()
    column_iter = iter(shifted)
    for a0, a1, a2, a3 in zip(column_iter, column_iter, column_iter, column_iter):
        u = a0 ^ a1 ^ a2 ^ a3
        mixed += bytes((
            a0 ^ u ^ _XT[a0 ^ a1],
            a1 ^ u ^ _XT[a1 ^ a2],
            a2 ^ u ^ _XT[a2 ^ a3],
            a3 ^ u ^ _XT[a3 ^ a0],
        ))
    return _xor(bytes(mixed), bytes(round_key))


def _permute256(s0: bytes, s1: bytes) -> tuple[bytes, bytes]:
    for round_number in range(ROUNDS):
        keys = _ROUND_KEYS[4 * round_number:4 * round_number + 4]
        s0 = aesenc(s0, keys[0])
        s1 = aesenc(s1, keys[1])
        s0 = aesenc(s0, keys[2])
        s1 = aesenc(s1, keys[3])
        a, b = _words(s0), _words(s1)
        s0 = a[0] + b[0] + a[1] + b[1]
        s1 = a[2] + b[2] + a[3] + b[3]
    return s0, s1


def _mix4(states: list[bytes]) -> list[bytes]:
    a, b, c, d = (_words(state) for state in states)
    return [
        a[3] + c[3] + b[3] + d[3],
        c[0] + a[0] + d[0] + b[0],
        c[1] + a[1] + d[1] + b[1],
        a[2] + c[2] + b[2] + d[2],
    ]


def haraka256(data: bytes) -> bytes:
    """Haraka-256: 32 bytes in, 32 bytes out."""
    data = bytes(data)
    if len(data) != 32:
        raise ValueError("haraka256 needs exactly 32 bytes of input")
    s0, s1 = _permute256(data[:16], data[16:])
    return _xor(s0 + s1, data)


def haraka256_chain(data: bytes, chainlen: int) -> bytes:
    """Apply Haraka-256 chainlen times in a row."""
    data = bytes(data)
    if len(data) != 32:
        raise ValueError("haraka256_chain needs exactly 32 bytes of input")
    if chainlen < 0:
        raise ValueError("chain length must not be negative")
    state = data
    for _ in range(chainlen):
        s0, s1 = _permute256(state[:16], state[16:])
        state = _xor(s0 + s1, state)
    return state


def haraka512(data: bytes) -> bytes:
    """Haraka-512 truncated to 256 bits: 64 bytes in, 32 bytes out."""
    data = bytes(data)
    if len(data) != 64:
        raise ValueError("haraka512 needs exactly 64 bytes of input")
    states = [data[offset:offset + 16] for offset in range(0, 64, 16)]
    for round_number in range(ROUNDS):
        keys = _ROUND_KEYS[8 * round_number:8 * round_number + 8]
        for position, key in enumerate(keys):
            states[position % 4] = aesenc(states[position % 4], key)
        states = _mix4(states)
    s0, s1, s2, s3 = (_xor(state, data[16 * n:16 * n + 16]) for n, state in enumerate(states))
    return s0[8:] + s1[8:] + s2[:8] + s3[:8]