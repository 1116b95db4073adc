import pytest

from gravsphincs.aes import aes256_ctr, aes256_ctr_zero_iv, aes256_ecb_block

KEY = bytes(range(32))


def test_ecb_known_answer():
    plaintext = bytes.fromhex("00112233445566778899aabbccddeeff")
    expected = bytes.fromhex("8ea2b7ca516745bfeafc49904b496089")
    assert aes256_ecb_block(KEY, plaintext) == expected


def test_ctr_blocks_are_encrypted_counters():
    counter = bytes(15) + b"\x07"
    stream = aes256_ctr(KEY, counter, 32)
    assert stream[:16] == aes256_ecb_block(KEY, counter)
    assert stream[16:] == aes256_ecb_block(KEY, bytes(15) + b"\x08")


def test_ctr_counter_wraps_around():
    stream = aes256_ctr(KEY, b"\xff" * 16, 32)
    assert stream[16:] == aes256_ecb_block(KEY, bytes(16))


def test_ctr_prefix_is_stable():
    counter = bytes(range(16))
    assert aes256_ctr(KEY, counter, 100)[:37] == aes256_ctr(KEY, counter, 37)


def test_zero_iv_matches_zero_counter():
    assert aes256_ctr_zero_iv(KEY, 48) == aes256_ctr(KEY, bytes(16), 48)


def test_zero_length_gives_empty_stream():
    assert aes256_ctr_zero_iv(KEY, 0) == b""


def test_bad_arguments_raise():
    with pytest.raises(ValueError):
        aes256_ctr(bytes(16), bytes(16), 16)
    with pytest.raises(ValueError):
        aes256_ctr(KEY, bytes(8), 16)
    with pytest.raises(ValueError):
        aes256_ctr(KEY, bytes(16), -1)
    with pytest.raises(ValueError):
        aes256_ecb_block(KEY, bytes(15))