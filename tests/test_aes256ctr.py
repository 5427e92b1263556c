import pytest

from kyberkem.aes256ctr import (
    AES256CTR_BLOCKBYTES,
    Aes256Ctr,
    aes256_encrypt_block,
    aes256ctr_prf,
)

KEY = bytes(range(32))
NONCE = bytes(range(100, 112))


def test_fips197_aes256_example():
    plaintext = bytes.fromhex("00112233445566778899aabbccddeeff")
    assert aes256_encrypt_block(KEY, plaintext) == bytes.fromhex(
        "8ea2b7ca516745bfeafc49904b496089"
    )


def test_sp800_38a_ctr_aes256_first_block():
    key = bytes.fromhex(
        "603deb1015ca71be2b73aef0857d77811f352c073b6108d72d9810a30914dff4"
    )
    block = bytes.fromhex("f0f1f2f3f4f5f6f7f8f9fafbfcfdfeff")
    assert aes256_encrypt_block(key, block) == bytes.fromhex(
        "0bdf7df1591716335e9a8b15c860c502"
    )


def test_keystream_is_nonce_followed_by_big_endian_counter():
    stream = Aes256Ctr(KEY, NONCE).squeezeblocks(1)
    assert len(stream) == AES256CTR_BLOCKBYTES
    for counter in range(4):
        expected = aes256_encrypt_block(KEY, NONCE + counter.to_bytes(4, "big"))
        assert stream[16 * counter:16 * counter + 16] == expected


def test_second_squeeze_continues_counter():
    ctr = Aes256Ctr(KEY, NONCE)
    ctr.squeezeblocks(1)
    second = ctr.squeezeblocks(1)
    assert second[:16] == aes256_encrypt_block(KEY, NONCE + (4).to_bytes(4, "big"))


def test_incremental_squeeze_matches_single_call():
    one = Aes256Ctr(KEY, NONCE)
    pieces = one.squeezeblocks(1) + one.squeezeblocks(2)
    assert pieces == Aes256Ctr(KEY, NONCE).squeezeblocks(3)


@pytest.mark.parametrize("outlen", [1, 10, 63, 64, 65, 128, 200])
def test_prf_is_prefix_of_keystream(outlen):
    stream = Aes256Ctr(KEY, NONCE).squeezeblocks(4)
    out = aes256ctr_prf(outlen, KEY, NONCE)
    assert len(out) == outlen
    assert out == stream[:outlen]


def test_prf_zero_length():
    assert aes256ctr_prf(0, KEY, NONCE) == b""


def test_squeezeblocks_zero():
    assert Aes256Ctr(KEY, NONCE).squeezeblocks(0) == b""


def test_bad_key_length():
    with pytest.raises(ValueError):
        Aes256Ctr(bytes(16), NONCE)
    with pytest.raises(ValueError):
        aes256_encrypt_block(bytes(31), bytes(16))


def test_bad_nonce_length():
    with pytest.raises(ValueError):
        Aes256Ctr(KEY, bytes(16))


def test_bad_block_length():
    with pytest.raises(ValueError):
        aes256_encrypt_block(KEY, bytes(15))


def test_negative_lengths():
    with pytest.raises(ValueError):
        aes256ctr_prf(-1, KEY, NONCE)
    with pytest.raises(ValueError):
        Aes256Ctr(KEY, NONCE).squeezeblocks(-1)