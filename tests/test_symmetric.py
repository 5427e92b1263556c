import hashlib

import pytest

from kyberkem.aes256ctr import aes256ctr_prf
from kyberkem.symmetric import (
    kyber_aes256ctr_prf,
    kyber_aes256xof_absorb,
    kyber_shake128_absorb,
    kyber_shake256_prf,
    symmetric_for,
)

SEED = bytes(range(32))
DATA = b"kyber symmetric primitives"


@pytest.fixture
def shake():
    return symmetric_for(False)


@pytest.fixture
def nineties():
    return symmetric_for(True)


def test_hash_h_standard_is_sha3_256(shake):
    assert shake.hash_h(DATA) == hashlib.sha3_256(DATA).digest()


def test_hash_g_standard_is_sha3_512(shake):
    assert shake.hash_g(DATA) == hashlib.sha3_512(DATA).digest()


def test_hash_h_90s_is_sha256(nineties):
    assert nineties.hash_h(DATA) == hashlib.sha256(DATA).digest()


def test_hash_g_90s_is_sha512(nineties):
    assert nineties.hash_g(DATA) == hashlib.sha512(DATA).digest()


def test_kdf_standard_is_shake256_32(shake):
    out = shake.kdf(DATA)
    assert len(out) == 32
    assert out == hashlib.shake_256(DATA).digest(32)


def test_kdf_90s_is_sha256(nineties):
    assert nineties.kdf(DATA) == hashlib.sha256(DATA).digest()


def test_xof_blockbytes():
    assert symmetric_for(False).xof_blockbytes == 168
    assert symmetric_for(True).xof_blockbytes == 64


def test_standard_xof_appends_indices(shake):
    xof = shake.xof_absorb(SEED, 1, 2)
    blocks = xof.squeezeblocks(2)
    assert blocks == hashlib.shake_128(SEED + bytes([1, 2])).digest(2 * 168)


def test_90s_xof_uses_indices_as_nonce(nineties):
    xof = nineties.xof_absorb(SEED, 3, 4)
    expected = aes256ctr_prf(128, SEED, bytes([3, 4]) + bytes(10))
    assert xof.squeezeblocks(2) == expected


def test_standard_prf_is_shake256_of_key_and_nonce(shake):
    out = shake.prf(128, SEED, 7)
    assert out == hashlib.shake_256(SEED + bytes([7])).digest(128)


def test_90s_prf_nonce_layout(nineties):
    out = nineties.prf(192, SEED, 5)
    assert out == aes256ctr_prf(192, SEED, bytes([5]) + bytes(11))


def test_free_functions_agree_with_primitives(shake, nineties):
    assert kyber_shake256_prf(64, SEED, 9) == shake.prf(64, SEED, 9)
    assert kyber_aes256ctr_prf(64, SEED, 9) == nineties.prf(64, SEED, 9)
    assert kyber_shake128_absorb(SEED, 0, 1).squeezeblocks(1) == shake.xof_absorb(
        SEED, 0, 1
    ).squeezeblocks(1)
    assert kyber_aes256xof_absorb(SEED, 0, 1).squeezeblocks(1) == nineties.xof_absorb(
        SEED, 0, 1
    ).squeezeblocks(1)


def test_prf_lengths(shake, nineties):
    assert len(shake.prf(0, SEED, 0)) == 0
    assert len(nineties.prf(33, SEED, 0)) == 33


@pytest.mark.parametrize("ninety_s", [False, True])
def test_bad_seed_length(ninety_s):
    sym = symmetric_for(ninety_s)
    with pytest.raises(ValueError):
        sym.xof_absorb(bytes(31), 0, 0)
    with pytest.raises(ValueError):
        sym.prf(32, bytes(33), 0)


@pytest.mark.parametrize("ninety_s", [False, True])
def test_index_out_of_byte_range(ninety_s):
    sym = symmetric_for(ninety_s)
    with pytest.raises(ValueError):
        sym.xof_absorb(SEED, 256, 0)
    with pytest.raises(ValueError):
        sym.prf(32, SEED, -1)


def test_symmetric_for_flag():
    assert symmetric_for(1).ninety_s is True
    assert symmetric_for(0).ninety_s is False