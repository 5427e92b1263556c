import pytest

from kyberkem.aes256ctr import aes256_encrypt_block
from kyberkem.rng import CtrDrbg, SeedExpander

ENTROPY = bytes(range(48))


def test_first_kat_seed():
    drbg = CtrDrbg(ENTROPY)
    assert drbg.randombytes(48).hex().upper() == (
        "061550234D158C5EC95595FE04EF7A25767F2E24CC2BC479"
        "D09D86DC9ABCFDE7056A8C266F9EF97ED08541DBD2E1FFA1"
    )


def test_drbg_is_deterministic():
    a = CtrDrbg(ENTROPY)
    b = CtrDrbg(ENTROPY)
    assert [a.randombytes(n) for n in (1, 17, 48)] == [b.randombytes(n) for n in (1, 17, 48)]


def test_drbg_lengths_and_counter():
    drbg = CtrDrbg(ENTROPY)
    assert len(drbg.randombytes(0)) == 0
    assert len(drbg.randombytes(33)) == 33
    assert drbg.reseed_counter == 3


def test_drbg_short_request_is_prefix_of_block_output():
    assert CtrDrbg(ENTROPY).randombytes(5) == CtrDrbg(ENTROPY).randombytes(16)[:5]


def test_personalization_changes_output():
    plain = CtrDrbg(ENTROPY).randombytes(32)
    personal = CtrDrbg(ENTROPY, bytes([1] * 48)).randombytes(32)
    zero_personal = CtrDrbg(ENTROPY, bytes(48)).randombytes(32)
    assert plain != personal
    assert plain == zero_personal


def test_drbg_callable():
    assert CtrDrbg(ENTROPY)(48) == CtrDrbg(ENTROPY).randombytes(48)


def test_drbg_bad_input_raises():
    with pytest.raises(ValueError):
        CtrDrbg(bytes(47))
    with pytest.raises(ValueError):
        CtrDrbg(ENTROPY, bytes(10))
    with pytest.raises(ValueError):
        CtrDrbg(ENTROPY).randombytes(-1)


def test_seed_expander_first_block():
    seed = bytes(range(32))
    diversifier = bytes(range(8))
    expander = SeedExpander(seed, diversifier, 1000)
    counter = diversifier + (1000).to_bytes(4, "big") + bytes(4)
    assert expander.expand(16) == aes256_encrypt_block(seed, counter)


def test_seed_expander_split_matches_whole():
    seed = bytes(range(32))
    diversifier = bytes(8)
    whole = SeedExpander(seed, diversifier, 500).expand(70)
    split = SeedExpander(seed, diversifier, 500)
    parts = split.expand(3) + split.expand(20) + split.expand(47)
    assert parts == whole
    assert split.length_remaining == 430


def test_seed_expander_limits():
    with pytest.raises(ValueError):
        SeedExpander(bytes(32), bytes(8), 1 << 32)
    expander = SeedExpander(bytes(32), bytes(8), 10)
    with pytest.raises(ValueError):
        expander.expand(10)
    assert len(expander.expand(9)) == 9
    with pytest.raises(ValueError):
        SeedExpander(bytes(31), bytes(8), 10)