import pytest

from kyberkem.verify import cmov, verify


def test_verify_equal_is_zero():
    data = bytes(range(64))
    assert verify(data, bytes(data)) == 0


def test_verify_empty_is_zero():
    assert verify(b"", b"") == 0


@pytest.mark.parametrize("pos", [0, 17, 63])
@pytest.mark.parametrize("flip", [0x01, 0x80, 0xFF])
def test_verify_any_difference_is_one(pos, flip):
    a = bytes(range(64))
    b = bytearray(a)
    b[pos] ^= flip
    assert verify(a, bytes(b)) == 1


def test_verify_length_mismatch():
    with pytest.raises(ValueError):
        verify(b"abc", b"ab")


def test_cmov_selects_x_when_set():
    r = bytes(range(32))
    x = bytes(range(100, 132))
    assert cmov(r, x, 1) == x


def test_cmov_keeps_r_when_clear():
    r = bytes(range(32))
    x = bytes(range(100, 132))
    assert cmov(r, x, 0) == r


def test_cmov_does_not_mutate_input():
    r = bytearray(b"\x01\x02\x03")
    cmov(r, b"\xff\xff\xff", 1)
    assert r == bytearray(b"\x01\x02\x03")


@pytest.mark.parametrize("b", [-1, 2, 255])
def test_cmov_rejects_bad_condition(b):
    with pytest.raises(ValueError):
        cmov(b"\x00", b"\x01", b)


def test_cmov_length_mismatch():
    with pytest.raises(ValueError):
        cmov(b"\x00\x00", b"\x01", 1)