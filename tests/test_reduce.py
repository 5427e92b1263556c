import random

from kyberkem.reduce import KYBER_Q, barrett_reduce, montgomery_reduce

LIMIT = KYBER_Q * (1 << 15)


def test_montgomery_reduce_congruence_and_range():
    rng = random.Random(1234)
    samples = [-LIMIT, LIMIT - 1, 0, 1, -1] + [
        rng.randrange(-LIMIT, LIMIT) for _ in range(5000)
    ]
    for a in samples:
        r = montgomery_reduce(a)
        assert -KYBER_Q < r < KYBER_Q
        assert (r * (1 << 16) - a) % KYBER_Q == 0


def test_montgomery_reduce_of_radix_is_one_mod_q():
    assert montgomery_reduce(1 << 16) % KYBER_Q == 1


def test_barrett_reduce_whole_int16_range():
    half = (KYBER_Q - 1) // 2
    for a in range(-32768, 32768):
        r = barrett_reduce(a)
        assert -half <= r <= half
        assert (r - a) % KYBER_Q == 0


def test_barrett_reduce_multiple_of_q():
    assert barrett_reduce(KYBER_Q) == 0
    assert barrett_reduce(-3 * KYBER_Q) == 0


def test_barrett_reduce_is_idempotent():
    for a in range(-2000, 2000, 7):
        once = barrett_reduce(a)
        assert barrett_reduce(once) == once