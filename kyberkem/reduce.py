"""Montgomery and Barrett reduction modulo the Kyber prime."""

from __future__ import annotations

KYBER_Q = 3329
MONT = -1044  # 2^16 mod q
QINV = -3327  # q^-1 mod 2^16


def _int16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _int32(value: int) -> int:
    return ((value + 0x80000000) & 0xFFFFFFFF) - 0x80000000


def montgomery_reduce(a: int) -> int:
    """Return an integer in (-q, q) congruent to a * 2^-16 modulo q.

    The input must lie in [-q*2^15, q*2^15 - 1].
    """
    a = _int32(a)
    t = _int16(_int16(a) * QINV)
    return _int16((a - t * KYBER_Q) >> 16)


def barrett_reduce(a: int) -> int:
    """Return the centred representative of a 16-bit integer modulo q."""
    a = _int16(a)
    v = ((1 << 26) + KYBER_Q // 2) // KYBER_Q
    t = (v * a + (1 << 25)) >> 26
    t = _int16(t * KYBER_Q)
    return _int16(a - t)