"""Number-theoretic transform over Z_q[X]/(X^256 + 1)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .reduce import _int16, barrett_reduce, montgomery_reduce

KYBER_N = 256

# Powers of the root of unity 17 in Montgomery form, bit-reversed order.
ZETAS = (
    -1044, -758, -359, -1517, 1493, 1422, 287, 202,
    -171, 622, 1577, 182, 962, -1202, -1474, 1468,
    573, -1325, 264, 383, -829, 1458, -1602, -130,
    -681, 1017, 732, 608, -1542, 411, -205, -1571,
    1223, 652, -552, 1015, -1293, 1491, -282, -1544,
    516, -8, -320, -666, -1618, -1162, 126, 1469,
    -853, -90, -271, 830, 107, -1421, -247, -951,
    -398, 961, -1508, -725, 448, -1065, 677, -1275,
    -1103, 430, 555, 843, -1251, 871, 1550, 105,
    422, 587, 177, -235, -291, -460, 1574, 1653,
    -246, 778, 1159, -147, -777, 1483, -602, 1119,
    -1590, 644, -872, 349, 418, 329, -156, -75,
    817, 1097, 603, 610, 1322, -1285, -1465, 384,
    -1215, -136, 1218, -1335, -874, 220, -1187, -1659,
    -1185, -1530, -1278, 794, -1510, -854, -870, 478,
    -108, -308, 996, 991, 958, -1460, 1522, 1628,
)

_INVNTT_FACTOR = 1441  # mont^2 / 128


def fqmul(a: int, b: int) -> int:
    """Multiply two field elements and Montgomery-reduce the product."""
    return montgomery_reduce(_int16(a) * _int16(b))


def _checked(coeffs: Iterable[int]) -> list[int]:
    r = [_int16(c) for c in coeffs]
    if len(r) != KYBER_N:
        raise ValueError(f"expected {KYBER_N} coefficients, got {len(r)}")
    return r


def ntt(coeffs: Iterable[int]) -> list[int]:
    """Forward NTT: standard order in, bit-reversed order out."""
    r = _checked(coeffs)
    zetas = iter(ZETAS[1:])
    length = 128
    while length >= 2:
        for start in range(0, KYBER_N, 2 * length):
            zeta = next(zetas)
            for j in range(start, start + length):
                t = fqmul(zeta, r[j + length])
                r[j + length] = _int16(r[j] - t)
                r[j] = _int16(r[j] + t)
        length >>= 1
    return r


def invntt(coeffs: Iterable[int]) -> list[int]:
    """Inverse NTT followed by multiplication with the Montgomery factor 2^16.

    Bit-reversed order in, standard order out.
    """
    r = _checked(coeffs)
    zetas = reversed(ZETAS)
    length = 2
    while length <= 128:
        for start in range(0, KYBER_N, 2 * length):
            zeta = next(zetas)
            for j in range(start, start + length):
                t = r[j]
                r[j] = barrett_reduce(t + r[j + length])
                r[j + length] = fqmul(zeta, _int16(r[j + length] - t))
        length <<= 1
    return [fqmul(c, _INVNTT_FACTOR) for c in r]


def basemul(a: Sequence[int], b: Sequence[int], zeta: int) -> tuple[int, int]:
    """Multiply two degree-one polynomials in Z_q[X]/(X^2 - zeta)."""
    if len(a) != 2 or len(b) != 2:
        raise ValueError("basemul needs two coefficients per factor")
    r0 = fqmul(fqmul(a[1], b[1]), zeta)
    r0 = _int16(r0 + fqmul(a[0], b[0]))
    r1 = _int16(fqmul(a[0], b[1]) + fqmul(a[1], b[0]))
    return r0, r1