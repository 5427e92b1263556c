"""Centred binomial sampling of polynomial coefficients."""

from __future__ import annotations

KYBER_N = 256


def _check_length(buf: bytes, eta: int) -> None:
    expected = eta * KYBER_N // 4
    if len(buf) != expected:
        raise ValueError(f"eta={eta} sampling needs {expected} bytes, got {len(buf)}")


def cbd2(buf: bytes) -> list[int]:
    """Sample 256 coefficients with eta=2 from 128 uniform bytes."""
    _check_length(buf, 2)
    coeffs = []
    for i in range(0, len(buf), 4):
        t = int.from_bytes(buf[i:i + 4], "little")
        d = (t & 0x55555555) + ((t >> 1) & 0x55555555)
        for j in range(8):
            a = (d >> (4 * j)) & 0x3
            b = (d >> (4 * j + 2)) & 0x3
            coeffs.append(a - b)
    return coeffs


def cbd3(buf: bytes) -> list[int]:
    """Sample 256 coefficients with eta=3 from 192 uniform bytes."""
    _check_length(buf, 3)
    coeffs = []
    for i in range(0, len(buf), 3):
        t = int.from_bytes(buf[i:i + 3], "little")
        d = (t & 0x00249249) + ((t >> 1) & 0x00249249) + ((t >> 2) & 0x00249249)
        for j in range(4):
            a = (d >> (6 * j)) & 0x7
            b = (d >> (6 * j + 3)) & 0x7
            coeffs.append(a - b)
    return coeffs


def poly_cbd(buf: bytes, eta: int) -> list[int]:
    """Sample with the centred binomial distribution of parameter eta (2 or 3)."""
    if eta == 2:
        return cbd2(buf)
    if eta == 3:
        return cbd3(buf)
    raise ValueError(f"eta must be 2 or 3, got {eta}")