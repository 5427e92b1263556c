"""Polynomials in Z_q[X]/(X^256 + 1) with Kyber's encodings."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .cbd import poly_cbd
from .ntt import ZETAS, basemul, invntt, ntt
from .reduce import _int16, barrett_reduce, montgomery_reduce
from .symmetric import SymmetricPrimitives

KYBER_N = 256
KYBER_Q = 3329
KYBER_POLYBYTES = 384
KYBER_MSGBYTES = KYBER_N // 8

_MASK32 = 0xFFFFFFFF
_TOMONT_FACTOR = (1 << 32) % KYBER_Q
_HALF_Q = (KYBER_Q + 1) // 2


def _positive(c: int) -> int:
    """Map an int16 coefficient to its non-negative representative."""
    return _int16(c + ((c >> 15) & KYBER_Q))


def _chunks(data: bytes, size: int) -> Iterator[bytes]:
    return (data[i:i + size] for i in range(0, len(data), size))


class Poly:
    """An element of R_q with 256 signed 16-bit coefficients."""

    __slots__ = ("coeffs",)

    def __init__(self, coeffs: Iterable[int]) -> None:
        values = tuple(_int16(c) for c in coeffs)
        if len(values) != KYBER_N:
            raise ValueError(f"a polynomial has {KYBER_N} coefficients, got {len(values)}")
        self.coeffs = values

    @classmethod
    def zero(cls) -> Poly:
        return cls([0] * KYBER_N)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Poly):
            return NotImplemented
        return self.coeffs == other.coeffs

    def __hash__(self) -> int:
        return hash(self.coeffs)

    def __repr__(self) -> str:
        return f"Poly({list(self.coeffs)!r})"

    def __iter__(self) -> Iterator[int]:
        return iter(self.coeffs)

    def __len__(self) -> int:
        return KYBER_N

    def __getitem__(self, index: int) -> int:
        return self.coeffs[index]

    def compress(self, nbytes: int) -> bytes:
        """Compress to 4 bits (nbytes=128) or 5 bits (nbytes=160) per coefficient."""
        if nbytes == 128:
            t = []
            for c in self.coeffs:
                d0 = ((_positive(c) << 4) + 1665) & _MASK32
                d0 = (d0 * 80635) & _MASK32
                t.append((d0 >> 28) & 0xF)
            return bytes(lo | (hi << 4) for lo, hi in zip(t[0::2], t[1::2]))
        if nbytes == 160:
            t = []
            for c in self.coeffs:
                d0 = ((_positive(c) << 5) + 1664) & _MASK32
                d0 = (d0 * 40318) & _MASK32
                t.append((d0 >> 27) & 0x1F)
            out = bytearray()
            for i in range(0, KYBER_N, 8):
                t0, t1, t2, t3, t4, t5, t6, t7 = t[i:i + 8]
                out += bytes((
                    (t0 | (t1 << 5)) & 0xFF,
                    ((t1 >> 3) | (t2 << 2) | (t3 << 7)) & 0xFF,
                    ((t3 >> 1) | (t4 << 4)) & 0xFF,
                    ((t4 >> 4) | (t5 << 1) | (t6 << 6)) & 0xFF,
                    ((t6 >> 2) | (t7 << 3)) & 0xFF,
                ))
            return bytes(out)
        raise ValueError(f"compressed size must be 128 or 160 bytes, got {nbytes}")

    @classmethod
    def decompress(cls, data: bytes) -> Poly:
        """Decompress 128 or 160 bytes; approximate inverse of compress()."""
        data = bytes(data)
        if len(data) == 128:
            coeffs = []
            for a in data:
                coeffs.append(((a & 15) * KYBER_Q + 8) >> 4)
                coeffs.append(((a >> 4) * KYBER_Q + 8) >> 4)
            return cls(coeffs)
        if len(data) == 160:
            coeffs = []
            for a0, a1, a2, a3, a4 in _chunks(data, 5):
                t = (
                    a0,
                    ((a0 >> 5) | (a1 << 3)) & 0xFF,
                    a1 >> 2,
                    ((a1 >> 7) | (a2 << 1)) & 0xFF,
                    ((a2 >> 4) | (a3 << 4)) & 0xFF,
                    a3 >> 1,
                    ((a3 >> 6) | (a4 << 2)) & 0xFF,
                    a4 >> 3,
                )
                coeffs.extend(((v & 31) * KYBER_Q + 16) >> 5 for v in t)
            return cls(coeffs)
        raise ValueError(f"compressed polynomial must be 128 or 160 bytes, got {len(data)}")

    def tobytes(self) -> bytes:
        """Serialise to 384 bytes, 12 bits per coefficient."""
        out = bytearray()
        for c0, c1 in zip(self.coeffs[0::2], self.coeffs[1::2]):
            t0 = (c0 + ((c0 >> 15) & KYBER_Q)) & 0xFFFF
            t1 = (c1 + ((c1 >> 15) & KYBER_Q)) & 0xFFFF
            out += bytes((
                t0 & 0xFF,
                ((t0 >> 8) | (t1 << 4)) & 0xFF,
                (t1 >> 4) & 0xFF,
            ))
        return bytes(out)

    @classmethod
    def frombytes(cls, data: bytes) -> Poly:
        """Deserialise 384 bytes; inverse of tobytes()."""
        data = bytes(data)
        if len(data) != KYBER_POLYBYTES:
            raise ValueError(f"serialised polynomial must be {KYBER_POLYBYTES} bytes, got {len(data)}")
        coeffs = []
        for a0, a1, a2 in _chunks(data, 3):
            coeffs.append((a0 | (a1 << 8)) & 0xFFF)
            coeffs.append(((a1 >> 4) | (a2 << 4)) & 0xFFF)
        return cls(coeffs)

    @classmethod
    def frommsg(cls, msg: bytes) -> Poly:
        """Map a 32-byte message to a polynomial, one bit per coefficient."""
        msg = bytes(msg)
        if len(msg) != KYBER_MSGBYTES:
            raise ValueError(f"message must be {KYBER_MSGBYTES} bytes, got {len(msg)}")
        return cls(((byte >> j) & 1) * _HALF_Q for byte in msg for j in range(8))

    def tomsg(self) -> bytes:
        """Decode the polynomial to a 32-byte message."""
        out = bytearray()
        for i in range(0, KYBER_N, 8):
            byte = 0
            for j, c in enumerate(self.coeffs[i:i + 8]):
                t = ((c & _MASK32) << 1) & _MASK32
                t = (t + 1665) & _MASK32
                t = (t * 80635) & _MASK32
                byte |= ((t >> 28) & 1) << j
            out.append(byte)
        return bytes(out)

    @classmethod
    def getnoise(cls, sym: SymmetricPrimitives, seed: bytes, nonce: int, eta: int) -> Poly:
        """Sample a noise polynomial from the PRF output for `seed` and `nonce`."""
        if eta not in (2, 3):
            raise ValueError(f"eta must be 2 or 3, got {eta}")
        buf = sym.prf(eta * KYBER_N // 4, seed, nonce)
        return cls(poly_cbd(buf, eta))

    def ntt(self) -> Poly:
        """Forward NTT followed by Barrett reduction."""
        return Poly(ntt(self.coeffs)).reduce()

    def invntt_tomont(self) -> Poly:
        """Inverse NTT, multiplying by the Montgomery factor 2^16."""
        return Poly(invntt(self.coeffs))

    def basemul_montgomery(self, other: Poly) -> Poly:
        """Multiply two polynomials in the NTT domain."""
        a, b = self.coeffs, other.coeffs
        out: list[int] = []
        for i, zeta in enumerate(ZETAS[64:]):
            lo = 4 * i
            out.extend(basemul(a[lo:lo + 2], b[lo:lo + 2], zeta))
            out.extend(basemul(a[lo + 2:lo + 4], b[lo + 2:lo + 4], -zeta))
        return Poly(out)

    def tomont(self) -> Poly:
        """Convert all coefficients to the Montgomery domain."""
        return Poly(montgomery_reduce(c * _TOMONT_FACTOR) for c in self.coeffs)

    def reduce(self) -> Poly:
        """Barrett-reduce every coefficient to its centred representative."""
        return Poly(barrett_reduce(c) for c in self.coeffs)

    def __add__(self, other: Poly) -> Poly:
        if not isinstance(other, Poly):
            return NotImplemented
        return Poly(x + y for x, y in zip(self.coeffs, other.coeffs))

    def __sub__(self, other: Poly) -> Poly:
        if not isinstance(other, Poly):
            return NotImplemented
        return Poly(x - y for x, y in zip(self.coeffs, other.coeffs))