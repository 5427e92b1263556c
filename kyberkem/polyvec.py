"""Vectors of polynomials with Kyber's serialisation and compression."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .poly import KYBER_N, KYBER_POLYBYTES, KYBER_Q, Poly

# Compressed bytes per polynomial mapped to bits per coefficient.
_BITS_BY_SIZE = {320: 10, 352: 11}


def _positive(c: int) -> int:
    """Map an int16 coefficient to its non-negative 16-bit representative."""
    return (c + ((c >> 15) & KYBER_Q)) & 0xFFFF


def _compress_coeff(c: int, bits: int) -> int:
    t = _positive(c)
    if bits == 11:
        d0 = (((t << 11) + 1664) * 645084) >> 31
    else:
        d0 = (((t << 10) + 1665) * 1290167) >> 32
    return d0 & ((1 << bits) - 1)


def _pack(values: Iterable[int], bits: int, nbytes: int) -> bytes:
    acc = 0
    for i, v in enumerate(values):
        acc |= v << (bits * i)
    return acc.to_bytes(nbytes, "little")


def _unpack(data: bytes, bits: int) -> Iterator[int]:
    acc = int.from_bytes(data, "little")
    mask = (1 << bits) - 1
    return ((acc >> (bits * i)) & mask for i in range(len(data) * 8 // bits))


class PolyVec:
    """An immutable vector of polynomials in R_q."""

    __slots__ = ("polys",)

    def __init__(self, polys: Iterable[Poly]) -> None:
        items = tuple(polys)
        if not items:
            raise ValueError("a polynomial vector needs at least one polynomial")
        for p in items:
            if not isinstance(p, Poly):
                raise TypeError(f"expected Poly, got {type(p).__name__}")
        self.polys = items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PolyVec):
            return NotImplemented
        return self.polys == other.polys

    def __hash__(self) -> int:
        return hash(self.polys)

    def __repr__(self) -> str:
        return f"PolyVec({list(self.polys)!r})"

    def __iter__(self) -> Iterator[Poly]:
        return iter(self.polys)

    def __len__(self) -> int:
        return len(self.polys)

    def __getitem__(self, index: int) -> Poly:
        return self.polys[index]

    def _same_length(self, other: PolyVec) -> None:
        if len(self) != len(other):
            raise ValueError(f"vector lengths differ: {len(self)} and {len(other)}")

    def compress(self, bytes_per_poly: int) -> bytes:
        """Compress to 10 bits (320 bytes) or 11 bits (352 bytes) per coefficient."""
        bits = _BITS_BY_SIZE.get(bytes_per_poly)
        if bits is None:
            raise ValueError(f"compressed size must be 320 or 352 bytes, got {bytes_per_poly}")
        return b"".join(
            _pack((_compress_coeff(c, bits) for c in p), bits, bytes_per_poly)
            for p in self.polys
        )

    @classmethod
    def decompress(cls, data: bytes, k: int) -> PolyVec:
        """Decompress a vector of `k` polynomials; approximate inverse of compress()."""
        data = bytes(data)
        if k <= 0:
            raise ValueError(f"k must be positive, got {k}")
        size, rest = divmod(len(data), k)
        bits = _BITS_BY_SIZE.get(size)
        if rest or bits is None:
            raise ValueError(
                f"{len(data)} bytes is not a compressed vector of {k} polynomials"
            )
        half = 1 << (bits - 1)
        return cls(
            Poly((v * KYBER_Q + half) >> bits for v in _unpack(data[i:i + size], bits))
            for i in range(0, len(data), size)
        )

    def tobytes(self) -> bytes:
        """Serialise every polynomial to 384 bytes and concatenate."""
        return b"".join(p.tobytes() for p in self.polys)

    @classmethod
    def frombytes(cls, data: bytes, k: int) -> PolyVec:
        """Deserialise `k` polynomials; inverse of tobytes()."""
        data = bytes(data)
        if k <= 0:
            raise ValueError(f"k must be positive, got {k}")
        if len(data) != k * KYBER_POLYBYTES:
            raise ValueError(
                f"serialised vector of {k} polynomials must be "
                f"{k * KYBER_POLYBYTES} bytes, got {len(data)}"
            )
        return cls(
            Poly.frombytes(data[i:i + KYBER_POLYBYTES])
            for i in range(0, len(data), KYBER_POLYBYTES)
        )

    def ntt(self) -> PolyVec:
        """Forward NTT of every polynomial."""
        return PolyVec(p.ntt() for p in self.polys)

    def invntt_tomont(self) -> PolyVec:
        """Inverse NTT of every polynomial, multiplying by 2^16."""
        return PolyVec(p.invntt_tomont() for p in self.polys)

    def basemul_acc_montgomery(self, other: PolyVec) -> Poly:
        """Inner product in the NTT domain, multiplied by 2^-16 and reduced."""
        self._same_length(other)
        pairs = iter(zip(self.polys, other.polys))
        first_a, first_b = next(pairs)
        acc = first_a.basemul_montgomery(first_b)
        for a, b in pairs:
            acc = acc + a.basemul_montgomery(b)
        return acc.reduce()

    def reduce(self) -> PolyVec:
        """Barrett-reduce every coefficient."""
        return PolyVec(p.reduce() for p in self.polys)

    def __add__(self, other: PolyVec) -> PolyVec:
        if not isinstance(other, PolyVec):
            return NotImplemented
        self._same_length(other)
        return PolyVec(a + b for a, b in zip(self.polys, other.polys))


__all__ = ["PolyVec", "KYBER_N"]