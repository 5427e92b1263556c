"""The Keccak-f[1600] permutation and little-endian lane helpers."""

from __future__ import annotations

from collections.abc import Sequence

NROUNDS = 24
_MASK64 = (1 << 64) - 1

# Rotation offsets for lane index x + 5*y.
_RHO = (
    0, 1, 62, 28, 27,
    36, 44, 6, 55, 20,
    3, 10, 43, 25, 39,
    41, 45, 15, 21, 8,
    18, 2, 61, 56, 14,
)


def _round_constants() -> tuple[int, ...]:
    """Derive the iota round constants from the Keccak LFSR."""
    constants = []
    lfsr = 1
    for _ in range(NROUNDS):
        rc = 0
        for j in range(7):
            if lfsr & 1:
                rc |= 1 << ((1 << j) - 1)
            lfsr = ((lfsr << 1) ^ 0x71) & 0xFF if lfsr & 0x80 else lfsr << 1
        constants.append(rc)
    return tuple(constants)


ROUND_CONSTANTS = _round_constants()


def _rol(value: int, offset: int) -> int:
    return ((value << offset) | (value >> (64 - offset))) & _MASK64


def keccak_f1600(state: Sequence[int]) -> list[int]:
    """Apply the 24-round Keccak-f[1600] permutation to 25 lanes.

    Returns a new list; the input is left untouched.
    """
    if len(state) != 25:
        raise ValueError(f"Keccak state needs 25 lanes, got {len(state)}")
    if any(not 0 <= lane <= _MASK64 for lane in state):
        raise ValueError("Keccak lanes must be unsigned 64-bit integers")

    a = list(state)
    for rc in ROUND_CONSTANTS:
        # theta
        c = [a[x] ^ a[x + 5] ^ a[x + 10] ^ a[x + 15] ^ a[x + 20] for x in range(5)]
        d = [c[(x - 1) % 5] ^ _rol(c[(x + 1) % 5], 1) for x in range(5)]
        a = [lane ^ d[i % 5] for i, lane in enumerate(a)]
        # rho and pi
        b = [0] * 25
        for i, lane in enumerate(a):
            x, y = i % 5, i // 5
            b[y + 5 * ((2 * x + 3 * y) % 5)] = _rol(lane, _RHO[i])
        # chi
        a = [
            b[i] ^ (~b[(i % 5 + 1) % 5 + 5 * (i // 5)] & b[(i % 5 + 2) % 5 + 5 * (i // 5)])
            for i in range(25)
        ]
        # iota
        a[0] ^= rc
    return a


def load64(data: bytes) -> int:
    """Read 8 bytes as a little-endian unsigned 64-bit integer."""
    if len(data) != 8:
        raise ValueError(f"load64 needs exactly 8 bytes, got {len(data)}")
    return int.from_bytes(data, "little")


def store64(value: int) -> bytes:
    """Write an unsigned 64-bit integer as 8 little-endian bytes."""
    if not 0 <= value <= _MASK64:
        raise ValueError("store64 needs an unsigned 64-bit integer")
    return value.to_bytes(8, "little")