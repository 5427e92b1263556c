"""Branch-free byte-string comparison and conditional selection."""

from __future__ import annotations


def verify(a: bytes, b: bytes) -> int:
    """Compare two byte strings of equal length.

    Returns 0 when they are equal and 1 otherwise, without branching on the data.
    """
    if len(a) != len(b):
        raise ValueError(f"cannot compare {len(a)} bytes with {len(b)} bytes")
    acc = 0
    for x, y in zip(a, b):
        acc |= x ^ y
    return ((-acc) & 0xFFFFFFFFFFFFFFFF) >> 63


def cmov(r: bytes, x: bytes, b: int) -> bytes:
    """Return `x` when b is 1 and `r` when b is 0, selecting byte by byte with a mask."""
    if b not in (0, 1):
        raise ValueError(f"condition must be 0 or 1, got {b}")
    if len(r) != len(x):
        raise ValueError(f"cannot select between {len(r)} and {len(x)} bytes")
    mask = (-b) & 0xFF
    return bytes(ri ^ (mask & (ri ^ xi)) for ri, xi in zip(r, x))