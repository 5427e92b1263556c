"""Hash functions, XOF and PRF of the standard and the 90s parameter sets."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Protocol

from .aes256ctr import AES256CTR_BLOCKBYTES, Aes256Ctr, aes256ctr_prf
from .fips202 import (
    SHAKE128_RATE,
    KeccakSponge,
    sha3_256,
    sha3_512,
    shake128_absorb_once,
    shake256,
)

KYBER_SYMBYTES = 32
KYBER_SSBYTES = 32


class Xof(Protocol):
    """An extendable-output stream read in whole blocks."""

    def squeezeblocks(self, nblocks: int) -> bytes: ...


def _check_seed(seed: bytes) -> bytes:
    seed = bytes(seed)
    if len(seed) != KYBER_SYMBYTES:
        raise ValueError(f"seed must be {KYBER_SYMBYTES} bytes, got {len(seed)}")
    return seed


def _check_byte(name: str, value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must fit in one byte, got {value}")
    return value


def kyber_shake128_absorb(seed: bytes, x: int, y: int) -> KeccakSponge:
    """Return a SHAKE128 sponge over seed || x || y, ready for squeezing."""
    seed = _check_seed(seed)
    extseed = seed + bytes((_check_byte("x", x), _check_byte("y", y)))
    return shake128_absorb_once(extseed)


def kyber_shake256_prf(outlen: int, key: bytes, nonce: int) -> bytes:
    """SHAKE256 of key || nonce, `outlen` bytes long."""
    key = _check_seed(key)
    return shake256(key + bytes((_check_byte("nonce", nonce),)), outlen)


def kyber_aes256xof_absorb(seed: bytes, x: int, y: int) -> Aes256Ctr:
    """Return an AES-256-CTR stream keyed by `seed` with nonce x || y || 0^10."""
    seed = _check_seed(seed)
    nonce = bytes((_check_byte("x", x), _check_byte("y", y))) + bytes(10)
    return Aes256Ctr(seed, nonce)


def kyber_aes256ctr_prf(outlen: int, key: bytes, nonce: int) -> bytes:
    """AES-256-CTR keystream for `key` with nonce byte followed by 11 zeros."""
    key = _check_seed(key)
    expnonce = bytes((_check_byte("nonce", nonce),)) + bytes(11)
    return aes256ctr_prf(outlen, key, expnonce)


@dataclass(frozen=True)
class SymmetricPrimitives:
    """The symmetric building blocks of one Kyber variant."""

    ninety_s: bool = False

    @property
    def xof_blockbytes(self) -> int:
        """Bytes produced per XOF block."""
        return AES256CTR_BLOCKBYTES if self.ninety_s else SHAKE128_RATE

    def hash_h(self, data: bytes) -> bytes:
        """The 32-byte hash H."""
        if self.ninety_s:
            return hashlib.sha256(bytes(data)).digest()
        return sha3_256(data)

    def hash_g(self, data: bytes) -> bytes:
        """The 64-byte hash G."""
        if self.ninety_s:
            return hashlib.sha512(bytes(data)).digest()
        return sha3_512(data)

    def xof_absorb(self, seed: bytes, x: int, y: int) -> Xof:
        """Start the XOF used to sample matrix entry (x, y)."""
        if self.ninety_s:
            return kyber_aes256xof_absorb(seed, x, y)
        return kyber_shake128_absorb(seed, x, y)

    def prf(self, outlen: int, key: bytes, nonce: int) -> bytes:
        """The pseudo-random function keyed by `key` with a one-byte nonce."""
        if self.ninety_s:
            return kyber_aes256ctr_prf(outlen, key, nonce)
        return kyber_shake256_prf(outlen, key, nonce)

    def kdf(self, data: bytes) -> bytes:
        """Derive the 32-byte shared secret."""
        if self.ninety_s:
            return hashlib.sha256(bytes(data)).digest()
        return shake256(data, KYBER_SSBYTES)


def symmetric_for(ninety_s: bool) -> SymmetricPrimitives:
    """Return the primitives of the 90s variant or of the standard one."""
    return SymmetricPrimitives(ninety_s=bool(ninety_s))