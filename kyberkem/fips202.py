"""SHA-3 and SHAKE built on a Keccak sponge."""

from __future__ import annotations

from .keccak import keccak_f1600

SHAKE128_RATE = 168
SHAKE256_RATE = 136
SHA3_256_RATE = 136
SHA3_512_RATE = 72

SHAKE_DOMAIN = 0x1F
SHA3_DOMAIN = 0x06

_STATE_BYTES = 200


class KeccakSponge:
    """An incremental Keccak sponge with a byte rate and a domain-separation byte."""

    def __init__(self, rate: int, domain: int) -> None:
        if rate <= 0 or rate >= _STATE_BYTES or rate % 8:
            raise ValueError(f"rate must be a multiple of 8 below {_STATE_BYTES}, got {rate}")
        if not 0 <= domain <= 0xFF:
            raise ValueError(f"domain byte must fit in 8 bits, got {domain}")
        self.rate = rate
        self.domain = domain
        self._state = bytearray(_STATE_BYTES)
        self._pos = 0
        self._finalized = False

    def _permute(self) -> None:
        lanes = [
            int.from_bytes(self._state[8 * i:8 * i + 8], "little") for i in range(25)
        ]
        self._state = bytearray(
            b"".join(lane.to_bytes(8, "little") for lane in keccak_f1600(lanes))
        )

    def _xor_in(self, offset: int, data: bytes) -> None:
        for i, byte in enumerate(data, offset):
            self._state[i] ^= byte

    def absorb(self, data: bytes) -> None:
        """Absorb more input; may be called repeatedly before finalize()."""
        if self._finalized:
            raise RuntimeError("cannot absorb into a finalized sponge")
        view = memoryview(bytes(data))
        while self._pos + len(view) >= self.rate:
            take = self.rate - self._pos
            self._xor_in(self._pos, view[:take])
            view = view[take:]
            self._permute()
            self._pos = 0
        self._xor_in(self._pos, view)
        self._pos += len(view)

    def finalize(self) -> None:
        """Apply domain separation and padding; switches the sponge to squeezing."""
        if self._finalized:
            raise RuntimeError("sponge is already finalized")
        self._state[self._pos] ^= self.domain
        self._state[self.rate - 1] ^= 0x80
        self._pos = self.rate
        self._finalized = True

    def squeeze(self, outlen: int) -> bytes:
        """Squeeze an arbitrary number of bytes; may be called repeatedly."""
        if not self._finalized:
            raise RuntimeError("finalize the sponge before squeezing")
        if outlen < 0:
            raise ValueError("output length must not be negative")
        out = bytearray()
        while outlen:
            if self._pos == self.rate:
                self._permute()
                self._pos = 0
            take = min(self.rate - self._pos, outlen)
            out += self._state[self._pos:self._pos + take]
            self._pos += take
            outlen -= take
        return bytes(out)

    def squeezeblocks(self, nblocks: int) -> bytes:
        """Squeeze whole blocks of `rate` bytes.

        Assumes no partial block has been squeezed since the last block boundary.
        """
        if not self._finalized:
            raise RuntimeError("finalize the sponge before squeezing")
        if nblocks < 0:
            raise ValueError("block count must not be negative")
        out = bytearray()
        for _ in range(nblocks):
            self._permute()
            out += self._state[:self.rate]
        return bytes(out)

    @classmethod
    def absorb_once(cls, rate: int, data: bytes, domain: int) -> KeccakSponge:
        """Create a sponge, absorb all of `data` and finalize it."""
        sponge = cls(rate, domain)
        sponge.absorb(data)
        sponge.finalize()
        return sponge


def shake128_absorb_once(data: bytes) -> KeccakSponge:
    """Return a finalized SHAKE128 sponge over `data`."""
    return KeccakSponge.absorb_once(SHAKE128_RATE, data, SHAKE_DOMAIN)


def shake256_absorb_once(data: bytes) -> KeccakSponge:
    """Return a finalized SHAKE256 sponge over `data`."""
    return KeccakSponge.absorb_once(SHAKE256_RATE, data, SHAKE_DOMAIN)


def _shake(sponge: KeccakSponge, outlen: int) -> bytes:
    if outlen < 0:
        raise ValueError("output length must not be negative")
    nblocks = outlen // sponge.rate
    head = sponge.squeezeblocks(nblocks)
    return head + sponge.squeeze(outlen - nblocks * sponge.rate)


def shake128(data: bytes, outlen: int) -> bytes:
    """SHAKE128 of `data`, `outlen` bytes long."""
    return _shake(shake128_absorb_once(data), outlen)


def shake256(data: bytes, outlen: int) -> bytes:
    """SHAKE256 of `data`, `outlen` bytes long."""
    return _shake(shake256_absorb_once(data), outlen)


def sha3_256(data: bytes) -> bytes:
    """SHA3-256 digest (32 bytes)."""
    return KeccakSponge.absorb_once(SHA3_256_RATE, data, SHA3_DOMAIN).squeeze(32)


def sha3_512(data: bytes) -> bytes:
    """SHA3-512 digest (64 bytes)."""
    return KeccakSponge.absorb_once(SHA3_512_RATE, data, SHA3_DOMAIN).squeeze(64)