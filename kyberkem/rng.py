"""The AES-256 CTR_DRBG and seed expander used to produce known-answer tests."""

from __future__ import annotations

from .aes256ctr import aes256_encrypt_block

_SEEDLEN = 48
_MAXLEN_LIMIT = 1 << 32


def _increment(counter: bytes) -> bytes:
    """Increment a big-endian counter, wrapping at its width."""
    width = len(counter)
    value = (int.from_bytes(counter, "big") + 1) % (1 << (8 * width))
    return value.to_bytes(width, "big")


class CtrDrbg:
    """A deterministic random bit generator built from AES-256 in counter mode."""

    def __init__(
        self, entropy_input: bytes, personalization_string: bytes | None = None
    ) -> None:
        seed_material = bytes(entropy_input)
        if len(seed_material) != _SEEDLEN:
            raise ValueError(f"entropy input must be {_SEEDLEN} bytes, got {len(seed_material)}")
        if personalization_string is not None:
            personalization = bytes(personalization_string)
            if len(personalization) != _SEEDLEN:
                raise ValueError(
                    f"personalization string must be {_SEEDLEN} bytes, got {len(personalization)}"
                )
            seed_material = bytes(a ^ b for a, b in zip(seed_material, personalization))
        self._key = bytes(32)
        self._v = bytes(16)
        self._update(seed_material)
        self.reseed_counter = 1

    def _update(self, provided_data: bytes | None) -> None:
        temp = bytearray()
        for _ in range(3):
            self._v = _increment(self._v)
            temp += aes256_encrypt_block(self._key, self._v)
        if provided_data is not None:
            temp = bytearray(a ^ b for a, b in zip(temp, provided_data))
        self._key = bytes(temp[:32])
        self._v = bytes(temp[32:])

    def randombytes(self, n: int) -> bytes:
        """Return the next `n` pseudo-random bytes."""
        if n < 0:
            raise ValueError("byte count must not be negative")
        out = bytearray()
        while len(out) < n:
            self._v = _increment(self._v)
            out += aes256_encrypt_block(self._key, self._v)
        self._update(None)
        self.reseed_counter += 1
        return bytes(out[:n])

    __call__ = randombytes


class SeedExpander:
    """Expands a 32-byte seed and 8-byte diversifier into at most `maxlen` bytes."""

    def __init__(self, seed: bytes, diversifier: bytes, maxlen: int) -> None:
        seed = bytes(seed)
        diversifier = bytes(diversifier)
        if len(seed) != 32:
            raise ValueError(f"seed must be 32 bytes, got {len(seed)}")
        if len(diversifier) != 8:
            raise ValueError(f"diversifier must be 8 bytes, got {len(diversifier)}")
        if not 0 <= maxlen < _MAXLEN_LIMIT:
            raise ValueError(f"maxlen must be below 2**32, got {maxlen}")
        self.length_remaining = maxlen
        self._key = seed
        self._ctr = diversifier + maxlen.to_bytes(4, "big") + bytes(4)
        self._buffer = bytes(16)
        self._buffer_pos = 16

    def expand(self, n: int) -> bytes:
        """Return the next `n` bytes; `n` must be less than what remains."""
        if n < 0:
            raise ValueError("byte count must not be negative")
        if n >= self.length_remaining:
            raise ValueError(
                f"cannot take {n} bytes with {self.length_remaining} remaining"
            )
        self.length_remaining -= n
        out = bytearray()
        while n > 0:
            available = 16 - self._buffer_pos
            if n <= available:
                out += self._buffer[self._buffer_pos:self._buffer_pos + n]
                self._buffer_pos += n
                break
            out += self._buffer[self._buffer_pos:]
            n -= available
            self._buffer = aes256_encrypt_block(self._key, self._ctr)
            self._buffer_pos = 0
            self._ctr = self._ctr[:12] + _increment(self._ctr[12:])
        return bytes(out)