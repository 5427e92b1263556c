"""AES-256 in counter mode, used as the XOF and PRF of the 90s variant.

The keystream is AES-256(key, nonce || counter) with a 12-byte nonce and a
32-bit big-endian block counter that starts at zero and wraps modulo 2^32.
Output is produced four cipher blocks (64 bytes) at a time.
"""

from __future__ import annotations

AES256CTR_BLOCKBYTES = 64
KEY_BYTES = 32
NONCE_BYTES = 12

_AES_BLOCK = 16
_ROUNDS = 14
_MASK32 = 0xFFFFFFFF


def _xtime(a: int) -> int:
    return ((a << 1) ^ 0x1B) & 0xFF if a & 0x80 else a << 1


def _rotl8(x: int, shift: int) -> int:
    return ((x << shift) | (x >> (8 - shift))) & 0xFF


def _build_sbox() -> tuple[int, ...]:
    """Build the AES S-box from inverses in GF(2^8) and the affine map."""
    sbox = [0] * 256
    p = q = 1
    while True:
        # p walks the multiplicative group by multiplying with 3 ...
        p = p ^ ((p << 1) & 0xFF) ^ (0x1B if p & 0x80 else 0)
        # ... and q by dividing by 3, so q is always the inverse of p.
        q ^= q << 1
        q ^= q << 2
        q ^= q << 4
        q &= 0xFF
        if q & 0x80:
            q ^= 0x09
        sbox[p] = q ^ _rotl8(q, 1) ^ _rotl8(q, 2) ^ _rotl8(q, 3) ^ _rotl8(q, 4) ^ 0x63
        if p == 1:
            break
    sbox[0] = 0x63
    return tuple(sbox)


_SBOX = _build_sbox()


def _rotr32(word: int, shift: int) -> int:
    return ((word >> shift) | (word << (32 - shift))) & _MASK32


_T0 = tuple(
    (_xtime(s) << 24) | (s << 16) | (s << 8) | (_xtime(s) ^ s) for s in _SBOX
)
_T1 = tuple(_rotr32(t, 8) for t in _T0)
_T2 = tuple(_rotr32(t, 16) for t in _T0)
_T3 = tuple(_rotr32(t, 24) for t in _T0)


def _sub_word(word: int) -> int:
    return (
        (_SBOX[word >> 24] << 24)
        | (_SBOX[(word >> 16) & 0xFF] << 16)
        | (_SBOX[(word >> 8) & 0xFF] << 8)
        | _SBOX[word & 0xFF]
    )


def _check_key(key: bytes) -> bytes:
    key = bytes(key)
    if len(key) != KEY_BYTES:
        raise ValueError(f"AES-256 needs a {KEY_BYTES}-byte key, got {len(key)}")
    return key


def _check_nonce(nonce: bytes) -> bytes:
    nonce = bytes(nonce)
    if len(nonce) != NONCE_BYTES:
        raise ValueError(f"counter mode needs a {NONCE_BYTES}-byte nonce, got {len(nonce)}")
    return nonce


def _expand_key(key: bytes) -> tuple[int, ...]:
    """Expand a 32-byte key into 60 round-key words."""
    words = [int.from_bytes(key[4 * i:4 * i + 4], "big") for i in range(8)]
    rcon = 1
    for i in range(8, 4 * (_ROUNDS + 1)):
        t = words[i - 1]
        if i % 8 == 0:
            t = _sub_word(((t << 8) | (t >> 24)) & _MASK32) ^ (rcon << 24)
            rcon = _xtime(rcon)
        elif i % 8 == 4:
            t = _sub_word(t)
        words.append(words[i - 8] ^ t)
    return tuple(words)


def _encrypt(round_keys: tuple[int, ...], block: bytes) -> bytes:
    s = [int.from_bytes(block[4 * c:4 * c + 4], "big") ^ round_keys[c] for c in range(4)]
    for rnd in range(1, _ROUNDS):
        s = [
            _T0[s[c] >> 24]
            ^ _T1[(s[(c + 1) % 4] >> 16) & 0xFF]
            ^ _T2[(s[(c + 2) % 4] >> 8) & 0xFF]
            ^ _T3[s[(c + 3) % 4] & 0xFF]
            ^ round_keys[4 * rnd + c]
            for c in range(4)
        ]
    out = bytearray()
    for c in range(4):
        word = (
            (_SBOX[s[c] >> 24] << 24)
            | (_SBOX[(s[(c + 1) % 4] >> 16) & 0xFF] << 16)
            | (_SBOX[(s[(c + 2) % 4] >> 8) & 0xFF] << 8)
            | _SBOX[s[(c + 3) % 4] & 0xFF]
        ) ^ round_keys[4 * _ROUNDS + c]
        out += word.to_bytes(4, "big")
    return bytes(out)


def aes256_encrypt_block(key: bytes, block: bytes) -> bytes:
    """Encrypt one 16-byte block with AES-256."""
    block = bytes(block)
    if len(block) != _AES_BLOCK:
        raise ValueError(f"AES works on {_AES_BLOCK}-byte blocks, got {len(block)}")
    return _encrypt(_expand_key(_check_key(key)), block)


class Aes256Ctr:
    """An AES-256-CTR keystream that is read in 64-byte blocks."""

    blockbytes = AES256CTR_BLOCKBYTES

    def __init__(self, key: bytes, nonce: bytes) -> None:
        self._round_keys = _expand_key(_check_key(key))
        self._nonce = _check_nonce(nonce)
        self._counter = 0

    def _cipher_block(self, counter: int) -> bytes:
        return _encrypt(self._round_keys, self._nonce + counter.to_bytes(4, "big"))

    def squeezeblocks(self, nblocks: int) -> bytes:
        """Return the next `nblocks` * 64 bytes of keystream."""
        if nblocks < 0:
            raise ValueError("block count must not be negative")
        out = bytearray()
        for _ in range(nblocks):
            for j in range(AES256CTR_BLOCKBYTES // _AES_BLOCK):
                out += self._cipher_block((self._counter + j) & _MASK32)
            self._counter = (self._counter + 4) & _MASK32
        return bytes(out)


def aes256ctr_prf(outlen: int, key: bytes, nonce: bytes) -> bytes:
    """Return the first `outlen` keystream bytes for `key` and `nonce`."""
    if outlen < 0:
        raise ValueError("output length must not be negative")
    stream = Aes256Ctr(key, nonce)
    nblocks = -(-outlen // AES256CTR_BLOCKBYTES)
    return stream.squeezeblocks(nblocks)[:outlen]