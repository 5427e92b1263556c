# kyberkem

Pure-Python building blocks of the Kyber key encapsulation mechanism.
There are no third-party dependencies: the Keccak permutation, the SHA-3
and SHAKE functions, and AES-256 in counter mode are all implemented in
the package itself.

The package is meant for study and for checking other implementations.
Being pure Python it is slow, and it makes no claim to resist timing
side channels.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Parameter sets

`kyberkem.params.KyberParams` describes one parameter set by its module
rank `k` (2, 3 or 4) and whether it uses the "90s" symmetric primitives.
It can also be looked up by name, case-insensitively:

```python
from kyberkem.params import KyberParams

params = KyberParams.from_name("Kyber768")
params.publickeybytes    # 1184
params.secretkeybytes    # 2400
params.ciphertextbytes   # 1088
params.eta1              # 2
params.sym               # the matching SymmetricPrimitives
```

| Name            | Public key | Secret key | Ciphertext | Shared secret |
|-----------------|-----------:|-----------:|-----------:|--------------:|
| `Kyber512`      |        800 |       1632 |        768 |            32 |
| `Kyber768`      |       1184 |       2400 |       1088 |            32 |
| `Kyber1024`     |       1568 |       3168 |       1568 |            32 |
| `Kyber512-90s`  |        800 |       1632 |        768 |            32 |
| `Kyber768-90s`  |       1184 |       2400 |       1088 |            32 |
| `Kyber1024-90s` |       1568 |       3168 |       1568 |            32 |

The module also defines the constants `KYBER512`, `KYBER768`,
`KYBER1024` and their `_90S` counterparts.

## Hashing and streams

* `kyberkem.fips202`: `sha3_256`, `sha3_512`, `shake128(data, outlen)`,
  `shake256(data, outlen)`, and the incremental `KeccakSponge` with
  `absorb`, `finalize`, `squeeze` and `squeezeblocks`.
* `kyberkem.keccak`: the raw `keccak_f1600` permutation on 25 lanes,
  with `load64` and `store64`.
* `kyberkem.aes256ctr`: `aes256_encrypt_block(key, block)`, the
  keystream `Aes256Ctr(key, nonce)` read 64 bytes at a time with
  `squeezeblocks`, and `aes256ctr_prf(outlen, key, nonce)`.
* `kyberkem.symmetric`: `symmetric_for(ninety_s)` returns a
  `SymmetricPrimitives` with `hash_h`, `hash_g`, `xof_absorb`, `prf` and
  `kdf`. The standard set uses SHA3-256, SHA3-512, SHAKE128 and SHAKE256;
  the 90s set uses SHA-256, SHA-512 and AES-256-CTR.

```python
from kyberkem.fips202 import KeccakSponge, SHAKE128_RATE, SHAKE_DOMAIN, shake128

sponge = KeccakSponge(SHAKE128_RATE, SHAKE_DOMAIN)
sponge.absorb(b"abc")
sponge.finalize()
assert sponge.squeeze(32) == shake128(b"abc", 32)
```

## Polynomial arithmetic

* `kyberkem.reduce`: `montgomery_reduce` and `barrett_reduce` modulo
  q = 3329.
* `kyberkem.ntt`: `ntt`, `invntt`, `basemul` and `fqmul` on lists of 256
  signed 16-bit coefficients.
* `kyberkem.cbd`: centred binomial sampling, `cbd2`, `cbd3` and
  `poly_cbd(buf, eta)`.
* `kyberkem.poly.Poly`: an immutable polynomial with `ntt`,
  `invntt_tomont`, `basemul_montgomery`, `tomont`, `reduce`, `+` and `-`;
  12-bit serialisation (`tobytes`, `frombytes`), 4- or 5-bit compression
  (`compress`, `decompress`), message encoding (`frommsg`, `tomsg`) and
  noise sampling (`getnoise(sym, seed, nonce, eta)`).
* `kyberkem.polyvec.PolyVec`: a vector of `Poly` with the same
  operations, 10- or 11-bit compression and the NTT-domain inner product
  `basemul_acc_montgomery`.
* `kyberkem.verify`: `verify(a, b)` returns 0 for equal byte strings and
  1 otherwise; `cmov(r, x, b)` selects `x` when `b` is 1 and `r` when it
  is 0, using a mask rather than a branch.

```python
from kyberkem.poly import Poly

msg = bytes(range(32))
assert Poly.frommsg(msg).tomsg() == msg

p = Poly(range(256))
assert Poly.frombytes(p.tobytes()) == p
```

## Deterministic randomness

`kyberkem.rng` holds the AES-256 CTR_DRBG used for known-answer tests
and a seed expander:

```python
from kyberkem.rng import CtrDrbg, SeedExpander

drbg = CtrDrbg(bytes(range(48)), None)
seed = drbg.randombytes(48)    # the instance is also callable: drbg(48)

expander = SeedExpander(bytes(32), bytes(8), 1000)
chunk = expander.expand(100)
```

`SeedExpander.expand` raises `ValueError` when the request is not smaller
than what remains of `maxlen`.

## What this package does not do

The package stops at the building blocks. It has no CPA-secure
encryption layer, no key generation, encapsulation or decapsulation, no
key-exchange protocols, no source of operating-system randomness and no
command-line program for writing known-answer test files. Those have to
be assembled from the parts above.