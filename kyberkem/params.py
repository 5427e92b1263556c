"""Parameter sets of the Kyber key encapsulation mechanism."""

from __future__ import annotations

from dataclasses import dataclass

from .symmetric import SymmetricPrimitives, symmetric_for

KYBER_N = 256
KYBER_Q = 3329
KYBER_SYMBYTES = 32
KYBER_SSBYTES = 32
KYBER_POLYBYTES = 384
KYBER_ETA2 = 2

_LEVEL_BY_K = {2: 512, 3: 768, 4: 1024}


@dataclass(frozen=True)
class KyberParams:
    """One Kyber parameter set: module rank `k` and the choice of symmetric primitives."""

    k: int = 3
    ninety_s: bool = False

    n = KYBER_N
    q = KYBER_Q
    symbytes = KYBER_SYMBYTES
    ssbytes = KYBER_SSBYTES
    polybytes = KYBER_POLYBYTES

    def __post_init__(self) -> None:
        if self.k not in _LEVEL_BY_K:
            raise ValueError(f"k must be one of 2, 3 or 4, got {self.k}")

    @property
    def name(self) -> str:
        """The algorithm name, such as Kyber768 or Kyber512-90s."""
        suffix = "-90s" if self.ninety_s else ""
        return f"Kyber{_LEVEL_BY_K[self.k]}{suffix}"

    @property
    def eta1(self) -> int:
        return 3 if self.k == 2 else 2

    @property
    def eta2(self) -> int:
        return KYBER_ETA2

    @property
    def polycompressedbytes(self) -> int:
        return 160 if self.k == 4 else 128

    @property
    def polyveccompressedbytes(self) -> int:
        return self.k * (352 if self.k == 4 else 320)

    @property
    def polyvecbytes(self) -> int:
        return self.k * KYBER_POLYBYTES

    @property
    def indcpa_msgbytes(self) -> int:
        return KYBER_SYMBYTES

    @property
    def indcpa_publickeybytes(self) -> int:
        return self.polyvecbytes + KYBER_SYMBYTES

    @property
    def indcpa_secretkeybytes(self) -> int:
        return self.polyvecbytes

    @property
    def indcpa_bytes(self) -> int:
        return self.polyveccompressedbytes + self.polycompressedbytes

    @property
    def publickeybytes(self) -> int:
        return self.indcpa_publickeybytes

    @property
    def secretkeybytes(self) -> int:
        """IND-CPA secret key, public key, H(pk) and the rejection value z."""
        return self.indcpa_secretkeybytes + self.indcpa_publickeybytes + 2 * KYBER_SYMBYTES

    @property
    def ciphertextbytes(self) -> int:
        return self.indcpa_bytes

    @property
    def sym(self) -> SymmetricPrimitives:
        """The hash functions, XOF and PRF of this parameter set."""
        return symmetric_for(self.ninety_s)

    @classmethod
    def from_name(cls, name: str) -> KyberParams:
        """Look up a parameter set by its algorithm name (case-insensitive)."""
        wanted = name.strip().lower()
        for k in _LEVEL_BY_K:
            for ninety_s in (False, True):
                params = cls(k, ninety_s)
                if params.name.lower() == wanted:
                    return params
        raise ValueError(f"unknown Kyber parameter set {name!r}")


KYBER512 = KyberParams(2)
KYBER768 = KyberParams(3)
KYBER1024 = KyberParams(4)
KYBER512_90S = KyberParams(2, True)
KYBER768_90S = KyberParams(3, True)
KYBER1024_90S = KyberParams(4, True)