"""Building blocks of the Kyber KEM: hashing, AES-256-CTR, NTT arithmetic, encodings and a CTR_DRBG."""

__version__ = "0.1.0"