"""Edwards25519 keys, Schnorr and collective signatures, batch verification and node configuration."""

__version__ = "0.18.21"

__all__ = [
    "aggregation",
    "batch",
    "config",
    "cosi",
    "curve",
    "hashing",
    "key",
    "rand",
    "signature",
]