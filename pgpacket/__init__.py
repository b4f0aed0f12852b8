"""Encoding and decoding of OpenPGP packet building blocks: numbers, MPIs, key material, signatures and subpackets."""

__version__ = "0.1.0"
__all__ = [
    "curve_oid",
    "encoder",
    "key_flag",
    "mpi",
    "null_hash",
    "numbers",
    "public_keys",
    "signatures",
    "subpackets",
]