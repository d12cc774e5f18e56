"""
Fixed-output and plain XOF helpers over hashlib.

One-shot functions for the standard hashes that sit next to ParallelHash.
"""

from __future__ import annotations
import hashlib

from .cshake import message_bytes, shake
from .types import Security


def sha256(data: bytes) -> bytes:
    """SHA-256, 32 bytes."""
    return hashlib.sha256(message_bytes(data)).digest()


def sha3_256(data: bytes) -> bytes:
    """SHA3-256, 32 bytes."""
    return hashlib.sha3_256(message_bytes(data)).digest()


def sha3_512(data: bytes) -> bytes:
    """SHA3-512, 64 bytes."""
    return hashlib.sha3_512(message_bytes(data)).digest()


def shake128(data: bytes, output_bits: int) -> bytes:
    return shake(data, output_bits, Security.S128)


def shake256(data: bytes, output_bits: int) -> bytes:
    return shake(data, output_bits, Security.S256)
