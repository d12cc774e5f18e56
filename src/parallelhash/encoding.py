"""
SP 800-185 Encoding Primitives

Self-delimiting encodings used for domain separation:

    left_encode(x)   = n || enc(x)       (length byte first)
    right_encode(x)  = enc(x) || n       (length byte last)
    encode_string(S) = left_encode(8*|S|) || S
    bytepad(X, w)    = left_encode(w) || X || 0x00...  (multiple of w)

enc(x) is the minimal big-endian representation, at least one byte, and
its length n must fit in a single byte.
"""

from __future__ import annotations
from typing import Tuple

from .types import InvalidLength, InvalidParameter


MAX_ENCODED_BYTES = 255


def _minimal_bytes(x: int) -> bytes:
    """Big-endian bytes of x, shortest form (one byte for zero)."""
    if isinstance(x, bool) or not isinstance(x, int):
        raise InvalidParameter(f"cannot encode non-integer {x!r}")
    if x < 0:
        raise InvalidParameter(f"cannot encode negative integer {x}")
    n = max(1, (x.bit_length() + 7) // 8)
    if n > MAX_ENCODED_BYTES:
        raise InvalidLength(
            f"integer needs {n} bytes, encodings are limited to {MAX_ENCODED_BYTES}"
        )
    return x.to_bytes(n, 'big')


def _byte_string(value, what: str) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise InvalidParameter(f"{what} must be bytes-like, got {type(value).__name__}")


def left_encode(x: int) -> bytes:
    """Encode x with its byte length as a prefix."""
    enc = _minimal_bytes(x)
    return bytes([len(enc)]) + enc


def right_encode(x: int) -> bytes:
    """Encode x with its byte length as a suffix."""
    enc = _minimal_bytes(x)
    return enc + bytes([len(enc)])


def encode_string(s: bytes) -> bytes:
    """Prefix s with its length in bits."""
    s = _byte_string(s, "encode_string input")
    return left_encode(len(s) * 8) + s


def byte_pad(x: bytes, w: int) -> bytes:
    """
    Prepend left_encode(w) and zero-fill to a multiple of w bytes.

    w is the sponge rate in every use inside this package.
    """
    if isinstance(w, bool) or not isinstance(w, int) or w < 1:
        raise InvalidParameter(f"bytepad width must be a positive integer, got {w!r}")
    z = left_encode(w) + _byte_string(x, "bytepad input")
    return z + b'\x00' * (-len(z) % w)


# =============================================================================
# DECODING
# =============================================================================

def decode_left(data: bytes) -> Tuple[int, bytes]:
    """Parse a left_encode prefix. Returns (value, remaining bytes)."""
    if len(data) < 2:
        raise InvalidLength("Truncated left_encode header")
    n = data[0]
    if n == 0:
        raise InvalidLength("left_encode length byte must be at least 1")
    if len(data) < 1 + n:
        raise InvalidLength("Truncated left_encode value")
    return int.from_bytes(data[1:1 + n], 'big'), bytes(data[1 + n:])


def decode_right(data: bytes) -> Tuple[int, bytes]:
    """Parse a right_encode suffix. Returns (value, leading bytes)."""
    if len(data) < 2:
        raise InvalidLength("Truncated right_encode trailer")
    n = data[-1]
    if n == 0:
        raise InvalidLength("right_encode length byte must be at least 1")
    if len(data) < 1 + n:
        raise InvalidLength("Truncated right_encode value")
    start = len(data) - 1 - n
    return int.from_bytes(data[start:-1], 'big'), bytes(data[:start])
