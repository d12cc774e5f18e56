"""
cSHAKE: Customizable SHAKE (NIST SP 800-185, Section 3)

    cSHAKE(X, L, N, S) = SHAKE(X, L)                                  if N = S = ""
                       = KECCAK[c](bytepad(encode_string(N) ||
                                           encode_string(S), rate) || X || 00, L)

The plain case runs on hashlib's native SHAKE. hashlib fixes the SHAKE
padding byte, so the customized case runs on pycryptodome's cSHAKE XOF.
"""

from __future__ import annotations
import hashlib
from typing import Union

from Crypto.Hash.cSHAKE128 import cSHAKE_XOF

from .encoding import byte_pad, encode_string
from .types import InvalidLength, InvalidParameter, Security, Variant


Text = Union[str, bytes, bytearray, memoryview]


def as_bytes(value: Text, what: str) -> bytes:
    if isinstance(value, str):
        return value.encode('utf-8')
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise InvalidParameter(f"{what} must be str or bytes, got {type(value).__name__}")


def message_bytes(data) -> bytes:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise InvalidParameter(f"message must be bytes-like, got {type(data).__name__}")


def check_output_bits(output_bits: int) -> int:
    """Validate an output length in bits; return it in bytes."""
    if isinstance(output_bits, bool) or not isinstance(output_bits, int):
        raise InvalidLength(f"output length must be an integer number of bits, got {output_bits!r}")
    if output_bits <= 0 or output_bits % 8:
        raise InvalidLength(f"output length must be a positive multiple of 8 bits, got {output_bits}")
    return output_bits // 8


def shake(data: bytes, output_bits: int, variant: Variant = Security.S128) -> bytes:
    """Plain SHAKE128/SHAKE256 of data, output_bits long."""
    security = Security.coerce(variant)
    out_len = check_output_bits(output_bits)
    return hashlib.new(security.xof_name, message_bytes(data)).digest(out_len)


def customization_prefix(
    function_name: Text,
    customization: Text,
    variant: Variant = Security.S128
) -> bytes:
    """bytepad(encode_string(N) || encode_string(S), rate)."""
    security = Security.coerce(variant)
    n = as_bytes(function_name, "function name")
    s = as_bytes(customization, "customization string")
    return byte_pad(encode_string(n) + encode_string(s), security.rate)


def cshake(
    data: bytes,
    output_bits: int,
    function_name: Text = b'',
    customization: Text = b'',
    variant: Variant = Security.S128
) -> bytes:
    """
    cSHAKE128 / cSHAKE256.

    Args:
        data: message X
        output_bits: L, a positive multiple of 8
        function_name: N, reserved for NIST-defined functions
        customization: S, caller chosen
        variant: 128 or 256

    Returns:
        L/8 bytes
    """
    security = Security.coerce(variant)
    out_len = check_output_bits(output_bits)
    message = message_bytes(data)
    n = as_bytes(function_name, "function name")
    s = as_bytes(customization, "customization string")

    if not n and not s:
        return hashlib.new(security.xof_name, message).digest(out_len)

    # cSHAKE_XOF builds the bytepad prefix from (custom, function) itself
    return cSHAKE_XOF(message, s, security.capacity_bits, n).read(out_len)


def cshake128(
    data: bytes,
    output_bits: int,
    function_name: Text = b'',
    customization: Text = b''
) -> bytes:
    return cshake(data, output_bits, function_name, customization, Security.S128)


def cshake256(
    data: bytes,
    output_bits: int,
    function_name: Text = b'',
    customization: Text = b''
) -> bytes:
    return cshake(data, output_bits, function_name, customization, Security.S256)
