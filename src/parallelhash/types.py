"""
Variant Registry and Errors for ParallelHash

NIST SP 800-185 defines every construction twice: once over the
128-bit-security sponge and once over the 256-bit one. The two differ only
in constants, which live on the Security enum below.
"""

from __future__ import annotations
from enum import IntEnum
from typing import Union


# =============================================================================
# ERRORS
# =============================================================================

class ParallelHashError(Exception):
    """Base class for every error raised by this package."""


class InvalidLength(ParallelHashError, ValueError):
    """
    A length is unusable: an output length that is not a positive multiple
    of 8 bits, an integer too large for a one-byte length header, or a
    truncated encoding.
    """


class InvalidParameter(ParallelHashError, ValueError):
    """A parameter is outside its domain (block size, rate, variant, ...)."""


class WorkerFailure(ParallelHashError, RuntimeError):
    """
    A block hashing task failed during the parallel phase.

    The whole hash is abandoned; the original exception is chained as
    __cause__.
    """

    def __init__(self, block_index: int, message: str):
        super().__init__(message)
        self.block_index = block_index


# =============================================================================
# VARIANT REGISTRY
# =============================================================================

class Security(IntEnum):
    """
    Security strength of a construction, in bits.

    Members carry everything that differs between the two variants:
    sponge rate, capacity, intermediate digest size and the base XOF.
    """
    S128 = 128
    S256 = 256

    @property
    def capacity_bits(self) -> int:
        return 2 * int(self)

    @property
    def rate(self) -> int:
        """Sponge rate in bytes: 168 for 128-bit, 136 for 256-bit."""
        return (1600 - self.capacity_bits) // 8

    @property
    def inner_bits(self) -> int:
        """Length of a ParallelHash intermediate block digest in bits."""
        return 2 * int(self)

    @property
    def xof_name(self) -> str:
        return f"shake_{int(self)}"

    @classmethod
    def coerce(cls, variant: Union['Security', int]) -> 'Security':
        """Accept a Security member or the plain integers 128 / 256."""
        if isinstance(variant, bool):
            raise InvalidParameter(f"variant must be 128 or 256, got {variant!r}")
        try:
            return cls(variant)
        except (ValueError, TypeError):
            raise InvalidParameter(
                f"variant must be 128 or 256, got {variant!r}"
            ) from None


Variant = Union[Security, int]
