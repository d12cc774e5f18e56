"""
parallelhash: NIST SP 800-185 ParallelHash

ParallelHash = cSHAKE("ParallelHash", S) ∘ (SHAKE per block, in parallel)

- Self-delimiting encodings for domain separation
- cSHAKE128/256: native SHAKE when uncustomized, pycryptodome otherwise
- ParallelHash128/256 with fork/join block hashing; the digest does not
  depend on the number of workers

Usage:
    from parallelhash import parallel_hash, cshake

    digest = parallel_hash(data, block_size=8192, output_bits=256)
    digest = parallel_hash(data, 8192, 512, b"my app", variant=256)
    digest = cshake(b"msg", 256, b"", b"Email Signature")

    # Reusable engine with an explicit worker count
    from parallelhash import ParallelHasher
    hasher = ParallelHasher(128, max_workers=4)
    digest = hasher.hash(data, 8192, 256)
"""

# Types and errors
from .types import (
    Security,
    ParallelHashError,
    InvalidLength,
    InvalidParameter,
    WorkerFailure,
)

# Encodings
from .encoding import (
    left_encode,
    right_encode,
    encode_string,
    byte_pad,
    decode_left,
    decode_right,
)

# cSHAKE
from .cshake import shake, cshake, cshake128, cshake256, customization_prefix

# ParallelHash
from .parallel import ParallelHasher, parallel_hash, parallel_hash128, parallel_hash256

# Plain hash helpers
from .wrappers import sha256, sha3_256, sha3_512, shake128, shake256

# Known-answer vectors
from .vectors import KnownAnswer, NIST_VECTORS, run_vectors

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Types
    "Security",
    "ParallelHashError",
    "InvalidLength",
    "InvalidParameter",
    "WorkerFailure",
    # Encodings
    "left_encode",
    "right_encode",
    "encode_string",
    "byte_pad",
    "decode_left",
    "decode_right",
    # cSHAKE
    "shake",
    "cshake",
    "cshake128",
    "cshake256",
    "customization_prefix",
    # ParallelHash
    "ParallelHasher",
    "parallel_hash",
    "parallel_hash128",
    "parallel_hash256",
    # Helpers
    "sha256",
    "sha3_256",
    "sha3_512",
    "shake128",
    "shake256",
    # Vectors
    "KnownAnswer",
    "NIST_VECTORS",
    "run_vectors",
]
