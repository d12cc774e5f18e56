"""
ParallelHash (NIST SP 800-185, Section 6)

    ParallelHash(X, B, L, S):
        n = ceil(|X| / B), at least 1
        z = left_encode(B)
        for i in 0 .. n-1:
            z = z || SHAKE(X[i*B : (i+1)*B], 2c)
        z = z || right_encode(n) || right_encode(L)
        return cSHAKE(z, L, "ParallelHash", S)

The per-block SHAKE calls are independent. They run on a thread pool
(hashlib releases the GIL on large buffers) and write into slots reserved
by block index, so the digest is the same for any worker count.
"""

from __future__ import annotations
import hashlib
import logging
import os
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import List, Optional, Tuple

from .cshake import Text, as_bytes, check_output_bits, cshake, message_bytes
from .encoding import left_encode, right_encode
from .types import InvalidParameter, Security, Variant, WorkerFailure


_LOGGER = logging.getLogger(__name__)

FUNCTION_NAME = b'ParallelHash'


def _positive_int(value, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidParameter(f"{what} must be a positive integer, got {value!r}")
    return value


class ParallelHasher:
    """
    ParallelHash engine for one security level.

    Usage:
        hasher = ParallelHasher(128, max_workers=4)
        digest = hasher.hash(data, block_size=8192, output_bits=256)

    Configuration:
        max_workers: thread count, None for os.cpu_count(); 1 runs in the
            calling thread
        blocks_per_task: consecutive blocks hashed by one task; None derives
            it from the block and worker counts
        min_parallel_blocks: messages with fewer blocks are hashed
            sequentially
    """

    DEFAULT_MIN_PARALLEL_BLOCKS = 2
    DEFAULT_TASKS_PER_WORKER = 4

    def __init__(
        self,
        variant: Variant = Security.S128,
        max_workers: Optional[int] = None,
        blocks_per_task: Optional[int] = None,
        min_parallel_blocks: int = DEFAULT_MIN_PARALLEL_BLOCKS
    ):
        self.security = Security.coerce(variant)
        if max_workers is not None:
            _positive_int(max_workers, "max_workers")
        if blocks_per_task is not None:
            _positive_int(blocks_per_task, "blocks_per_task")
        self.max_workers = max_workers
        self.blocks_per_task = blocks_per_task
        self.min_parallel_blocks = _positive_int(min_parallel_blocks, "min_parallel_blocks")

        self._xof = getattr(hashlib, self.security.xof_name)
        self._inner_len = self.security.inner_bits // 8

    # -------------------------------------------------------------------------
    # Block partitioning
    # -------------------------------------------------------------------------

    @staticmethod
    def block_count(length: int, block_size: int) -> int:
        """ceil(length / block_size); an empty message still has one block."""
        return max(1, -(-length // block_size))

    @classmethod
    def split(cls, data: bytes, block_size: int) -> List[bytes]:
        """Blocks of data in index order."""
        _positive_int(block_size, "block size")
        n = cls.block_count(len(data), block_size)
        return [data[i * block_size:(i + 1) * block_size] for i in range(n)]

    # -------------------------------------------------------------------------
    # Intermediate hashing
    # -------------------------------------------------------------------------

    def hash_block(self, block: bytes) -> bytes:
        """
        Intermediate digest of one block: SHAKE of the block, 256 bits for
        the 128-bit variant and 512 bits for the 256-bit variant.

        block may be a read-only memoryview into the message.
        """
        return self._xof(block).digest(self._inner_len)

    def _hash_span(
        self,
        view: memoryview,
        block_size: int,
        start: int,
        stop: int,
        slots: List[Optional[bytes]]
    ) -> None:
        for index in range(start, stop):
            block = view[index * block_size:(index + 1) * block_size]
            try:
                slots[index] = self.hash_block(block)
            except Exception as exc:
                _LOGGER.error("block %d of ParallelHash%d failed: %r",
                              index, self.security, exc)
                raise WorkerFailure(
                    index, f"hashing block {index} failed: {exc!r}"
                ) from exc

    def _plan(self, n: int) -> Tuple[int, int]:
        """Return (workers, blocks_per_task) for n blocks."""
        if n < self.min_parallel_blocks:
            return 1, n
        workers = self.max_workers or os.cpu_count() or 1
        per_task = self.blocks_per_task
        if per_task is None:
            per_task = max(1, -(-n // (workers * self.DEFAULT_TASKS_PER_WORKER)))
        tasks = -(-n // per_task)
        return min(workers, tasks), per_task

    def intermediate_digests(self, data: bytes, block_size: int) -> List[bytes]:
        """Digest of every block, in block index order."""
        message = message_bytes(data)
        _positive_int(block_size, "block size")
        return self._digests(message, block_size)

    def _digests(self, message: bytes, block_size: int) -> List[bytes]:
        n = self.block_count(len(message), block_size)
        slots: List[Optional[bytes]] = [None] * n
        view = memoryview(message)
        workers, per_task = self._plan(n)

        if workers == 1:
            _LOGGER.debug("ParallelHash%d: %d block(s) of %d bytes, sequential",
                          self.security, n, block_size)
            self._hash_span(view, block_size, 0, n, slots)
            return slots  # type: ignore[return-value]

        spans = [(start, min(start + per_task, n)) for start in range(0, n, per_task)]
        _LOGGER.debug("ParallelHash%d: %d block(s) of %d bytes, %d task(s) on %d worker(s)",
                      self.security, n, block_size, len(spans), workers)

        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(self._hash_span, view, block_size, start, stop, slots)
                for start, stop in spans
            ]
            wait(futures, return_when=FIRST_EXCEPTION)
            failures = [
                f.exception() for f in futures
                if f.done() and not f.cancelled() and f.exception() is not None
            ]
            if failures:
                for f in futures:
                    f.cancel()
                raise min(failures, key=lambda e: getattr(e, 'block_index', n))

        return slots  # type: ignore[return-value]

    # -------------------------------------------------------------------------
    # Final combination
    # -------------------------------------------------------------------------

    @staticmethod
    def final_input(block_size: int, digests: List[bytes], output_bits: int) -> bytes:
        """left_encode(B) || d_0 || ... || d_{n-1} || right_encode(n) || right_encode(L)."""
        return b''.join([
            left_encode(block_size),
            *digests,
            right_encode(len(digests)),
            right_encode(output_bits),
        ])

    def hash(
        self,
        data: bytes,
        block_size: int,
        output_bits: int,
        customization: Text = b''
    ) -> bytes:
        """
        ParallelHash of data.

        Args:
            data: message X
            block_size: B in bytes, at least 1
            output_bits: L, a positive multiple of 8
            customization: S

        Returns:
            L/8 bytes
        """
        message = message_bytes(data)
        _positive_int(block_size, "block size")
        check_output_bits(output_bits)
        custom = as_bytes(customization, "customization string")
        # B and L must fit their length headers before any block is hashed
        left_encode(block_size)
        right_encode(output_bits)

        digests = self._digests(message, block_size)
        z = self.final_input(block_size, digests, output_bits)
        return cshake(z, output_bits, FUNCTION_NAME, custom, self.security)


# =============================================================================
# FUNCTIONAL API
# =============================================================================

def parallel_hash(
    data: bytes,
    block_size: int,
    output_bits: int,
    customization: Text = b'',
    variant: Variant = Security.S128,
    max_workers: Optional[int] = None
) -> bytes:
    """ParallelHash128 / ParallelHash256 of data."""
    return ParallelHasher(variant, max_workers=max_workers).hash(
        data, block_size, output_bits, customization
    )


def parallel_hash128(
    data: bytes,
    block_size: int,
    output_bits: int,
    customization: Text = b''
) -> bytes:
    return parallel_hash(data, block_size, output_bits, customization, Security.S128)


def parallel_hash256(
    data: bytes,
    block_size: int,
    output_bits: int,
    customization: Text = b''
) -> bytes:
    return parallel_hash(data, block_size, output_bits, customization, Security.S256)
