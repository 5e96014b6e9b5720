"""
Secure sampler:
Wraps the operating system's CSPRNG and turns raw bytes into unbiased
indices. Every random draw made by the generator goes through here.
"""

from __future__ import annotations

import logging
import os
from typing import Callable

from .exceptions import RandomnessFailure

logger = logging.getLogger(__name__)

# Width of one draw in next_index(). 32 bits keeps the rejection rate
# below n / 2**32, i.e. effectively zero for alphabet-sized ranges.
INDEX_BYTES = 4
INDEX_SPACE = 1 << (8 * INDEX_BYTES)


class SecureSampler:
    """
    Bias-free random operations on top of a secure byte source.

    `source` takes a byte count and returns that many random bytes. It
    defaults to os.urandom; tests pass their own to count or break draws.
    The sampler keeps no state between calls, so one instance can be
    shared across threads.
    """

    def __init__(self, source: Callable[[int], bytes] | None = None) -> None:
        self.source = source or os.urandom

    def random_bytes(self, k: int) -> bytes:
        """
        Return `k` bytes from the secure source.

        Any failure of the source becomes RandomnessFailure. There is no
        fallback to a weaker generator.
        """
        if k < 0:
            raise ValueError(f"Byte count must be non-negative, got {k}.")
        if k == 0:
            return b""

        try:
            data = self.source(k)
        except (OSError, NotImplementedError) as exc:
            logger.error("Secure random source failed", exc_info=True)
            raise RandomnessFailure(f"Secure random source failed: {exc}") from exc

        if len(data) != k:
            logger.error(
                "Secure random source returned %d bytes, expected %d", len(data), k
            )
            raise RandomnessFailure(
                f"Secure random source returned {len(data)} bytes, expected {k}."
            )
        return bytes(data)

    def fill(self, buffer: bytearray | memoryview) -> None:
        """
        Overwrite every byte of `buffer` with secure random bytes.
        """
        view = memoryview(buffer).cast("B")
        view[:] = self.random_bytes(len(view))

    def next_index(self, n: int) -> int:
        """
        Return a uniformly distributed integer in [0, n).

        Draws a 32-bit value and rejects it when it falls at or above the
        largest multiple of n inside 2**32, so the final `% n` maps every
        index from the same number of values.
        """
        if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
            raise ValueError(f"Range size must be a positive integer, got {n!r}.")
        if n == 1:
            return 0
        if n > INDEX_SPACE:
            raise ValueError(f"Range size {n} exceeds 2**{8 * INDEX_BYTES}.")

        limit = INDEX_SPACE - (INDEX_SPACE % n)
        while True:
            value = int.from_bytes(self.random_bytes(INDEX_BYTES), "big")
            if value < limit:
                return value % n


# Default sampler instance used by the generator
DEFAULT_SAMPLER = SecureSampler()
