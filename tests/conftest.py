from __future__ import annotations

import logging
import os

import pytest

from spgen.entropy import SecureSampler


class CountingSource:
    """os.urandom stand-in that records how many bytes were requested."""

    def __init__(self, data: bytes | None = None):
        self.calls = 0
        self.bytes_requested = 0
        self._data = data

    def __call__(self, k: int) -> bytes:
        self.calls += 1
        self.bytes_requested += k
        if self._data is None:
            return os.urandom(k)
        chunk, self._data = self._data[:k], self._data[k:]
        return chunk


@pytest.fixture
def counting_source():
    return CountingSource()


@pytest.fixture
def counting_sampler(counting_source):
    return SecureSampler(counting_source)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    # cli.main() and configure_logging() replace root handlers
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def chi_square(observed, expected):
    return sum((o - expected) ** 2 / expected for o in observed)


def chi_square_critical(df: int, z: float = 4.0) -> float:
    """
    Wilson–Hilferty approximation of the chi-square quantile.

    z = 4.0 sits far in the upper tail, so a correct sampler fails
    roughly once in 30,000 runs.
    """
    a = 2.0 / (9.0 * df)
    return df * (1.0 - a + z * a ** 0.5) ** 3
