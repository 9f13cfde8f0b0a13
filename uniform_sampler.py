#!/usr/bin/env python3
"""
uniform_sampler.py

Uniform random bitstring counts, used as a stand-in result when no quantum
backend is available.  Every bit of every draw is an independent fair coin
flip, so for N shots over L bits each bitstring is expected N / 2**L times.

    >>> counts = generate_counts_uniform(1000, 2, seed=42)
    >>> sum(counts.values())
    1000
"""

from collections import Counter
from typing import Dict, Optional

import numpy as np


class InvalidArgument(ValueError):
    """Raised for negative shot counts, bit lengths or seeds."""


def generate_counts_uniform(
    sample_count: int,
    bit_length: int,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> Dict[str, int]:
    """
    Draw `sample_count` bitstrings of `bit_length` fair bits and count them.

    A fresh generator is built from `seed` on every call (OS entropy when
    seed is None).  Pass `rng` instead to draw from a generator you own.

    Returns a dict bitstring -> count holding only bitstrings that were drawn.
    """
    if sample_count < 0:
        raise InvalidArgument(f"sample_count must be >= 0, got {sample_count}.")
    if bit_length < 0:
        raise InvalidArgument(f"bit_length must be >= 0, got {bit_length}.")

    if rng is None:
        if seed is not None and seed < 0:
            raise InvalidArgument(f"seed must be >= 0, got {seed}.")
        rng = np.random.default_rng(seed)
    elif seed is not None:
        raise InvalidArgument("Pass either seed or rng, not both.")

    # One row per shot, one column per bit.
    draws = rng.integers(0, 2, size=(sample_count, bit_length))
    symbols = np.where(draws == 1, "1", "0")

    counts = Counter("".join(row) for row in symbols)
    return dict(counts)


if __name__ == "__main__":
    for bitstring, count in sorted(generate_counts_uniform(1024, 2).items()):
        print(f"  {bitstring}: {count}")
