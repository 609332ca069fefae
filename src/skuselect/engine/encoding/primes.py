"""Prime sequence generation."""

from __future__ import annotations

import math


def generate_primes(count: int) -> list[int]:
    """Return the first ``count`` primes in ascending order."""
    if count < 0:
        raise ValueError("count must be >= 0.")

    primes: list[int] = []
    candidate = 2
    while len(primes) < count:
        limit = math.isqrt(candidate)
        if all(candidate % prime for prime in primes if prime <= limit):
            primes.append(candidate)
        candidate += 1 if candidate == 2 else 2
    return primes
