from __future__ import annotations

import pytest

from skuselect.engine.encoding import generate_primes


def test_generate_first_primes():
    assert generate_primes(10) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_generate_zero_primes_is_empty():
    assert generate_primes(0) == []


def test_generate_many_primes_are_distinct_and_ascending():
    primes = generate_primes(500)

    assert len(primes) == 500
    assert primes == sorted(set(primes))
    assert primes[-1] == 3571


def test_negative_count_raises():
    with pytest.raises(ValueError, match="count"):
        generate_primes(-1)
