"""Assign a unique prime to every option value of a catalog."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Literal

from .primes import generate_primes

logger = logging.getLogger(__name__)

OptionValue = Hashable
OptionKey = tuple[int, OptionValue]
PrimeKeying = Literal["group", "value"]

PRIME_KEYINGS: tuple[PrimeKeying, ...] = ("group", "value")


@dataclass(frozen=True)
class PrimeAssignment:
    """Immutable value -> prime mapping built once per catalog.

    ``by_key`` holds one prime per (group index, value) occurrence.
    ``by_value`` is the flat mapping keyed by the raw scalar, where a later
    occurrence of the same scalar overwrites an earlier one.
    """

    keying: PrimeKeying
    by_key: Mapping[OptionKey, int] = field(default_factory=dict)
    by_value: Mapping[OptionValue, int] = field(default_factory=dict)

    def prime_of(self, value: OptionValue, group: int | None = None) -> int | None:
        """Return the prime encoding ``value`` or None when it is unmapped."""
        if self.keying == "value":
            return self.by_value.get(value)
        if group is None:
            raise ValueError("group index is required with 'group' keying.")
        return self.by_key.get((group, value))


def assign_primes(
    groups: Sequence[Sequence[OptionValue]],
    keying: PrimeKeying = "group",
) -> PrimeAssignment:
    """Assign ascending primes group-major, then in value order."""
    if keying not in PRIME_KEYINGS:
        raise ValueError(f"Unsupported prime keying '{keying}'.")

    occurrences = [(group_index, value) for group_index, values in enumerate(groups) for value in values]
    primes = generate_primes(len(occurrences))

    by_key: dict[OptionKey, int] = {}
    by_value: dict[OptionValue, int] = {}
    for (group_index, value), prime in zip(occurrences, primes):
        if keying == "value" and value in by_value:
            logger.warning(
                "Option value %r appears in several groups; group %d overrides its prime.",
                value,
                group_index,
            )
        by_key.setdefault((group_index, value), prime)
        by_value[value] = prime

    logger.debug("Assigned %d primes to %d distinct option values.", len(primes), len(by_value))
    return PrimeAssignment(keying=keying, by_key=by_key, by_value=by_value)
