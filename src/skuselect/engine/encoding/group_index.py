"""Per-group prime lists used for reverse lookup of option values."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .assigner import OptionValue, PrimeAssignment


@dataclass(frozen=True)
class GroupIndex:
    """Primes of each option group, in group order and value order."""

    assignment: PrimeAssignment
    prime_groups: tuple[tuple[int, ...], ...]

    def __len__(self) -> int:
        return len(self.prime_groups)

    def groups_of(self, value: OptionValue) -> tuple[int, ...]:
        """Return every group index whose prime list encodes ``value``."""
        matches: list[int] = []
        for group_index, primes in enumerate(self.prime_groups):
            prime = self.prime_of(value, group_index)
            if prime is not None and prime in primes:
                matches.append(group_index)
        return tuple(matches)

    def group_index_of(self, value: OptionValue) -> int | None:
        """Return the first group containing ``value`` or None if unknown."""
        groups = self.groups_of(value)
        return groups[0] if groups else None

    def prime_of(self, value: OptionValue, group: int) -> int | None:
        return self.assignment.prime_of(value, group)

    def contains(self, value: OptionValue, group: int) -> bool:
        if not (0 <= group < len(self.prime_groups)):
            return False
        prime = self.prime_of(value, group)
        return prime is not None and prime in self.prime_groups[group]


def build_group_index(
    groups: Sequence[Sequence[OptionValue]],
    assignment: PrimeAssignment,
) -> GroupIndex:
    """Collect the primes of each group's values."""
    prime_groups = []
    for group_index, values in enumerate(groups):
        primes = []
        for value in values:
            prime = assignment.prime_of(value, group_index)
            if prime is not None:
                primes.append(prime)
        prime_groups.append(tuple(primes))
    return GroupIndex(assignment=assignment, prime_groups=tuple(prime_groups))
