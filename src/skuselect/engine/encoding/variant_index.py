"""Encode every variant as the product of its option value primes."""

from __future__ import annotations

import logging
import math
from collections.abc import Hashable, Iterator, Sequence
from dataclasses import dataclass

from .assigner import OptionValue
from .group_index import GroupIndex

logger = logging.getLogger(__name__)

VariantId = Hashable


class CatalogConfigError(ValueError):
    """Raised when catalog groups and variants cannot be encoded consistently."""


@dataclass(frozen=True)
class VariantEntry:
    """Encoded variant: its id and the product of its value primes."""

    variant_id: VariantId
    code: int
    position: int

    def covers(self, code: int) -> bool:
        return self.code % code == 0


@dataclass(frozen=True)
class VariantIndex:
    """Encoded variants in catalog order."""

    entries: tuple[VariantEntry, ...]

    def __iter__(self) -> Iterator[VariantEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def any_divisible_by(self, code: int) -> bool:
        """Return True when at least one variant code is a multiple of ``code``."""
        return any(entry.covers(code) for entry in self.entries)

    def first_equal_to(self, code: int) -> VariantEntry | None:
        for entry in self.entries:
            if entry.code == code:
                return entry
        return None


@dataclass(frozen=True)
class BoundValue:
    """An option value pinned to a specific group index."""

    group: int
    value: OptionValue


def encode_variant(
    variant_id: VariantId,
    values: Sequence[OptionValue | BoundValue],
    group_index: GroupIndex,
) -> int:
    """Return the product of primes for ``values``.

    Items may be raw values or ``BoundValue`` pins. With per-group keying a
    raw scalar present in several groups is matched to a group so that no two
    values of the variant share one; ``CatalogConfigError`` is raised when no
    such placement exists.
    """
    candidates = [_candidate_groups(variant_id, item, group_index) for item in values]
    raw_values = [item.value if isinstance(item, BoundValue) else item for item in values]

    if group_index.assignment.keying == "value":
        return math.prod(group_index.prime_of(value, groups[0]) for value, groups in zip(raw_values, candidates))

    groups = _match_groups(variant_id, raw_values, candidates)
    return math.prod(group_index.prime_of(value, group) for value, group in zip(raw_values, groups))


def _candidate_groups(
    variant_id: VariantId,
    item: OptionValue | BoundValue,
    group_index: GroupIndex,
) -> tuple[int, ...]:
    if isinstance(item, BoundValue):
        if not group_index.contains(item.value, item.group):
            raise CatalogConfigError(
                f"Variant {variant_id!r} uses option value {item.value!r} that is not in option group {item.group}."
            )
        return (item.group,)

    groups = group_index.groups_of(item)
    if not groups:
        raise CatalogConfigError(
            f"Variant {variant_id!r} uses option value {item!r} that belongs to no option group."
        )
    return groups


def _match_groups(
    variant_id: VariantId,
    values: Sequence[OptionValue],
    candidates: Sequence[tuple[int, ...]],
) -> list[int]:
    """Give every value its own group by augmenting-path bipartite matching."""
    owner: dict[int, int] = {}

    def claim(position: int, visited: set[int]) -> bool:
        for group in candidates[position]:
            if group in visited:
                continue
            visited.add(group)
            if group not in owner or claim(owner[group], visited):
                owner[group] = position
                return True
        return False

    for position, value in enumerate(values):
        if not claim(position, set()):
            raise CatalogConfigError(
                f"Variant {variant_id!r} cannot place option value {value!r}: "
                "every option group holding it is already taken by another of its values."
            )

    groups = [0] * len(values)
    for group, position in owner.items():
        groups[position] = group
    return groups


def build_variant_index(
    variants: Sequence[tuple[VariantId, Sequence[OptionValue | BoundValue]]],
    group_index: GroupIndex,
) -> VariantIndex:
    """Encode ``(variant_id, values)`` pairs, preserving input order."""
    entries = tuple(
        VariantEntry(variant_id=variant_id, code=encode_variant(variant_id, values, group_index), position=position)
        for position, (variant_id, values) in enumerate(variants)
    )
    logger.debug("Encoded %d variants.", len(entries))
    return VariantIndex(entries=entries)
