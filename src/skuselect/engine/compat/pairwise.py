"""Pairwise compatibility: candidate against each other selected group in turn."""

from __future__ import annotations

from ..encoding import GroupIndex, VariantIndex
from ..selection import SelectionState
from .base import BaseCompatibilityRule, CompatibilityDecision


class PairwiseRule(BaseCompatibilityRule):
    """Enable a value when every other selected value co-occurs with it in some variant.

    Each selected group is checked independently, so with three or more
    selected groups a value can pass every pair yet match no single variant.
    """

    name = "pairwise"

    def evaluate(
        self,
        prime: int,
        group: int,
        state: SelectionState,
        groups: GroupIndex,
        variants: VariantIndex,
    ) -> CompatibilityDecision:
        for other_group, selected in self.constraining_items(state, group):
            pair_code = groups.prime_of(selected, other_group) * prime
            if not variants.any_divisible_by(pair_code):
                return CompatibilityDecision(
                    False,
                    blocking_group=other_group,
                    reason=f"no variant combines it with {selected!r}",
                )
        return CompatibilityDecision(True)
