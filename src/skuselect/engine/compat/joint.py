"""Joint compatibility: candidate against the whole selection at once."""

from __future__ import annotations

import math

from ..encoding import GroupIndex, VariantIndex
from ..selection import SelectionState
from .base import BaseCompatibilityRule, CompatibilityDecision


class JointRule(BaseCompatibilityRule):
    """Enable a value only when one variant contains it and every other selected value."""

    name = "joint"

    def evaluate(
        self,
        prime: int,
        group: int,
        state: SelectionState,
        groups: GroupIndex,
        variants: VariantIndex,
    ) -> CompatibilityDecision:
        constraining = self.constraining_items(state, group)
        if not constraining:
            return CompatibilityDecision(True)

        code = prime * math.prod(groups.prime_of(value, index) for index, value in constraining)
        if variants.any_divisible_by(code):
            return CompatibilityDecision(True)
        return CompatibilityDecision(False, reason="no variant matches the whole selection")
