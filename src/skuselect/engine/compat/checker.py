"""Per-value enabled/disabled decisions against a selection."""

from __future__ import annotations

from dataclasses import dataclass

from ..encoding import GroupIndex, OptionValue, VariantIndex
from ..selection import SelectionState
from .base import BaseCompatibilityRule, CompatibilityDecision
from .joint import JointRule
from .pairwise import PairwiseRule

COMPATIBILITY_RULES: dict[str, type[BaseCompatibilityRule]] = {
    PairwiseRule.name: PairwiseRule,
    JointRule.name: JointRule,
}


def make_rule(name: str) -> BaseCompatibilityRule:
    """Instantiate a compatibility rule by its registered name."""
    try:
        return COMPATIBILITY_RULES[name]()
    except KeyError as exc:
        raise ValueError(
            f"Unknown compatibility rule '{name}'. Use one of {sorted(COMPATIBILITY_RULES)}."
        ) from exc


@dataclass(frozen=True)
class CompatibilityChecker:
    """Answer ``is_selected``/``is_disabled`` for any option value."""

    groups: GroupIndex
    variants: VariantIndex
    rule: BaseCompatibilityRule

    def is_selected(self, state: SelectionState, value: OptionValue, group: int | None = None) -> bool:
        target = self._resolve_group(value, group)
        return target is not None and state.is_selected(value, target)

    def is_disabled(self, state: SelectionState, value: OptionValue, group: int | None = None) -> bool:
        return not self.decide(state, value, group).enabled

    def decide(self, state: SelectionState, value: OptionValue, group: int | None = None) -> CompatibilityDecision:
        target = self._resolve_group(value, group)
        if target is None:
            return CompatibilityDecision(False, reason="unknown option value")
        prime = self.groups.prime_of(value, target)
        return self.rule.evaluate(prime, target, state, self.groups, self.variants)

    def _resolve_group(self, value: OptionValue, group: int | None) -> int | None:
        if group is None:
            return self.groups.group_index_of(value)
        return group if self.groups.contains(value, group) else None
