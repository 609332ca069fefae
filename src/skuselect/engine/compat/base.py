"""Base types for compatibility rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..encoding import GroupIndex, OptionValue, VariantIndex
from ..selection import SelectionState


@dataclass(frozen=True)
class CompatibilityDecision:
    """Whether a candidate value is still reachable from the current selection."""

    enabled: bool
    blocking_group: int | None = None
    reason: str | None = None


class BaseCompatibilityRule(ABC):
    """Decide if a candidate value can still lead to a cataloged variant."""

    name: str

    @abstractmethod
    def evaluate(
        self,
        prime: int,
        group: int,
        state: SelectionState,
        groups: GroupIndex,
        variants: VariantIndex,
    ) -> CompatibilityDecision:
        """Evaluate the candidate encoded by ``prime`` in option group ``group``."""

    @staticmethod
    def constraining_items(state: SelectionState, group: int) -> list[tuple[int, OptionValue]]:
        """Return selected ``(group, value)`` pairs outside the candidate's own group."""
        return [(index, value) for index, value in state.selected_items() if index != group]
