"""Resolve a complete selection to the exactly-matching variant."""

from __future__ import annotations

from dataclasses import dataclass

from .encoding import GroupIndex, VariantEntry, VariantId, VariantIndex
from .selection import SelectionState


@dataclass(frozen=True)
class VariantResolver:
    """Find the first variant whose code equals the selection's code."""

    groups: GroupIndex
    variants: VariantIndex

    def resolve_entry(self, state: SelectionState) -> VariantEntry | None:
        return self.variants.first_equal_to(state.selected_code(self.groups))

    def resolve(self, state: SelectionState) -> VariantId | None:
        """Return the matching variant id, or None for partial or unmatched selections."""
        entry = self.resolve_entry(state)
        return entry.variant_id if entry is not None else None
