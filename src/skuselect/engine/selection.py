"""Mutable per-user selection: one slot per option group."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from .encoding import GroupIndex, OptionValue

logger = logging.getLogger(__name__)


class InvalidSelectionError(ValueError):
    """Raised when a toggle targets a value that belongs to no option group."""


@dataclass
class SelectionState:
    """Current partial choice, holding at most one value per group.

    Slots compare values with ``==``, so scalars that are equal in Python
    (``1``, ``1.0`` and ``True``) count as the same selected value. Catalogs
    should not mix such scalars within one group.
    """

    slots: list[OptionValue | None] = field(default_factory=list)

    @classmethod
    def empty(cls, group_count: int) -> SelectionState:
        if group_count < 0:
            raise ValueError("group_count must be >= 0.")
        return cls(slots=[None] * group_count)

    def __len__(self) -> int:
        return len(self.slots)

    def value_at(self, group: int) -> OptionValue | None:
        return self.slots[group]

    def selected_items(self) -> list[tuple[int, OptionValue]]:
        """Return ``(group index, value)`` for every non-empty slot."""
        return [(group, value) for group, value in enumerate(self.slots) if value is not None]

    @property
    def selected_values(self) -> tuple[OptionValue, ...]:
        return tuple(value for _, value in self.selected_items())

    @property
    def is_complete(self) -> bool:
        return all(value is not None for value in self.slots)

    def is_selected(self, value: OptionValue, group: int) -> bool:
        return 0 <= group < len(self.slots) and self.slots[group] == value

    def clear(self) -> None:
        self.slots = [None] * len(self.slots)

    def copy(self) -> SelectionState:
        return SelectionState(slots=list(self.slots))

    def toggle(self, value: OptionValue, groups: GroupIndex, group: int | None = None) -> int:
        """Select ``value`` in its group, or deselect it if already selected.

        Returns the index of the affected group. The state is left untouched
        when ``value`` does not belong to any group (or to ``group`` when one
        is given).
        """
        self._check_shape(groups)
        target = groups.group_index_of(value) if group is None else group
        if target is None or not groups.contains(value, target):
            logger.warning("Rejected toggle of unknown option value %r (group=%r).", value, group)
            raise InvalidSelectionError(f"Option value {value!r} does not belong to any option group.")

        if self.slots[target] == value:
            self.slots[target] = None
        else:
            self.slots[target] = value
        return target

    def selected_code(self, groups: GroupIndex) -> int:
        """Return the product of selected primes; 1 for an empty selection."""
        self._check_shape(groups)
        return math.prod(groups.prime_of(value, group) for group, value in self.selected_items())

    def _check_shape(self, groups: GroupIndex) -> None:
        if len(self.slots) != len(groups):
            raise ValueError(
                f"Selection has {len(self.slots)} slots but the catalog has {len(groups)} option groups."
            )
