"""Stateful selector: one selection over a shared catalog index."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from skuselect.config import SelectorConfig

from .catalog import CatalogIndex, build_catalog
from .encoding import OptionValue, VariantId
from .selection import SelectionState


class SkuSelector:
    """Track one user's selection and answer UI questions about it."""

    def __init__(self, catalog: CatalogIndex, state: SelectionState | None = None) -> None:
        self.catalog = catalog
        self.state = state.copy() if state is not None else catalog.new_selection()
        if len(self.state) != catalog.group_count:
            raise ValueError(
                f"Selection has {len(self.state)} slots but the catalog has {catalog.group_count} option groups."
            )

    @classmethod
    def from_catalog(
        cls,
        groups: Sequence[Any],
        variants: Sequence[Any] = (),
        *,
        config: SelectorConfig | None = None,
        **getters: Any,
    ) -> SkuSelector:
        """Build a fresh catalog index and wrap it with an empty selection."""
        return cls(build_catalog(groups, variants, config=config, **getters))

    @property
    def selected_values(self) -> tuple[OptionValue, ...]:
        return self.state.selected_values

    def is_selected(self, value: OptionValue, group: int | None = None) -> bool:
        return self.catalog.is_selected(self.state, value, group)

    def is_disabled(self, value: OptionValue, group: int | None = None) -> bool:
        return self.catalog.is_disabled(self.state, value, group)

    def toggle(self, value: OptionValue, group: int | None = None) -> int:
        """Select or deselect ``value``; raises InvalidSelectionError for unknown values."""
        return self.catalog.toggle(self.state, value, group)

    def selected_code(self) -> int:
        return self.catalog.selected_code(self.state)

    def resolve_variant(self) -> VariantId | None:
        return self.catalog.resolve_variant(self.state)

    def selected_variant(self) -> Any | None:
        """Return the source record of the resolved variant, if any."""
        return self.catalog.resolve_record(self.state)

    def reset(self) -> None:
        self.state.clear()

    def snapshot(self) -> list[dict[str, Any]]:
        return self.catalog.snapshot(self.state)
