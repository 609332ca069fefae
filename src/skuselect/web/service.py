"""Selection adapter between the HTTP layer and the catalog index."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from skuselect.config import SelectorConfig, load_config
from skuselect.data import CatalogLoader
from skuselect.engine import CatalogIndex, InvalidSelectionError, SelectionState


class SelectionService:
    """Answer selection requests against one immutable catalog.

    The service keeps no per-user state: the client sends its current
    selection with every request and receives the updated one back.
    """

    def __init__(self, catalog: CatalogIndex) -> None:
        self.catalog = catalog

    @classmethod
    def from_files(cls, catalog_path: str | Path, config_path: str | Path | None = None) -> SelectionService:
        config = load_config(config_path) if config_path else SelectorConfig()
        return cls(CatalogLoader(config).load_catalog(catalog_path))

    def describe_catalog(self) -> dict[str, Any]:
        return {
            "groups": [
                {"group": index, "name": name, "values": list(values)}
                for index, (name, values) in enumerate(zip(self.catalog.group_names, self.catalog.group_values))
            ],
            "variants": list(self.catalog.variant_ids),
        }

    def restore(self, selected: Sequence[Any] | None) -> SelectionState:
        """Rebuild a selection from client slots, rejecting values outside their group."""
        state = self.catalog.new_selection()
        if selected is None:
            return state
        if len(selected) != self.catalog.group_count:
            raise InvalidSelectionError(
                f"Selection must have {self.catalog.group_count} slots, got {len(selected)}."
            )
        for group, value in enumerate(selected):
            if value is None:
                continue
            self.catalog.toggle(state, value, group)
        return state

    def select(
        self,
        selected: Sequence[Any] | None = None,
        toggle: Any | None = None,
        group: int | None = None,
    ) -> dict[str, Any]:
        """Apply an optional toggle and report the resulting selection."""
        state = self.restore(selected)
        if toggle is not None:
            self.catalog.toggle(state, toggle, group)

        return {
            "selected": list(state.slots),
            "code": self.catalog.selected_code(state),
            "variant": self.catalog.resolve_variant(state),
            "complete": state.is_complete,
            "groups": self.catalog.snapshot(state),
        }
