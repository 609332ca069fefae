"""Immutable catalog index built once from option groups and variants."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from skuselect.config import SelectorConfig

from .compat import CompatibilityChecker, CompatibilityDecision, make_rule
from .encoding import (
    BoundValue,
    CatalogConfigError,
    GroupIndex,
    OptionValue,
    PrimeAssignment,
    VariantId,
    VariantIndex,
    assign_primes,
    build_group_index,
    build_variant_index,
)
from .resolver import VariantResolver
from .selection import SelectionState

logger = logging.getLogger(__name__)

GroupValuesGetter = Callable[[Any], Iterable[Any]]
VariantValuesGetter = Callable[[Any], Iterable[Any]]
VariantIdGetter = Callable[[Any], VariantId]


@dataclass(frozen=True)
class CatalogIndex:
    """Prime encoding of a catalog plus the queries that run against it.

    The index never changes after construction. Each caller owns its own
    ``SelectionState`` and passes it into every query or command.
    """

    config: SelectorConfig
    group_names: tuple[str | None, ...]
    group_values: tuple[tuple[OptionValue, ...], ...]
    records: tuple[Any, ...]
    assignment: PrimeAssignment
    groups: GroupIndex
    variants: VariantIndex
    checker: CompatibilityChecker
    resolver: VariantResolver

    @property
    def group_count(self) -> int:
        return len(self.group_values)

    @property
    def variant_ids(self) -> tuple[VariantId, ...]:
        return tuple(entry.variant_id for entry in self.variants)

    def new_selection(self) -> SelectionState:
        return SelectionState.empty(self.group_count)

    def group_index_of(self, value: OptionValue) -> int | None:
        return self.groups.group_index_of(value)

    def toggle(self, state: SelectionState, value: OptionValue, group: int | None = None) -> int:
        return state.toggle(value, self.groups, group=group)

    def is_selected(self, state: SelectionState, value: OptionValue, group: int | None = None) -> bool:
        return self.checker.is_selected(state, value, group)

    def is_disabled(self, state: SelectionState, value: OptionValue, group: int | None = None) -> bool:
        return self.checker.is_disabled(state, value, group)

    def decide(self, state: SelectionState, value: OptionValue, group: int | None = None) -> CompatibilityDecision:
        return self.checker.decide(state, value, group)

    def selected_code(self, state: SelectionState) -> int:
        return state.selected_code(self.groups)

    def resolve_variant(self, state: SelectionState) -> VariantId | None:
        return self.resolver.resolve(state)

    def resolve_record(self, state: SelectionState) -> Any | None:
        """Return the source record of the resolved variant, if any."""
        entry = self.resolver.resolve_entry(state)
        return self.records[entry.position] if entry is not None else None

    def snapshot(self, state: SelectionState) -> list[dict[str, Any]]:
        """Describe every option value's selected/disabled state for rendering."""
        described = []
        for group, values in enumerate(self.group_values):
            options = [
                {
                    "value": value,
                    "selected": self.is_selected(state, value, group),
                    "disabled": self.is_disabled(state, value, group),
                }
                for value in values
            ]
            described.append({"group": group, "name": self.group_names[group], "options": options})
        return described


def build_catalog(
    groups: Sequence[Any],
    variants: Sequence[Any] = (),
    *,
    config: SelectorConfig | None = None,
    values_of_group: GroupValuesGetter | None = None,
    values_of_variant: VariantValuesGetter | None = None,
    id_of: VariantIdGetter | None = None,
) -> CatalogIndex:
    """Build a catalog index from collaborator-supplied groups and variants.

    Groups and variants may be field-keyed records (mappings) or already
    extracted values. Option values given as mappings are read through
    ``config.value_key`` and variant ids through ``config.id_key``. A variant
    whose values form a mapping of group name (or index) to value pins each
    value to that group.
    Raises ``CatalogConfigError`` if any variant references an unknown value.
    """
    config = config or SelectorConfig()
    extract = _ValueExtractor(config)
    values_of_group = values_of_group or extract.default_group_values
    values_of_variant = values_of_variant or extract.default_variant_values
    id_of = id_of or extract.default_variant_id

    group_values = tuple(
        tuple(extract.option_value(item) for item in (values_of_group(group) or ())) for group in groups
    )
    group_names = tuple(_group_name(group) for group in groups)
    records = tuple(variants)
    encoded_variants = [
        (id_of(variant), extract.variant_values(values_of_variant(variant), group_names))
        for variant in records
    ]

    assignment = assign_primes(group_values, keying=config.prime_keying)
    group_index = build_group_index(group_values, assignment)
    variant_index = build_variant_index(encoded_variants, group_index)
    rule = make_rule(config.compatibility)

    logger.debug(
        "Built catalog index: %d groups, %d variants, %s keying, %s compatibility.",
        len(group_values),
        len(variant_index),
        config.prime_keying,
        rule.name,
    )
    return CatalogIndex(
        config=config,
        group_names=group_names,
        group_values=group_values,
        records=records,
        assignment=assignment,
        groups=group_index,
        variants=variant_index,
        checker=CompatibilityChecker(groups=group_index, variants=variant_index, rule=rule),
        resolver=VariantResolver(groups=group_index, variants=variant_index),
    )


def _group_name(group: Any) -> str | None:
    if isinstance(group, Mapping):
        name = group.get("name")
        return None if name is None else str(name)
    return None


class _ValueExtractor:
    """Read ids and option values out of field-keyed records."""

    def __init__(self, config: SelectorConfig) -> None:
        self.id_key = config.id_key
        self.value_key = config.value_key

    def option_value(self, item: Any) -> OptionValue:
        if isinstance(item, Mapping):
            if self.value_key not in item:
                raise CatalogConfigError(f"Option record {item!r} has no '{self.value_key}' field.")
            item = item[self.value_key]
        if not isinstance(item, Hashable):
            raise CatalogConfigError(f"Option value {item!r} must be a hashable scalar.")
        return item

    def variant_values(self, raw: Any, group_names: Sequence[str | None]) -> list[OptionValue | BoundValue]:
        """Read a variant's values; a mapping pins each value to the group it names."""
        if raw is None:
            return []
        if isinstance(raw, Mapping):
            return [
                BoundValue(group=self._group_position(key, group_names), value=self.option_value(item))
                for key, item in raw.items()
            ]
        return [
            BoundValue(group=item.group, value=self.option_value(item.value))
            if isinstance(item, BoundValue)
            else self.option_value(item)
            for item in raw
        ]

    @staticmethod
    def _group_position(key: Any, group_names: Sequence[str | None]) -> int:
        if key in group_names:
            return group_names.index(key)
        if isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(group_names):
            return key
        raise CatalogConfigError(f"Variant values name unknown option group {key!r}.")

    def default_group_values(self, group: Any) -> Iterable[Any]:
        if isinstance(group, Mapping):
            return group.get("values") or ()
        if isinstance(group, (str, bytes)):
            raise CatalogConfigError(f"Option group {group!r} must be a sequence of values, not a string.")
        return group

    def default_variant_values(self, variant: Any) -> Iterable[Any] | None:
        if isinstance(variant, Mapping):
            return variant.get("values")
        raise CatalogConfigError(
            f"Cannot read option values of variant {variant!r}; pass values_of_variant."
        )

    def default_variant_id(self, variant: Any) -> VariantId:
        if isinstance(variant, Mapping):
            if self.id_key not in variant:
                raise CatalogConfigError(f"Variant record {variant!r} has no '{self.id_key}' field.")
            return variant[self.id_key]
        if hasattr(variant, self.id_key):
            return getattr(variant, self.id_key)
        raise CatalogConfigError(f"Cannot read id of variant {variant!r}; pass id_of.")
