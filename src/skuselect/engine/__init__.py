"""Variant selection engine."""

from .catalog import CatalogIndex, build_catalog
from .compat import CompatibilityChecker, CompatibilityDecision, JointRule, PairwiseRule
from .encoding import BoundValue, CatalogConfigError, GroupIndex, PrimeAssignment, VariantIndex, generate_primes
from .resolver import VariantResolver
from .selection import InvalidSelectionError, SelectionState
from .selector import SkuSelector

__all__ = [
    "BoundValue",
    "CatalogConfigError",
    "CatalogIndex",
    "CompatibilityChecker",
    "CompatibilityDecision",
    "GroupIndex",
    "InvalidSelectionError",
    "JointRule",
    "PairwiseRule",
    "PrimeAssignment",
    "SelectionState",
    "SkuSelector",
    "VariantIndex",
    "VariantResolver",
    "build_catalog",
    "generate_primes",
]
