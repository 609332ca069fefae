"""Prime encoding of option values and variants."""

from .assigner import PRIME_KEYINGS, OptionKey, OptionValue, PrimeAssignment, PrimeKeying, assign_primes
from .group_index import GroupIndex, build_group_index
from .primes import generate_primes
from .variant_index import (
    BoundValue,
    CatalogConfigError,
    VariantEntry,
    VariantId,
    VariantIndex,
    build_variant_index,
    encode_variant,
)

__all__ = [
    "PRIME_KEYINGS",
    "BoundValue",
    "CatalogConfigError",
    "GroupIndex",
    "OptionKey",
    "OptionValue",
    "PrimeAssignment",
    "PrimeKeying",
    "VariantEntry",
    "VariantId",
    "VariantIndex",
    "assign_primes",
    "build_group_index",
    "build_variant_index",
    "encode_variant",
    "generate_primes",
]
