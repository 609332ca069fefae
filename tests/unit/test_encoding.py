from __future__ import annotations

import pytest

from skuselect.engine.encoding import (
    BoundValue,
    CatalogConfigError,
    assign_primes,
    build_group_index,
    build_variant_index,
)


def test_primes_assigned_group_major_in_value_order():
    assignment = assign_primes([["Red", "Blue"], ["S", "M"]])

    assert assignment.by_key == {(0, "Red"): 2, (0, "Blue"): 3, (1, "S"): 5, (1, "M"): 7}
    assert assignment.by_value == {"Red": 2, "Blue": 3, "S": 5, "M": 7}


def test_value_keying_last_occurrence_wins():
    assignment = assign_primes([["S", "M"], ["M", "G"]], keying="value")

    assert assignment.by_value == {"S": 2, "M": 5, "G": 7}
    assert assignment.prime_of("M") == 5
    assert assignment.prime_of("M", 0) == 5


def test_group_keying_keeps_colliding_scalars_distinct():
    assignment = assign_primes([["S", "M"], ["M", "G"]], keying="group")

    assert assignment.prime_of("M", 0) == 3
    assert assignment.prime_of("M", 1) == 5
    with pytest.raises(ValueError, match="group index"):
        assignment.prime_of("M")


def test_unknown_keying_rejected():
    with pytest.raises(ValueError, match="Unsupported prime keying"):
        assign_primes([["a"]], keying="flat")


def test_group_index_lists_primes_and_finds_first_group():
    groups = [["S", "M"], ["M", "G"]]
    index = build_group_index(groups, assign_primes(groups))

    assert index.prime_groups == ((2, 3), (5, 7))
    assert index.group_index_of("M") == 0
    assert index.groups_of("M") == (0, 1)
    assert index.group_index_of("G") == 1
    assert index.group_index_of("XL") is None


def test_group_index_with_value_keying_shares_prime():
    groups = [["S", "M"], ["M", "G"]]
    index = build_group_index(groups, assign_primes(groups, keying="value"))

    assert index.prime_groups == ((2, 5), (5, 7))
    assert index.group_index_of("M") == 0


def test_variant_codes_are_prime_products_in_input_order():
    groups = [["Red", "Blue"], ["S", "M"]]
    index = build_group_index(groups, assign_primes(groups))

    variants = build_variant_index([("V1", ["Red", "S"]), ("V2", ["Blue", "M"]), ("V0", [])], index)

    assert [(entry.variant_id, entry.code) for entry in variants] == [("V1", 10), ("V2", 21), ("V0", 1)]
    assert variants.any_divisible_by(7)
    assert not variants.any_divisible_by(2 * 7)


def test_colliding_scalar_binds_to_next_unused_group():
    groups = [["S", "M"], ["M", "G"]]
    index = build_group_index(groups, assign_primes(groups))

    variants = build_variant_index([("a", ["S", "M"]), ("b", ["M", "M"]), ("c", ["M", "G"])], index)

    assert [entry.code for entry in variants] == [2 * 5, 3 * 5, 3 * 7]


def test_unmapped_variant_value_is_configuration_error():
    groups = [["Red", "Blue"], ["S", "M"]]
    index = build_group_index(groups, assign_primes(groups))

    with pytest.raises(CatalogConfigError, match="'Green'"):
        build_variant_index([("V1", ["Red", "S"]), ("V9", ["Green", "S"])], index)


def test_large_catalog_codes_do_not_overflow():
    groups = [[f"g{group}v{value}" for value in range(10)] for group in range(12)]
    index = build_group_index(groups, assign_primes(groups))
    last_values = [values[-1] for values in groups]

    variants = build_variant_index([("big", last_values)], index)

    expected = 1
    for group, values in enumerate(groups):
        expected *= index.prime_of(values[-1], group)
    assert variants.entries[0].code == expected
    assert expected > 2**64


def test_shared_scalar_listed_first_leaves_room_for_single_group_value():
    groups = [["S", "M"], ["M", "G"]]
    index = build_group_index(groups, assign_primes(groups))

    variants = build_variant_index([("x", ["M", "S"]), ("y", ["G", "M"])], index)

    assert [entry.code for entry in variants] == [2 * 5, 3 * 7]


def test_variant_values_that_cannot_share_groups_are_configuration_error():
    groups = [["S", "M"], ["M", "G"]]
    index = build_group_index(groups, assign_primes(groups))

    with pytest.raises(CatalogConfigError, match="cannot place option value 'S'"):
        build_variant_index([("bad", ["S", "S"])], index)
    with pytest.raises(CatalogConfigError, match="cannot place option value 'M'"):
        build_variant_index([("bad", ["S", "G", "M"])], index)


def test_bound_values_use_their_pinned_group():
    groups = [["S", "M"], ["M", "G"]]
    index = build_group_index(groups, assign_primes(groups))

    variants = build_variant_index([("finish-m", [BoundValue(group=1, value="M")])], index)

    assert variants.entries[0].code == 5
    with pytest.raises(CatalogConfigError, match="not in option group 1"):
        build_variant_index([("bad", [BoundValue(group=1, value="S")])], index)


def test_value_keying_multiplies_shared_primes_without_matching():
    groups = [["S", "M"], ["M", "G"]]
    index = build_group_index(groups, assign_primes(groups, keying="value"))

    variants = build_variant_index([("x", ["M", "S"]), ("y", ["M", "G"])], index)

    assert [entry.code for entry in variants] == [5 * 2, 5 * 7]
