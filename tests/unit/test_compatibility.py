from __future__ import annotations

import pytest

from skuselect.config import SelectorConfig
from skuselect.engine import build_catalog
from skuselect.engine.compat import JointRule, PairwiseRule, make_rule


@pytest.fixture
def three_group_catalog_factory():
    groups = [["a1", "a2"], ["b1", "b2"], ["c1", "c2"]]
    variants = [
        {"id": "X", "values": ["a1", "b1", "c2"]},
        {"id": "Z", "values": ["a1", "b2", "c1"]},
        {"id": "W", "values": ["a2", "b1", "c1"]},
    ]

    def factory(compatibility: str):
        return build_catalog(groups, variants, config=SelectorConfig(compatibility=compatibility))

    return factory


def test_all_values_enabled_without_selection(color_size_catalog):
    state = color_size_catalog.new_selection()

    for value in ("Red", "Blue", "S", "M"):
        assert not color_size_catalog.is_disabled(state, value)


def test_example_scenario(color_size_catalog):
    state = color_size_catalog.new_selection()

    color_size_catalog.toggle(state, "Blue")

    assert color_size_catalog.is_disabled(state, "M")
    assert not color_size_catalog.is_disabled(state, "S")
    assert not color_size_catalog.is_disabled(state, "Red")

    color_size_catalog.toggle(state, "S")

    assert color_size_catalog.resolve_variant(state) == "V3"


def test_own_group_never_disables(color_size_catalog):
    state = color_size_catalog.new_selection()
    color_size_catalog.toggle(state, "M")

    assert not color_size_catalog.is_disabled(state, "S")
    assert not color_size_catalog.is_disabled(state, "M")
    assert color_size_catalog.is_disabled(state, "Blue")


def test_decision_names_blocking_group(color_size_catalog):
    state = color_size_catalog.new_selection()
    color_size_catalog.toggle(state, "Blue")

    decision = color_size_catalog.decide(state, "M")

    assert not decision.enabled
    assert decision.blocking_group == 0
    assert "'Blue'" in decision.reason


def test_unknown_value_reported_disabled(color_size_catalog):
    state = color_size_catalog.new_selection()

    assert color_size_catalog.is_disabled(state, "XL")
    assert not color_size_catalog.is_selected(state, "XL")


def test_pairwise_rule_checks_each_group_independently(three_group_catalog_factory):
    catalog = three_group_catalog_factory("pairwise")
    state = catalog.new_selection()
    catalog.toggle(state, "a1")
    catalog.toggle(state, "b1")

    assert not catalog.is_disabled(state, "c1")
    assert not catalog.is_disabled(state, "c2")


def test_joint_rule_requires_one_variant_for_whole_selection(three_group_catalog_factory):
    catalog = three_group_catalog_factory("joint")
    state = catalog.new_selection()
    catalog.toggle(state, "a1")
    catalog.toggle(state, "b1")

    assert catalog.is_disabled(state, "c1")
    assert not catalog.is_disabled(state, "c2")
    assert not catalog.is_disabled(state, "a2")


def test_make_rule_by_name():
    assert isinstance(make_rule("pairwise"), PairwiseRule)
    assert isinstance(make_rule("joint"), JointRule)
    with pytest.raises(ValueError, match="Unknown compatibility rule"):
        make_rule("strict")
