from __future__ import annotations

import pytest

from skuselect.engine import InvalidSelectionError, SelectionState


def test_empty_selection_code_is_identity(color_size_catalog):
    state = color_size_catalog.new_selection()

    assert state.slots == [None, None]
    assert color_size_catalog.selected_code(state) == 1
    assert color_size_catalog.resolve_variant(state) is None


def test_toggle_twice_restores_previous_selection(color_size_catalog):
    state = color_size_catalog.new_selection()
    color_size_catalog.toggle(state, "Red")
    before = list(state.slots)

    color_size_catalog.toggle(state, "M")
    color_size_catalog.toggle(state, "M")

    assert state.slots == before == ["Red", None]


def test_toggle_within_group_replaces_slot(color_size_catalog):
    state = color_size_catalog.new_selection()

    color_size_catalog.toggle(state, "Red")
    affected = color_size_catalog.toggle(state, "Blue")

    assert affected == 0
    assert state.slots == ["Blue", None]
    assert color_size_catalog.is_selected(state, "Blue")
    assert not color_size_catalog.is_selected(state, "Red")


def test_unknown_value_rejected_and_state_unchanged(color_size_catalog):
    state = color_size_catalog.new_selection()
    color_size_catalog.toggle(state, "Blue")
    color_size_catalog.toggle(state, "S")
    before = list(state.slots)

    with pytest.raises(InvalidSelectionError, match="'XL'"):
        color_size_catalog.toggle(state, "XL")

    assert state.slots == before


def test_value_outside_explicit_group_rejected(color_size_catalog):
    state = color_size_catalog.new_selection()

    with pytest.raises(InvalidSelectionError):
        color_size_catalog.toggle(state, "Red", group=1)
    with pytest.raises(InvalidSelectionError):
        color_size_catalog.toggle(state, "Red", group=5)

    assert state.slots == [None, None]


def test_selected_code_multiplies_selected_primes(color_size_catalog):
    state = color_size_catalog.new_selection()
    color_size_catalog.toggle(state, "Blue")
    color_size_catalog.toggle(state, "M")

    assert color_size_catalog.selected_code(state) == 3 * 7
    assert state.is_complete
    assert state.selected_values == ("Blue", "M")


def test_selection_shape_must_match_catalog(color_size_catalog):
    state = SelectionState.empty(3)

    with pytest.raises(ValueError, match="3 slots"):
        color_size_catalog.toggle(state, "Red")


def test_copy_and_clear_are_independent():
    state = SelectionState(slots=["Red", "S"])
    copied = state.copy()

    state.clear()

    assert state.slots == [None, None]
    assert copied.slots == ["Red", "S"]


def test_slots_compare_values_by_equality():
    state = SelectionState(slots=[1, None])

    assert state.is_selected(1.0, 0)
    assert state.is_selected(True, 0)
