from __future__ import annotations

import pytest

from skuselect.engine import build_catalog


@pytest.fixture
def color_size_groups():
    return [
        {"name": "Color", "values": ["Red", "Blue"]},
        {"name": "Size", "values": ["S", "M"]},
    ]


@pytest.fixture
def color_size_variants():
    return [
        {"id": "V1", "values": ["Red", "S"]},
        {"id": "V2", "values": ["Red", "M"]},
        {"id": "V3", "values": ["Blue", "S"]},
    ]


@pytest.fixture
def color_size_catalog(color_size_groups, color_size_variants):
    return build_catalog(color_size_groups, color_size_variants)
