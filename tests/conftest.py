from __future__ import annotations

from decimal import Decimal

import pytest

from digital_menu.data import CATALOG
from digital_menu.models import MenuItem


@pytest.fixture
def catalog() -> tuple[MenuItem, ...]:
    return CATALOG


@pytest.fixture
def burger(catalog) -> MenuItem:
    item = catalog[0]
    assert item.id == 1 and item.price == Decimal("20.90")
    return item


@pytest.fixture
def onion_rings(catalog) -> MenuItem:
    item = catalog[1]
    assert item.id == 2 and item.price == Decimal("16.50")
    return item


@pytest.fixture
def fries(catalog) -> MenuItem:
    return catalog[2]
