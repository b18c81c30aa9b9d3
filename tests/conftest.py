"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta
from typing import Callable

import pytest

from hmo_finder.models.property import PropertyInput, PropertyRecord
from hmo_finder.store.memory import PropertyStore


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_input() -> PropertyInput:
    """Sample candidate listing."""
    return PropertyInput(
        address="45 Soho Road, Handsworth, Birmingham",
        postcode="B21 9DT",
        price=450_000,
        size=120,
        bedrooms=5,
        bathrooms=2,
        latitude=52.5105,
        longitude=-1.9026,
        description="Large Victorian terrace with HMO potential.",
        has_garden=True,
        has_parking=True,
        yearly_profit=32_400,
        left_in_deal=12_600,
    )


@pytest.fixture
def make_record() -> Callable[..., PropertyRecord]:
    """Factory for stored listings with sequential ids and timestamps."""
    counter = iter(range(1, 10_000))
    base = datetime(2024, 1, 1, 12, 0, 0)

    def _make(**overrides: object) -> PropertyRecord:
        n = next(counter)
        values: dict[str, object] = {
            "property_id": f"prop-{n:03d}",
            "address": f"{n} Test Street, Birmingham",
            "postcode": "B1 1AA",
            "price": 300_000,
            "size": 100,
            "bedrooms": 4,
            "bathrooms": 2,
            "yearly_profit": 20_000,
            "created_at": base + timedelta(minutes=n),
        }
        values.update(overrides)
        return PropertyRecord(**values)

    return _make


@pytest.fixture
def store() -> PropertyStore:
    """Create a fresh store for each test."""
    return PropertyStore()
