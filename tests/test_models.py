"""Tests for listing and search models."""

import dataclasses
from datetime import datetime

import pytest

from hmo_finder.models import (
    PropertyInput,
    PropertyRecord,
    PropertyStats,
    Search,
    SearchFilters,
    SortKey,
)
from hmo_finder.models.property import INPUT_FIELDS


class TestPropertyRecord:
    """Tests for PropertyRecord."""

    def test_create_copies_candidate_fields(self, sample_input: PropertyInput) -> None:
        """Test that every input field is carried over."""
        record = PropertyRecord.create(sample_input)

        for name in INPUT_FIELDS:
            assert getattr(record, name) == getattr(sample_input, name)

    def test_create_assigns_unique_ids(self, sample_input: PropertyInput) -> None:
        """Test that two records from the same candidate get distinct ids."""
        first = PropertyRecord.create(sample_input)
        second = PropertyRecord.create(sample_input)

        assert first.property_id
        assert first.property_id != second.property_id

    def test_create_sets_timestamp(self, sample_input: PropertyInput) -> None:
        """Test creation timestamp default and override."""
        before = datetime.now()
        record = PropertyRecord.create(sample_input)
        assert record.created_at is not None
        assert record.created_at >= before

        fixed = datetime(2024, 5, 1)
        assert PropertyRecord.create(sample_input, created_at=fixed).created_at == fixed

    def test_record_is_frozen(self, sample_input: PropertyInput) -> None:
        """Test that records cannot be mutated in place."""
        record = PropertyRecord.create(sample_input)

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.price = 1  # type: ignore[misc]

    def test_optional_fields_default(self) -> None:
        """Test defaults for optional attributes."""
        candidate = PropertyInput(
            address="1 Test Street",
            postcode="B1 1AA",
            price=250_000,
            size=90,
            bedrooms=3,
            bathrooms=1,
        )

        assert candidate.is_article4 is False
        assert candidate.has_garden is False
        assert candidate.yearly_profit is None
        assert candidate.latitude is None

    def test_input_fields_exclude_server_fields(self) -> None:
        """Test that id and timestamp are not client-settable."""
        assert "property_id" not in INPUT_FIELDS
        assert "created_at" not in INPUT_FIELDS
        assert "price" in INPUT_FIELDS


class TestSearchModels:
    """Tests for search models."""

    def test_filter_defaults(self) -> None:
        """Test that an empty filter constrains nothing."""
        filters = SearchFilters()

        assert filters.query == ""
        assert filters.radius == 10
        assert filters.max_price is None
        assert filters.min_size is None
        assert filters.exclude_article4 is False
        assert filters.sort_by is None

    def test_search_entry(self) -> None:
        """Test search log entry fields."""
        search = Search(
            search_id="s-1",
            query="Leeds",
            radius=5,
            max_price=400_000,
            min_size=100,
            exclude_article4=True,
            sort_by=SortKey.PRICE,
        )

        assert search.sort_by == "price"
        assert search.created_at is None

    def test_stats_fields(self) -> None:
        """Test stats value object."""
        stats = PropertyStats(2, 1, 300_000.0, 110.0)

        assert stats.total_properties == 2
        assert stats.non_article4_properties == 1


class TestSortKey:
    """Tests for SortKey."""

    def test_values(self) -> None:
        assert [key.value for key in SortKey] == ["profit", "price", "size", "recent"]

    def test_from_string(self) -> None:
        assert SortKey("recent") is SortKey.RECENT

    def test_unknown_value(self) -> None:
        with pytest.raises(ValueError):
            SortKey("distance")
